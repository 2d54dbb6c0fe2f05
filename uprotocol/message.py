from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from enum import IntEnum, StrEnum
import time
import uuid

from .ids import get_time

# Structural role of a message
class MessageKind(StrEnum):
    PUBLISH       = "PUBLISH"
    NOTIFICATION  = "NOTIFICATION"   # never emitted by the builder, notifications are PUBLISH + sink
    REQUEST       = "REQUEST"
    RESPONSE      = "RESPONSE"

# Transport priority classes, higher value = higher priority
class Priority(IntEnum):
    UNSPECIFIED = 0
    CS0 = 1
    CS1 = 2
    CS2 = 3
    CS3 = 4
    CS4 = 5
    CS5 = 6
    CS6 = 7

@dataclass(frozen=True)
class Entity:
    name: str
    version: Optional[int] = None
    id: Optional[int] = None

@dataclass(frozen=True)
class Uri:
    """
    Resolved address: topic for publish, method or reply address for RPC.
    Rendered as [//authority]/entity[/version]/resource
    """
    entity: Entity
    resource: str = ""
    authority: Optional[str] = None

    def __str__(self) -> str:
        parts = []
        if self.authority:
            parts.append(f"//{self.authority}")
        parts.append(f"/{self.entity.name}")
        if self.entity.version is not None:
            parts.append(f"/{self.entity.version}")
        if self.resource:
            parts.append(f"/{self.resource}")
        return "".join(parts)

@dataclass(frozen=True)
class Payload:
    data: bytes = b""
    format: str = "raw"     # e.g. "protobuf", "json", "raw"

@dataclass(frozen=True)
class Attributes:
    """
    Envelope fields that accompany a payload. Optional fields left as None
    are absent, which is not the same thing as zero or empty.
    """
    id: uuid.UUID                            # time-ordered unique message id
    kind: MessageKind                        # PUBLISH | REQUEST | RESPONSE
    priority: Priority
    ttl: Optional[int] = None                # ms until the message expires
    token: Optional[str] = None              # opaque authorization token
    sink: Optional[Uri] = None               # destination address
    permission_level: Optional[int] = None
    comm_status: Optional[int] = None        # set by intermediaries only
    req_id: Optional[uuid.UUID] = None       # id of the request a response answers

    def is_publish(self) -> bool:
        return self.kind == MessageKind.PUBLISH

    def is_request(self) -> bool:
        return self.kind == MessageKind.REQUEST

    def is_response(self) -> bool:
        return self.kind == MessageKind.RESPONSE

    def is_expired(self, now_ms: Optional[int] = None) -> bool:
        """True once ttl milliseconds have passed since the id was created.
        Messages without a ttl (or ttl 0) never expire."""
        if not self.ttl or self.ttl <= 0:
            return False
        created = get_time(self.id)
        if created is None:
            return False
        if now_ms is None:
            now_ms = time.time_ns() // 1_000_000
        return now_ms - created >= self.ttl
