from __future__ import annotations
from typing import Callable, Optional
import logging
import uuid

from .ids import create_id
from .message import Attributes, MessageKind, Priority, Uri

logger = logging.getLogger(__name__)

IdFactory = Callable[[], uuid.UUID]


class AttributesBuilder:
    """
    Builder for the Attributes of one outbound message. Start from one of the
    factories, which fix id/kind/priority and the fields the kind requires:

        publish(priority)                   PUBLISH
        notification(priority, sink)        PUBLISH with a sink
        request(priority, sink, ttl)        REQUEST
        response(priority, sink, req_id)    RESPONSE

    then chain with_* overlays and call build(). Passing None to an overlay
    clears it. build() can be called again and re-reads the current state.
    A builder is not meant to be shared between threads.
    """

    def __init__(self, id: uuid.UUID, kind: MessageKind, priority: Priority):
        self._id = id
        self._kind = kind
        self._priority = priority

        self._ttl: Optional[int] = None
        self._token: Optional[str] = None
        self._sink: Optional[Uri] = None
        self._permission_level: Optional[int] = None
        self._comm_status: Optional[int] = None
        self._req_id: Optional[uuid.UUID] = None

    # Factories
    @classmethod
    def publish(cls, priority: Priority, *, id_factory: IdFactory = create_id):
        _require(priority=priority)
        return cls(id_factory(), MessageKind.PUBLISH, priority)

    @classmethod
    def notification(cls, priority: Priority, sink: Uri, *, id_factory: IdFactory = create_id):
        # Notifications share the PUBLISH kind; the sink is what tells them apart
        _require(priority=priority, sink=sink)
        return cls(id_factory(), MessageKind.PUBLISH, priority).with_sink(sink)

    @classmethod
    def request(cls, priority: Priority, sink: Uri, ttl: int, *, id_factory: IdFactory = create_id):
        _require(priority=priority, sink=sink, ttl=ttl)
        if ttl < 0:
            raise ValueError(f"request ttl must be >= 0, got {ttl}")
        return cls(id_factory(), MessageKind.REQUEST, priority).with_ttl(ttl).with_sink(sink)

    @classmethod
    def response(cls, priority: Priority, sink: Uri, req_id: uuid.UUID, *, id_factory: IdFactory = create_id):
        _require(priority=priority, sink=sink, req_id=req_id)
        return cls(id_factory(), MessageKind.RESPONSE, priority).with_sink(sink).with_req_id(req_id)

    # Overlays
    def with_ttl(self, ttl: Optional[int]):
        self._ttl = ttl
        return self

    def with_token(self, token: Optional[str]):
        self._token = token
        return self

    def with_sink(self, sink: Optional[Uri]):
        self._sink = sink
        return self

    def with_permission_level(self, level: Optional[int]):
        self._permission_level = level
        return self

    def with_comm_status(self, comm_status: Optional[int]):
        self._comm_status = comm_status
        return self

    def with_req_id(self, req_id: Optional[uuid.UUID]):
        self._req_id = req_id
        return self

    # Finalize
    def build(self) -> Attributes:
        attrs = Attributes(
            id=self._id,
            kind=self._kind,
            priority=self._priority,
            ttl=self._ttl,
            token=self._token,
            sink=self._sink,
            permission_level=self._permission_level,
            comm_status=self._comm_status,
            req_id=self._req_id,
        )
        logger.debug("built %s attributes id=%s sink=%s", attrs.kind, attrs.id, attrs.sink)
        return attrs


def _require(**fields) -> None:
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise ValueError("missing required attribute(s): " + ", ".join(missing))
