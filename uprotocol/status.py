from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from google.rpc import code_pb2

# What protobuf runtimes report for an enum value missing from the schema
EXTERNAL_UNRECOGNIZED = -1


class StatusCode(IntEnum):
    """
    Canonical outcome codes. Values match google.rpc.Code one for one;
    UNSPECIFIED is local only and has no external counterpart.
    """
    OK                  = 0
    CANCELLED           = 1
    UNKNOWN             = 2
    INVALID_ARGUMENT    = 3
    DEADLINE_EXCEEDED   = 4
    NOT_FOUND           = 5
    ALREADY_EXISTS      = 6
    PERMISSION_DENIED   = 7
    RESOURCE_EXHAUSTED  = 8
    FAILED_PRECONDITION = 9
    ABORTED             = 10
    OUT_OF_RANGE        = 11
    UNIMPLEMENTED       = 12
    INTERNAL            = 13
    UNAVAILABLE         = 14
    DATA_LOSS           = 15
    UNAUTHENTICATED     = 16
    UNSPECIFIED         = -1

    @classmethod
    def from_local(cls, value: int) -> Optional["StatusCode"]:
        """Code for a local integer value, None if there is no such code."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_external(cls, code: Optional[int]) -> Optional["StatusCode"]:
        """Code for a google.rpc.Code value, None for None or unrecognized values."""
        if code is None or code == EXTERNAL_UNRECOGNIZED:
            return None
        try:
            name = code_pb2.Code.Name(int(code))
        except (ValueError, TypeError):
            return None
        return cls.__members__.get(name)

    def to_external(self) -> Optional[int]:
        """google.rpc.Code value with the same meaning, None for UNSPECIFIED."""
        try:
            return code_pb2.Code.Value(self.name)
        except ValueError:
            return None


DEFAULT_FAILURE = StatusCode.UNKNOWN


@dataclass(frozen=True)
class Status:
    """
    Outcome of a transport operation. Equality is over (code, message).
    On success the message slot carries the ack id.

        Status.ok()                  -> ok id=ok code=0
        Status.failed("boom", 3)     -> failed msg=boom code=3
    """
    code: StatusCode
    message: str

    def __post_init__(self):
        # plain ints resolve to a known code, anything unrecognized is UNKNOWN
        if not isinstance(self.code, StatusCode):
            resolved = StatusCode.from_local(self.code)
            object.__setattr__(self, "code", DEFAULT_FAILURE if resolved is None else resolved)
        if self.message is None:
            object.__setattr__(self, "message", "ok" if self.is_success() else "failed")

    @classmethod
    def ok(cls, ack_id: Optional[str] = "ok") -> "Status":
        return cls(StatusCode.OK, ack_id)

    @classmethod
    def failed(cls, message: Optional[str] = "failed",
               code: Union[StatusCode, int] = DEFAULT_FAILURE) -> "Status":
        return cls(code, message)

    def is_success(self) -> bool:
        return self.code == StatusCode.OK

    def is_failed(self) -> bool:
        return not self.is_success()

    def get_code(self) -> int:
        return int(self.code)

    def msg(self) -> str:
        return self.message

    @property
    def ack_id(self) -> Optional[str]:
        return self.message if self.is_success() else None

    def __str__(self) -> str:
        if self.is_success():
            return f"ok id={self.message} code={self.get_code()}"
        return f"failed msg={self.message} code={self.get_code()}"
