from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional

TIMEOUT_DEFAULT = 10_000    # ms


@dataclass(frozen=True)
class CallOptions:
    """
    Per-call RPC settings. The timeout is a hint for the RPC layer, it is not
    enforced here. Build through CallOptions.new_builder(); construction clamps
    non-positive timeouts to TIMEOUT_DEFAULT and turns blank tokens into None.
    """
    timeout: int = TIMEOUT_DEFAULT
    token: Optional[str] = None

    DEFAULT: ClassVar["CallOptions"]

    def __post_init__(self):
        timeout = self.timeout if self.timeout is not None and self.timeout > 0 else TIMEOUT_DEFAULT
        token = self.token.strip() if self.token is not None else ""
        object.__setattr__(self, "timeout", timeout)
        object.__setattr__(self, "token", token or None)

    @staticmethod
    def new_builder() -> "CallOptionsBuilder":
        return CallOptionsBuilder()


class CallOptionsBuilder:

    def __init__(self):
        self._timeout: Optional[int] = TIMEOUT_DEFAULT
        self._token: Optional[str] = None

    def with_timeout(self, timeout: Optional[int]):
        self._timeout = timeout
        return self

    def with_token(self, token: Optional[str]):
        self._token = token
        return self

    def build(self) -> CallOptions:
        return CallOptions(timeout=self._timeout, token=self._token)


CallOptions.DEFAULT = CallOptions.new_builder().build()
