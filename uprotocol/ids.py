"""
Time-ordered unique message ids.

Ids are UUIDv8 values with the layout

    | 48 bits unix time (ms) | 4 bits version (8) | 12 bits counter |
    | 2 bits variant (10)    | 62 bits random, fixed per factory     |

so that ids sort by creation time. The counter breaks ties between ids made
in the same millisecond; if it runs out the timestamp is bumped by one ms.
"""

from __future__ import annotations
from typing import Optional
import logging
import secrets
import threading
import time
import uuid

logger = logging.getLogger(__name__)

_VERSION = 8
_MAX_COUNTER = 0xFFF
_RANDOM_MASK = (1 << 62) - 1
_VARIANT = 0b10 << 62


class UuidFactory:

    def __init__(self, clock=None):
        # clock: callable returning unix time in ms (tests pass a fake one)
        self._clock = clock or _now_ms
        self._random = secrets.randbits(62) & _RANDOM_MASK
        self._last_ms = -1
        self._counter = 0
        self._lock = threading.Lock()

    def create(self) -> uuid.UUID:
        with self._lock:
            now = self._clock()
            if now > self._last_ms:
                self._last_ms = now
                self._counter = 0
            elif self._counter < _MAX_COUNTER:
                self._counter += 1
            else:
                # counter exhausted (or clock went backwards): move time forward
                self._last_ms += 1
                self._counter = 0
            msb = (self._last_ms << 16) | (_VERSION << 12) | self._counter
            lsb = _VARIANT | self._random
        value = uuid.UUID(int=(msb << 64) | lsb)
        logger.debug("created id %s", value)
        return value


def get_time(value: uuid.UUID) -> Optional[int]:
    """Creation time in unix ms, or None if the id is not a v8 id."""
    if value is None or value.version != _VERSION:
        return None
    return value.int >> 80


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


_default = UuidFactory()

def create_id() -> uuid.UUID:
    return _default.create()
