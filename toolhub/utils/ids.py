"""
Time-ordered identifier generation.

Produces version 7 UUIDs: a 48-bit Unix timestamp in milliseconds, a 12-bit
sequence that keeps identifiers from one process increasing within the same
millisecond, and 62 random bits.
"""

import os
import threading
import time
import uuid

_lock = threading.Lock()
_last_ms = 0
_sequence = 0

_SEQUENCE_MAX = 0xFFF


def _next_timestamp_and_sequence():
    global _last_ms, _sequence

    with _lock:
        now_ms = time.time_ns() // 1_000_000
        if now_ms > _last_ms:
            _last_ms = now_ms
            _sequence = int.from_bytes(os.urandom(2), "big") & 0x7FF
        elif _sequence < _SEQUENCE_MAX:
            # Same millisecond, or the clock stepped back
            _sequence += 1
        else:
            # Sequence exhausted: borrow the next millisecond
            _last_ms += 1
            _sequence = 0
        return _last_ms, _sequence


def uuid7() -> uuid.UUID:
    """Return a new version 7 UUID."""
    timestamp_ms, sequence = _next_timestamp_and_sequence()
    random_bits = int.from_bytes(os.urandom(8), "big") & ((1 << 62) - 1)

    value = (timestamp_ms & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= sequence << 64
    value |= 0b10 << 62
    value |= random_bits
    return uuid.UUID(int=value)


def uuid7_timestamp_ms(value: uuid.UUID) -> int:
    """Extract the millisecond timestamp embedded in a version 7 UUID."""
    return value.int >> 80
