"""Id and timestamp helpers."""
from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone
from typing import Container

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_SUFFIX_LEN = 6


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def new_id(taken: Container[str] = ()) -> str:
    """Millisecond timestamp in base 36 followed by a random suffix.

    ``taken`` holds ids already used in the target collection; a colliding
    draw is discarded so ids are never reused.
    """
    while True:
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LEN))
        candidate = _base36(time.time_ns() // 1_000_000) + suffix
        if candidate not in taken:
            return candidate


def utc_now() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
