"""Clock abstraction.

Every expiration and availability decision takes "now" from an injected
clock so tests can move time deterministically.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
