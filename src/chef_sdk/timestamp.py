"""
Timestamp source for signed requests

The server rejects requests whose X-Ops-Timestamp drifts too far from its own
clock. Timestamps are formatted as ISO-8601 UTC with seconds precision and may
be cached for a short session interval so that a burst of requests shares one
value.
"""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(dt: Optional[datetime] = None) -> str:
    """
    Format a datetime in the X-Ops-Timestamp wire format.

    Args:
        dt: Datetime to format (current UTC time if None). Naive datetimes
            are taken to be UTC.

    Returns:
        str: Timestamp such as "2026-10-19T12:00:00Z"
    """
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class TimestampProvider:
    """
    Memoizing timestamp source.

    Calling the provider returns the cached timestamp until ``interval_seconds``
    have passed on the monotonic clock, then formats a fresh one.
    """

    def __init__(
        self,
        interval_seconds: float = 1,
        clock: Optional[Callable[[], datetime]] = None,
        monotonic: Callable[[], float] = time.monotonic
    ):
        self.interval_seconds = interval_seconds
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._monotonic = monotonic
        self._lock = threading.Lock()
        self._cached: Optional[str] = None
        self._expires_at = 0.0

    def __call__(self) -> str:
        with self._lock:
            now = self._monotonic()
            if self._cached is None or self.interval_seconds <= 0 or now >= self._expires_at:
                self._cached = format_timestamp(self._clock())
                self._expires_at = now + self.interval_seconds
                logger.debug(f"Refreshed request timestamp: {self._cached}")
            return self._cached

    def invalidate(self) -> None:
        """Force the next call to produce a fresh timestamp."""
        with self._lock:
            self._cached = None
