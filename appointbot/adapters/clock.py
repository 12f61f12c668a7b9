"""
Clock adapters.

SystemClock reads the real time. FrozenClock returns a fixed instant and is
useful for deterministic testing.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that returns a fixed UTC time."""

    def __init__(self, frozen_utc: datetime) -> None:
        """
        Initialize with frozen time.

        Args:
            frozen_utc: The time to return from now_utc(). Naive values are
                treated as UTC.
        """
        if frozen_utc.tzinfo is None:
            frozen_utc = frozen_utc.replace(tzinfo=UTC)
        self._frozen_utc = frozen_utc.astimezone(UTC)

    def now_utc(self) -> datetime:
        """Get frozen UTC time."""
        return self._frozen_utc

    def advance(self, delta: timedelta) -> None:
        """Advance frozen time by delta."""
        self._frozen_utc = self._frozen_utc + delta
