"""
Appointment component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from appointbot.ports.clock import ClockPort

__all__ = ["ClockPort", "RulesPort"]


class RulesPort(Protocol):
    """Port for appointment rules configuration."""

    def get_timezone(self) -> str | None:
        """Get IANA zone name for local components (None = host local)."""
        ...

    def strict_bounds_enabled(self) -> bool:
        """Check if update values are bounds-checked."""
        ...
