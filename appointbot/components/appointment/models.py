"""
Appointment component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from ._impl import AppointmentDetails

# --- Validation Error ---


@dataclass(frozen=True)
class AppointmentValidationError:
    """Appointment validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateAppointmentInput:
    """Input for creating an appointment a number of days from now."""

    days: int
    now: datetime | int | None = None


@dataclass(frozen=True)
class GetTimestampInput:
    """Input for serializing an appointment."""

    appointment: datetime


@dataclass(frozen=True)
class GetDetailsInput:
    """Input for decomposing a timestamp."""

    timestamp: str


@dataclass(frozen=True)
class UpdateAppointmentInput:
    """Input for updating components of a timestamp."""

    timestamp: str
    options: Mapping[str, int]


@dataclass(frozen=True)
class TimeBetweenInput:
    """Input for measuring time between two timestamps."""

    timestamp_a: str
    timestamp_b: str


@dataclass(frozen=True)
class IsValidInput:
    """Input for checking an appointment is in the future."""

    appointment_timestamp: str
    current_timestamp: str


# --- Output Models ---


@dataclass(frozen=True)
class AppointmentOutput:
    """Output for appointment creation."""

    appointment: datetime | None
    timestamp: str | None
    errors: list[AppointmentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TimestampOutput:
    """Output containing a serialized timestamp."""

    timestamp: str


@dataclass(frozen=True)
class DetailsOutput:
    """Output for details and update operations."""

    details: AppointmentDetails | None
    errors: list[AppointmentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class TimeBetweenOutput:
    """Output for time between operation."""

    seconds: int | None
    errors: list[AppointmentValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class IsValidOutput:
    """Output for validity check."""

    valid: bool
    errors: list[AppointmentValidationError] = field(default_factory=list)
    success: bool = True
