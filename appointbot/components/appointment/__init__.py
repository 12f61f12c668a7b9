"""
Appointment component - appointment scheduling helpers.
"""

from ._impl import (
    DETAIL_FIELDS,
    AppointmentConfig,
    AppointmentDetails,
    AppointmentError,
    AppointmentRangeError,
    InvalidUpdateError,
    TimestampParseError,
    create_appointment,
    decompose,
    from_epoch_ms,
    get_appointment_details,
    get_appointment_timestamp,
    is_valid,
    parse_timestamp,
    resolve_zone,
    time_between,
    to_epoch_ms,
    update_appointment,
)
from .component import (
    run,
    run_create,
    run_details,
    run_is_valid,
    run_time_between,
    run_timestamp,
    run_update,
)
from .models import (
    AppointmentOutput,
    AppointmentValidationError,
    CreateAppointmentInput,
    DetailsOutput,
    GetDetailsInput,
    GetTimestampInput,
    IsValidInput,
    IsValidOutput,
    TimeBetweenInput,
    TimeBetweenOutput,
    TimestampOutput,
    UpdateAppointmentInput,
)
from .ports import ClockPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_details",
    "run_is_valid",
    "run_time_between",
    "run_timestamp",
    "run_update",
    # Input models
    "CreateAppointmentInput",
    "GetDetailsInput",
    "GetTimestampInput",
    "IsValidInput",
    "TimeBetweenInput",
    "UpdateAppointmentInput",
    # Output models
    "AppointmentDetails",
    "AppointmentOutput",
    "AppointmentValidationError",
    "DetailsOutput",
    "IsValidOutput",
    "TimeBetweenOutput",
    "TimestampOutput",
    # Ports
    "ClockPort",
    "RulesPort",
    # Core
    "DETAIL_FIELDS",
    "AppointmentConfig",
    "AppointmentError",
    "AppointmentRangeError",
    "InvalidUpdateError",
    "TimestampParseError",
    "create_appointment",
    "decompose",
    "from_epoch_ms",
    "get_appointment_details",
    "get_appointment_timestamp",
    "is_valid",
    "parse_timestamp",
    "resolve_zone",
    "time_between",
    "to_epoch_ms",
    "update_appointment",
]
