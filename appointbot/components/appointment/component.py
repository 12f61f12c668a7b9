"""
Appointment component - appointment scheduling helpers.

Shell layer over the pure core: builds configuration from the rules port,
calls the core, and converts raised errors into tagged outputs.

Invariants:
- I1: create_appointment(0, T) == T
- I2: Timestamps round-trip at millisecond precision
- I3: time_between is symmetric and zero for equal inputs
- I4: is_valid is strict (equal instants are not valid)
- I5: Unparseable timestamps yield success=False, never a raised error
"""

from __future__ import annotations

import logging
from datetime import tzinfo

from ._impl import (
    AppointmentConfig,
    AppointmentError,
    AppointmentRangeError,
    InvalidUpdateError,
    TimestampParseError,
    create_appointment,
    get_appointment_details,
    get_appointment_timestamp,
    is_valid,
    resolve_zone,
    time_between,
    update_appointment,
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

logger = logging.getLogger(__name__)

AppointmentInput = (
    CreateAppointmentInput
    | GetTimestampInput
    | GetDetailsInput
    | UpdateAppointmentInput
    | TimeBetweenInput
    | IsValidInput
)


def _build_config(rules: RulesPort | None) -> AppointmentConfig:
    """Build appointment config from rules port."""
    if rules is None:
        return AppointmentConfig()

    return AppointmentConfig(
        timezone=rules.get_timezone(),
        strict_bounds=rules.strict_bounds_enabled(),
    )


def _zone(config: AppointmentConfig) -> tzinfo | None:
    return resolve_zone(config.timezone)


def _convert_error(error: AppointmentError) -> AppointmentValidationError:
    """Convert a core error to a component error."""
    if isinstance(error, TimestampParseError):
        return AppointmentValidationError(code="invalid_timestamp", message=str(error))
    if isinstance(error, InvalidUpdateError):
        return AppointmentValidationError(
            code="invalid_update",
            message=str(error),
            field=error.field,
        )
    if isinstance(error, AppointmentRangeError):
        return AppointmentValidationError(code="out_of_range", message=str(error))
    return AppointmentValidationError(code="invalid", message=str(error))


# --- Component Entry Points ---


def run_create(
    inp: CreateAppointmentInput,
    *,
    clock: ClockPort | None = None,
    rules: RulesPort | None = None,
) -> AppointmentOutput:
    """
    Create an appointment a number of days from now.

    Args:
        inp: Input containing the day offset and optional base instant.
        clock: Optional clock port, read when inp.now is omitted.
        rules: Optional rules port for configuration.

    Returns:
        AppointmentOutput with the appointment and its timestamp, or errors.
    """
    try:
        appointment = create_appointment(inp.days, inp.now, clock=clock)
    except AppointmentError as e:
        logger.warning(f"Rejected appointment offset {inp.days}: {e}")
        return AppointmentOutput(
            appointment=None,
            timestamp=None,
            errors=[_convert_error(e)],
            success=False,
        )

    return AppointmentOutput(
        appointment=appointment,
        timestamp=get_appointment_timestamp(appointment),
    )


def run_timestamp(
    inp: GetTimestampInput,
    *,
    rules: RulesPort | None = None,
) -> TimestampOutput:
    """Serialize an appointment to its UTC timestamp."""
    return TimestampOutput(timestamp=get_appointment_timestamp(inp.appointment))


def run_details(
    inp: GetDetailsInput,
    *,
    rules: RulesPort | None = None,
) -> DetailsOutput:
    """
    Get local calendar components of a timestamp.

    Args:
        inp: Input containing the timestamp.
        rules: Optional rules port for configuration.

    Returns:
        DetailsOutput with the details record or errors.
    """
    config = _build_config(rules)

    try:
        details = get_appointment_details(inp.timestamp, _zone(config))
    except AppointmentError as e:
        logger.warning(f"Rejected timestamp {inp.timestamp!r}: {e}")
        return DetailsOutput(details=None, errors=[_convert_error(e)], success=False)

    return DetailsOutput(details=details)


def run_update(
    inp: UpdateAppointmentInput,
    *,
    rules: RulesPort | None = None,
) -> DetailsOutput:
    """
    Update components of a timestamp.

    Args:
        inp: Input containing the timestamp and component overrides.
        rules: Optional rules port for configuration.

    Returns:
        DetailsOutput with the updated details record or errors.
    """
    config = _build_config(rules)

    try:
        details = update_appointment(
            inp.timestamp,
            inp.options,
            _zone(config),
            strict_bounds=config.strict_bounds,
        )
    except AppointmentError as e:
        logger.warning(f"Rejected update of {inp.timestamp!r}: {e}")
        return DetailsOutput(details=None, errors=[_convert_error(e)], success=False)

    return DetailsOutput(details=details)


def run_time_between(
    inp: TimeBetweenInput,
    *,
    rules: RulesPort | None = None,
) -> TimeBetweenOutput:
    """Get whole seconds between two timestamps."""
    config = _build_config(rules)

    try:
        seconds = time_between(inp.timestamp_a, inp.timestamp_b, _zone(config))
    except AppointmentError as e:
        logger.warning(f"Rejected time between: {e}")
        return TimeBetweenOutput(seconds=None, errors=[_convert_error(e)], success=False)

    return TimeBetweenOutput(seconds=seconds)


def run_is_valid(
    inp: IsValidInput,
    *,
    rules: RulesPort | None = None,
) -> IsValidOutput:
    """Check whether an appointment is later than the current time."""
    config = _build_config(rules)

    try:
        valid = is_valid(inp.appointment_timestamp, inp.current_timestamp, _zone(config))
    except AppointmentError as e:
        logger.warning(f"Rejected validity check: {e}")
        return IsValidOutput(valid=False, errors=[_convert_error(e)], success=False)

    return IsValidOutput(valid=valid)


def run(
    inp: AppointmentInput,
    *,
    clock: ClockPort | None = None,
    rules: RulesPort | None = None,
) -> (
    AppointmentOutput | TimestampOutput | DetailsOutput | TimeBetweenOutput | IsValidOutput
):
    """
    Main entry point for the appointment component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, CreateAppointmentInput):
        return run_create(inp, clock=clock, rules=rules)
    elif isinstance(inp, GetTimestampInput):
        return run_timestamp(inp, rules=rules)
    elif isinstance(inp, GetDetailsInput):
        return run_details(inp, rules=rules)
    elif isinstance(inp, UpdateAppointmentInput):
        return run_update(inp, rules=rules)
    elif isinstance(inp, TimeBetweenInput):
        return run_time_between(inp, rules=rules)
    elif isinstance(inp, IsValidInput):
        return run_is_valid(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
