from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appointbot.components.chatbot._impl import (
    DEFAULT_COMMAND_PREFIX,
    GREETING,
    PHONE_ACCEPTED,
    PHONE_REJECTED,
)


class AppointmentRules(BaseModel):
    timezone: str | None = None
    strict_bounds: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone {value!r}") from e
        return value


class ChatbotRules(BaseModel):
    command_prefix: str = Field(default=DEFAULT_COMMAND_PREFIX, min_length=1)
    phone_accepted: str = PHONE_ACCEPTED
    phone_rejected: str = PHONE_REJECTED
    greeting: str = GREETING

    model_config = ConfigDict(extra="forbid")


class Rules(BaseModel):
    appointments: AppointmentRules = Field(default_factory=AppointmentRules)
    chatbot: ChatbotRules = Field(default_factory=ChatbotRules)

    model_config = ConfigDict(extra="forbid")
