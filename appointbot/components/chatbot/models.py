"""
Chatbot component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class CommandInput:
    """Input for validating a command."""

    command: str


@dataclass(frozen=True)
class MessageInput:
    """Input for cleaning a message."""

    message: str


@dataclass(frozen=True)
class PhoneInput:
    """Input for checking a phone number."""

    number: str


@dataclass(frozen=True)
class UrlInput:
    """Input for extracting URLs from a reply."""

    user_input: str


@dataclass(frozen=True)
class GreetingInput:
    """Input for greeting a user by full name."""

    full_name: str


# --- Output Models ---


@dataclass(frozen=True)
class CommandOutput:
    """Output for command validation."""

    valid: bool


@dataclass(frozen=True)
class MessageOutput:
    """Output containing the cleaned message."""

    message: str


@dataclass(frozen=True)
class PhoneOutput:
    """Output for phone check."""

    accepted: bool
    response: str


@dataclass(frozen=True)
class UrlOutput:
    """Output for URL extraction. urls is None when nothing matched."""

    urls: tuple[str, ...] | None

    @property
    def found(self) -> bool:
        return self.urls is not None


@dataclass(frozen=True)
class GreetingOutput:
    """Output containing the greeting."""

    greeting: str
