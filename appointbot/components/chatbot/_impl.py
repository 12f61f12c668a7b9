"""
Chatbot text utilities - pure pattern matching over user messages.

Key behaviors:
- Commands must start with the command prefix (case-insensitive)
- Emoji placeholders ("emoji", digits, one whitespace) become one space
- Phone numbers are checked against a fixed grouping pattern
- Domain-like substrings are extracted left to right
- "Surname, Given" is rewritten as "Given Surname" inside a greeting
"""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_COMMAND_PREFIX = "chatbot"
PHONE_ACCEPTED = "Thanks! You can now download me to your phone."
PHONE_REJECTED = "Oops, it seems like I can't reach out to "
GREETING = "Nice to meet you, "

EMOJI_PATTERN = re.compile(r"emoji[0-9]*\s", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"\W\W\d{2}\W\s\d{3}\W\d{3}\W\d{3}", re.ASCII)
URL_PATTERN = re.compile(r"\b[a-z]+\.[a-z]{2,6}\b", re.ASCII)
NAME_PATTERN = re.compile(r"(\w+),\s(\w+)", re.ASCII)


# --- Configuration ---


@dataclass(frozen=True)
class ChatbotConfig:
    """Chatbot configuration from rules."""

    command_prefix: str = DEFAULT_COMMAND_PREFIX
    phone_accepted: str = PHONE_ACCEPTED
    phone_rejected: str = PHONE_REJECTED
    greeting: str = GREETING


DEFAULT_CONFIG = ChatbotConfig()


# --- Text Functions ---


def is_valid_command(command: str, prefix: str = DEFAULT_COMMAND_PREFIX) -> bool:
    """Check that a command starts with the prefix, ignoring case."""
    return re.match(re.escape(prefix), command, re.IGNORECASE) is not None


def remove_emoji(message: str) -> str:
    """Replace every emoji placeholder token and its trailing whitespace with a space."""
    return EMOJI_PATTERN.sub(" ", message)


def is_phone_number(number: str) -> bool:
    return PHONE_PATTERN.search(number) is not None


def check_phone_number(
    number: str,
    accepted: str = PHONE_ACCEPTED,
    rejected: str = PHONE_REJECTED,
) -> str:
    """
    Respond to a phone number.

    The number must contain two non-word characters, two digits, a non-word
    character and whitespace, then three groups of three digits separated
    by non-word characters, e.g. "(+34) 659-771-594".

    Returns:
        The accepted message, or the rejected message followed by the number
    """
    return phone_response(number, accepted, rejected)[1]


def phone_response(
    number: str,
    accepted: str = PHONE_ACCEPTED,
    rejected: str = PHONE_REJECTED,
) -> tuple[bool, str]:
    """Match the number once and return (accepted, response)."""
    if is_phone_number(number):
        return True, accepted
    return False, rejected + number


def get_url(user_input: str) -> list[str] | None:
    """
    Extract domain-like substrings such as "example.com".

    Returns:
        Matches in order of appearance, or None when there are none
    """
    matches = URL_PATTERN.findall(user_input)
    return matches or None


def rewrite_name(full_name: str) -> str:
    """Rewrite the first "Surname, Given" pair as "Given Surname"."""
    return NAME_PATTERN.sub(r"\2 \1", full_name, count=1)


def nice_to_meet_you(full_name: str, greeting: str = GREETING) -> str:
    """Greet the user by the name from their profile."""
    return f"{greeting}{rewrite_name(full_name)}"
