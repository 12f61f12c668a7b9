"""
Chatbot component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for chatbot rules configuration."""

    def get_command_prefix(self) -> str:
        """Get the prefix valid commands start with."""
        ...

    def get_phone_accepted(self) -> str:
        """Get the response for an accepted phone number."""
        ...

    def get_phone_rejected(self) -> str:
        """Get the response prefix for a rejected phone number."""
        ...

    def get_greeting(self) -> str:
        """Get the greeting prefix."""
        ...
