"""
Adapters exposing loaded rules through the component rules ports.
"""

from __future__ import annotations

from appointbot.rules.models import AppointmentRules, ChatbotRules, Rules


class AppointmentRulesAdapter:
    """Implements the appointment RulesPort."""

    def __init__(self, rules: AppointmentRules) -> None:
        self._rules = rules

    @classmethod
    def from_rules(cls, rules: Rules) -> AppointmentRulesAdapter:
        return cls(rules.appointments)

    def get_timezone(self) -> str | None:
        return self._rules.timezone

    def strict_bounds_enabled(self) -> bool:
        return self._rules.strict_bounds


class ChatbotRulesAdapter:
    """Implements the chatbot RulesPort."""

    def __init__(self, rules: ChatbotRules) -> None:
        self._rules = rules

    @classmethod
    def from_rules(cls, rules: Rules) -> ChatbotRulesAdapter:
        return cls(rules.chatbot)

    def get_command_prefix(self) -> str:
        return self._rules.command_prefix

    def get_phone_accepted(self) -> str:
        return self._rules.phone_accepted

    def get_phone_rejected(self) -> str:
        return self._rules.phone_rejected

    def get_greeting(self) -> str:
        return self._rules.greeting
