"""
Rules loader tests.

Verifies that rules.yaml is parsed, validated and defaulted correctly.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from appointbot.adapters.rules_ports import AppointmentRulesAdapter, ChatbotRulesAdapter
from appointbot.rules.loader import (
    RULES_PATH_ENV,
    default_rules_path,
    load_rules,
    load_rules_or_default,
)
from appointbot.rules.models import Rules


class TestLoadRules:
    def test_project_rules_file(self, project_rules_path: Path) -> None:
        rules = load_rules(project_rules_path)
        assert rules == Rules()

    def test_overrides(self, write_rules) -> None:
        path = write_rules(
            "appointments:\n"
            "  timezone: Europe/London\n"
            "  strict_bounds: true\n"
            "chatbot:\n"
            "  command_prefix: bot\n"
        )
        rules = load_rules(path)
        assert rules.appointments.timezone == "Europe/London"
        assert rules.appointments.strict_bounds is True
        assert rules.chatbot.command_prefix == "bot"
        assert rules.chatbot.greeting == "Nice to meet you, "

    def test_empty_file_is_defaults(self, write_rules) -> None:
        assert load_rules(write_rules("")) == Rules()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_rules) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write_rules("appointments: [unclosed\n"))

    def test_unknown_timezone(self, write_rules) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules("appointments:\n  timezone: Mars/Base\n"))

    def test_unknown_key(self, write_rules) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write_rules("appointments:\n  timezon: UTC\n"))

    def test_empty_prefix(self, write_rules) -> None:
        with pytest.raises(ValueError):
            load_rules(write_rules("chatbot:\n  command_prefix: ''\n"))


class TestLoadRulesOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "missing.yaml") == Rules()

    def test_env_path(self, write_rules, monkeypatch) -> None:
        path = write_rules("appointments:\n  timezone: UTC\n")
        monkeypatch.setenv(RULES_PATH_ENV, str(path))
        assert default_rules_path() == path
        assert load_rules_or_default().appointments.timezone == "UTC"

    def test_default_path(self) -> None:
        assert default_rules_path() == Path("rules.yaml")


class TestRulesAdapters:
    def test_appointment_adapter(self) -> None:
        rules = Rules.model_validate(
            {"appointments": {"timezone": "UTC", "strict_bounds": True}}
        )
        adapter = AppointmentRulesAdapter.from_rules(rules)
        assert adapter.get_timezone() == "UTC"
        assert adapter.strict_bounds_enabled() is True

    def test_chatbot_adapter(self) -> None:
        adapter = ChatbotRulesAdapter.from_rules(Rules())
        assert adapter.get_command_prefix() == "chatbot"
        assert adapter.get_phone_accepted() == "Thanks! You can now download me to your phone."
        assert adapter.get_phone_rejected() == "Oops, it seems like I can't reach out to "
        assert adapter.get_greeting() == "Nice to meet you, "
