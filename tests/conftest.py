from datetime import UTC, datetime
from pathlib import Path

import pytest

from appointbot.adapters.clock import FrozenClock
from appointbot.rules.loader import RULES_PATH_ENV

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def _no_rules_env(monkeypatch):
    """Keep a developer's APPOINTBOT_RULES from leaking into tests."""
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)


@pytest.fixture
def project_rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def frozen_clock() -> FrozenClock:
    # Freeze at 2026-06-15 12:00 UTC
    return FrozenClock(datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def write_rules(tmp_path):
    """Write a rules file into a temp directory and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(content)
        return path

    return _write
