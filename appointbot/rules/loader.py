import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from appointbot.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "APPOINTBOT_RULES"


def default_rules_path() -> Path:
    """Rules path from APPOINTBOT_RULES, falling back to ./rules.yaml."""
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means all defaults
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path | None = None) -> Rules:
    """Load rules if the file exists, otherwise return defaults."""
    if path is None:
        path = default_rules_path()

    if not path.exists():
        logger.info(f"Rules file {path} not found, using defaults.")
        return Rules()

    return load_rules(path)
