# Area: Shared
"""
trivia_duel._config — Match configuration
=========================================

Defaults, loading (JSON file + environment) and validation for a run.
Environment variables are read after `.env` has been loaded by the CLI.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger("trivia_duel")

# Extra questions fetched on top of the round budget as a skip buffer
SKIP_BUFFER = 4

POINTS_BY_DIFFICULTY = {
    "easy": 1,
    "medium": 2,
    "hard": 3,
}
DEFAULT_POINTS = 1

DEFAULTS: Dict[str, Any] = {
    "question_count": 5,
    "questions_file": "data/questions-sample.json",
    "difficulty": None,
    "question_type": None,
    "skips_per_player": 2,
    "seed": None,
    "log_file": None,
}

VALID_DIFFICULTIES = ("easy", "medium", "hard")
VALID_QUESTION_TYPES = ("multiple", "boolean")

ENV_MAPPINGS = {
    "TRIVIA_QUESTION_COUNT": "question_count",
    "TRIVIA_QUESTIONS_FILE": "questions_file",
    "TRIVIA_DIFFICULTY": "difficulty",
    "TRIVIA_QUESTION_TYPE": "question_type",
    "TRIVIA_SEED": "seed",
    "TRIVIA_LOG_FILE": "log_file",
}

_INT_KEYS = {"question_count", "skips_per_player", "seed"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the run configuration.

    Defaults are overridden by the JSON file at `config_path` (if it
    exists), which is overridden by TRIVIA_* environment variables.
    """
    config = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key in _INT_KEYS:
                value = int(value)
            config[config_key] = value

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Raises:
        ValueError: If a value is missing or out of range
    """
    count = config.get("question_count")
    if not isinstance(count, int) or isinstance(count, bool) or count <= 0:
        raise ValueError(
            f"question_count must be a positive integer, got {count!r}"
        )
    skips = config.get("skips_per_player")
    if not isinstance(skips, int) or skips < 0:
        raise ValueError(
            f"skips_per_player must be a non-negative integer, got {skips!r}"
        )
    difficulty = config.get("difficulty")
    if difficulty is not None and difficulty not in VALID_DIFFICULTIES:
        raise ValueError(
            f"difficulty must be one of {VALID_DIFFICULTIES}, got {difficulty!r}"
        )
    question_type = config.get("question_type")
    if question_type is not None and question_type not in VALID_QUESTION_TYPES:
        raise ValueError(
            f"question_type must be one of {VALID_QUESTION_TYPES}, got {question_type!r}"
        )
    if not config.get("questions_file"):
        raise ValueError("questions_file is required")


def points_for(difficulty: Optional[str]) -> int:
    """Points a correct answer earns at the given difficulty."""
    if difficulty is None:
        return DEFAULT_POINTS
    return POINTS_BY_DIFFICULTY.get(difficulty, DEFAULT_POINTS)
