# Area: Shared
"""
trivia_duel.question_loader — Local question files
==================================================

Reads raw question records from a JSON file, filters them by
difficulty / type, and shuffles them. The file holds either a list of
records or an object with a "questions" (or OpenTDB "results") list.
"""

from __future__ import annotations
import json
import logging
import random
from pathlib import Path
from typing import List, Optional

from ._config import SKIP_BUFFER
from .errors import NotFoundError
from .types import RawQuestion

logger = logging.getLogger("trivia_duel.loader")


def read_questions_from_json(
    file_path: str,
    difficulty: Optional[str] = None,
    question_type: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> List[RawQuestion]:
    """
    Load and shuffle raw question records.

    Raises:
        NotFoundError: If the file is missing or is not valid question JSON
    """
    path = Path(file_path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise NotFoundError(
            f"Could not read questions from the specified file. {e}",
            file_path=str(path),
        ) from e

    records = _extract_records(data)
    if records is None:
        raise NotFoundError(
            "Question file has no 'questions' list", file_path=str(path)
        )

    if difficulty:
        records = [r for r in records if r.get("difficulty") == difficulty]
    if question_type:
        records = [r for r in records if r.get("type") == question_type]

    (rng or random.Random()).shuffle(records)
    logger.info(f"Loaded {len(records)} questions from {path}")
    return records


def questions_needed(round_budget: int) -> int:
    """Questions to load for a match: the budget plus a skip buffer."""
    return round_budget + SKIP_BUFFER


def _extract_records(data) -> Optional[list]:
    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        records = data.get("questions", data.get("results"))
    else:
        return None
    if not isinstance(records, list):
        return None
    return [r for r in records if isinstance(r, dict)]
