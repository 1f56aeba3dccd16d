# Area: Engine
"""
trivia_duel._engine.pool_builder — Raw records to Question entities
===================================================================

Validates raw question records, decodes HTML entities, and builds the
two question variants. Multiple-choice options get a uniformly random
permutation of the labels 1..N. Invalid records are logged and skipped.
"""

from __future__ import annotations
import html
import logging
import random
from typing import Any, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .._config import points_for
from .category import CategoryRegistry
from .enums import Difficulty
from .question import AnswerOption, Question, boolean_question, multiple_choice

logger = logging.getLogger("trivia_duel.pool")


class RawQuestionRecord(BaseModel):
    """One question as delivered by a question source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: str = Field(min_length=1, validation_alias=AliasChoices("text", "question"))
    category: str = Field(min_length=1)
    type: Literal["multiple", "boolean"]
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None
    correct_answer: str
    incorrect_answers: List[str] = Field(default_factory=list)

    @field_validator("text", "category", "correct_answer")
    @classmethod
    def _unescape(cls, value: str) -> str:
        return html.unescape(value)

    @field_validator("incorrect_answers")
    @classmethod
    def _unescape_all(cls, values: List[str]) -> List[str]:
        return [html.unescape(v) for v in values]

    @model_validator(mode="after")
    def _check_answers(self) -> "RawQuestionRecord":
        if self.type == "boolean":
            if self.correct_answer.strip().lower() not in ("true", "false"):
                raise ValueError(
                    f"boolean correct_answer must be 'True' or 'False', got {self.correct_answer!r}"
                )
        elif not self.incorrect_answers:
            raise ValueError("multiple-choice question needs incorrect_answers")
        return self


RawInput = Union[RawQuestionRecord, Mapping[str, Any]]


def build_questions(
    records: Iterable[RawInput],
    registry: CategoryRegistry,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Convert raw records into Question entities.

    Args:
        records: Raw question dicts (or already-validated records)
        registry: Category registry; categories are created on first use
        rng: Random source for option labels (default: module random)

    Returns:
        The questions built, in input order. Skipped records are logged.
    """
    rng = rng or random.Random()
    questions: List[Question] = []
    skipped = 0

    for index, raw in enumerate(records):
        try:
            record = raw if isinstance(raw, RawQuestionRecord) else RawQuestionRecord.model_validate(raw)
        except ValidationError as e:
            skipped += 1
            fields = ", ".join(".".join(str(p) for p in err["loc"]) or "record" for err in e.errors())
            logger.warning(f"Skipping question record #{index}: invalid field(s) {fields}")
            continue
        questions.append(_build_question(record, registry, rng))

    if skipped:
        logger.info(f"Built {len(questions)} questions ({skipped} records skipped)")
    return questions


def _build_question(
    record: RawQuestionRecord,
    registry: CategoryRegistry,
    rng: random.Random,
) -> Question:
    category = registry.get_or_create(record.category)
    difficulty = Difficulty(record.difficulty) if record.difficulty else None
    points = points_for(record.difficulty)

    if record.type == "boolean":
        return boolean_question(
            text=record.text,
            category=category,
            correct_answer=record.correct_answer.strip().lower() == "true",
            points=points,
            difficulty=difficulty,
        )

    return multiple_choice(
        text=record.text,
        category=category,
        options=build_options(record.correct_answer, record.incorrect_answers, rng),
        points=points,
        difficulty=difficulty,
    )


def build_options(
    correct_answer: str,
    incorrect_answers: List[str],
    rng: random.Random,
) -> dict:
    """
    Place the correct answer among the incorrect ones under shuffled labels.

    Returns a label -> AnswerOption dict ordered by label (1..N).
    """
    answers = [AnswerOption(text=a, is_correct=False) for a in incorrect_answers]
    answers.append(AnswerOption(text=correct_answer, is_correct=True))

    labels = list(range(1, len(answers) + 1))
    # Fisher-Yates
    for i in range(len(labels) - 1, 0, -1):
        j = rng.randint(0, i)
        labels[i], labels[j] = labels[j], labels[i]

    return dict(sorted(zip(labels, answers), key=lambda pair: pair[0]))
