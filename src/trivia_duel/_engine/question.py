# Area: Engine
"""
trivia_duel._engine.question — Question entity
==============================================

One Question type with a shared envelope and a `kind` discriminant.
Multiple-choice questions carry numbered options; boolean questions
carry a single canonical answer plus the labels shown for true/false.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import uuid

from ..errors import InvalidOperationError
from .category import Category
from .enums import Difficulty, QuestionKind


@dataclass(frozen=True)
class AnswerOption:
    """One labelled option of a multiple-choice question."""
    text: str
    is_correct: bool


@dataclass
class Question:
    """
    A trivia question held in the pool or by a player.

    Attributes:
        id: Unique question id
        kind: MULTIPLE or BOOLEAN
        text: Question text (already decoded)
        category: Category the question belongs to
        points: Points awarded for a correct answer
        difficulty: Optional difficulty level
        assigned_to: Id of the player currently holding the question
        answered_by: Id of the player who answered it correctly
        options: Label -> option mapping (MULTIPLE only)
        correct_answer: Canonical answer (BOOLEAN only)
        label_true / label_false: Display labels (BOOLEAN only)
    """
    id: str
    kind: QuestionKind
    text: str
    category: Category
    points: int = 1
    difficulty: Optional[Difficulty] = None
    assigned_to: Optional[str] = None
    answered_by: Optional[str] = None
    options: Dict[int, AnswerOption] = field(default_factory=dict)
    correct_answer: Optional[bool] = None
    label_true: str = "True"
    label_false: str = "False"
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    # ── Answer checking ──────────────────────────────────────

    def check_answer(self, answer: Any) -> bool:
        """Return whether `answer` is correct. Never raises for bad input."""
        if self.kind is QuestionKind.MULTIPLE:
            return self._check_label(answer)
        return isinstance(answer, bool) and answer == self.correct_answer

    def _check_label(self, label: Any) -> bool:
        if isinstance(label, bool) or not isinstance(label, int):
            return False
        option = self.options.get(label)
        return option.is_correct if option else False

    def correct_label(self) -> Optional[int]:
        for label, option in self.options.items():
            if option.is_correct:
                return label
        return None

    def correct_text(self) -> str:
        """Display text of the correct answer."""
        if self.kind is QuestionKind.MULTIPLE:
            label = self.correct_label()
            return self.options[label].text if label is not None else ""
        return self.label_true if self.correct_answer else self.label_false

    # ── Assignment ───────────────────────────────────────────

    def assign_to(self, player_id: str) -> None:
        if not player_id:
            raise InvalidOperationError(
                "player id required to assign question", question_id=self.id
            )
        if self.assigned_to:
            raise InvalidOperationError(
                f"Question {self.id} is already assigned to {self.assigned_to}",
                question_id=self.id,
                assigned_to=self.assigned_to,
            )
        self.assigned_to = player_id

    def release(self) -> None:
        """Clear the holder so the question can be handed to someone else."""
        self.assigned_to = None

    def mark_answered(self, player_id: str) -> None:
        if not player_id:
            raise InvalidOperationError(
                "player id required to mark answered", question_id=self.id
            )
        if not self.assigned_to:
            raise InvalidOperationError(
                f"Question {self.id} has not been assigned", question_id=self.id
            )
        if self.answered_by:
            raise InvalidOperationError(
                f"Question {self.id} was already answered by {self.answered_by}",
                question_id=self.id,
                answered_by=self.answered_by,
            )
        if player_id != self.assigned_to:
            raise InvalidOperationError(
                f"Player {player_id} is not assigned to question {self.id}",
                question_id=self.id,
                player_id=player_id,
            )
        self.answered_by = player_id


def new_question_id() -> str:
    return str(uuid.uuid4())


def multiple_choice(
    text: str,
    category: Category,
    options: Dict[int, AnswerOption],
    points: int = 1,
    difficulty: Optional[Difficulty] = None,
) -> Question:
    """Build a multiple-choice question. Exactly one option must be correct."""
    correct = [label for label, option in options.items() if option.is_correct]
    if len(correct) != 1:
        raise ValueError(
            f"multiple-choice question needs exactly one correct option, got {len(correct)}"
        )
    return Question(
        id=new_question_id(),
        kind=QuestionKind.MULTIPLE,
        text=text,
        category=category,
        points=points,
        difficulty=difficulty,
        options=dict(options),
    )


def boolean_question(
    text: str,
    category: Category,
    correct_answer: bool,
    points: int = 1,
    difficulty: Optional[Difficulty] = None,
    label_true: str = "True",
    label_false: str = "False",
) -> Question:
    return Question(
        id=new_question_id(),
        kind=QuestionKind.BOOLEAN,
        text=text,
        category=category,
        points=points,
        difficulty=difficulty,
        correct_answer=correct_answer,
        label_true=label_true,
        label_false=label_false,
    )
