# Area: Engine
"""
trivia_duel._engine.pool — Question pool
========================================

Insertion-ordered store of unresolved questions, grouped by category.
Drawing removes the question; nothing is ever added back except by
restoring a snapshot.
"""

from __future__ import annotations
from typing import Dict, Iterator, List, Optional

from ..errors import DuplicateError
from .question import Question


class QuestionPool:
    """Questions keyed by id, drawn in the order they were added."""

    def __init__(self):
        self._questions: Dict[str, Question] = {}

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._questions

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._questions.values()))

    def add(self, question: Question) -> None:
        if question.id in self._questions:
            raise DuplicateError(
                f"Question {question.id} already in pool", question_id=question.id
            )
        self._questions[question.id] = question

    def get(self, question_id: str) -> Optional[Question]:
        return self._questions.get(question_id)

    def remove(self, question_id: str) -> Optional[Question]:
        return self._questions.pop(question_id, None)

    def draw_next(self, category: Optional[str] = None) -> Optional[Question]:
        """
        Remove and return the oldest question, optionally within a category.

        Returns None when no question matches.
        """
        for question in self._questions.values():
            if category is None or question.category.name == category:
                del self._questions[question.id]
                return question
        return None

    def categories(self) -> List[str]:
        """Category names that still hold questions, in first-seen order."""
        names: Dict[str, None] = {}
        for question in self._questions.values():
            names.setdefault(question.category.name, None)
        return list(names)

    def clear(self) -> None:
        self._questions.clear()
