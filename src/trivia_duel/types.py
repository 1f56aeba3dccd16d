"""
trivia_duel.types — TypedDict schemas for records crossing the engine boundary
==============================================================================

Raw question records come in from a question source; turn outcomes go
out to whatever drives the match. Both are plain dicts.

    >>> RawQuestion.__annotations__.keys()
    dict_keys(['text', 'category', 'type', 'correct_answer', 'incorrect_answers', 'difficulty'])
"""

from typing import List, Literal, Optional, TypedDict


# ============================================
# Question source → engine
# ============================================

class _RawQuestionRequired(TypedDict):
    text: str
    category: str
    type: Literal["multiple", "boolean"]
    correct_answer: str
    incorrect_answers: List[str]


class RawQuestion(_RawQuestionRequired, total=False):
    """One question record as read from a question file.

    Fields
    ------
    text : str
        Question text (OpenTDB files call this "question").
    category : str
        Category name, e.g., "Science: Computers".
    type : "multiple" | "boolean"
        Question variant.
    difficulty : "easy" | "medium" | "hard"
        Optional; decides the point value.
    correct_answer : str
        The correct answer ("True"/"False" for boolean questions).
    incorrect_answers : List[str]
        The wrong answers.
    """
    difficulty: Literal["easy", "medium", "hard"]


# ============================================
# Engine → driver
# ============================================

class TurnOutcomeDict(TypedDict):
    """Turn outcome as returned by TurnOutcome.to_dict()."""
    points_awarded: int
    question_passed: bool
    next_player_id: Optional[str]
    skips_remaining: int
    turn_over: bool
    resolved: bool
