# Area: Engine
"""
Match engine: entities, match state and the match service.

This package contains:
- Question, Player and Category entities
- The question pool and pool builder
- MatchState and its status state machine
- MatchService (turn resolution, skips, winner, tie-breaker)
- Snapshots and match history
"""

from .category import Category, CategoryRegistry
from .enums import Difficulty, MatchEvent, MatchStatus, QuestionKind, Verdict
from .history import MatchHistory
from .outcome import MatchResult, PlayerScore, TurnOutcome, WinnerDecision
from .player import Identity, Player, new_identity
from .pool import QuestionPool
from .pool_builder import RawQuestionRecord, build_questions
from .question import AnswerOption, Question, boolean_question, multiple_choice
from .service import MatchService
from .snapshot import MatchSnapshot, capture_snapshot, restore_snapshot
from .state import MatchState
from .state_machine import MatchStateMachine
from .tie_breaker import TieBreaker

__all__ = [
    "Category",
    "CategoryRegistry",
    "Difficulty",
    "MatchEvent",
    "MatchStatus",
    "QuestionKind",
    "Verdict",
    "MatchHistory",
    "MatchResult",
    "PlayerScore",
    "TurnOutcome",
    "WinnerDecision",
    "Identity",
    "Player",
    "new_identity",
    "QuestionPool",
    "RawQuestionRecord",
    "build_questions",
    "AnswerOption",
    "Question",
    "boolean_question",
    "multiple_choice",
    "MatchService",
    "MatchSnapshot",
    "capture_snapshot",
    "restore_snapshot",
    "MatchState",
    "MatchStateMachine",
    "TieBreaker",
]
