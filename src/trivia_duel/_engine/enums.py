# Area: Engine
"""
trivia_duel._engine.enums — Match engine enums
==============================================

Defines match statuses, the events that move a match between them,
and the question kinds and difficulties the engine understands.
"""

from enum import Enum


class MatchStatus(Enum):
    """
    Status of a match.

    Transitions (forward only):
    WAITING -> IN_PROGRESS (on START)
    IN_PROGRESS -> FINISHED (on FINISH)
    """
    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    FINISHED = "finished"


class MatchEvent(Enum):
    """
    Events that trigger status transitions.

    - START: both players registered and the service's start() called
    - FINISH: round budget reached, pool exhausted, or driver stopped
    """
    START = "START"
    FINISH = "FINISH"


class QuestionKind(Enum):
    """Discriminant of the question variant."""
    MULTIPLE = "multiple"
    BOOLEAN = "boolean"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Verdict(Enum):
    """Result of winner determination."""
    WINNER = "winner"
    TIE = "tie"
    NO_PLAYERS = "no_players"
