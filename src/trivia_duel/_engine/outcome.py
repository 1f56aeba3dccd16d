# Area: Engine
"""
trivia_duel._engine.outcome — Turn outcome and match result records
===================================================================

Defines what the match service hands back to the driver: the outcome
of a single answer, the winner decision, and the final match result.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from ..types import TurnOutcomeDict
from .enums import Verdict
from .player import Player


@dataclass(frozen=True)
class TurnOutcome:
    """
    Result of one call to handle_player_answer.

    Attributes:
        points_awarded: Points given to the answering player (0 if none)
        question_passed: True if the question moved to the other player
        next_player_id: Player who acts next
        skips_remaining: Skips left for the answering player
        turn_over: True if the turn moved to the other player after a
            first-attempt resolution
        resolved: True if the question left play
    """
    points_awarded: int
    question_passed: bool
    next_player_id: Optional[str]
    skips_remaining: int
    turn_over: bool
    resolved: bool = False

    def to_dict(self) -> TurnOutcomeDict:
        return TurnOutcomeDict(**asdict(self))


@dataclass(frozen=True)
class WinnerDecision:
    """
    Outcome of winner determination.

    `winner` is set only for Verdict.WINNER; `tied` lists the players
    sharing the top score for Verdict.TIE.
    """
    verdict: Verdict
    winner: Optional[Player] = None
    tied: List[Player] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        return self.verdict is Verdict.TIE


@dataclass
class PlayerScore:
    """Final score line for one player."""

    player_id: str
    name: str
    points: int
    skips_remaining: int


@dataclass
class MatchResult:
    """
    Complete result of a match.

    Attributes:
        match_id: Match identifier
        scores: Final score line per player, in registration order
        winner_id: Id of the winning player, or None for a draw
        winner_name: Display name of the winner
        winner_points: Winner's points
        is_draw: True if no winner could be determined
        decided_by_tie_breaker: True if the tie-breaker picked the winner
        questions_resolved: Questions resolved in the main loop
    """

    match_id: str
    scores: List[PlayerScore]
    winner_id: Optional[str]
    winner_name: Optional[str]
    winner_points: Optional[int]
    is_draw: bool
    decided_by_tie_breaker: bool = False
    questions_resolved: int = 0
