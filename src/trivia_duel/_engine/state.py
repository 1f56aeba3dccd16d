# Area: Engine
"""
trivia_duel._engine.state — Match state aggregate
=================================================

Holds everything about one match: the two players, the question pool,
the questions currently held by players, who acts next, progress
counters and the status. The match service is its only mutator.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional
import uuid

from ..errors import NotFoundError
from .enums import MatchEvent, MatchStatus
from .player import Player
from .pool import QuestionPool
from .question import Question
from .state_machine import MatchStateMachine

MIN_PLAYERS = 2


@dataclass
class MatchState:
    """
    Full state of one match.

    `pool` holds questions nobody has drawn yet; `in_play` holds drawn
    questions that are not resolved. `assigned` maps each player id to
    the id of the question that player holds (or None).
    """
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    players: List[Player] = field(default_factory=list)
    pool: QuestionPool = field(default_factory=QuestionPool)
    in_play: Dict[str, Question] = field(default_factory=dict)
    assigned: Dict[str, Optional[str]] = field(default_factory=dict)
    current_player_id: Optional[str] = None
    current_round: int = 0
    questions_resolved: int = 0
    total_rounds: int = 0
    passed_question_id: Optional[str] = None
    machine: MatchStateMachine = field(default_factory=MatchStateMachine)
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    # ── Status ───────────────────────────────────────────────

    @property
    def status(self) -> MatchStatus:
        return self.machine.status

    def advance(self, event: MatchEvent) -> MatchStatus:
        return self.machine.transition(event)

    def budget_reached(self) -> bool:
        return self.total_rounds > 0 and self.questions_resolved >= self.total_rounds

    # ── Player helpers ───────────────────────────────────────

    def has_player(self, player_id: str) -> bool:
        return any(p.id == player_id for p in self.players)

    def get_player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise NotFoundError(
            f"Player {player_id} not part of match {self.id}",
            player_id=player_id,
            match_id=self.id,
        )

    def other_player(self, player_id: str) -> Player:
        """The opponent of `player_id` (the player itself if alone)."""
        self.get_player(player_id)
        for player in self.players:
            if player.id != player_id:
                return player
        return self.get_player(player_id)

    @property
    def current_player(self) -> Optional[Player]:
        if self.current_player_id is None:
            return None
        return self.get_player(self.current_player_id)

    def set_current_player(self, player_id: str) -> None:
        self.get_player(player_id)
        self.current_player_id = player_id

    # ── Question helpers ─────────────────────────────────────

    def held_question(self, player_id: str) -> Optional[Question]:
        question_id = self.assigned.get(player_id)
        if question_id is None:
            return None
        return self.in_play.get(question_id)

    def unresolved_count(self) -> int:
        return len(self.pool) + len(self.in_play)
