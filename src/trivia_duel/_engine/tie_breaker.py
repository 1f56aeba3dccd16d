# Area: Engine
"""
trivia_duel._engine.tie_breaker — Tie-breaker question
======================================================

One extra question between two tied players, outside the round loop.
The first player answers; a correct answer wins. A wrong answer passes
the question to the second player, whose correct answer wins. Anything
else is a draw. Scores are not changed.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from ..errors import InvalidOperationError
from .player import Player
from .question import Question

logger = logging.getLogger("trivia_duel.tie_breaker")


class TieBreaker:
    """
    Attributes:
        first: Player who answers first
        second: Player who gets the question if the first one misses
        question: The decisive question (None if the pool was empty)
        winner: Winning player once decided, else None
        is_draw: True once both missed, or if there was no question
    """

    def __init__(self, first: Player, second: Player, question: Optional[Question]):
        self.first = first
        self.second = second
        self.question = question
        self.winner: Optional[Player] = None
        self.is_draw = question is None
        self._current: Optional[Player] = None if question is None else first
        if question is not None:
            question.assign_to(first.id)
        else:
            logger.info("No question left for the tie-breaker; declaring a draw")

    @property
    def done(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def current_player(self) -> Optional[Player]:
        return self._current

    def answer(self, player_id: str, answer: Any) -> bool:
        """
        Submit an answer for the player whose turn it is.

        Returns:
            True if the answer was correct (and decided the winner)
        """
        if self.done:
            raise InvalidOperationError("Tie-breaker is already decided")
        if player_id != self._current.id:
            raise InvalidOperationError(
                f"It is not player {player_id}'s turn in the tie-breaker",
                player_id=player_id,
                current_player_id=self._current.id,
            )

        if self.question.check_answer(answer):
            self.question.mark_answered(player_id)
            self.winner = self._current
            self._current = None
            logger.info(f"Tie-breaker won by {self.winner.name}")
            return True

        if self._current is self.first:
            self.question.release()
            self.question.assign_to(self.second.id)
            self._current = self.second
            return False

        self.is_draw = True
        self._current = None
        logger.info("Tie-breaker missed by both players; draw")
        return False
