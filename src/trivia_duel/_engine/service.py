# Area: Engine
"""
trivia_duel._engine.service — Match service
===========================================

Drives a match: player registration, question assignment, answer
resolution (with pass-on-incorrect), skips, and winner determination.

Per question the lifecycle is:

    unassigned -> held by A -> resolved (A correct)
                            -> passed to B -> resolved (B correct or not)

Every call to handle_player_answer either resolves exactly one
question or passes exactly one question to the other player.
All validation happens before any state is touched.
"""

from __future__ import annotations
import logging
import random
from typing import Any, Iterable, Mapping, Optional

from ..errors import DuplicateError, InvalidOperationError, NotFoundError
from .category import CategoryRegistry
from .enums import MatchEvent, MatchStatus, Verdict
from .outcome import MatchResult, PlayerScore, TurnOutcome, WinnerDecision
from .player import Player
from .pool_builder import build_questions
from .question import Question
from .snapshot import MatchSnapshot, capture_snapshot, restore_snapshot
from .state import MIN_PLAYERS, MatchState
from .tie_breaker import TieBreaker

logger = logging.getLogger("trivia_duel.service")


class MatchService:
    """
    Owns one MatchState and performs every mutation on it.

    Args:
        state: Existing state to drive (default: a fresh match)
        registry: Category registry (default: a fresh one per service)
        rng: Random source used for multiple-choice option labels
    """

    def __init__(
        self,
        state: Optional[MatchState] = None,
        registry: Optional[CategoryRegistry] = None,
        rng: Optional[random.Random] = None,
    ):
        self.state = state if state is not None else MatchState()
        self.registry = registry if registry is not None else CategoryRegistry()
        self._rng = rng or random.Random()

    # ══════════════════════════════════════════════════════════
    # SETUP
    # ══════════════════════════════════════════════════════════

    def create_pool(self, raw_questions: Iterable[Mapping[str, Any]], round_budget: int) -> int:
        """
        Populate the question pool and set the round budget.

        `round_budget` is the number of questions actually played; the
        pool may hold more as a buffer for skips.

        Returns:
            Number of questions added (invalid records are skipped)
        """
        if isinstance(round_budget, bool) or not isinstance(round_budget, int) or round_budget <= 0:
            raise InvalidOperationError(
                f"round budget must be a positive integer, got {round_budget!r}",
                round_budget=round_budget,
            )
        if self.state.status is MatchStatus.FINISHED:
            raise InvalidOperationError("Cannot add questions to a finished match")

        questions = build_questions(raw_questions, self.registry, self._rng)
        for question in questions:
            self.state.pool.add(question)
        self.state.total_rounds = round_budget

        logger.info(
            f"Question pool ready: {len(self.state.pool)} questions, "
            f"{round_budget} rounds to play"
        )
        return len(questions)

    def add_player(self, player: Player) -> None:
        if player is None:
            raise InvalidOperationError("player required")
        if self.state.has_player(player.id):
            raise DuplicateError(
                f"player {player.id} already part of match {self.state.id}",
                player_id=player.id,
            )
        if self.state.status is not MatchStatus.WAITING:
            raise InvalidOperationError(
                "Cannot add players unless match is in waiting status",
                status=self.state.status.value,
            )
        if len(self.state.players) >= MIN_PLAYERS:
            raise InvalidOperationError(
                f"A match takes exactly {MIN_PLAYERS} players",
                player_id=player.id,
            )
        self.state.players.append(player)
        self.state.assigned[player.id] = None
        logger.info(f"Player joined: {player.name} ({player.id})")

    def start(self) -> None:
        """Move the match to in-progress; the first player registered acts first."""
        if self.state.status is not MatchStatus.WAITING:
            raise InvalidOperationError(
                "Match is not in waiting state", status=self.state.status.value
            )
        if len(self.state.players) != MIN_PLAYERS:
            raise InvalidOperationError(
                f"Need exactly {MIN_PLAYERS} players to start the match",
                players=len(self.state.players),
            )
        self.state.advance(MatchEvent.START)
        if self.state.current_player_id is None:
            self.state.set_current_player(self.state.players[0].id)

    def finish(self) -> None:
        """End the match early (e.g. the pool ran dry)."""
        self.state.advance(MatchEvent.FINISH)

    # ══════════════════════════════════════════════════════════
    # TURNS
    # ══════════════════════════════════════════════════════════

    def question_for(self, player_id: str) -> Optional[Question]:
        """The question `player_id` currently holds, if any."""
        self.state.get_player(player_id)
        return self.state.held_question(player_id)

    def assign_question_to_player(
        self, player_id: str, category: Optional[str] = None
    ) -> Optional[Question]:
        """
        Draw the next question (optionally from `category`) for a player.

        Returns:
            The assigned question, or None if nothing is left to draw
        """
        self.state.get_player(player_id)
        self._require_in_progress()
        self._require_turn(player_id)
        if self.state.assigned.get(player_id):
            raise InvalidOperationError(
                f"Player {player_id} already holds question {self.state.assigned[player_id]}",
                player_id=player_id,
            )

        question = self._draw_for(player_id, category)
        if question is not None:
            self.state.current_round += 1
        return question

    def handle_player_answer(self, player_id: str, answer: Any, question: Question) -> TurnOutcome:
        """
        Resolve a player's answer to the question they hold.

        First attempt: correct scores and ends the turn; incorrect passes
        the question to the opponent. Second attempt (passed question):
        the question is resolved either way and the answering player
        keeps the turn to draw their own next question.
        """
        player = self.state.get_player(player_id)
        self._require_in_progress()
        self._require_turn(player_id)
        held_id = self.state.assigned.get(player_id)
        if held_id is None or question is None or held_id != question.id:
            raise InvalidOperationError(
                f"Player {player_id} is not holding question "
                f"{getattr(question, 'id', None)}",
                player_id=player_id,
                held_question_id=held_id,
            )
        # live object; the caller may hold a copy from before a restore
        question = self.state.in_play[held_id]

        other = self.state.other_player(player_id)
        correct = question.check_answer(answer)
        second_attempt = self.state.passed_question_id == question.id

        if not second_attempt and not correct:
            self.pass_question(player_id, other.id)
            self.state.passed_question_id = question.id
            self.state.set_current_player(other.id)
            logger.info(f"{player.name} answered incorrectly; question passed to {other.name}")
            return TurnOutcome(
                points_awarded=0,
                question_passed=True,
                next_player_id=other.id,
                skips_remaining=player.skips,
                turn_over=False,
            )

        awarded = self._resolve(question, player, correct)
        if second_attempt:
            next_player_id = player.id
        else:
            next_player_id = other.id
        self.state.set_current_player(next_player_id)
        self._finish_if_budget_reached()

        return TurnOutcome(
            points_awarded=awarded,
            question_passed=False,
            next_player_id=next_player_id,
            skips_remaining=player.skips,
            turn_over=not second_attempt,
            resolved=True,
        )

    def pass_question(self, from_player_id: str, to_player_id: str) -> None:
        """Move the question held by one player to the other."""
        if not self.state.has_player(from_player_id) or not self.state.has_player(to_player_id):
            raise _missing_players_error(self.state, from_player_id, to_player_id)
        question_id = self.state.assigned.get(from_player_id)
        if not question_id:
            raise InvalidOperationError(
                "no question assigned to fromPlayer", player_id=from_player_id
            )
        if from_player_id == to_player_id:
            raise InvalidOperationError("cannot pass a question to the same player")
        if self.state.assigned.get(to_player_id):
            raise InvalidOperationError(
                f"Player {to_player_id} already holds a question", player_id=to_player_id
            )

        question = self.state.in_play[question_id]
        question.release()
        question.assign_to(to_player_id)
        self.state.assigned[from_player_id] = None
        self.state.assigned[to_player_id] = question_id

    def skip_question(self, player_id: str, category: Optional[str] = None) -> Optional[Question]:
        """
        Use one skip: discard the held question and draw a replacement.

        The discarded question counts as resolved with no points. The
        turn stays with the same player.

        Returns:
            The replacement question, or None if none is available
        """
        player = self.state.get_player(player_id)
        self._require_in_progress()
        self._require_turn(player_id)
        question = self.state.held_question(player_id)
        if question is None:
            raise InvalidOperationError(
                f"Player {player_id} has no question to skip", player_id=player_id
            )
        if player.skips <= 0:
            raise InvalidOperationError(
                "You have no skips left! Please answer the question.",
                player_id=player_id,
            )

        player.use_skip()
        self._resolve(question, player, correct=False)
        logger.info(f"{player.name} skipped a question ({player.skips} skips left)")
        self._finish_if_budget_reached()
        if self.state.status is not MatchStatus.IN_PROGRESS:
            return None
        return self._draw_for(player_id, category)

    # ══════════════════════════════════════════════════════════
    # RESULTS
    # ══════════════════════════════════════════════════════════

    def determine_winner(self) -> WinnerDecision:
        players = self.state.players
        if not players:
            return WinnerDecision(verdict=Verdict.NO_PLAYERS)
        top = max(p.points for p in players)
        leaders = [p for p in players if p.points == top]
        if len(leaders) > 1:
            return WinnerDecision(verdict=Verdict.TIE, tied=leaders)
        return WinnerDecision(verdict=Verdict.WINNER, winner=leaders[0])

    def start_tie_breaker(self) -> TieBreaker:
        """
        Set up a single decisive question between two tied players.

        Requires a finished match whose top score is shared by exactly
        two players. If the pool is empty the tie-breaker is a draw.
        """
        if self.state.status is not MatchStatus.FINISHED:
            raise InvalidOperationError(
                "Tie-breaker only runs after the match is finished",
                status=self.state.status.value,
            )
        decision = self.determine_winner()
        if decision.verdict is not Verdict.TIE or len(decision.tied) != 2:
            raise InvalidOperationError(
                "Tie-breaker requires exactly two tied players",
                verdict=decision.verdict.value,
            )
        first, second = decision.tied
        question = self.state.pool.draw_next()
        logger.info(f"Tie-breaker between {first.name} and {second.name}")
        return TieBreaker(first, second, question)

    def build_result(self, tie_breaker: Optional[TieBreaker] = None) -> MatchResult:
        decision = self.determine_winner()
        winner: Optional[Player] = decision.winner
        by_tie_breaker = False
        if decision.is_tie and tie_breaker is not None and tie_breaker.winner is not None:
            winner = tie_breaker.winner
            by_tie_breaker = True

        result = MatchResult(
            match_id=self.state.id,
            scores=[
                PlayerScore(player_id=p.id, name=p.name, points=p.points, skips_remaining=p.skips)
                for p in self.state.players
            ],
            winner_id=winner.id if winner else None,
            winner_name=winner.name if winner else None,
            winner_points=winner.points if winner else None,
            is_draw=winner is None,
            decided_by_tie_breaker=by_tie_breaker,
            questions_resolved=self.state.questions_resolved,
        )
        logger.info(f"Match result: winner={'DRAW' if result.is_draw else result.winner_name}")
        return result

    # ══════════════════════════════════════════════════════════
    # SNAPSHOTS
    # ══════════════════════════════════════════════════════════

    def save(self) -> MatchSnapshot:
        return capture_snapshot(self.state)

    def restore(self, snapshot: MatchSnapshot) -> None:
        """Replace the live state with fresh objects rebuilt from `snapshot`."""
        state, registry = restore_snapshot(snapshot)
        self.state = state
        self.registry = registry
        logger.info(f"Restored match state: {snapshot.name}")

    # ── Internals ────────────────────────────────────────────

    def _require_in_progress(self) -> None:
        if self.state.status is not MatchStatus.IN_PROGRESS:
            raise InvalidOperationError(
                "Match is not in progress", status=self.state.status.value
            )

    def _require_turn(self, player_id: str) -> None:
        if self.state.current_player_id != player_id:
            raise InvalidOperationError(
                f"It is not player {player_id}'s turn",
                player_id=player_id,
                current_player_id=self.state.current_player_id,
            )

    def _draw_for(self, player_id: str, category: Optional[str]) -> Optional[Question]:
        question = self.state.pool.draw_next(category)
        if question is None:
            logger.info(
                "No questions left to draw"
                + (f" in category '{category}'" if category else "")
            )
            return None
        question.assign_to(player_id)
        self.state.in_play[question.id] = question
        self.state.assigned[player_id] = question.id
        return question

    def _resolve(self, question: Question, player: Player, correct: bool) -> int:
        """Take `question` out of play; award its points if `correct`."""
        awarded = 0
        if correct:
            question.mark_answered(player.id)
            awarded = question.points
            player.add_points(awarded)

        self.state.assigned[player.id] = None
        self.state.in_play.pop(question.id, None)
        if self.state.passed_question_id == question.id:
            self.state.passed_question_id = None
        self.state.questions_resolved += 1

        logger.info(
            f"Question resolved by {player.name}: "
            f"{'correct' if correct else 'no points'} "
            f"({self.state.questions_resolved}/{self.state.total_rounds})"
        )
        return awarded

    def _finish_if_budget_reached(self) -> None:
        if self.state.budget_reached() and self.state.status is MatchStatus.IN_PROGRESS:
            self.state.advance(MatchEvent.FINISH)


def _missing_players_error(state: MatchState, *player_ids: str) -> NotFoundError:
    missing = [pid for pid in player_ids if not state.has_player(pid)]
    return NotFoundError(
        f"player(s) {', '.join(missing)} not part of match {state.id}",
        player_ids=missing,
    )
