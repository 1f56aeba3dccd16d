# Area: Game Flow
"""
trivia_duel.game_flow — Hot-seat console driver
===============================================

Runs a started match at one terminal: asks the current player for a
category, shows the question, reads the answer (or 'skip'), feeds it to
the MatchService and prints what happened. After the last round it
announces the winner and plays the tie-breaker if needed.

Input and output are injected (`ask`, `say`) so the loop can be driven
by scripted answers in tests.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from ._engine import (
    MatchHistory,
    MatchResult,
    MatchService,
    MatchStatus,
    Player,
    Question,
    QuestionKind,
    TieBreaker,
    TurnOutcome,
)
from ._shared.display import styled
from .errors import InvalidOperationError

logger = logging.getLogger("trivia_duel.game_flow")

SKIP_COMMAND = "skip"


class GameFlow:
    """
    Console loop for one match.

    Args:
        service: Match service driving a started match
        ask: Prompt function returning the player's raw input
        say: Output function (default: print)
        history: Optional history that receives a snapshot after each turn
    """

    def __init__(
        self,
        service: MatchService,
        ask: Callable[[str], str],
        say: Callable[[str], None] = print,
        history: Optional[MatchHistory] = None,
    ):
        self.service = service
        self.ask = ask
        self.say = say
        self.history = history

    @property
    def state(self):
        return self.service.state

    # ══════════════════════════════════════════════════════════
    # MAIN LOOP
    # ══════════════════════════════════════════════════════════

    def play(self) -> MatchResult:
        """Play rounds until the budget is used or the pool runs dry."""
        while self.state.status is MatchStatus.IN_PROGRESS:
            player = self.state.current_player
            self._show_scoreboard()

            question = self.service.question_for(player.id)
            if question is None:
                question = self._draw_question(player)
                if question is None:
                    self.say(styled("warning", "No more questions available. Ending game."))
                    self.service.finish()
                    break

            self.say(styled("turn", f"-------- Round {self.state.current_round} --------"))
            self.say(styled("turn", f"{player.name}'s turn."))
            self._process_question(player, question)

            if self.history is not None:
                self.history.backup()

        return self.announce_result()

    def _draw_question(self, player: Player) -> Optional[Question]:
        while True:
            categories = self.state.pool.categories()
            if not categories:
                return None
            category = categories[0] if len(categories) == 1 else self._prompt_category(categories)
            question = self.service.assign_question_to_player(player.id, category)
            if question is not None:
                return question
            self.say(styled("warning", "No questions available in that category. Please choose another."))

    def _prompt_category(self, categories) -> str:
        self.say(styled("info", "Please choose a category:"))
        for i, name in enumerate(categories, start=1):
            self.say(styled("info", f"{i}: {name}"))
        while True:
            choice = _parse_int(self.ask("Enter the number of your choice: "))
            if choice is not None and 1 <= choice <= len(categories):
                return categories[choice - 1]
            self.say(styled("error", "Invalid choice, please try again."))

    def _process_question(self, player: Player, question: Question) -> None:
        self._show_question(question)
        while True:
            raw = self.ask(self._answer_prompt(player, question, allow_skip=True)).strip()

            if raw.lower() == SKIP_COMMAND:
                try:
                    replacement = self.service.skip_question(player.id)
                except InvalidOperationError as e:
                    self.say(styled("warning", e.message))
                    continue
                self.say(styled("info", f"You used a skip. You have {player.skips} skips left."))
                if replacement is None:
                    return
                question = replacement
                self._show_question(question)
                continue

            answer = parse_answer(question, raw)
            if answer is None:
                self.say(styled("error", "Invalid input. Please try again."))
                continue

            outcome = self.service.handle_player_answer(player.id, answer, question)
            self._notify(outcome, question)
            return

    # ══════════════════════════════════════════════════════════
    # END OF MATCH
    # ══════════════════════════════════════════════════════════

    def announce_result(self) -> MatchResult:
        self.say(styled("info", "\nGame over!"))
        self._show_scoreboard()

        decision = self.service.determine_winner()
        tie_breaker = None
        if decision.is_tie:
            self.say(styled("info", "It's a tie! Time for a tie-breaker."))
            if len(decision.tied) == 2:
                tie_breaker = self.service.start_tie_breaker()
                self._play_tie_breaker(tie_breaker)

        result = self.service.build_result(tie_breaker)
        if result.is_draw:
            self.say(styled("info", "It's a draw!"))
        elif result.decided_by_tie_breaker:
            self.say(styled("success", f"The winner of the tie-breaker is {result.winner_name}!"))
        else:
            self.say(styled("success", "And the winner is..."))
            self.say(styled(
                "success",
                f"{result.winner_name} with {result.winner_points} points! Congratulations!",
            ))
        return result

    def _play_tie_breaker(self, tie_breaker: TieBreaker) -> None:
        if tie_breaker.question is None:
            return
        self._show_question(tie_breaker.question)
        while not tie_breaker.done:
            player = tie_breaker.current_player
            raw = self.ask(self._answer_prompt(player, tie_breaker.question, allow_skip=False))
            answer = parse_answer(tie_breaker.question, raw.strip())
            if answer is None:
                self.say(styled("error", "Invalid input. Please try again."))
                continue
            if tie_breaker.answer(player.id, answer):
                self.say(styled("success", "Correct!"))
            else:
                self.say(styled("error", "Wrong answer!"))

    # ── Output helpers ───────────────────────────────────────

    def _show_scoreboard(self) -> None:
        line = " | ".join(f"{p.name}: {p.points} points" for p in self.state.players)
        self.say(styled("score", f"\n{line}"))

    def _show_question(self, question: Question) -> None:
        difficulty = question.difficulty.value if question.difficulty else "n/a"
        self.say(styled("info", f"Category: {question.category.name} | Difficulty: {difficulty}"))
        self.say(styled("question", question.text))
        if question.kind is QuestionKind.MULTIPLE:
            for label, option in question.options.items():
                self.say(f"{label}: {option.text}")

    def _answer_prompt(self, player: Player, question: Question, allow_skip: bool) -> str:
        if question.kind is QuestionKind.MULTIPLE:
            prompt = f"{player.name}, please select an option (number)"
        else:
            prompt = f"{player.name}, please enter {question.label_true.lower()} or {question.label_false.lower()}"
        if allow_skip:
            prompt += f", or type '{SKIP_COMMAND}'"
        return prompt + ": "

    def _notify(self, outcome: TurnOutcome, question: Question) -> None:
        if outcome.points_awarded > 0:
            self.say(styled("success", f"Correct! You earned {outcome.points_awarded} points."))
        elif outcome.question_passed:
            self.say(styled("info", "The question has been passed to the next player."))
        else:
            self.say(styled("error", f"Wrong answer! The answer was: {question.correct_text()}"))


def parse_answer(question: Question, raw: str) -> Any:
    """
    Turn raw input into an answer for `question`.

    Returns an option label for multiple-choice questions, a bool for
    boolean questions, or None if the input is not a valid choice.
    """
    if question.kind is QuestionKind.MULTIPLE:
        label = _parse_int(raw)
        if label is None or label not in question.options:
            return None
        return label

    value = raw.strip().lower()
    if value in ("true", question.label_true.lower()):
        return True
    if value in ("false", question.label_false.lower()):
        return False
    return None


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None
