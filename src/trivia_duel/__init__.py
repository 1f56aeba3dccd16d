"""
trivia_duel — Two-player trivia match engine
============================================

Quick Start (console match):
    python -m trivia_duel --count 5 --file data/questions-sample.json

Driving a match from code:
    from trivia_duel import MatchService, Player
    service = MatchService()
    service.add_player(Player.create("Ada"))
    service.add_player(Player.create("Alan"))
    service.create_pool(records, round_budget=5)
    service.start()

    player = service.state.current_player
    question = service.assign_question_to_player(player.id)
    outcome = service.handle_player_answer(player.id, 2, question)

Errors
------
All engine errors derive from TriviaDuelError:

    from trivia_duel import NotFoundError, DuplicateError, InvalidOperationError
"""

from ._engine import (
    AnswerOption,
    Category,
    CategoryRegistry,
    Difficulty,
    MatchHistory,
    MatchResult,
    MatchService,
    MatchSnapshot,
    MatchState,
    MatchStatus,
    Player,
    PlayerScore,
    Question,
    QuestionKind,
    QuestionPool,
    TieBreaker,
    TurnOutcome,
    Verdict,
    WinnerDecision,
)
from .errors import (
    TriviaDuelError,
    NotFoundError,
    DuplicateError,
    InvalidOperationError,
)
from .game_flow import GameFlow
from .question_loader import read_questions_from_json
from .types import RawQuestion, TurnOutcomeDict

__all__ = [
    # Main classes
    "MatchService",
    "MatchState",
    "MatchHistory",
    "GameFlow",
    "TieBreaker",
    # Entities
    "AnswerOption",
    "Category",
    "CategoryRegistry",
    "Player",
    "Question",
    "QuestionPool",
    # Enums
    "Difficulty",
    "MatchStatus",
    "QuestionKind",
    "Verdict",
    # Results
    "MatchResult",
    "MatchSnapshot",
    "PlayerScore",
    "TurnOutcome",
    "WinnerDecision",
    # Errors
    "TriviaDuelError",
    "NotFoundError",
    "DuplicateError",
    "InvalidOperationError",
    # Loading
    "read_questions_from_json",
    # Types
    "RawQuestion",
    "TurnOutcomeDict",
]
__version__ = "1.0.0"
