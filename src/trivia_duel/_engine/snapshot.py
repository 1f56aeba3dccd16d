# Area: Engine
"""
trivia_duel._engine.snapshot — Match state snapshots
====================================================

Captures a MatchState as plain, serializable data and rebuilds a new
MatchState from it. Restoring always creates fresh Player and Question
objects, so live state never shares anything with a snapshot.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .category import CategoryRegistry
from .enums import Difficulty, MatchStatus, QuestionKind
from .player import Player
from .pool import QuestionPool
from .question import AnswerOption, Question
from .state import MatchState
from .state_machine import MatchStateMachine


@dataclass(frozen=True)
class MatchSnapshot:
    """Point-in-time copy of a match."""

    name: str
    captured_at: str
    data: Mapping[str, Any]

    def get_state(self) -> Dict[str, Any]:
        """Return a private deep copy of the captured data."""
        return copy.deepcopy(dict(self.data))


def capture_snapshot(state: MatchState) -> MatchSnapshot:
    """Build an immutable snapshot of `state`."""
    data = {
        "match_id": state.id,
        "status": state.status.value,
        "created_at": state.created_at,
        "players": [_player_snapshot(p) for p in state.players],
        "pool": [_question_snapshot(q) for q in state.pool],
        "in_play": [_question_snapshot(q) for q in state.in_play.values()],
        "assigned": dict(state.assigned),
        "current_player_id": state.current_player_id,
        "current_round": state.current_round,
        "questions_resolved": state.questions_resolved,
        "total_rounds": state.total_rounds,
        "passed_question_id": state.passed_question_id,
    }
    return MatchSnapshot(
        name=f"Match - round #{state.current_round}",
        captured_at=datetime.now(timezone.utc).isoformat(),
        data=MappingProxyType(data),
    )


def restore_snapshot(snapshot: MatchSnapshot) -> Tuple[MatchState, CategoryRegistry]:
    """
    Rebuild a MatchState from `snapshot`.

    Categories go into a new registry holding only the captured ones,
    so nothing outside the returned pair is touched.
    """
    data = snapshot.get_state()
    registry = CategoryRegistry()

    pool = QuestionPool()
    for entry in data["pool"]:
        pool.add(_question_from(entry, registry))
    in_play = {}
    for entry in data["in_play"]:
        question = _question_from(entry, registry)
        in_play[question.id] = question

    state = MatchState(
        id=data["match_id"],
        players=[_player_from(entry) for entry in data["players"]],
        pool=pool,
        in_play=in_play,
        assigned=dict(data["assigned"]),
        current_player_id=data["current_player_id"],
        current_round=data["current_round"],
        questions_resolved=data["questions_resolved"],
        total_rounds=data["total_rounds"],
        passed_question_id=data["passed_question_id"],
        machine=MatchStateMachine(MatchStatus(data["status"])),
        created_at=data["created_at"],
    )
    return state, registry


# ── Players ──────────────────────────────────────────────────

def _player_snapshot(player: Player) -> dict:
    return {
        "id": player.id,
        "name": player.name,
        "points": player.points,
        "skips": player.skips,
        "created_at": player.created_at,
    }


def _player_from(entry: dict) -> Player:
    return Player(
        id=entry["id"],
        name=entry["name"],
        points=entry["points"],
        skips=entry["skips"],
        created_at=entry["created_at"],
    )


# ── Questions ────────────────────────────────────────────────

def _question_snapshot(question: Question) -> dict:
    return {
        "id": question.id,
        "kind": question.kind.value,
        "text": question.text,
        "category": question.category.to_dict(),
        "points": question.points,
        "difficulty": question.difficulty.value if question.difficulty else None,
        "assigned_to": question.assigned_to,
        "answered_by": question.answered_by,
        "options": [
            {"label": label, "text": option.text, "is_correct": option.is_correct}
            for label, option in question.options.items()
        ],
        "correct_answer": question.correct_answer,
        "label_true": question.label_true,
        "label_false": question.label_false,
        "created_at": question.created_at,
    }


def _question_from(entry: dict, registry: CategoryRegistry) -> Question:
    category = registry.register(entry["category"]["id"], entry["category"]["name"])
    return Question(
        id=entry["id"],
        kind=QuestionKind(entry["kind"]),
        text=entry["text"],
        category=category,
        points=entry["points"],
        difficulty=Difficulty(entry["difficulty"]) if entry["difficulty"] else None,
        assigned_to=entry["assigned_to"],
        answered_by=entry["answered_by"],
        options={
            o["label"]: AnswerOption(text=o["text"], is_correct=o["is_correct"])
            for o in entry["options"]
        },
        correct_answer=entry["correct_answer"],
        label_true=entry["label_true"],
        label_false=entry["label_false"],
        created_at=entry["created_at"],
    )
