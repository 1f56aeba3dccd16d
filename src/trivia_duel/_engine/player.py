# Area: Engine
"""
trivia_duel._engine.player — Player entity
==========================================

Players get their id and creation timestamp from `new_identity()`.
Points and skips are only changed through the match service.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import NamedTuple
import uuid

from ..errors import InvalidOperationError

DEFAULT_SKIPS = 2


class Identity(NamedTuple):
    id: str
    created_at: str


def new_identity() -> Identity:
    """Generate a fresh id + UTC creation timestamp pair."""
    return Identity(
        id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc).isoformat(),
    )


@dataclass
class Player:
    """
    A human participant in a match.

    Attributes:
        id: Unique player id
        name: Display name
        points: Total points scored (never negative)
        skips: Skip lifelines left (never increases)
        created_at: ISO timestamp of creation
    """
    id: str
    name: str
    points: int = 0
    skips: int = DEFAULT_SKIPS
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def create(cls, name: str, skips: int = DEFAULT_SKIPS) -> "Player":
        identity = new_identity()
        return cls(id=identity.id, name=name, skips=skips, created_at=identity.created_at)

    def add_points(self, amount: int) -> None:
        if amount < 0:
            raise InvalidOperationError(
                "points awarded cannot be negative", player_id=self.id, amount=amount
            )
        self.points += amount

    def use_skip(self) -> int:
        """Consume one skip and return how many are left."""
        if self.skips <= 0:
            raise InvalidOperationError(
                "You have no skips left! Please answer the question.",
                player_id=self.id,
            )
        self.skips -= 1
        return self.skips
