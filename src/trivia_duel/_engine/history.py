# Area: Engine
"""
trivia_duel._engine.history — Match history
===========================================

Keeps a stack of snapshots taken from a MatchService so the driver can
record every turn and roll the match back.
"""

import logging
from typing import List, Optional

from .service import MatchService
from .snapshot import MatchSnapshot

logger = logging.getLogger("trivia_duel.history")


class MatchHistory:
    """Snapshot stack for one match service."""

    def __init__(self, service: MatchService):
        self._service = service
        self._snapshots: List[MatchSnapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def backup(self) -> MatchSnapshot:
        snapshot = self._service.save()
        self._snapshots.append(snapshot)
        logger.debug(f"Saved snapshot: {snapshot.name}")
        return snapshot

    def undo(self) -> Optional[MatchSnapshot]:
        """Restore the most recent snapshot and drop it from the stack."""
        if not self._snapshots:
            return None
        snapshot = self._snapshots.pop()
        self._service.restore(snapshot)
        return snapshot

    def names(self) -> List[str]:
        return [s.name for s in self._snapshots]
