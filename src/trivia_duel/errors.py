# Area: Shared
"""
trivia_duel.errors — Custom exception classes
=============================================

Defines the exception hierarchy raised by the match engine.
Each exception keeps a context dict for structured logging.

    NotFoundError          unknown player / question / category id
    DuplicateError         player or category registered twice
    InvalidOperationError  precondition or match-status violation
"""

from __future__ import annotations
from typing import Any, Dict, Optional


class TriviaDuelError(Exception):
    """Base exception for all trivia_duel errors."""

    error_type = "TRIVIA_DUEL_ERROR"
    default_message = "Trivia duel error"

    def __init__(self, message: Optional[str] = None, **context: Any):
        self.message = message or self.default_message
        self.context: Dict[str, Any] = context
        super().__init__(self.message)

    def format_error_log(self) -> str:
        return _format_error_block(self.error_type, self.message, self.context)


class NotFoundError(TriviaDuelError):
    """Raised when a referenced player, question or category does not exist."""

    error_type = "NOT_FOUND"
    default_message = "Not found"


class DuplicateError(TriviaDuelError):
    """Raised when an id or name conflicts with an existing entry."""

    error_type = "DUPLICATE"
    default_message = "Duplicate entity"


class InvalidOperationError(TriviaDuelError):
    """Raised on a precondition violation (wrong status, out of turn, ...)."""

    error_type = "INVALID_OPERATION"
    default_message = "Invalid operation"


def _format_error_block(
    error_type: str,
    message: str,
    context: Dict[str, Any],
) -> str:
    """Format a structured error block for the log."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " MATCH ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Message:      {message}",
    ]

    if context:
        lines.append("")
        lines.append(" ── CONTEXT " + "─" * 52)
        for key, value in context.items():
            lines.append(f" • {key}: {value!r}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
