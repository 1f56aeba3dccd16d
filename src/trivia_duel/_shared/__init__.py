# Area: Shared
"""
Shared utilities used by the engine, the driver and the CLI.

This package contains:
- Logging configuration
- Console display helpers
"""

from .display import HOW_TO_PLAY, styled
from .logging_config import JSONFormatter, TerminalFormatter, log_error, setup_logging

__all__ = [
    "HOW_TO_PLAY",
    "styled",
    "JSONFormatter",
    "TerminalFormatter",
    "log_error",
    "setup_logging",
]
