# Area: Shared Tests
"""Shared pytest configuration."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo any setup_logging() call so caplog keeps seeing package logs."""
    pkg_logger = logging.getLogger("trivia_duel")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    propagate = pkg_logger.propagate
    yield
    for handler in pkg_logger.handlers:
        if handler not in handlers:
            handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate
