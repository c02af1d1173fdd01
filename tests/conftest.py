"""Shared test fixtures for the actor REPL."""

import asyncio
import logging
from typing import Iterable, List, Optional

import pytest

from actor_repl.core.logging import get_logger


class ScriptedInput:
    """
    Async input function that replays a list of lines.

    After the script runs out it either reports end of stream (None) or,
    with block_at_end, waits forever like a terminal nobody types into.
    """

    def __init__(self, lines: Iterable[str], block_at_end: bool = False):
        self._lines: List[str] = list(lines)
        self._block_at_end = block_at_end
        self.reads = 0

    @property
    def remaining(self) -> int:
        return len(self._lines)

    async def __call__(self) -> Optional[str]:
        if self._lines:
            self.reads += 1
            return self._lines.pop(0)
        if self._block_at_end:
            await asyncio.Event().wait()
        return None


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput."""
    return ScriptedInput


@pytest.fixture
def repl_logs(caplog):
    """Capture actor_repl log records (the package logger does not propagate)."""
    logger = get_logger()
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="actor_repl")
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
        logger.setLevel(previous)

