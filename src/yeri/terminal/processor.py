"""FIFO command processor: raw tokens in, controller transitions out."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from yeri.core.commands import Unrecognized, parse_command
from yeri.terminal.controller import ValidatorController

_LOGGER = logging.getLogger(__name__)


class CommandProcessor:
    """Single entry point for command tokens from any source.

    Tokens are applied strictly in arrival order. A token submitted while
    another is being applied (for example from a state-change listener) is
    queued and applied after it, never nested.
    """

    __slots__ = ("_controller", "_queue", "_draining", "_processed")

    def __init__(self, controller: ValidatorController) -> None:
        self._controller = controller
        self._queue: deque[str] = deque()
        self._draining = False
        self._processed = 0

    @property
    def controller(self) -> ValidatorController:
        return self._controller

    @property
    def processed_count(self) -> int:
        return self._processed

    def submit(self, token: str) -> None:
        """Queue *token* and apply everything pending."""
        self._queue.append(token)
        if self._draining:
            return
        self._draining = True
        try:
            while self._queue:
                self._process(self._queue.popleft())
        finally:
            self._draining = False

    def submit_many(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.submit(token)

    def _process(self, token: str) -> None:
        command = parse_command(token)
        if isinstance(command, Unrecognized):
            _LOGGER.warning("Unrecognized command token: %r", token)
        else:
            _LOGGER.debug("Processing command %r", token)
        self._controller.apply(command)
        self._processed += 1
