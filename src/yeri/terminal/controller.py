"""ValidatorController — the validator status state machine.

Consumes parsed commands, owns the single expiry timer, and notifies
listeners through simple callbacks so the display / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from yeri.core.card import CardSnapshot
from yeri.core.commands import (
    Approve,
    Decline,
    ParsedCommand,
    PresentCard,
    Reset,
    Unrecognized,
)
from yeri.core.enums import ValidatorStatus
from yeri.terminal.interfaces import IScheduler, ValidatorConfig
from yeri.terminal.state import ValidatorState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[ValidatorState], None]
IgnoredCallback = Callable[[Unrecognized], None]


@dataclass
class ValidatorEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_command_ignored: list[IgnoredCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class ValidatorController:
    """Applies commands to the validator state and arms the expiry timer.

    Every transition first cancels the pending timer and drops the card,
    then applies its own effect, so a card and a timer only ever exist
    together with :attr:`ValidatorStatus.AWAITING_CARD`.

    Thread-safety: all calls, timer callbacks included, must arrive on one
    thread. The Qt scheduler guarantees this by firing on the GUI loop.
    """

    __slots__ = ("_scheduler", "_config", "_state", "_generation", "events")

    def __init__(
        self,
        scheduler: IScheduler,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._config = config if config is not None else ValidatorConfig()
        self._state = ValidatorState.idle()
        self._generation = 0
        self.events = ValidatorEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> ValidatorState:
        return self._state

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    # ── Commands ─────────────────────────────────────────────────────────

    def apply(self, command: ParsedCommand) -> None:
        """Apply one parsed command. Never raises."""
        if isinstance(command, Unrecognized):
            _LOGGER.debug("Ignoring unrecognized command %r", command.token)
            self._emit_ignored(command)
            return

        self._cancel_pending()

        if isinstance(command, PresentCard):
            self._present_card(command)
        elif isinstance(command, Approve):
            self._transition(ValidatorState(ValidatorStatus.APPROVED))
        elif isinstance(command, Decline):
            self._transition(ValidatorState(ValidatorStatus.DECLINED))
        elif isinstance(command, Reset):
            self._transition(ValidatorState.idle())

    # ── Internal helpers ─────────────────────────────────────────────────

    def _present_card(self, command: PresentCard) -> None:
        self._generation += 1
        generation = self._generation
        handle = self._scheduler.schedule(
            self._config.expiry_duration_ms,
            lambda: self._on_expiry(generation),
        )
        self._transition(
            ValidatorState(
                ValidatorStatus.AWAITING_CARD,
                card=CardSnapshot(pan=command.pan, expiry=command.expiry),
                pending_expiry=handle,
            )
        )

    def _on_expiry(self, generation: int) -> None:
        if generation != self._generation or not self._state.is_awaiting_card:
            _LOGGER.debug("Discarding stale expiry timer #%d", generation)
            return
        _LOGGER.debug("Card display expired (timer #%d)", generation)
        self._cancel_pending()
        self._transition(ValidatorState.idle())

    def _cancel_pending(self) -> None:
        """Cancel the armed timer and drop the card shown with it."""
        pending = self._state.pending_expiry
        if pending is None and self._state.card is None:
            return
        if pending is not None:
            pending.cancel()
        # Stale callbacks already queued by the backend are rejected by
        # the generation check in _on_expiry.
        self._generation += 1
        self._state = ValidatorState(self._state.status)

    def _transition(self, new_state: ValidatorState) -> None:
        old_status = self._state.status
        changed = new_state != self._state
        self._state = new_state
        if old_status != new_state.status:
            _LOGGER.debug(
                "Validator %s -> %s", old_status.name, new_state.status.name
            )
        if changed:
            self._emit_state_changed()

    def _emit_state_changed(self) -> None:
        for cb in list(self.events.on_state_changed):
            cb(self._state)

    def _emit_ignored(self, command: Unrecognized) -> None:
        for cb in list(self.events.on_command_ignored):
            cb(command)
