"""ValidatorState — immutable snapshot of the terminal."""

from __future__ import annotations

from dataclasses import dataclass

from yeri.core.card import CardSnapshot
from yeri.core.enums import ValidatorStatus
from yeri.terminal.interfaces import ITimerHandle


@dataclass(frozen=True, slots=True)
class ValidatorState:
    """Status, the card on display, and the timer that will clear it.

    ``card`` and ``pending_expiry`` are set exactly when ``status`` is
    :attr:`ValidatorStatus.AWAITING_CARD`.
    """

    status: ValidatorStatus = ValidatorStatus.IDLE
    card: CardSnapshot | None = None
    pending_expiry: ITimerHandle | None = None

    @classmethod
    def idle(cls) -> ValidatorState:
        return cls()

    @property
    def is_awaiting_card(self) -> bool:
        return self.status == ValidatorStatus.AWAITING_CARD

    @property
    def display_expiry(self) -> str:
        """Card expiry in ``MM/YY`` order, or ``""`` without a card."""
        if self.card is None:
            return ""
        return self.card.display_expiry

    def is_consistent(self) -> bool:
        awaiting = self.is_awaiting_card
        return (self.card is not None) == awaiting and (
            self.pending_expiry is not None
        ) == awaiting
