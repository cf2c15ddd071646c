"""Enumerations shared across the validator."""

from __future__ import annotations

from enum import IntEnum, auto


class ValidatorStatus(IntEnum):
    """Finite-state-machine states of the validator terminal."""

    IDLE = auto()
    AWAITING_CARD = auto()
    APPROVED = auto()
    DECLINED = auto()
