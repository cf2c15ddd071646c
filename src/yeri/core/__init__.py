"""Core value types: statuses, card snapshots and reader commands.

Everything here is pure and side-effect free.
"""

from yeri.core.card import CardSnapshot, format_expiry, mask_pan
from yeri.core.commands import (
    APPROVE_TOKEN,
    DECLINE_TOKEN,
    RESET_TOKENS,
    TEST_CARD_TOKEN,
    Approve,
    Decline,
    ParsedCommand,
    PresentCard,
    Reset,
    Unrecognized,
    parse_command,
)
from yeri.core.enums import ValidatorStatus

__all__ = [
    "APPROVE_TOKEN",
    "DECLINE_TOKEN",
    "RESET_TOKENS",
    "TEST_CARD_TOKEN",
    "Approve",
    "CardSnapshot",
    "Decline",
    "ParsedCommand",
    "PresentCard",
    "Reset",
    "Unrecognized",
    "ValidatorStatus",
    "format_expiry",
    "mask_pan",
    "parse_command",
]
