"""Keyboard bindings used to drive the terminal without a reader."""

from __future__ import annotations

from yeri.core.commands import (
    APPROVE_TOKEN,
    DECLINE_TOKEN,
    RESET_TOKEN,
    TEST_CARD_TOKEN,
)

ESCAPE_KEY = "Escape"

KEY_BINDINGS: dict[str, str] = {
    "0": APPROVE_TOKEN,
    "1": DECLINE_TOKEN,
    "t": TEST_CARD_TOKEN,
    "T": TEST_CARD_TOKEN,
    ESCAPE_KEY: RESET_TOKEN,
}


def token_for_key(key: str) -> str | None:
    """Return the command token bound to *key*, or ``None`` if unbound.

    *key* is either the typed text of the key or a key name such as
    ``"Escape"``.
    """
    return KEY_BINDINGS.get(key)
