"""Command tokens sent by the card reader / controller.

Grammar::

    PAN:<digits>;EXP:<4 digits>   -> PresentCard
    0                             -> Approve
    1                             -> Decline
    RESET | <ESC>                 -> Reset
    anything else                 -> Unrecognized

Parsing is permissive: a truncated or malformed ``PAN`` frame still yields
a :class:`PresentCard`, with the bad sub-field degraded to ``""``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

APPROVE_TOKEN = "0"
DECLINE_TOKEN = "1"
RESET_TOKEN = "RESET"
ESCAPE_TOKEN = "\x1b"
RESET_TOKENS: frozenset[str] = frozenset({RESET_TOKEN, ESCAPE_TOKEN})

# Synthetic card used by the keyboard test binding.
TEST_CARD_TOKEN = "PAN:7123456;EXP:2405"

_PAN_PREFIX = "PAN:"
_FIELD_SEP = ";"
_NAME_SEP = ":"
_EXPIRY_FIELD = "EXP"
_EXPIRY_LEN = 4


# ── Command variants ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PresentCard:
    """A card was read; show it and wait for the authorization outcome."""

    pan: str
    expiry: str = ""


@dataclass(frozen=True, slots=True)
class Approve:
    """Payment approved."""


@dataclass(frozen=True, slots=True)
class Decline:
    """Payment rejected."""


@dataclass(frozen=True, slots=True)
class Reset:
    """Return the terminal to idle."""


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Input that matched no rule. Kept only for diagnostics."""

    token: str


ParsedCommand: TypeAlias = PresentCard | Approve | Decline | Reset | Unrecognized


# ── Parser ──────────────────────────────────────────────────────────────────


def parse_command(token: str) -> ParsedCommand:
    """Turn one raw token into a :data:`ParsedCommand`. Never raises."""
    if token.startswith(_PAN_PREFIX):
        return _parse_card(token)
    if token == APPROVE_TOKEN:
        return Approve()
    if token == DECLINE_TOKEN:
        return Decline()
    if token in RESET_TOKENS:
        return Reset()
    return Unrecognized(token)


def _parse_card(token: str) -> PresentCard:
    fields = token.split(_FIELD_SEP)

    pan = fields[0][len(_PAN_PREFIX) :]
    if not _is_digits(pan):
        pan = ""

    expiry = ""
    if len(fields) > 1:
        name, sep, value = fields[1].partition(_NAME_SEP)
        if (
            sep
            and name == _EXPIRY_FIELD
            and len(value) == _EXPIRY_LEN
            and _is_digits(value)
        ):
            expiry = value

    return PresentCard(pan=pan, expiry=expiry)


def _is_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return bool(value) and value.isascii() and value.isdigit()
