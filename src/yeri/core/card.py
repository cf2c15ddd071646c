"""Card snapshot value object and display helpers."""

from __future__ import annotations

from dataclasses import dataclass

_MASK_CHAR = "•"


@dataclass(frozen=True, slots=True)
class CardSnapshot:
    """Card data captured from a ``PAN`` command.

    ``pan`` is an opaque digit string (no checksum validation).
    ``expiry`` is the raw ``YYMM`` token as received, or ``""``.
    """

    pan: str
    expiry: str = ""

    @property
    def display_expiry(self) -> str:
        return format_expiry(self.expiry)


def format_expiry(expiry: str) -> str:
    """Reorder a ``YYMM`` expiry into ``MM/YY``.

    Anything that is not exactly four characters is returned unchanged.
    """
    if len(expiry) == 4:
        return f"{expiry[2:]}/{expiry[:2]}"
    return expiry


def mask_pan(pan: str, visible: int = 4) -> str:
    """Hide all but the last *visible* characters of *pan*."""
    if visible < 0:
        visible = 0
    if len(pan) <= visible:
        return pan
    hidden = len(pan) - visible
    return _MASK_CHAR * hidden + pan[hidden:]
