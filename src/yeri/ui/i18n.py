"""Internationalisation strings for the validator UI.

Usage::

    from yeri.ui.i18n import t, set_language

    set_language("Azerbaijani")
    print(t().prompt_scan_card)   # "Kartınızı okutun"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Window ───────────────────────────────────────────────────────────
    window_title: str
    header_title: str

    # ── Fare panel ───────────────────────────────────────────────────────
    prompt_scan_card: str
    card_badge: str
    card_expiry: str  # "Expiry: {expiry}"

    # ── Status panel ─────────────────────────────────────────────────────
    status_processing: str
    status_approved: str
    status_declined: str
    status_stream_failed: str  # "Command stream error: {msg}"

    # ── Footer ───────────────────────────────────────────────────────────
    footer_hint: str


_EN = Strings(
    window_title="YERI Validator",
    header_title="YERI Validator",
    prompt_scan_card="Scan your card",
    card_badge="Card",
    card_expiry="Expiry: {expiry}",
    status_processing="Processing payment",
    status_approved="Payment successful",
    status_declined="Payment rejected",
    status_stream_failed="Command stream error: {msg}",
    footer_hint="Test: press 'T' for card • '0' success • '1' error • ESC reset",
)

_AZ = Strings(
    window_title="YERI Validator",
    header_title="YERI Validator",
    prompt_scan_card="Kartınızı okutun",
    card_badge="Kart",
    card_expiry="Bitmə tarixi: {expiry}",
    status_processing="Prosess Emal edilir",
    status_approved="Ödəniş uğurludur",
    status_declined="Ödəniş rədd edildi",
    status_stream_failed="Əmr axını xətası: {msg}",
    footer_hint="Test: kart üçün 'T' • '0' uğur • '1' xəta • ESC sıfırla",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Azerbaijani": _AZ,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
