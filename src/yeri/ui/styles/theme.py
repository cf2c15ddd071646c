"""Visual theme constants and QSS styles for the validator screen."""

from __future__ import annotations

from dataclasses import dataclass

from yeri.core.enums import ValidatorStatus


@dataclass(frozen=True)
class StatusStyle:
    """Glyph and colour shown for one validator status."""

    glyph: str
    color: str


STATUS_STYLES: dict[ValidatorStatus, StatusStyle] = {
    ValidatorStatus.AWAITING_CARD: StatusStyle("◐", "#4aa3df"),  # processing blue
    ValidatorStatus.APPROVED: StatusStyle("✔", "#3a9d5d"),
    ValidatorStatus.DECLINED: StatusStyle("✖", "#c0392b"),
}

# Card surface border per status; IDLE uses the neutral border.
SURFACE_BORDER: dict[ValidatorStatus, str] = {
    ValidatorStatus.IDLE: "#3c3c3c",
    ValidatorStatus.AWAITING_CARD: "#4aa3df",
    ValidatorStatus.APPROVED: "#3a9d5d",
    ValidatorStatus.DECLINED: "#c0392b",
}


def surface_style(status: ValidatorStatus) -> str:
    """QSS for the central card surface."""
    return (
        "QFrame#surface { background: #242424; "
        f"border: 2px solid {SURFACE_BORDER[status]}; border-radius: 12px; }}"
    )


APP_STYLE = """
QMainWindow {
    background: #1b1b1b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#header {
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
                                stop:0 #1f5fa8, stop:1 #2c8ad8);
    color: white;
    font-size: 28px;
    font-weight: bold;
    padding: 18px;
}

QLabel#fare {
    color: #f5c242;
    font-size: 56px;
    font-weight: bold;
}

QLabel#pan {
    font-size: 36px;
    font-weight: bold;
}

QLabel#muted {
    color: #9a9a9a;
    font-size: 18px;
}

QLabel#badge {
    background: #333;
    color: #4aa3df;
    border-radius: 6px;
    padding: 4px 14px;
    font-size: 16px;
}

QLabel#footer {
    color: #808080;
    font-size: 12px;
}
"""
