"""StatusPanel — processing / success / failure indicator."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from yeri.core.enums import ValidatorStatus
from yeri.ui.i18n import t
from yeri.ui.styles.theme import STATUS_STYLES

_SPINNER_FRAMES = ("◐", "◓", "◑", "◒")


class StatusPanel(QWidget):
    """Glyph plus message for the current status; blank while idle."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._status = ValidatorStatus.IDLE
        self._frame = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(10)

        self._icon_label = QLabel()
        self._icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._icon_label.setFont(QFont("Adwaita Sans", 48, QFont.Weight.Bold))
        self._message_label = QLabel()
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message_label.setFont(QFont("Adwaita Sans", 16, QFont.Weight.DemiBold))
        layout.addWidget(self._icon_label)
        layout.addWidget(self._message_label)

        self._spinner = QTimer(self)
        self._spinner.setInterval(150)
        self._spinner.timeout.connect(self._tick)

        self._render()

    @property
    def status(self) -> ValidatorStatus:
        return self._status

    @property
    def message(self) -> str:
        return self._message_label.text()

    @property
    def glyph(self) -> str:
        return self._icon_label.text()

    @property
    def is_spinning(self) -> bool:
        return self._spinner.isActive()

    def retranslate_ui(self) -> None:
        self._render()

    def set_status(self, status: ValidatorStatus) -> None:
        self._status = status
        self._frame = 0
        if status == ValidatorStatus.AWAITING_CARD:
            self._spinner.start()
        else:
            self._spinner.stop()
        self._render()

    def _render(self) -> None:
        style = STATUS_STYLES.get(self._status)
        if style is None:
            self._icon_label.clear()
            self._message_label.clear()
            return

        if self._status == ValidatorStatus.AWAITING_CARD:
            self._icon_label.setText(_SPINNER_FRAMES[self._frame])
        else:
            self._icon_label.setText(style.glyph)
        self._icon_label.setStyleSheet(f"color: {style.color};")
        self._message_label.setStyleSheet(f"color: {style.color};")
        self._message_label.setText(self._message_for(self._status))

    @staticmethod
    def _message_for(status: ValidatorStatus) -> str:
        s = t()
        if status == ValidatorStatus.AWAITING_CARD:
            return s.status_processing
        if status == ValidatorStatus.APPROVED:
            return s.status_approved
        if status == ValidatorStatus.DECLINED:
            return s.status_declined
        return ""

    def _tick(self) -> None:
        self._frame = (self._frame + 1) % len(_SPINNER_FRAMES)
        self._render()
