"""FarePanel — fare amount while idle, card details while one is presented."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QStackedWidget, QVBoxLayout, QWidget

from yeri.core.card import CardSnapshot, mask_pan
from yeri.ui.i18n import t


class FarePanel(QStackedWidget):
    """Two pages: the fare prompt and the presented card."""

    _FARE_PAGE = 0
    _CARD_PAGE = 1

    def __init__(
        self,
        fare_amount: str,
        *,
        mask: bool = False,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._mask = mask
        self._card: CardSnapshot | None = None

        # Fare page
        fare_page = QWidget()
        fare_layout = QVBoxLayout(fare_page)
        fare_layout.setSpacing(8)
        self._fare_label = QLabel(fare_amount)
        self._fare_label.setObjectName("fare")
        self._fare_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._prompt_label = QLabel()
        self._prompt_label.setObjectName("muted")
        self._prompt_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        fare_layout.addWidget(self._fare_label)
        fare_layout.addWidget(self._prompt_label)

        # Card page
        card_page = QWidget()
        card_layout = QVBoxLayout(card_page)
        card_layout.setSpacing(8)
        badge_row = QHBoxLayout()
        badge_row.addStretch()
        self._badge_label = QLabel()
        self._badge_label.setObjectName("badge")
        badge_row.addWidget(self._badge_label)
        badge_row.addStretch()
        self._pan_label = QLabel()
        self._pan_label.setObjectName("pan")
        self._pan_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._expiry_label = QLabel()
        self._expiry_label.setObjectName("muted")
        self._expiry_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addLayout(badge_row)
        card_layout.addWidget(self._pan_label)
        card_layout.addWidget(self._expiry_label)

        self.addWidget(fare_page)
        self.addWidget(card_page)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._prompt_label.setText(s.prompt_scan_card)
        self._badge_label.setText(s.card_badge)
        self._render_card()

    @property
    def is_showing_card(self) -> bool:
        return self.currentIndex() == self._CARD_PAGE

    def show_card(self, card: CardSnapshot | None) -> None:
        """Show *card*, or the fare prompt when *card* is ``None``."""
        self._card = card
        self._render_card()
        self.setCurrentIndex(self._FARE_PAGE if card is None else self._CARD_PAGE)

    def _render_card(self) -> None:
        if self._card is None:
            self._pan_label.clear()
            self._expiry_label.clear()
            return
        pan = mask_pan(self._card.pan) if self._mask else self._card.pan
        self._pan_label.setText(pan)
        self._expiry_label.setText(
            t().card_expiry.format(expiry=self._card.display_expiry)
        )
