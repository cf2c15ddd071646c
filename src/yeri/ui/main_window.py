"""ValidatorWindow — top-level window of the validator terminal."""

from __future__ import annotations

import logging
from typing import TextIO

from PyQt6.QtCore import Qt, pyqtSlot
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from yeri.core.commands import RESET_TOKEN, Unrecognized
from yeri.sources.keyboard import ESCAPE_KEY, token_for_key
from yeri.terminal.controller import ValidatorController
from yeri.terminal.interfaces import IScheduler
from yeri.terminal.processor import CommandProcessor
from yeri.terminal.state import ValidatorState
from yeri.ui.i18n import set_language, t
from yeri.ui.panels.fare_panel import FarePanel
from yeri.ui.panels.status_panel import StatusPanel
from yeri.ui.qt_scheduler import QtScheduler
from yeri.ui.settings import AppSettings
from yeri.ui.stream_worker import StreamReaderWorker
from yeri.ui.styles.theme import surface_style

_LOGGER = logging.getLogger(__name__)


class ValidatorWindow(QMainWindow):
    """Renders the controller state; keys and streams feed the processor."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        scheduler: IScheduler | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        set_language(self._settings.language)

        self.setMinimumSize(480, 600)
        self.resize(560, 720)

        self._controller = ValidatorController(
            scheduler if scheduler is not None else QtScheduler(self),
            self._settings.validator_config(),
        )
        self._processor = CommandProcessor(self._controller)
        self._stream_worker: StreamReaderWorker | None = None

        self._setup_ui()
        self._connect_controller_events()
        self._render(self._controller.state)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> ValidatorController:
        return self._controller

    @property
    def processor(self) -> CommandProcessor:
        return self._processor

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._header = QLabel()
        self._header.setObjectName("header")
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._header)

        body = QVBoxLayout()
        body.setContentsMargins(32, 32, 32, 32)
        self._surface = QFrame()
        self._surface.setObjectName("surface")
        surface_layout = QVBoxLayout(self._surface)
        surface_layout.setContentsMargins(32, 40, 32, 40)
        surface_layout.setSpacing(24)

        self._fare_panel = FarePanel(
            self._settings.fare_amount, mask=self._settings.mask_pan
        )
        surface_layout.addWidget(self._fare_panel)
        self._status_panel = StatusPanel()
        surface_layout.addWidget(self._status_panel)

        body.addStretch()
        body.addWidget(self._surface)
        body.addStretch()
        root.addLayout(body, stretch=1)

        self._footer = QLabel()
        self._footer.setObjectName("footer")
        self._footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._footer.setContentsMargins(8, 8, 8, 12)
        root.addWidget(self._footer)

        self._status = QStatusBar()
        self.setStatusBar(self._status)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._header.setText(s.header_title)
        self._footer.setText(s.footer_hint)
        self._fare_panel.retranslate_ui()
        self._status_panel.retranslate_ui()

    def _connect_controller_events(self) -> None:
        events = self._controller.events
        events.on_state_changed.append(self._render)
        events.on_command_ignored.append(self._on_command_ignored)

    def _disconnect_controller_events(self) -> None:
        events = self._controller.events
        if self._render in events.on_state_changed:
            events.on_state_changed.remove(self._render)
        if self._on_command_ignored in events.on_command_ignored:
            events.on_command_ignored.remove(self._on_command_ignored)

    # ── Command sources ──────────────────────────────────────────────────

    @pyqtSlot(str)
    def submit_token(self, token: str) -> None:
        self._processor.submit(token)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is None:
            return
        key = ESCAPE_KEY if event.key() == Qt.Key.Key_Escape else event.text()
        token = token_for_key(key)
        if token is None:
            super().keyPressEvent(event)
            return
        self.submit_token(token)

    def attach_stream(self, stream: TextIO) -> None:
        """Read command tokens from *stream* without blocking the GUI thread."""
        if self._stream_worker is not None:
            raise RuntimeError("a command stream is already attached")
        worker = StreamReaderWorker(stream)
        worker.token_received.connect(self.submit_token)
        worker.failed.connect(self._on_stream_failed)
        worker.finished.connect(self._on_stream_finished)
        self._stream_worker = worker
        worker.start()

    def _detach_stream(self) -> None:
        worker = self._stream_worker
        if worker is None:
            return
        self._stream_worker = None
        worker.stop()
        worker.token_received.disconnect(self.submit_token)
        worker.failed.disconnect(self._on_stream_failed)
        worker.finished.disconnect(self._on_stream_finished)
        if worker.is_running:
            # Blocked in a read; the daemon thread ends with the process.
            _LOGGER.debug("Command stream still blocked on read at detach")

    @pyqtSlot(str)
    def _on_stream_failed(self, message: str) -> None:
        self._status.showMessage(t().status_stream_failed.format(msg=message))

    @pyqtSlot()
    def _on_stream_finished(self) -> None:
        _LOGGER.info("Command stream ended")
        self._stream_worker = None

    # ── Rendering ────────────────────────────────────────────────────────

    def _render(self, state: ValidatorState) -> None:
        self._fare_panel.show_card(state.card)
        self._status_panel.set_status(state.status)
        self._surface.setStyleSheet(surface_style(state.status))

    def _on_command_ignored(self, command: Unrecognized) -> None:
        self._status.showMessage(f"? {command.token!r}", 2000)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._detach_stream()
        self.submit_token(RESET_TOKEN)
        self._disconnect_controller_events()
        super().closeEvent(event)
