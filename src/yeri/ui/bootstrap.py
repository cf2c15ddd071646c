"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from yeri.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from yeri.ui.styles.theme import APP_STYLE

    app.setApplicationName("Yeri Validator")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    settings: AppSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the validator window."""
    from PyQt6.QtWidgets import QApplication

    from yeri.ui.main_window import ValidatorWindow

    settings = settings if settings is not None else AppSettings()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = ValidatorWindow(settings)
    if settings.read_stdin:
        _LOGGER.info("Reading command tokens from standard input")
        window.attach_stream(sys.stdin)
    window.show()

    return app.exec()
