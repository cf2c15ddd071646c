"""Shared pytest fixtures: headless Qt, a virtual clock, validator windows."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from yeri.terminal.scheduler import ManualScheduler

if TYPE_CHECKING:
    from yeri.ui.main_window import ValidatorWindow

# Validator screens are usually tested on headless runners.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

WindowFactory = Callable[..., "ValidatorWindow"]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Virtual clock; expiry timers fire only on ``advance``."""
    return ManualScheduler()


@pytest.fixture
def make_window(qapp: object, scheduler: ManualScheduler) -> Iterator[WindowFactory]:
    """Build validator windows driven by the ``scheduler`` fixture.

    Keyword arguments are :class:`AppSettings` fields. Every window is
    closed afterwards so no stream reader or timer leaks into the next test.
    """
    from yeri.ui.main_window import ValidatorWindow
    from yeri.ui.settings import AppSettings

    windows: list[ValidatorWindow] = []

    def factory(**settings: object) -> ValidatorWindow:
        window = ValidatorWindow(AppSettings(**settings), scheduler=scheduler)  # type: ignore[arg-type]
        windows.append(window)
        return window

    yield factory

    for window in windows:
        window.close()


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """ValidatorWindow switches the global locale from its settings."""
    from yeri.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _drain_qt_events(request: pytest.FixtureRequest) -> Iterator[None]:
    """Flush queued stream tokens and deferred deletes after UI tests."""
    yield
    if "ui" not in Path(str(request.node.fspath)).parts:
        return
    app = request.getfixturevalue("qapp")
    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
