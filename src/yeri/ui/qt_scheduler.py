"""Scheduler backed by single-shot ``QTimer`` objects on the GUI loop."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from yeri.terminal.interfaces import IScheduler, ITimerHandle, TimerCallback


class QtTimerHandle(ITimerHandle):
    """Cancellable handle around one single-shot ``QTimer``."""

    __slots__ = ("_timer", "_callback", "_active")

    def __init__(
        self, delay_ms: int, callback: TimerCallback, parent: QObject | None
    ) -> None:
        self._callback = callback
        self._active = True
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timeout)
        self._timer.start(delay_ms)

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._timer.stop()
        self._timer.deleteLater()

    def _on_timeout(self) -> None:
        # A timeout already queued before stop() must not run the callback.
        if not self._active:
            return
        self._active = False
        self._timer.deleteLater()
        self._callback()


class QtScheduler(IScheduler):
    """Fires callbacks on the thread that owns *parent* (the GUI thread)."""

    __slots__ = ("_parent",)

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: TimerCallback) -> QtTimerHandle:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        return QtTimerHandle(delay_ms, callback, self._parent)
