"""Qt bridge that reads command tokens from a text stream off the GUI thread."""

from __future__ import annotations

import logging
import threading
from typing import TextIO

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from yeri.sources.stream import iter_tokens

_LOGGER = logging.getLogger(__name__)


class StreamReaderWorker(QObject):
    """Reads a stream on a daemon thread and emits one signal per token.

    The worker object itself lives on the GUI thread, so ``token_received``
    reaches GUI-thread slots queued and in arrival order. The reading
    thread is a daemon: a read blocked forever (an idle pipe or terminal)
    never keeps the process alive and is never torn down under Qt.
    """

    token_received = pyqtSignal(str)
    failed = pyqtSignal(str)
    finished = pyqtSignal()

    __slots__ = ("_stream", "_stop_event", "_thread")

    def __init__(self, stream: TextIO) -> None:
        super().__init__()
        self._stream = stream
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Begin reading on a background thread."""
        if self._thread is not None:
            raise RuntimeError("stream reader already started")
        self._thread = threading.Thread(
            target=self.run, name="yeri-command-stream", daemon=True
        )
        self._thread.start()

    @pyqtSlot()
    def run(self) -> None:
        """Read until end of stream or :meth:`stop`."""
        try:
            for token in iter_tokens(self._stream):
                if self._stop_event.is_set():
                    break
                self.token_received.emit(token)
        except (OSError, UnicodeDecodeError) as exc:
            _LOGGER.error("Command stream read failed: %s", exc)
            self.failed.emit(str(exc))
        finally:
            self.finished.emit()

    def stop(self) -> None:
        """Stop after the current line. Does not interrupt a blocking read."""
        self._stop_event.set()
