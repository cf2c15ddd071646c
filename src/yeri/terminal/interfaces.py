"""Abstract interfaces and configuration for the terminal layer.

The controller depends on these ABCs, not on a concrete timer backend:
tests drive a virtual clock, the GUI drives Qt timers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

TimerCallback = Callable[[], None]


# ── Configuration ────────────────────────────────────────────────────────────


class ValidatorConfig:
    """Immutable validator configuration.

    Args:
        expiry_duration_ms: How long a presented card stays on screen
            before the terminal falls back to idle.
    """

    __slots__ = ("expiry_duration_ms",)

    DEFAULT_EXPIRY_MS = 5000

    def __init__(self, expiry_duration_ms: int = DEFAULT_EXPIRY_MS) -> None:
        if expiry_duration_ms <= 0:
            raise ValueError(
                f"expiry_duration_ms must be positive, got {expiry_duration_ms}"
            )
        self.expiry_duration_ms = expiry_duration_ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatorConfig):
            return NotImplemented
        return self.expiry_duration_ms == other.expiry_duration_ms

    def __hash__(self) -> int:
        return hash(self.expiry_duration_ms)

    def __repr__(self) -> str:
        return f"ValidatorConfig(expiry_duration_ms={self.expiry_duration_ms})"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITimerHandle(ABC):
    """A scheduled callback that can be cancelled."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True until the timer has fired or been cancelled."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call repeatedly."""


class IScheduler(ABC):
    """Source of one-shot timers."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: TimerCallback) -> ITimerHandle:
        """Run *callback* once after *delay_ms* milliseconds."""
