"""Deterministic scheduler driven by a virtual clock."""

from __future__ import annotations

import heapq
import itertools

from yeri.terminal.interfaces import IScheduler, ITimerHandle, TimerCallback


class ManualTimer(ITimerHandle):
    """Timer handle owned by :class:`ManualScheduler`."""

    __slots__ = ("_callback", "_deadline_ms", "_active")

    def __init__(self, deadline_ms: int, callback: TimerCallback) -> None:
        self._deadline_ms = deadline_ms
        self._callback = callback
        self._active = True

    @property
    def deadline_ms(self) -> int:
        return self._deadline_ms

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def _fire(self) -> None:
        if not self._active:
            return
        self._active = False
        self._callback()


class ManualScheduler(IScheduler):
    """Scheduler whose time only moves when :meth:`advance` is called.

    Used by tests and headless runs. Timers coming due in the same
    :meth:`advance` call fire in deadline order (ties in arming order).
    """

    __slots__ = ("_now_ms", "_queue", "_seq")

    def __init__(self, start_ms: int = 0) -> None:
        self._now_ms = start_ms
        self._queue: list[tuple[int, int, ManualTimer]] = []
        self._seq = itertools.count()

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending_count(self) -> int:
        """Number of armed timers that have neither fired nor been cancelled."""
        return sum(1 for _, _, timer in self._queue if timer.is_active)

    def schedule(self, delay_ms: int, callback: TimerCallback) -> ManualTimer:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")
        timer = ManualTimer(self._now_ms + delay_ms, callback)
        heapq.heappush(self._queue, (timer.deadline_ms, next(self._seq), timer))
        return timer

    def advance(self, ms: int) -> None:
        """Move the clock forward by *ms*, firing every timer that comes due."""
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards ({ms} ms)")
        target = self._now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            self._now_ms = deadline
            timer._fire()
        self._now_ms = target
