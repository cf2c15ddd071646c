"""Terminal layer — state machine, timers, command processing.

Quick start::

    from yeri.terminal import CommandProcessor, ManualScheduler, ValidatorController

    scheduler = ManualScheduler()
    ctrl = ValidatorController(scheduler)
    CommandProcessor(ctrl).submit("PAN:7123456;EXP:2405")
    scheduler.advance(ctrl.config.expiry_duration_ms)
"""

from yeri.terminal.controller import ValidatorController, ValidatorEvents
from yeri.terminal.interfaces import IScheduler, ITimerHandle, ValidatorConfig
from yeri.terminal.processor import CommandProcessor
from yeri.terminal.scheduler import ManualScheduler, ManualTimer
from yeri.terminal.state import ValidatorState

__all__ = [
    # Interfaces
    "IScheduler",
    "ITimerHandle",
    "ValidatorConfig",
    # Concrete
    "CommandProcessor",
    "ManualScheduler",
    "ManualTimer",
    "ValidatorController",
    "ValidatorEvents",
    "ValidatorState",
]
