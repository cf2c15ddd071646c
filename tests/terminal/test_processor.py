"""Tests for CommandProcessor — FIFO token dispatch."""

import logging

import pytest

from yeri.core.card import CardSnapshot
from yeri.core.enums import ValidatorStatus
from yeri.terminal.controller import ValidatorController
from yeri.terminal.processor import CommandProcessor
from yeri.terminal.scheduler import ManualScheduler
from yeri.terminal.state import ValidatorState


def _make_processor() -> tuple[CommandProcessor, ManualScheduler]:
    scheduler = ManualScheduler()
    return CommandProcessor(ValidatorController(scheduler)), scheduler


class TestSubmit:
    def test_applies_parsed_token(self) -> None:
        proc, _ = _make_processor()
        proc.submit("PAN:7123456;EXP:2405")
        state = proc.controller.state
        assert state.status == ValidatorStatus.AWAITING_CARD
        assert state.card == CardSnapshot("7123456", "2405")

    def test_submit_many_in_order(self) -> None:
        proc, _ = _make_processor()
        proc.submit_many(["PAN:1;EXP:2405", "1", "0"])
        assert proc.controller.state.status == ValidatorStatus.APPROVED
        assert proc.processed_count == 3

    def test_unrecognized_logged_and_ignored(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        proc, _ = _make_processor()
        proc.submit("0")
        before = proc.controller.state
        with caplog.at_level(logging.WARNING, logger="yeri.terminal.processor"):
            proc.submit("BOGUS")
        assert proc.controller.state is before
        assert "BOGUS" in caplog.text

    def test_reentrant_submit_is_queued(self) -> None:
        proc, _ = _make_processor()
        seen: list[ValidatorStatus] = []

        def on_change(state: ValidatorState) -> None:
            seen.append(state.status)
            if state.status == ValidatorStatus.AWAITING_CARD:
                proc.submit("0")
                # Not applied yet: still inside the PAN transition.
                assert proc.controller.state.status == ValidatorStatus.AWAITING_CARD

        proc.controller.events.on_state_changed.append(on_change)
        proc.submit("PAN:1;EXP:2405")

        assert seen == [ValidatorStatus.AWAITING_CARD, ValidatorStatus.APPROVED]
        assert proc.controller.state.status == ValidatorStatus.APPROVED

    def test_recovers_after_listener_error(self) -> None:
        proc, _ = _make_processor()

        def boom(_state: ValidatorState) -> None:
            raise RuntimeError("display failed")

        proc.controller.events.on_state_changed.append(boom)
        with pytest.raises(RuntimeError):
            proc.submit("0")
        proc.controller.events.on_state_changed.remove(boom)

        proc.submit("1")
        assert proc.controller.state.status == ValidatorStatus.DECLINED

    def test_expiry_between_tokens(self) -> None:
        proc, scheduler = _make_processor()
        proc.submit("PAN:1;EXP:2405")
        scheduler.advance(proc.controller.config.expiry_duration_ms)
        assert proc.controller.state == ValidatorState.idle()
        proc.submit("1")
        assert proc.controller.state.status == ValidatorStatus.DECLINED
