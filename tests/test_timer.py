"""Tests for the timer state machine."""

from __future__ import annotations

import pytest

from pomoterm.models import AppConfig, Phase
from pomoterm.timer import PomodoroTimer


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(work_duration=25, short_break=5, long_break=15, cycles_before_long=4)


@pytest.fixture
def timer(config: AppConfig) -> PomodoroTimer:
    return PomodoroTimer(config, now=0.0)


def _running(timer: PomodoroTimer, now: float) -> PomodoroTimer:
    timer.toggle_pause(now)
    return timer


class TestInitialState:
    def test_starts_paused_in_work(self, timer: PomodoroTimer) -> None:
        assert timer.phase is Phase.WORK
        assert timer.paused is True
        assert timer.cycles_completed == 0
        assert timer.remaining == 25 * 60


class TestAdvance:
    def test_paused_does_not_count(self, timer: PomodoroTimer) -> None:
        timer.advance(100.0)
        assert timer.remaining == 1500
        assert timer.last_tick == 0.0

    def test_running_subtracts_elapsed(self, timer: PomodoroTimer) -> None:
        _running(timer, 10.0)
        timer.advance(12.5)
        assert timer.remaining == pytest.approx(1497.5)
        assert timer.last_tick == 12.5

    def test_monotonic_and_non_negative(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        previous = timer.remaining
        for now in [0.0, 0.3, 1.0, 60.0, 600.0, 1499.9]:
            timer.advance(now)
            assert 0 <= timer.remaining <= previous
            previous = timer.remaining

    def test_clock_going_backwards_charges_nothing(self, timer: PomodoroTimer) -> None:
        _running(timer, 50.0)
        timer.advance(40.0)
        assert timer.remaining == 1500

    def test_expiry_moves_to_short_break(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.advance(1500.0)
        assert timer.phase is Phase.SHORT_BREAK
        assert timer.remaining == 5 * 60
        assert timer.paused is True
        assert timer.cycles_completed == 1

    def test_overshoot_is_discarded(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.advance(5000.0)
        assert timer.phase is Phase.SHORT_BREAK
        assert timer.remaining == 300


class TestPause:
    def test_resume_charges_no_phantom_time(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.advance(10.0)
        timer.toggle_pause(10.0)
        timer.advance(500.0)
        timer.toggle_pause(500.0)
        timer.advance(500.0)
        assert timer.remaining == pytest.approx(1490.0)

    def test_toggle_returns_new_state(self, timer: PomodoroTimer) -> None:
        assert timer.toggle_pause(1.0) is False
        assert timer.toggle_pause(2.0) is True

    def test_resync_drops_unticked_time(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.resync(300.0)
        timer.advance(301.0)
        assert timer.remaining == pytest.approx(1499.0)


class TestAdvancePhase:
    def test_work_to_short_break(self, timer: PomodoroTimer) -> None:
        assert timer.advance_phase() is Phase.SHORT_BREAK
        assert timer.cycles_completed == 1

    def test_work_to_long_break_at_threshold(self, timer: PomodoroTimer) -> None:
        timer.cycles_completed = 3
        assert timer.advance_phase() is Phase.LONG_BREAK
        assert timer.cycles_completed == 0
        assert timer.remaining == 15 * 60

    @pytest.mark.parametrize("phase", [Phase.SHORT_BREAK, Phase.LONG_BREAK])
    @pytest.mark.parametrize("cycles", [0, 2, 3])
    def test_breaks_return_to_work(self, timer: PomodoroTimer, phase: Phase, cycles: int) -> None:
        timer.phase = phase
        timer.cycles_completed = cycles
        assert timer.advance_phase() is Phase.WORK
        assert timer.remaining == 25 * 60
        assert timer.cycles_completed == cycles

    def test_skip_pauses_running_timer(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.advance_phase()
        assert timer.paused is True

    def test_single_cycle_goes_straight_to_long_break(self) -> None:
        timer = PomodoroTimer(AppConfig(cycles_before_long=1), now=0.0)
        assert timer.advance_phase() is Phase.LONG_BREAK
        assert timer.cycles_completed == 0

    def test_four_work_expiries(self, timer: PomodoroTimer) -> None:
        now = 0.0
        landed: list[tuple[Phase, int]] = []
        for _ in range(4):
            assert timer.phase is Phase.WORK
            _running(timer, now)
            now += timer.remaining
            timer.advance(now)
            landed.append((timer.phase, timer.cycles_completed))
            if timer.phase is Phase.SHORT_BREAK:
                _running(timer, now)
                now += timer.remaining
                timer.advance(now)
        assert landed == [
            (Phase.SHORT_BREAK, 1),
            (Phase.SHORT_BREAK, 2),
            (Phase.SHORT_BREAK, 3),
            (Phase.LONG_BREAK, 0),
        ]

    def test_new_durations_apply_on_next_phase(self, timer: PomodoroTimer, config: AppConfig) -> None:
        config.short_break = 9
        timer.advance_phase()
        assert timer.remaining == 9 * 60


class TestReset:
    def test_reset_from_anywhere(self, timer: PomodoroTimer) -> None:
        _running(timer, 0.0)
        timer.phase = Phase.LONG_BREAK
        timer.cycles_completed = 2
        timer.remaining = 12.0
        timer.reset()
        assert (timer.phase, timer.cycles_completed, timer.remaining, timer.paused) == (
            Phase.WORK,
            0,
            1500,
            True,
        )

    def test_reset_is_idempotent(self, timer: PomodoroTimer) -> None:
        timer.reset()
        first = timer.snapshot()
        timer.reset()
        assert timer.snapshot() == first


class TestSnapshot:
    def test_snapshot_reflects_state(self, timer: PomodoroTimer) -> None:
        timer.advance_phase()
        snap = timer.snapshot()
        assert snap.phase is Phase.SHORT_BREAK
        assert snap.cycles_completed == 1
        assert snap.cycles_before_long == 4
        assert snap.remaining_seconds == 300
        assert snap.paused is True
