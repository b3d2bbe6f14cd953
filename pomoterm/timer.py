"""Pomodoro state machine: phase, cycle count and countdown."""

from __future__ import annotations

import logging

from pomoterm.models import AppConfig, Phase, TimerSnapshot

log = logging.getLogger(__name__)


class PomodoroTimer:
    """Countdown for one linear work/break cycle.

    Time is supplied by the caller as monotonic seconds, so the machine can
    be driven by a fake clock in tests. A new phase always starts paused.
    """

    def __init__(self, config: AppConfig, now: float) -> None:
        self.config = config
        self.phase: Phase = Phase.WORK
        self.cycles_completed: int = 0
        self.remaining: float = config.duration_for(Phase.WORK)
        self.paused: bool = True
        self.last_tick: float = now

    def advance(self, now: float) -> None:
        """Charge the wall-clock time since the last tick against the countdown."""
        if self.paused:
            return
        elapsed = max(0.0, now - self.last_tick)
        self.last_tick = now
        if elapsed < self.remaining:
            self.remaining -= elapsed
        else:
            self.remaining = 0.0
            self.advance_phase()

    def advance_phase(self) -> Phase:
        """Move to the next phase (on expiry or manual skip)."""
        if self.phase is Phase.WORK:
            if self.cycles_completed + 1 >= self.config.cycles_before_long:
                self.phase = Phase.LONG_BREAK
                self.cycles_completed = 0
            else:
                self.phase = Phase.SHORT_BREAK
                self.cycles_completed += 1
        else:
            self.phase = Phase.WORK
        self.remaining = self.config.duration_for(self.phase)
        self.paused = True
        log.info("Phase changed to %s (cycles %d)", self.phase.value, self.cycles_completed)
        return self.phase

    def reset(self) -> None:
        """Return to a fresh, paused work phase with no cycles counted."""
        self.phase = Phase.WORK
        self.cycles_completed = 0
        self.remaining = self.config.duration_for(Phase.WORK)
        self.paused = True
        log.info("Timer reset")

    def toggle_pause(self, now: float) -> bool:
        """Flip the paused flag. Returns the new value."""
        self.paused = not self.paused
        if not self.paused:
            # Start measuring from the moment of resuming.
            self.last_tick = now
        log.debug("Timer %s", "paused" if self.paused else "running")
        return self.paused

    def resync(self, now: float) -> None:
        """Discard time that passed while the countdown was not being ticked."""
        self.last_tick = now

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            cycles_completed=self.cycles_completed,
            cycles_before_long=self.config.cycles_before_long,
            remaining_seconds=self.remaining,
            paused=self.paused,
        )
