"""Pydantic models -- single source of truth for all data types."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, enum.Enum):
    """The interval type the timer is currently counting down."""

    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]


_PHASE_LABELS: dict[Phase, str] = {
    Phase.WORK: "work",
    Phase.SHORT_BREAK: "break",
    Phase.LONG_BREAK: "long break",
}


class ThemeName(str, enum.Enum):
    """Available colour themes, in the order the config screen cycles them."""

    BLUE = "blue"
    PURPLE = "purple"
    GREEN = "green"
    RED = "red"
    ORANGE = "orange"
    CYAN = "cyan"


class AppConfig(BaseModel):
    """User preferences (persisted to ~/.config/pomoterm/config.json).

    Durations are in minutes. Only the lower bound is validated on load;
    the config screen applies the upper bounds when a value is edited.
    """

    theme: ThemeName = ThemeName.BLUE
    work_duration: int = Field(default=25, ge=1)
    short_break: int = Field(default=5, ge=1)
    long_break: int = Field(default=15, ge=1)
    cycles_before_long: int = Field(default=4, ge=1)

    def duration_for(self, phase: Phase) -> float:
        """Return the configured length of ``phase`` in seconds."""
        minutes = {
            Phase.WORK: self.work_duration,
            Phase.SHORT_BREAK: self.short_break,
            Phase.LONG_BREAK: self.long_break,
        }[phase]
        return float(minutes * 60)


class Theme(BaseModel):
    """A pair of display colours: primary for emphasis, dim for secondary text."""

    model_config = ConfigDict(frozen=True)

    primary: str
    dim: str


class TimerSnapshot(BaseModel):
    """Read-only view of the timer handed to the renderer."""

    model_config = ConfigDict(frozen=True)

    phase: Phase
    cycles_completed: int = Field(ge=0)
    cycles_before_long: int = Field(ge=1)
    remaining_seconds: float = Field(ge=0)
    paused: bool

    @property
    def minutes(self) -> int:
        return int(self.remaining_seconds) // 60

    @property
    def seconds(self) -> int:
        return int(self.remaining_seconds) % 60
