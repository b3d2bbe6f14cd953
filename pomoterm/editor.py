"""Configuration screen: a cursor over five editable preference fields."""

from __future__ import annotations

from pomoterm.models import AppConfig
from pomoterm.themes import cycle_theme

FIELDS: list[str] = [
    "theme",
    "work_duration",
    "short_break",
    "long_break",
    "cycles_before_long",
]

# Inclusive (min, max) per numeric field.
FIELD_LIMITS: dict[str, tuple[int, int]] = {
    "work_duration": (1, 120),
    "short_break": (1, 60),
    "long_break": (1, 120),
    "cycles_before_long": (1, 10),
}


class ConfigEditor:
    """Edits an ``AppConfig`` in place, one field at a time."""

    def __init__(self, config: AppConfig, cursor: int = 0) -> None:
        self.config = config
        self.cursor = 0
        self.move(cursor)

    @property
    def field(self) -> str:
        return FIELDS[self.cursor]

    def move(self, delta: int) -> int:
        """Shift the cursor, clamped to the field list."""
        self.cursor = max(0, min(len(FIELDS) - 1, self.cursor + delta))
        return self.cursor

    def down(self) -> int:
        return self.move(1)

    def up(self) -> int:
        return self.move(-1)

    def decrement(self) -> None:
        self._step(-1)

    def increment(self) -> None:
        self._step(1)

    def _step(self, step: int) -> None:
        if self.field == "theme":
            self.config.theme = cycle_theme(self.config.theme, step)
            return
        low, high = FIELD_LIMITS[self.field]
        value = getattr(self.config, self.field) + step
        setattr(self.config, self.field, max(low, min(high, value)))

    def rows(self) -> list[tuple[str, str, bool]]:
        """Return (label, value, selected) for each field, in display order."""
        rows: list[tuple[str, str, bool]] = []
        for i, name in enumerate(FIELDS):
            value = getattr(self.config, name)
            text = value.value if name == "theme" else str(value)
            rows.append((name, text, i == self.cursor))
        return rows
