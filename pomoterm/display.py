"""Rich terminal formatting: full-screen frames and one-off messages."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from pomoterm.glyphs import COLON_ROWS, GLYPH_HEIGHT, GLYPH_WIDTH, digit_rows
from pomoterm.models import Theme, TimerSnapshot

console = Console()

# Gap between glyphs; the colon gets the same gap on both sides.
_GAP = 2
_COLON_WIDTH = 2

TIMER_HINT = " space:start/pause  r:reset  s:skip  c:config  q:quit "
CONFIG_HINT = " config | j/k:navigate  h/l:change  q/esc:save&exit "


class Canvas:
    """A fixed-size character grid; later writes overwrite earlier ones."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles: list[list[Optional[Style]]] = [
            [None] * self.width for _ in range(self.height)
        ]

    def put(self, x: int, y: int, text: str, style: Optional[Style] = None) -> None:
        """Write ``text`` at column ``x`` of row ``y``; off-grid parts are dropped."""
        if not 0 <= y < self.height:
            return
        for offset, ch in enumerate(text):
            col = x + offset
            if 0 <= col < self.width:
                self._chars[y][col] = ch
                self._styles[y][col] = style

    def to_text(self) -> Text:
        frame = Text(no_wrap=True, overflow="crop", end="")
        for y in range(self.height):
            chars, styles = self._chars[y], self._styles[y]
            start = 0
            for col in range(1, self.width + 1):
                if col == self.width or styles[col] != styles[start]:
                    frame.append("".join(chars[start:col]), style=styles[start])
                    start = col
            if y < self.height - 1:
                frame.append("\n")
        return frame


def clock_width(digit_count: int) -> int:
    """Width of the big clock for ``digit_count`` minute digits plus MM seconds."""
    glyphs = digit_count + 2
    return glyphs * GLYPH_WIDTH + (glyphs - 2) * _GAP + 2 * _GAP + _COLON_WIDTH


def draw_clock(canvas: Canvas, minutes: int, seconds: int, y: int, style: Style) -> None:
    """Draw MM:SS centred horizontally with its top row at ``y``."""
    minute_digits = [int(d) for d in f"{minutes:02d}"]
    second_digits = [seconds // 10, seconds % 10]
    x = canvas.width // 2 - clock_width(len(minute_digits)) // 2

    def draw_glyph(rows: list[str] | tuple[str, ...], at: int) -> None:
        for row_index, row in enumerate(rows):
            # Unlit cells stay unstyled so the background shows through.
            for col in range(0, len(row), 2):
                cell = row[col:col + 2]
                if cell.strip():
                    canvas.put(at + col, y + row_index, cell, style)

    for digit in minute_digits:
        draw_glyph(digit_rows(digit), x)
        x += GLYPH_WIDTH + _GAP
    draw_glyph(COLON_ROWS, x)
    x += _COLON_WIDTH + _GAP
    for digit in second_digits:
        draw_glyph(digit_rows(digit), x)
        x += GLYPH_WIDTH + _GAP


def status_left(snapshot: TimerSnapshot) -> str:
    state = "paused" if snapshot.paused else "running"
    return f" {snapshot.phase.label} | {state} "


def status_center(snapshot: TimerSnapshot) -> str:
    return f"cycles: {snapshot.cycles_completed}/{snapshot.cycles_before_long}"


def render_timer(snapshot: TimerSnapshot, theme: Theme, width: int, height: int) -> Text:
    """Build the normal-mode frame: big countdown plus status line."""
    canvas = Canvas(width, height)
    primary = Style(color=theme.primary)
    dim = Style(color=theme.dim)

    clock_top = max(0, height // 2 - 3)
    if clock_top + GLYPH_HEIGHT > height - 1:
        clock_top = max(0, height - 1 - GLYPH_HEIGHT)
    draw_clock(canvas, snapshot.minutes, snapshot.seconds, clock_top, primary)

    bottom = height - 1
    canvas.put(0, bottom, status_left(snapshot), primary)
    center = status_center(snapshot)
    canvas.put(max(0, width // 2 - len(center) // 2), bottom, center, dim)
    canvas.put(max(0, width - len(TIMER_HINT)), bottom, TIMER_HINT, dim)
    return canvas.to_text()


def render_config(
    rows: list[tuple[str, str, bool]], theme: Theme, width: int, height: int
) -> Text:
    """Build the config-mode frame: the field list and a navigation hint."""
    canvas = Canvas(width, height)
    primary = Style(color=theme.primary)
    dim = Style(color=theme.dim)

    start_y = max(0, height // 2 - 10)
    for i, (label, value, selected) in enumerate(rows):
        pointer = "> " if selected else "  "
        line = f"{pointer}{label}: {value}"
        canvas.put(max(0, width // 2 - len(line) // 2), start_y + i * 2, line,
                   primary if selected else dim)

    canvas.put(max(0, width // 2 - len(CONFIG_HINT) // 2), height - 1, CONFIG_HINT, primary)
    return canvas.to_text()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")
