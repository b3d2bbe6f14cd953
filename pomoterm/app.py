"""The full-screen loop: tick, render, wait briefly for a key, dispatch."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Protocol

from rich.live import Live
from rich.text import Text

from pomoterm import config as cfg
from pomoterm.display import console, render_config, render_timer
from pomoterm.editor import ConfigEditor
from pomoterm.keyboard import Event, KeyEvent, ResizeEvent, TerminalInput
from pomoterm.models import AppConfig, Theme
from pomoterm.themes import get_theme
from pomoterm.timer import PomodoroTimer

log = logging.getLogger(__name__)

POLL_INTERVAL = 0.05


class InputSource(Protocol):
    def poll(self, timeout: float) -> Optional[Event]: ...


class Screen(Protocol):
    def update(self, renderable: Text, *, refresh: bool = False) -> None: ...


class PomodoroApp:
    """All mutable state of a session: timer, preferences and display state."""

    def __init__(
        self,
        config: AppConfig,
        config_path: Optional[Path] = None,
        clock: Callable[[], float] = time.monotonic,
        width: int = 80,
        height: int = 24,
    ) -> None:
        self.config = config
        self.config_path = config_path
        self.clock = clock
        self.timer = PomodoroTimer(config, clock())
        self.theme: Theme = get_theme(config.theme)
        self.width = width
        self.height = height
        self.config_mode = False
        self.editor = ConfigEditor(config)

    # ------------------------------------------------------------------
    # Per-frame work
    # ------------------------------------------------------------------

    def tick(self) -> None:
        """Advance the countdown. The timer is frozen while editing config."""
        if not self.config_mode:
            self.timer.advance(self.clock())

    def frame(self) -> Text:
        if self.config_mode:
            return render_config(self.editor.rows(), self.theme, self.width, self.height)
        return render_timer(self.timer.snapshot(), self.theme, self.width, self.height)

    # ------------------------------------------------------------------
    # Input dispatch
    # ------------------------------------------------------------------

    def handle(self, event: Event) -> bool:
        """Apply an input event. Returns False when the app should quit."""
        if isinstance(event, ResizeEvent):
            self.width, self.height = event.width, event.height
            return True
        if event.ctrl:
            return event.key != "c"
        if self.config_mode:
            self._handle_config_key(event)
            return True
        return self._handle_timer_key(event)

    def _handle_timer_key(self, event: KeyEvent) -> bool:
        key = event.key.lower() if len(event.key) == 1 else event.key
        if key == "q":
            return False
        if key == "space":
            self.timer.toggle_pause(self.clock())
        elif key == "r":
            self.timer.reset()
        elif key == "s":
            self.timer.advance_phase()
        elif key == "c":
            self.config_mode = True
            log.debug("Entered config mode")
        return True

    def _handle_config_key(self, event: KeyEvent) -> None:
        key = event.key
        if key in ("q", "escape"):
            self.leave_config()
        elif key in ("j", "down"):
            self.editor.down()
        elif key in ("k", "up"):
            self.editor.up()
        elif key in ("h", "left"):
            self.editor.decrement()
            self.theme = get_theme(self.config.theme)
        elif key in ("l", "right"):
            self.editor.increment()
            self.theme = get_theme(self.config.theme)

    def leave_config(self) -> None:
        """Save preferences and return to the clock."""
        self.config_mode = False
        cfg.save_config(self.config, self.config_path)
        self.theme = get_theme(self.config.theme)
        self.timer.resync(self.clock())
        log.debug("Left config mode")


def run(
    app: PomodoroApp,
    source: InputSource,
    screen: Screen,
    poll_interval: float = POLL_INTERVAL,
) -> None:
    """Drive the app until the user quits or interrupts."""
    log.info("Timer loop started")
    try:
        while True:
            app.tick()
            screen.update(app.frame(), refresh=True)
            event = source.poll(poll_interval)
            if event is not None and not app.handle(event):
                break
    except KeyboardInterrupt:
        log.info("Interrupted")
    log.info("Timer loop stopped")


def run_app(config_path: Optional[Path] = None) -> None:
    """Load preferences and run the full-screen timer in the current terminal."""
    path = cfg.get_config_path(config_path)
    config = cfg.ensure_config(path)
    width, height = console.size
    app = PomodoroApp(config, config_path=path, width=width, height=height)

    with TerminalInput(size=lambda: tuple(console.size)) as source:
        with Live(
            app.frame(),
            console=console,
            screen=True,
            auto_refresh=False,
            transient=True,
        ) as live:
            run(app, source, live)
