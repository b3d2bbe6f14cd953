"""Non-blocking keyboard input for the full-screen timer."""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional, Union

ESC = "\x1b"

_ARROWS: dict[str, str] = {"A": "up", "B": "down", "C": "right", "D": "left"}


@dataclass(frozen=True)
class KeyEvent:
    """A single key press. ``key`` is a named key or the literal character."""

    key: str
    ctrl: bool = False


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


def decode_keys(data: str) -> list[KeyEvent]:
    """Turn raw terminal input into key events."""
    events: list[KeyEvent] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC:
            if i + 2 < len(data) and data[i + 1] in "[O":
                final = data[i + 2]
                if final in _ARROWS:
                    events.append(KeyEvent(_ARROWS[final]))
                    i += 3
                    continue
                # Skip any other CSI sequence up to its final byte.
                j = i + 2
                while j < len(data) and not ("@" <= data[j] <= "~"):
                    j += 1
                i = j + 1
                continue
            events.append(KeyEvent("escape"))
            i += 1
            continue
        if ch == " ":
            events.append(KeyEvent("space"))
        elif ch in "\r\n":
            events.append(KeyEvent("enter"))
        elif ord(ch) < 32:
            events.append(KeyEvent(chr(ord(ch) + 96), ctrl=True))
        elif ch != "\x7f":
            events.append(KeyEvent(ch))
        i += 1
    return events


def split_partial(data: str) -> tuple[str, str]:
    """Split off a trailing escape sequence that may still be arriving."""
    start = data.rfind(ESC)
    if start == -1:
        return data, ""
    tail = data[start + 1:]
    if not tail or tail in ("[", "O"):
        return data[:start], data[start:]
    if tail[0] == "[" and not any("@" <= ch <= "~" for ch in tail[1:]):
        return data[:start], data[start:]
    return data, ""


class TerminalInput:
    """Reads key presses from stdin in cbreak mode.

    Use as a context manager: the original terminal attributes are restored
    on exit, however the block is left.
    """

    def __init__(
        self,
        size: Callable[[], tuple[int, int]],
        stream=None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self.fd = self.stream.fileno()
        self.old_settings: Optional[list] = None
        self._size = size
        self._last_size: Optional[tuple[int, int]] = None
        self._pending: deque[KeyEvent] = deque()
        self._partial = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    def __enter__(self) -> TerminalInput:
        if not os.isatty(self.fd):
            raise OSError("stdin is not a terminal")
        self.old_settings = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        self._last_size = tuple(self._size())
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def poll(self, timeout: float) -> Optional[Event]:
        """Wait up to ``timeout`` seconds for the next event."""
        size = tuple(self._size())
        if size != self._last_size:
            self._last_size = size
            return ResizeEvent(width=size[0], height=size[1])
        if self._pending:
            return self._pending.popleft()
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if ready:
            data = self._partial + self._decoder.decode(os.read(self.fd, 1024))
            complete, self._partial = split_partial(data)
            self._pending.extend(decode_keys(complete))
        elif self._partial:
            # Nothing followed within a poll: a lone Esc press.
            self._pending.extend(decode_keys(self._partial))
            self._partial = ""
        if self._pending:
            return self._pending.popleft()
        return None
