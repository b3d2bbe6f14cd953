"""pomoterm -- a Pomodoro countdown clock for the terminal."""

__version__ = "0.1.0"
