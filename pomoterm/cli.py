"""pomoterm CLI -- a Pomodoro clock that lives in your terminal."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from pomoterm import config as cfg
from pomoterm import display
from pomoterm.themes import THEME_ORDER, get_theme

app = typer.Typer(
    name="pomoterm",
    help="Work in focused intervals with a big countdown clock in your terminal.",
    invoke_without_command=True,
)


def _setup_logging(log_file: Optional[Path], verbose: bool) -> None:
    """Send log records to a file; the terminal itself belongs to the clock."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def main(ctx: typer.Context) -> None:
    """Start the timer when no command is given."""
    if ctx.invoked_subcommand is None:
        run(config_path=None, log_file=None, verbose=False)


# ---------------------------------------------------------------------------
# Timer
# ---------------------------------------------------------------------------


@app.command()
def run(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Use this config file instead of the default"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write a debug log to this file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pause/resume details"),
) -> None:
    """Open the full-screen countdown clock."""
    from pomoterm.app import run_app

    _setup_logging(log_file, verbose)
    try:
        run_app(config_path)
    except OSError as exc:
        display.print_warning(f"Could not run the timer: {exc}")
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file to inspect or reset"
    ),
    reset: bool = typer.Option(False, "--reset", help="Restore default preferences"),
    show: bool = typer.Option(False, "--show", help="Show current preferences"),
) -> None:
    """Inspect or reset your saved preferences."""
    path = cfg.get_config_path(config_path)
    if reset:
        try:
            cfg.reset_config(path)
        except OSError as exc:
            display.print_warning(f"Could not write {path}: {exc}")
            raise typer.Exit(1)
        display.print_success(f"Reset preferences in {path}.")
    elif show:
        current = cfg.load_config(path)
        suffix = "" if path.exists() else " (not created yet, showing defaults)"
        display.print_info(f"Config file: {path}{suffix}")
        for name, value in current.model_dump(mode="json").items():
            display.print_info(f"  {name}: {value}")
    else:
        display.print_info("Use --show or --reset. Press 'c' in the timer to edit.")


@app.command()
def themes() -> None:
    """List the available colour themes."""
    for name in THEME_ORDER:
        theme = get_theme(name)
        display.console.print(f"[{theme.primary}]██[/] {name.value}")
