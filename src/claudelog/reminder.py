"""
Periodic reminders to re-run log analysis.

The last run time lives in a small state file holding one ISO 8601
timestamp. A reminder is due on first use, or once the configured number of
days has passed since that timestamp.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from claudelog.config import EnvConfig

logger = logging.getLogger(__name__)

REMINDER_FREQUENCIES: dict[str, int] = {
    "7d": 7,
    "14d": 14,
    "30d": 30,
}

REMINDER_DISABLED = "never"

# (value, description) in menu order
REMINDER_OPTIONS = (
    ("continue", "Continue with analysis"),
    ("postpone", "Remind me later"),
    ("disable", "Disable reminders"),
)

SECONDS_PER_DAY = 86400


def _parse_timestamp(text: str) -> datetime | None:
    # fromisoformat only accepts a trailing "Z" on 3.11+
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_last_run(path: Path | str) -> str | None:
    """
    Read the last run timestamp.

    Args:
        path: State file holding the timestamp

    Returns:
        ISO timestamp string, or None if never run or the file is unusable
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        content = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return None

    if _parse_timestamp(content) is None:
        logger.debug(f"Ignoring invalid last-run timestamp in {path}: {content!r}")
        return None
    return content


def save_last_run(path: Path | str, now: datetime | None = None) -> str:
    """Record the current time as the last run; returns the written timestamp."""
    path = Path(path)
    now = now or datetime.now(timezone.utc)
    timestamp = now.isoformat()

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(timestamp, encoding="utf-8")
    return timestamp


def get_days_elapsed(path: Path | str, now: datetime | None = None) -> int | None:
    """
    Whole days since the last run, truncated toward zero.

    Returns:
        Number of days, or None if never run
    """
    last_run = get_last_run(path)
    if last_run is None:
        return None

    last = _parse_timestamp(last_run)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int((now - last).total_seconds() / SECONDS_PER_DAY)


def should_show_reminder(config: EnvConfig, now: datetime | None = None) -> bool:
    """Check whether a reminder is due under the configured frequency."""
    if config.reminder == REMINDER_DISABLED:
        return False

    days = get_days_elapsed(config.last_run_file, now=now)

    # First run gets a welcome reminder
    if days is None:
        return True

    threshold = REMINDER_FREQUENCIES.get(config.reminder)
    if threshold is None:
        logger.warning(f"Unknown reminder frequency {config.reminder!r}, reminders disabled")
        return False

    return days >= threshold


def show_reminder(config: EnvConfig, console: Console | None = None) -> bool:
    """
    Show the interactive reminder prompt.

    Returns:
        True if the user wants to continue with analysis
    """
    console = console or Console()
    days = get_days_elapsed(config.last_run_file)

    if days is None:
        console.print("\n[cyan]It's time to analyze your prompts![/cyan]\n")
    else:
        console.print(f"\n[cyan]It's been [bold]{days}[/bold] days since your last analysis.[/cyan]\n")

    for value, description in REMINDER_OPTIONS:
        console.print(f"  [bold]{value}[/bold]  {description}")

    try:
        action = Prompt.ask(
            "What would you like to do?",
            choices=[value for value, _ in REMINDER_OPTIONS],
            console=console,
        )
    except (EOFError, KeyboardInterrupt):
        # Cancelled prompt counts as postpone
        return False

    if action == "continue":
        return True

    if action == "disable":
        console.print(
            "\n[yellow]To disable reminders, set[/yellow] [bold]CLAUDELOG_REMINDER=never[/bold]"
            " [yellow]in your shell config.[/yellow]\n"
        )

    return False


def check_reminder(config: EnvConfig, console: Console | None = None) -> bool:
    """
    Show a reminder if one is due.

    Returns:
        True if analysis should proceed
    """
    if not should_show_reminder(config):
        return True
    return show_reminder(config, console=console)


__all__ = [
    "REMINDER_DISABLED",
    "REMINDER_FREQUENCIES",
    "REMINDER_OPTIONS",
    "check_reminder",
    "get_days_elapsed",
    "get_last_run",
    "save_last_run",
    "should_show_reminder",
    "show_reminder",
]
