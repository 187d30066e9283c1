"""
Surfacing module for Notiflog.

Renders the log for humans, newest first.
"""

import logging
import os
import sqlite3

from notiflog.db import LogEntry, LogStore

logger = logging.getLogger(__name__)


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BLUE = "\033[34m"
    WHITE = "\033[37m"

    BRIGHT_CYAN = "\033[96m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        # Disable if NO_COLOR is set
        if os.environ.get("NO_COLOR"):
            return False
        return True


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


def load_logs(store: LogStore | None = None) -> list[LogEntry]:
    """
    Load every log entry for display.

    A store that cannot be opened or read shows as an empty log.
    """
    try:
        store = store or LogStore()
        return store.list_all()
    except (sqlite3.Error, OSError) as e:
        logger.error("Could not read notification log: %s", e)
        return []


def format_entries(entries: list[LogEntry]) -> str:
    """Format log entries as a colored table."""
    if not entries:
        return c("No notifications logged.", Colors.DIM)

    lines = []

    lines.append(c("━━━ NOTIFICATIONS ━━━", Colors.BOLD, Colors.BLUE))
    lines.append("")

    # Column header
    lines.append(c(f"{'#':>5}  {'TIME':19}  {'TITLE':30}  TEXT", Colors.DIM))
    lines.append(c("─" * 80, Colors.DIM))

    for entry in entries:
        id_str = c(f"{entry.id:>5}", Colors.BOLD, Colors.WHITE)
        time_str = c(f"{entry.time:19}", Colors.DIM)
        title_str = c(f"{entry.title[:30]:30}", Colors.BRIGHT_CYAN)
        text = entry.text.replace("\n", " ")

        lines.append(f"{id_str}  {time_str}  {title_str}  {text}")

    return "\n".join(lines)


def get_logs_formatted(store: LogStore | None = None) -> str:
    """Get the whole log as formatted string with colors."""
    return format_entries(load_logs(store))
