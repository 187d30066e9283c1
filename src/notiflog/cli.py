"""
CLI for Notiflog.

Minimal CLI using stdlib argument handling for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    notiflog list                         # Show logged notifications
    notiflog post --title T --text X      # Log one notification
    some-source | notiflog listen         # Log JSON-lines events from stdin
    notiflog --help                       # Show help
"""

import sys


def print_help() -> None:
    """Print help message."""
    print("""notiflog - local notification logger

Usage:
    notiflog list                       Show logged notifications, newest first

Commands:
    notiflog post [options]             Log one notification (--title, --text)
    notiflog listen                     Log JSON-lines events read from stdin
    notiflog stats                      Show database statistics
    notiflog health                     Show health check

Options:
    notiflog --help, -h                 Show this help
    notiflog --version, -v              Show version

Examples:
    notiflog post --title Mail --text "New message"
    echo '{"notification": {"title": "Chat", "text": "Ping"}}' | notiflog listen
    notiflog list

Events without a notification payload are ignored.
A missing title is logged as "Unknown", a missing text as empty.""")


def print_version() -> None:
    """Print version."""
    from notiflog import __version__
    print(f"notiflog {__version__}")


def cmd_list() -> int:
    """List all logged notifications."""
    from notiflog.surfacing import get_logs_formatted

    try:
        print(get_logs_formatted())
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_post(args: list[str]) -> int:
    """Log a single notification built from --title/--text."""
    from notiflog.capture import on_notification_posted

    payload: dict[str, str] = {}

    # Parse arguments
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--title", "-t") and i + 1 < len(args):
            payload["title"] = args[i + 1]
            i += 2
        elif arg in ("--text", "-x") and i + 1 < len(args):
            payload["text"] = args[i + 1]
            i += 2
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)
            return 1

    try:
        on_notification_posted({"notification": payload})
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_listen() -> int:
    """Log JSON-lines events from stdin until EOF."""
    from notiflog.capture import listen

    try:
        consumed = listen(sys.stdin)
        print(f"Consumed {consumed} events.", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_stats() -> int:
    """Show database statistics."""
    from notiflog.db import LogStore

    try:
        store = LogStore()

        print("Notiflog Statistics")
        print("-" * 30)
        print(f"Database: {store.db_path}")
        print(f"Total entries: {store.count()}")

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_health() -> int:
    """Show health check."""
    from notiflog.health import format_health_report, run_health_check

    print(format_health_report(run_health_check()))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ("--help", "-h", "help"):
        print_help()
        return 0

    first_arg = args[0]

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    from notiflog.config import setup_logging
    setup_logging()

    # Subcommands (lazy import to keep startup fast)
    if first_arg == "list":
        return cmd_list()

    if first_arg == "post":
        return cmd_post(args[1:])

    if first_arg == "listen":
        return cmd_listen()

    if first_arg == "stats":
        return cmd_stats()

    if first_arg == "health":
        return cmd_health()

    print(f"Unknown command: {first_arg}", file=sys.stderr)
    print("Run 'notiflog --help' for usage.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
