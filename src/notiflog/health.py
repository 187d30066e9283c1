"""
Health check module for Notiflog.

Reports system status across all components.
"""

from notiflog.config import get_config_path, get_db_path, load_config


def check_database() -> tuple[str, str]:
    """Check database status."""
    try:
        db_path = get_db_path()
    except Exception as e:
        return "✗", f"Error: {e}"

    if not db_path.exists():
        return "!", f"Not created yet ({db_path})"

    try:
        from notiflog.db import LogStore
        store = LogStore(db_path)
        return "✓", f"OK ({store.count()} entries)"
    except Exception as e:
        return "✗", f"Error: {e}"


def check_config() -> tuple[str, str]:
    """Check config file status."""
    config_path = get_config_path()
    if not config_path.exists():
        return "-", "Using defaults"

    try:
        load_config()
        return "✓", f"OK ({config_path})"
    except Exception as e:
        return "✗", f"Error: {e}"


def run_health_check() -> dict[str, tuple[str, str]]:
    """Run all health checks."""
    return {
        "Config": check_config(),
        "Database": check_database(),
    }


def format_health_report(checks: dict[str, tuple[str, str]]) -> str:
    """Format health check results."""
    lines = ["Notiflog Health Check", "-" * 40]

    for name, (status, message) in checks.items():
        lines.append(f"{status} {name}: {message}")

    return "\n".join(lines)
