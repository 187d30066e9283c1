"""
Notiflog: local notification logger.

Captures desktop/OS notification events as they are posted and appends
them to a local SQLite log, read back newest first.
"""

__version__ = "0.1.0"
