"""Managers that observe the event bus.

- log_manager.py: Categorized, level-filtered message buffer
"""

from .log_manager import LogManager, LogMessage, LogCategory, LogLevel

__all__ = [
    "LogManager",
    "LogMessage",
    "LogCategory",
    "LogLevel",
]
