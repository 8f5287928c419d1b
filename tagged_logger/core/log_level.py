"""
Log level enumeration

Fatal is not a level: it is always emitted and then ends the process,
so it only exists as a line label.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Severity of a message and minimum threshold of a logger.

    Messages below a logger's threshold are suppressed.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive, "WARNING" accepted)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in LEVEL_ALIASES:
            name = LEVEL_ALIASES[name]
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def label(self) -> str:
        """Label printed in the level column."""
        return LEVEL_NAMES[self]


FATAL_LABEL = "FATAL"

LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
}

LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
}
