"""
Log entry data structure

One composed message on its way from a Logger to its formatter.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from tagged_logger.core.colors import Color, ColorLike


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    ``label`` is the level column text (a LogLevel label or "FATAL").
    """

    label: str
    message: str
    tag: str = ""
    color: ColorLike = Color.RESET
    caller: str = ""
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Normalize the message after initialization."""
        if not isinstance(self.message, str):
            self.message = str(self.message)
