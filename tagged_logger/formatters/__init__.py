"""
Log formatters module
"""

from tagged_logger.formatters.line_formatter import (
    LineFormatter,
    sprint,
    sprintf,
    timestamp,
)

__all__ = [
    "LineFormatter",
    "sprint",
    "sprintf",
    "timestamp",
]
