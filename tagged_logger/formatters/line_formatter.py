"""
Line formatter

Produces the one-line output format:

    [<timestamp>] [<LEVEL>] [<tag>] [<caller>] <message>

The tag segment is left out entirely when the tag is empty.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional

from tagged_logger.core.colors import colorize
from tagged_logger.core.log_entry import LogEntry

RFC3339_UTC = "%Y-%m-%dT%H:%M:%SZ"
LEVEL_WIDTH = 5


def timestamp(now: Optional[datetime] = None) -> str:
    """
    RFC 3339 UTC timestamp with seconds precision.

    Args:
        now: Instant to format (default: current time). Naive values
             are taken to be UTC already.

    Returns:
        Timestamp such as "2024-01-02T15:04:05Z"
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(RFC3339_UTC)


def sprint(*args: Any) -> str:
    """
    Concatenate operands print-style.

    A space goes between two operands only when neither is a string:
    sprint("a", 1, 2, "b") == "a1 2b".
    """
    parts = []
    prev_is_str = True
    for i, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if i > 0 and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintf(template: str, *args: Any) -> str:
    """
    Interpolate a printf-style template.

    A single non-empty mapping argument feeds named placeholders, as in
    the logging module: sprintf("%(n)d items", {"n": 3}). A template
    that does not fit its arguments does not raise; the error is
    reported inline instead.
    """
    if not args:
        return template
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return template % args
    except (TypeError, ValueError, KeyError) as e:
        return f"[FORMAT ERROR: {e}] {template}"


class LineFormatter:
    """Format log entries as tagged, colorized lines."""

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a single line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted line ending in exactly one newline
        """
        head = "[%s] [%*s]" % (timestamp(entry.timestamp), LEVEL_WIDTH, entry.label)
        if entry.tag:
            head += " [%s]" % colorize(entry.tag, entry.color)
        return "%s [%s] %s\n" % (head, entry.caller, entry.message)

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

    def __repr__(self) -> str:
        """String representation."""
        return "LineFormatter()"
