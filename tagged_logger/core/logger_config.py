"""
Logger configuration and construction options

An option is a callable that mutates the LoggerConfig being built.
Options run once, in order, before the logger is returned.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from tagged_logger.core.colors import ColorLike, color_for_tag
from tagged_logger.core.log_level import LogLevel
from tagged_logger.writers.console_writer import ConsoleWriter


def report_writer_error(exc: BaseException) -> None:
    """Default handler for a failing sink write."""
    print(f"Writer error: {exc}", file=sys.stderr)


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    ``color`` is derived from ``tag`` unless given explicitly.
    """

    tag: str = ""
    color: Optional[ColorLike] = None
    min_level: LogLevel = LogLevel.INFO
    writer: Any = field(default_factory=ConsoleWriter)
    error_handler: Callable[[BaseException], None] = report_writer_error

    def __post_init__(self):
        """Fill in the tag color if not set."""
        if self.color is None:
            self.color = color_for_tag(self.tag)

    @classmethod
    def default(cls, tag: str = "") -> "LoggerConfig":
        """Create default configuration."""
        return cls(tag=tag)

    @classmethod
    def debug_config(cls, tag: str = "") -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(tag=tag, min_level=LogLevel.DEBUG)


Option = Callable[[LoggerConfig], None]


def with_writer(writer: Any) -> Option:
    """Send lines to ``writer`` instead of standard output."""
    def apply(config: LoggerConfig) -> None:
        config.writer = writer
    return apply


def with_color(color: ColorLike) -> Option:
    """Override the tag color."""
    def apply(config: LoggerConfig) -> None:
        config.color = color
    return apply


def with_level(level: LogLevel) -> Option:
    """Set minimum log level."""
    def apply(config: LoggerConfig) -> None:
        config.min_level = level
    return apply


def with_error_handler(handler: Callable[[BaseException], None]) -> Option:
    """Call ``handler`` with the exception when a sink write fails."""
    def apply(config: LoggerConfig) -> None:
        config.error_handler = handler
    return apply
