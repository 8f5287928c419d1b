"""Logger builder pattern"""

from typing import Any, Callable, Optional

from tagged_logger.core.colors import ColorLike
from tagged_logger.core.logger import Logger
from tagged_logger.core.logger_config import LoggerConfig
from tagged_logger.core.log_level import LogLevel
from tagged_logger.writers.console_writer import ConsoleWriter
from tagged_logger.writers.file_writer import FileWriter
from tagged_logger.writers.locked_writer import LockedWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._tag = ""
        self._color: Optional[ColorLike] = None
        self._level = LogLevel.INFO
        self._writer: Any = None
        self._locked = False
        self._error_handler: Optional[Callable[[BaseException], None]] = None

    def with_tag(self, tag: str) -> "LoggerBuilder":
        """Set logger tag."""
        self._tag = tag
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_color(self, color: ColorLike) -> "LoggerBuilder":
        """Override the color derived from the tag."""
        self._color = color
        return self

    def with_writer(self, writer: Any) -> "LoggerBuilder":
        """Use a custom sink."""
        self._writer = writer
        return self

    def with_console(self, stream=None) -> "LoggerBuilder":
        """
        Write to a console stream.

        Args:
            stream: Output stream (default: sys.stdout)
        """
        self._writer = ConsoleWriter(stream)
        return self

    def with_file(self, filepath: str) -> "LoggerBuilder":
        """
        Append to a file.

        The file stays open for the life of the writer; close it through
        ``logger.writer`` (unwrapping ``LockedWriter`` if used).
        """
        self._writer = FileWriter(filepath)
        return self

    def with_lock(self, enabled: bool = True) -> "LoggerBuilder":
        """
        Serialize writes to the sink.

        Example:
            logger = (LoggerBuilder()
                .with_tag("worker")
                .with_file("logs/worker.log")
                .with_lock()
                .build())
        """
        self._locked = enabled
        return self

    def with_error_handler(self, handler: Callable[[BaseException], None]) -> "LoggerBuilder":
        """Call ``handler`` when a sink write fails."""
        self._error_handler = handler
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        config = LoggerConfig(tag=self._tag, color=self._color, min_level=self._level)

        if self._writer is not None:
            config.writer = self._writer
        if self._locked:
            config.writer = LockedWriter(config.writer)
        if self._error_handler is not None:
            config.error_handler = self._error_handler

        return Logger(config)
