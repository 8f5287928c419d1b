"""
Main Logger class - Tagged, leveled console logger
"""

from __future__ import annotations
from typing import Any, Optional
import os

from tagged_logger.core.caller import resolve_caller
from tagged_logger.core.colors import ColorLike
from tagged_logger.core.log_entry import LogEntry
from tagged_logger.core.log_level import FATAL_LABEL, LogLevel
from tagged_logger.core.logger_config import LoggerConfig, Option
from tagged_logger.formatters.line_formatter import LineFormatter, sprint, sprintf

FATAL_EXIT_CODE = 1


class Logger:
    """
    Tagged logger writing one line per call to its sink.

    Every public logging method calls ``_log`` directly and ``_log``
    resolves the caller, so the caller is always three frames up from
    resolve_caller. Keep it that way when adding methods.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._formatter = LineFormatter()

    @property
    def tag(self) -> str:
        return self._config.tag

    @property
    def color(self) -> ColorLike:
        return self._config.color

    @property
    def level(self) -> LogLevel:
        return self._config.min_level

    @property
    def writer(self) -> Any:
        return self._config.writer

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether messages at ``level`` would be written."""
        return level >= self._config.min_level

    def _log(self, label: str, message: str) -> None:
        """Format and write one line. Sink failures go to the error handler."""
        entry = LogEntry(
            label=label,
            message=message,
            tag=self._config.tag,
            color=self._config.color,
            caller=resolve_caller(),
        )
        line = self._formatter.format(entry)
        try:
            self._config.writer.write(line)
        except Exception as e:
            self._config.error_handler(e)

    def _exit(self) -> None:
        """Flush the sink and end the process without cleanup."""
        try:
            flush = getattr(self._config.writer, "flush", None)
            if flush is not None:
                try:
                    flush()
                except Exception as e:
                    self._config.error_handler(e)
        finally:
            os._exit(FATAL_EXIT_CODE)

    def fatal(self, *args: Any) -> None:
        """Log fatal message and exit the process."""
        try:
            self._log(FATAL_LABEL, sprint(*args))
        finally:
            self._exit()

    def fatalf(self, template: str, *args: Any) -> None:
        """Log formatted fatal message and exit the process."""
        try:
            self._log(FATAL_LABEL, sprintf(template, *args))
        finally:
            self._exit()

    def error(self, *args: Any) -> None:
        """Log error message."""
        if self._config.min_level <= LogLevel.ERROR:
            self._log(LogLevel.ERROR.label, sprint(*args))

    def errorf(self, template: str, *args: Any) -> None:
        """Log formatted error message."""
        if self._config.min_level <= LogLevel.ERROR:
            self._log(LogLevel.ERROR.label, sprintf(template, *args))

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        if self._config.min_level <= LogLevel.WARN:
            self._log(LogLevel.WARN.label, sprint(*args))

    def warnf(self, template: str, *args: Any) -> None:
        """Log formatted warning message."""
        if self._config.min_level <= LogLevel.WARN:
            self._log(LogLevel.WARN.label, sprintf(template, *args))

    def info(self, *args: Any) -> None:
        """Log info message."""
        if self._config.min_level <= LogLevel.INFO:
            self._log(LogLevel.INFO.label, sprint(*args))

    def infof(self, template: str, *args: Any) -> None:
        """Log formatted info message."""
        if self._config.min_level <= LogLevel.INFO:
            self._log(LogLevel.INFO.label, sprintf(template, *args))

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        if self._config.min_level <= LogLevel.DEBUG:
            self._log(LogLevel.DEBUG.label, sprint(*args))

    def debugf(self, template: str, *args: Any) -> None:
        """Log formatted debug message."""
        if self._config.min_level <= LogLevel.DEBUG:
            self._log(LogLevel.DEBUG.label, sprintf(template, *args))

    def __repr__(self) -> str:
        return f"Logger(tag={self._config.tag!r}, level={self._config.min_level})"


def new(tag: str = "", *options: Option) -> Logger:
    """
    Create a logger for ``tag``.

    The tag picks the color; options then run in order, so later ones
    override earlier ones.

    Example:
        log = new("svc", with_level(LogLevel.DEBUG), with_writer(sys.stderr))
        log.info("started", " ok")
    """
    config = LoggerConfig(tag=tag)
    for option in options:
        option(config)
    return Logger(config)
