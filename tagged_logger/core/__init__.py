"""
Core module for tagged logger

This module contains the fundamental classes:
- Logger: Tagged, leveled logger
- LoggerBuilder: Builder pattern for logger construction
- LoggerConfig: Configuration and construction options
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- Color: Tag color palette
"""

from tagged_logger.core.colors import Color, PALETTE, color_for_tag, fnv1a_32
from tagged_logger.core.caller import resolve_caller, UNKNOWN_CALLER
from tagged_logger.core.log_entry import LogEntry
from tagged_logger.core.log_level import LogLevel
from tagged_logger.core.logger_config import (
    LoggerConfig,
    with_color,
    with_error_handler,
    with_level,
    with_writer,
)
from tagged_logger.core.logger import Logger, new
from tagged_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Color",
    "PALETTE",
    "color_for_tag",
    "fnv1a_32",
    "resolve_caller",
    "UNKNOWN_CALLER",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "with_color",
    "with_error_handler",
    "with_level",
    "with_writer",
    "Logger",
    "new",
    "LoggerBuilder",
]
