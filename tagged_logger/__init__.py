"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Tagged Logger - A lightweight, leveled, tagged console logger
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from tagged_logger.core.logger import Logger, new
from tagged_logger.core.logger_builder import LoggerBuilder
from tagged_logger.core.logger_config import (
    LoggerConfig,
    with_color,
    with_error_handler,
    with_level,
    with_writer,
)
from tagged_logger.core.log_entry import LogEntry
from tagged_logger.core.log_level import LogLevel
from tagged_logger.core.colors import Color

# Import submodules (not all classes by default)
from tagged_logger import formatters
from tagged_logger import writers

__all__ = [
    "Logger",
    "new",
    "LoggerBuilder",
    "LoggerConfig",
    "with_color",
    "with_error_handler",
    "with_level",
    "with_writer",
    "LogEntry",
    "LogLevel",
    "Color",
    "formatters",
    "writers",
]
