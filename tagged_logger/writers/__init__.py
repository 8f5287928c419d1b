"""Writers module - Log output sinks"""

from tagged_logger.writers.console_writer import ConsoleWriter
from tagged_logger.writers.file_writer import FileWriter
from tagged_logger.writers.locked_writer import LockedWriter

__all__ = ["ConsoleWriter", "FileWriter", "LockedWriter"]
