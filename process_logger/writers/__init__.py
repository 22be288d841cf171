"""Writers module - Log output handlers"""

from process_logger.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
