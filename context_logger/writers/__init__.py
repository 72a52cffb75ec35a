"""Writers module - Log output handlers"""

from context_logger.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
