"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
"""

from process_logger.core.logger import Logger
from process_logger.core.logger_builder import LoggerBuilder
from process_logger.core.log_entry import CallSite, LogEntry, iso_timestamp
from process_logger.core.log_level import LogLevel
from process_logger.core.logger_config import LoggerConfig

__all__ = [
    "Logger",
    "LoggerBuilder",
    "CallSite",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "iso_timestamp",
]
