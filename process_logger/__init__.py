"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Process Logger - A process-wide leveled console logger

Typical use goes through the module-level functions, which act on one
shared Logger instance:

    import process_logger as log

    log.init("debug", "inventory-service", "2.1.0")
    log.info("listening on :8080")
    log.info("logged in", ip="10.0.0.1", username="alice")
    log.uninit(0)
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from process_logger.core.logger import Logger
from process_logger.core.logger_builder import LoggerBuilder
from process_logger.core.log_entry import CallSite, LogEntry
from process_logger.core.log_level import LogLevel
from process_logger.core.logger_config import LoggerConfig

# Import submodules (not all classes by default)
from process_logger import formatters
from process_logger import writers

_logger = Logger()

init = _logger.init
uninit = _logger.uninit
info = _logger.info
error = _logger.error
warn = _logger.warn
debug = _logger.debug
verbose = _logger.verbose


def get_logger() -> Logger:
    """Return the shared logger instance."""
    return _logger


def set_logger(logger: Logger) -> None:
    """
    Replace the shared logger instance.

    The module-level functions are rebound, so callers must look them up
    on the module (``process_logger.info``) rather than import them by name.
    """
    global _logger, init, uninit, info, error, warn, debug, verbose
    _logger = logger
    # Bound methods keep the call-site depth of a direct call
    init = logger.init
    uninit = logger.uninit
    info = logger.info
    error = logger.error
    warn = logger.warn
    debug = logger.debug
    verbose = logger.verbose


def get_level() -> LogLevel:
    """Current threshold of the shared logger."""
    return _logger.level


def set_level(level: LogLevel) -> None:
    """Set the threshold of the shared logger."""
    _logger.level = level


__all__ = [
    "Logger",
    "LoggerBuilder",
    "CallSite",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "formatters",
    "writers",
    "init",
    "uninit",
    "info",
    "error",
    "warn",
    "debug",
    "verbose",
    "get_logger",
    "set_logger",
    "get_level",
    "set_level",
]
