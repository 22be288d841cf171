"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Any, Optional

from process_logger.core.log_level import LogLevel


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Streams left as None are resolved to ``sys.stdout`` (informational)
    and ``sys.stderr`` (diagnostic) at write time.
    """

    # Basic settings
    level: LogLevel = LogLevel.INFO

    # Console settings
    info_stream: Optional[Any] = None
    error_stream: Optional[Any] = None

    # Safety settings
    thread_safe: bool = True
    strict_lifecycle: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.level, LogLevel):
            self.level = LogLevel.parse(self.level)

        for attr in ("info_stream", "error_stream"):
            stream = getattr(self, attr)
            if stream is not None and not callable(getattr(stream, "write", None)):
                raise TypeError(f"{attr} must provide a write() method")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(level=LogLevel.VERBOSE)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARN,
            strict_lifecycle=True,
        )
