"""Logger builder pattern"""

from datetime import datetime
from typing import Callable, Optional, Union

from process_logger.core.logger import Logger
from process_logger.core.logger_config import LoggerConfig
from process_logger.core.log_level import LogLevel


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._clock: Optional[Callable[[], datetime]] = None

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set the threshold used until ``init`` is called."""
        self._config.level = LogLevel.parse(level)
        return self

    def with_streams(self, info_stream=None, error_stream=None) -> "LoggerBuilder":
        """
        Redirect console output.

        Args:
            info_stream: Stream for banner, report and info lines
            error_stream: Stream for error, warn, debug and verbose lines

        Returns:
            Self for method chaining

        Example:
            buffer = io.StringIO()
            logger = (LoggerBuilder()
                .with_streams(info_stream=buffer, error_stream=buffer)
                .build())
        """
        self._config.info_stream = info_stream
        self._config.error_stream = error_stream
        return self

    def with_thread_safety(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable locking around shared state."""
        self._config.thread_safe = enabled
        return self

    def with_strict_lifecycle(self, enabled: bool = True) -> "LoggerBuilder":
        """Make ``uninit`` raise when ``init`` was never called."""
        self._config.strict_lifecycle = enabled
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use a custom time source returning aware UTC datetimes."""
        self._clock = clock
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on the accumulated settings
        config = LoggerConfig(
            level=self._config.level,
            info_stream=self._config.info_stream,
            error_stream=self._config.error_stream,
            thread_safe=self._config.thread_safe,
            strict_lifecycle=self._config.strict_lifecycle,
        )
        return Logger(config, clock=self._clock)
