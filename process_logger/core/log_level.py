"""
Log level enumeration

Higher values are more verbose. A message is shown when the configured
threshold is at least as verbose as the message.
"""

from enum import IntEnum
from typing import Dict, Optional, Union


class LogLevel(IntEnum):
    """Log level enumeration, ordered from least to most verbose."""

    ERROR = 0       # Errors, always shown
    WARN = 1        # Warning messages
    INFO = 2        # Informational messages (recommended in production)
    DEBUG = 3       # Debug information
    VERBOSE = 4     # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive, no surrounding blanks)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.upper())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def parse(
        cls,
        value: Union["LogLevel", str, int, None],
        default: Optional["LogLevel"] = None,
    ) -> "LogLevel":
        """
        Leniently convert a level given as enum, int or name.

        Unknown names, absent and falsy values yield ``default``
        (INFO unless given). Never raises.
        """
        if default is None:
            default = cls.INFO

        # An explicit member wins, so ERROR is kept even though it is 0
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls.from_string(value)
            except ValueError:
                return default
        if not value or isinstance(value, bool):
            return default
        try:
            return cls(value)
        except (ValueError, TypeError):
            return default


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {level: level.name for level in LogLevel}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
