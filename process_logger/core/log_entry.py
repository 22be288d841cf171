"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from process_logger.core.log_level import LogLevel

UNAUTHENTICATED = "Unauthenticated"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def iso_timestamp(dt: datetime) -> str:
    """
    Render a datetime as ISO-8601 UTC with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.

    Example:
        2022-04-10T08:30:00.125Z
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class CallSite:
    """Source location of the code that invoked a logging method."""

    file_name: str
    line_number: int

    def __str__(self) -> str:
        return f"{self.line_number}@{self.file_name}"


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. An entry carries
    either a call site or request identity (``ip`` and optional
    ``username``); when ``ip`` is set the identity wins.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=utc_now)
    call_site: Optional[CallSite] = None
    ip: Optional[str] = None
    username: Optional[str] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def origin(self) -> str:
        """``user@ip`` for request entries, ``line@file`` otherwise."""
        if self.ip is not None:
            return f"{self.username or UNAUTHENTICATED}@{self.ip}"
        if self.call_site is None:
            return str(CallSite("<unknown>", 0))
        return str(self.call_site)
