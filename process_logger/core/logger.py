"""
Main Logger class - process-wide leveled console logger
"""

from __future__ import annotations
from contextlib import nullcontext
from datetime import datetime, timedelta
from typing import Callable, Optional, Union
import sys
import threading

from process_logger.core.call_site import caller
from process_logger.core.log_entry import CallSite, LogEntry, utc_now
from process_logger.core.log_level import LogLevel
from process_logger.core.logger_config import LoggerConfig
from process_logger.formatters.report_formatter import ReportFormatter
from process_logger.writers.console_writer import ConsoleWriter


class Logger:
    """
    Leveled logger with lifecycle hooks.

    ``init`` prints a banner and resets the counters, ``uninit`` prints a
    report with uptime and totals. ``info`` writes to the informational
    stream; ``error``, ``warn``, ``debug`` and ``verbose`` write to the
    diagnostic stream. Errors are always shown. Warnings are always
    counted, even when the threshold hides them.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self._config = config or LoggerConfig.default()
        self._clock = clock or utc_now
        self._lock = threading.RLock() if self._config.thread_safe else nullcontext()

        self._level = self._config.level
        self._errors = 0
        self._warnings = 0
        self._start_time: Optional[datetime] = None

        self._info_writer = ConsoleWriter(stream=self._config.info_stream)
        self._error_writer = ConsoleWriter(stream=self._config.error_stream, use_stderr=True)
        self._report_formatter = ReportFormatter()
        self._metrics = {"emitted": 0, "suppressed": 0, "writer_errors": 0}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(
        self,
        level: Union[LogLevel, str, None],
        product_name: str,
        product_version: str
    ) -> None:
        """
        Reset counters, record the start time and print the banner.

        Args:
            level: Threshold as LogLevel or case-insensitive name. Unknown
                   names and empty values fall back to INFO.
            product_name: Name of the product
            product_version: Version of the product
        """
        with self._lock:
            self._errors = 0
            self._warnings = 0
            self._start_time = self._clock()
            self._level = LogLevel.parse(level)

            for line in self._report_formatter.banner(
                product_name, product_version, self._start_time
            ):
                self._write_line(self._info_writer, line)

    def uninit(self, exit_code: int) -> None:
        """
        Print exit code, uptime and totals.

        State is left untouched, so logging may continue afterwards.

        Raises:
            RuntimeError: If ``init`` was never called and the config
                          asks for a strict lifecycle
        """
        with self._lock:
            if self._start_time is None and self._config.strict_lifecycle:
                raise RuntimeError("Logger not initialized")

            for line in self._report_formatter.shutdown_report(
                exit_code,
                self._start_time,
                self._clock(),
                self._warnings,
                self._errors,
            ):
                self._write_line(self._info_writer, line)

    # ------------------------------------------------------------------
    # Threshold
    # ------------------------------------------------------------------

    @property
    def level(self) -> LogLevel:
        """Current threshold."""
        return self._level

    @level.setter
    def level(self, level: LogLevel) -> None:
        with self._lock:
            self._level = level

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether a message at ``level`` passes the threshold."""
        return self._level >= level

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def info(
        self,
        message: str,
        ip: Optional[str] = None,
        username: Optional[str] = None
    ) -> None:
        """
        Log info message.

        Pass ``ip`` (and ``username`` when known) for request-related
        events such as logins or data changes; the line then names the
        user instead of the source location.
        """
        site = caller() if ip is None else None
        self._emit(
            self._info_writer,
            LogLevel.INFO,
            message,
            call_site=site,
            ip=ip,
            username=username,
        )

    def error(self, message: str) -> None:
        """Log error message. Never filtered, always counted."""
        site = caller()
        with self._lock:
            self._errors += 1
            self._emit(self._error_writer, LogLevel.ERROR, message, call_site=site, force=True)

    def warn(self, message: str) -> None:
        """Log warning message. Counted even when filtered."""
        site = caller()
        with self._lock:
            self._warnings += 1
            self._emit(self._error_writer, LogLevel.WARN, message, call_site=site)

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._emit(self._error_writer, LogLevel.DEBUG, message, call_site=caller())

    def verbose(self, message: str) -> None:
        """Log verbose message."""
        self._emit(self._error_writer, LogLevel.VERBOSE, message, call_site=caller())

    def _emit(
        self,
        writer: ConsoleWriter,
        level: LogLevel,
        message: str,
        call_site: Optional[CallSite] = None,
        ip: Optional[str] = None,
        username: Optional[str] = None,
        force: bool = False
    ) -> None:
        """Gate, build and write one entry."""
        with self._lock:
            if not force and not self.is_enabled_for(level):
                self._metrics["suppressed"] += 1
                return

            entry = LogEntry(
                level=level,
                message=message,
                timestamp=self._clock(),
                call_site=call_site,
                ip=ip,
                username=username,
            )
            try:
                writer.write(entry)
                self._metrics["emitted"] += 1
            except Exception as e:
                self._writer_failed(e)

    def _write_line(self, writer: ConsoleWriter, text: str) -> None:
        try:
            writer.write_line(text)
        except Exception as e:
            self._writer_failed(e)

    def _writer_failed(self, error: Exception) -> None:
        self._metrics["writer_errors"] += 1
        print(f"Writer error: {error}", file=sys.__stderr__)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    @property
    def error_count(self) -> int:
        """Errors logged since the last ``init``."""
        return self._errors

    @property
    def warning_count(self) -> int:
        """Warnings logged since the last ``init``, shown or not."""
        return self._warnings

    @property
    def start_time(self) -> Optional[datetime]:
        """Instant of the last ``init``, None before it."""
        return self._start_time

    @property
    def is_initialized(self) -> bool:
        """Whether ``init`` has run at least once."""
        return self._start_time is not None

    def uptime(self) -> timedelta:
        """Elapsed time since ``init``; zero when not initialized."""
        with self._lock:
            if self._start_time is None:
                return timedelta(0)
            return abs(self._clock() - self._start_time)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            metrics = self._metrics.copy()
            metrics["errors"] = self._errors
            metrics["warnings"] = self._warnings
            return metrics
