"""
Startup banner and shutdown report
"""

import math
from datetime import datetime
from typing import List, Optional

from process_logger.core.log_entry import iso_timestamp

MS_PER_HOUR = 3_600_000
NOT_INITIALIZED = "<not initialized>"


def uptime_hours(start_time: Optional[datetime], end_time: datetime) -> int:
    """
    Whole hours between two instants, rounded half up.

    90 minutes is 2 hours, 89 minutes is 1 hour. Direction does not
    matter. A missing start yields 0.
    """
    if start_time is None:
        return 0
    elapsed_ms = abs((end_time - start_time).total_seconds()) * 1000
    return int(math.floor(elapsed_ms / MS_PER_HOUR + 0.5))


class ReportFormatter:
    """Render the lifecycle banner and report as lists of lines."""

    def banner(
        self,
        product_name: str,
        product_version: str,
        start_time: datetime
    ) -> List[str]:
        """
        Build the startup banner.

        Args:
            product_name: Name of the product
            product_version: Version of the product
            start_time: Instant the application started; the copyright
                        year is its year in the host's local time

        Returns:
            Lines to print, blank lines included
        """
        return [
            f"{product_name} v{product_version}",
            f"Copyright © {start_time.astimezone().year}",
            "",
            f"Started application at {iso_timestamp(start_time)}",
            "",
        ]

    def shutdown_report(
        self,
        exit_code: int,
        start_time: Optional[datetime],
        end_time: datetime,
        warnings: int,
        errors: int
    ) -> List[str]:
        """
        Build the shutdown statistics report.

        Args:
            exit_code: Application exit code
            start_time: Instant ``init`` ran, None if it never did
            end_time: Instant of shutdown
            warnings: Total warnings counted
            errors: Total errors counted

        Returns:
            Lines to print, blank lines included
        """
        started = iso_timestamp(start_time) if start_time else NOT_INITIALIZED
        return [
            "",
            f"Application exited with code {exit_code}",
            "",
            f"Application Started: {started}",
            f"Application ended: {iso_timestamp(end_time)}",
            f"Application uptime: {uptime_hours(start_time, end_time)} Hours",
            f"Total Warnings: {warnings}",
            f"Total errors: {errors}",
            "",
        ]

    def __repr__(self) -> str:
        return "ReportFormatter()"
