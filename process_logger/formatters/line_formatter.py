"""
Single-line formatter

Produces ``LEVEL: <iso timestamp> - <origin>: <message>`` where origin is
``<line>@<file>`` or ``<user>@<ip>``.
"""

from process_logger.core.log_entry import LogEntry, iso_timestamp


class LineFormatter:
    """Format log entries in the console line grammar."""

    TEMPLATE = "{level}: {timestamp} - {origin}: {message}"

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as one console line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string, without trailing newline

        Example:
            INFO: 2022-04-10T08:30:00.125Z - 42@server.py: listening
            INFO: 2022-04-10T08:30:01.000Z - alice@10.0.0.1: logged in
        """
        return self.TEMPLATE.format(
            level=entry.level.name,
            timestamp=iso_timestamp(entry.timestamp),
            origin=entry.origin,
            message=entry.message,
        )

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(template='{self.TEMPLATE}')"
