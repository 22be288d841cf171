"""Console writer for the informational and diagnostic streams"""

import sys
from typing import Optional
from process_logger.core.log_entry import LogEntry
from process_logger.formatters.line_formatter import LineFormatter


class ConsoleWriter:
    """Write logs to a console stream."""

    def __init__(
        self,
        stream=None,
        formatter: Optional[LineFormatter] = None,
        use_stderr: bool = False
    ):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, or sys.stderr
                    when use_stderr is set), looked up on every write
            formatter: Log formatter (default: LineFormatter)
            use_stderr: Fall back to sys.stderr instead of sys.stdout
        """
        self._stream = stream
        self.use_stderr = use_stderr
        self.formatter = formatter or LineFormatter()

    @property
    def stream(self):
        """Configured stream, or the current process stream."""
        if self._stream is not None:
            return self._stream
        return sys.stderr if self.use_stderr else sys.stdout

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        self.write_line(self.formatter.format(entry))

    def write_line(self, text: str):
        """Write one raw line, used for banners and reports."""
        stream = self.stream
        stream.write(text + "\n")
        stream.flush()
