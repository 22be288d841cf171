"""Call-site capture by live stack introspection"""

import inspect
import os

from process_logger.core.log_entry import CallSite

UNKNOWN = CallSite("<unknown>", 0)


def caller(depth: int = 1) -> CallSite:
    """
    Return the source location ``depth`` frames above the calling function.

    With ``depth=1`` a logging method gets the location of whoever called
    it. Nothing is raised or unwound; the current frame chain is walked.
    """
    frame = inspect.currentframe()
    try:
        # Skip this function's own frame, then the requested levels
        for _ in range(depth + 1):
            if frame is None:
                return UNKNOWN
            frame = frame.f_back
        if frame is None:
            return UNKNOWN
        return CallSite(
            file_name=os.path.basename(frame.f_code.co_filename),
            line_number=frame.f_lineno,
        )
    finally:
        del frame
