"""Error values the loggers know how to record.

Two shapes are accepted: a Python exception (or its pre-extracted
``ExceptionDetails``) and a ``HostError`` carrying a code, a message and an
arbitrary data payload. Anything else is ignored by the loggers.
"""

import traceback
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ExceptionDetails:
    type_name: str
    message: str
    file: Optional[str]
    line: Optional[int]
    trace: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExceptionDetails":
        """
        Extract the loggable parts of an exception.

        File and line point at the innermost frame of the traceback. An
        exception that was never raised has no traceback, so both are None
        and the trace is empty.
        """
        tb = exc.__traceback__
        frames = traceback.extract_tb(tb) if tb is not None else []
        if frames:
            file, line = frames[-1].filename, frames[-1].lineno
        else:
            file, line = None, None
        return cls(
            type_name=type(exc).__name__,
            message=str(exc),
            file=file,
            line=line,
            trace="".join(traceback.format_tb(tb)) if tb is not None else "",
        )


@dataclass(frozen=True)
class HostError:
    """Error value handed out by the host application instead of raising."""
    code: str
    message: str
    data: Any = None
