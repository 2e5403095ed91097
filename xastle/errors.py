"""The game's error type and the check for step results."""

from __future__ import annotations

import inspect
from typing import Optional


class CidError(Exception):
    """An error carrying the line and file where it was raised."""

    def __init__(
        self,
        line: Optional[int] = None,
        file: Optional[str] = None,
        message: str = "NOTOK",
    ) -> None:
        if line is None or file is None:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            if caller is not None:
                line = caller.f_lineno if line is None else line
                file = caller.f_code.co_filename if file is None else file
            del frame, caller
        self.line = 0 if line is None else line
        self.file = "" if file is None else file
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return (
            f"\nError! [LINE]: {self.line}"
            f"\n   [FILE]: {self.file}"
            f"\n    [ISSUE]: {self.message}"
        )


def check(result: str) -> None:
    """Raise CidError at the caller's location unless result is "OK"."""
    if result == "OK":
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    line = caller.f_lineno if caller is not None else 0
    file = caller.f_code.co_filename if caller is not None else ""
    del frame, caller
    raise CidError(line, file, result)