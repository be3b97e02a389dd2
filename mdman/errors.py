"""Errors raised while compiling a manual page."""
from __future__ import annotations

from typing import Optional


class MalformedDocument(Exception):
    """The source document cannot be compiled.

    Raised when a description has no sentence terminator, or when the
    document ends before an entry's description or comment block does.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line + 1})"
