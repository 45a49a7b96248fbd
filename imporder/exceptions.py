"""Errors raised when a file cannot be checked at all.

Import ordering problems are never raised; they are returned as
diagnostics. These exceptions cover the cases where there is nothing to
check: the file could not be read or is not valid Go.
"""
from __future__ import annotations
from typing import Any


class ImportOrderError(Exception):
    """Base class for imporder errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class GoSyntaxError(ImportOrderError):
    """The Go source could not be scanned."""

    def __init__(self, message: str, filename: str = "", line: int = 0, column: int = 0) -> None:
        super().__init__(message, filename=filename, line=line, column=column)
        self.filename = filename
        self.line = line
        self.column = column

    def __str__(self) -> str:
        location = f"{self.line}:{self.column}"
        if self.filename:
            location = f"{self.filename}:{location}"
        return f"{location}: {self.message}"


class FileReadError(ImportOrderError):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read file: {reason}", path=path)
        self.path = path
        self.reason = reason
