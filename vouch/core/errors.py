"""
Error classes: one kind for failed assertions, one for malformed ones.
"""
from __future__ import annotations
from typing import Any, NamedTuple, Optional

class StackAnchor(NamedTuple):
    filename: str
    lineno: int
    function: str

    def __str__(self):
        return f"{self.filename}:{self.lineno} in {self.function}"

class VouchError(Exception):
    """Base for internal errors."""

class UsageError(VouchError):
    """The assertion itself is malformed (bad arguments, unknown flag, name clash)."""

class AssertionFailure(VouchError, AssertionError):
    def __init__(self, message: str, expected: Any = None, actual: Any = None,
                 stack_anchor: Optional[StackAnchor] = None, stack: Optional[str] = None,
                 show_diff: bool = False):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.stack_anchor = stack_anchor
        self.stack = stack
        self.show_diff = show_diff

    def __str__(self):
        if self.stack:
            return f"{self.message}\n{self.stack}"
        return self.message
