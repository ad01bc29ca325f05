"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (values that cannot be parsed at all)
        2000-2999: Grammar errors (raised while a grammar is being built)
        3000-3999: Match failures (returned as data inside a ParseResult)
    """

    # Input errors (1000-1999)
    INVALID_INPUT = 1001

    # Grammar errors (2000-2999)
    INVALID_GRAMMAR_ITEM = 2001
    INVALID_PATTERN = 2002
    INVALID_LABEL = 2003

    # Match failures (3000-3999)
    LITERAL_MISMATCH = 3001
    PATTERN_MISMATCH = 3002
    SEQUENCE_STEP_FAILURE = 3003
    INCOMPLETE_PARSE = 3004
    ALTERNATION_UNSUPPORTED = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or
                line/column are less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Match failures returned by
    matchers carry one of these instead of raising.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors not tied to input text)
        hint: Suggestion for fixing the error
        expected: What the matcher expected to find at the span
        cause: Inner diagnostic this one wraps (sequence step failures)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: tuple[str, ...] = ()
    cause: Diagnostic | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def root_cause(self) -> Diagnostic:
        """Innermost diagnostic of the cause chain (self when unwrapped)."""
        diagnostic = self
        while diagnostic.cause is not None:
            diagnostic = diagnostic.cause
        return diagnostic

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[LITERAL_MISMATCH]: failed to match literal '@' at 3
              --> line 1, column 4
              = expected: '@'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
