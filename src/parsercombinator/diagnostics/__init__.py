"""Diagnostic system for parser combinators.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CombinatorError,
    GrammarError,
    InvalidInputError,
    ParseFailedError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "InvalidInputError",
    "OutputFormat",
    "ParseFailedError",
    "SourceSpan",
]
