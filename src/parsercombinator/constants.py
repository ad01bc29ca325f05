"""Shared constants for parsercombinator.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Built-in patterns: Character classes of the ready-made matchers
- Diagnostics: Output limits for formatted error messages
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Built-in patterns
    "NATNUM_PATTERN",
    "INTEGER_PATTERN",
    "WORD_PATTERN",
    "IDENTIFIER_PATTERN",
    "HANDLE_PATTERN",
    # Diagnostics
    "DEFAULT_MAX_CONTENT_LENGTH",
]

# ============================================================================
# BUILT-IN PATTERNS
# ============================================================================
#
# Character classes are ASCII-only on purpose: `\d` and `\w` match Unicode
# digits and letters under Python's default `re` semantics.
#
# None of these patterns can produce a zero-length match.

NATNUM_PATTERN: str = r"[0-9]+"
"""Natural number: one or more ASCII digits."""

INTEGER_PATTERN: str = r"-?[0-9]+"
"""Signed integer: optional minus sign followed by ASCII digits."""

WORD_PATTERN: str = r"[a-zA-Z]+"
"""Alphabetic word."""

IDENTIFIER_PATTERN: str = r"[a-zA-Z0-9_]+"
"""Identifier: alphanumerics and underscore."""

HANDLE_PATTERN: str = r"[a-zA-Z0-9_-]+"
"""Handle: alphanumerics, underscore and hyphen (package names, tags)."""

# ============================================================================
# DIAGNOSTICS
# ============================================================================

DEFAULT_MAX_CONTENT_LENGTH: int = 100
"""Truncation length applied by DiagnosticFormatter when sanitizing."""

