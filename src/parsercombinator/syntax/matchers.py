"""Primitive matchers.

A Matcher wraps a function ``Cursor -> ParseResult`` and can be called with
either a raw string or a Cursor. Matchers are immutable values: building a
grammar has no side effects and the same grammar can be reused for any
number of inputs, from any number of threads.

Building blocks:
    literal(text) - exact, case-sensitive text
    pattern(expr) - Python ``re`` pattern matched at the cursor

Ready-made matchers:
    natnum, integer, word, identifier, handle
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TypeAlias

from parsercombinator.constants import (
    HANDLE_PATTERN,
    IDENTIFIER_PATTERN,
    INTEGER_PATTERN,
    NATNUM_PATTERN,
    WORD_PATTERN,
)
from parsercombinator.diagnostics import ErrorTemplate, GrammarError

from .cursor import Cursor, make_cursor
from .result import ParseResult

__all__ = [
    "Matcher",
    "handle",
    "identifier",
    "integer",
    "literal",
    "natnum",
    "pattern",
    "validate_label",
    "word",
]

ParseFunction: TypeAlias = Callable[[Cursor], ParseResult]

_RESERVED_LABELS = frozenset(name for name in dir(ParseResult) if not name.startswith("_"))


def validate_label(label: object) -> str:
    """Check that label can address a child result as an attribute.

    A label must be an identifier that regular attribute lookup on
    ParseResult does not already resolve: names starting with "_" and
    the names of ParseResult fields, properties and methods are reserved.

    Raises:
        GrammarError: If label is not an identifier string or is reserved
    """
    if not isinstance(label, str) or not label.isidentifier():
        raise GrammarError(ErrorTemplate.invalid_label(label))
    if label.startswith("_") or label in _RESERVED_LABELS:
        raise GrammarError(
            ErrorTemplate.invalid_label(label, "the name is reserved by ParseResult")
        )
    return label


@dataclass(frozen=True, slots=True)
class Matcher:
    """Composable parser value.

    Attributes:
        parse_fn: Function run against the cursor
        description: Human-readable summary used in logs and reprs
        label: Name attached to every result this matcher produces
    """

    parse_fn: ParseFunction = field(repr=False, compare=False)
    description: str
    label: str | None = None

    def __call__(self, source: str | Cursor) -> ParseResult:
        """Run the matcher.

        Args:
            source: Non-empty string or Cursor

        Returns:
            Success or failure ParseResult (failures are never raised)

        Raises:
            InvalidInputError: If source is neither a non-empty str nor a Cursor
        """
        result = self.parse_fn(make_cursor(source))
        if self.label is not None:
            return result.with_label(self.label)
        return result

    def bind(self, label: str) -> Matcher:
        """Copy of this matcher whose results are exposed under label.

        Labels only affect how a parent result addresses the child; they
        never change what is matched.

        Example:
            >>> semver = sequence(natnum.bind("major"), ".", natnum.bind("minor"))
            >>> semver("1.2").minor.str
            '2'
        """
        return replace(self, label=validate_label(label))

    def parse_complete(self, source: str | Cursor) -> ParseResult:
        """Run the matcher and require it to consume all remaining input.

        Returns:
            The matcher's result, or an INCOMPLETE_PARSE failure positioned at
            the first unconsumed character if a success left trailing text.
        """
        result = self(source)
        if result.failed or result.cursor.is_complete:
            return result
        rest = result.cursor
        diagnostic = ErrorTemplate.incomplete_parse(
            rest.span(len(rest.remaining)), len(rest.remaining)
        )
        return ParseResult.failure(diagnostic, rest, label=result.label)


def literal(text: str) -> Matcher:
    """Match text exactly (case-sensitive).

    Raises:
        GrammarError: If text is not a string
    """
    if not isinstance(text, str):
        raise GrammarError(ErrorTemplate.invalid_grammar_item(text))
    size = len(text)

    def parse_literal(cursor: Cursor) -> ParseResult:
        if cursor.peek(size) == text:
            return ParseResult.success(text, cursor.advance(size))
        return ParseResult.failure(
            ErrorTemplate.literal_mismatch(text, cursor.span(size)), cursor
        )

    return Matcher(parse_literal, f"literal({text!r})")


def pattern(expr: str | re.Pattern[str]) -> Matcher:
    """Match a regular expression against the start of the remaining text.

    The pattern is compiled once, when the matcher is built. Matching
    follows Python ``re`` semantics (greedy quantifiers, leftmost match).

    Raises:
        GrammarError: If expr is not a str/Pattern or does not compile
    """
    if isinstance(expr, re.Pattern) and isinstance(expr.pattern, str):
        compiled = expr
    elif isinstance(expr, str):
        try:
            compiled = re.compile(expr)
        except re.error as e:
            raise GrammarError(ErrorTemplate.invalid_pattern(expr, str(e))) from e
    else:
        raise GrammarError(ErrorTemplate.invalid_grammar_item(expr))
    source = compiled.pattern

    def parse_pattern(cursor: Cursor) -> ParseResult:
        matched = cursor.match_pattern(compiled)
        if matched is None:
            return ParseResult.failure(
                ErrorTemplate.pattern_mismatch(source, cursor.span()), cursor
            )
        return ParseResult.success(matched, cursor.advance(len(matched)))

    return Matcher(parse_pattern, f"pattern({source!r})")


natnum = pattern(NATNUM_PATTERN)
integer = pattern(INTEGER_PATTERN)
word = pattern(WORD_PATTERN)
identifier = pattern(IDENTIFIER_PATTERN)
handle = pattern(HANDLE_PATTERN)
