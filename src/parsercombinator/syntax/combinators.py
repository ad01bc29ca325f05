"""Combinators composing matchers into grammars.

Grammar items:
    Anywhere a combinator expects a sub-parser it accepts a grammar item,
    normalized once, when the grammar is built (see as_matcher()):

    - str            -> literal(item)
    - re.Pattern     -> pattern(item)
    - Matcher        -> used as is
    - (label, item)  -> as_matcher(item).bind(label)

    Anything else raises GrammarError at build time, never while parsing.

Example:
    >>> semver = sequence(
    ...     ("major", natnum), ".", ("minor", natnum), ".", ("patch", natnum),
    ... )
    >>> result = semver("1.0.0")
    >>> result.str, result.major.str, result.patch.str
    ('1.0.0', '1', '0')

Thread Safety:
    Combinators close over immutable tuples of matchers only. A parse
    allocates its own cursors and results, so grammars can be shared.
"""

from __future__ import annotations

import logging
import re
from typing import TypeAlias

from parsercombinator.diagnostics import ErrorTemplate, GrammarError

from .cursor import Cursor
from .matchers import Matcher, literal, pattern
from .result import ParseResult

__all__ = [
    "GrammarItem",
    "alternation",
    "as_matcher",
    "named",
    "optional",
    "sequence",
]

logger = logging.getLogger(__name__)

GrammarItem: TypeAlias = "str | re.Pattern[str] | Matcher | tuple[str, GrammarItem]"


def as_matcher(item: GrammarItem) -> Matcher:
    """Normalize a grammar item into a Matcher.

    Raises:
        GrammarError: If item is not a supported grammar item or carries
            an invalid label
    """
    match item:
        case Matcher():
            return item
        case str():
            return literal(item)
        case re.Pattern():
            return pattern(item)
        case tuple() if len(item) == 2:
            label, inner = item
            return as_matcher(inner).bind(label)
        case _:
            raise GrammarError(ErrorTemplate.invalid_grammar_item(item))


def named(label: str, item: GrammarItem) -> Matcher:
    """Attach label to a grammar item (same as ``(label, item)``)."""
    return as_matcher(item).bind(label)


def _describe(matcher: Matcher) -> str:
    if matcher.label is None:
        return matcher.description
    return f"{matcher.label}={matcher.description}"


def sequence(*items: GrammarItem) -> Matcher:
    """Match every item in order; fail as soon as one step fails.

    On success the matched text spans from the start position to the
    cursor after the last step, and every step that matched non-empty
    text is recorded as a child. Labeled children are addressable by
    name on the result; if two children share a label the later wins.

    On failure nothing is kept: the result is a SEQUENCE_STEP_FAILURE
    wrapping the failing step's index and diagnostic, positioned where
    that step failed.

    Limitation:
        Steps that match empty text (for example an optional() whose
        inner item failed) are not recorded, labeled or not.
    """
    steps = tuple(as_matcher(item) for item in items)

    def parse_sequence(cursor: Cursor) -> ParseResult:
        start = cursor
        children: list[ParseResult] = []
        for index, step in enumerate(steps):
            result = step(cursor)
            if result.diagnostic is not None:
                logger.debug(
                    "Sequence step #%d (%s) failed at %d: %s",
                    index,
                    _describe(step),
                    result.position,
                    result.diagnostic.message,
                )
                return ParseResult.failure(
                    ErrorTemplate.sequence_step_failure(index, result.diagnostic),
                    result.cursor,
                )
            cursor = result.cursor
            if result.text:
                children.append(result)
        return ParseResult.success(start.slice_to(cursor.pos), cursor, tuple(children))

    description = ", ".join(_describe(step) for step in steps)
    return Matcher(parse_sequence, f"sequence({description})")


def optional(item: GrammarItem) -> Matcher:
    """Match item zero or one time. Never fails.

    A success of item is passed through unchanged (label included). A
    failure becomes an empty success at the original cursor.
    """
    inner = as_matcher(item)

    def parse_optional(cursor: Cursor) -> ParseResult:
        result = inner(cursor)
        if result.diagnostic is not None:
            logger.debug(
                "Optional %s absorbed failure at %d: %s",
                _describe(inner),
                result.position,
                result.diagnostic.message,
            )
            return ParseResult.empty(cursor, label=inner.label)
        return result

    return Matcher(parse_optional, f"optional({_describe(inner)})")


def alternation(*items: GrammarItem) -> Matcher:
    """Placeholder for first-match-wins choice. NOT SUPPORTED.

    The branches are normalized, so malformed grammar items still raise
    GrammarError at build time, but none of them is ever tried: the
    returned matcher always yields an ALTERNATION_UNSUPPORTED failure with
    no matched text.

    The stub yields a failure, not an empty result: a grammar that uses it
    never matches. Its diagnostic has warning severity. Wrapping it in
    optional() gives the empty result.
    """
    branches = tuple(as_matcher(item) for item in items)
    logger.warning(
        "alternation() is not supported: the %d-branch matcher never matches",
        len(branches),
    )

    def parse_alternation(cursor: Cursor) -> ParseResult:
        return ParseResult.failure(ErrorTemplate.alternation_unsupported(cursor.span()), cursor)

    description = " | ".join(_describe(branch) for branch in branches)
    return Matcher(parse_alternation, f"alternation({description})")
