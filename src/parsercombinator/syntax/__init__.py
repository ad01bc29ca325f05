"""Parsing engine: cursor, result model, matchers and combinators.

Module Organization:
- cursor.py: Immutable Cursor and make_cursor()
- result.py: ParseResult (success/failure, named children)
- matchers.py: Matcher, literal(), pattern() and the built-in matchers
- combinators.py: sequence(), optional(), alternation() and label binding
"""

from .combinators import GrammarItem, alternation, as_matcher, named, optional, sequence
from .cursor import Cursor, make_cursor
from .matchers import (
    Matcher,
    handle,
    identifier,
    integer,
    literal,
    natnum,
    pattern,
    word,
)
from .result import ParseResult

__all__ = [
    "Cursor",
    "GrammarItem",
    "Matcher",
    "ParseResult",
    "alternation",
    "as_matcher",
    "handle",
    "identifier",
    "integer",
    "literal",
    "make_cursor",
    "named",
    "natnum",
    "optional",
    "pattern",
    "sequence",
    "word",
]
