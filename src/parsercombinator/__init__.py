"""parsercombinator - composable matchers for structured text.

Build a parser by composing literal and pattern matchers with sequence()
and optional(), label the parts you care about, and read them back from
the result by name.

    >>> from parsercombinator import natnum, sequence
    >>> semver = sequence(
    ...     ("major", natnum), ".", ("minor", natnum), ".", ("patch", natnum),
    ... )
    >>> result = semver("1.0.0")
    >>> result.major.str
    '1'

Public API:
    make_cursor - Wrap a string (or pass a Cursor through)
    literal, pattern - Primitive matchers
    sequence, optional - Combinators
    alternation - Declared but unsupported (always fails)
    named - Attach a label to a grammar item
    natnum, integer, word, identifier, handle - Ready-made matchers
    ParseResult - Result of every matcher call

Exceptions:
    CombinatorError - Base exception class
    InvalidInputError - Input is not a non-empty str or a Cursor
    GrammarError - Grammar item cannot be built into a matcher
    ParseFailedError - Raised by ParseResult.unwrap() on failure

Submodules:
    parsercombinator.syntax - Cursor, matchers, combinators, result model
    parsercombinator.diagnostics - Diagnostic codes, templates, formatter
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    CombinatorError,
    GrammarError,
    InvalidInputError,
    ParseFailedError,
)
from .syntax import (
    Cursor,
    Matcher,
    ParseResult,
    alternation,
    handle,
    identifier,
    integer,
    literal,
    make_cursor,
    named,
    natnum,
    optional,
    pattern,
    sequence,
    word,
)

# Short names used by grammar authors
lit = literal
regexp = pattern
seq = sequence
opt = optional
alt = alternation

try:
    __version__ = _get_version("parsercombinator")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombinatorError",
    "Cursor",
    "GrammarError",
    "InvalidInputError",
    "Matcher",
    "ParseFailedError",
    "ParseResult",
    "__version__",
    "alt",
    "alternation",
    "handle",
    "identifier",
    "integer",
    "lit",
    "literal",
    "make_cursor",
    "named",
    "natnum",
    "opt",
    "optional",
    "pattern",
    "regexp",
    "seq",
    "sequence",
    "word",
]
