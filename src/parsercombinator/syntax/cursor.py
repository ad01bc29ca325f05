"""Immutable cursor over the text being parsed.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every advance() returns a NEW cursor, so a failed branch is simply
      discarded: the caller still holds the last good cursor
    - The remaining text is derived from (source, pos), never stored
    - Line:column computed on-demand (only needed for diagnostics)

Invariant:
    cursor.pos + len(cursor.remaining) == len(cursor.source)
"""

import re
from dataclasses import dataclass

from parsercombinator.diagnostics import ErrorTemplate, InvalidInputError, SourceSpan

__all__ = ["Cursor", "make_cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = make_cursor("1.0.0")
        >>> cursor.peek(2)
        '1.'
        >>> rest = cursor.advance(2)
        >>> rest.remaining
        '0.0'
        >>> cursor.pos  # Original unchanged
        0
        >>> rest.advance(3).is_complete
        True
    """

    source: str
    pos: int = 0

    def __post_init__(self) -> None:
        """Validate that pos lies within the source.

        Raises:
            ValueError: If pos is negative or beyond the end of source
        """
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor.pos must be within 0..{len(self.source)}, got {self.pos}"
            raise ValueError(msg)

    @property
    def remaining(self) -> str:
        """Text not consumed yet."""
        return self.source[self.pos :]

    @property
    def is_complete(self) -> bool:
        """True once every character of the source has been consumed.

        Note: A complete cursor is still a valid matcher input; matchers
              that require text simply fail on it.
        """
        return self.pos >= len(self.source)

    def peek(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            Up to n characters; fewer when near the end of the source.

        Example:
            >>> Cursor("hello", 3).peek(10)
            'lo'
        """
        return self.source[self.pos : self.pos + n]

    def match_pattern(self, pattern: str | re.Pattern[str]) -> str | None:
        """Match pattern against the start of the remaining text.

        The pattern sees only the remaining text, so ``^`` anchors at the
        cursor position and lookbehind cannot inspect consumed input.

        Args:
            pattern: Pattern source or compiled pattern

        Returns:
            Matched substring (possibly empty), or None if no match.
            Does not advance.
        """
        m = re.match(pattern, self.remaining)
        if m is None:
            return None
        return m.group(0)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Advancing past the end clamps to the end of the source; matchers
        never request more than is available.
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("name\\n@scope", 6).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 0) -> SourceSpan:
        """Build a diagnostic span starting at the current position."""
        line, col = self.compute_line_col()
        end = min(self.pos + length, len(self.source))
        return SourceSpan(start=self.pos, end=end, line=line, column=col)


def make_cursor(source: "str | Cursor") -> Cursor:
    """Wrap parseable input in a Cursor.

    Wrapping is idempotent: an existing Cursor is returned unchanged, so
    every matcher can accept either a raw string or a cursor handed down by
    an enclosing combinator.

    Args:
        source: Non-empty string, or an existing Cursor

    Returns:
        Cursor at position 0 of the string, or the given cursor

    Raises:
        InvalidInputError: If source is empty, falsy, or of another type
    """
    if isinstance(source, Cursor):
        return source
    if not isinstance(source, str) or not source:
        raise InvalidInputError(ErrorTemplate.invalid_input(source))
    return Cursor(source, 0)
