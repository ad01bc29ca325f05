"""Result model shared by every matcher.

A ParseResult is either a success (matched text, children, cursor after the
match) or a failure (diagnostic, cursor at the failing position). Failures
are data: matchers return them instead of raising.

Named children:
    Children carrying a label are addressable from their parent:

        >>> result = semver("1.0.0")
        >>> result.major.str
        '1'
        >>> result["minor"].str
        '0'
        >>> "prerelease" in result
        False

    Bindings are derived from the ordered child tuple, so a name always
    refers to one of the children. When two children share a label the
    later one wins.

Limitation:
    Zero-length results are never recorded as children by sequence(), so
    a labeled step that matched empty text is not addressable by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from parsercombinator.diagnostics import Diagnostic, ParseFailedError

from .cursor import Cursor

__all__ = ["ParseResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of one matcher invocation.

    Attributes:
        text: Matched text; None on failure, "" for an empty success
        cursor: Cursor after the match on success, at the failure on failure
        children: Recorded sub-results, in input order
        label: Name under which the parent exposes this result
        diagnostic: Failure description; None on success
    """

    text: str | None
    cursor: Cursor = field(repr=False)
    children: tuple[ParseResult, ...] = ()
    label: str | None = None
    diagnostic: Diagnostic | None = None

    def __post_init__(self) -> None:
        """Enforce that a result is exactly one of success or failure.

        Raises:
            ValueError: If both or neither of text and diagnostic are set
        """
        if (self.text is None) == (self.diagnostic is None):
            msg = "ParseResult must carry exactly one of text or diagnostic"
            raise ValueError(msg)

    @classmethod
    def success(
        cls,
        text: str,
        cursor: Cursor,
        children: tuple[ParseResult, ...] = (),
        label: str | None = None,
    ) -> ParseResult:
        """Create a successful result."""
        return cls(text=text, cursor=cursor, children=children, label=label)

    @classmethod
    def empty(cls, cursor: Cursor, label: str | None = None) -> ParseResult:
        """Create a success that consumed nothing."""
        return cls(text="", cursor=cursor, label=label)

    @classmethod
    def failure(
        cls, diagnostic: Diagnostic, cursor: Cursor, label: str | None = None
    ) -> ParseResult:
        """Create a failed result."""
        return cls(text=None, cursor=cursor, label=label, diagnostic=diagnostic)

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------

    @property
    def ok(self) -> bool:
        """True for a success (including an empty success)."""
        return self.diagnostic is None

    @property
    def failed(self) -> bool:
        """True for a failure."""
        return self.diagnostic is not None

    @property
    def error(self) -> str | None:
        """Failure message, or None on success."""
        if self.diagnostic is None:
            return None
        return self.diagnostic.message

    @property
    def position(self) -> int:
        """Offset after the match on success, failing offset on failure."""
        return self.cursor.pos

    @property
    def remainder(self) -> Cursor:
        """Cursor from which the next matcher continues."""
        return self.cursor

    @property
    def is_complete(self) -> bool:
        """True when a success consumed the input up to its end."""
        return self.ok and self.cursor.is_complete

    def unwrap(self) -> ParseResult:
        """Return self on success.

        Raises:
            ParseFailedError: If this result is a failure
        """
        if self.diagnostic is not None:
            raise ParseFailedError(self.diagnostic, position=self.cursor.pos)
        return self

    def with_label(self, label: str | None) -> ParseResult:
        """Copy of this result exposed under another label."""
        if label == self.label:
            return self
        return replace(self, label=label)

    # ------------------------------------------------------------------
    # Named children
    # ------------------------------------------------------------------

    @property
    def bindings(self) -> dict[str, ParseResult]:
        """Labeled children by label (later children shadow earlier ones)."""
        return {child.label: child for child in self.children if child.label is not None}

    def __getitem__(self, label: str) -> ParseResult:
        for child in reversed(self.children):
            if child.label == label:
                return child
        raise KeyError(label)

    def __contains__(self, label: object) -> bool:
        return any(child.label == label for child in self.children)

    def __getattr__(self, name: str) -> ParseResult:
        # Only reached when regular lookup fails; fields and dunders never
        # resolve to bindings.
        if name.startswith("_") or name in _FIELD_NAMES:
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            msg = f"{type(self).__name__} has no binding named {name!r}"
            raise AttributeError(msg) from None

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain nested dicts (for logging and inspection)."""
        data: dict[str, Any] = {
            "text": self.text,
            "label": self.label,
            "position": self.cursor.pos,
        }
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        if self.diagnostic is not None:
            data["error"] = self.diagnostic.message
            data["code"] = self.diagnostic.code.name
        return data

    # Defined last: inside the class body this name shadows the builtin.
    @property
    def str(self) -> str | None:
        """Matched text (alias of text)."""
        return self.text


_FIELD_NAMES = frozenset(f.name for f in fields(ParseResult))
