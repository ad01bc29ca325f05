"""Exception hierarchy with structured diagnostics.

Match failures are never raised: matchers return them as data inside a
ParseResult. Exceptions are reserved for precondition violations (input
that is not parseable at all, grammars that cannot be built) and for the
opt-in ParseResult.unwrap() convenience.

Zero external dependencies.
"""

from .codes import Diagnostic


class CombinatorError(Exception):
    """Base exception for all parsercombinator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidInputError(CombinatorError, TypeError):
    """Input is neither a non-empty string nor an existing Cursor.

    Raised by make_cursor() and therefore by every matcher invocation.
    Not caught anywhere inside the engine.
    """


class GrammarError(CombinatorError):
    """Grammar item cannot be turned into a matcher.

    Raised while a grammar is being composed (unsupported item type,
    invalid label, uncompilable pattern), never while parsing.
    """


class ParseFailedError(CombinatorError):
    """Raised by ParseResult.unwrap() when called on a failure.

    Attributes:
        position: Offset in the input where matching failed
    """

    def __init__(self, message: str | Diagnostic, *, position: int = 0) -> None:
        """Initialize ParseFailedError.

        Args:
            message: Error message string OR Diagnostic object
            position: Offset in the input where matching failed
        """
        super().__init__(message)
        self.position = position
