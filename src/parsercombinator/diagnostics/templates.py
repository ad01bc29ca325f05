"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # ------------------------------------------------------------------
    # Input errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_input(value: object) -> Diagnostic:
        """Value cannot be wrapped in a Cursor.

        Args:
            value: The rejected value

        Returns:
            Diagnostic for INVALID_INPUT
        """
        if isinstance(value, str):
            msg = "Cannot parse an empty string"
        else:
            msg = f"Expected a str or Cursor to parse, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT,
            message=msg,
            hint="Pass a non-empty string or a Cursor returned by make_cursor()",
        )

    # ------------------------------------------------------------------
    # Grammar errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_grammar_item(item: object) -> Diagnostic:
        """Grammar item is not a literal, pattern, matcher or labeled pair.

        Args:
            item: The rejected grammar item

        Returns:
            Diagnostic for INVALID_GRAMMAR_ITEM
        """
        msg = f"Cannot build a matcher from {type(item).__name__}: {item!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_GRAMMAR_ITEM,
            message=msg,
            hint="Use a str, a compiled re.Pattern, a Matcher, or a (label, item) pair",
        )

    @staticmethod
    def invalid_pattern(source: str, error_msg: str) -> Diagnostic:
        """Regular expression failed to compile.

        Args:
            source: The pattern source text
            error_msg: Message of the re.error raised by the compiler

        Returns:
            Diagnostic for INVALID_PATTERN
        """
        msg = f"Invalid pattern {source!r}: {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PATTERN,
            message=msg,
            hint="Patterns follow Python re syntax",
        )

    @staticmethod
    def invalid_label(
        label: object, reason: str = "labels must be Python identifiers"
    ) -> Diagnostic:
        """Label cannot be used to address a child result.

        Args:
            label: The rejected label
            reason: Why the label was rejected

        Returns:
            Diagnostic for INVALID_LABEL
        """
        msg = f"Invalid label {label!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LABEL,
            message=msg,
            hint="Labels become attribute names on the parent result",
        )

    # ------------------------------------------------------------------
    # Match failures
    # ------------------------------------------------------------------

    @staticmethod
    def literal_mismatch(literal: str, span: SourceSpan) -> Diagnostic:
        """Literal text does not occur at the current position.

        Args:
            literal: The expected literal text
            span: Location where matching was attempted

        Returns:
            Diagnostic for LITERAL_MISMATCH
        """
        msg = f"failed to match literal {literal!r} at {span.start}"
        return Diagnostic(
            code=DiagnosticCode.LITERAL_MISMATCH,
            message=msg,
            span=span,
            expected=(literal,),
        )

    @staticmethod
    def pattern_mismatch(pattern: str, span: SourceSpan) -> Diagnostic:
        """Pattern does not match a prefix of the remaining text.

        Args:
            pattern: The pattern source text
            span: Location where matching was attempted

        Returns:
            Diagnostic for PATTERN_MISMATCH
        """
        msg = f"failed to match pattern {pattern!r} at {span.start}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MISMATCH,
            message=msg,
            span=span,
            expected=(pattern,),
        )

    @staticmethod
    def sequence_step_failure(index: int, cause: Diagnostic) -> Diagnostic:
        """A step of a sequence failed, aborting the whole sequence.

        Args:
            index: Zero-based index of the failing step
            cause: Diagnostic of the failing step

        Returns:
            Diagnostic for SEQUENCE_STEP_FAILURE (span copied from cause)
        """
        msg = f"failed to parse seq #{index}: {cause.message}"
        return Diagnostic(
            code=DiagnosticCode.SEQUENCE_STEP_FAILURE,
            message=msg,
            span=cause.span,
            expected=cause.expected,
            cause=cause,
        )

    @staticmethod
    def incomplete_parse(span: SourceSpan, remaining: int) -> Diagnostic:
        """Matcher succeeded but left input unconsumed.

        Args:
            span: Location of the first unconsumed character
            remaining: Number of unconsumed characters

        Returns:
            Diagnostic for INCOMPLETE_PARSE
        """
        msg = f"unexpected trailing input at {span.start} ({remaining} character(s) left)"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_PARSE,
            message=msg,
            span=span,
            hint="Extend the grammar to cover the rest of the input",
        )

    @staticmethod
    def alternation_unsupported(span: SourceSpan) -> Diagnostic:
        """Alternation was invoked; it never tries its branches.

        Args:
            span: Location where the alternation was invoked

        Returns:
            Diagnostic for ALTERNATION_UNSUPPORTED
        """
        msg = f"alternation is not supported (invoked at {span.start})"
        return Diagnostic(
            code=DiagnosticCode.ALTERNATION_UNSUPPORTED,
            message=msg,
            span=span,
            hint="Write one grammar per alternative and try them in order",
            severity="warning",
        )
