"""Tests for syntax.combinators: sequence, optional, alternation, labels.

Covers grammar item normalization, named-child addressing, all-or-nothing
sequencing, optional's failure absorption and the alternation stub.
"""

from __future__ import annotations

import logging
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from parsercombinator import (
    GrammarError,
    alternation,
    handle,
    literal,
    named,
    natnum,
    optional,
    pattern,
    sequence,
    word,
)
from parsercombinator.diagnostics import DiagnosticCode
from parsercombinator.syntax import Cursor, as_matcher

# ============================================================================
# GRAMMAR ITEM NORMALIZATION
# ============================================================================


class TestAsMatcher:
    """as_matcher turns grammar items into matchers at build time."""

    def test_string_becomes_literal(self) -> None:
        """A str item is a literal."""
        assert as_matcher("@").description == "literal('@')"
        assert as_matcher("@")("@x").str == "@"

    def test_pattern_becomes_pattern_matcher(self) -> None:
        """A compiled pattern item is a pattern matcher."""
        assert as_matcher(re.compile(r"[0-9]+"))("42x").str == "42"

    def test_matcher_passes_through(self) -> None:
        """A Matcher is used as is."""
        assert as_matcher(natnum) is natnum

    def test_labeled_pair(self) -> None:
        """A (label, item) pair binds the label to the normalized item."""
        matcher = as_matcher(("at", "@"))

        assert matcher.label == "at"
        assert matcher("@").label == "at"

    def test_nested_labeled_pair(self) -> None:
        """The item of a pair is itself normalized."""
        matcher = as_matcher(("outer", ("inner", natnum)))

        assert matcher.label == "outer"

    @pytest.mark.parametrize("item", [42, None, 1.5, ["a", "b"], ("a", "b", "c"), object()])
    def test_unsupported_items_rejected(self, item: object) -> None:
        """Other values raise GrammarError when the grammar is built."""
        with pytest.raises(GrammarError, match="Cannot build a matcher") as exc_info:
            as_matcher(item)  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_GRAMMAR_ITEM

    def test_invalid_label_in_pair_rejected(self) -> None:
        """The label of a pair must be an identifier."""
        with pytest.raises(GrammarError, match="Invalid label"):
            as_matcher((3, natnum))  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "label", ["error", "ok", "failed", "str", "position", "bindings", "to_dict", "unwrap"]
    )
    def test_result_attribute_labels_rejected(self, label: str) -> None:
        """Labels that ParseResult attributes would shadow are reserved."""
        with pytest.raises(GrammarError, match="reserved by ParseResult") as exc_info:
            as_matcher((label, natnum))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_LABEL

    @pytest.mark.parametrize("label", ["_x", "__dict__", "_"])
    def test_underscore_labels_rejected(self, label: str) -> None:
        """Labels starting with an underscore are reserved."""
        with pytest.raises(GrammarError, match="reserved by ParseResult"):
            as_matcher((label, natnum))

    def test_accepted_label_reachable_as_attribute(self) -> None:
        """Any accepted label resolves to its child by attribute."""
        result = sequence(("errors", natnum), ("okay", "!"))("1!")

        assert result.errors.str == "1"
        assert result.okay.str == "!"

    def test_sequence_validates_items_eagerly(self) -> None:
        """sequence() rejects bad items before any parse happens."""
        with pytest.raises(GrammarError):
            sequence("a", 42)  # type: ignore[arg-type]

    def test_named_helper(self) -> None:
        """named(label, item) is the same as a (label, item) pair."""
        assert named("n", "1")("1").label == "n"


# ============================================================================
# SEQUENCE
# ============================================================================


class TestSequence:
    """sequence(...) is ordered and all-or-nothing."""

    def test_matches_in_order(self) -> None:
        """Steps consume consecutive spans of the input."""
        result = sequence("a", natnum, "b")("a12b!")

        assert result.ok
        assert result.str == "a12b"
        assert result.position == 4
        assert [child.str for child in result.children] == ["a", "12", "b"]

    def test_named_children(self) -> None:
        """Labeled steps are addressable by name on the result."""
        result = sequence(("x", literal("a")), ("y", literal("b")))("ab")

        assert result.x.str == "a"
        assert result.y.str == "b"
        assert result["x"].str == "a"
        assert "x" in result
        assert set(result.bindings) == {"x", "y"}

    def test_unlabeled_children_not_addressable(self) -> None:
        """Unlabeled children appear positionally only."""
        result = sequence("a", ("y", "b"))("ab")

        assert len(result.children) == 2
        assert result.bindings == {"y": result.children[1]}

    def test_bindings_reference_children(self) -> None:
        """A binding is one of the recorded children, not a copy."""
        result = sequence(("x", "a"), "b")("ab")

        assert result.x is result.children[0]

    def test_failure_wraps_step_index(self) -> None:
        """The first failing step aborts with its index and message."""
        result = sequence("a", natnum, "b")("a12c")

        assert result.failed
        assert result.text is None
        assert result.children == ()
        assert result.error == "failed to parse seq #2: failed to match literal 'b' at 3"
        assert result.position == 3
        assert result.diagnostic is not None
        assert result.diagnostic.code is DiagnosticCode.SEQUENCE_STEP_FAILURE
        assert result.diagnostic.cause is not None
        assert result.diagnostic.cause.code is DiagnosticCode.LITERAL_MISMATCH

    def test_first_step_failure(self) -> None:
        """A failing first step reports index 0 and position 0."""
        result = sequence(natnum, ".")("x.")

        assert result.error is not None
        assert result.error.startswith("failed to parse seq #0: ")
        assert result.position == 0

    def test_nested_failure_messages_chain(self) -> None:
        """Nested sequences prefix each level's index."""
        result = sequence("v", sequence(natnum, ".", natnum))("v1.x")

        assert result.error == (
            "failed to parse seq #1: failed to parse seq #2: "
            "failed to match pattern '[0-9]+' at 3"
        )
        assert result.diagnostic is not None
        assert result.diagnostic.root_cause.code is DiagnosticCode.PATTERN_MISMATCH

    def test_does_not_require_full_input(self) -> None:
        """A sequence succeeds on a prefix; trailing text stays in the cursor."""
        result = sequence(word, "-")("abc-def")

        assert result.str == "abc-"
        assert result.remainder.remaining == "def"
        assert not result.is_complete

    def test_empty_sequence(self) -> None:
        """A sequence of nothing matches empty text."""
        result = sequence()("abc")

        assert result.ok
        assert result.str == ""
        assert result.position == 0

    def test_runs_from_cursor_position(self) -> None:
        """Matched text is relative to where the sequence started."""
        result = sequence(natnum, ".", natnum)(Cursor("v=1.2", 2))

        assert result.str == "1.2"
        assert result.remainder.is_complete

    def test_zero_length_children_excluded(self) -> None:
        """Steps matching empty text are not recorded, even when labeled."""
        result = sequence(("digits", pattern(r"[0-9]*")), ("name", word))("abc")

        assert result.ok
        assert "digits" not in result
        assert [child.label for child in result.children] == ["name"]

    def test_duplicate_labels_later_wins(self) -> None:
        """When labels repeat, the later child shadows the earlier one."""
        result = sequence(("part", natnum), ".", ("part", natnum))("1.2")

        assert result.part.str == "2"
        assert result.bindings["part"].str == "2"
        assert [child.str for child in result.children] == ["1", ".", "2"]

    def test_missing_binding(self) -> None:
        """Unknown names raise AttributeError / KeyError."""
        result = sequence(("x", "a"))("a")

        with pytest.raises(AttributeError, match="no binding named 'y'"):
            _ = result.y
        with pytest.raises(KeyError):
            _ = result["y"]
        assert not hasattr(result, "y")

    @given(
        parts=st.lists(
            st.text(alphabet="abc.-", min_size=1, max_size=5), min_size=1, max_size=6
        )
    )
    def test_text_is_concatenation_of_steps(self, parts: list[str]) -> None:
        """PROPERTY: sequence text equals the steps' spans joined in order."""
        source = "".join(parts)
        result = sequence(*parts)(source)

        assert result.ok
        assert result.str == "".join(child.str or "" for child in result.children)
        assert result.str == source
        assert result.position == len(source)


# ============================================================================
# OPTIONAL
# ============================================================================


class TestOptional:
    """optional(...) never fails."""

    def test_success_passes_through(self) -> None:
        """A successful inner result is returned unchanged."""
        inner = sequence("-", handle)
        assert optional(inner)("-beta") == inner("-beta")

    def test_failure_becomes_empty_success(self) -> None:
        """A failed inner result becomes an empty success at the same cursor."""
        cursor = Cursor("1.0.0+build", 5)
        result = optional(sequence("-", handle))(cursor)

        assert result.ok
        assert result.str == ""
        assert result.children == ()
        assert result.remainder == cursor
        assert result.error is None

    def test_label_kept_on_both_outcomes(self) -> None:
        """The inner label survives success and absorption."""
        matcher = optional(("tag", sequence("-", handle)))

        assert matcher("-rc1").label == "tag"
        assert matcher("+rc1").label == "tag"

    def test_absorbed_optional_not_bound_in_sequence(self) -> None:
        """An absorbed optional leaves no binding in the enclosing sequence."""
        grammar = sequence(("tag", optional("#")), ("name", word))

        result = grammar("abc")

        assert "tag" not in result
        assert result.name.str == "abc"
        assert grammar("#abc").tag.str == "#"

    @given(source=st.text(min_size=1, max_size=20), pos=st.integers(0, 20))
    def test_never_fails(self, source: str, pos: int) -> None:
        """PROPERTY: optional(p) never yields a failure, exhausted input included."""
        cursor = Cursor(source, min(pos, len(source)))
        for inner in (natnum, literal("x"), sequence("a", "b"), alternation("a")):
            assert optional(inner)(cursor).ok

    def test_logs_absorbed_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        """Absorbed failures are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="parsercombinator.syntax.combinators"):
            optional("x")("y")

        assert "absorbed failure" in caplog.text


# ============================================================================
# ALTERNATION (UNSUPPORTED)
# ============================================================================


class TestAlternation:
    """alternation(...) is declared but never tries its branches."""

    def test_always_fails_without_text(self) -> None:
        """Even input matching a branch yields an unsupported failure."""
        result = alternation("a", "b")("a")

        assert result.failed
        assert result.text is None
        assert result.position == 0
        assert result.diagnostic is not None
        assert result.diagnostic.code is DiagnosticCode.ALTERNATION_UNSUPPORTED
        assert result.diagnostic.severity == "warning"

    def test_branches_validated_at_build_time(self) -> None:
        """Malformed branches still raise GrammarError."""
        with pytest.raises(GrammarError):
            alternation("a", 1)  # type: ignore[arg-type]

    def test_construction_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Building an alternation warns that it is unsupported."""
        with caplog.at_level(logging.WARNING, logger="parsercombinator.syntax.combinators"):
            alternation("a", "b")

        assert "not supported" in caplog.text

    def test_in_sequence_aborts(self) -> None:
        """Inside a sequence the stub fails the whole sequence."""
        result = sequence("a", alternation("b"))("ab")

        assert result.failed
        assert result.error is not None
        assert result.error.startswith("failed to parse seq #1: alternation is not supported")
