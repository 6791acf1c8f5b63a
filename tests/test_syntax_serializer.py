"""Tests for syntax.serializer: condition tree to rule text.

Validates that serialize() renders compiled trees in current TR35 syntax and
that the rendered text compiles back to an equal tree.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from pluralengine import compile_rule, serialize
from pluralengine.syntax import FALSE, TRUE, And, Condition, Or, Range, Relation
from tests.strategies import left_associative_conditions


class TestSerialize:
    """Rendering of each node type."""

    def test_true_is_empty(self) -> None:
        """The unconditional condition has no text."""
        assert serialize(TRUE) == ""

    def test_false_has_no_text(self) -> None:
        """Literal(False) cannot be written as rule text."""
        with pytest.raises(ValueError, match="Literal\\(False\\)"):
            serialize(FALSE)

    def test_relation(self) -> None:
        """Single values and ranges are comma separated."""
        relation = Relation("n", 10, False, (Range(3, 4), Range(9, 9)))
        assert serialize(relation) == "n % 10 = 3..4,9"

    def test_negated_relation(self) -> None:
        """Negation renders as !=."""
        assert serialize(Relation("i", 100, True, (Range(11, 11),))) == "i % 100 != 11"

    def test_within(self) -> None:
        """within keeps its keyword."""
        relation = Relation("n", None, True, (Range(0, 2),), within=True)
        assert serialize(relation) == "n not within 0..2"

    def test_legacy_input_renders_modern(self) -> None:
        """Legacy keywords become operators."""
        condition = compile_rule("n mod 10 is 1 and n mod 100 is not 11")
        assert serialize(condition) == "n % 10 = 1 and n % 100 != 11"

    def test_and_or(self) -> None:
        """Conjunctions inside disjunctions need no grouping."""
        condition = compile_rule("v = 0 and i % 10 = 1 or f % 10 = 1")
        assert serialize(condition) == "v = 0 and i % 10 = 1 or f % 10 = 1"

    def test_or_under_and_is_rejected(self) -> None:
        """A disjunction under a conjunction has no text without parentheses."""
        n_is_1 = Relation("n", None, False, (Range(1, 1),))
        with pytest.raises(ValueError, match="Or nested inside And"):
            serialize(And(n_is_1, Or(n_is_1, n_is_1)))

    def test_samples_are_not_kept(self) -> None:
        """Sample lists are not part of the tree."""
        assert serialize(compile_rule("i = 1 and v = 0 @integer 1")) == "i = 1 and v = 0"


class TestRoundTrip:
    """serialize() output compiles back to the same tree."""

    @given(left_associative_conditions())
    def test_compile_of_serialize_is_identity(self, condition: Condition) -> None:
        """Property: compile_rule(serialize(c)) == c for compiler-shaped trees."""
        event(f"root={type(condition).__name__}")
        assert compile_rule(serialize(condition)) == condition

    @pytest.mark.parametrize(
        "rule_text",
        [
            "i = 1 and v = 0",
            "n % 10 = 1 and n % 100 != 11,71,91",
            "v = 0 and i % 10 = 2..4 and i % 100 != 12..14",
            "e = 0 and i != 0 and i % 1000000 = 0 and v = 0 or e != 0..5",
            "n % 100 = 3..10",
        ],
    )
    def test_cldr_rules_are_fixed_points(self, rule_text: str) -> None:
        """Rules already in canonical form serialize to themselves."""
        assert serialize(compile_rule(rule_text)) == rule_text
