"""Property-based tests for enums module.

Tests the plural category and rule family enumerations.
"""

from hypothesis import event, given
from hypothesis import strategies as st

from pluralengine.constants import CATEGORY_ORDER
from pluralengine.enums import PluralCategory, RuleFamily


class TestPluralCategory:
    """Tests for PluralCategory enum."""

    def test_members_follow_cldr_order(self) -> None:
        """Member order is CLDR declaration order."""
        assert tuple(member.value for member in PluralCategory) == CATEGORY_ORDER

    @given(st.sampled_from(PluralCategory))
    def test_str_returns_value(self, category: PluralCategory) -> None:
        """Property: str() of a member is its CLDR tag."""
        event(f"category={category.value}")
        assert str(category) == category.value
        assert PluralCategory(category.value) is category

    def test_equals_plain_string(self) -> None:
        """Members compare and hash like their tags."""
        assert PluralCategory.ONE == "one"
        assert {"one": 1}[PluralCategory.ONE] == 1


class TestRuleFamily:
    """Tests for RuleFamily enum."""

    def test_members(self) -> None:
        """Cardinal and ordinal are the only families."""
        assert [member.value for member in RuleFamily] == ["cardinal", "ordinal"]

    @given(st.sampled_from(RuleFamily))
    def test_round_trip_from_value(self, family: RuleFamily) -> None:
        """Property: RuleFamily(value) returns the member."""
        assert RuleFamily(family.value) is family
