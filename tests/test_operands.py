"""Tests for operands.py: CLDR operand computation.

Covers:
- Exact operands for int, Decimal and numeric string inputs
- Float rounding to a fixed precision (half-up, via shortest repr)
- Leading and trailing fraction zeros (w, f, t)
- Argument validation (precision, NaN, infinity, unsupported types)
- Operand invariants over generated decimals

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from pluralengine import InvalidArgumentError, PluralOperands, compute_operands
from pluralengine.constants import DEFAULT_PRECISION
from pluralengine.diagnostics import DiagnosticCode
from tests.strategies import exact_decimals


def _operands(n: str, i: int, v: int, w: int, f: int, t: int) -> PluralOperands:
    return PluralOperands(n=Decimal(n), i=i, v=v, w=w, f=f, t=t)


class TestExactInputs:
    """Integers, decimals and strings keep their own visible digits."""

    def test_integer(self) -> None:
        """An integer has no fraction digits."""
        assert compute_operands(1) == _operands("1", 1, 0, 0, 0, 0)

    def test_negative_integer_uses_absolute_value(self) -> None:
        """The sign of the source number is ignored."""
        assert compute_operands(-5) == _operands("5", 5, 0, 0, 0, 0)

    def test_huge_integer(self) -> None:
        """Integers of any size are exact."""
        big = 10**40 + 7
        operands = compute_operands(big)
        assert operands.i == big
        assert operands.n == Decimal(big)

    def test_decimal_trailing_zero(self) -> None:
        """1.20 keeps the trailing zero in v and f but not in w and t."""
        assert compute_operands(Decimal("1.20")) == _operands("1.20", 1, 2, 1, 20, 2)

    def test_decimal_leading_fraction_zero(self) -> None:
        """1.05 has two significant fraction digits."""
        assert compute_operands(Decimal("1.05")) == _operands("1.05", 1, 2, 2, 5, 5)

    def test_decimal_all_zero_fraction(self) -> None:
        """1.000 is integral but still has three visible fraction digits."""
        assert compute_operands(Decimal("1.000")) == _operands("1.000", 1, 3, 0, 0, 0)

    def test_negative_decimal(self) -> None:
        """Sign is dropped, digits are kept."""
        assert compute_operands(Decimal("-0.50")) == _operands("0.50", 0, 2, 1, 50, 5)

    def test_decimal_with_positive_exponent(self) -> None:
        """1E+3 is the integer 1000."""
        operands = compute_operands(Decimal("1E+3"))
        assert (operands.i, operands.v, operands.f) == (1000, 0, 0)

    def test_decimal_ignores_precision(self) -> None:
        """Precision only applies to floats."""
        assert compute_operands(Decimal("1.23456"), precision=1).v == 5

    def test_numeric_string(self) -> None:
        """Strings are parsed as decimals, whitespace allowed."""
        assert compute_operands(" 1.50 ") == _operands("1.50", 1, 2, 1, 50, 5)

    def test_string_with_exponent(self) -> None:
        """Scientific notation strings are accepted."""
        assert compute_operands("1.5e2").i == 150

    def test_compact_exponent_is_zero(self) -> None:
        """c and e are always 0 without compact formatting."""
        operands = compute_operands(Decimal("1200"))
        assert operands.e == 0
        assert operands.value("c") == 0
        assert operands.value("e") == 0


class TestFloatInputs:
    """Floats are rounded to exactly `precision` fraction digits."""

    def test_float_with_precision_one(self) -> None:
        """1.0 at precision 1 has one visible zero."""
        assert compute_operands(1.0, precision=1) == _operands("1.0", 1, 1, 0, 0, 0)

    def test_float_default_precision(self) -> None:
        """Default precision gives every float DEFAULT_PRECISION digits."""
        operands = compute_operands(1.5)
        assert operands == _operands("1.500", 1, 3, 1, 500, 5)
        assert operands.v == DEFAULT_PRECISION

    def test_half_up_tie(self) -> None:
        """0.0005 rounds up to 0.001."""
        assert compute_operands(0.0005, precision=3) == _operands("0.001", 0, 3, 3, 1, 1)

    def test_shortest_repr_is_rounded(self) -> None:
        """2.675 rounds as written, not as its binary expansion (2.67499...)."""
        assert compute_operands(2.675, precision=2).f == 68

    def test_precision_zero(self) -> None:
        """Precision 0 rounds to an integer with no fraction digits."""
        assert compute_operands(2.5, precision=0) == _operands("3", 3, 0, 0, 0, 0)

    def test_negative_zero(self) -> None:
        """-0.0 is zero."""
        operands = compute_operands(-0.0)
        assert operands.i == 0
        assert operands.f == 0

    def test_large_float(self) -> None:
        """Large floats keep their fraction digits after rounding."""
        operands = compute_operands(1e20, precision=2)
        assert operands.i == 10**20
        assert operands.v == 2

    @given(st.floats(allow_nan=False, allow_infinity=False), st.integers(0, 6))
    def test_float_scale_equals_precision(self, value: float, precision: int) -> None:
        """Property: every finite float gets exactly `precision` digits."""
        event(f"precision={precision}")
        assert compute_operands(value, precision).v == precision


class TestInvalidArguments:
    """Caller contract violations raise InvalidArgumentError."""

    @pytest.mark.parametrize("precision", [-1, 1.5, "3", None, True])
    def test_invalid_precision(self, precision: object) -> None:
        """Precision must be a non-negative int."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_operands(1, precision)  # type: ignore[arg-type]
        assert exc_info.value.argument == "precision"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_PRECISION

    @pytest.mark.parametrize(
        "number",
        [
            float("nan"),
            float("inf"),
            float("-inf"),
            Decimal("NaN"),
            Decimal("Infinity"),
            "NaN",
            "inf",
            "abc",
            "",
            "1,5",
        ],
    )
    def test_invalid_number(self, number: object) -> None:
        """Non-finite values and unparsable strings are rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_operands(number)  # type: ignore[arg-type]
        assert exc_info.value.argument == "number"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_NUMBER

    @pytest.mark.parametrize("number", [None, True, False, [1], 1 + 2j])
    def test_unsupported_type(self, number: object) -> None:
        """Booleans and non-numeric types are not numbers."""
        with pytest.raises(InvalidArgumentError, match="Cannot compute plural operands"):
            compute_operands(number)  # type: ignore[arg-type]

    def test_unknown_operand_symbol(self) -> None:
        """value() only knows rule-text symbols."""
        with pytest.raises(KeyError):
            compute_operands(1).value("x")


class TestOperandInvariants:
    """Property-based checks of the operand definitions."""

    @given(exact_decimals())
    @example(Decimal("0.001"))
    @example(Decimal("100"))
    def test_decimal_operands(self, value: Decimal) -> None:
        """Property: operands describe the decimal's visible digits exactly."""
        operands = compute_operands(value)
        magnitude = abs(value)
        scale = max(0, -int(value.as_tuple().exponent))
        event(f"scale={scale}")

        assert operands.n == magnitude
        assert operands.i == int(magnitude)
        assert operands.v == scale
        assert 0 <= operands.w <= operands.v
        assert 0 <= operands.f < 10**operands.v
        assert Decimal(operands.i) + Decimal(operands.f).scaleb(-operands.v) == magnitude

        fraction = str(operands.f).zfill(operands.v) if operands.v else ""
        significant = fraction.rstrip("0")
        assert operands.w == len(significant)
        assert operands.t == (int(significant) if significant else 0)

    @given(st.integers())
    def test_integer_operands(self, value: int) -> None:
        """Property: integers never have fraction operands."""
        operands = compute_operands(value)
        assert operands.i == abs(value)
        assert (operands.v, operands.w, operands.f, operands.t) == (0, 0, 0, 0)

    @given(exact_decimals())
    def test_string_matches_decimal(self, value: Decimal) -> None:
        """Property: str(d) and d give the same operands."""
        assert compute_operands(str(value)) == compute_operands(value)
