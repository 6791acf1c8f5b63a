"""CLDR plural operands.

Derives the operands that plural rule relations test from a raw number.

    Symbol  Value
    n       absolute value of the source number
    i       integer digits of n
    v       number of visible fraction digits in n, with trailing zeros
    w       number of visible fraction digits in n, without trailing zeros
    f       visible fraction digits in n, with trailing zeros
    t       visible fraction digits in n, without trailing zeros
    c, e    compact decimal exponent (always 0 here)

The visible fraction digits are what make 1, 1.0 and 1.00 different numbers
to CLDR, so every branch works on exact decimal digits:

- int: no fraction digits at all
- Decimal: the decimal's own scale, read from its digit tuple
- float: shortest repr, rounded half-up to a fixed precision, then treated
  as a Decimal of exactly that scale
- str: parsed as a Decimal

Python 3.13+. Zero external dependencies.

Reference: https://unicode.org/reports/tr35/tr35-numbers.html#Operands
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from pluralengine.constants import DEFAULT_PRECISION
from pluralengine.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["PluralNumber", "PluralOperands", "compute_operands"]

type PluralNumber = int | float | Decimal | str
"""Values accepted wherever a number is pluralized."""

# Working precision floor for rounding floats; raised for very large values.
_MIN_CONTEXT_PRECISION = 28


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Operand tuple of one number.

    All fields are non-negative. ``n`` is exact; the rest are integers.

    Invariants:
        w <= v
        t is f with trailing decimal zeros removed
        f == 0 implies t == 0 and w == 0
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int
    e: int = 0

    def value(self, symbol: str) -> Decimal | int:
        """Return the operand named by a rule-text symbol.

        Args:
            symbol: One of n, i, v, w, f, t, c, e

        Returns:
            Operand value (``c`` is the current spelling of ``e``)
        """
        match symbol:
            case "n":
                return self.n
            case "i":
                return self.i
            case "v":
                return self.v
            case "w":
                return self.w
            case "f":
                return self.f
            case "t":
                return self.t
            case "c" | "e":
                return self.e
            case _:
                msg = f"Unknown plural operand {symbol!r}"
                raise KeyError(msg)


def compute_operands(number: PluralNumber, precision: int = DEFAULT_PRECISION) -> PluralOperands:
    """Compute CLDR plural operands for a number.

    Args:
        number: int, float, Decimal or numeric string. The sign is ignored.
        precision: Fraction digits kept for floats (ignored for exact inputs,
            but must still be a non-negative int)

    Returns:
        PluralOperands for the number

    Raises:
        InvalidArgumentError: Negative or non-integer precision, NaN or
            infinite values, unparsable strings, unsupported types

    Examples:
        >>> compute_operands(1)
        PluralOperands(n=Decimal('1'), i=1, v=0, w=0, f=0, t=0, e=0)
        >>> compute_operands(Decimal("1.20"))
        PluralOperands(n=Decimal('1.20'), i=1, v=2, w=1, f=20, t=2, e=0)
        >>> compute_operands(1.0, precision=1)
        PluralOperands(n=Decimal('1.0'), i=1, v=1, w=0, f=0, t=0, e=0)
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidArgumentError(
            ErrorTemplate.invalid_precision(precision), argument="precision"
        )

    match number:
        case bool():
            raise InvalidArgumentError(
                ErrorTemplate.invalid_number(number, "booleans are not numbers"),
                argument="number",
            )
        case int():
            magnitude = abs(number)
            return PluralOperands(n=Decimal(magnitude), i=magnitude, v=0, w=0, f=0, t=0)
        case float():
            if not math.isfinite(number):
                raise InvalidArgumentError(
                    ErrorTemplate.invalid_number(number, "value is not finite"),
                    argument="number",
                )
            return _decimal_operands(_round_float(abs(number), precision))
        case Decimal():
            if not number.is_finite():
                raise InvalidArgumentError(
                    ErrorTemplate.invalid_number(number, "value is not finite"),
                    argument="number",
                )
            return _decimal_operands(number.copy_abs())
        case str():
            return compute_operands(_parse_decimal(number), precision)
        case _:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_number(number, f"unsupported type {type(number).__name__}"),
                argument="number",
            )


def _round_float(value: float, precision: int) -> Decimal:
    """Round a non-negative float to exactly ``precision`` fraction digits.

    Goes through repr() so that 0.1 is 0.1 and not its binary expansion.
    Ties round half-up: 0.0005 at precision 3 is 0.001.
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(_MIN_CONTEXT_PRECISION, exact.adjusted() + precision + 2)
        return exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def _parse_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text.strip())
    except InvalidOperation as e:
        raise InvalidArgumentError(
            ErrorTemplate.invalid_number(text, "not a decimal number"), argument="number"
        ) from e
    if not value.is_finite():
        raise InvalidArgumentError(
            ErrorTemplate.invalid_number(text, "value is not finite"), argument="number"
        )
    return value


def _decimal_operands(value: Decimal) -> PluralOperands:
    """Read operands from the digits of a finite, non-negative Decimal.

    Works on the digit tuple rather than on arithmetic so that no context
    rounding can touch the fraction digits.
    """
    _, digit_tuple, exponent = value.as_tuple()
    assert isinstance(exponent, int)  # finite, checked by callers
    digits = "".join(map(str, digit_tuple))

    if exponent >= 0:
        return PluralOperands(n=value, i=int(digits) * 10**exponent, v=0, w=0, f=0, t=0)

    scale = -exponent
    digits = digits.rjust(scale + 1, "0")
    integer_digits, fraction_digits = digits[:-scale], digits[-scale:]
    significant = fraction_digits.rstrip("0")

    return PluralOperands(
        n=value,
        i=int(integer_digits),
        v=scale,
        w=len(significant),
        f=int(fraction_digits),
        t=int(significant) if significant else 0,
    )
