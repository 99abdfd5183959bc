"""Exact rational arithmetic on reduced numerator/denominator pairs."""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, model_validator

logger = logging.getLogger(__name__)

DEFAULT_MAX_DECIMAL_DIGITS = 12


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| (Euclid); gcd(0, 0) == 0."""

    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _reduce(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise ValueError("Fraction denominator must be non-zero")
    common = gcd(numerator, denominator)
    numerator //= common
    denominator //= common
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


class Fraction(BaseModel):
    """Immutable rational number kept in lowest terms with a positive denominator."""

    model_config = ConfigDict(frozen=True)

    numerator: int
    denominator: int = 1

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    @model_validator(mode="after")
    def _normalize(self) -> "Fraction":
        # Runs on the converted ints, so "2"/"4" from JSON is reduced too.
        numerator, denominator = _reduce(self.numerator, self.denominator)
        if (numerator, denominator) != (self.numerator, self.denominator):
            object.__setattr__(self, "numerator", numerator)
            object.__setattr__(self, "denominator", denominator)
        return self

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    def __add__(self, other: "Fraction") -> "Fraction":
        return add(self, other)

    def __sub__(self, other: "Fraction") -> "Fraction":
        return subtract(self, other)

    def __mul__(self, other: "Fraction") -> "Fraction":
        return multiply(self, other)

    def __truediv__(self, other: "Fraction") -> "Fraction":
        return divide(self, other)

    def __neg__(self) -> "Fraction":
        return Fraction(-self.numerator, self.denominator)

    def __float__(self) -> float:
        return to_float(self)

    def __str__(self) -> str:
        return to_display_string(self)

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"


ZERO = Fraction(0, 1)
ONE = Fraction(1, 1)
MINUS_ONE = Fraction(-1, 1)


def simplify(numerator: int, denominator: int) -> Fraction:
    """Reduce ``numerator/denominator`` and move the sign to the numerator."""

    return Fraction(*_reduce(numerator, denominator))


def from_float(value: int | float, max_digits: int = DEFAULT_MAX_DECIMAL_DIGITS) -> Fraction:
    """Convert a number to a Fraction using the smallest power-of-ten denominator.

    The search stops at ``max_digits`` decimal places; values that need more
    (irrational inputs, long binary expansions) are rounded to that precision.
    """

    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return Fraction(value, 1)
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value to Fraction: {value!r}")
    if value.is_integer():
        return Fraction(int(value), 1)

    # repr() gives the shortest decimal that round-trips, so 0.1 stays 0.1.
    return _from_decimal(Decimal(repr(value)), max_digits)


def _from_decimal(exact: Decimal, max_digits: int) -> Fraction:
    for digits in range(max_digits + 1):
        scaled = exact.scaleb(digits)
        if scaled == scaled.to_integral_value():
            return simplify(int(scaled), 10**digits)

    logger.warning("%s needs more than %d decimal places; rounding", exact, max_digits)
    scaled = exact.scaleb(max_digits).to_integral_value()
    return simplify(int(scaled), 10**max_digits)


def parse_fraction(text: str, max_digits: int = DEFAULT_MAX_DECIMAL_DIGITS) -> Fraction:
    """Parse ``"n"``, ``"n/d"`` or a decimal literal into a Fraction."""

    stripped = text.strip()
    if not stripped:
        raise ValueError("empty fraction text")
    if "/" in stripped:
        num_s, _, den_s = stripped.partition("/")
        try:
            numerator = int(num_s.strip())
            denominator = int(den_s.strip())
        except ValueError as exc:
            raise ValueError(f"invalid fraction text: {text!r}") from exc
        return simplify(numerator, denominator)
    try:
        exact = Decimal(stripped)
    except InvalidOperation as exc:
        raise ValueError(f"invalid fraction text: {text!r}") from exc
    if not exact.is_finite():
        raise ValueError(f"invalid fraction text: {text!r}")
    return _from_decimal(exact, max_digits)


def add(lhs: Fraction, rhs: Fraction) -> Fraction:
    return simplify(
        lhs.numerator * rhs.denominator + rhs.numerator * lhs.denominator,
        lhs.denominator * rhs.denominator,
    )


def subtract(lhs: Fraction, rhs: Fraction) -> Fraction:
    return simplify(
        lhs.numerator * rhs.denominator - rhs.numerator * lhs.denominator,
        lhs.denominator * rhs.denominator,
    )


def multiply(lhs: Fraction, rhs: Fraction) -> Fraction:
    return simplify(lhs.numerator * rhs.numerator, lhs.denominator * rhs.denominator)


def divide(lhs: Fraction, rhs: Fraction) -> Fraction:
    """Divide two fractions; a zero divisor raises ZeroDivisionError."""

    if rhs.is_zero:
        raise ZeroDivisionError(f"division of {to_display_string(lhs)} by zero")
    return simplify(lhs.numerator * rhs.denominator, lhs.denominator * rhs.numerator)


def to_display_string(value: Fraction) -> str:
    """Render as ``"n"`` for integers and ``"n/d"`` otherwise."""

    if value.denominator == 1:
        return f"{value.numerator}"
    return f"{value.numerator}/{value.denominator}"


def to_float(value: Fraction) -> float:
    return value.numerator / value.denominator
