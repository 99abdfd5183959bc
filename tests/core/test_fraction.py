"""Tests for exact fraction arithmetic."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from exactlin.core.fraction import (
    ONE,
    ZERO,
    Fraction,
    add,
    divide,
    from_float,
    gcd,
    multiply,
    parse_fraction,
    simplify,
    subtract,
    to_display_string,
    to_float,
)

_INTS = [-12, -7, -3, -1, 0, 1, 2, 5, 9, 18]


def test_gcd_handles_signs_and_zero() -> None:
    assert gcd(12, 18) == 6
    assert gcd(-12, 18) == 6
    assert gcd(7, 0) == 7
    assert gcd(0, 0) == 0


def test_simplify_reduces_and_keeps_denominator_positive() -> None:
    for a, b in itertools.product(_INTS, _INTS):
        if b == 0:
            continue
        f = simplify(a, b)
        assert f.denominator > 0
        assert gcd(abs(f.numerator), f.denominator) == 1
        assert f.numerator * b == a * f.denominator


def test_simplify_rejects_zero_denominator() -> None:
    with pytest.raises(ValueError):
        simplify(3, 0)


def test_constructor_normalizes() -> None:
    assert Fraction(2, 4) == Fraction(1, 2)
    assert Fraction(3, -6) == Fraction(-1, 2)
    assert Fraction(0, -5) == ZERO


def test_validation_reduces_converted_fields() -> None:
    assert Fraction.model_validate({"numerator": "2", "denominator": "4"}) == Fraction(1, 2)
    assert Fraction.model_validate({"numerator": 3.0, "denominator": "-6"}) == Fraction(-1, 2)
    restored = Fraction.model_validate_json('{"numerator": "6", "denominator": "-4"}')
    assert (restored.numerator, restored.denominator) == (-3, 2)


def test_validation_rejects_zero_denominator() -> None:
    with pytest.raises(ValidationError):
        Fraction.model_validate({"numerator": 1, "denominator": "0"})


def test_identities_hold() -> None:
    fractions = [simplify(a, b) for a, b in itertools.product(_INTS, _INTS) if b != 0]
    for f in fractions:
        assert add(f, ZERO) == f
        assert multiply(f, ONE) == f
        assert multiply(f, ZERO) == ZERO
        for g in fractions[:15]:
            if g.is_zero:
                continue
            assert multiply(divide(f, g), g) == f


def test_arithmetic_examples() -> None:
    half = Fraction(1, 2)
    third = Fraction(1, 3)
    assert add(half, third) == Fraction(5, 6)
    assert subtract(half, third) == Fraction(1, 6)
    assert multiply(half, third) == Fraction(1, 6)
    assert divide(half, third) == Fraction(3, 2)
    assert half + third - half == third
    assert -half == Fraction(-1, 2)


def test_divide_by_zero_raises() -> None:
    with pytest.raises(ZeroDivisionError):
        divide(ONE, ZERO)


def test_display_string() -> None:
    assert to_display_string(Fraction(4, 1)) == "4"
    assert to_display_string(Fraction(-3, 4)) == "-3/4"
    assert str(Fraction(6, 3)) == "2"


def test_from_float_integers_and_decimals() -> None:
    assert from_float(5) == Fraction(5, 1)
    assert from_float(-2.0) == Fraction(-2, 1)
    assert from_float(0.5) == Fraction(1, 2)
    assert from_float(0.1) == Fraction(1, 10)
    assert from_float(1.1) == Fraction(11, 10)
    assert from_float(-0.125) == Fraction(-1, 8)


@pytest.mark.parametrize("value", [0.25, 3.14159, -2.718281, 123.456789, 0.000001])
def test_from_float_round_trips(value: float) -> None:
    assert to_float(from_float(value)) == pytest.approx(value)


def test_from_float_caps_precision(caplog) -> None:
    with caplog.at_level("WARNING"):
        f = from_float(1 / 3, max_digits=4)
    assert f == Fraction(3333, 10000)
    assert "rounding" in caplog.text


def test_from_float_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        from_float(float("nan"))


def test_parse_fraction_forms() -> None:
    assert parse_fraction("3") == Fraction(3, 1)
    assert parse_fraction(" -6/8 ") == Fraction(-3, 4)
    assert parse_fraction("2.5") == Fraction(5, 2)
    with pytest.raises(ValueError):
        parse_fraction("abc")
    with pytest.raises(ValueError):
        parse_fraction("1/0")


def test_fraction_is_hashable_and_json_round_trips() -> None:
    f = Fraction(-7, 3)
    assert {f, Fraction(-14, 6)} == {f}
    assert Fraction.model_validate(f.model_dump()) == f
