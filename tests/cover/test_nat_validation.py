# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from decimal import Decimal
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from arbitrary import (
    DEFAULT_MAX,
    InvalidArgument,
    InvalidBoundError,
    NatConstraints,
    NonIntegerBoundError,
    integer,
    nat,
)
from arbitrary.arbitraries import Domain, resolve_nat_domain


def test_default_max_is_largest_signed_32_bit_integer():
    assert DEFAULT_MAX == 2147483647 == 2**31 - 1


@pytest.mark.parametrize(
    "args, kwargs",
    [
        ((), {}),
        (({},), {}),
        ((NatConstraints(),), {}),
        (({"max": None},), {}),
    ],
)
def test_unbounded_forms_resolve_to_default_max(args, kwargs):
    assert resolve_nat_domain(*args, **kwargs) == Domain(0, DEFAULT_MAX)
    arb = nat(*args, **kwargs)
    assert (arb.min_value, arb.max_value) == (0, DEFAULT_MAX)


@pytest.mark.parametrize(
    "args, kwargs",
    [
        ((5,), {}),
        (({"max": 5},), {}),
        (({"max_value": 5},), {}),
        ((NatConstraints(max_value=5),), {}),
        ((), {"max_value": 5}),
    ],
)
def test_bounded_forms_are_equivalent(args, kwargs):
    arb = nat(*args, **kwargs)
    assert (arb.min_value, arb.max_value) == (0, 5)
    assert arb.default_target() == 0


@pytest.mark.parametrize("bound", [5.0, Fraction(10, 2), Decimal("5")])
def test_integral_non_int_bounds_are_converted(bound):
    arb = nat(bound)
    assert arb.max_value == 5
    assert type(arb.max_value) is int


@pytest.mark.parametrize(
    "bound", [-1, -1.5, Fraction(-3, 2), Decimal("-2"), float("-inf"), -(2**100)]
)
def test_negative_bounds_are_invalid(bound):
    with pytest.raises(InvalidBoundError):
        nat(bound)
    with pytest.raises(InvalidBoundError):
        nat({"max": bound})


@pytest.mark.parametrize(
    "bound",
    [
        1.5,
        Fraction(1, 2),
        Decimal("2.5"),
        float("nan"),
        float("inf"),
        Decimal("nan"),
        Decimal("sNaN"),
        Decimal("inf"),
        True,
    ],
)
def test_non_integer_bounds_are_invalid(bound):
    with pytest.raises(NonIntegerBoundError):
        nat(bound)
    with pytest.raises(NonIntegerBoundError):
        nat(max_value=bound)
    with pytest.raises(NonIntegerBoundError):
        nat({"max": bound})


@given(st.integers(max_value=-1))
def test_all_negative_integers_are_invalid_bounds(bound):
    with pytest.raises(InvalidBoundError):
        nat(bound)


@given(
    st.floats(min_value=0, allow_infinity=False).filter(lambda x: not x.is_integer())
)
def test_all_fractional_floats_are_invalid_bounds(bound):
    with pytest.raises(NonIntegerBoundError):
        nat(bound)


def test_error_names_the_constraint_and_value():
    with pytest.raises(InvalidBoundError) as err:
        nat(-7)
    assert "max_value" in str(err.value)
    assert "-7" in str(err.value)

    with pytest.raises(NonIntegerBoundError) as err:
        nat(1.5)
    assert "max_value" in str(err.value)
    assert "1.5" in str(err.value)


def test_bound_errors_are_invalid_arguments():
    assert issubclass(InvalidBoundError, InvalidArgument)
    assert issubclass(NonIntegerBoundError, InvalidArgument)


@pytest.mark.parametrize("bound", ["5", [5], object()])
def test_non_numeric_bounds_are_invalid_arguments(bound):
    with pytest.raises(InvalidArgument) as err:
        nat(bound)
    assert type(err.value) is InvalidArgument


def test_unknown_constraint_keys_are_rejected():
    with pytest.raises(InvalidArgument) as err:
        nat({"min": 1})
    assert "'min'" in str(err.value)


def test_cannot_pass_both_spellings_of_max():
    with pytest.raises(InvalidArgument):
        nat({"max": 1, "max_value": 1})


def test_cannot_pass_bound_twice():
    with pytest.raises(InvalidArgument):
        nat(5, max_value=5)


def test_zero_is_a_valid_bound():
    arb = nat(0)
    assert (arb.min_value, arb.max_value) == (0, 0)


def test_integer_defaults_to_signed_32_bit_range():
    arb = integer()
    assert (arb.min_value, arb.max_value) == (-(2**31), 2**31 - 1)


@pytest.mark.parametrize(
    "min_value, max_value, target",
    [(-5, 5, 0), (3, 10, 3), (-10, -3, -3), (0, 0, 0), (7, 7, 7)],
)
def test_integer_targets_value_closest_to_zero(min_value, max_value, target):
    assert integer(min_value, max_value).default_target() == target


def test_integer_rejects_inverted_interval():
    with pytest.raises(InvalidArgument):
        integer(5, 1)


def test_integer_rejects_non_integer_bounds():
    with pytest.raises(NonIntegerBoundError):
        integer(0.5, 1)
    with pytest.raises(NonIntegerBoundError):
        integer(0, float("nan"))
