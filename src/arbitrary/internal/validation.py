# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from decimal import Decimal
from numbers import Real

from arbitrary.errors import InvalidArgument, InvalidBoundError, NonIntegerBoundError


def check_type(typ, arg, name):
    if not isinstance(arg, typ):
        if isinstance(typ, tuple):
            typ_string = "one of " + ", ".join(t.__name__ for t in typ)
        else:
            typ_string = typ.__name__
        raise InvalidArgument(
            "Expected %s but got %s=%r (type=%s)"
            % (typ_string, name, arg, type(arg).__name__)
        )


def check_valid_bound(value, name):
    """Checks that value is a number which could be used as the bound of an
    interval.

    Otherwise raises InvalidArgument.
    """
    if isinstance(value, bool):
        # bool is a subclass of int, but nobody means max_value=True.
        raise NonIntegerBoundError(
            "%s=%r is a boolean, not an integer bound" % (name, value)
        )
    check_type((Real, Decimal), value, name)


def check_nonnegative_bound(value, name, function_name):
    # NaNs are left for try_convert_integer_bound to reject. A signalling
    # Decimal NaN raises on any comparison, so it is caught before one.
    if isinstance(value, Decimal) and value.is_nan():
        return
    if value == value and value < 0:
        raise InvalidBoundError(
            "%s() %s should be greater than or equal to 0, but got %s=%r"
            % (function_name, name, name, value)
        )


def try_convert_integer_bound(value, name, function_name):
    """Returns value as an int if it is exactly representable as one, such as
    5 or 5.0 or Fraction(10, 2).

    Otherwise raises NonIntegerBoundError.
    """
    if isinstance(value, int):
        return value
    try:
        as_int = int(value)
    except (OverflowError, ValueError):
        as_int = None
    if as_int is None or as_int != value:
        raise NonIntegerBoundError(
            "%s() %s should be an integer, but got %s=%r of type %s"
            % (function_name, name, name, value, type(value).__name__)
        )
    return as_int


def check_valid_interval(lower_bound, upper_bound, lower_name, upper_name):
    """Checks that lower_bound and upper_bound define a valid interval on the
    number line.

    Otherwise raises InvalidArgument.
    """
    if upper_bound < lower_bound:
        raise InvalidArgument(
            "Cannot have %s=%r < %s=%r"
            % (upper_name, upper_bound, lower_name, lower_bound)
        )


def check_valid_bias_factor(value):
    """Checks that value is either None, which disables biased generation, or
    an integer of at least 2.

    Otherwise raises InvalidArgument.
    """
    if value is None:
        return value
    check_type(int, value, "bias_factor")
    if isinstance(value, bool) or value < 2:
        raise InvalidArgument(
            "bias_factor=%r must be None or an integer of at least 2, so that "
            "unbiased draws remain possible." % (value,)
        )
    return value
