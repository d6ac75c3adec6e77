# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from collections.abc import Mapping
from typing import Optional, Union, overload

import attr

from arbitrary._settings import settings
from arbitrary.arbitraries._internal.arbitrary import Arbitrary
from arbitrary.arbitraries._internal.contextual import ContextualShrinkArbitrary
from arbitrary.errors import InvalidArgument
from arbitrary.internal.bias import bias_numeric_range
from arbitrary.internal.shrinking.integer import shrink_integer
from arbitrary.internal.validation import (
    check_nonnegative_bound,
    check_valid_bias_factor,
    check_valid_bound,
    check_valid_interval,
    try_convert_integer_bound,
)
from arbitrary.utils.conventions import not_set

DEFAULT_MAX = 0x7FFFFFFF
"""The upper bound used by nat() when none is given, and the bounds of
integer() when none are given: the largest signed 32-bit integer,
2147483647. Fixed so that every implementation agrees on the default
domain."""

NAT_CONSTRAINT_KEYS = frozenset(["max", "max_value"])


@attr.s(frozen=True, slots=True)
class NatConstraints:
    """Constraints accepted by :func:`nat`.

    ``max_value`` is the inclusive upper bound, defaulting to
    :data:`DEFAULT_MAX`.
    """

    max_value = attr.ib(default=None)


@attr.s(frozen=True, slots=True)
class Domain:
    min_value = attr.ib()
    max_value = attr.ib()


class IntegerArbitrary(Arbitrary[int]):
    """Produces integers in ``[min_value, max_value]`` and shrinks them
    towards the value of that range closest to zero.

    The shrink context understood by this class is the last value known not
    to reproduce the failure, or None.
    """

    def __init__(self, min_value: int, max_value: int) -> None:
        assert isinstance(min_value, int)
        assert isinstance(max_value, int)
        assert min_value <= max_value
        self.min_value = min_value
        self.max_value = max_value

    def __repr__(self):
        return "IntegerArbitrary(min_value=%d, max_value=%d)" % (
            self.min_value,
            self.max_value,
        )

    def default_target(self) -> int:
        if self.min_value <= 0 <= self.max_value:
            return 0
        return self.max_value if self.min_value < 0 else self.min_value

    def can_shrink_without_context(self, value) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and self.min_value <= value <= self.max_value
        )

    def generate(self, entropy, bias_factor=not_set) -> int:
        if bias_factor is not_set:
            bias_factor = settings.default.bias_factor
        else:
            bias_factor = check_valid_bias_factor(bias_factor)
        lower, upper = self.__generate_range(entropy, bias_factor)
        return entropy.draw_integer(lower, upper)

    def __generate_range(self, entropy, bias_factor):
        if bias_factor is None or entropy.draw_integer(1, bias_factor) != 1:
            return self.min_value, self.max_value
        ranges = bias_numeric_range(self.min_value, self.max_value)
        if len(ranges) == 1:
            return ranges[0]
        # The range next to the target gets 2 * (n - 1) of the weight, every
        # other range gets 1.
        i = entropy.draw_integer(-2 * (len(ranges) - 1), len(ranges) - 2)
        return ranges[0] if i < 0 else ranges[i + 1]

    def shrink(self, value: int, context: Optional[int] = None):
        if not self.__is_valid_context(value, context):
            return shrink_integer(value, self.default_target(), try_target_asap=True)
        return shrink_integer(value, context, try_target_asap=False)

    def __is_valid_context(self, value, passing):
        # A usable context lies between the target and value, and on the
        # same side of the target as value.
        if passing is None:
            return False
        target = self.default_target()
        if value > target:
            return target <= passing < value
        return value < passing <= target


def resolve_nat_domain(arg=None, max_value=None) -> Domain:
    """Normalises every way of calling :func:`nat` into one validated
    :class:`Domain`."""
    if arg is not None and max_value is not None:
        raise InvalidArgument(
            "Cannot pass both %r and max_value=%r to nat()" % (arg, max_value)
        )
    if isinstance(arg, NatConstraints):
        bound = arg.max_value
    elif isinstance(arg, Mapping):
        unknown = set(arg) - NAT_CONSTRAINT_KEYS
        if unknown:
            raise InvalidArgument(
                "Unexpected constraints %s passed to nat(), only max is "
                "supported" % (", ".join(map(repr, sorted(map(str, unknown)))),)
            )
        if len(arg) > 1:
            raise InvalidArgument(
                "Cannot pass both max and max_value to nat(), got %r" % (arg,)
            )
        bound = arg.get("max", arg.get("max_value"))
    elif arg is None:
        bound = max_value
    else:
        bound = arg

    if bound is None:
        bound = DEFAULT_MAX
    check_valid_bound(bound, "max_value")
    check_nonnegative_bound(bound, "max_value", "nat")
    bound = try_convert_integer_bound(bound, "max_value", "nat")
    return Domain(min_value=0, max_value=bound)


def _integer_arbitrary(domain):
    arb = IntegerArbitrary(domain.min_value, domain.max_value)
    return ContextualShrinkArbitrary(arb, arb.default_target())


@overload
def nat() -> ContextualShrinkArbitrary[int]:  # pragma: no cover
    ...


@overload
def nat(arg: int) -> ContextualShrinkArbitrary[int]:  # pragma: no cover
    ...


@overload
def nat(
    arg: Union[NatConstraints, Mapping],
) -> ContextualShrinkArbitrary[int]:  # pragma: no cover
    ...


@overload
def nat(*, max_value: int) -> ContextualShrinkArbitrary[int]:  # pragma: no cover
    ...


def nat(arg=None, *, max_value=None):
    """Returns an arbitrary which generates integers between 0 and an upper
    bound, both included.

    The bound may be given positionally, as ``nat(10)``, as a mapping or
    :class:`NatConstraints`, as ``nat({"max": 10})``, or by keyword, as
    ``nat(max_value=10)``. Without one it is :data:`DEFAULT_MAX`.

    Examples from this arbitrary shrink towards zero.
    """
    return _integer_arbitrary(resolve_nat_domain(arg, max_value))


def integer(
    min_value: Optional[int] = None, max_value: Optional[int] = None
) -> ContextualShrinkArbitrary[int]:
    """Returns an arbitrary which generates integers between min_value and
    max_value, both included.

    Unspecified bounds default to the signed 32-bit range. Examples shrink
    towards zero if it is in range, and otherwise towards the bound closest
    to it.
    """
    if min_value is None:
        min_value = -DEFAULT_MAX - 1
    if max_value is None:
        max_value = DEFAULT_MAX
    check_valid_bound(min_value, "min_value")
    check_valid_bound(max_value, "max_value")
    min_value = try_convert_integer_bound(min_value, "min_value", "integer")
    max_value = try_convert_integer_bound(max_value, "max_value", "integer")
    check_valid_interval(min_value, max_value, "min_value", "max_value")
    return _integer_arbitrary(Domain(min_value=min_value, max_value=max_value))
