# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Shrinking that remembers what it has already tried.

A contextual shrink hands out every candidate together with a
:class:`ShrinkContext`. Whoever decides that a candidate still fails passes
its context back in when shrinking that candidate, so the search carries on
from where it was rather than starting over, and never offers the same
value twice within one lineage.
"""

from typing import Any, FrozenSet, Iterator, Optional, Tuple

import attr

from arbitrary.arbitraries._internal.arbitrary import Arbitrary, T
from arbitrary.errors import InvalidArgument
from arbitrary.internal.validation import check_type
from arbitrary.reporting import debug_report
from arbitrary.utils.conventions import not_set


@attr.s(frozen=True, slots=True)
class ShrinkContext:
    """The state of one shrink lineage.

    ``tried`` holds every candidate offered so far along the lineage.
    ``passing`` is the closest-to-target value known not to reproduce the
    failure, or None if nothing is known yet.

    Contexts are immutable: every step of the search produces new ones, so
    two investigations over the same arbitrary never share state.
    """

    tried: FrozenSet[Any] = attr.ib(default=frozenset(), converter=frozenset)
    passing: Optional[Any] = attr.ib(default=None)

    @classmethod
    def empty(cls) -> "ShrinkContext":
        return cls()


class ContextualShrinkArbitrary(Arbitrary[T]):
    """Wraps an arbitrary whose own shrink context is the last value known to
    pass, and threads a :class:`ShrinkContext` through its shrinks instead.
    """

    def __init__(self, arbitrary: Arbitrary[T], shrunk_once_target: T) -> None:
        self.arbitrary = arbitrary
        self.__shrunk_once_target = shrunk_once_target

    def __repr__(self):
        return repr(self.arbitrary)

    @property
    def min_value(self):
        return self.arbitrary.min_value

    @property
    def max_value(self):
        return self.arbitrary.max_value

    def generate(self, entropy, bias_factor=not_set):
        return self.arbitrary.generate(entropy, bias_factor)

    def default_target(self) -> T:
        return self.arbitrary.default_target()

    def can_shrink_without_context(self, value: Any) -> bool:
        return self.arbitrary.can_shrink_without_context(value)

    def shrunk_once_context(self) -> ShrinkContext:
        """Return the context to use for a value that has already been shrunk
        once, where the target was tried first and did not fail."""
        target = self.__shrunk_once_target
        return ShrinkContext(tried=(target,), passing=target)

    def shrink(
        self, value: T, context: Optional[ShrinkContext] = None
    ) -> Iterator[Tuple[T, ShrinkContext]]:
        if not self.can_shrink_without_context(value):
            raise InvalidArgument(
                "Cannot shrink value=%r, which is not in the domain of %r"
                % (value, self)
            )
        if context is None:
            context = ShrinkContext.empty()
        check_type(ShrinkContext, context, "context")
        if context.passing is not None and not self.can_shrink_without_context(
            context.passing
        ):
            raise InvalidArgument(
                "Cannot shrink with passing=%r, which is not in the domain of %r"
                % (context.passing, self)
            )
        return self.__shrink(value, context)

    def __shrink(self, value, context):
        tried = context.tried
        for candidate, previous in self.arbitrary.shrink(value, context.passing):
            if candidate in tried:
                debug_report(
                    lambda: "Skipping %r while shrinking %r, already tried"
                    % (candidate, value)
                )
                continue
            tried = tried | {candidate}
            yield candidate, ShrinkContext(tried=tried, passing=previous)
