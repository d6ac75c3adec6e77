# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from typing import Any, Generic, Iterator, Tuple, TypeVar

from arbitrary.utils.conventions import not_set

T = TypeVar("T")


class Arbitrary(Generic[T]):
    """An Arbitrary is an object that knows how to produce values of some
    domain from an entropy source, and how to shrink a value of that domain
    towards simpler ones.

    Higher-level combinators only ever talk to arbitraries through the
    methods defined here, so anything implementing them can be composed.
    """

    def generate(self, entropy: Any, bias_factor: Any = not_set) -> T:
        """Draw a single value from ``entropy``.

        ``bias_factor`` controls how often generation favours the edges of
        the domain, and None switches bias off. When it is not given
        ``settings.default.bias_factor`` applies.
        """
        raise NotImplementedError("%s.generate" % (type(self).__name__,))

    def shrink(self, value: T, context: Any = None) -> Iterator[Tuple[T, Any]]:
        """Return a lazy iterator of ``(candidate, context)`` pairs, each
        candidate simpler than ``value``.

        ``context`` is whatever was paired with ``value`` when it was itself
        produced as a candidate, or None when shrinking starts.
        """
        raise NotImplementedError("%s.shrink" % (type(self).__name__,))

    def default_target(self) -> T:
        """The simplest value of the domain, which shrinking converges to."""
        raise NotImplementedError("%s.default_target" % (type(self).__name__,))

    def can_shrink_without_context(self, value: Any) -> bool:
        """Return True if ``value`` belongs to this arbitrary's domain, so that
        it can be shrunk even though this arbitrary did not produce it."""
        raise NotImplementedError(
            "%s.can_shrink_without_context" % (type(self).__name__,)
        )
