# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from arbitrary._settings import settings as Settings
from arbitrary.reporting import debug_report, verbose_report


class Minimizer:
    """A Minimizer walks the contextual shrink sequence of an arbitrary,
    starting from a value which satisfies ``predicate``, and keeps the
    simplest value it finds that still satisfies it.

    It moves to the first candidate of each sequence which satisfies the
    predicate, handing that candidate's context back to the arbitrary, and
    stops once a sequence runs out without one.
    """

    def __init__(self, arbitrary, initial, predicate, settings=None):
        self.arbitrary = arbitrary
        self.current = initial
        self.context = None
        self.settings = Settings.default if settings is None else settings
        self.calls = 0
        self.shrinks = 0

        self.__predicate = predicate

    @classmethod
    def shrink(cls, arbitrary, initial, predicate, settings=None):
        """Shrink the value ``initial`` subject to the constraint that it
        satisfies ``predicate``.

        Returns the shrunk value.
        """
        minimizer = cls(arbitrary, initial, predicate, settings)
        minimizer.run()
        return minimizer.current

    def run(self):
        """Run until no candidate improves on the current value, or until
        ``max_shrinks`` improvements have been made."""
        while self.shrinks < self.settings.max_shrinks:
            if not self.run_step():
                break
        verbose_report(
            lambda: "Shrunk to %r after %d shrinks and %d calls"
            % (self.current, self.shrinks, self.calls)
        )

    def run_step(self):
        """Try the candidates for the current value in order, and move to the
        first one which satisfies the predicate.

        Returns True if the current value changed.
        """
        for candidate, context in self.arbitrary.shrink(self.current, self.context):
            if self.incorporate(candidate):
                self.context = context
                return True
        return False

    def incorporate(self, value):
        """Try using ``value`` as a possible candidate improvement.

        Return True if it works.
        """
        self.calls += 1
        if not self.__predicate(value):
            debug_report(lambda: "Candidate %r does not fail" % (value,))
            return False
        self.shrinks += 1
        verbose_report(lambda: "Shrunk %r to %r" % (self.current, value))
        self.current = value
        return True
