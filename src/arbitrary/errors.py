# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""This module contains the exceptions raised by Arbitrary."""


class ArbitraryException(Exception):
    """Generic parent class for exceptions thrown by Arbitrary."""


class InvalidArgument(ArbitraryException, TypeError):
    """Used to indicate that the arguments to an Arbitrary function were in
    some manner incorrect."""


class InvalidBoundError(InvalidArgument):
    """A bound of a numeric domain lies outside the values that domain may
    take, such as a negative upper bound for a natural number."""


class NonIntegerBoundError(InvalidArgument):
    """A bound of an integer domain cannot be exactly represented as an
    integer."""


class InvalidState(ArbitraryException):
    """The system is not in a state where you were allowed to do that."""


class EntropyExhausted(ArbitraryException):
    """An entropy source replaying a fixed buffer was asked for more bits
    than the buffer holds.

    The generation that was in progress cannot complete, and whoever owns
    the source should treat the draw as abandoned rather than retry it.
    """
