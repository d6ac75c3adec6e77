# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""
This module implements the candidate stream used to shrink an integer
towards a target.
"""


def _halve_towards_zero(n):
    return -((-n) // 2) if n < 0 else n // 2


def shrink_integer(current, target, try_target_asap):
    """Yields ``(candidate, previous)`` pairs moving ``current`` towards
    ``target`` by repeatedly halving the amount removed.

    Candidates are strictly between ``target`` (inclusive) and ``current``
    (exclusive), each one closer to ``current`` than the last. ``previous``
    is the candidate before this one, which a caller that stops at the
    first still-failing candidate knows did not fail.

    With ``try_target_asap`` the first candidate is ``target`` itself and its
    ``previous`` is None. Otherwise ``target`` is taken to be already known
    not to fail, and the first candidate removes half the gap.
    """
    real_gap = current - target
    if real_gap == 0:
        return
    previous = None if try_target_asap else target
    if try_target_asap:
        to_remove = real_gap
    else:
        to_remove = _halve_towards_zero(real_gap)
    while to_remove != 0:
        candidate = target if to_remove == real_gap else current - to_remove
        yield candidate, previous
        previous = candidate
        to_remove = _halve_towards_zero(to_remove)
