# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Helpers for drawing integers with extra weight on the edges of their
domain.

Uniform draws over a large domain almost never produce the boundary values
where bugs tend to live, so biased generation sometimes narrows the domain
to a small range sitting right next to one of its edges.
"""


def integer_log_like(v):
    """Returns floor(log2(v)) for positive v, exactly even for very large
    integers."""
    assert v >= 1
    return v.bit_length() - 1


def bias_numeric_range(min_value, max_value):
    """Returns a list of ``(lower, upper)`` ranges, each inside
    ``[min_value, max_value]``, that biased generation draws from.

    The first range is always the one next to the value the domain shrinks
    towards.
    """
    assert min_value <= max_value
    if min_value == max_value:
        return [(min_value, max_value)]
    if min_value < 0 < max_value:
        log_min = integer_log_like(-min_value)
        log_max = integer_log_like(max_value)
        return [
            (-log_min, log_max),
            (max_value - log_max, max_value),
            (min_value, min_value + log_min),
        ]
    log_gap = integer_log_like(max_value - min_value)
    close_to_min = (min_value, min_value + log_gap)
    close_to_max = (max_value - log_gap, max_value)
    if min_value < 0:
        return [close_to_max, close_to_min]
    return [close_to_min, close_to_max]
