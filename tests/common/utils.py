# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import contextlib
import sys
from io import StringIO

from arbitrary.reporting import default, with_reporter


@contextlib.contextmanager
def capture_out():
    old_out = sys.stdout
    try:
        new_out = StringIO()
        sys.stdout = new_out
        with with_reporter(default):
            yield new_out
    finally:
        sys.stdout = old_out


@contextlib.contextmanager
def capture_reports():
    reports = []
    with with_reporter(reports.append):
        yield reports


def shrink_lineage(arbitrary, value, predicate):
    """Shrinks ``value`` the way a test runner would, moving to the first
    candidate of each sequence for which ``predicate`` is true.

    Returns every candidate offered, in order, and the values that were
    moved to, starting with ``value`` itself.
    """
    offered = []
    failing = [value]
    current, context = value, None
    while True:
        for candidate, new_context in arbitrary.shrink(current, context):
            offered.append(candidate)
            if predicate(candidate):
                current, context = candidate, new_context
                failing.append(candidate)
                break
        else:
            return offered, failing
