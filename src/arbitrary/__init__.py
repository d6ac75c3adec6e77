# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Arbitrary is the generation and shrinking core of a property-based
testing engine.

It produces pseudo-random values of a declared domain and, when a test fails
on one of them, searches for a smaller value that still fails.
"""

from arbitrary._settings import Verbosity, local_settings, settings
from arbitrary.arbitraries import (
    DEFAULT_MAX,
    Arbitrary,
    ContextualShrinkArbitrary,
    IntegerArbitrary,
    NatConstraints,
    ShrinkContext,
    integer,
    nat,
)
from arbitrary.errors import (
    ArbitraryException,
    EntropyExhausted,
    InvalidArgument,
    InvalidBoundError,
    NonIntegerBoundError,
)
from arbitrary.internal.entropy import EntropySource
from arbitrary.internal.shrinking.minimizer import Minimizer
from arbitrary.version import __version__, __version_info__

__all__ = [
    "DEFAULT_MAX",
    "Arbitrary",
    "ArbitraryException",
    "ContextualShrinkArbitrary",
    "EntropyExhausted",
    "EntropySource",
    "IntegerArbitrary",
    "InvalidArgument",
    "InvalidBoundError",
    "Minimizer",
    "NatConstraints",
    "NonIntegerBoundError",
    "ShrinkContext",
    "Verbosity",
    "__version__",
    "__version_info__",
    "integer",
    "local_settings",
    "nat",
    "settings",
]
