# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

from arbitrary.arbitraries._internal.arbitrary import Arbitrary
from arbitrary.arbitraries._internal.contextual import (
    ContextualShrinkArbitrary,
    ShrinkContext,
)
from arbitrary.arbitraries._internal.numbers import (
    DEFAULT_MAX,
    Domain,
    IntegerArbitrary,
    NatConstraints,
    integer,
    nat,
    resolve_nat_domain,
)

__all__ = [
    "DEFAULT_MAX",
    "Arbitrary",
    "ContextualShrinkArbitrary",
    "Domain",
    "IntegerArbitrary",
    "NatConstraints",
    "ShrinkContext",
    "integer",
    "nat",
    "resolve_nat_domain",
]
