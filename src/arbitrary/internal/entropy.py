# This file is part of Arbitrary.
#
# Copyright the Arbitrary Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Sources of the random bits consumed when generating values.

An entropy source is a cursor over a stream of bits. Drawing from it
advances the cursor, so a source must only ever be used by one generation
at a time.
"""

import random

from arbitrary.errors import EntropyExhausted, InvalidArgument
from arbitrary.internal.validation import check_type


class EntropySource:
    """Supplies bits to arbitraries, either from a seeded ``random.Random``
    or by replaying a fixed buffer of bytes.

    ``bits_drawn`` counts every bit handed out, including those thrown away
    by rejection sampling.
    """

    def __init__(self, random=None, buffer=None):
        assert (random is None) != (buffer is None)
        self.__random = random
        self.__buffer = buffer
        self.index = 0
        self.bits_drawn = 0

    @classmethod
    def from_seed(cls, seed):
        return cls(random=random.Random(seed))

    @classmethod
    def from_random(cls, rnd):
        check_type(random.Random, rnd, "random")
        return cls(random=rnd)

    @classmethod
    def for_buffer(cls, buffer):
        check_type((bytes, bytearray), buffer, "buffer")
        return cls(buffer=bytes(buffer))

    def __repr__(self):
        if self.__buffer is not None:
            return "EntropySource.for_buffer(%r)" % (self.__buffer,)
        return "EntropySource(random=%r)" % (self.__random,)

    def draw_bytes(self, n):
        if self.__buffer is None:
            return self.__random.getrandbits(8 * n).to_bytes(n, "big") if n else b""
        if self.index + n > len(self.__buffer):
            raise EntropyExhausted(
                "Needed %d more bytes but only %d of %d remain"
                % (n, len(self.__buffer) - self.index, len(self.__buffer))
            )
        result = self.__buffer[self.index : self.index + n]
        self.index += n
        return result

    def draw_bits(self, n):
        """Returns an integer drawn from the next ``n`` bits of entropy, so
        uniformly distributed in ``[0, 2 ** n)`` for a uniform source."""
        if n < 0:
            raise InvalidArgument("Cannot draw a negative number of bits, n=%r" % (n,))
        self.bits_drawn += n
        if n == 0:
            return 0
        n_bytes = n // 8
        if n % 8 != 0:
            n_bytes += 1
        return int.from_bytes(self.draw_bytes(n_bytes), "big") & ((1 << n) - 1)

    def draw_integer(self, lower, upper):
        """Returns an integer uniformly distributed in ``[lower, upper]``.

        Each attempt draws exactly as many bits as are needed to represent
        ``upper - lower``, and attempts which land past the end of the range
        are thrown away and retried.
        """
        if upper < lower:
            raise InvalidArgument("Cannot have upper=%r < lower=%r" % (upper, lower))
        gap = upper - lower
        if gap == 0:
            return lower
        bits = gap.bit_length()
        probe = gap + 1
        while probe > gap:
            probe = self.draw_bits(bits)
        return lower + probe
