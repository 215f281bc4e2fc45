"""Distribution layer shared by every generator flavor.

Everything here is written against a single capability, ``next_u64()``, so the
bounded integer, float and Gaussian helpers exist once no matter how many
output scramblers sit underneath.
"""

import math
from abc import ABC, abstractmethod

import numpy as np

from .errors import InvalidRangeError, RangeOverflowError
from .models import MASK64

FLOAT_SCALE = np.float32(2.0 ** -24)
DOUBLE_SCALE = 2.0 ** -53
SPAN_LIMIT = 1 << 64

_F32_ONE = np.float32(1.0)
_F32_TWO = np.float32(2.0)
_F32_ZERO = np.float32(0.0)
_F32_MINUS_TWO = np.float32(-2.0)


def bits_to_float01(x: int) -> np.float32:
    """Top 24 bits of a raw draw as a single precision value in [0, 1)."""
    return np.float32(x >> 40) * FLOAT_SCALE


def bits_to_double01(x: int) -> float:
    """Top 53 bits of a raw draw as a double precision value in [0, 1)."""
    return (x >> 11) * DOUBLE_SCALE


class RandomSource(ABC):
    """Derived distributions over a raw 64-bit generator.

    Subclasses only provide ``next_u64``. The unchecked helpers keep the
    reference semantics: preconditions (non-zero bound, ``upper >= lower``)
    are the caller's job and are not validated. The ``checked_*`` helpers are
    an added layer that raises instead.
    """

    @abstractmethod
    def next_u64(self) -> int:
        """Advance the state and return one raw 64-bit output."""

    def below(self, bound: int) -> int:
        """Uniform integer in [0, bound) by debiased modulo reduction.

        ``bound == 0`` raises ``ZeroDivisionError``.
        """

        bound &= MASK64
        # -bound in unsigned 64-bit space is 2**64 - bound
        threshold = -bound & MASK64
        while True:
            x = self.next_u64()
            r = x % bound
            if x - r <= threshold:
                return r

    def int_in_range(self, lower: int, upper: int) -> int:
        """Uniform integer in [lower, upper], both ends inclusive."""
        return lower + self.below(upper - lower + 1)

    def checked_below(self, bound: int) -> int:
        if bound <= 0:
            raise InvalidRangeError(f"Bound must be positive, received {bound}.")
        if bound > SPAN_LIMIT:
            raise RangeOverflowError(f"Bound {bound} does not fit in 64 bits.")
        if bound == SPAN_LIMIT:
            return self.next_u64()
        return self.below(bound)

    def checked_int_in_range(self, lower: int, upper: int) -> int:
        if upper < lower:
            raise InvalidRangeError(f"Upper bound {upper} is below lower bound {lower}.")
        span = upper - lower + 1
        if span > SPAN_LIMIT:
            raise RangeOverflowError(f"Span of [{lower}, {upper}] does not fit in 64 bits.")
        return lower + self.checked_below(span)

    def float01(self) -> np.float32:
        return bits_to_float01(self.next_u64())

    def double01(self) -> float:
        return bits_to_double01(self.next_u64())

    def float_in_range(self, lower: float, upper: float) -> np.float32:
        """Uniform single precision value in [lower, upper).

        Rounding can land exactly on ``upper`` for some bounds.
        """

        lower = np.float32(lower)
        upper = np.float32(upper)
        return lower + (upper - lower) * self.float01()

    def double_in_range(self, lower: float, upper: float) -> float:
        return lower + (upper - lower) * self.double01()

    def float_gaussian(self, mu: float, sigma: float) -> np.float32:
        """Normal deviate in single precision using the Marsaglia polar method."""

        while True:
            u = self.float01() * _F32_TWO - _F32_ONE
            v = self.float01() * _F32_TWO - _F32_ONE
            s = u * u + v * v
            if _F32_ZERO < s < _F32_ONE:
                break

        factor = np.sqrt(_F32_MINUS_TWO * np.log(s) / s)
        return np.float32(mu) + np.float32(sigma) * (u * factor)

    def double_gaussian(self, mu: float, sigma: float) -> float:
        """Normal deviate in double precision using the Marsaglia polar method.

        Only the ``u`` deviate of each accepted pair is returned; the ``v``
        partner is dropped so every call depends on the state alone.
        """

        while True:
            u = self.double01() * 2.0 - 1.0
            v = self.double01() * 2.0 - 1.0
            s = u * u + v * v
            if 0.0 < s < 1.0:
                break

        return mu + sigma * (u * math.sqrt(-2.0 * math.log(s) / s))
