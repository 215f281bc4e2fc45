# xoshiro256+ / xoshiro256++ generators seeded through SplitMix64
# Constants follow the public domain reference code by Blackman and Vigna
# (https://prng.di.unimi.it/). Not suitable for anything security related.
import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple, Type

from .distributions import RandomSource
from .errors import UnknownVariantError
from .models import MASK64, GeneratorState

logger = logging.getLogger(__name__)

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


def splitmix64(x: int) -> int:
    x = (x + GOLDEN_GAMMA) & MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & MASK64
    return x ^ (x >> 31)


def rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64


def seed(state: GeneratorState, value: int) -> None:
    """Expand one 64-bit seed into the four state words, in place.

    Each word is the SplitMix64 image of the previous one, starting from the
    seed, so no seed (zero included) yields the all-zero state.
    """

    value &= MASK64
    state.s0 = value = splitmix64(value)
    state.s1 = value = splitmix64(value)
    state.s2 = value = splitmix64(value)
    state.s3 = splitmix64(value)


def seeded_state(value: int) -> GeneratorState:
    state = GeneratorState()
    seed(state, value)
    return state


def _advance(state: GeneratorState) -> None:
    t = (state.s1 << 17) & MASK64
    state.s2 ^= state.s0
    state.s3 ^= state.s1
    state.s1 ^= state.s2
    state.s0 ^= state.s3
    state.s2 ^= t
    state.s3 = rotl64(state.s3, 45)


def next_plus(state: GeneratorState) -> int:
    """xoshiro256+ step: output ``s0 + s3``; weak low bits, fine for floats."""
    result = (state.s0 + state.s3) & MASK64
    _advance(state)
    return result


def next_plus_plus(state: GeneratorState) -> int:
    """xoshiro256++ step: output ``rotl(s0 + s3, 23) + s0``."""
    result = (rotl64((state.s0 + state.s3) & MASK64, 23) + state.s0) & MASK64
    _advance(state)
    return result


@dataclass
class _Xoshiro256(RandomSource):
    state: GeneratorState = field(default_factory=lambda: seeded_state(0))

    name = "xoshiro256"

    @classmethod
    def from_seed(cls, value: int):
        return cls(seeded_state(value))

    def seed(self, value: int) -> None:
        seed(self.state, value)

    def getstate(self) -> Tuple[int, int, int, int]:
        return self.state.words()

    def setstate(self, saved) -> None:
        if isinstance(saved, GeneratorState):
            saved = saved.words()
        self.state = GeneratorState.from_words(saved)


@dataclass
class Xoshiro256Plus(_Xoshiro256):
    """Faster flavor; recommended when only floats are drawn."""

    name = "plus"

    def next_u64(self) -> int:
        return next_plus(self.state)


@dataclass
class Xoshiro256PlusPlus(_Xoshiro256):
    """General purpose flavor with well mixed low bits."""

    name = "plus-plus"

    def next_u64(self) -> int:
        return next_plus_plus(self.state)


VARIANTS: Dict[str, Type[_Xoshiro256]] = {
    Xoshiro256Plus.name: Xoshiro256Plus,
    Xoshiro256PlusPlus.name: Xoshiro256PlusPlus,
}


def make_generator(variant: str, value: int) -> _Xoshiro256:
    try:
        cls = VARIANTS[variant]
    except KeyError:
        raise UnknownVariantError(
            f"Unknown variant '{variant}', expected one of {sorted(VARIANTS)}."
        ) from None
    logger.debug("Seeding %s generator with 0x%016x", cls.__name__, value & MASK64)
    return cls.from_seed(value)
