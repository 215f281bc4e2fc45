"""Public package surface for the xoshiro256 random number library."""

from .distributions import RandomSource, bits_to_double01, bits_to_float01
from .errors import (
    ConfigError,
    InvalidRangeError,
    InvalidStateError,
    RandomError,
    RangeOverflowError,
    UnknownVariantError,
)
from .models import GeneratorState
from .prng import (
    VARIANTS,
    Xoshiro256Plus,
    Xoshiro256PlusPlus,
    make_generator,
    next_plus,
    next_plus_plus,
    rotl64,
    seed,
    seeded_state,
    splitmix64,
)
from .report import SampleConfig, run_sample_report

__all__ = [
    "ConfigError",
    "GeneratorState",
    "InvalidRangeError",
    "InvalidStateError",
    "RandomError",
    "RandomSource",
    "RangeOverflowError",
    "SampleConfig",
    "UnknownVariantError",
    "VARIANTS",
    "Xoshiro256Plus",
    "Xoshiro256PlusPlus",
    "bits_to_double01",
    "bits_to_float01",
    "make_generator",
    "next_plus",
    "next_plus_plus",
    "rotl64",
    "run_sample_report",
    "seed",
    "seeded_state",
    "splitmix64",
]
