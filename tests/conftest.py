"""Ensure the xoshiro_rng package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from xoshiro_rng import Xoshiro256Plus, Xoshiro256PlusPlus  # noqa: E402


@pytest.fixture(params=[Xoshiro256Plus, Xoshiro256PlusPlus], ids=["plus", "plus-plus"])
def generator_cls(request):
    return request.param


@pytest.fixture
def rng(generator_cls):
    return generator_cls.from_seed(0x5EED)
