"""State container shared by both xoshiro256 generator flavors."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import InvalidStateError

MASK64 = (1 << 64) - 1


@dataclass
class GeneratorState:
    """Four 64-bit words that fully determine every future draw.

    The all-zero state is degenerate (it only ever yields zero). Seeding never
    produces it, but the plain constructor does not check for it either.
    """

    s0: int = 0
    s1: int = 0
    s2: int = 0
    s3: int = 0

    def words(self) -> Tuple[int, int, int, int]:
        return (self.s0, self.s1, self.s2, self.s3)

    def copy(self) -> "GeneratorState":
        return GeneratorState(*self.words())

    def is_zero(self) -> bool:
        return not (self.s0 | self.s1 | self.s2 | self.s3)

    @classmethod
    def from_words(cls, words: Iterable[int]) -> "GeneratorState":
        """Rebuild a saved state, rejecting anything a seed could not produce."""

        values = tuple(words)
        if len(values) != 4:
            raise InvalidStateError(f"Expected 4 state words, received {len(values)}.")
        for index, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidStateError(f"State word s{index} must be an int, received {value!r}.")
            if not 0 <= value <= MASK64:
                raise InvalidStateError(f"State word s{index} is outside the unsigned 64-bit range.")

        state = cls(*values)
        if state.is_zero():
            raise InvalidStateError("The all-zero state only produces zeros.")
        return state
