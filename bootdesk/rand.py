"""The linear congruential pseudo-random generator from the classic C book."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RAND_MAX", "RandomGenerator", "rand"]

RAND_MAX = 32767
_MULTIPLIER = 1103515245
_INCREMENT = 12345
_WORD_MASK = 0xFFFFFFFF


@dataclass
class RandomGenerator:
    """Generator state held in a 32-bit word, seeded with 1 by default."""

    state: int = 1

    def __post_init__(self) -> None:
        self.state &= _WORD_MASK

    def rand(self) -> int:
        """Advance the state and return a value in ``0..RAND_MAX``."""
        self.state = (self.state * _MULTIPLIER + _INCREMENT) & _WORD_MASK
        return (self.state // 65536) % 32768


_default = RandomGenerator()


def rand() -> int:
    """Return the next value of the shared generator."""
    return _default.rand()