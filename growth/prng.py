"""
Seeded pseudo-random generator (mulberry32) for reproducible growth.

Every random decision in a run is drawn from one SeededRandom instance, so the
same seed always reproduces the same forest.
"""

from typing import Optional

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_DENOMINATOR = 4294967296.0  # 2 ** 32


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class SeededRandom:
    __slots__ = ('seed', 'state', 'draws')

    def __init__(self, seed: int):
        self.seed = int(seed)
        self.state = self.seed & _MASK
        self.draws = 0

    def _next_float(self) -> float:
        self.state = (self.state + _INCREMENT) & _MASK
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        self.draws += 1
        return ((t ^ (t >> 14)) & _MASK) / _DENOMINATOR

    def next(self, a: float = 1.0, b: Optional[float] = None) -> float:
        """
        next() -> [0, 1), next(a) -> [0, a), next(a, b) -> [min(a, b), max(a, b)).
        """
        if b is None:
            low, high = 0.0, a
        else:
            low, high = min(a, b), max(a, b)
        return self._next_float() * (high - low) + low

    __call__ = next

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, draws={self.draws})"
