"""
Randomness sources.

The only nondeterminism in the simulation is the qualification draw.  It is
isolated behind the RandomSource protocol so tests and replays can script
outcomes exactly:

  NumpyRandomSource    — seeded numpy Generator, uniform on 1..sides
  ScriptedRandomSource — replays a fixed sequence of draws
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Supplies uniformly distributed integers in [1, sides]."""

    def draw(self, sides: int) -> int:
        ...


class NumpyRandomSource:
    """RandomSource backed by numpy's default PCG64 generator.

    Attributes:
        seed: Seed the generator was created with (None = OS entropy).
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed: Optional[int] = seed
        self._rng: np.random.Generator = np.random.default_rng(seed)

    def draw(self, sides: int) -> int:
        if sides < 1:
            raise ValueError(f"sides must be >= 1, got {sides}")
        # integers() excludes the high endpoint
        return int(self._rng.integers(1, sides + 1))


class ScriptedRandomSource:
    """RandomSource that replays pre-set draws in order.

    When the script runs out, `fallback` is returned for every further draw
    (None means exhaustion is an error).
    """

    def __init__(
        self,
        draws: Iterable[int] = (),
        fallback: Optional[int] = None,
    ) -> None:
        self._queue: Deque[int] = deque(int(d) for d in draws)
        self.fallback: Optional[int] = fallback
        self.history: List[int] = []

    def draw(self, sides: int) -> int:
        if self._queue:
            value = self._queue.popleft()
        elif self.fallback is not None:
            value = self.fallback
        else:
            raise RuntimeError("ScriptedRandomSource exhausted")
        if not 1 <= value <= sides:
            raise ValueError(f"Scripted draw {value} outside [1, {sides}]")
        self.history.append(value)
        return value
