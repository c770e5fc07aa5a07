"""Die sources: where face values come from.

A game never calls the ``random`` module directly; it asks its die
source for one face at a time.  ``RandomDice`` is the production source,
``ScriptedDice`` replays a fixed sequence so round outcomes can be
pinned down exactly.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

__all__ = ["MAX_VALUE_ON_DICE", "DieSource", "RandomDice", "ScriptedDice", "roll_dice"]

MAX_VALUE_ON_DICE = 6


@runtime_checkable
class DieSource(Protocol):
    """Anything that can produce one face value in ``1..faces``."""

    def roll(self, faces: int = MAX_VALUE_ON_DICE) -> int: ...


class RandomDice:
    """Uniform die backed by an isolated ``random.Random``.

    Pass either a ready ``rng`` (e.g. from ``SeedManager.get_rng``) or a
    ``seed``.  With neither, the generator is seeded from system entropy.
    """

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self._rng = rng if rng is not None else random.Random(seed)

    def roll(self, faces: int = MAX_VALUE_ON_DICE) -> int:
        return self._rng.randint(1, faces)


class ScriptedDice:
    """Replays a fixed sequence of face values, then raises.

    Running out of values is a test-setup bug, so it is loud rather
    than wrapping around.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def roll(self, faces: int = MAX_VALUE_ON_DICE) -> int:
        if self._index >= len(self._values):
            raise IndexError(
                f"ScriptedDice exhausted after {len(self._values)} rolls"
            )
        value = self._values[self._index]
        if not 1 <= value <= faces:
            raise ValueError(f"Scripted face {value} is outside 1..{faces}")
        self._index += 1
        return value


def roll_dice(source: DieSource, count: int, faces: int = MAX_VALUE_ON_DICE) -> list[int]:
    """Roll ``count`` independent dice from ``source``."""
    return [source.roll(faces) for _ in range(count)]
