"""Helpers and fakes shared by the unit tests."""
from __future__ import annotations

from typing import Iterable

from stress_module.random_generator import ALPHABET


class ScriptedSource:
    """Stand-in for random.Random that replays fixed draws.

    randint() returns the next scripted integer (clamped into the requested
    range), random() the next scripted float.
    """

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()):
        self._ints = list(ints)
        self._floats = list(floats)
        self.seeded_with: list[int] = []

    def seed(self, value: int) -> None:
        self.seeded_with.append(value)

    def randint(self, low: int, high: int) -> int:
        value = self._ints.pop(0) if self._ints else low
        return max(low, min(high, value))

    def random(self) -> float:
        return self._floats.pop(0) if self._floats else 0.0


def is_alphanumeric(text: str) -> bool:
    return all(ch in ALPHABET for ch in text)
