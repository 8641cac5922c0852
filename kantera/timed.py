"""Values that vary over time."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable


class Timed(ABC):
    """Something that yields a value for any point in time."""

    @abstractmethod
    def get_value(self, time: float) -> Any:
        """Return the value at ``time`` in seconds."""


def value_at(timed: Any, time: float) -> Any:
    """Evaluate ``timed`` at ``time``; plain values are constant over time."""
    if isinstance(timed, Timed):
        return timed.get_value(time)
    return timed


@dataclass
class Cycle(Timed):
    """Repeats ``timed`` every ``duration`` seconds."""

    timed: Any
    duration: float

    def get_value(self, time: float) -> Any:
        return value_at(self.timed, math.fmod(time, self.duration))


@dataclass
class Sine(Timed):
    """A sine wave whose amplitude may itself vary over time."""

    initial_phase: float
    frequency: float
    amplitude: Any

    def get_value(self, time: float) -> float:
        angle = (self.initial_phase + time) * self.frequency * math.pi * 2.0
        return math.sin(angle) * value_at(self.amplitude, time)


@dataclass
class Map(Timed):
    """Applies ``f`` to the value of ``timed``."""

    timed: Any
    f: Callable[[float], float]

    def get_value(self, time: float) -> float:
        return self.f(value_at(self.timed, time))


@dataclass
class Add(Timed):
    """The sum of two timed values."""

    a: Any
    b: Any

    def get_value(self, time: float) -> Any:
        return value_at(self.a, time) + value_at(self.b, time)


@dataclass
class Mul(Timed):
    """The product of two timed values."""

    a: Any
    b: Any

    def get_value(self, time: float) -> Any:
        return value_at(self.a, time) * value_at(self.b, time)