"""A horizontal slider whose value is mapped to screen position by a mapper."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable

from mightyui.layout import Box

_EPSILON = 1.1920929e-07


def _map(value: float, in_min: float, in_max: float, out_min: float, out_max: float,
         clamp: bool = False) -> float:
    if abs(in_min - in_max) < _EPSILON:
        return out_min
    out = (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min
    if clamp:
        lo, hi = (out_min, out_max) if out_min <= out_max else (out_max, out_min)
        out = min(max(out, lo), hi)
    return out


def _clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


class Mapper(ABC):
    """Converts between slider values and normalised screen positions in [0, 1]."""

    @abstractmethod
    def to_value(self, slider: Slider, x: float) -> float:
        """Return the value for normalised position x."""

    @abstractmethod
    def to_screen(self, slider: Slider, val: float) -> float:
        """Return the normalised position for a value."""


class LinearMapper(Mapper):
    """Maps positions linearly onto the slider range."""

    def to_value(self, slider: Slider, x: float) -> float:
        return _map(x, 0, 1, slider.min, slider.max)

    def to_screen(self, slider: Slider, val: float) -> float:
        return _map(val, slider.min, slider.max, 0, 1)


class LogMapper(Mapper):
    """Maps positions logarithmically; larger strength gives more resolution near min."""

    def __init__(self, strength: float = 10) -> None:
        self.strength = strength

    def to_value(self, slider: Slider, x: float) -> float:
        s = self.strength
        return (math.exp(x * math.log(s + 1)) - 1) / s * (slider.max - slider.min) + slider.min

    def to_screen(self, slider: Slider, val: float) -> float:
        s = self.strength
        return math.log((val - slider.min) / (slider.max - slider.min) * s + 1) / math.log(s + 1)


class Slider(Box):
    """A slider holding a value between min and max."""

    PADDING_LR = 11

    def __init__(self, x: float = 0, y: float = 0, width: float = 200, height: float = 20,
                 min: float = 0, max: float = 1, value: float = 0) -> None:
        super().__init__(x=x, y=y, width=width, height=height)
        self.min = min
        self.max = max
        self.value = value
        self.value_mapper: Mapper = LinearMapper()
        self.on_change: list[Callable[[float], object]] = []

    def _notify(self) -> None:
        for callback in list(self.on_change):
            callback(self.value)

    def handle_position(self) -> float:
        """Return the x coordinate of the handle centre within the slider."""
        pos = self.value_mapper.to_screen(self, self.value)
        return _map(pos, 0, 1, self.PADDING_LR, self.width - self.PADDING_LR, clamp=True)

    def set_value_and_notify(self, val: float) -> None:
        self.value = _clamp(val, self.min, self.max)
        self._notify()

    def touch_down(self, x: float) -> None:
        self.touch_moved(x)

    def touch_moved(self, x: float) -> None:
        pos = _map(x, self.PADDING_LR, self.width - self.PADDING_LR, 0, 1, clamp=True)
        self.value = _clamp(self.value_mapper.to_value(self, pos), self.min, self.max)
        self._notify()

    def touch_moved_outside(self, x: float) -> None:
        self.touch_moved(x)