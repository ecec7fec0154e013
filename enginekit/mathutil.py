"""Math helpers: constants, rounding, bit fields, a fast PRNG and named colours."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from typing import NamedTuple, TypeVar, Union

__all__ = [
    "FLOAT_EPSILON",
    "FLOAT_MAX",
    "FLOAT_MIN",
    "PI",
    "PI_DIV_2",
    "PI_DIV_4",
    "PI_TIMES_2",
    "ONE_BY_PI",
    "Color",
    "BitField",
    "Random",
    "is_power_of_2",
    "clamp",
    "is_between",
    "round_int",
    "fast_sqrt",
    "to_radian",
    "to_degree",
    "float_random",
    "int_random",
]

FLOAT_EPSILON = 0.001
FLOAT_MAX = 3.402823466e38
FLOAT_MIN = -3.402823466e38
PI = 3.141592654
PI_DIV_2 = PI * 0.5
PI_DIV_4 = PI * 0.25
PI_TIMES_2 = PI * 2.0
ONE_BY_PI = 0.318309886

_MASK32 = 0xFFFFFFFF

T = TypeVar("T")


def _int32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value >= 0x80000000 else value


def to_radian(degree: float) -> float:
    """Convert degrees to radians."""
    return degree * (PI / 180.0)


def to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * (180.0 / PI)


def is_power_of_2(num: int) -> bool:
    """Return whether shifting ``num`` (as 32-bit unsigned) right ever gives 2.

    This holds for every power of two from 2 upwards; 0 and 1 are rejected.
    """
    num &= _MASK32
    for _ in range(32):
        if num == 2:
            return True
        num >>= 1
    return False


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to the range ``low`` to ``high``."""
    if value < low:  # type: ignore[operator]
        value = low
    if value > high:  # type: ignore[operator]
        value = high
    return value


def is_between(value: T, low: T, high: T) -> bool:
    """Return whether ``low <= value <= high``."""
    return low <= value <= high  # type: ignore[operator]


def round_int(value: float) -> int:
    """Round to the nearest integer, halves going to the even neighbour."""
    return int(round(value))


def fast_sqrt(value: float) -> float:
    """Approximate square root using the inverse square root bit trick."""
    xhalf = 0.5 * value
    (bits,) = struct.unpack("<i", struct.pack("<f", value))
    bits = _int32(0x5F3759DF - (bits >> 1))
    (xprime,) = struct.unpack("<f", struct.pack("<i", bits))
    xprime = xprime * (1.5 - xhalf * xprime * xprime)
    return xprime * value


_BitLike = Union[int, "BitField"]


@dataclass
class BitField:
    """A 32-bit set of flags."""

    data: int = 0

    def __post_init__(self) -> None:
        self.data &= _MASK32

    @staticmethod
    def _bits(data: _BitLike) -> int:
        return int(data) & _MASK32

    def add(self, data: _BitLike) -> None:
        """Set the given bits."""
        self.data |= self._bits(data)

    def remove(self, data: _BitLike) -> None:
        """Clear the given bits."""
        self.data &= ~self._bits(data) & _MASK32

    def test(self, data: _BitLike) -> bool:
        """Return whether any of the given bits is set."""
        return (self.data & self._bits(data)) != 0

    def test_all(self, data: _BitLike) -> bool:
        """Return whether all of the given bits are set."""
        bits = self._bits(data)
        return (self.data & bits) == bits

    def __int__(self) -> int:
        return self.data


class Random:
    """Linear congruential generator with 32-bit signed wrap-around."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(time.monotonic() * 1000)
        self._seed = _int32(seed)

    def _mutate(self) -> None:
        self._seed = _int32(self._seed * 196314165 + 907633515)

    def get_float(self) -> float:
        """Return a float in ``[0, 1)``."""
        self._mutate()
        bits = 0x3F800000 | (self._seed & 0x007FFFFF)
        (result,) = struct.unpack("<f", struct.pack("<I", bits))
        return result - int(result)

    def get_int(self) -> int:
        """Return the next signed 32-bit value."""
        self._mutate()
        return self._seed


_FLOAT_RANDOM = Random()
_INT_RANDOM = Random()


def float_random(start: float, end: float) -> float:
    """Return a float between ``start`` and ``end``."""
    return _FLOAT_RANDOM.get_float() * (end - start) + start


def int_random(start: int, end: int) -> int:
    """Return ``start`` plus the next value's truncated remainder by ``end - start``.

    The remainder keeps the sign of the drawn value, so results lie strictly
    between ``2 * start - end`` and ``end``.
    """
    span = end - start
    if span == 0:
        raise ValueError("start and end must differ")
    drawn = _INT_RANDOM.get_int()
    remainder = abs(drawn) % abs(span)
    if drawn < 0:
        remainder = -remainder
    return remainder + start


class Color(NamedTuple):
    """An RGB colour with components in ``[0, 1]``; named colours are attributes."""

    r: float
    g: float
    b: float


_NAMED_COLORS = {
    "BLACK": (0.000, 0.000, 0.000),
    "DARK_KHAKI": (0.741, 0.718, 0.420),
    "KHAKI": (0.941, 0.902, 0.525),
    "DARK_YELLOW": (0.588, 0.588, 0.000),
    "DARK_ORANGE": (1.000, 0.647, 0.000),
    "ORANGE": (1.000, 0.549, 0.000),
    "INDIAN_RED": (0.804, 0.361, 0.361),
    "DARK_SALMON": (0.914, 0.588, 0.478),
    "DARK_RED": (0.545, 0.000, 0.000),
    "PINK": (1.000, 0.753, 0.796),
    "PURPLE": (0.502, 0.000, 0.502),
    "MAROON": (0.502, 0.000, 0.000),
    "BROWN": (0.647, 0.165, 0.165),
    "PURE_BROWN": (0.502, 0.251, 0.000),
    "GOLDEN_ROD": (0.855, 0.647, 0.125),
    "DARK_GOLDEN_ROD": (0.722, 0.525, 0.043),
    "TAN": (0.824, 0.706, 0.549),
    "CORNSILK": (1.000, 0.973, 0.863),
    "CYAN": (0.000, 1.000, 1.000),
    "AQUAMARINE": (0.498, 1.000, 0.831),
    "TURQUOISE": (0.251, 0.878, 0.816),
    "DARK_BLUE": (0.000, 0.000, 0.545),
    "DARK_CYAN": (0.000, 0.545, 0.545),
    "NAVY": (0.000, 0.000, 0.502),
    "GAINSBORO": (0.863, 0.863, 0.863),
    "LIGHT_GRAY": (0.827, 0.827, 0.827),
    "SILVER": (0.753, 0.753, 0.753),
    "DARK_GRAY": (0.663, 0.663, 0.663),
    "DIM_GRAY": (0.412, 0.412, 0.412),
    "DARK_SLATE_GRAY": (0.184, 0.310, 0.310),
    "LIGHT_SLATE_GRAY": (0.467, 0.533, 0.600),
    "SLATE_GRAY": (0.439, 0.502, 0.565),
    "MEDIUM_SPRING_GREEN": (0.000, 0.980, 0.604),
    "SPRING_GREEN": (0.000, 1.000, 0.498),
    "LIME": (0.000, 1.000, 0.000),
    "CHARTREUSE": (0.498, 0.608, 0.000),
    "TEAL": (0.000, 0.502, 0.502),
    "GREEN": (0.000, 0.502, 0.000),
    "OLIVE": (0.502, 0.502, 0.000),
    "DARK_GREEN": (0.000, 0.392, 0.000),
    "LAVENDER": (0.902, 0.902, 0.980),
    "THISTLE": (0.847, 0.749, 0.847),
    "WHITE": (1.000, 1.000, 1.000),
    "AQUA": (0.000, 1.000, 1.000),
    "GOLD": (1.000, 0.843, 0.000),
    "BLUE": (0.000, 0.000, 1.000),
    "LIGHT_GREEN": (0.565, 0.933, 0.565),
    "YELLOW": (1.000, 1.000, 0.000),
    "LIGHT_BLUE": (0.678, 0.847, 0.902),
    "GRAY": (0.502, 0.502, 0.502),
    "RED": (1.000, 0.000, 0.000),
    "MAGENTA": (1.000, 0.000, 1.000),
}

for _name, _rgb in _NAMED_COLORS.items():
    setattr(Color, _name, Color(*_rgb))

COLOR_NAMES = tuple(_NAMED_COLORS)