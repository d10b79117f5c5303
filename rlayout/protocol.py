"""
Layout Protocol Types

Value types exchanged with the layout protocol runtime, plus helpers that
emulate the 32-bit integer semantics of the wire format.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List
import math
import struct

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def saturate_i32(value: int) -> int:
    """Clamp an integer into the signed 32-bit range."""
    return max(INT32_MIN, min(INT32_MAX, value))


def saturating_add(a: int, b: int) -> int:
    return saturate_i32(a + b)


def saturating_sub(a: int, b: int) -> int:
    return saturate_i32(a - b)


def saturating_mul(a: int, b: int) -> int:
    return saturate_i32(a * b)


def f32(value: float) -> float:
    """Round a number to the nearest 32-bit float."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def f32_mul(a: float, b: float) -> float:
    """Multiply as 32-bit floats: both operands and the product are rounded."""
    return f32(f32(a) * f32(b))


def truncate_i32(value: float) -> int:
    """
    Convert a float to a signed 32-bit integer.

    Truncates toward zero and saturates at the range bounds. NaN maps to 0.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return INT32_MAX if value > 0 else INT32_MIN
    return saturate_i32(int(value))


class Edge(Enum):
    """Output edge a layout area extends from."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: "str | Edge") -> "Edge":
        """
        Parse an edge name.

        Accepts an Edge instance or a case-insensitive name ("left", "Top", ...).
        """
        if isinstance(value, Edge):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        names = ", ".join(edge.value for edge in cls)
        raise ValueError(f"Invalid edge: {value!r}. Use one of: {names}")

    @property
    def splits_width(self) -> bool:
        """Whether the main/secondary split runs across the output's width."""
        return self in (Edge.LEFT, Edge.RIGHT)


@dataclass
class Rectangle:
    """Placement of a single view in layout coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def as_tuple(self):
        return (self.x, self.y, self.width, self.height)


@dataclass
class GeneratedLayout:
    """Complete response to one layout demand."""

    layout_name: str
    views: List[Rectangle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.views)
