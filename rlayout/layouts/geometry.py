"""
Layout Geometry Helpers

Pure functions shared by the layout algorithms. No clamping is performed:
padding larger than the area yields negative extents.
"""

from __future__ import annotations
from typing import Tuple

from ..protocol import f32_mul, truncate_i32


def padded_size(width: int, height: int, outer_padding: int) -> Tuple[int, int]:
    """Area left after removing the outer padding on every side."""
    return width - 2 * outer_padding, height - 2 * outer_padding


def split(extent: int, ratio: float, view_padding: int) -> Tuple[int, int]:
    """
    Split an extent in two parts separated by one view_padding gutter.

    Args:
        extent: Padded extent to split
        ratio: Fraction of the usable extent given to the first part
        view_padding: Gutter between the parts

    Returns:
        (first, second) with first + view_padding + second == extent
    """
    first = truncate_i32(f32_mul(extent - view_padding, ratio))
    second = extent - view_padding - first
    return first, second


def size_from_fraction(extent: int, fraction: float, view_padding: int) -> int:
    """
    Size of a cell taking up `fraction` of an extent.

    One gutter is added to the extent before scaling, so that a fraction of
    0.5 gives two cells that exactly fill the extent with one gutter between.
    """
    return truncate_i32(f32_mul(extent + view_padding, fraction)) - view_padding
