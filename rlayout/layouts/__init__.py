"""
Layout System

Provides the layout generators and a registry to create them by namespace.
"""

from .layout_base import (
    Layout,
    LayoutError,
    UnknownCommand,
    MissingArgument,
    InvalidArgument,
    DegenerateArea,
)
from .layout_carousel import CarouselLayout
from .layout_uniform_grid import UniformGridLayout, Grid, GridLayout, find_grid

LAYOUTS = {
    CarouselLayout.NAMESPACE: CarouselLayout,
    UniformGridLayout.NAMESPACE: UniformGridLayout,
}


def create_layout(namespace: str, config=None, debug: bool = False) -> Layout:
    """Create a layout generator for a namespace."""
    try:
        layout_class = LAYOUTS[namespace]
    except KeyError:
        names = ", ".join(LAYOUTS)
        raise ValueError(f"Unknown layout: {namespace}. Use one of: {names}") from None
    return layout_class(config, debug=debug)


__all__ = [
    # Base classes
    "Layout",
    "LayoutError",
    "UnknownCommand",
    "MissingArgument",
    "InvalidArgument",
    "DegenerateArea",
    # Layout implementations
    "CarouselLayout",
    "UniformGridLayout",
    "Grid",
    "GridLayout",
    "find_grid",
    # Registry
    "LAYOUTS",
    "create_layout",
]
