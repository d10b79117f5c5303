"""
River Layout Generators for Python

Window placement geometry for river's layout generator protocol.

This package provides:
- Rectangle and layout result types
- The carousel layout: one main view plus a scrollable strip
- The uniform grid layout: an aspect-matched grid filled in snake order
- A per-output layout manager publishing events on a Pypubsub bus
- A command-line driver printing view geometry

Example usage:
    from rlayout import CarouselLayout, CarouselConfig

    layout = CarouselLayout(CarouselConfig(main_ratio=0.5))
    layout.user_cmd("scroll 1")
    result = layout.generate_layout(3, 1920, 1080)

Or run directly:
    python -m rlayout carousel 3 1920 1080
"""

__version__ = "0.1.0"

from .protocol import (
    Edge,
    Rectangle,
    GeneratedLayout,
)

from .config import (
    CarouselConfig,
    UniformGridConfig,
    LayoutsConfig,
)

from .layouts import (
    Layout,
    LayoutError,
    UnknownCommand,
    MissingArgument,
    InvalidArgument,
    DegenerateArea,
    CarouselLayout,
    UniformGridLayout,
    LAYOUTS,
    create_layout,
)

from .manager import LayoutManager

__all__ = [
    # Version
    "__version__",
    # Protocol types
    "Edge",
    "Rectangle",
    "GeneratedLayout",
    # Configuration
    "CarouselConfig",
    "UniformGridConfig",
    "LayoutsConfig",
    # Layouts
    "Layout",
    "LayoutError",
    "UnknownCommand",
    "MissingArgument",
    "InvalidArgument",
    "DegenerateArea",
    "CarouselLayout",
    "UniformGridLayout",
    "LAYOUTS",
    "create_layout",
    # Manager
    "LayoutManager",
]
