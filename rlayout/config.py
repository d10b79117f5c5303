"""
Layout Configuration

Dataclass configuration for the layout generators. Values are created once
at startup; only the carousel's scroll offset changes afterwards, through
user commands.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from .protocol import Edge


def parse_aspect(value: "str | float | int") -> float:
    """
    Parse an aspect ratio value.

    Accepts:
    - Number: 1.7777
    - Ratio string: "16:9" or "16/9"
    - Decimal string: "1.5"

    Returns:
    - Width/height ratio as float
    """
    if isinstance(value, (int, float)):
        aspect = float(value)
    elif isinstance(value, str):
        text = value.strip()
        for sep in (":", "/"):
            if sep in text:
                width, _, height = text.partition(sep)
                try:
                    aspect = float(width) / float(height)
                except (ValueError, ZeroDivisionError):
                    raise ValueError(
                        f"Invalid aspect ratio: {value}. Use W:H, W/H or a decimal"
                    ) from None
                break
        else:
            try:
                aspect = float(text)
            except ValueError:
                raise ValueError(
                    f"Invalid aspect ratio: {value}. Use W:H, W/H or a decimal"
                ) from None
    else:
        raise ValueError(f"Invalid aspect ratio type: {type(value)}")

    if not aspect > 0:
        raise ValueError(f"Aspect ratio must be positive, got {value}")
    return aspect


@dataclass
class CarouselConfig:
    """Carousel layout configuration."""

    # The main area extends out from this edge. Left/Right split the output
    # horizontally and scroll the secondary area vertically; Top/Bottom split
    # vertically and scroll horizontally.
    main_location: Edge = Edge.LEFT

    # Ratio of main area to total layout area along the split axis
    main_ratio: float = 0.6

    # Ratio of one secondary window to the secondary area along the scroll
    # axis. Its inverse is how many windows fit at once.
    secondary_window_size: float = 0.5

    # Padding around the edge of the layout area, in pixels
    outer_padding: int = 6

    # Padding between views, in pixels
    view_padding: int = 6

    # Offset of the secondary area, in number of windows
    scroll_offset: float = 0.0

    def __post_init__(self):
        """Parse the main location name into an Edge."""
        self.main_location = Edge.parse(self.main_location)


@dataclass
class UniformGridConfig:
    """Uniform grid layout configuration."""

    # Aspect ratio every grid extension tries to approximate
    target_aspect: float = 16.0 / 9.0

    # Padding around the edge of the layout area, in pixels
    outer_padding: int = 6

    # Padding between views, in pixels
    view_padding: int = 6

    def __post_init__(self):
        self.target_aspect = parse_aspect(self.target_aspect)


def _env_flag(name: str, env: Optional[Dict[str, str]] = None) -> bool:
    env = os.environ if env is None else env
    return env.get(name, "").strip().lower() not in ("", "0", "false", "no")


def _env_number(env: Dict[str, str], name: str, kind):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None


@dataclass
class LayoutsConfig:
    """Top-level configuration holding every layout's settings."""

    carousel: CarouselConfig = field(default_factory=CarouselConfig)
    uniform_grid: UniformGridConfig = field(default_factory=UniformGridConfig)

    # Print generated rectangles and all bus events
    debug: bool = field(default_factory=lambda: _env_flag("RLAYOUT_DEBUG"))

    def for_namespace(self, namespace: str):
        """Get the engine configuration for a layout namespace."""
        if namespace == "carousel":
            return self.carousel
        if namespace == "uniform-grid":
            return self.uniform_grid
        raise ValueError(f"Unknown layout: {namespace}")

    @classmethod
    def from_env(cls, env: Optional[Dict[str, str]] = None) -> "LayoutsConfig":
        """
        Build a configuration from RLAYOUT_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if env is None else env
        config = cls(debug=_env_flag("RLAYOUT_DEBUG", env))

        outer_padding = _env_number(env, "RLAYOUT_OUTER_PADDING", int)
        view_padding = _env_number(env, "RLAYOUT_VIEW_PADDING", int)
        for engine_config in (config.carousel, config.uniform_grid):
            if outer_padding is not None:
                engine_config.outer_padding = outer_padding
            if view_padding is not None:
                engine_config.view_padding = view_padding

        if env.get("RLAYOUT_MAIN_LOCATION"):
            config.carousel.main_location = Edge.parse(env["RLAYOUT_MAIN_LOCATION"])

        main_ratio = _env_number(env, "RLAYOUT_MAIN_RATIO", float)
        if main_ratio is not None:
            config.carousel.main_ratio = main_ratio

        secondary_size = _env_number(env, "RLAYOUT_SECONDARY_WINDOW_SIZE", float)
        if secondary_size is not None:
            config.carousel.secondary_window_size = secondary_size

        if env.get("RLAYOUT_TARGET_ASPECT"):
            config.uniform_grid.target_aspect = parse_aspect(
                env["RLAYOUT_TARGET_ASPECT"]
            )

        return config
