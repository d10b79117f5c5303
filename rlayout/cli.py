"""
Command-line layout driver.

Generates one layout and prints a line of `x y width height` per view, the
way river's executable contrib layouts do. User commands given with
--command are applied first, in order.

Usage:
    rlayout carousel 3 1206 768 --command "scroll 1"
    rlayout uniform-grid 5 1920 1080 --name
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .config import LayoutsConfig, parse_aspect
from .layouts import LAYOUTS, LayoutError
from .manager import LayoutManager
from .protocol import Edge


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rlayout",
        description="Generate window layouts for the river compositor.",
    )
    p.add_argument("layout", choices=sorted(LAYOUTS), help="Layout namespace")
    p.add_argument("views", type=int, help="Number of views to place")
    p.add_argument("width", type=int, help="Usable output width")
    p.add_argument("height", type=int, help="Usable output height")
    p.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="CMD",
        help="User command to apply before generating (repeatable)",
    )
    p.add_argument("--output", default="rlayout", help="Output name")
    p.add_argument("--tags", type=int, default=0, help="Focused tags bitmask")
    p.add_argument(
        "--name", action="store_true", help="Print the layout name first"
    )

    geometry = p.add_argument_group("geometry")
    geometry.add_argument("--outer-padding", type=int)
    geometry.add_argument("--view-padding", type=int)

    carousel = p.add_argument_group("carousel")
    carousel.add_argument(
        "--main-location", type=Edge.parse, metavar="{left,right,top,bottom}"
    )
    carousel.add_argument("--main-ratio", type=float)
    carousel.add_argument("--secondary-window-size", type=float)

    grid = p.add_argument_group("uniform-grid")
    grid.add_argument("--target-aspect", type=parse_aspect, metavar="W:H")
    return p


def config_from_args(args: argparse.Namespace) -> LayoutsConfig:
    """Apply command-line overrides on top of the environment config."""
    config = LayoutsConfig.from_env()

    for engine_config in (config.carousel, config.uniform_grid):
        if args.outer_padding is not None:
            engine_config.outer_padding = args.outer_padding
        if args.view_padding is not None:
            engine_config.view_padding = args.view_padding

    if args.main_location is not None:
        config.carousel.main_location = args.main_location
    if args.main_ratio is not None:
        config.carousel.main_ratio = args.main_ratio
    if args.secondary_window_size is not None:
        config.carousel.secondary_window_size = args.secondary_window_size
    if args.target_aspect is not None:
        config.uniform_grid.target_aspect = args.target_aspect
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.views < 0 or args.width < 0 or args.height < 0:
        parser.error("views, width and height must not be negative")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    manager = LayoutManager(args.layout, config)
    for command in args.command:
        if not manager.user_command(args.output, command, args.tags):
            print(f"rlayout: command failed: {command}", file=sys.stderr)
            return 1

    try:
        result = manager.layout_demand(
            args.output, args.views, args.width, args.height, args.tags
        )
    except LayoutError as e:
        print(f"rlayout: {e}", file=sys.stderr)
        return 1

    if args.name:
        print(result.layout_name)
    for view in result.views:
        print(view.x, view.y, view.width, view.height)
    return 0


if __name__ == "__main__":
    sys.exit(main())
