"""
Carousel Layout

One main view anchored to an output edge, with the remaining views in a
scrollable strip of uniformly sized secondary views.
"""

from __future__ import annotations
import math
from itertools import chain, count, islice
from typing import Iterator, List, Optional, Tuple

from .geometry import padded_size, size_from_fraction, split
from .layout_base import (
    Layout,
    InvalidArgument,
    MissingArgument,
    UnknownCommand,
    check_views,
)
from ..config import CarouselConfig
from ..protocol import (
    Edge,
    GeneratedLayout,
    Rectangle,
    f32_mul,
    saturating_add,
    saturating_mul,
    saturating_sub,
    truncate_i32,
)


class CarouselLayout(Layout):
    """
    Carousel layout.

    The main view always comes first. Secondary views follow in an
    unbounded strip perpendicular to the main/secondary split; the strip is
    shifted by `scroll_offset` secondary windows.
    """

    NAMESPACE = "carousel"

    def __init__(self, config: Optional[CarouselConfig] = None, debug: bool = False):
        super().__init__(debug=debug)
        self.config = config or CarouselConfig()

    def handle_command(self, verb, args, tags, output):
        if verb == "scroll":
            self.scroll(_parse_amount(args))
        else:
            raise UnknownCommand(verb)

    def scroll(self, amount: float):
        """Shift the secondary strip forward by `amount` windows."""
        self.config.scroll_offset += amount

    def main_view(self, usable_width: int, usable_height: int) -> Rectangle:
        """Rectangle of the main view, flush against the configured edge."""
        cfg = self.config
        padded_width, padded_height = padded_size(
            usable_width, usable_height, cfg.outer_padding
        )
        main_width, _ = split(padded_width, cfg.main_ratio, cfg.view_padding)
        main_height, _ = split(padded_height, cfg.main_ratio, cfg.view_padding)

        if cfg.main_location == Edge.LEFT:
            return Rectangle(
                cfg.outer_padding, cfg.outer_padding, main_width, padded_height
            )
        if cfg.main_location == Edge.TOP:
            return Rectangle(
                cfg.outer_padding, cfg.outer_padding, padded_width, main_height
            )
        if cfg.main_location == Edge.RIGHT:
            return Rectangle(
                usable_width - cfg.outer_padding - main_width,
                cfg.outer_padding,
                main_width,
                padded_height,
            )
        return Rectangle(
            cfg.outer_padding,
            usable_height - cfg.outer_padding - main_height,
            padded_width,
            main_height,
        )

    def secondary_base(self, usable_width: int, usable_height: int) -> Rectangle:
        """Rectangle of the first secondary view before scrolling."""
        cfg = self.config
        padded_width, padded_height = padded_size(
            usable_width, usable_height, cfg.outer_padding
        )

        if cfg.main_location.splits_width:
            main_width, secondary_width = split(
                padded_width, cfg.main_ratio, cfg.view_padding
            )
            height = size_from_fraction(
                padded_height, cfg.secondary_window_size, cfg.view_padding
            )
            x = cfg.outer_padding
            if cfg.main_location == Edge.LEFT:
                x += main_width + cfg.view_padding
            return Rectangle(x, cfg.outer_padding, secondary_width, height)

        main_height, secondary_height = split(
            padded_height, cfg.main_ratio, cfg.view_padding
        )
        width = size_from_fraction(
            padded_width, cfg.secondary_window_size, cfg.view_padding
        )
        y = cfg.outer_padding
        if cfg.main_location == Edge.TOP:
            y += main_height + cfg.view_padding
        return Rectangle(cfg.outer_padding, y, width, secondary_height)

    def stride(self, usable_width: int, usable_height: int) -> Tuple[int, int]:
        """Distance between consecutive secondary views, as (x, y)."""
        base = self.secondary_base(usable_width, usable_height)
        if self.config.main_location.splits_width:
            return 0, base.height + self.config.view_padding
        return base.width + self.config.view_padding, 0

    def secondary_views(
        self, usable_width: int, usable_height: int
    ) -> Iterator[Rectangle]:
        """
        Infinite iterator over the secondary views, scroll applied.

        Position math saturates at the 32-bit bounds.
        """
        base = self.secondary_base(usable_width, usable_height)
        stride_x, stride_y = self.stride(usable_width, usable_height)
        scroll_x = truncate_i32(f32_mul(stride_x, self.config.scroll_offset))
        scroll_y = truncate_i32(f32_mul(stride_y, self.config.scroll_offset))

        for i in count():
            yield Rectangle(
                saturating_sub(
                    saturating_add(base.x, saturating_mul(stride_x, i)), scroll_x
                ),
                saturating_sub(
                    saturating_add(base.y, saturating_mul(stride_y, i)), scroll_y
                ),
                base.width,
                base.height,
            )

    def generate_layout(
        self,
        view_count: int,
        usable_width: int,
        usable_height: int,
        tags: int = 0,
        output: str = "",
    ) -> GeneratedLayout:
        main = self.main_view(usable_width, usable_height)
        check_views([main, self.secondary_base(usable_width, usable_height)])

        views: List[Rectangle] = list(
            islice(
                chain([main], self.secondary_views(usable_width, usable_height)),
                view_count,
            )
        )
        self._debug_views(views)

        return GeneratedLayout(layout_name=self.NAMESPACE, views=views)


def _parse_amount(args: List[str]) -> float:
    if not args:
        raise MissingArgument("amount")
    try:
        amount = float(args[0])
    except ValueError:
        raise InvalidArgument("amount") from None
    # A non-finite offset has no pixel shift
    if not math.isfinite(amount):
        raise InvalidArgument("amount")
    return amount
