"""
Unit tests for the carousel layout.
"""

from itertools import islice

import pytest
from rlayout.layouts import (
    CarouselLayout,
    DegenerateArea,
    InvalidArgument,
    LayoutError,
    MissingArgument,
    UnknownCommand,
)
from rlayout.protocol import INT32_MAX, Edge, Rectangle


def rects(result):
    return [view.as_tuple() for view in result.views]


@pytest.mark.unit
class TestCarouselGeometry:
    """Test carousel placement for each main location."""

    def test_default_left_three_views(self, carousel_area):
        """Main on the left at 60%, two secondaries stacked on the right."""
        layout = CarouselLayout()

        result = layout.generate_layout(3, *carousel_area)

        assert result.layout_name == "carousel"
        assert rects(result) == [
            (6, 6, 712, 756),
            (724, 6, 476, 375),
            (724, 387, 476, 375),
        ]

    def test_right_main(self, carousel_config, carousel_area):
        layout = CarouselLayout(carousel_config(main_location=Edge.RIGHT))

        result = layout.generate_layout(3, *carousel_area)

        assert rects(result) == [
            (488, 6, 712, 756),
            (6, 6, 476, 375),
            (6, 387, 476, 375),
        ]

    def test_top_main(self, carousel_config, carousel_area):
        layout = CarouselLayout(carousel_config(main_location="top"))

        result = layout.generate_layout(3, *carousel_area)

        # Split is vertical: int(750 * 0.6) = 450 for main, 300 for the strip
        assert rects(result) == [
            (6, 6, 1194, 450),
            (6, 462, 594, 300),
            (606, 462, 594, 300),
        ]

    def test_bottom_main(self, carousel_config, carousel_area):
        layout = CarouselLayout(carousel_config(main_location=Edge.BOTTOM))

        result = layout.generate_layout(3, *carousel_area)

        assert rects(result) == [
            (6, 312, 1194, 450),
            (6, 6, 594, 300),
            (606, 6, 594, 300),
        ]

    def test_half_size_secondaries_fill_strip(self, carousel_area):
        layout = CarouselLayout()
        base = layout.secondary_base(*carousel_area)
        # Padded height is 756
        assert 2 * base.height + 6 == 756

    def test_view_count_always_matches(self, carousel_area):
        layout = CarouselLayout()
        for view_count in range(0, 12):
            result = layout.generate_layout(view_count, *carousel_area)
            assert len(result.views) == view_count

    def test_offscreen_views_still_emitted(self, carousel_area):
        layout = CarouselLayout()

        result = layout.generate_layout(6, *carousel_area)

        # Only two secondaries fit; the rest continue past the bottom edge
        assert [view.y for view in result.views[1:]] == [6, 387, 768, 1149, 1530]

    def test_main_independent_of_view_count_and_scroll(self, carousel_area):
        layout = CarouselLayout()
        main = layout.generate_layout(1, *carousel_area).views[0]

        assert layout.generate_layout(7, *carousel_area).views[0] == main
        layout.user_cmd("scroll 2.5")
        assert layout.generate_layout(7, *carousel_area).views[0] == main

    def test_tags_and_output_ignored(self, carousel_area):
        layout = CarouselLayout()
        assert layout.generate_layout(3, *carousel_area) == layout.generate_layout(
            3, *carousel_area, tags=0b101, output="DP-1"
        )

    def test_ratio_split_keeps_whole_pixels(self, carousel_config):
        """90 * 0.7 is exactly 63, even though 0.7 is not exact in binary."""
        layout = CarouselLayout(carousel_config(main_ratio=0.7))

        result = layout.generate_layout(2, 108, 768)

        # Padded width 96, minus one gutter is 90
        assert result.views[0].width == 63
        assert result.views[1].x == 6 + 63 + 6
        assert result.views[1].width == 27

    @pytest.mark.parametrize(
        "width, main_width", [(108, 63), (188, 119), (198, 126), (348, 231)]
    )
    def test_ratio_split_widths(self, carousel_config, width, main_width):
        layout = CarouselLayout(carousel_config(main_ratio=0.7))
        assert layout.main_view(width, 768).width == main_width

    def test_secondary_size_keeps_whole_pixels(self, carousel_config):
        layout = CarouselLayout(carousel_config(secondary_window_size=0.7))

        base = layout.secondary_base(1206, 96)

        # (84 + 6) * 0.7 == 63, minus the gutter
        assert base.height == 57

    def test_degenerate_area_raises(self):
        layout = CarouselLayout()
        with pytest.raises(DegenerateArea):
            layout.generate_layout(2, 10, 10)


@pytest.mark.unit
class TestCarouselScrolling:
    """Test the scroll offset and its effect on secondary views."""

    def test_scroll_by_one_shifts_one_stride(self, carousel_area):
        layout = CarouselLayout()
        before = layout.generate_layout(4, *carousel_area)

        layout.user_cmd("scroll 1")
        after = layout.generate_layout(4, *carousel_area)

        stride = layout.stride(*carousel_area)
        assert stride == (0, 381)
        for old, new in zip(before.views[1:], after.views[1:]):
            assert new.x == old.x
            assert new.y == old.y - 381

    def test_horizontal_scroll(self, carousel_config, carousel_area):
        layout = CarouselLayout(carousel_config(main_location=Edge.TOP))

        layout.user_cmd("scroll -1")
        result = layout.generate_layout(2, *carousel_area)

        assert result.views[1] == Rectangle(606, 462, 594, 300)

    def test_fractional_scroll_truncates(self, carousel_area):
        layout = CarouselLayout()

        layout.user_cmd("scroll 0.5")
        result = layout.generate_layout(2, *carousel_area)

        # int(381 * 0.5) == 190
        assert result.views[1].y == 6 - 190

    def test_scroll_round_trip(self, carousel_area):
        layout = CarouselLayout()
        original = layout.generate_layout(5, *carousel_area)

        layout.user_cmd("scroll 3")
        layout.user_cmd("scroll -3")

        assert layout.config.scroll_offset == 0.0
        assert layout.generate_layout(5, *carousel_area) == original

    def test_scroll_accumulates_unbounded(self):
        layout = CarouselLayout()
        for _ in range(1000):
            layout.user_cmd("scroll 1")
        assert layout.config.scroll_offset == 1000.0

    def test_extra_tokens_ignored(self):
        layout = CarouselLayout()
        layout.user_cmd("  scroll   2 extra")
        assert layout.config.scroll_offset == 2.0

    def test_fractional_scroll_keeps_whole_pixels(self):
        layout = CarouselLayout()
        # Padded height 174: cells of 84 with a stride of 90
        assert layout.stride(1206, 186) == (0, 90)

        layout.user_cmd("scroll 0.7")
        result = layout.generate_layout(2, 1206, 186)

        # 90 * 0.7 == 63
        assert result.views[1].y == 6 - 63

    def test_huge_scroll_saturates(self, carousel_config, carousel_area):
        layout = CarouselLayout(carousel_config(scroll_offset=-1e12))

        result = layout.generate_layout(2, *carousel_area)

        assert result.views[1].y == INT32_MAX
        assert result.views[1].x == 724

    def test_secondary_views_is_lazy_and_unbounded(self, carousel_area):
        layout = CarouselLayout()
        views = layout.secondary_views(*carousel_area)

        first = next(views)
        tenth = list(islice(views, 8, 9))[0]

        assert first.y == 6
        assert tenth.y == 6 + 9 * 381


@pytest.mark.unit
class TestCarouselCommands:
    """Test command errors."""

    def test_missing_amount(self):
        layout = CarouselLayout()
        with pytest.raises(MissingArgument) as exc:
            layout.user_cmd("scroll")
        assert exc.value.name == "amount"
        assert str(exc.value) == "missing argument: 'amount'"

    def test_invalid_amount(self):
        layout = CarouselLayout()
        with pytest.raises(InvalidArgument) as exc:
            layout.user_cmd("scroll abc")
        assert str(exc.value) == "invalid value for argument 'amount'"

    @pytest.mark.parametrize("amount", ["nan", "inf", "-inf"])
    def test_non_finite_amount_rejected(self, amount):
        layout = CarouselLayout()
        with pytest.raises(InvalidArgument):
            layout.user_cmd(f"scroll {amount}")
        assert layout.config.scroll_offset == 0.0

    def test_unknown_command(self, capsys):
        layout = CarouselLayout()
        with pytest.raises(UnknownCommand) as exc:
            layout.user_cmd("frobnicate 3")
        assert exc.value.command == "frobnicate"
        assert str(exc.value) == "unknown command: 'frobnicate'"
        # Errors are printed before being re-raised
        assert "unknown command" in capsys.readouterr().out

    def test_empty_command(self):
        layout = CarouselLayout()
        with pytest.raises(UnknownCommand) as exc:
            layout.user_cmd("   ")
        assert exc.value.command == ""

    def test_failed_command_leaves_config_unchanged(self, carousel_area):
        layout = CarouselLayout()
        layout.user_cmd("scroll 1")
        before = layout.generate_layout(3, *carousel_area)

        for command in ("scroll", "scroll x", "zoom 2"):
            with pytest.raises(LayoutError):
                layout.user_cmd(command)

        assert layout.config.scroll_offset == 1.0
        assert layout.generate_layout(3, *carousel_area) == before

    def test_debug_prints_rectangles(self, carousel_area, capsys):
        layout = CarouselLayout(debug=True)
        layout.generate_layout(2, *carousel_area)
        out = capsys.readouterr().out
        assert out.count("Rectangle(") == 2
