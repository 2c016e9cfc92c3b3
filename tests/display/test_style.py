import pytest
from hypothesis import given
from hypothesis import strategies as st

from fibspiral.display.color import Color
from fibspiral.display.style import (DEFAULT_PALETTE, DEFAULT_STROKE_COLOR,
                                     DEFAULT_STROKE_WIDTH, DEFAULT_STYLE,
                                     StyleTable)


class TestStyleTable:
    """Palette lookups cycle so any number of squares can be coloured."""

    @given(index=st.integers(min_value=0, max_value=100_000))
    def test_color_cycles_with_palette_length(self, index: int) -> None:
        style = DEFAULT_STYLE

        assert style.color_for(index) == style.color_for(index + len(style.palette))

    def test_color_for_walks_palette_in_order(self) -> None:
        style = StyleTable.from_colors(["#ff0000", "#00ff00", Color(0, 0, 255)])

        assert [style.color_for(i) for i in range(5)] == [
            Color(255, 0, 0),
            Color(0, 255, 0),
            Color(0, 0, 255),
            Color(255, 0, 0),
            Color(0, 255, 0),
        ]

    def test_single_color_palette(self) -> None:
        style = StyleTable(palette=(Color(1, 2, 3),))

        assert {style.color_for(i) for i in range(10)} == {Color(1, 2, 3)}

    def test_defaults_match_classic_look(self) -> None:
        assert DEFAULT_STYLE.palette == DEFAULT_PALETTE
        assert DEFAULT_PALETTE[0] == Color(100, 200, 100)
        assert DEFAULT_STYLE.stroke_color == DEFAULT_STROKE_COLOR == Color(100, 100, 100)
        assert DEFAULT_STYLE.stroke_width == DEFAULT_STROKE_WIDTH == 5

    def test_empty_palette_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one palette color"):
            StyleTable(palette=())

    def test_negative_stroke_width_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="stroke_width"):
            StyleTable(stroke_width=-1)


class TestColor:
    def test_from_hex(self) -> None:
        assert Color.from_hex("#4f9dde") == Color(0x4F, 0x9D, 0xDE)
        assert Color.from_hex("4f9dde").tuple() == (0x4F, 0x9D, 0xDE)

    @pytest.mark.parametrize("value", ["#fff", "#12345678", ""])
    def test_from_hex_rejects_bad_length(self, value: str) -> None:
        with pytest.raises(ValueError, match="rrggbb"):
            Color.from_hex(value)

    @pytest.mark.parametrize("components", [(-1, 0, 0), (0, 256, 0), (0, 0, 999)])
    def test_out_of_range_components_are_rejected(self, components) -> None:
        with pytest.raises(ValueError, match="between 0 and 255"):
            Color(*components)

    def test_behaves_like_rgb_tuple(self) -> None:
        color = Color(10, 20, 30)

        assert list(color) == [10, 20, 30]
        assert color[1] == 20
