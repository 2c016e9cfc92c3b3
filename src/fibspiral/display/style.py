from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fibspiral.display.color import Color

DEFAULT_PALETTE: tuple[Color, ...] = (
    Color(100, 200, 100),
    Color.from_hex("#4f9dde"),
    Color.from_hex("#e8b04a"),
    Color.from_hex("#d65a7a"),
    Color.from_hex("#8a6fd1"),
)
DEFAULT_STROKE_COLOR = Color(100, 100, 100)
DEFAULT_STROKE_WIDTH = 5


@dataclass(frozen=True)
class StyleTable:
    """Fill colour per square index plus a single stroke style."""

    palette: tuple[Color, ...] = DEFAULT_PALETTE
    stroke_color: Color = DEFAULT_STROKE_COLOR
    stroke_width: int = DEFAULT_STROKE_WIDTH

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("StyleTable requires at least one palette color")
        if self.stroke_width < 0:
            raise ValueError(
                f"stroke_width must not be negative. Found {self.stroke_width}"
            )

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[Color | str],
        *,
        stroke_color: Color = DEFAULT_STROKE_COLOR,
        stroke_width: int = DEFAULT_STROKE_WIDTH,
    ) -> StyleTable:
        palette = tuple(
            Color.from_hex(color) if isinstance(color, str) else color
            for color in colors
        )
        return cls(palette=palette, stroke_color=stroke_color, stroke_width=stroke_width)

    def color_for(self, index: int) -> Color:
        return self.palette[index % len(self.palette)]


DEFAULT_STYLE = StyleTable()
