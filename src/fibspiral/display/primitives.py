from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Sequence

import pygame

from fibspiral.display.color import Color
from fibspiral.geometry.vector import Vector2


class PrimitiveKind(StrEnum):
    FILLED_POLYGON = "filled_polygon"
    STROKED_POLYGON = "stroked_polygon"
    STROKED_POLYLINE = "stroked_polyline"


@dataclass(frozen=True)
class DrawPrimitive:
    kind: PrimitiveKind
    points: tuple[Vector2, ...]
    color: Color
    width: int = 0

    @classmethod
    def filled_polygon(cls, points: Sequence[Vector2], color: Color) -> DrawPrimitive:
        return cls(PrimitiveKind.FILLED_POLYGON, tuple(points), color, 0)

    @classmethod
    def stroked_polygon(
        cls, points: Sequence[Vector2], color: Color, width: int
    ) -> DrawPrimitive:
        return cls(PrimitiveKind.STROKED_POLYGON, tuple(points), color, width)

    @classmethod
    def stroked_polyline(
        cls, points: Sequence[Vector2], color: Color, width: int
    ) -> DrawPrimitive:
        return cls(PrimitiveKind.STROKED_POLYLINE, tuple(points), color, width)

    @property
    def is_drawable(self) -> bool:
        if self.kind is PrimitiveKind.STROKED_POLYLINE:
            return len(self.points) >= 2 and self.width > 0
        if self.kind is PrimitiveKind.STROKED_POLYGON:
            return len(self.points) >= 3 and self.width > 0
        return len(self.points) >= 3

    def translated(self, offset: Vector2) -> DrawPrimitive:
        return DrawPrimitive(
            self.kind,
            tuple(point + offset for point in self.points),
            self.color,
            self.width,
        )


def translate(
    primitives: Iterable[DrawPrimitive], offset: Vector2
) -> list[DrawPrimitive]:
    return [primitive.translated(offset) for primitive in primitives]


def draw_primitive(surface: pygame.Surface, primitive: DrawPrimitive) -> None:
    """Rasterize a single primitive with ``pygame.draw``."""

    if not primitive.is_drawable:
        return

    points = [point.to_tuple() for point in primitive.points]
    color = primitive.color.tuple()
    match primitive.kind:
        case PrimitiveKind.FILLED_POLYGON:
            pygame.draw.polygon(surface, color, points)
        case PrimitiveKind.STROKED_POLYGON:
            pygame.draw.polygon(surface, color, points, primitive.width)
        case PrimitiveKind.STROKED_POLYLINE:
            pygame.draw.lines(surface, color, False, points, primitive.width)
