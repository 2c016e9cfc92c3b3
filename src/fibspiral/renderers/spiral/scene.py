from __future__ import annotations

from fibspiral.display.primitives import DrawPrimitive
from fibspiral.display.style import StyleTable
from fibspiral.geometry.curve import sample_array
from fibspiral.geometry.rotation import RotatedSquare, build_rotating_squares
from fibspiral.geometry.spiral import SpiralGeometry, build_spiral
from fibspiral.geometry.vector import Vector2
from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.renderers.spiral.state import AnimationMode, SpiralAnimationState


def zooming_primitives(
    geometry: SpiralGeometry, style: StyleTable, curve_samples: int
) -> list[DrawPrimitive]:
    primitives: list[DrawPrimitive] = []
    for index, square in enumerate(geometry.squares):
        corners = square.corners()
        primitives.append(DrawPrimitive.filled_polygon(corners, style.color_for(index)))
        primitives.append(
            DrawPrimitive.stroked_polygon(corners, style.stroke_color, style.stroke_width)
        )

    # Arcs go on top so neighbouring fills never cover them.
    for curve in geometry.curves:
        points = [Vector2(x, y) for x, y in sample_array(curve, curve_samples)]
        primitives.append(
            DrawPrimitive.stroked_polyline(points, style.stroke_color, style.stroke_width)
        )
    return primitives


def rotating_primitives(
    squares: list[RotatedSquare], style: StyleTable
) -> list[DrawPrimitive]:
    primitives: list[DrawPrimitive] = []
    for index, square in enumerate(squares):
        corners = square.corners()
        primitives.append(DrawPrimitive.filled_polygon(corners, style.color_for(index)))
        primitives.append(
            DrawPrimitive.stroked_polygon(corners, style.stroke_color, style.stroke_width)
        )
    return primitives


def build_frame_primitives(
    state: SpiralAnimationState, style: StyleTable, settings: SpiralSettings
) -> list[DrawPrimitive]:
    """Primitives for the active mode, in spiral space (figure origin at 0, 0)."""

    match state.mode:
        case AnimationMode.ZOOMING:
            geometry = build_spiral(state.scale, settings.iterations)
            return zooming_primitives(geometry, style, settings.curve_samples)
        case AnimationMode.ROTATING:
            squares = build_rotating_squares(
                state.theta_delta,
                initial_side=settings.rotating_side,
                count=settings.rotating_count,
                ratio=settings.rotating_ratio,
            )
            return rotating_primitives(squares, style)
