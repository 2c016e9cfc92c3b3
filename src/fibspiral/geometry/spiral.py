"""Fibonacci tiling of squares with a quarter arc inscribed in each one.

Squares are laid out in screen coordinates (y grows downward). Each square's
placement relative to the previous one, and the corners its arc passes through,
depend only on ``index % 4``; :data:`ORIENTATION_PHASES` holds the four cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fibspiral.geometry.vector import Vector2
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Square:
    origin: Vector2
    side: float

    @property
    def top_left(self) -> Vector2:
        return self.origin

    @property
    def top_right(self) -> Vector2:
        return Vector2(self.origin.x + self.side, self.origin.y)

    @property
    def bottom_right(self) -> Vector2:
        return Vector2(self.origin.x + self.side, self.origin.y + self.side)

    @property
    def bottom_left(self) -> Vector2:
        return Vector2(self.origin.x, self.origin.y + self.side)

    def corners(self) -> tuple[Vector2, Vector2, Vector2, Vector2]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


@dataclass(slots=True, frozen=True)
class CurveSpec:
    p0: Vector2
    p1: Vector2
    p2: Vector2


@dataclass(slots=True, frozen=True)
class SpiralGeometry:
    squares: tuple[Square, ...]
    curves: tuple[CurveSpec, ...]

    def __len__(self) -> int:
        return len(self.squares)


@dataclass(slots=True, frozen=True)
class OrientationPhase:
    """One step of the four-phase orientation cycle.

    ``displacement`` maps ``(prev, curr)`` to the cursor move after the square
    is placed. ``arc`` maps the square to the arc's start, control and end
    corners.
    """

    name: str
    displacement: Callable[[float, float], Vector2]
    arc: Callable[[Square], CurveSpec]


ORIENTATION_PHASES: tuple[OrientationPhase, ...] = (
    OrientationPhase(
        name="right",
        displacement=lambda prev, curr: Vector2(curr, 0.0),
        arc=lambda sq: CurveSpec(sq.bottom_left, sq.top_left, sq.top_right),
    ),
    OrientationPhase(
        name="down",
        displacement=lambda prev, curr: Vector2(-prev, curr),
        arc=lambda sq: CurveSpec(sq.top_left, sq.top_right, sq.bottom_right),
    ),
    OrientationPhase(
        name="left",
        displacement=lambda prev, curr: Vector2(-curr - prev, -prev),
        arc=lambda sq: CurveSpec(sq.top_right, sq.bottom_right, sq.bottom_left),
    ),
    OrientationPhase(
        name="up",
        displacement=lambda prev, curr: Vector2(0.0, -curr - prev),
        arc=lambda sq: CurveSpec(sq.bottom_right, sq.bottom_left, sq.top_left),
    ),
)


def phase_for(index: int) -> OrientationPhase:
    return ORIENTATION_PHASES[index % len(ORIENTATION_PHASES)]


def fibonacci_sides(starting_size: float, iterations: int) -> list[float]:
    prev, curr = 0.0, starting_size
    sides: list[float] = []
    for _ in range(iterations):
        sides.append(curr)
        prev, curr = curr, prev + curr
    return sides


def build_spiral(starting_size: float, iterations: int) -> SpiralGeometry:
    """Place ``iterations`` squares starting from a side of ``starting_size``."""

    if starting_size <= 0:
        raise ValueError(f"starting_size must be positive. Found {starting_size}")
    if iterations < 0:
        raise ValueError(f"iterations must not be negative. Found {iterations}")

    squares: list[Square] = []
    curves: list[CurveSpec] = []
    prev, curr = 0.0, float(starting_size)
    pos = Vector2.zero()
    for index in range(iterations):
        square = Square(origin=pos, side=curr)
        phase = phase_for(index)
        squares.append(square)
        curves.append(phase.arc(square))

        pos = pos + phase.displacement(prev, curr)
        prev, curr = curr, prev + curr

    logger.debug(
        "spiral.build",
        extra={
            "starting_size": starting_size,
            "iterations": iterations,
            "largest_side": squares[-1].side if squares else 0.0,
        },
    )
    return SpiralGeometry(squares=tuple(squares), curves=tuple(curves))
