from __future__ import annotations

import math
from dataclasses import dataclass

from fibspiral.geometry.vector import Vector2

GOLDEN_RATIO = (1 + math.sqrt(5)) / 2
SHRINK_RATIO = 1 / GOLDEN_RATIO
DEFAULT_INITIAL_SIDE = 1000.0
DEFAULT_SQUARE_COUNT = 20


@dataclass(slots=True, frozen=True)
class RotatedSquare:
    origin: Vector2
    side: float
    theta: float

    def corners(self) -> tuple[Vector2, Vector2, Vector2, Vector2]:
        offsets = (
            Vector2(0.0, 0.0),
            Vector2(self.side, 0.0),
            Vector2(self.side, self.side),
            Vector2(0.0, self.side),
        )
        return tuple(self.origin + offset.rotate(self.theta) for offset in offsets)

    @property
    def far_corner(self) -> Vector2:
        return self.origin + Vector2(self.side, self.side).rotate(self.theta)


def build_rotating_squares(
    theta_delta: float,
    *,
    initial_side: float = DEFAULT_INITIAL_SIDE,
    count: int = DEFAULT_SQUARE_COUNT,
    ratio: float = SHRINK_RATIO,
) -> list[RotatedSquare]:
    """Chain ``count`` shrinking squares, each turned ``theta_delta`` further.

    Every square hangs off the far corner of the one before it, so the chain
    curls into a logarithmic spiral once ``theta_delta`` is non-zero.
    """

    if initial_side <= 0:
        raise ValueError(f"initial_side must be positive. Found {initial_side}")
    if count < 0:
        raise ValueError(f"count must not be negative. Found {count}")

    squares: list[RotatedSquare] = []
    cursor = Vector2.zero()
    side = float(initial_side)
    theta = 0.0
    for _ in range(count):
        square = RotatedSquare(origin=cursor, side=side, theta=theta)
        squares.append(square)
        cursor = square.far_corner
        side *= ratio
        theta += theta_delta
    return squares
