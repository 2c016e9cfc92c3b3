import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np


@dataclass(slots=True, frozen=True)
class Vector2:
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def from_value(cls, value: "Vector2 | Sequence[float] | np.ndarray") -> "Vector2":
        """Build a vector from a 2-tuple, a 2-element list/array or another vector."""

        if isinstance(value, Vector2):
            return value
        components = np.asarray(value, dtype=np.float64).reshape(-1)
        if components.shape != (2,):
            raise ValueError(
                f"Expected exactly two components for a Vector2. Found {value!r}"
            )
        return cls(float(components[0]), float(components[1]))

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __getitem__(self, index: int) -> float:
        return self.to_tuple()[index]

    def __len__(self) -> int:
        return 2

    def __add__(self, other: "Vector2 | Sequence[float] | np.ndarray") -> "Vector2":
        other = Vector2.from_value(other)
        return Vector2(self.x + other.x, self.y + other.y)

    __radd__ = __add__

    def __sub__(self, other: "Vector2 | Sequence[float] | np.ndarray") -> "Vector2":
        other = Vector2.from_value(other)
        return Vector2(self.x - other.x, self.y - other.y)

    def __rsub__(self, other: "Vector2 | Sequence[float] | np.ndarray") -> "Vector2":
        return Vector2.from_value(other) - self

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def rotate(self, theta: float) -> "Vector2":
        """Rotate counter-clockwise (in a y-up frame) by ``theta`` radians."""

        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Vector2(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        return Vector2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )

    def is_close(self, other: "Vector2", *, abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )


def add(a: Vector2, b: Vector2) -> Vector2:
    return a + b


def sub(a: Vector2, b: Vector2) -> Vector2:
    return a - b


def scale(v: Vector2, k: float) -> Vector2:
    return v * k
