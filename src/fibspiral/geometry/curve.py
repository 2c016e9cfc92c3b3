from __future__ import annotations

import numpy as np

from fibspiral.geometry.spiral import CurveSpec
from fibspiral.geometry.vector import Vector2

DEFAULT_SAMPLES = 100


def _check_samples(n: int) -> None:
    if n < 1:
        raise ValueError(f"Curve sample count must be at least 1. Found {n}")


def quadratic_point(curve: CurveSpec, t: float) -> Vector2:
    return curve.p0.lerp(curve.p1, t).lerp(curve.p1.lerp(curve.p2, t), t)


def sample(curve: CurveSpec, n: int = DEFAULT_SAMPLES) -> list[Vector2]:
    """Return ``n + 1`` points along the quadratic Bezier through ``curve``."""

    _check_samples(n)
    return [quadratic_point(curve, k / n) for k in range(n + 1)]


def sample_array(curve: CurveSpec, n: int = DEFAULT_SAMPLES) -> np.ndarray:
    """Vectorised :func:`sample`; returns an ``(n + 1, 2)`` float array."""

    _check_samples(n)
    t = np.linspace(0.0, 1.0, n + 1)[:, np.newaxis]
    p0 = np.array(curve.p0.to_tuple())
    p1 = np.array(curve.p1.to_tuple())
    p2 = np.array(curve.p2.to_tuple())
    first = p0 + (p1 - p0) * t
    second = p1 + (p2 - p1) * t
    return first + (second - first) * t
