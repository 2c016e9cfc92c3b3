from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from fibspiral.geometry.rotation import SHRINK_RATIO
from fibspiral.renderers.spiral.state import ZOOM_WRAP_THRESHOLD
from fibspiral.utilities.env import Configuration
from fibspiral.utilities.env.spiral import (DEFAULT_CURVE_SAMPLES,
                                           DEFAULT_ITERATIONS,
                                           DEFAULT_ROTATING_COUNT,
                                           DEFAULT_ROTATING_SIDE,
                                           DEFAULT_STARTING_SIZE)


@dataclass(frozen=True)
class SpiralSettings:
    iterations: int = DEFAULT_ITERATIONS
    starting_size: float = DEFAULT_STARTING_SIZE
    curve_samples: int = DEFAULT_CURVE_SAMPLES
    rotating_side: float = DEFAULT_ROTATING_SIDE
    rotating_count: int = DEFAULT_ROTATING_COUNT
    rotating_ratio: float = SHRINK_RATIO

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1. Found {self.iterations}")
        if not 0 < self.starting_size < ZOOM_WRAP_THRESHOLD:
            raise ValueError(
                "starting_size must be positive and below "
                f"{ZOOM_WRAP_THRESHOLD}. Found {self.starting_size}"
            )
        if self.curve_samples < 1:
            raise ValueError(
                f"curve_samples must be at least 1. Found {self.curve_samples}"
            )
        if self.rotating_side <= 0:
            raise ValueError(
                f"rotating_side must be positive. Found {self.rotating_side}"
            )
        if self.rotating_count < 1:
            raise ValueError(
                f"rotating_count must be at least 1. Found {self.rotating_count}"
            )
        if not 0 < self.rotating_ratio < 1:
            raise ValueError(
                f"rotating_ratio must be between 0 and 1. Found {self.rotating_ratio}"
            )

    @classmethod
    def from_environment(cls, **overrides: Any) -> SpiralSettings:
        """Read settings from the environment; non-``None`` overrides win."""

        known = {field.name for field in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown spiral settings: {sorted(unknown)}")

        values: dict[str, Any] = {
            "iterations": Configuration.iterations(),
            "starting_size": Configuration.starting_size(),
            "curve_samples": Configuration.curve_samples(),
            "rotating_side": Configuration.rotating_side(),
            "rotating_count": Configuration.rotating_count(),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
