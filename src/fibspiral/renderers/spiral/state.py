import math
from dataclasses import dataclass
from enum import StrEnum

INITIAL_SCALE = 0.01
ZOOM_FACTOR = 1.05
# Empirical wrap point; the zoom looks seamless with exactly this value.
ZOOM_WRAP_THRESHOLD = 3.322971
ROTATION_STEP = 0.01
FULL_TURN = 2 * math.pi


class AnimationMode(StrEnum):
    ZOOMING = "zooming"
    ROTATING = "rotating"

    def other(self) -> "AnimationMode":
        if self is AnimationMode.ZOOMING:
            return AnimationMode.ROTATING
        return AnimationMode.ZOOMING


@dataclass(frozen=True)
class SpiralAnimationState:
    mode: AnimationMode = AnimationMode.ZOOMING
    scale: float = INITIAL_SCALE
    theta_delta: float = 0.0
    paused: bool = False
    initial_scale: float = INITIAL_SCALE

    @property
    def parameter(self) -> float:
        """The value driving the active mode."""

        if self.mode is AnimationMode.ZOOMING:
            return self.scale
        return self.theta_delta
