"""Zooming/Rotating animation state machine.

Both mode parameters live on the same frozen :class:`SpiralAnimationState`, so
swapping modes never resets the inactive one. Every transition is a pure
function of the previous state; :class:`AnimationController` owns the current
snapshot and applies them.
"""

from __future__ import annotations

from dataclasses import replace
from enum import StrEnum

from fibspiral.renderers.spiral.state import (FULL_TURN, INITIAL_SCALE,
                                              ROTATION_STEP, ZOOM_FACTOR,
                                              ZOOM_WRAP_THRESHOLD,
                                              AnimationMode,
                                              SpiralAnimationState)
from fibspiral.runtime.controls import ControlAction
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)


class AnimationCommand(StrEnum):
    ADVANCE = "advance"
    SWAP_MODE = "swap_mode"
    TOGGLE_PAUSE = "toggle_pause"


_ACTION_COMMANDS = {
    ControlAction.SWAP_MODE: AnimationCommand.SWAP_MODE,
    ControlAction.TOGGLE_PAUSE: AnimationCommand.TOGGLE_PAUSE,
}


def command_for_action(action: ControlAction) -> AnimationCommand | None:
    """Map a control action to the command the core handles, if any."""

    return _ACTION_COMMANDS.get(action)


def _advance_zoom(state: SpiralAnimationState) -> SpiralAnimationState:
    scale = state.scale * ZOOM_FACTOR
    if scale >= ZOOM_WRAP_THRESHOLD:
        logger.debug("Zoom wrapped at scale %.6f", scale)
        scale = state.initial_scale
    return replace(state, scale=scale)


def _advance_rotation(state: SpiralAnimationState) -> SpiralAnimationState:
    theta_delta = state.theta_delta + ROTATION_STEP
    if theta_delta >= FULL_TURN:
        logger.debug("Rotation wrapped at theta_delta %.6f", theta_delta)
        theta_delta = 0.0
    return replace(state, theta_delta=theta_delta)


def advance_state(state: SpiralAnimationState) -> SpiralAnimationState:
    if state.paused:
        return state

    match state.mode:
        case AnimationMode.ZOOMING:
            return _advance_zoom(state)
        case AnimationMode.ROTATING:
            return _advance_rotation(state)


def swap_mode(state: SpiralAnimationState) -> SpiralAnimationState:
    return replace(state, mode=state.mode.other())


def toggle_pause(state: SpiralAnimationState) -> SpiralAnimationState:
    return replace(state, paused=not state.paused)


_TRANSITIONS = {
    AnimationCommand.ADVANCE: advance_state,
    AnimationCommand.SWAP_MODE: swap_mode,
    AnimationCommand.TOGGLE_PAUSE: toggle_pause,
}


class AnimationController:
    def __init__(self, initial_scale: float = INITIAL_SCALE) -> None:
        if initial_scale <= 0:
            raise ValueError(f"initial_scale must be positive. Found {initial_scale}")
        if initial_scale >= ZOOM_WRAP_THRESHOLD:
            raise ValueError(
                f"initial_scale must be below the zoom wrap threshold "
                f"{ZOOM_WRAP_THRESHOLD}. Found {initial_scale}"
            )
        self._state = SpiralAnimationState(
            scale=initial_scale, initial_scale=initial_scale
        )

    @property
    def state(self) -> SpiralAnimationState:
        return self._state

    @property
    def mode(self) -> AnimationMode:
        return self._state.mode

    @property
    def paused(self) -> bool:
        return self._state.paused

    def apply(self, command: AnimationCommand) -> SpiralAnimationState:
        self._state = _TRANSITIONS[command](self._state)
        return self._state

    def advance(self) -> SpiralAnimationState:
        return self.apply(AnimationCommand.ADVANCE)

    def swap_mode(self) -> SpiralAnimationState:
        state = self.apply(AnimationCommand.SWAP_MODE)
        logger.info("Switched animation mode to %s", state.mode.value)
        return state

    def toggle_pause(self) -> SpiralAnimationState:
        state = self.apply(AnimationCommand.TOGGLE_PAUSE)
        logger.info("Animation %s", "paused" if state.paused else "resumed")
        return state

    def handle(self, action: ControlAction) -> SpiralAnimationState:
        """Apply a control action; actions owned by the host (quit) are ignored."""

        match command_for_action(action):
            case AnimationCommand.SWAP_MODE:
                return self.swap_mode()
            case AnimationCommand.TOGGLE_PAUSE:
                return self.toggle_pause()
            case _:
                return self._state
