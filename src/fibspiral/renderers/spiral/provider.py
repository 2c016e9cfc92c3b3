from __future__ import annotations

import reactivex
from reactivex import operators as ops

from fibspiral.renderers.spiral.controller import (AnimationCommand,
                                                   AnimationController,
                                                   command_for_action)
from fibspiral.renderers.spiral.state import SpiralAnimationState
from fibspiral.renderers.state_provider import ObservableProvider
from fibspiral.runtime.controls import ControlAction
from fibspiral.runtime.signals import RuntimeSignals


class SpiralStateProvider(ObservableProvider[SpiralAnimationState]):
    """Drive an :class:`AnimationController` from frame ticks and key actions.

    Each game tick advances the animation exactly once; control actions are
    applied as soon as they are emitted, between ticks.
    """

    def __init__(
        self,
        signals: RuntimeSignals,
        controller: AnimationController | None = None,
    ) -> None:
        self._signals = signals
        self._controller = controller or AnimationController()

    @property
    def controller(self) -> AnimationController:
        return self._controller

    def _apply_action(self, action: ControlAction) -> SpiralAnimationState:
        return self._controller.handle(action)

    def _apply_tick(self, _tick: object) -> SpiralAnimationState:
        return self._controller.apply(AnimationCommand.ADVANCE)

    def observable(self) -> reactivex.Observable[SpiralAnimationState]:
        ticks = self._signals.game_tick.pipe(
            ops.filter(lambda tick: tick is not None),
            ops.map(self._apply_tick),
        )
        controls = self._signals.controls.pipe(
            ops.filter(lambda action: command_for_action(action) is not None),
            ops.map(self._apply_action),
        )
        return reactivex.merge(controls, ticks).pipe(
            ops.start_with(self._controller.state),
            ops.share(),
        )
