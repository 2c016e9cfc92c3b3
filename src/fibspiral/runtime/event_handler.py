from __future__ import annotations

import pygame

from fibspiral.runtime.controls import ControlAction, action_for_key
from fibspiral.runtime.signals import RuntimeSignals
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)


class PygameEventHandler:
    """Drain the pygame queue, forwarding bound keys as control actions."""

    def __init__(self, signals: RuntimeSignals) -> None:
        self._signals = signals

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                running = False
            elif event.type == pygame.KEYDOWN:
                running = self._handle_key(event.key) and running
        return running

    def _handle_key(self, key: int) -> bool:
        action = action_for_key(key)
        if action is None:
            return True
        if action is ControlAction.QUIT:
            logger.info("Quit requested from keyboard")
            return False
        logger.debug("Control action %s", action.value)
        self._signals.controls.on_next(action)
        return True
