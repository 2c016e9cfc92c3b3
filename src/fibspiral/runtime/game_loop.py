from __future__ import annotations

import pygame

from fibspiral.renderers.base import StatefulBaseRenderer
from fibspiral.runtime.display_context import DisplayContext
from fibspiral.runtime.event_handler import PygameEventHandler
from fibspiral.runtime.signals import RuntimeSignals
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)


class GameLoop:
    """Single-threaded frame loop: events, one tick, draw, present."""

    def __init__(
        self,
        display: DisplayContext,
        event_handler: PygameEventHandler,
        signals: RuntimeSignals,
        renderer: StatefulBaseRenderer,
    ) -> None:
        self.display = display
        self.event_handler = event_handler
        self.signals = signals
        self.renderer = renderer
        self.running = False
        self.frame = 0

    def _initialize(self) -> None:
        self.display.initialize()
        self.display.ensure_initialized()
        logger.info("Initializing renderer %s", self.renderer.name)
        self.renderer.initialize(window=self.display.screen, clock=self.display.clock)

    def one_loop(self) -> None:
        self.running = self.event_handler.handle_events()
        if not self.running:
            return

        self.signals.game_tick.on_next(self.frame)
        self.renderer.process(window=self.display.screen, clock=self.display.clock)
        self.display.present()
        self.display.tick()
        self.frame += 1

    def start(self, frames: int | None = None) -> None:
        """Run until quit, or for ``frames`` frames when given."""

        logger.info("Starting GameLoop")
        self._initialize()
        self.running = True
        try:
            while self.running:
                if frames is not None and self.frame >= frames:
                    break
                self.one_loop()
        finally:
            logger.info("Shutting down GameLoop after %d frames", self.frame)
            self.renderer.reset()
            pygame.quit()
