from __future__ import annotations

import pygame

from fibspiral.display.color import BLACK
from fibspiral.display.primitives import (DrawPrimitive, draw_primitive,
                                          translate)
from fibspiral.display.style import DEFAULT_STYLE, StyleTable
from fibspiral.geometry.vector import Vector2
from fibspiral.renderers.base import StatefulBaseRenderer
from fibspiral.renderers.spiral.provider import SpiralStateProvider
from fibspiral.renderers.spiral.scene import build_frame_primitives
from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.renderers.spiral.state import SpiralAnimationState


class FibonacciSpiralRenderer(StatefulBaseRenderer[SpiralAnimationState]):
    def __init__(
        self,
        provider: SpiralStateProvider | None = None,
        *,
        state: SpiralAnimationState | None = None,
        style: StyleTable = DEFAULT_STYLE,
        settings: SpiralSettings | None = None,
    ) -> None:
        self.provider = provider
        self.style = style
        self.settings = settings or SpiralSettings()
        self.background = BLACK
        super().__init__(builder=provider, state=state)

    def frame_primitives(self, window: pygame.Surface) -> list[DrawPrimitive]:
        """Primitives for the current state, centred on ``window``."""

        width, height = window.get_size()
        center = Vector2(width, height) * 0.5
        primitives = build_frame_primitives(self.state, self.style, self.settings)
        return translate(primitives, center)

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        window.fill(self.background.tuple())
        for primitive in self.frame_primitives(window):
            draw_primitive(window, primitive)
