from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pygame

from fibspiral.utilities.env import Configuration
from fibspiral.utilities.env.display import (DEFAULT_MAX_FPS,
                                             DEFAULT_WINDOW_HEIGHT,
                                             DEFAULT_WINDOW_POSITION,
                                             DEFAULT_WINDOW_TITLE,
                                             DEFAULT_WINDOW_WIDTH)
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_POSITION_ENV_VAR = "SDL_VIDEO_WINDOW_POS"


@dataclass(frozen=True)
class DisplaySettings:
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    max_fps: int = DEFAULT_MAX_FPS
    position: tuple[int, int] = DEFAULT_WINDOW_POSITION
    title: str = DEFAULT_WINDOW_TITLE

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Window size must be positive. Found {self.width}x{self.height}"
            )
        if self.max_fps < 1:
            raise ValueError(f"max_fps must be at least 1. Found {self.max_fps}")

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def from_environment(cls, **overrides: Any) -> DisplaySettings:
        width, height = Configuration.window_size()
        values: dict[str, Any] = {
            "width": width,
            "height": height,
            "max_fps": Configuration.max_fps(),
            "position": Configuration.window_position(),
            "title": Configuration.window_title(),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    settings: DisplaySettings = field(default_factory=DisplaySettings)
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        # SDL reads the window position when the window is created.
        x, y = self.settings.position
        os.environ.setdefault(WINDOW_POSITION_ENV_VAR, f"{x},{y}")

        pygame.init()
        pygame.display.init()
        logger.info(
            "Opening %dx%d window '%s'",
            self.settings.width,
            self.settings.height,
            self.settings.title,
        )
        self.screen = pygame.display.set_mode(self.settings.size)
        pygame.display.set_caption(self.settings.title)
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("Display is not initialized")

    def present(self) -> None:
        pygame.display.flip()

    def tick(self) -> int:
        self.ensure_initialized()
        assert self.clock is not None
        return self.clock.tick(self.settings.max_fps)
