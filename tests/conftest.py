import os

import pygame
import pytest
from hypothesis import HealthCheck, settings

from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.runtime.display_context import DisplaySettings
from fibspiral.runtime.signals import RuntimeSignals

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEO_WINDOW_POS", "0,0")
    yield


@pytest.fixture(autouse=True)
def isolated_spiral_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop FIBSPIRAL_* overrides from the developer's shell so defaults apply."""

    for key in list(os.environ):
        if key.startswith("FIBSPIRAL_") and key != "FIBSPIRAL_LOG_DIR":
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def signals() -> RuntimeSignals:
    return RuntimeSignals()


@pytest.fixture
def small_display_settings() -> DisplaySettings:
    return DisplaySettings(width=64, height=48, max_fps=1000)


@pytest.fixture
def small_spiral_settings() -> SpiralSettings:
    return SpiralSettings(iterations=6, curve_samples=8, rotating_count=5)
