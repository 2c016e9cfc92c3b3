from __future__ import annotations

from typing import Any, Mapping

from lagom import Container, Singleton

from fibspiral.display.style import DEFAULT_STYLE, StyleTable
from fibspiral.renderers.spiral.controller import AnimationController
from fibspiral.renderers.spiral.provider import SpiralStateProvider
from fibspiral.renderers.spiral.renderer import FibonacciSpiralRenderer
from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.runtime.display_context import DisplayContext, DisplaySettings
from fibspiral.runtime.event_handler import PygameEventHandler
from fibspiral.runtime.game_loop import GameLoop
from fibspiral.runtime.signals import RuntimeSignals
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)

RuntimeContainer = Container


def _build_animation_controller(resolver: RuntimeContainer) -> AnimationController:
    return AnimationController(initial_scale=resolver[SpiralSettings].starting_size)


def _build_state_provider(resolver: RuntimeContainer) -> SpiralStateProvider:
    return SpiralStateProvider(
        signals=resolver[RuntimeSignals],
        controller=resolver[AnimationController],
    )


def _build_renderer(resolver: RuntimeContainer) -> FibonacciSpiralRenderer:
    return FibonacciSpiralRenderer(
        provider=resolver[SpiralStateProvider],
        style=resolver[StyleTable],
        settings=resolver[SpiralSettings],
    )


def _build_display_context(resolver: RuntimeContainer) -> DisplayContext:
    return DisplayContext(settings=resolver[DisplaySettings])


def _build_event_handler(resolver: RuntimeContainer) -> PygameEventHandler:
    return PygameEventHandler(signals=resolver[RuntimeSignals])


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    return GameLoop(
        display=resolver[DisplayContext],
        event_handler=resolver[PygameEventHandler],
        signals=resolver[RuntimeSignals],
        renderer=resolver[FibonacciSpiralRenderer],
    )


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value


def build_runtime_container(
    *,
    spiral_settings: SpiralSettings | None = None,
    display_settings: DisplaySettings | None = None,
    style: StyleTable = DEFAULT_STYLE,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    """Wire one run of the application.

    Settings are resolved eagerly so configuration errors surface here, before
    any window is opened.
    """

    container = RuntimeContainer()
    _bind(
        container,
        overrides,
        SpiralSettings,
        spiral_settings or SpiralSettings.from_environment(),
    )
    _bind(
        container,
        overrides,
        DisplaySettings,
        display_settings or DisplaySettings.from_environment(),
    )
    _bind(container, overrides, StyleTable, style)
    _bind(container, overrides, RuntimeSignals, Singleton(RuntimeSignals))
    _bind(
        container,
        overrides,
        AnimationController,
        Singleton(_build_animation_controller),
    )
    _bind(container, overrides, SpiralStateProvider, Singleton(_build_state_provider))
    _bind(container, overrides, FibonacciSpiralRenderer, Singleton(_build_renderer))
    _bind(container, overrides, DisplayContext, Singleton(_build_display_context))
    _bind(container, overrides, PygameEventHandler, Singleton(_build_event_handler))
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))
    logger.debug(
        "Configured Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    return container
