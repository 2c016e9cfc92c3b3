import pytest

from fibspiral.display.style import DEFAULT_STYLE, StyleTable
from fibspiral.renderers.spiral.controller import AnimationController
from fibspiral.renderers.spiral.provider import SpiralStateProvider
from fibspiral.renderers.spiral.renderer import FibonacciSpiralRenderer
from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.runtime.container import build_runtime_container
from fibspiral.runtime.display_context import DisplayContext, DisplaySettings
from fibspiral.runtime.event_handler import PygameEventHandler
from fibspiral.runtime.game_loop import GameLoop
from fibspiral.runtime.signals import RuntimeSignals


class TestRuntimeContainer:
    """Validate the Lagom wiring for one application run."""

    def test_core_services_are_singletons(
        self,
        small_spiral_settings: SpiralSettings,
        small_display_settings: DisplaySettings,
    ) -> None:
        container = build_runtime_container(
            spiral_settings=small_spiral_settings,
            display_settings=small_display_settings,
        )

        for key in (
            RuntimeSignals,
            AnimationController,
            SpiralStateProvider,
            FibonacciSpiralRenderer,
            DisplayContext,
            PygameEventHandler,
            GameLoop,
        ):
            assert container.resolve(key) is container.resolve(key)

    def test_services_share_signals_and_settings(
        self,
        small_spiral_settings: SpiralSettings,
        small_display_settings: DisplaySettings,
    ) -> None:
        container = build_runtime_container(
            spiral_settings=small_spiral_settings,
            display_settings=small_display_settings,
        )
        loop = container.resolve(GameLoop)

        assert loop.signals is container.resolve(RuntimeSignals)
        assert loop.renderer.settings is small_spiral_settings
        assert loop.renderer.style is DEFAULT_STYLE
        assert loop.display.settings is small_display_settings
        assert loop.renderer.provider.controller is container.resolve(
            AnimationController
        )

    def test_starting_size_seeds_the_controller(
        self, small_display_settings: DisplaySettings
    ) -> None:
        container = build_runtime_container(
            spiral_settings=SpiralSettings(starting_size=0.2),
            display_settings=small_display_settings,
        )

        state = container.resolve(AnimationController).state

        assert state.scale == 0.2
        assert state.initial_scale == 0.2

    def test_overrides_replace_bindings(
        self,
        small_spiral_settings: SpiralSettings,
        small_display_settings: DisplaySettings,
    ) -> None:
        controller = AnimationController(initial_scale=1.0)
        style = StyleTable.from_colors(["#ffffff"])
        container = build_runtime_container(
            spiral_settings=small_spiral_settings,
            display_settings=small_display_settings,
            overrides={AnimationController: controller, StyleTable: style},
        )

        assert container.resolve(SpiralStateProvider).controller is controller
        assert container.resolve(FibonacciSpiralRenderer).style is style

    def test_containers_are_independent(
        self,
        small_spiral_settings: SpiralSettings,
        small_display_settings: DisplaySettings,
    ) -> None:
        first = build_runtime_container(
            spiral_settings=small_spiral_settings,
            display_settings=small_display_settings,
        )
        second = build_runtime_container(
            spiral_settings=small_spiral_settings,
            display_settings=small_display_settings,
        )

        assert first.resolve(GameLoop) is not second.resolve(GameLoop)

    def test_settings_come_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FIBSPIRAL_ITERATIONS", "7")
        monkeypatch.setenv("FIBSPIRAL_WINDOW_WIDTH", "320")

        container = build_runtime_container()

        assert container.resolve(SpiralSettings).iterations == 7
        assert container.resolve(DisplaySettings).width == 320

    def test_invalid_environment_fails_fast(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FIBSPIRAL_ITERATIONS", "0")

        with pytest.raises(ValueError, match="FIBSPIRAL_ITERATIONS"):
            build_runtime_container()
