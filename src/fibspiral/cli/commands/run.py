from typing import Optional

import typer

from fibspiral.renderers.spiral.settings import SpiralSettings
from fibspiral.runtime.container import build_runtime_container
from fibspiral.runtime.display_context import DisplaySettings
from fibspiral.runtime.game_loop import GameLoop
from fibspiral.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    width: Optional[int] = typer.Option(None, "--width", help="Window width in pixels"),
    height: Optional[int] = typer.Option(None, "--height", help="Window height in pixels"),
    max_fps: Optional[int] = typer.Option(None, "--max-fps", help="Frame rate cap"),
    iterations: Optional[int] = typer.Option(
        None, "--iterations", help="Squares in the zooming spiral"
    ),
    starting_size: Optional[float] = typer.Option(
        None, "--starting-size", help="Zoom scale the animation starts and wraps to"
    ),
    curve_samples: Optional[int] = typer.Option(
        None, "--curve-samples", help="Points sampled along each arc"
    ),
    frames: Optional[int] = typer.Option(
        None, "--frames", min=0, help="Stop after this many frames"
    ),
) -> None:
    """Open the window and animate the spiral."""

    try:
        resolver = build_runtime_container(
            spiral_settings=SpiralSettings.from_environment(
                iterations=iterations,
                starting_size=starting_size,
                curve_samples=curve_samples,
            ),
            display_settings=DisplaySettings.from_environment(
                width=width,
                height=height,
                max_fps=max_fps,
            ),
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=1) from exc

    loop = resolver.resolve(GameLoop)
    loop.start(frames=frames)
