import os

from fibspiral.utilities.env.parsing import _env_int, _env_int_pair

DEFAULT_WINDOW_WIDTH = 2400
DEFAULT_WINDOW_HEIGHT = 1800
DEFAULT_MAX_FPS = 60
DEFAULT_WINDOW_POSITION = (20, 20)
DEFAULT_WINDOW_TITLE = "Fibonacci Spiral"


class DisplayConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        return (
            _env_int("FIBSPIRAL_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1),
            _env_int(
                "FIBSPIRAL_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
            ),
        )

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("FIBSPIRAL_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_position(cls) -> tuple[int, int]:
        return _env_int_pair(
            "FIBSPIRAL_WINDOW_POSITION", default=DEFAULT_WINDOW_POSITION
        )

    @classmethod
    def window_title(cls) -> str:
        return os.environ.get("FIBSPIRAL_WINDOW_TITLE", DEFAULT_WINDOW_TITLE)
