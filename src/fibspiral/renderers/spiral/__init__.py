from fibspiral.renderers.spiral.controller import \
    AnimationController  # noqa: F401
from fibspiral.renderers.spiral.provider import \
    SpiralStateProvider  # noqa: F401
from fibspiral.renderers.spiral.renderer import \
    FibonacciSpiralRenderer  # noqa: F401
from fibspiral.renderers.spiral.settings import SpiralSettings  # noqa: F401
from fibspiral.renderers.spiral.state import AnimationMode  # noqa: F401
from fibspiral.renderers.spiral.state import SpiralAnimationState  # noqa: F401
