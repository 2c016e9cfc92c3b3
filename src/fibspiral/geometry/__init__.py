from fibspiral.geometry.curve import sample as sample  # noqa: F401
from fibspiral.geometry.curve import sample_array as sample_array  # noqa: F401
from fibspiral.geometry.rotation import RotatedSquare as RotatedSquare
from fibspiral.geometry.rotation import \
    build_rotating_squares as build_rotating_squares
from fibspiral.geometry.spiral import ORIENTATION_PHASES as ORIENTATION_PHASES
from fibspiral.geometry.spiral import CurveSpec as CurveSpec
from fibspiral.geometry.spiral import SpiralGeometry as SpiralGeometry
from fibspiral.geometry.spiral import Square as Square
from fibspiral.geometry.spiral import build_spiral as build_spiral
from fibspiral.geometry.spiral import phase_for as phase_for
from fibspiral.geometry.vector import Vector2 as Vector2
