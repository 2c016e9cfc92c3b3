from fibspiral.utilities.env.parsing import _env_float, _env_int

DEFAULT_ITERATIONS = 24
DEFAULT_STARTING_SIZE = 0.01
DEFAULT_CURVE_SAMPLES = 100
DEFAULT_ROTATING_SIDE = 1000.0
DEFAULT_ROTATING_COUNT = 20


class SpiralConfiguration:
    @classmethod
    def iterations(cls) -> int:
        return _env_int("FIBSPIRAL_ITERATIONS", default=DEFAULT_ITERATIONS, minimum=1)

    @classmethod
    def starting_size(cls) -> float:
        return _env_float(
            "FIBSPIRAL_STARTING_SIZE",
            default=DEFAULT_STARTING_SIZE,
            exclusive_minimum=0.0,
        )

    @classmethod
    def curve_samples(cls) -> int:
        return _env_int(
            "FIBSPIRAL_CURVE_SAMPLES", default=DEFAULT_CURVE_SAMPLES, minimum=1
        )

    @classmethod
    def rotating_side(cls) -> float:
        return _env_float(
            "FIBSPIRAL_ROTATING_SIDE",
            default=DEFAULT_ROTATING_SIDE,
            exclusive_minimum=0.0,
        )

    @classmethod
    def rotating_count(cls) -> int:
        return _env_int(
            "FIBSPIRAL_ROTATING_COUNT", default=DEFAULT_ROTATING_COUNT, minimum=1
        )
