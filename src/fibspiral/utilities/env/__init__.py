"""Environment configuration helpers."""

from fibspiral.utilities.env.display import DisplayConfiguration
from fibspiral.utilities.env.spiral import SpiralConfiguration


class Configuration(
    SpiralConfiguration,
    DisplayConfiguration,
):
    """Aggregate environment configuration helpers."""
