"""Colour constants, linear interpolation and star colours by temperature."""

from __future__ import annotations

import math

__all__ = [
    "BLACK",
    "BLUE",
    "BROWN",
    "DARK_GREEN",
    "DARK_GREY",
    "GREEN",
    "GREEN_YELLOW",
    "GREY",
    "YELLOW",
    "RGB",
    "calculate_star_color",
    "calculate_temperature_indicator",
    "interpolate",
]

RGB = tuple[float, float, float]

BROWN: RGB = (0.55, 0.32, 0.16)
BLUE: RGB = (0.00, 0.00, 0.75)
GREEN: RGB = (0.10, 0.75, 0.10)
DARK_GREEN: RGB = (0.25, 0.40, 0.00)
GREEN_YELLOW: RGB = (0.66, 0.76, 0.39)
YELLOW: RGB = (0.95, 0.95, 0.10)
BLACK: RGB = (0.00, 0.00, 0.00)
GREY: RGB = (0.75, 0.75, 0.75)
DARK_GREY: RGB = (0.50, 0.50, 0.50)


def interpolate(source, target, fraction: float) -> RGB:
    """Blend linearly from ``source`` (fraction 0) to ``target`` (fraction 1)."""
    return tuple((t - s) * fraction + s for s, t in zip(source, target))


def _require_positive(temperature: int) -> None:
    if temperature <= 0:
        raise ValueError(f"temperature must be positive, got {temperature}")


def calculate_temperature_indicator(temperature: int) -> float:
    """B-V colour index of a star with the given temperature in Kelvin."""
    _require_positive(temperature)
    t = float(temperature)
    return (-2.1344 * t + 8464 + math.sqrt(0.98724096 * t * t + 71639296)) / (1.6928 * t)


def calculate_star_color(temperature: int) -> RGB:
    """Apparent RGB colour of a star with the given temperature in Kelvin."""
    _require_positive(temperature)
    bv = min(max(calculate_temperature_indicator(temperature), -0.4), 2.0)

    if bv < 0.0:
        t = bv / 0.4 + 1.0
        red = 0.61 + 0.11 * t + 0.1 * t * t
    elif bv < 0.4:
        t = bv / 0.4
        red = 0.83 + 0.17 * t
    else:
        red = 1.00

    if bv < 0.0:
        t = bv / 0.4 + 1.0
        green = 0.70 + 0.07 * t + 0.1 * t * t
    elif bv < 0.4:
        t = bv / 0.4
        green = 0.87 + 0.11 * t
    elif bv < 1.6:
        t = (bv - 0.4) / 1.2
        green = 0.98 - 0.16 * t
    else:
        t = (bv - 1.60) / 0.4
        green = 0.82 - 0.5 * t * t

    if bv < 0.4:
        blue = 1.00
    elif bv < 1.5:
        t = (bv - 0.40) / 1.1
        blue = 1.00 - 0.47 * t + 0.1 * t * t
    elif bv < 1.94:
        t = (bv - 1.50) / 0.44
        blue = 0.63 - 0.6 * t * t
    else:
        blue = 0.0

    return (red, green, blue)