"""Value-to-glyph encoding for the coupler display.

A display slot is ``"<glyph>:<code>"`` where the code is one or two
characters: a digit with an optional trailing ``"."`` sub-tick marker, or
a status letter.
"""

from __future__ import annotations

import math
from typing import Callable

from remote_stats.schemas import GaugeReading

EncodeStrategy = Callable[[GaugeReading], str]

# Status codes
UNDER_RANGE = "u"
OVER_RANGE = "o"
COLD = "c"
HOT = "H"

# Whole-slot sentinels
INVALID_SLOT = "X:X"
UNPAIRED = "N:A"

_TOP_DIGIT = 9.0

# Absolute engine-temperature thresholds, degrees
_COLD_BELOW = 40.0
_HOT_ABOVE = 99.0


def format_value(v: float) -> str:
    """Render *v* as its integer part plus ``"."`` when the remainder >= 0.5.

    Negative non-integers are truncated toward zero rather than floored.
    """
    floored = math.floor(v)
    if v < 0 and floored != v:
        floored += 1
    result = str(floored)
    if v - floored >= 0.5:
        result += "."
    return result


def band_code(reading: GaugeReading) -> str:
    """Position of the reading across its band, in tenths (0-9)."""
    if reading.value < reading.min:
        return UNDER_RANGE
    if reading.value > reading.max:
        return OVER_RANGE

    span = reading.max - reading.min
    offset = reading.value - reading.min
    if math.isinf(span):
        # Band wider than the float range; halve both ends first.
        span = reading.max / 2 - reading.min / 2
        offset = reading.value / 2 - reading.min / 2
    # Only reachable with span == 0 when value == min == max.
    fraction = offset / span if span else 0.0
    scaled = min(max(fraction * 10, 0.0), _TOP_DIGIT)
    return format_value(scaled)


def absolute_temperature_code(reading: GaugeReading) -> str:
    """Engine temperature in tens of degrees, ignoring the band."""
    temp = reading.value
    if temp < _COLD_BELOW:
        return COLD
    if temp > _HOT_ABOVE:
        return HOT
    return format_value(temp / 10)


def encode(
    kind_glyph: str,
    reading: GaugeReading,
    strategy: EncodeStrategy = band_code,
) -> str:
    """Return the display slot for *reading* tagged with *kind_glyph*."""
    return f"{kind_glyph}:{strategy(reading)}"
