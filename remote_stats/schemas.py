"""Gauge and locomotive-state Pydantic v2 models.

The core only ever reads snapshots: every model here is frozen.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

class ReadingKind(str, Enum):
    """Subsystem a reading belongs to.  The value is its type glyph."""

    FUEL = "F"
    OIL = "O"
    SAND = "S"
    TEMPERATURE = "T"

    @property
    def glyph(self) -> str:
        return self.value


class EntityClass(str, Enum):
    """Locomotive classes a remote can be paired with."""

    DIESEL = "diesel"
    SHUNTER = "shunter"


# ---------------------------------------------------------------------------
# Readings
# ---------------------------------------------------------------------------

class GaugeReading(BaseModel):
    """One instantaneous sensor value and its valid operating band.

    ``min <= max`` is expected but not enforced; an inverted band is
    undefined input for the encoder.
    """

    value: float = Field(..., description="Current gauge value")
    min: float = Field(..., description="Lower edge of the operating band")
    max: float = Field(..., description="Upper edge of the operating band")

    model_config = {"frozen": True, "allow_inf_nan": False}


class SimulationState(Protocol):
    """Accessor interface a host implements for one locomotive."""

    @property
    def fuel(self) -> GaugeReading: ...

    @property
    def oil(self) -> GaugeReading: ...

    @property
    def sand(self) -> GaugeReading: ...

    @property
    def engine_temp(self) -> GaugeReading: ...


class LocoSimulation(BaseModel):
    """Snapshot of a locomotive's gauges, as handed to the core."""

    fuel: GaugeReading
    oil: GaugeReading
    sand: GaugeReading
    engine_temp: GaugeReading

    model_config = {"frozen": True}
