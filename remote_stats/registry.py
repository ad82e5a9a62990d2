"""Per-locomotive-class reading sets.

Each supported class exposes four slots in a fixed order (fuel, oil,
sand, temperature).  How a slot is encoded is looked up by
``(entity class, reading kind)`` so a single class can override one
reading without touching the others.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Dict, Optional, Tuple

from remote_stats.encoder import (
    INVALID_SLOT,
    EncodeStrategy,
    absolute_temperature_code,
    band_code,
    encode,
)
from remote_stats.schemas import (
    EntityClass,
    GaugeReading,
    ReadingKind,
    SimulationState,
)

Accessor = Callable[[SimulationState], GaugeReading]


@dataclass(frozen=True)
class ReadingSlot:
    """One selectable reading: its kind, how to fetch it, how to encode it."""

    kind: ReadingKind
    accessor: Accessor
    strategy: EncodeStrategy = band_code

    def render(self, simulation: SimulationState) -> str:
        return encode(self.kind.glyph, self.accessor(simulation), self.strategy)


ReadingSet = Tuple[ReadingSlot, ...]

# Shunter temperature is an absolute-degree gauge; diesel temperature
# is band-relative like everything else.
_STRATEGY_OVERRIDES: Dict[Tuple[EntityClass, ReadingKind], EncodeStrategy] = {
    (EntityClass.SHUNTER, ReadingKind.TEMPERATURE): absolute_temperature_code,
}

_ACCESSORS: Dict[ReadingKind, Accessor] = {
    ReadingKind.FUEL: attrgetter("fuel"),
    ReadingKind.OIL: attrgetter("oil"),
    ReadingKind.SAND: attrgetter("sand"),
    ReadingKind.TEMPERATURE: attrgetter("engine_temp"),
}

_SLOT_ORDER = (
    ReadingKind.FUEL,
    ReadingKind.OIL,
    ReadingKind.SAND,
    ReadingKind.TEMPERATURE,
)


def strategy_for(entity_class: EntityClass, kind: ReadingKind) -> EncodeStrategy:
    """Return the encoder for *kind* on *entity_class*."""
    return _STRATEGY_OVERRIDES.get((entity_class, kind), band_code)


def _build_set(entity_class: EntityClass) -> ReadingSet:
    return tuple(
        ReadingSlot(
            kind=kind,
            accessor=_ACCESSORS[kind],
            strategy=strategy_for(entity_class, kind),
        )
        for kind in _SLOT_ORDER
    )


_READING_SETS: Dict[EntityClass, ReadingSet] = {
    EntityClass.DIESEL: _build_set(EntityClass.DIESEL),
    EntityClass.SHUNTER: _build_set(EntityClass.SHUNTER),
}


def readings_for(entity_class: Optional[EntityClass]) -> ReadingSet:
    """Return the reading set for *entity_class*; empty when unpaired."""
    if entity_class is None:
        return ()
    return _READING_SETS[entity_class]


def render_slot(
    readings: ReadingSet,
    index: int,
    simulation: Optional[SimulationState],
) -> str:
    """Encode ``readings[index]`` or return ``"X:X"`` if *index* is invalid."""
    if simulation is None or not 0 <= index < len(readings):
        return INVALID_SLOT
    return readings[index].render(simulation)
