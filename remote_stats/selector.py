"""Cyclic selection over the paired locomotive's readings."""

from __future__ import annotations

from typing import Optional

from remote_stats.encoder import INVALID_SLOT, UNPAIRED
from remote_stats.registry import ReadingSet, render_slot
from remote_stats.schemas import SimulationState


def advance(current_index: int, delta: int, count: int) -> int:
    """Move the cursor by *delta*, wrapping into ``[0, count)``.

    Returns ``0`` when there is nothing to select.
    """
    if count <= 0:
        return 0
    # Python's % already lands in [0, count) for negative operands.
    return (current_index + delta) % count


def display(
    index: int,
    count: int,
    readings: ReadingSet,
    simulation: Optional[SimulationState],
) -> str:
    """Return the coupler-display text for the selected reading.

    ``"N:A"`` means nothing is paired; ``"X:X"`` means the index does
    not address a reading of the paired locomotive.
    """
    if count == 0:
        return UNPAIRED
    if not 0 <= index < count:
        return INVALID_SLOT
    return render_slot(readings, index, simulation)
