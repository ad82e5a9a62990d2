"""Remote-control adapter: turns cycle/refresh events into display text.

The controller owns the selection index for one remote and repurposes
its coupler display to show the paired locomotive's gauges.
"""

from __future__ import annotations

from typing import Optional, Tuple

import structlog

from remote_stats.host.base import DisplayDevice, Pairing, PairingProvider
from remote_stats.registry import ReadingSet, readings_for
from remote_stats.selector import advance, display

logger = structlog.get_logger(__name__)

PAIRED_SIGN = "+"
UNPAIRED_SIGN = "-"


class RemoteController:
    """Selection state and display updates for one remote control."""

    def __init__(
        self,
        pairing: PairingProvider,
        display_device: DisplayDevice,
        sign_device: DisplayDevice,
    ) -> None:
        self._pairing = pairing
        self._display = display_device
        self._sign = sign_device
        self._index = 0
        self._last_seen: Tuple[Optional[str], int] = (None, 0)

    @property
    def selected_index(self) -> int:
        return self._index

    # -- events -------------------------------------------------------------

    def cycle_selection(self, delta: int) -> str:
        """Move the selection by *delta* and refresh the displays."""
        current, readings = self._sync()
        previous = self._index
        self._index = advance(self._index, delta, len(readings))
        logger.debug(
            "selection_cycled",
            entity_id=current.entity_id if current else None,
            delta=delta,
            previous=previous,
            selected=self._index,
        )
        return self._render(current, readings)

    def refresh(self) -> str:
        """Write the paired sign and the selected reading; return the text."""
        current, readings = self._sync()
        return self._render(current, readings)

    def on_couple_pressed(self) -> None:
        # The coupler display shows stats, so coupling from the remote is off.
        logger.debug("coupler_button_suppressed", button="couple")

    def on_uncouple_pressed(self) -> None:
        logger.debug("coupler_button_suppressed", button="uncouple")

    # -- internal -----------------------------------------------------------

    def _sync(self) -> Tuple[Optional[Pairing], ReadingSet]:
        """Query pairing; reset the index when the locomotive or count changes."""
        current = self._pairing.paired()
        readings = readings_for(current.entity_class if current else None)
        seen = (current.entity_id if current else None, len(readings))
        if seen != self._last_seen:
            logger.info(
                "pairing_changed",
                entity_id=seen[0],
                entity_class=current.entity_class.value if current else None,
                readings=seen[1],
            )
            self._last_seen = seen
            self._index = 0
        return current, readings

    def _render(self, current: Optional[Pairing], readings: ReadingSet) -> str:
        text = display(
            self._index,
            len(readings),
            readings,
            current.simulation if current else None,
        )
        self._sign.display(PAIRED_SIGN if current else UNPAIRED_SIGN)
        self._display.display(text)
        return text
