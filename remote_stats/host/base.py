"""Abstract interfaces the host environment implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from remote_stats.schemas import EntityClass, SimulationState


@dataclass(frozen=True)
class Pairing:
    """The locomotive a remote is currently paired with."""

    entity_id: str
    entity_class: EntityClass
    simulation: SimulationState


class PairingProvider(ABC):
    """Answers which locomotive, if any, the remote is paired with."""

    @abstractmethod
    def paired(self) -> Optional[Pairing]:
        """Return the current pairing, or ``None`` when unpaired.

        ``Pairing.simulation`` must reflect the locomotive's state at
        call time.
        """


class DisplayDevice(ABC):
    """A text display on the remote (coupler value or paired sign)."""

    @abstractmethod
    def display(self, text: str) -> None:
        """Show *text*, replacing whatever was shown before."""
