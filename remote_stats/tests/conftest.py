"""Shared pytest fixtures for Remote Stats tests."""

from __future__ import annotations

from typing import Generator, List, Optional

import pytest

from remote_stats.host.base import DisplayDevice, Pairing, PairingProvider
from remote_stats.schemas import EntityClass, GaugeReading, LocoSimulation


class RecordingDisplay(DisplayDevice):
    """Keeps every string it was asked to show."""

    def __init__(self) -> None:
        self.history: List[str] = []

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def display(self, text: str) -> None:
        self.history.append(text)


class FakePairing(PairingProvider):
    """Pairing provider whose answer tests set directly."""

    def __init__(self, current: Optional[Pairing] = None) -> None:
        self.current = current
        self.calls = 0

    def paired(self) -> Optional[Pairing]:
        self.calls += 1
        return self.current


@pytest.fixture(autouse=True)
def _reset_scenario_cache() -> Generator[None, None, None]:
    """Clear the locomotive scenario cache between tests."""
    from remote_stats.host import simulation

    simulation._scenarios_cache = None
    yield
    simulation._scenarios_cache = None


@pytest.fixture()
def loco_simulation() -> LocoSimulation:
    """Gauges chosen so every slot has an exact, known encoding."""
    return LocoSimulation(
        fuel=GaugeReading(value=50.0, min=0.0, max=100.0),
        oil=GaugeReading(value=75.0, min=0.0, max=100.0),
        sand=GaugeReading(value=-1.0, min=0.0, max=100.0),
        engine_temp=GaugeReading(value=70.0, min=20.0, max=120.0),
    )


@pytest.fixture()
def diesel_pairing(loco_simulation: LocoSimulation) -> Pairing:
    return Pairing(
        entity_id="DE6-TEST",
        entity_class=EntityClass.DIESEL,
        simulation=loco_simulation,
    )


@pytest.fixture()
def shunter_pairing(loco_simulation: LocoSimulation) -> Pairing:
    return Pairing(
        entity_id="DE2-TEST",
        entity_class=EntityClass.SHUNTER,
        simulation=loco_simulation,
    )


@pytest.fixture()
def display_device() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture()
def sign_device() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture()
def fake_pairing() -> FakePairing:
    return FakePairing()
