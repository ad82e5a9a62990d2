"""Fixture-based locomotive simulation (no game host required).

Loads scenarios from ``fixtures/locomotive_scenarios.json`` and applies
Gaussian noise to each gauge value so consecutive snapshots vary.
Nothing is integrated over time: every snapshot is drawn independently
from the scenario's base values.
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Dict, Optional

import structlog

from remote_stats.host.base import Pairing, PairingProvider
from remote_stats.schemas import EntityClass, GaugeReading, LocoSimulation

logger = structlog.get_logger(__name__)

_FIXTURES_DIR = Path(__file__).resolve().parent.parent / "fixtures"

_GAUGES = ("fuel", "oil", "sand", "engine_temp")


class SimulatedLocomotive:
    """A locomotive whose gauges come from a named JSON scenario."""

    def __init__(self, scenario: str = "diesel_nominal") -> None:
        scenarios = load_scenarios()
        if scenario not in scenarios:
            available = ", ".join(sorted(scenarios))
            raise ValueError(
                f"Unknown locomotive scenario '{scenario}'. "
                f"Available: {available}"
            )
        definition = scenarios[scenario]
        self.scenario = scenario
        self.entity_id: str = definition["entity_id"]
        self.entity_class = EntityClass(definition["entity_class"])
        self._gauges: Dict[str, Dict[str, Any]] = definition["gauges"]
        logger.debug(
            "scenario_loaded",
            scenario=scenario,
            entity_id=self.entity_id,
            entity_class=self.entity_class.value,
        )

    def simulation(self) -> LocoSimulation:
        """Return a fresh gauge snapshot."""
        return LocoSimulation(
            **{name: _read_gauge(self._gauges[name]) for name in _GAUGES}
        )


class SimulatedPairing(PairingProvider):
    """Pairing state driven explicitly by ``pair`` / ``unpair``."""

    def __init__(self, locomotive: Optional[SimulatedLocomotive] = None) -> None:
        self._locomotive = locomotive

    def pair(self, locomotive: SimulatedLocomotive) -> None:
        self._locomotive = locomotive

    def unpair(self) -> None:
        self._locomotive = None

    def paired(self) -> Optional[Pairing]:
        loco = self._locomotive
        if loco is None:
            return None
        return Pairing(
            entity_id=loco.entity_id,
            entity_class=loco.entity_class,
            simulation=loco.simulation(),
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_scenarios_cache: Optional[Dict[str, Any]] = None


def load_scenarios() -> Dict[str, Any]:
    global _scenarios_cache
    if _scenarios_cache is None:
        path = _FIXTURES_DIR / "locomotive_scenarios.json"
        with open(path, encoding="utf-8") as fh:
            _scenarios_cache = json.load(fh)
    return _scenarios_cache


def _read_gauge(gauge_def: Dict[str, Any]) -> GaugeReading:
    return GaugeReading(
        value=_apply_noise(gauge_def["value"], gauge_def.get("noise", 0.0)),
        min=gauge_def["min"],
        max=gauge_def["max"],
    )


def _apply_noise(base: float, noise: float) -> float:
    """Apply Gaussian noise (std-dev = noise) to a base value.

    Not clamped to the band, so under- and over-range scenarios stay
    out of range.
    """
    if noise <= 0:
        return base
    return round(base + random.gauss(0, noise), 2)
