"""Tests for remote_stats.registry -- reading sets and strategy table."""

from __future__ import annotations

import pytest

from remote_stats.encoder import absolute_temperature_code, band_code
from remote_stats.registry import readings_for, render_slot, strategy_for
from remote_stats.schemas import EntityClass, LocoSimulation, ReadingKind


class TestReadingSets:
    @pytest.mark.parametrize("entity_class", list(EntityClass))
    def test_fixed_order(self, entity_class: EntityClass) -> None:
        kinds = [slot.kind for slot in readings_for(entity_class)]
        assert kinds == [
            ReadingKind.FUEL,
            ReadingKind.OIL,
            ReadingKind.SAND,
            ReadingKind.TEMPERATURE,
        ]

    def test_unpaired_is_empty(self) -> None:
        assert readings_for(None) == ()

    def test_sets_are_independent(self) -> None:
        assert readings_for(EntityClass.DIESEL) is not readings_for(
            EntityClass.SHUNTER
        )

    def test_lookup_is_stable(self) -> None:
        assert readings_for(EntityClass.DIESEL) is readings_for(EntityClass.DIESEL)

    def test_glyphs(self) -> None:
        glyphs = "".join(slot.kind.glyph for slot in readings_for(EntityClass.SHUNTER))
        assert glyphs == "FOST"


class TestStrategyTable:
    def test_shunter_temperature_override(self) -> None:
        assert (
            strategy_for(EntityClass.SHUNTER, ReadingKind.TEMPERATURE)
            is absolute_temperature_code
        )

    def test_diesel_temperature_uses_band(self) -> None:
        assert strategy_for(EntityClass.DIESEL, ReadingKind.TEMPERATURE) is band_code

    @pytest.mark.parametrize(
        "kind", [ReadingKind.FUEL, ReadingKind.OIL, ReadingKind.SAND]
    )
    def test_other_kinds_use_band(self, kind: ReadingKind) -> None:
        assert strategy_for(EntityClass.SHUNTER, kind) is band_code
        assert strategy_for(EntityClass.DIESEL, kind) is band_code


class TestRenderSlot:
    def test_diesel_slots(self, loco_simulation: LocoSimulation) -> None:
        readings = readings_for(EntityClass.DIESEL)
        rendered = [render_slot(readings, i, loco_simulation) for i in range(4)]
        assert rendered == ["F:5", "O:7.", "S:u", "T:5"]

    def test_shunter_temperature_is_absolute(
        self, loco_simulation: LocoSimulation
    ) -> None:
        readings = readings_for(EntityClass.SHUNTER)
        assert render_slot(readings, 3, loco_simulation) == "T:7"

    @pytest.mark.parametrize("index", [-1, 4, 99])
    def test_invalid_index(self, index: int, loco_simulation: LocoSimulation) -> None:
        readings = readings_for(EntityClass.DIESEL)
        assert render_slot(readings, index, loco_simulation) == "X:X"

    def test_no_simulation(self) -> None:
        assert render_slot(readings_for(EntityClass.DIESEL), 0, None) == "X:X"

    def test_empty_set(self, loco_simulation: LocoSimulation) -> None:
        assert render_slot(readings_for(None), 0, loco_simulation) == "X:X"
