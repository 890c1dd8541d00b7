"""Tests for type-aware similarity scorers."""

import logging

import pytest

from pcbparts_mpn import config
from pcbparts_mpn.component_types import ComponentType
from pcbparts_mpn.family_similarity import (
    FAMILY_SCORERS,
    PartProfile,
    family_similarity,
    score_logic,
    score_microcontrollers,
    score_opamps,
    score_regulators,
    score_sensors,
)

HIGH = config.HIGH_FAMILY_SIMILARITY
MEDIUM = config.MEDIUM_FAMILY_SIMILARITY
LOW = config.LOW_FAMILY_SIMILARITY


def part(series, component_type=ComponentType.OPAMP_TI, package="", mpn=None):
    return PartProfile(mpn=mpn or series, component_type=component_type, series=series, package=package)


class TestScorerTable:
    """Tests for FAMILY_SCORERS layout."""

    def test_keys_are_generic_types(self):
        for component_type in FAMILY_SCORERS:
            assert component_type.generic_type is component_type

    def test_grades_ordered(self):
        assert 0.0 < LOW < MEDIUM < HIGH < 1.0


class TestOpAmps:
    """Tests for score_opamps function."""

    @pytest.mark.parametrize("pkg1,pkg2,expected", [
        ("DIP", "SOIC", HIGH),
        ("SOIC", "SOIC", HIGH),
        ("", "TSSOP", HIGH),
        ("SOIC", "SOT-23", MEDIUM),
    ])
    def test_same_series(self, pkg1, pkg2, expected):
        assert score_opamps(part("LM358", package=pkg1), part("LM358", package=pkg2)) == expected

    def test_same_channel_count(self):
        assert score_opamps(part("LM358"), part("TL072")) == MEDIUM
        assert score_opamps(part("LM324"), part("TL074")) == MEDIUM

    def test_different_channel_count(self):
        assert score_opamps(part("LM358"), part("LM324")) == LOW

    def test_empty_series_never_same(self):
        assert score_opamps(part(""), part("")) == LOW


class TestRegulators:
    """Tests for score_regulators function."""

    def test_same_series_power_packages(self):
        a = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI, "TO-220")
        b = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI, "TO-252")
        assert score_regulators(a, b) == HIGH

    def test_same_series_incompatible_packages(self):
        a = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI, "TO-220")
        b = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI, "SOIC")
        assert score_regulators(a, b) == MEDIUM

    def test_fixed_outputs_differ(self):
        a = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI)
        b = part("LM7812", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI)
        assert score_regulators(a, b) == LOW

    def test_same_kind(self):
        a = part("TPS7A4700", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI)
        b = part("TPS7A3301", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI)
        assert score_regulators(a, b) == MEDIUM
        assert score_regulators(part("LM317"), part("LM338")) == MEDIUM

    def test_different_kind(self):
        assert score_regulators(part("LM317"), part("LM7805")) == LOW


class TestMicrocontrollers:
    """Tests for score_microcontrollers function."""

    def mcu(self, series, package="LQFP"):
        return part(series, ComponentType.MICROCONTROLLER_ST, package)

    def test_same_series(self):
        assert score_microcontrollers(self.mcu("STM32F103"), self.mcu("STM32F103")) == HIGH
        assert score_microcontrollers(self.mcu("STM32F103"), self.mcu("STM32F103", "UFQFPN")) == MEDIUM

    def test_same_line(self):
        assert score_microcontrollers(self.mcu("STM32F103"), self.mcu("STM32F100")) == MEDIUM
        assert score_microcontrollers(self.mcu("STM8S003"), self.mcu("STM8S105")) == MEDIUM

    def test_different_line(self):
        assert score_microcontrollers(self.mcu("STM32F103"), self.mcu("STM32F401")) == LOW
        assert score_microcontrollers(self.mcu("STM32F103"), self.mcu("STM8S003")) == LOW


class TestSensors:
    """Tests for score_sensors function."""

    def test_same_series(self):
        a = part("ACS712", ComponentType.SENSOR_CURRENT_ALLEGRO, "SOIC-8")
        b = part("ACS712", ComponentType.SENSOR_CURRENT_ALLEGRO, "SOIC-8")
        assert score_sensors(a, b) == HIGH

    def test_same_measurand_across_manufacturers(self):
        a = part("ACS712", ComponentType.SENSOR_CURRENT_ALLEGRO)
        b = part("MLX91208", ComponentType.SENSOR_CURRENT)
        assert score_sensors(a, b) == MEDIUM

    def test_different_measurand(self):
        a = part("SHT31", ComponentType.SENSOR_HUMIDITY_SENSIRION)
        b = part("A1324", ComponentType.HALL_SENSOR_ALLEGRO)
        assert score_sensors(a, b) == LOW


class TestLogic:
    """Tests for score_logic function."""

    def test_same_function_across_families(self):
        assert score_logic(part("74HC00", ComponentType.LOGIC_IC_TI), part("74LS00", ComponentType.LOGIC_IC_TI)) == MEDIUM

    def test_different_function(self):
        assert score_logic(part("74HC00", ComponentType.LOGIC_IC_TI), part("74HC04", ComponentType.LOGIC_IC_TI)) == LOW


class TestFamilySimilarity:
    """Tests for family_similarity dispatch."""

    def test_dispatches_on_generic_type(self):
        a = part("LM358", ComponentType.OPAMP_TI)
        b = part("TL072", ComponentType.OPAMP)
        assert family_similarity(a, b) == MEDIUM

    def test_different_generic_types(self):
        a = part("LM358", ComponentType.OPAMP_TI)
        b = part("LM7805", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI)
        assert family_similarity(a, b) is None

    def test_type_without_scorer(self):
        a = part("A4988", ComponentType.MOTOR_DRIVER_ALLEGRO)
        b = part("A4983", ComponentType.MOTOR_DRIVER_ALLEGRO)
        assert family_similarity(a, b) is None

    @pytest.mark.parametrize("a,b", [
        (part("LM358", package="DIP"), part("LM358", package="SOT-23")),
        (part("LM358"), part("TL082")),
        (part("SHT31", ComponentType.SENSOR_HUMIDITY_SENSIRION), part("STS31", ComponentType.SENSOR_TEMPERATURE)),
        (part("TPS7A4700", ComponentType.VOLTAGE_REGULATOR), part("LM317", ComponentType.VOLTAGE_REGULATOR)),
    ])
    def test_symmetric(self, a, b):
        assert family_similarity(a, b) == family_similarity(b, a)

    def test_logs_grade(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pcbparts_mpn.family_similarity"):
            family_similarity(part("LM358", mpn="LM358N"), part("LM324", mpn="LM324N"))
        assert "OPAMP similarity LM358N vs LM324N" in caplog.text
