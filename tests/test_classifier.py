"""Tests for MPNClassifier - the handler/registry facade."""

import logging

import pytest

from pcbparts_mpn import MPNClassifier
from pcbparts_mpn.component_types import ComponentType
from pcbparts_mpn.errors import InvalidRegistrationError, RegistryFrozenError
from pcbparts_mpn.handlers import SensirionHandler, TexasInstrumentsHandler
from pcbparts_mpn.similarity import composite_similarity


@pytest.fixture(scope="module")
def classifier():
    return MPNClassifier()


class TestConstruction:
    """Tests for classifier construction."""

    def test_registry_frozen(self, classifier):
        assert classifier.registry.frozen
        with pytest.raises(RegistryFrozenError):
            classifier.registry.register_pattern(ComponentType.IC, r"XY.*")

    def test_default_handlers(self, classifier):
        names = [handler.name for handler in classifier.handlers]
        assert names == [
            "Texas Instruments",
            "STMicroelectronics",
            "Allegro MicroSystems",
            "Melexis",
            "Sensirion",
        ]

    def test_accepts_instances_and_classes(self):
        classifier = MPNClassifier([TexasInstrumentsHandler(), SensirionHandler])
        assert len(classifier.handlers) == 2

    def test_duplicate_handler_names(self):
        with pytest.raises(InvalidRegistrationError):
            MPNClassifier([TexasInstrumentsHandler, TexasInstrumentsHandler()])

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="pcbparts_mpn.classifier"):
            MPNClassifier([SensirionHandler])
        assert "1 handlers" in caplog.text

    def test_independent_registries(self):
        """Each classifier owns its registry; there is no shared global state."""
        sensirion_only = MPNClassifier([SensirionHandler])
        assert sensirion_only.detect_type("LM358N") is None
        assert MPNClassifier().detect_type("LM358N") is ComponentType.OPAMP_TI


class TestClassification:
    """Tests for matches, matching_types and detect_type."""

    @pytest.mark.parametrize("mpn,component_type", [
        ("LM358N", ComponentType.OPAMP_TI),
        ("LM7805CT", ComponentType.VOLTAGE_REGULATOR_LINEAR_TI),
        ("SN74HC00N", ComponentType.LOGIC_IC_TI),
        ("STM32F103C8T6", ComponentType.MICROCONTROLLER_ST),
        ("ACS712ELCTR-05B-T", ComponentType.SENSOR_CURRENT_ALLEGRO),
        ("A1324LUA-T", ComponentType.HALL_SENSOR_ALLEGRO),
        ("A4988SETTR-T", ComponentType.MOTOR_DRIVER_ALLEGRO),
        ("MLX90614ESF-BAA-000-TU", ComponentType.SENSOR_TEMPERATURE_MELEXIS),
        ("MLX90393SLW-ABA-011-RE", ComponentType.HALL_SENSOR_MELEXIS),
        ("SHT31-DIS-B", ComponentType.SENSOR_HUMIDITY_SENSIRION),
    ])
    def test_detect_type(self, classifier, mpn, component_type):
        assert classifier.detect_type(mpn) is component_type

    def test_detect_unknown(self, classifier):
        assert classifier.detect_type("RC0603FR-0710KL") is None
        assert classifier.detect_type(None) is None
        assert classifier.detect_type("") is None

    def test_matches_generic_types(self, classifier):
        assert classifier.matches("LM358N", ComponentType.OPAMP)
        assert classifier.matches("STM32F103C8T6", ComponentType.IC)
        assert classifier.matches("ACS712ELCTR-05B-T", ComponentType.IC)
        assert not classifier.matches("LM358N", ComponentType.MICROCONTROLLER)

    def test_matching_types_most_specific_first(self, classifier):
        types = classifier.matching_types("ACS712ELCTR-05B-T")
        assert types[0] is ComponentType.SENSOR_CURRENT_ALLEGRO
        assert types[1] is ComponentType.SENSOR_CURRENT
        assert set(types) == {
            ComponentType.SENSOR_CURRENT_ALLEGRO,
            ComponentType.SENSOR_CURRENT,
            ComponentType.SENSOR,
            ComponentType.IC,
        }

    def test_matching_types_unknown(self, classifier):
        assert classifier.matching_types("RC0603FR-0710KL") == []


class TestHandlerLookup:
    """Tests for handler_for, handlers_for_type and handler_named."""

    @pytest.mark.parametrize("mpn,name", [
        ("LM358N", "Texas Instruments"),
        ("STM32F103C8T6", "STMicroelectronics"),
        ("ACS712ELCTR-05B-T", "Allegro MicroSystems"),
        ("MLX90614ESF-BAA-000-TU", "Melexis"),
        ("SHT40-AD1B-R2", "Sensirion"),
    ])
    def test_handler_for(self, classifier, mpn, name):
        assert classifier.handler_for(mpn).name == name

    def test_handler_for_unknown(self, classifier):
        assert classifier.handler_for("RC0603FR-0710KL") is None
        assert classifier.handler_for(None) is None

    def test_handlers_for_type(self, classifier):
        ic_owners = {handler.name for handler in classifier.handlers_for_type(ComponentType.IC)}
        assert ic_owners == {"Texas Instruments", "STMicroelectronics", "Allegro MicroSystems"}
        sensor_owners = {handler.name for handler in classifier.handlers_for_type(ComponentType.SENSOR)}
        assert sensor_owners == {"Allegro MicroSystems", "Melexis", "Sensirion"}
        assert classifier.handlers_for_type(ComponentType.RESISTOR) == []

    @pytest.mark.parametrize("name,expected", [
        ("Texas Instruments", "Texas Instruments"),
        ("TI", "Texas Instruments"),
        ("texas", "Texas Instruments"),
        ("st micro", "STMicroelectronics"),
        ("STM", "STMicroelectronics"),
        ("Allegro MicroSystems, LLC", "Allegro MicroSystems"),
        ("mlx", "Melexis"),
        ("Sensirion AG", "Sensirion"),
    ])
    def test_handler_named(self, classifier, name, expected):
        assert classifier.handler_named(name).name == expected

    @pytest.mark.parametrize("name", ["Acme", "NXP", "", None])
    def test_handler_named_unknown(self, classifier, name):
        assert classifier.handler_named(name) is None


class TestDelegation:
    """Tests for extraction, replacement and similarity pass-throughs."""

    def test_extract_series(self, classifier):
        assert classifier.extract_series("SN74HC00N") == "74HC00"
        assert classifier.extract_series("STM32F103C8T6") == "STM32F103"
        assert classifier.extract_series("RC0603FR-0710KL") == ""

    def test_extract_package_code(self, classifier):
        assert classifier.extract_package_code("LM358DR") == "SOIC"
        assert classifier.extract_package_code("ACS712ELCTR-05B-T") == "SOIC-8"
        assert classifier.extract_package_code("RC0603FR-0710KL") == ""

    def test_is_official_replacement(self, classifier):
        assert classifier.is_official_replacement("SHT31-DIS-B", "SHT41-AD1B-R2")
        assert not classifier.is_official_replacement("SHT41-AD1B-R2", "SHT31-DIS-B")
        assert classifier.is_official_replacement("LM358N", "LM358DR")
        assert not classifier.is_official_replacement("ACS712ELCTR-05B-T", "ACS712ELCTR-20A-T")
        assert not classifier.is_official_replacement(None, "LM358N")
        assert not classifier.is_official_replacement("RC0603FR-0710KL", "RC0603FR-0710KL")

    def test_similarity(self, classifier):
        assert classifier.similarity("LM358", "LM358N") == pytest.approx(0.9)
        assert classifier.similarity(None, "LM358N") == 0.0

    def test_rank_similar(self, classifier):
        ranked = classifier.rank_similar("LM358", ["LM7805", "LM358N", "LM324"])
        assert [mpn for mpn, _ in ranked] == ["LM324", "LM358N", "LM7805"]

    def test_rank_similar_same_type(self, classifier):
        candidates = ["LM324N", "STM32F103C8T6", "LM7805CT", "ACS712ELCTR-05B-T"]
        ranked = classifier.rank_similar("LM358N", candidates, same_type=True)
        assert [mpn for mpn, _ in ranked] == ["LM324N"]

    def test_rank_similar_same_type_unknown_target(self, classifier):
        assert classifier.rank_similar("RC0603FR-0710KL", ["LM358N"], same_type=True) == []


class TestTypeAwareSimilarity:
    """Tests for similarity dispatch through the family scorers."""

    @pytest.mark.parametrize("mpn_a,mpn_b,expected", [
        ("LM358N", "LM358DR", 0.9),
        ("LM358N", "LM2904D", 0.7),
        ("LM358N", "LM324N", 0.3),
        ("LM7805CT", "LM7805KC", 0.9),
        ("LM7805CT", "LM7805DR", 0.7),
        ("LM7805CT", "LM7812CT", 0.3),
        ("TPS7A4700RGWR", "TPS7A3301RGWR", 0.7),
        ("LM317T", "LM7805CT", 0.3),
        ("STM32F103C8T6", "STM32F103RBT6", 0.9),
        ("STM32F103C8T6", "STM32F100C8T6", 0.7),
        ("STM32F103C8T6", "STM32F401CCU6", 0.3),
        ("ACS712ELCTR-05B-T", "ACS712ELCTR-20A-T", 0.9),
        ("ACS712ELCTR-05B-T", "MLX91208CAL-ABA-001-RE", 0.7),
        ("MLX90614ESF-BAA-000-TU", "STS31-DIS", 0.7),
        ("SHT31-DIS-B", "SHT31-ARP-B", 0.9),
        ("SHT31-DIS-B", "SHT41-AD1B-R2", 0.7),
        ("SHT31-DIS-B", "ACS712ELCTR-05B-T", 0.3),
        ("SN74HC00N", "SN74LS00N", 0.7),
        ("SN74HC00N", "SN74HC04N", 0.3),
    ])
    def test_family_grades(self, classifier, mpn_a, mpn_b, expected):
        assert classifier.similarity(mpn_a, mpn_b) == pytest.approx(expected)
        assert classifier.similarity(mpn_b, mpn_a) == pytest.approx(expected)

    @pytest.mark.parametrize("mpn_a,mpn_b", [
        ("LM358N", "LM7805CT"),
        ("A4988SETTR-T", "A4983SETTR-T"),
        ("RC0603FR-0710KL", "RC0603FR-0747KL"),
        ("LM358N", "RC0603FR-0710KL"),
    ])
    def test_falls_back_to_composite(self, classifier, mpn_a, mpn_b):
        assert classifier.similarity(mpn_a, mpn_b) == composite_similarity(mpn_a, mpn_b)

    def test_identical_and_missing(self, classifier):
        assert classifier.similarity("STM32F103C8T6", "STM32F103C8T6") == 1.0
        assert classifier.similarity("", "LM358N") == 0.0

    def test_profile(self, classifier):
        profile = classifier.profile("lm358dr")
        assert profile.mpn == "LM358DR"
        assert profile.component_type is ComponentType.OPAMP_TI
        assert profile.series == "LM358"
        assert profile.package == "SOIC"
        assert classifier.profile("RC0603FR-0710KL") is None

    def test_rank_same_type_uses_family_grades(self, classifier):
        candidates = ["LM324N", "LM2904D", "LM358DR", "LM7805CT"]
        ranked = classifier.rank_similar("LM358N", candidates, same_type=True)
        assert ranked == [
            ("LM358DR", pytest.approx(0.9)),
            ("LM2904D", pytest.approx(0.7)),
            ("LM324N", pytest.approx(0.3)),
        ]
