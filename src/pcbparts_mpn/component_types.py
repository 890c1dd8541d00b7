"""Component type taxonomy.

A closed set of tags with a base/derived relationship. Manufacturer-specific
types derive from a generic type, and some generic types derive from a broader
category (e.g. SENSOR_CURRENT_ALLEGRO -> SENSOR_CURRENT -> SENSOR). Following
``base_type`` reaches a fixed point in at most two hops.
"""

from enum import Enum


class ComponentType(Enum):
    """Electronic component type.

    Each member's value is ``(label, passive, semiconductor, base_name, manufacturer)``.
    ``base_name`` is None for generic types; ``manufacturer`` is None unless
    the type belongs to a single manufacturer's product line.
    """

    # =========================================================================
    # Generic types
    # =========================================================================
    RESISTOR = ("Resistor", True, False, None, None)
    CAPACITOR = ("Capacitor", True, False, None, None)
    INDUCTOR = ("Inductor", True, False, None, None)
    CRYSTAL = ("Crystal", True, False, None, None)
    DIODE = ("Diode", False, True, None, None)
    TRANSISTOR = ("Transistor", False, True, None, None)
    MOSFET = ("MOSFET", False, True, None, None)
    LED = ("LED", False, True, None, None)
    IC = ("IC", False, True, None, None)
    MICROCONTROLLER = ("Microcontroller", False, True, None, None)
    OPAMP = ("Op-amp", False, True, None, None)
    VOLTAGE_REGULATOR = ("Voltage regulator", False, True, None, None)
    OSCILLATOR = ("Oscillator", False, True, None, None)
    MEMORY = ("Memory", False, True, None, None)
    LOGIC_IC = ("Logic IC", False, True, None, None)
    MOTOR_DRIVER = ("Motor driver", False, True, None, None)
    LED_DRIVER = ("LED driver", False, True, None, None)
    SENSOR = ("Sensor", False, True, None, None)
    CONNECTOR = ("Connector", False, False, None, None)

    # =========================================================================
    # Derived generic types
    # =========================================================================
    MEMORY_FLASH = ("Flash memory", False, True, "MEMORY", None)
    MEMORY_EEPROM = ("EEPROM", False, True, "MEMORY", None)
    SENSOR_CURRENT = ("Current sensor", False, True, "SENSOR", None)
    SENSOR_TEMPERATURE = ("Temperature sensor", False, True, "SENSOR", None)
    SENSOR_HUMIDITY = ("Humidity sensor", False, True, "SENSOR", None)
    HALL_SENSOR = ("Hall sensor", False, True, "SENSOR", None)

    # =========================================================================
    # Manufacturer-specific types
    # =========================================================================
    OPAMP_TI = ("Op-amp, Texas Instruments", False, True, "OPAMP", "Texas Instruments")
    VOLTAGE_REGULATOR_LINEAR_TI = ("Linear regulator, Texas Instruments", False, True, "VOLTAGE_REGULATOR", "Texas Instruments")
    LOGIC_IC_TI = ("Logic IC, Texas Instruments", False, True, "LOGIC_IC", "Texas Instruments")
    MICROCONTROLLER_ST = ("Microcontroller, STMicroelectronics", False, True, "MICROCONTROLLER", "STMicroelectronics")
    SENSOR_CURRENT_ALLEGRO = ("Current sensor, Allegro", False, True, "SENSOR_CURRENT", "Allegro MicroSystems")
    HALL_SENSOR_ALLEGRO = ("Hall sensor, Allegro", False, True, "HALL_SENSOR", "Allegro MicroSystems")
    MOTOR_DRIVER_ALLEGRO = ("Motor driver, Allegro", False, True, "MOTOR_DRIVER", "Allegro MicroSystems")
    SENSOR_TEMPERATURE_MELEXIS = ("Temperature sensor, Melexis", False, True, "SENSOR_TEMPERATURE", "Melexis")
    HALL_SENSOR_MELEXIS = ("Hall sensor, Melexis", False, True, "HALL_SENSOR", "Melexis")
    SENSOR_HUMIDITY_SENSIRION = ("Humidity sensor, Sensirion", False, True, "SENSOR_HUMIDITY", "Sensirion")

    def __init__(
        self,
        label: str,
        passive: bool,
        semiconductor: bool,
        base_name: str | None,
        manufacturer: str | None,
    ):
        self.label = label
        self.manufacturer = manufacturer
        self._passive = passive
        self._semiconductor = semiconductor
        self._base_name = base_name

    @property
    def is_passive(self) -> bool:
        return self._passive

    @property
    def is_semiconductor(self) -> bool:
        return self._semiconductor

    @property
    def base_type(self) -> "ComponentType":
        """Parent type, or this type if it is already generic."""
        if self._base_name is None:
            return self
        return ComponentType[self._base_name]

    @property
    def generic_type(self) -> "ComponentType":
        """Fixed point of ``base_type`` (the broadest ancestor)."""
        current = self
        while current.base_type is not current:
            current = current.base_type
        return current

    @property
    def is_manufacturer_specific(self) -> bool:
        """True for types tied to a single manufacturer's product line."""
        return self.manufacturer is not None

    def is_same_family(self, other: "ComponentType | None") -> bool:
        """Check if two types share the same generic ancestor."""
        if other is None:
            return False
        return self.generic_type is other.generic_type

    def derived_types(self) -> tuple["ComponentType", ...]:
        """Types whose direct parent is this type."""
        return tuple(t for t in ComponentType if t.base_type is self and t is not self)

    def __str__(self) -> str:
        return self.label
