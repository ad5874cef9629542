"""
Module with static tables of unit information and unit name aliases.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


class UnitCategory(enum.Enum):
    """The kind of measurement a unit is used for."""

    LENGTH = "length"
    MASS = "mass"
    VOLUME = "volume"
    TEMPERATURE = "temperature"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class TemperatureScale(enum.Enum):
    """Tag for each supported temperature scale, valued by its symbol."""

    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"


@dataclass(frozen=True, eq=False)
class UnitInfo:
    """
    An immutable dataclass object that holds information for a unit.

    Attributes:
    * category (UnitCategory) -- The type of measurement the unit is used for.
    * symbol (str) -- The canonical symbol, ie. 'km'. Case sensitive.
    * label (str) -- Full name of the unit, ie. 'kilometer'.
    """

    category: UnitCategory
    symbol: str
    label: str

    def __str__(self) -> str:
        return self.label.capitalize()


@dataclass(frozen=True, eq=False)
class LinearUnit(UnitInfo):
    """
    A unit converted with a single multiplier. The conversion factor is how
    many base units (meter, kilogram, liter) one of this unit equals, and
    should be 1 for base units.

    Raises:
    * ValueError -- The conversion factor is not positive.
    """

    conv_factor: float

    def __post_init__(self) -> None:
        if not self.conv_factor > 0:
            raise ValueError(
                f"Conversion factor for '{self.symbol}' must be positive, "
                f"got {self.conv_factor}."
            )


@dataclass(frozen=True, eq=False)
class TemperatureUnit(UnitInfo):
    """
    A temperature unit. These cannot be converted with a simple factor, see
    cvtools.conversion.to_celsius and from_celsius.
    """

    scale: TemperatureScale


def _length(symbol: str, label: str, conv_factor: float) -> LinearUnit:
    return LinearUnit(UnitCategory.LENGTH, symbol, label, conv_factor)


def _mass(symbol: str, label: str, conv_factor: float) -> LinearUnit:
    return LinearUnit(UnitCategory.MASS, symbol, label, conv_factor)


def _volume(symbol: str, label: str, conv_factor: float) -> LinearUnit:
    return LinearUnit(UnitCategory.VOLUME, symbol, label, conv_factor)


def _temperature(label: str, scale: TemperatureScale) -> TemperatureUnit:
    return TemperatureUnit(UnitCategory.TEMPERATURE, scale.value, label, scale)


# Base unit is meter
_LENGTH_UNITS: dict[str, UnitInfo] = {
    unit.symbol: unit
    for unit in (
        _length("m", "meter", 1.0),
        _length("cm", "centimeter", 0.01),
        _length("mm", "millimeter", 0.001),
        _length("ft", "foot", 0.3048),
        _length("yd", "yard", 0.9144),
        _length("km", "kilometer", 1000.0),
        _length("mi", "mile", 1609.34),
    )
}

# Base unit is kilogram
_MASS_UNITS: dict[str, UnitInfo] = {
    unit.symbol: unit
    for unit in (
        _mass("kg", "kilogram", 1.0),
        _mass("g", "gram", 0.001),
        _mass("lb", "pound", 0.453592),
        _mass("oz", "ounce", 0.0283495),
    )
}

# Base unit is liter. Lowercase 'l', 'ml' and 'ul' are table entries of their
# own and not aliases.
_VOLUME_UNITS: dict[str, UnitInfo] = {
    unit.symbol: unit
    for unit in (
        _volume("L", "liter", 1.0),
        _volume("l", "liter", 1.0),
        _volume("mL", "milliliter", 0.001),
        _volume("ml", "milliliter", 0.001),
        _volume("uL", "microliter", 0.000001),
        _volume("ul", "microliter", 0.000001),
        _volume("gal", "US gallon", 3.78541),
        _volume("qt", "US quart", 0.946353),
        _volume("pt", "US pint", 0.473176),
        _volume("cup", "metric cup", 0.24),
        _volume("floz", "US fluid ounce", 0.0295735),
        _volume("tbsp", "tablespoon", 0.0147868),
        _volume("tsp", "teaspoon", 0.00492892),
        _volume("m3", "cubic meter", 1000.0),
        _volume("cm3", "cubic centimeter", 0.001),
        _volume("cc", "cubic centimeter", 0.001),
        _volume("in3", "cubic inch", 0.0163871),
        _volume("ft3", "cubic foot", 28.3168),
    )
}

# Base unit is celsius
_TEMPERATURE_UNITS: dict[str, UnitInfo] = {
    unit.symbol: unit
    for unit in (
        _temperature("celsius", TemperatureScale.CELSIUS),
        _temperature("fahrenheit", TemperatureScale.FAHRENHEIT),
        _temperature("kelvin", TemperatureScale.KELVIN),
    )
}

# Lookup order for classify()
_ALL_TABLES: dict[UnitCategory, dict[str, UnitInfo]] = {
    UnitCategory.LENGTH: _LENGTH_UNITS,
    UnitCategory.MASS: _MASS_UNITS,
    UnitCategory.VOLUME: _VOLUME_UNITS,
    UnitCategory.TEMPERATURE: _TEMPERATURE_UNITS,
}

CATEGORIES: tuple[UnitCategory, ...] = tuple(_ALL_TABLES)

# Lowercase informal names -> canonical symbol
_ALIASES: dict[str, str] = {
    # length
    "meter": "m",
    "meters": "m",
    "metre": "m",
    "metres": "m",
    "kilometer": "km",
    "kilometers": "km",
    "kilometre": "km",
    "kilometres": "km",
    "foot": "ft",
    "feet": "ft",
    "yard": "yd",
    "yards": "yd",
    "mile": "mi",
    "miles": "mi",
    # mass
    "kilogram": "kg",
    "kilograms": "kg",
    "gram": "g",
    "grams": "g",
    "pound": "lb",
    "pounds": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    # volume
    "liter": "L",
    "liters": "L",
    "litre": "L",
    "litres": "L",
    "milliliter": "mL",
    "milliliters": "mL",
    "millilitre": "mL",
    "millilitres": "mL",
    "cup": "cup",
    "cups": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    # temperature
    "c": "C",
    "celsius": "C",
    "centigrade": "C",
    "f": "F",
    "fahrenheit": "F",
    "k": "K",
    "kelvin": "K",
}

ALIASES: Mapping[str, str] = MappingProxyType(_ALIASES)


def classify(symbol: str) -> UnitCategory:
    """
    Returns the category of a canonical unit symbol, or UnitCategory.UNKNOWN
    if the symbol is not in any unit table. Case sensitive.

    Example:
    >>> classify('km')
    <UnitCategory.LENGTH: 'length'>
    >>> classify('Kg')
    <UnitCategory.UNKNOWN: 'unknown'>
    """
    for category, table in _ALL_TABLES.items():
        if symbol in table:
            return category
    return UnitCategory.UNKNOWN


def normalize(raw_unit: str) -> str:
    """
    Resolves an informal unit name to its canonical symbol. Aliases are
    matched case insensitively, anything else is returned exactly as given so
    canonical symbols like 'L' or 'C' pass through untouched.

    Example:
    >>> normalize('Kilograms')
    'kg'
    >>> normalize('mL')
    'mL'
    """
    canonical = _ALIASES.get(raw_unit.lower())
    if canonical is None:
        return raw_unit
    logger.debug("Resolved unit alias '%s' to '%s'", raw_unit, canonical)
    return canonical


def unit_by_symbol(symbol: str) -> UnitInfo:
    """
    Retrieves unit information based on the units canonical symbol. Case
    sensitive.

    Raises:
    * KeyError -- The unit cannot be found.

    Example:
    >>> unit_by_symbol('lb')
    LinearUnit(
        category=<UnitCategory.MASS: 'mass'>,
        symbol='lb',
        label='pound',
        conv_factor=0.453592
    )
    """
    for table in _ALL_TABLES.values():
        if symbol in table:
            return table[symbol]
    raise KeyError(symbol)


def units_by_category(category: UnitCategory) -> tuple[UnitInfo, ...]:
    """
    All units registered for a category in table order. Returns an empty
    tuple for UnitCategory.UNKNOWN.
    """
    table = _ALL_TABLES.get(category)
    if table is None:
        return ()
    return tuple(table.values())
