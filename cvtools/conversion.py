"""
Conversion of values between two units of the same category.
"""

from __future__ import annotations

import logging
from typing import cast

from .common import quotify_all
from .errors import (
    CategoryUnknownError,
    IncompatibleCategoriesError,
    UnhandledCategoryError,
)
from .units import (
    LinearUnit,
    TemperatureScale,
    TemperatureUnit,
    UnitCategory,
    classify,
    unit_by_symbol,
)

logger = logging.getLogger(__name__)

_LINEAR_CATEGORIES = (UnitCategory.LENGTH, UnitCategory.MASS, UnitCategory.VOLUME)


def to_celsius(scale: TemperatureScale, value: float) -> float:
    """Converts a temperature on the given scale to celsius."""
    if scale is TemperatureScale.CELSIUS:
        return value
    if scale is TemperatureScale.FAHRENHEIT:
        return (value - 32.0) * 5.0 / 9.0
    if scale is TemperatureScale.KELVIN:
        return value - 273.15
    raise UnhandledCategoryError(f"Unhandled temperature scale '{scale}'.")


def from_celsius(scale: TemperatureScale, value: float) -> float:
    """Converts a celsius temperature to the given scale."""
    if scale is TemperatureScale.CELSIUS:
        return value
    if scale is TemperatureScale.FAHRENHEIT:
        return value * 9.0 / 5.0 + 32.0
    if scale is TemperatureScale.KELVIN:
        return value + 273.15
    raise UnhandledCategoryError(f"Unhandled temperature scale '{scale}'.")


def _convert_via_factors(value: float, from_unit: str, to_unit: str) -> float:
    from_info = cast(LinearUnit, unit_by_symbol(from_unit))
    to_info = cast(LinearUnit, unit_by_symbol(to_unit))
    # Ratio first, so that units with equal factors convert exactly. Agrees
    # with value * from_factor / to_factor within float rounding.
    return value * (from_info.conv_factor / to_info.conv_factor)


def _convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    if from_unit == to_unit:
        return value
    from_info = cast(TemperatureUnit, unit_by_symbol(from_unit))
    to_info = cast(TemperatureUnit, unit_by_symbol(to_unit))
    return from_celsius(to_info.scale, to_celsius(from_info.scale, value))


def convert(from_unit: str, to_unit: str, value: float) -> float:
    """
    Converts a floating point value from one unit to another. Both units must
    be canonical symbols (see cvtools.units.normalize) of the same category.

    Raises:
    * CategoryUnknownError -- One or both units are not registered.
    * IncompatibleCategoriesError -- The units are of different categories.

    Example:
    >>> convert('C', 'F', 0)
    32.0
    """
    cat_from = classify(from_unit)
    cat_to = classify(to_unit)
    logger.debug(
        "Converting %s from '%s' (%s) to '%s' (%s)",
        value,
        from_unit,
        cat_from,
        to_unit,
        cat_to,
    )

    if UnitCategory.UNKNOWN in (cat_from, cat_to):
        unknown = [
            unit
            for unit, category in ((from_unit, cat_from), (to_unit, cat_to))
            if category is UnitCategory.UNKNOWN
        ]
        raise CategoryUnknownError(f"Category unknown for unit {quotify_all(unknown)}.")

    if cat_from is not cat_to:
        raise IncompatibleCategoriesError(
            f"Incompatible categories, cannot convert {cat_from} unit "
            f"'{from_unit}' to {cat_to} unit '{to_unit}'."
        )

    if cat_from in _LINEAR_CATEGORIES:
        result = _convert_via_factors(value, from_unit, to_unit)
    elif cat_from is UnitCategory.TEMPERATURE:
        result = _convert_temperature(value, from_unit, to_unit)
    else:
        raise UnhandledCategoryError(f"Unhandled category '{cat_from}'.")

    logger.debug("Conversion result: %s %s", result, to_unit)
    return result
