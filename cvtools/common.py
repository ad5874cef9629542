"""
Common helper methods used in various modules.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def quotify(value: Any) -> str:
    """
    Returns str(value), if input value is already a string we wrap it in single
    quotes.
    """
    return f"'{value}'" if isinstance(value, str) else str(value)


def quotify_all(values: Iterable[Any]) -> str:
    """
    Joins multiple values with 'and' after quotifying each of them.

    >>> quotify_all(['bogus', 'Kg'])
    "'bogus' and 'Kg'"
    """
    return " and ".join(quotify(value) for value in values)


def format_value(value: float) -> str:
    """
    Formats a floating point value with six significant digits and no trailing
    zeros, the same way a default C stream would print it.

    >>> format_value(1000 / 1609.34)
    '0.621373'
    >>> format_value(32.0)
    '32'
    """
    return f"{value:g}"
