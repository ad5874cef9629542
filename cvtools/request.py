"""
Validation of parsed command line options into a single conversion request.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import ArgumentError
from .units import normalize


def parse_value(raw_value: str) -> float:
    """
    Parses the unlabeled command line argument as a finite real number.

    Raises:
    * ArgumentError -- The string is not a number, or is infinite or NaN.
    """
    try:
        value = float(raw_value)
    except ValueError:
        raise ArgumentError("Value must be a valid number.") from None
    if not math.isfinite(value):
        raise ArgumentError("Value must be a valid number.")
    return value


@dataclass(frozen=True)
class ConvertRequest:
    """
    A single invocation of the converter. Unit symbols are already alias
    normalized but not yet classified.
    """

    from_unit: str = ""
    to_unit: str = ""
    value: float = 0.0
    show_help: bool = False
    list_units: bool = False
    show_version: bool = False

    @property
    def informational(self) -> bool:
        """True if the request only asks for help, the unit list or version."""
        return self.show_help or self.list_units or self.show_version

    @classmethod
    def from_options(
        cls,
        from_unit: Optional[str],
        to_unit: Optional[str],
        value: Optional[str],
        show_help: bool = False,
        list_units: bool = False,
        show_version: bool = False,
    ) -> ConvertRequest:
        """
        Builds a request from raw option values, None meaning the option was
        not given at all.

        Raises:
        * ArgumentError -- The value is not a number, or a required option is
        missing or empty while not in help, list or version mode.
        """
        request = cls(
            from_unit=normalize(from_unit) if from_unit is not None else "",
            to_unit=normalize(to_unit) if to_unit is not None else "",
            value=parse_value(value) if value is not None else 0.0,
            show_help=show_help,
            list_units=list_units,
            show_version=show_version,
        )
        if request.informational:
            return request

        missing = [
            name
            for name, given in (
                ("-f/--from", from_unit is not None),
                ("-t/--to", to_unit is not None),
                ("value", value is not None),
            )
            if not given
        ]
        if missing:
            raise ArgumentError(f"Missing required arguments: {', '.join(missing)}.")
        if not request.from_unit or not request.to_unit:
            raise ArgumentError("Units for '-f/--from' and '-t/--to' cannot be empty.")
        return request
