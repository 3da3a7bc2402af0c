"""
Unit Conversion Module.
Length and weight unit tables and parsing of user-entered magnitudes.
"""
import math
import re
from dataclasses import dataclass
from typing import Dict, Optional, Union

import numpy as np


@dataclass(frozen=True)
class Unit:
    """Display unit with its conversion factor."""
    name: str
    factor: float


# Factors convert a length in the given unit to centimeters
LENGTH_UNITS: Dict[str, Unit] = {
    'mm': Unit("Millimeters", 0.1),
    'cm': Unit("Centimeters", 1.0),
    'm': Unit("Meters", 100.0),
    'in': Unit("Inches", 2.54),
    'ft': Unit("Feet", 30.48),
}

# Factors convert a mass in grams to the given unit
WEIGHT_UNITS: Dict[str, Unit] = {
    'g': Unit("Grams", 1.0),
    'kg': Unit("Kilograms", 0.001),
    'lb': Unit("Pounds", 0.00220462),
    'oz': Unit("Ounces", 0.035274),
    'ton': Unit("Metric Tons", 0.000001),
}


# Leading decimal literal, the same prefix a browser number field accepts
_NUMBER_PREFIX = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_number(raw: Union[str, float, int, None]) -> Optional[float]:
    """
    Parse a user-entered magnitude.

    Strings are read up to the end of their leading numeric literal, so
    "12.5mm" gives 12.5. Returns None when no number can be read.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float, np.number)):
        try:
            value = float(raw)
        except OverflowError:
            # int beyond float range; copysign would overflow too
            return math.inf if raw > 0 else -math.inf
        return None if np.isnan(value) else value

    match = _NUMBER_PREFIX.match(str(raw))
    if not match:
        return None
    return float(match.group(1))


def get_length_factor(unit: str) -> float:
    """Factor converting `unit` to centimeters."""
    if unit not in LENGTH_UNITS:
        raise ValueError(f"Unknown length unit '{unit}'")
    return LENGTH_UNITS[unit].factor


def get_weight_factor(unit: str) -> float:
    """Factor converting grams to `unit`."""
    if unit not in WEIGHT_UNITS:
        raise ValueError(f"Unknown weight unit '{unit}'")
    return WEIGHT_UNITS[unit].factor


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length between two display units."""
    return value * get_length_factor(from_unit) / get_length_factor(to_unit)
