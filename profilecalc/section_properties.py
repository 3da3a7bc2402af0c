"""
Structural Section Properties Module.
Closed-form cross-sectional properties (area, second moments of area,
section moduli, radii of gyration, centroid, perimeter, weight per metre)
for standard structural profile families.

All derived quantities are in centimeters: area cm², I cm⁴, S cm³, r cm.
Density is in g/cm³ and weight in kg/m.

The engine is fail-soft: an unknown family or a missing, unparsable or zero
required dimension yields the all-zero ``StructuralProperties.empty()``
sentinel instead of an exception. A zero-area result therefore says nothing
about input validity; gate on ``validate_calculation_inputs`` first.
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional, Union

import numpy as np

from .profiles import (
    ProfileFamily,
    PROFILES,
    I_BEAM_FAMILIES,
    CHANNEL_FAMILIES,
    PLATE_FAMILIES,
)
from .units import parse_number

logger = logging.getLogger(__name__)

REFERENCE_TEMPERATURE = 20.0  # °C, density reference for thermal adjustment
DEFAULT_DENSITY = 7.85        # g/cm³, used by area-only queries

DimensionInput = Mapping[str, Union[str, float, int]]


@dataclass(frozen=True)
class StructuralProperties:
    """Cross-sectional properties of a profile."""
    area: float = 0.0                    # Cross-sectional area (cm²)
    moment_of_inertia_x: float = 0.0     # Second moment of area about X (cm⁴)
    moment_of_inertia_y: float = 0.0     # Second moment of area about Y (cm⁴)
    section_modulus_x: float = 0.0       # Section modulus about X (cm³)
    section_modulus_y: float = 0.0       # Section modulus about Y (cm³)
    radius_of_gyration_x: float = 0.0    # Radius of gyration about X (cm)
    radius_of_gyration_y: float = 0.0    # Radius of gyration about Y (cm)
    centroid_x: float = 0.0              # Centroid X coordinate (cm)
    centroid_y: float = 0.0              # Centroid Y coordinate (cm)
    perimeter: float = 0.0               # Perimeter (cm)
    weight: float = 0.0                  # Weight per unit length (kg/m)

    # Temperature-adjusted computation only
    adjusted_density: Optional[float] = None      # g/cm³
    operating_temperature: Optional[float] = None  # °C

    # True for the fail-soft sentinel
    is_empty: bool = False

    @classmethod
    def empty(cls) -> 'StructuralProperties':
        """All-zero result for inputs the engine cannot evaluate."""
        return cls(is_empty=True)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'area': self.area,
            'moment_of_inertia_x': self.moment_of_inertia_x,
            'moment_of_inertia_y': self.moment_of_inertia_y,
            'section_modulus_x': self.section_modulus_x,
            'section_modulus_y': self.section_modulus_y,
            'radius_of_gyration_x': self.radius_of_gyration_x,
            'radius_of_gyration_y': self.radius_of_gyration_y,
            'centroid_x': self.centroid_x,
            'centroid_y': self.centroid_y,
            'perimeter': self.perimeter,
            'weight': self.weight,
            'adjusted_density': self.adjusted_density,
            'operating_temperature': self.operating_temperature,
            'is_empty': self.is_empty
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StructuralProperties':
        """Deserialize from dictionary."""
        return cls(**data)


def _build(area, ix, iy, sx, sy, rx, ry, cx, cy, perimeter, density) -> StructuralProperties:
    """Assemble a result from numpy scalars; weight = A·ρ/1000 (kg/m)."""
    return StructuralProperties(
        area=float(area),
        moment_of_inertia_x=float(ix),
        moment_of_inertia_y=float(iy),
        section_modulus_x=float(sx),
        section_modulus_y=float(sy),
        radius_of_gyration_x=float(rx),
        radius_of_gyration_y=float(ry),
        centroid_x=float(cx),
        centroid_y=float(cy),
        perimeter=float(perimeter),
        weight=float(area * density / 1000),
    )


# ============================================================================
# Basic shapes
# ============================================================================

def _rectangular(dims, density):
    b = dims['width']
    h = dims['height']
    return _solid_rectangle(b, h, density)


def _solid_rectangle(b, h, density):
    """Solid rectangle b wide and h high."""
    area = b * h
    ix = b * h**3 / 12
    iy = h * b**3 / 12
    return _build(
        area, ix, iy,
        ix / (h / 2), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, h / 2,
        2 * (b + h),
        density
    )


def _round(dims, density):
    d = dims['diameter']
    r = d / 2
    area = np.pi * r**2
    i = np.pi * d**4 / 64
    s = i / r
    rg = np.sqrt(i / area)
    return _build(area, i, i, s, s, rg, rg, r, r, np.pi * d, density)


def _square(dims, density):
    a = dims['side']
    area = a**2
    i = a**4 / 12
    s = i / (a / 2)
    rg = np.sqrt(i / area)
    return _build(area, i, i, s, s, rg, rg, a / 2, a / 2, 4 * a, density)


def _flat(dims, density):
    # Thin bar: thickness plays the role of height
    return _solid_rectangle(dims['width'], dims['thickness'], density)


def _hexagonal(dims, density):
    s = dims['distance'] / 2  # side length from distance across flats
    area = (3 * np.sqrt(3) / 2) * s**2
    i = (5 * np.sqrt(3) / 16) * s**4
    modulus = i / (np.sqrt(3) * s / 2)
    rg = np.sqrt(i / area)
    return _build(area, i, i, modulus, modulus, rg, rg, s, s, 6 * s, density)


# ============================================================================
# Beams, channels and angles
# ============================================================================

def _i_beam(dims, density):
    """
    Doubly symmetric I/H section.

    Iy counts the two flanges only; the web contribution is neglected.
    """
    h, b, tw, tf = dims['h'], dims['b'], dims['tw'], dims['tf']

    area = 2 * b * tf + (h - 2 * tf) * tw
    ix = b * h**3 / 12 - (b - tw) * (h - 2 * tf)**3 / 12
    iy = 2 * tf * b**3 / 12

    return _build(
        area, ix, iy,
        ix / (h / 2), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, h / 2,
        2 * b + 2 * (h - 2 * tf) + 4 * tf,
        density
    )


def _channel(dims, density):
    """U/C channel; centroid offset of the open section is not computed."""
    h, b, tw, tf = dims['h'], dims['b'], dims['tw'], dims['tf']

    area = b * tf + (h - tf) * tw
    ix = tw * h**3 / 12 + (b - tw) * tf * (h - tf / 2)**2
    iy = tf * b**3 / 12

    return _build(
        area, ix, iy,
        ix / (h / 2), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, h / 2,
        2 * h + 2 * b - tw,
        density
    )


def _equal_angle(dims, density):
    a, t = dims['a'], dims['t']

    area = (2 * a - t) * t
    i = t * (a**4 - (a - t)**4) / 12
    s = i / (a / np.sqrt(2))  # extreme fiber measured along the 45° axis
    rg = np.sqrt(i / area)

    return _build(area, i, i, s, s, rg, rg, a / 2, a / 2, 2 * a - 2 * t, density)


def _unequal_angle(dims, density):
    """Simplified: axes parallel to the legs, principal rotation ignored."""
    a, b, t = dims['a'], dims['b'], dims['t']

    area = (a + b - t) * t
    ix = t * (a**4 - (a - t)**4) / 12
    iy = t * (b**4 - (b - t)**4) / 12

    return _build(
        area, ix, iy,
        ix / (a / 2), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, a / 2,
        a + b - 2 * t,
        density
    )


# ============================================================================
# Hollow sections
# ============================================================================

def _rhs(dims, density):
    h, b, t = dims['h'], dims['b'], dims['t']
    hi = h - 2 * t
    bi = b - 2 * t

    area = h * b - hi * bi
    ix = (b * h**3 - bi * hi**3) / 12
    iy = (h * b**3 - hi * bi**3) / 12

    return _build(
        area, ix, iy,
        ix / (h / 2), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, h / 2,
        2 * (h + b),
        density
    )


def _shs(dims, density):
    a, t = dims['a'], dims['t']
    ai = a - 2 * t

    area = a**2 - ai**2
    i = (a**4 - ai**4) / 12
    s = i / (a / 2)
    rg = np.sqrt(i / area)

    return _build(area, i, i, s, s, rg, rg, a / 2, a / 2, 4 * a, density)


def _circular_hollow(od, t, density):
    id_ = od - 2 * t

    area = np.pi * ((od / 2)**2 - (id_ / 2)**2)
    i = (np.pi / 64) * (od**4 - id_**4)
    s = i / (od / 2)
    rg = np.sqrt(i / area)

    return _build(area, i, i, s, s, rg, rg, od / 2, od / 2, np.pi * od, density)


def _chs(dims, density):
    return _circular_hollow(dims['od'], dims['t'], density)


def _pipe(dims, density):
    # Pipe is a CHS whose wall thickness is called `wt`
    return _circular_hollow(dims['od'], dims['wt'], density)


# ============================================================================
# Special sections
# ============================================================================

def _t_beam(dims, density):
    """T section; flange on top, y measured from the flange face."""
    h, b, tw, tf = dims['h'], dims['b'], dims['tw'], dims['tf']

    a1 = b * tf              # flange
    y1 = tf / 2
    a2 = (h - tf) * tw       # web
    y2 = tf + (h - tf) / 2
    area = a1 + a2

    yc = (a1 * y1 + a2 * y2) / area

    # Parallel-axis theorem about the centroid
    i1 = b * tf**3 / 12 + a1 * (y1 - yc)**2
    i2 = tw * (h - tf)**3 / 12 + a2 * (y2 - yc)**2
    ix = i1 + i2
    iy = tf * b**3 / 12 + tw**3 * (h - tf) / 12

    return _build(
        area, ix, iy,
        ix / max(yc, h - yc), iy / (b / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        b / 2, yc,
        2 * b + 2 * (h - tf) + tw,
        density
    )


def _bulb_flat(dims, density):
    """Approximation: flat bar plus a half-disc bulb; inertia of the flat only."""
    h, b, t = dims['h'], dims['b'], dims['t']

    area = h * t + np.pi * (b / 2)**2 / 2
    ix = t * h**3 / 12
    iy = h * t**3 / 12

    return _build(
        area, ix, iy,
        ix / (h / 2), iy / (t / 2),
        np.sqrt(ix / area), np.sqrt(iy / area),
        t / 2, h / 2,
        2 * h + t + np.pi * b / 2,
        density
    )


def _half_round(dims, density):
    """Approximation treating the profile as a thin half-ring."""
    d, t = dims['d'], dims['t']

    area = np.pi * d * t / 2
    i = np.pi * d * t**3 / 8
    s = i / (t / 2)
    rg = np.sqrt(i / area)

    return _build(
        area, i, i / 2,
        s, s / 2,
        rg, rg / np.sqrt(2),
        d / 2, t / 2,
        np.pi * d / 2 + d,
        density
    )


def _plate(dims, density):
    # Plate length runs along the member and does not enter the section
    return _solid_rectangle(dims['width'], dims['thickness'], density)


# ============================================================================
# Dispatch
# ============================================================================

_FORMULAS: Dict[ProfileFamily, Callable[[dict, float], StructuralProperties]] = {
    ProfileFamily.RECTANGULAR: _rectangular,
    ProfileFamily.ROUND: _round,
    ProfileFamily.SQUARE: _square,
    ProfileFamily.FLAT: _flat,
    ProfileFamily.HEXAGONAL: _hexagonal,
    ProfileFamily.EQUAL_ANGLE: _equal_angle,
    ProfileFamily.UNEQUAL_ANGLE: _unequal_angle,
    ProfileFamily.RHS: _rhs,
    ProfileFamily.SHS: _shs,
    ProfileFamily.CHS: _chs,
    ProfileFamily.PIPE: _pipe,
    ProfileFamily.T_BEAM: _t_beam,
    ProfileFamily.BULB_FLAT: _bulb_flat,
    ProfileFamily.HALF_ROUND: _half_round,
}
_FORMULAS.update({family: _i_beam for family in I_BEAM_FAMILIES})
_FORMULAS.update({family: _channel for family in CHANNEL_FAMILIES})
_FORMULAS.update({family: _plate for family in PLATE_FAMILIES})

_unmapped = set(ProfileFamily) - set(_FORMULAS)
if _unmapped:
    raise RuntimeError(f"No section formula for: {sorted(f.value for f in _unmapped)}")


def _scale_dimensions(dimensions: DimensionInput, length_factor: float) -> Dict[str, np.float64]:
    """Parse raw magnitudes and convert them to centimeters."""
    scaled = {}
    for key, raw in dimensions.items():
        value = parse_number(raw)
        if value is not None:
            scaled[key] = np.float64(value) * np.float64(length_factor)
    return scaled


def compute_properties(
    family,
    dimensions: DimensionInput,
    density: float,
    length_factor: float
) -> StructuralProperties:
    """
    Compute the cross-sectional properties of a profile.

    Args:
        family: Profile family tag (e.g. 'hea') or ProfileFamily
        dimensions: Raw magnitudes in the display unit, keyed by dimension name
        density: Material density (g/cm³)
        length_factor: Display unit to centimeter factor (mm -> 0.1)

    Returns:
        StructuralProperties, or the empty sentinel when the family is
        unknown or a required dimension is absent, unparsable or zero
    """
    parsed = ProfileFamily.parse(family)
    if parsed is None:
        logger.debug(f"Unknown profile family {family!r}, returning empty properties")
        return StructuralProperties.empty()

    dims = _scale_dimensions(dimensions, length_factor)
    missing = [key for key in PROFILES[parsed].dimensions if not dims.get(key)]
    if missing:
        logger.debug(f"{parsed.value}: missing dimensions {missing}, returning empty properties")
        return StructuralProperties.empty()

    # Degenerate magnitudes produce inf/nan rather than raising
    with np.errstate(all='ignore'):
        return _FORMULAS[parsed](dims, np.float64(density))


def adjust_density_for_temperature(
    base_density: float,
    temperature_coefficient: Optional[float],
    operating_temperature: float,
    reference_temperature: float = REFERENCE_TEMPERATURE
) -> float:
    """
    First-order density correction.

    ρ(T) = ρ0 · (1 + k · (T - T_ref))

    Unchanged when no (or a zero) coefficient is given.
    """
    if not temperature_coefficient:
        return base_density
    delta = operating_temperature - reference_temperature
    return base_density * (1 + temperature_coefficient * delta)


def compute_properties_with_temperature(
    family,
    dimensions: DimensionInput,
    density: float,
    length_factor: float,
    operating_temperature: Optional[float] = None,
    temperature_coefficient: Optional[float] = None
) -> StructuralProperties:
    """
    Compute properties with a temperature-adjusted density.

    The result carries the adjusted density and the operating temperature
    that produced it.
    """
    if operating_temperature is not None:
        adjusted_density = adjust_density_for_temperature(
            density, temperature_coefficient, operating_temperature
        )
    else:
        adjusted_density = density

    properties = compute_properties(family, dimensions, adjusted_density, length_factor)
    return replace(
        properties,
        adjusted_density=adjusted_density,
        operating_temperature=operating_temperature
    )


# ============================================================================
# Legacy helpers
# ============================================================================

def calculate_cross_sectional_area(
    family,
    dimensions: DimensionInput,
    length_factor: float
) -> float:
    """Cross-sectional area (cm²)."""
    return compute_properties(family, dimensions, DEFAULT_DENSITY, length_factor).area


def calculate_weight(
    family,
    dimensions: DimensionInput,
    length: float,
    density: float,
    length_factor: float,
    weight_factor: float
) -> float:
    """
    Weight of a member of given length.

    W = A · (L · length_factor) · ρ · weight_factor

    Returns 0 when area or length is not positive.
    """
    area = calculate_cross_sectional_area(family, dimensions, length_factor)
    if area > 0 and length > 0:
        volume = area * (length * length_factor)
        return volume * density * weight_factor
    return 0.0
