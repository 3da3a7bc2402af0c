"""
Input Validation Module.
Physical and engineering-sanity checks for profile calculations.

Blocking problems are reported as errors, unusual but acceptable values as
warnings. No validator raises; every outcome is returned as data, and
``is_valid`` is the only signal a caller needs before running the engine.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, TypeVar, Union

import numpy as np

from .material_library import MaterialData, MaterialType
from .profiles import ProfileFamily, get_required_dimensions, is_plate_family
from .units import parse_number

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class ValidationResult:
    """Outcome of a validation check."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_messages(cls, errors: List[str], warnings: List[str]) -> 'ValidationResult':
        return cls(is_valid=not errors, errors=errors, warnings=warnings)

    def get_summary(self) -> str:
        """Get validation summary."""
        return f"Validation: {len(self.errors)} errors, {len(self.warnings)} warnings"


@dataclass
class DimensionValidation(ValidationResult):
    """Validation of a single dimension with its parsed value."""
    dimension: str = ""
    value: Optional[float] = None
    unit: str = "mm"


# ===== Limits =====

@dataclass(frozen=True)
class Range:
    min: float
    max: float


@dataclass(frozen=True)
class ValidationLimits:
    dimensions: Range = Range(0.001, 100000)     # mm
    length: Range = Range(0.1, 1000000)          # mm
    temperature: Range = Range(-273.15, 5000)    # °C
    density: Range = Range(0.1, 30)              # g/cm³


VALIDATION_LIMITS = ValidationLimits()

THIN_WALL_LIMIT = 0.5
THICK_WALL_LIMIT = 100
PRECISION_DECIMALS = 3


def _fmt(value: float) -> str:
    """Shortest plain-decimal rendering (12 -> '12', 0.3 -> '0.3')."""
    return np.format_float_positional(float(value), trim='-')


def _decimal_places(value: float) -> int:
    exponent = Decimal(repr(float(value))).as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == '')


# ===== Profile-specific rules =====

@dataclass(frozen=True)
class DimensionRule:
    """Advisory bound on one dimension of a profile family."""
    dimension: str
    message: str
    below: Optional[float] = None
    above: Optional[float] = None

    def check(self, dimension: str, value: float) -> Optional[str]:
        if dimension != self.dimension:
            return None
        if self.below is not None and value < self.below:
            return self.message
        if self.above is not None and value > self.above:
            return self.message
        return None


_I_BEAM_RULES = (
    DimensionRule('h', 'Height below 80mm may not be practical for structural I-beams', below=80),
    DimensionRule('b', 'Flange width below 50mm may cause stability issues', below=50),
    DimensionRule('tw', 'Web thickness below 3mm may be insufficient for structural loads', below=3),
)
_CHANNEL_RULES = (
    DimensionRule('h', 'Channel height below 50mm is uncommon for structural applications', below=50),
)
_HOLLOW_RULES = (
    DimensionRule('t', 'Wall thickness below 1.5mm may be insufficient for structural hollow sections', below=1.5),
)

PROFILE_DIMENSION_RULES: Dict[ProfileFamily, Tuple[DimensionRule, ...]] = {
    ProfileFamily.HEA: _I_BEAM_RULES,
    ProfileFamily.HEB: _I_BEAM_RULES,
    ProfileFamily.IPN: _I_BEAM_RULES,
    ProfileFamily.IPE: _I_BEAM_RULES,
    ProfileFamily.UPN: _CHANNEL_RULES,
    ProfileFamily.UNP: _CHANNEL_RULES,
    ProfileFamily.ROUND: (
        DimensionRule('diameter', 'Large diameter rounds may require special handling', above=500),
    ),
    ProfileFamily.RHS: _HOLLOW_RULES,
    ProfileFamily.SHS: _HOLLOW_RULES,
}


def _profile_warnings(family, dimension: str, value: float) -> List[str]:
    parsed = ProfileFamily.parse(family)
    rules = PROFILE_DIMENSION_RULES.get(parsed, ()) if parsed else ()
    messages = (rule.check(dimension, value) for rule in rules)
    return [m for m in messages if m]


def _is_thickness(dimension: str) -> bool:
    return 'thickness' in dimension.lower() or dimension in ('t', 'tw', 'tf')


# ===== Dimension =====

def validate_dimension(
    dimension: str,
    value: Union[str, float, int, None],
    unit: str = 'mm',
    family=None
) -> DimensionValidation:
    """
    Validate one user-entered dimension.

    Args:
        dimension: Dimension name (e.g. 'h', 'tf', 'diameter')
        value: Raw input, string or number
        unit: Display unit used in messages
        family: Optional profile family enabling family-specific warnings

    Returns:
        DimensionValidation with the parsed value (None on parse failure)
    """
    errors: List[str] = []
    warnings: List[str] = []

    if _is_blank(value):
        errors.append(f"{dimension} is required")
        return DimensionValidation(False, errors, warnings, dimension, None, unit)

    num_value = parse_number(value)
    if num_value is None:
        errors.append(f"{dimension} must be a valid number")
        return DimensionValidation(False, errors, warnings, dimension, None, unit)

    limits = VALIDATION_LIMITS.dimensions
    if num_value <= limits.min:
        errors.append(f"{dimension} must be greater than {_fmt(limits.min)} {unit}")
    if num_value > limits.max:
        errors.append(f"{dimension} cannot exceed {_fmt(limits.max)} {unit}")

    if _is_thickness(dimension):
        if num_value < THIN_WALL_LIMIT:
            warnings.append(
                f"{dimension} of {_fmt(num_value)} {unit} is very thin for structural applications")
        if num_value > THICK_WALL_LIMIT:
            warnings.append(f"{dimension} of {_fmt(num_value)} {unit} is unusually thick")

    if family is not None and num_value > 0:
        warnings.extend(_profile_warnings(family, dimension, num_value))

    if num_value < 1 and _decimal_places(num_value) > PRECISION_DECIMALS:
        warnings.append(
            f"High precision value for {dimension} - consider rounding to {PRECISION_DECIMALS} decimal places")

    return DimensionValidation(not errors, errors, warnings, dimension, num_value, unit)


# ===== Temperature =====

def validate_temperature(temperature: Union[str, float, int, None]) -> ValidationResult:
    """Validate an optional operating temperature (°C)."""
    errors: List[str] = []
    warnings: List[str] = []

    if _is_blank(temperature):
        return ValidationResult.from_messages(errors, warnings)

    temp_value = parse_number(temperature)
    if temp_value is None:
        errors.append("Temperature must be a valid number")
        return ValidationResult.from_messages(errors, warnings)

    limits = VALIDATION_LIMITS.temperature
    if temp_value < limits.min:
        errors.append(f"Temperature cannot be below {_fmt(limits.min)}°C (absolute zero)")
    if temp_value > limits.max:
        errors.append(f"Temperature cannot exceed {_fmt(limits.max)}°C")

    if temp_value < -200:
        warnings.append("Cryogenic temperatures may significantly affect material properties")
    if temp_value > 1000:
        warnings.append("High temperatures may cause material degradation")
    if temp_value < 0:
        warnings.append("Sub-zero temperatures may affect material brittleness")

    return ValidationResult.from_messages(errors, warnings)


@dataclass(frozen=True)
class MaterialTemperatureRule:
    """
    Advisory temperature bound for a material family.

    Matched by category tag when the material has a known one, otherwise by
    a keyword in the material name.
    """
    keyword: str
    categories: FrozenSet[MaterialType]
    message: str
    above: Optional[float] = None
    below: Optional[float] = None

    def applies_to(self, material_name: str, category: Optional[MaterialType]) -> bool:
        if category is not None:
            return category in self.categories
        return self.keyword in material_name.lower()

    def triggered(self, temperature: float) -> bool:
        if self.above is not None and temperature > self.above:
            return True
        return self.below is not None and temperature < self.below


_STEELS = frozenset({MaterialType.STEEL, MaterialType.STAINLESS})

MATERIAL_TEMPERATURE_RULES: Tuple[MaterialTemperatureRule, ...] = (
    MaterialTemperatureRule(
        'steel', _STEELS, 'High temperature may cause steel tempering and strength reduction', above=700),
    MaterialTemperatureRule(
        'steel', _STEELS, 'Low temperature may increase steel brittleness', below=-40),
    MaterialTemperatureRule(
        'aluminum', frozenset({MaterialType.ALUMINUM}),
        'High temperature may cause aluminum annealing and strength loss', above=300),
)

MELTING_POINT_WARNING_RATIO = 0.8


def _category(material_type) -> Optional[MaterialType]:
    if isinstance(material_type, MaterialType):
        return material_type
    try:
        return MaterialType(material_type)
    except ValueError:
        return None


def validate_material_temperature(
    material_name: str,
    temperature: float,
    melting_point: float,
    material_type: Union[MaterialType, str, None] = None
) -> ValidationResult:
    """
    Cross-check an operating temperature against a material.

    Args:
        material_name: Display name, used in messages and for keyword rules
        temperature: Operating temperature (°C)
        melting_point: Melting point of the material (°C)
        material_type: Optional category tag selecting the rule set
    """
    errors: List[str] = []
    warnings: List[str] = []

    if temperature >= melting_point:
        errors.append(
            f"Temperature ({_fmt(temperature)}°C) exceeds melting point of "
            f"{material_name} ({_fmt(melting_point)}°C)")

    if temperature > melting_point * MELTING_POINT_WARNING_RATIO:
        warnings.append(
            f"Temperature approaching melting point of {material_name} - "
            f"material properties may be significantly altered")

    category = _category(material_type)
    for rule in MATERIAL_TEMPERATURE_RULES:
        if rule.applies_to(material_name, category) and rule.triggered(temperature):
            warnings.append(rule.message)

    return ValidationResult.from_messages(errors, warnings)


# ===== Complete calculation =====

def validate_calculation_inputs(
    family,
    dimensions: Mapping[str, Union[str, float, int]],
    length: Union[str, float, int, None],
    material: Optional[MaterialData],
    temperature: Union[str, float, int, None] = None
) -> ValidationResult:
    """
    Validate everything a calculation needs.

    Every field is checked so that all problems are reported at once.

    Args:
        family: Profile family tag or ProfileFamily
        dimensions: Raw dimension inputs keyed by dimension name
        length: Raw member length (ignored for plates, which carry it as a dimension)
        material: Selected material, or None
        temperature: Optional raw operating temperature
    """
    errors: List[str] = []
    warnings: List[str] = []

    parsed = ProfileFamily.parse(family)
    if parsed is None:
        errors.append(f"Unknown profile type '{family}'")
        tag = family
    else:
        tag = parsed.value

    for dimension in get_required_dimensions(parsed):
        raw = dimensions.get(dimension)
        if _is_blank(raw):
            errors.append(f"{dimension} is required for {tag} profile")
            continue

        result = validate_dimension(dimension, raw, 'mm', parsed)
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    if not is_plate_family(parsed):
        if _is_blank(length):
            errors.append("Length is required")
        else:
            result = validate_dimension('length', length, 'mm')
            errors.extend(result.errors)
            warnings.extend(result.warnings)

    if material is None:
        errors.append("Material selection is required")

    if not _is_blank(temperature):
        temp_result = validate_temperature(temperature)
        errors.extend(temp_result.errors)
        warnings.extend(temp_result.warnings)

        if material is not None and temp_result.is_valid:
            material_result = validate_material_temperature(
                material.name,
                parse_number(temperature),
                material.melting_point,
                material.type or None
            )
            errors.extend(material_result.errors)
            warnings.extend(material_result.warnings)

    result = ValidationResult.from_messages(errors, warnings)
    if not result.is_valid:
        logger.debug(f"{tag}: {result.get_summary()}")
    return result


def validate_batch(items: Iterable[T], validator: Callable[[T], ValidationResult]) -> ValidationResult:
    """Run a validator over several items and merge the outcomes."""
    errors: List[str] = []
    warnings: List[str] = []
    for item in items:
        result = validator(item)
        errors.extend(result.errors)
        warnings.extend(result.warnings)
    return ValidationResult.from_messages(errors, warnings)


# ===== Structured errors =====

class ErrorType(Enum):
    """Error categories."""
    VALIDATION = "VALIDATION"
    CALCULATION = "CALCULATION"
    NETWORK = "NETWORK"
    SYSTEM = "SYSTEM"
    USER_INPUT = "USER_INPUT"


@dataclass
class StructuredError:
    """Categorized error with details for display and logging."""
    type: ErrorType
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


def create_error(
    error_type: ErrorType,
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    context: Optional[Dict[str, Any]] = None
) -> StructuredError:
    """Create a structured error stamped with the current time."""
    return StructuredError(
        type=error_type,
        code=code,
        message=message,
        details=details or {},
        context=context or {}
    )


def format_error_message(error: StructuredError) -> str:
    """Prefix the message with its category."""
    return f"[{error.type.value}] {error.message}"
