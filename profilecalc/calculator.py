"""
Member Calculation Module.
Validates inputs, computes section properties and derives the volume and
weight of a member of given length.
"""
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .config_loader import CalculationConfig, get_config
from .material_library import MaterialData, SectionCapacity, calculate_section_capacity
from .profiles import is_plate_family
from .section_properties import (
    REFERENCE_TEMPERATURE,
    StructuralProperties,
    calculate_weight,
    compute_properties,
    compute_properties_with_temperature,
)
from .units import get_length_factor, get_weight_factor, parse_number
from .validation import ValidationResult, validate_calculation_inputs

logger = logging.getLogger(__name__)


class CalculationError(Exception):
    """Raised when validated inputs still produce no usable result."""
    pass


@dataclass
class CalculationOutcome:
    """Result of a member calculation."""
    validation: ValidationResult
    properties: Optional[StructuralProperties] = None
    volume: float = 0.0           # cm³
    weight: float = 0.0           # in weight_unit
    weight_unit: str = "kg"
    effective_density: Optional[float] = None  # g/cm³
    capacity: Optional[SectionCapacity] = None

    @property
    def succeeded(self) -> bool:
        return self.validation.is_valid and self.properties is not None


def _plate_volume(dimensions: Mapping[str, Union[str, float]], length_factor: float) -> float:
    """Plate volume (cm³) from its length, width and thickness."""
    volume = 1.0
    for key in ('length', 'width', 'thickness'):
        volume *= (parse_number(dimensions.get(key)) or 0.0) * length_factor
    return volume


def calculate_member(
    family,
    dimensions: Mapping[str, Union[str, float]],
    length: Union[str, float, None],
    material: Optional[MaterialData],
    length_unit: Optional[str] = None,
    weight_unit: Optional[str] = None,
    temperature: Union[str, float, None] = None,
    use_temperature_effects: Optional[bool] = None,
    config: Optional[CalculationConfig] = None
) -> CalculationOutcome:
    """
    Validate and compute a member.

    Args:
        family: Profile family tag or ProfileFamily
        dimensions: Raw dimension inputs in `length_unit`
        length: Raw member length in `length_unit` (plates use their `length` dimension)
        material: Selected material
        length_unit: Display length unit (defaults from config)
        weight_unit: Weight unit of the result (defaults from config)
        temperature: Optional operating temperature (°C)
        use_temperature_effects: Adjust density for temperature (defaults from config)
        config: Calculation defaults; the global configuration when omitted

    Returns:
        CalculationOutcome; only `validation` is set when validation fails

    Raises:
        ValueError: for unknown units
        CalculationError: if valid inputs give a non-positive area or weight
    """
    config = config or get_config().calculation
    length_unit = length_unit or config.length_unit
    weight_unit = weight_unit or config.weight_unit
    if use_temperature_effects is None:
        use_temperature_effects = config.use_temperature_effects

    validation = validate_calculation_inputs(family, dimensions, length, material, temperature)
    if not validation.is_valid:
        return CalculationOutcome(validation=validation, weight_unit=weight_unit)

    length_factor = get_length_factor(length_unit)
    weight_factor = get_weight_factor(weight_unit)

    if use_temperature_effects:
        temp_value = parse_number(temperature)
        if temp_value is None:
            temp_value = REFERENCE_TEMPERATURE
        properties = compute_properties_with_temperature(
            family, dimensions, material.density, length_factor,
            temp_value, material.temperature_coefficient
        )
    else:
        properties = compute_properties(family, dimensions, material.density, length_factor)

    if properties.area <= 0:
        raise CalculationError("Invalid calculation result - check input dimensions")

    effective_density = properties.adjusted_density or material.density
    length_value = parse_number(length) or 0.0

    if is_plate_family(family):
        volume = _plate_volume(dimensions, length_factor)
        weight = volume * effective_density * weight_factor
    else:
        volume = properties.area * (length_value * length_factor)
        weight = calculate_weight(
            family, dimensions, length_value, effective_density, length_factor, weight_factor
        )

    if weight <= 0:
        raise CalculationError("Invalid weight calculation - check input values")

    logger.info(
        f"{getattr(family, 'value', family)} in {material.name}: "
        f"A={properties.area:.4f} cm², W={weight:.4f} {weight_unit}")

    return CalculationOutcome(
        validation=validation,
        properties=properties,
        volume=volume,
        weight=weight,
        weight_unit=weight_unit,
        effective_density=effective_density,
        capacity=calculate_section_capacity(properties, material)
    )
