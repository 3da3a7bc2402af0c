"""
Report Generator Module.
Step-by-step calculation breakdown reports in Markdown or JSON.
"""
import os
import json
import logging
from datetime import datetime
from typing import Dict, Any, List, Mapping, Optional, Union
from dataclasses import dataclass, field, asdict
import numpy as np

from .calculator import CalculationOutcome
from .config_loader import ReportConfig, get_config
from .material_library import MaterialData
from .profiles import get_profile
from .units import get_length_factor, parse_number

logger = logging.getLogger(__name__)


@dataclass
class Variable:
    """Input quantity shown in a breakdown step."""
    value: Union[float, str]
    unit: str
    description: str


@dataclass
class CalculationStep:
    """One step of the calculation breakdown."""
    id: str
    title: str
    description: str
    formula: str
    variables: Dict[str, Variable] = field(default_factory=dict)
    result: str = ""
    result_unit: str = ""
    notes: List[str] = field(default_factory=list)


def build_calculation_steps(
    outcome: CalculationOutcome,
    dimensions: Mapping[str, Union[str, float]],
    length: Union[str, float, None],
    material: MaterialData,
    length_unit: str = 'mm',
    decimals: int = 4
) -> List[CalculationStep]:
    """
    Break a successful calculation into area, volume, weight, inertia and
    section modulus steps.

    Raises:
        ValueError: if the outcome carries no properties
    """
    props = outcome.properties
    if props is None:
        raise ValueError("Cannot build a breakdown for a failed calculation")

    factor = get_length_factor(length_unit)
    length_cm = (parse_number(length) or 0.0) * factor
    temperature_effects = props.adjusted_density is not None

    area_step = CalculationStep(
        id='area',
        title='Cross-Sectional Area Calculation',
        description='Calculate the cross-sectional area of the profile based on its dimensions',
        formula='A = f(dimensions)',
        variables={
            key: Variable(parse_number(value) or 0.0, length_unit, f"Profile {key[:1].upper()}{key[1:]}")
            for key, value in dimensions.items()
        },
        result=f"{props.area:.{decimals}f}",
        result_unit='cm²',
        notes=[
            'Area calculation varies by profile type',
            'Standard formulas based on structural engineering principles'
        ]
    )

    volume_step = CalculationStep(
        id='volume',
        title='Volume Calculation',
        description='Calculate the total volume by multiplying area by length',
        formula='V = A × L',
        variables={
            'area': Variable(f"{props.area:.{decimals}f}", 'cm²', 'Cross-sectional area'),
            'length': Variable(length_cm, 'cm', 'Profile length'),
        },
        result=f"{outcome.volume:.{decimals}f}",
        result_unit='cm³'
    )

    density = outcome.effective_density or material.density
    weight_notes = []
    if temperature_effects:
        change = (density - material.density) / material.density * 100
        weight_notes = [
            f"Original density: {material.density:.3f} g/cm³",
            f"Adjusted for temperature: {props.operating_temperature}°C",
            f"Density change: {change:.2f}%",
        ]
    weight_step = CalculationStep(
        id='weight',
        title='Weight Calculation',
        description='Calculate weight using material density and volume',
        formula='W = V × ρ_adjusted' if temperature_effects else 'W = V × ρ',
        variables={
            'volume': Variable(f"{outcome.volume:.{decimals}f}", 'cm³', 'Total volume'),
            'density': Variable(
                f"{density:.3f}", 'g/cm³',
                'Temperature-adjusted density' if temperature_effects else 'Material density'),
        },
        result=f"{outcome.weight:.{decimals}f}",
        result_unit=outcome.weight_unit,
        notes=weight_notes
    )

    inertia_step = CalculationStep(
        id='inertia',
        title='Moment of Inertia',
        description='Calculate second moment of area for bending analysis',
        formula='I = ∫y²dA',
        variables={
            'Ix': Variable(f"{props.moment_of_inertia_x:.2f}", 'cm⁴', 'Moment of inertia about X-axis'),
            'Iy': Variable(f"{props.moment_of_inertia_y:.2f}", 'cm⁴', 'Moment of inertia about Y-axis'),
        },
        result=f"Ix: {props.moment_of_inertia_x:.2f}, Iy: {props.moment_of_inertia_y:.2f}",
        result_unit='cm⁴',
        notes=[
            'Critical for beam deflection calculations',
            'Higher values indicate greater resistance to bending'
        ]
    )

    modulus_step = CalculationStep(
        id='modulus',
        title='Section Modulus',
        description='Calculate section modulus for stress analysis',
        formula='S = I / c (where c is distance to extreme fiber)',
        variables={
            'Sx': Variable(f"{props.section_modulus_x:.2f}", 'cm³', 'Section modulus about X-axis'),
            'Sy': Variable(f"{props.section_modulus_y:.2f}", 'cm³', 'Section modulus about Y-axis'),
        },
        result=f"Sx: {props.section_modulus_x:.2f}, Sy: {props.section_modulus_y:.2f}",
        result_unit='cm³',
        notes=[
            'Used in bending stress calculations: σ = M/S',
            'Larger values indicate better bending capacity'
        ]
    )

    return [area_step, volume_step, weight_step, inertia_step, modulus_step]


class CalculationReport:
    """
    Generates calculation reports in Markdown or JSON formats.
    """

    def __init__(
        self,
        output_dir: Optional[str] = None,
        decimals: Optional[int] = None,
        config: Optional[ReportConfig] = None
    ):
        """
        Args:
            output_dir: Directory for generated files (config default when None)
            decimals: Decimal places for results (config default when None)
            config: Report defaults; the loaded application config when None
        """
        config = config or get_config().report
        self.output_dir = output_dir or config.output_dir
        self.decimals = decimals if decimals is not None else config.decimals
        os.makedirs(self.output_dir, exist_ok=True)

        self.data: Dict[str, Any] = {
            'metadata': {},
            'input': {},
            'results': {},
            'steps': [],
            'validation': {'errors': [], 'warnings': []},
            'figures': []
        }

    def set_metadata(
        self,
        title: str,
        project_name: str = "",
        engineer: str = "",
        date: Optional[str] = None
    ):
        """Set report metadata."""
        self.data['metadata'] = {
            'title': title,
            'project_name': project_name,
            'engineer': engineer,
            'date': date or datetime.now().strftime("%Y-%m-%d %H:%M"),
            'generated_by': 'profilecalc'
        }

    def set_calculation(
        self,
        family,
        dimensions: Mapping[str, Union[str, float]],
        length: Union[str, float, None],
        material: MaterialData,
        outcome: CalculationOutcome,
        length_unit: str = 'mm'
    ):
        """Record the inputs and results of a member calculation."""
        profile = get_profile(family)
        self.data['input'] = {
            'family': getattr(family, 'value', family),
            'profile_name': profile.name if profile else str(family),
            'dimensions': {k: parse_number(v) for k, v in dimensions.items()},
            'length': parse_number(length),
            'length_unit': length_unit,
            'material': material.name,
            'density': material.density
        }
        self.data['validation'] = {
            'errors': list(outcome.validation.errors),
            'warnings': list(outcome.validation.warnings)
        }

        if outcome.properties is None:
            self.data['results'] = {}
            self.data['steps'] = []
            return

        self.data['results'] = {
            'properties': outcome.properties.to_dict(),
            'volume': outcome.volume,
            'weight': outcome.weight,
            'weight_unit': outcome.weight_unit,
            'effective_density': outcome.effective_density,
            'capacity': asdict(outcome.capacity) if outcome.capacity else None
        }
        self.data['steps'] = [
            asdict(step) for step in build_calculation_steps(
                outcome, dimensions, length, material, length_unit, self.decimals)
        ]

    def add_figure(self, filepath: str, caption: str):
        """Add a figure to the report."""
        self.data['figures'].append({
            'path': filepath,
            'caption': caption
        })

    def generate_markdown(self, filename: str = "report.md") -> str:
        """Generate Markdown report."""
        filepath = os.path.join(self.output_dir, filename)

        md = self._generate_markdown_content()

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(md)

        logger.info(f"Markdown report written to {filepath}")
        return filepath

    def generate_json(self, filename: str = "report.json") -> str:
        """Generate JSON report."""
        filepath = os.path.join(self.output_dir, filename)

        data = self._serialize_data(self.data)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON report written to {filepath}")
        return filepath

    def _serialize_data(self, obj):
        """Convert numpy values to plain Python for JSON serialization."""
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {k: self._serialize_data(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._serialize_data(v) for v in obj]
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.integer):
            return int(obj)
        return obj

    def _generate_markdown_content(self) -> str:
        """Generate Markdown content."""
        meta = self.data['metadata']
        inp = self.data['input']
        results = self.data['results']
        validation = self.data['validation']
        d = self.decimals

        md = f"""# {meta.get('title', 'Section Calculation Report')}

**Project:** {meta.get('project_name', '-')}
**Engineer:** {meta.get('engineer', '-')}
**Date:** {meta.get('date', '-')}

---

## Input

| Parameter | Value |
|-----------|-------|
| Profile | {inp.get('profile_name', '-')} |
| Material | {inp.get('material', '-')} |
| Density | {inp.get('density', 0):.3f} g/cm³ |
| Length | {inp.get('length', '-')} {inp.get('length_unit', '')} |
"""
        for key, value in inp.get('dimensions', {}).items():
            md += f"| {key} | {value} {inp.get('length_unit', '')} |\n"
        md += "\n"

        if validation['errors'] or validation['warnings']:
            md += "## Validation\n\n"
            for error in validation['errors']:
                md += f"- **Error:** {error}\n"
            for warning in validation['warnings']:
                md += f"- Warning: {warning}\n"
            md += "\n"

        if results:
            props = results['properties']
            md += f"""## Key Results

| Property | Value |
|----------|-------|
| Area | {props['area']:.{d}f} cm² |
| Ix | {props['moment_of_inertia_x']:.{d}f} cm⁴ |
| Iy | {props['moment_of_inertia_y']:.{d}f} cm⁴ |
| Sx | {props['section_modulus_x']:.{d}f} cm³ |
| Sy | {props['section_modulus_y']:.{d}f} cm³ |
| rx | {props['radius_of_gyration_x']:.{d}f} cm |
| ry | {props['radius_of_gyration_y']:.{d}f} cm |
| Perimeter | {props['perimeter']:.{d}f} cm |
| Weight per metre | {props['weight']:.{d}f} kg/m |
| Volume | {results['volume']:.{d}f} cm³ |
| Weight | {results['weight']:.{d}f} {results['weight_unit']} |

"""
            capacity = results.get('capacity')
            if capacity:
                md += f"""## Elastic Capacity

| Quantity | Value |
|----------|-------|
| Yield strength | {capacity['yield_strength']:.0f} MPa |
| My,x | {capacity['yield_moment_x']:.2f} kN·m |
| My,y | {capacity['yield_moment_y']:.2f} kN·m |
| Npl | {capacity['squash_load']:.1f} kN |

"""

        if self.data['steps']:
            md += "## Calculation Breakdown\n\n"
            for i, step in enumerate(self.data['steps'], 1):
                md += f"### {i}. {step['title']}\n\n"
                md += f"{step['description']}\n\n"
                md += f"`{step['formula']}`\n\n"
                for name, var in step['variables'].items():
                    md += f"- {var['description']} ({name}): {var['value']} {var['unit']}\n"
                md += f"\n**Result:** {step['result']} {step['result_unit']}\n\n"
                for note in step['notes']:
                    md += f"> {note}\n"
                if step['notes']:
                    md += "\n"

        if self.data['figures']:
            md += "## Figures\n\n"
            for fig in self.data['figures']:
                md += f"![{fig['caption']}]({fig['path']})\n\n*{fig['caption']}*\n\n"

        md += f"\n---\n*Generated by {meta.get('generated_by', 'profilecalc')} on {meta.get('date', '')}*\n"

        return md
