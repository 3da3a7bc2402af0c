"""
Material Library for Section Calculations.
Provides metal grades with density, thermal and strength data, the
material/profile availability matrix, and elastic capacity checks.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional
from enum import Enum
import json

from .section_properties import StructuralProperties


class MaterialType(Enum):
    """Material category tag."""
    STEEL = "steel"
    STAINLESS = "stainless"
    ALUMINUM = "aluminum"
    COPPER = "copper"
    TITANIUM = "titanium"
    SPECIALTY = "specialty"


@dataclass(frozen=True)
class MaterialData:
    """
    Material grade as read by the validator and the property engine.

    Units: density g/cm³, temperatures °C, strengths MPa, elastic modulus GPa,
    thermal expansion 1e-6/°C, temperature coefficient 1/°C (density change).
    """
    name: str
    density: float
    melting_point: float
    thermal_expansion: Optional[float] = None
    yield_strength: Optional[float] = None
    tensile_strength: Optional[float] = None
    type: str = ""
    temperature_coefficient: Optional[float] = None
    elastic_modulus: Optional[float] = None
    description: str = ""

    @property
    def category(self) -> Optional[MaterialType]:
        """Category tag as enum, None when the tag is not a known category."""
        try:
            return MaterialType(self.type)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'name': self.name,
            'density': self.density,
            'melting_point': self.melting_point,
            'thermal_expansion': self.thermal_expansion,
            'yield_strength': self.yield_strength,
            'tensile_strength': self.tensile_strength,
            'type': self.type,
            'temperature_coefficient': self.temperature_coefficient,
            'elastic_modulus': self.elastic_modulus,
            'description': self.description
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'MaterialData':
        """Deserialize from dictionary."""
        return cls(**data)


def _grade(material_type: MaterialType, **kwargs) -> MaterialData:
    return MaterialData(type=material_type.value, **kwargs)


# ============================================================================
# Structural Steels (EN 10025)
# ============================================================================

STEEL_MATERIALS: Dict[str, MaterialData] = {
    'S235': _grade(
        MaterialType.STEEL, name='Steel S235', density=7.85, melting_point=1500,
        thermal_expansion=12.0, yield_strength=235, tensile_strength=360,
        elastic_modulus=210, temperature_coefficient=-0.0004,
        description='Non-alloy structural steel'
    ),
    'S275': _grade(
        MaterialType.STEEL, name='Steel S275', density=7.85, melting_point=1500,
        thermal_expansion=12.0, yield_strength=275, tensile_strength=430,
        elastic_modulus=210, temperature_coefficient=-0.0004,
        description='Non-alloy structural steel'
    ),
    'S355': _grade(
        MaterialType.STEEL, name='Steel S355', density=7.85, melting_point=1500,
        thermal_expansion=12.0, yield_strength=355, tensile_strength=510,
        elastic_modulus=210, temperature_coefficient=-0.0004,
        description='High strength structural steel'
    ),
}


# ============================================================================
# Stainless Steels
# ============================================================================

STAINLESS_MATERIALS: Dict[str, MaterialData] = {
    's304': _grade(
        MaterialType.STAINLESS, name='304 Stainless Steel', density=8.0, melting_point=1450,
        thermal_expansion=17.3, yield_strength=215, tensile_strength=505,
        elastic_modulus=193, temperature_coefficient=-0.0005
    ),
    's316': _grade(
        MaterialType.STAINLESS, name='316 Stainless Steel', density=8.0, melting_point=1450,
        thermal_expansion=16.0, yield_strength=205, tensile_strength=515,
        elastic_modulus=193, temperature_coefficient=-0.0005
    ),
    's2205': _grade(
        MaterialType.STAINLESS, name='2205 Duplex Stainless', density=7.8, melting_point=1450,
        thermal_expansion=13.7, yield_strength=448, tensile_strength=620,
        elastic_modulus=200, temperature_coefficient=-0.0004
    ),
}


# ============================================================================
# Aluminum Alloys
# ============================================================================

ALUMINUM_MATERIALS: Dict[str, MaterialData] = {
    '6061': _grade(
        MaterialType.ALUMINUM, name='6061-T6 Aluminum', density=2.7, melting_point=582,
        thermal_expansion=23.6, yield_strength=276, tensile_strength=310,
        elastic_modulus=68.9, temperature_coefficient=-0.0007
    ),
    '6063': _grade(
        MaterialType.ALUMINUM, name='6063-T5 Aluminum', density=2.7, melting_point=585,
        thermal_expansion=23.4, yield_strength=214, tensile_strength=241,
        elastic_modulus=68.9, temperature_coefficient=-0.0007
    ),
    '7075': _grade(
        MaterialType.ALUMINUM, name='7075-T6 Aluminum', density=2.81, melting_point=477,
        thermal_expansion=23.2, yield_strength=503, tensile_strength=572,
        elastic_modulus=71.7, temperature_coefficient=-0.0007
    ),
    '5052': _grade(
        MaterialType.ALUMINUM, name='5052-H32 Aluminum', density=2.68, melting_point=607,
        thermal_expansion=23.8, yield_strength=193, tensile_strength=228,
        elastic_modulus=70.3, temperature_coefficient=-0.0007
    ),
}


# ============================================================================
# Copper & Alloys
# ============================================================================

COPPER_MATERIALS: Dict[str, MaterialData] = {
    'pure': _grade(
        MaterialType.COPPER, name='C101 Pure Copper', density=8.96, melting_point=1085,
        thermal_expansion=16.5, yield_strength=33, tensile_strength=220,
        elastic_modulus=110, temperature_coefficient=-0.0005
    ),
    'brass360': _grade(
        MaterialType.COPPER, name='C360 Free Cutting Brass', density=8.5, melting_point=885,
        thermal_expansion=20.9, yield_strength=124, tensile_strength=338,
        elastic_modulus=101, temperature_coefficient=-0.0006
    ),
    'bronze': _grade(
        MaterialType.COPPER, name='C932 Bearing Bronze', density=8.8, melting_point=1050,
        thermal_expansion=18.0, yield_strength=130, tensile_strength=310,
        elastic_modulus=103, temperature_coefficient=-0.0005
    ),
}


# ============================================================================
# Titanium & Specialty Metals
# ============================================================================

TITANIUM_MATERIALS: Dict[str, MaterialData] = {
    'grade2': _grade(
        MaterialType.TITANIUM, name='Grade 2 Pure Titanium', density=4.51, melting_point=1668,
        thermal_expansion=8.6, yield_strength=275, tensile_strength=345,
        elastic_modulus=103, temperature_coefficient=-0.0003
    ),
    'grade5': _grade(
        MaterialType.TITANIUM, name='Grade 5 Ti-6Al-4V', density=4.43, melting_point=1604,
        thermal_expansion=8.6, yield_strength=880, tensile_strength=950,
        elastic_modulus=114, temperature_coefficient=-0.0003
    ),
}

SPECIALTY_MATERIALS: Dict[str, MaterialData] = {
    'inconel625': _grade(
        MaterialType.SPECIALTY, name='Inconel 625', density=8.44, melting_point=1350,
        thermal_expansion=12.8, yield_strength=414, tensile_strength=827,
        elastic_modulus=208, temperature_coefficient=-0.0004
    ),
    'az31b': _grade(
        MaterialType.SPECIALTY, name='AZ31B Magnesium', density=1.77, melting_point=610,
        thermal_expansion=26.0, yield_strength=200, tensile_strength=260,
        elastic_modulus=45, temperature_coefficient=-0.0008
    ),
    'zinc': _grade(
        MaterialType.SPECIALTY, name='Commercial Zinc', density=7.14, melting_point=420,
        thermal_expansion=30.2, yield_strength=21, tensile_strength=37,
        elastic_modulus=108, temperature_coefficient=-0.0007
    ),
}


# ============================================================================
# Material / Profile availability
# ============================================================================

MATERIAL_PROFILE_COMPATIBILITY: Dict[MaterialType, Dict[str, List[str]]] = {
    MaterialType.STEEL: {
        'basic': ["rectangular", "round", "square", "flat", "hexagonal"],
        'beams': ["hea", "heb", "hec", "ipe", "ipn", "wBeam"],
        'channels': ["upn", "unp", "uChannel", "equalAngle", "unequalAngle"],
        'hollow': ["rhs", "shs", "chs", "pipe"],
        'special': ["tBeam", "bulbFlat", "halfRound"],
        'plates': ["plate", "sheetMetal", "checkeredPlate", "perforatedPlate"],
    },
    MaterialType.STAINLESS: {
        'basic': ["rectangular", "round", "square", "flat", "hexagonal"],
        'beams': ["ipe", "hea", "heb"],
        'channels': ["upn", "uChannel", "equalAngle", "unequalAngle"],
        'hollow': ["rhs", "shs", "chs", "pipe"],
        'special': ["tBeam"],
        'plates': ["plate", "sheetMetal", "perforatedPlate"],
    },
    MaterialType.ALUMINUM: {
        'basic': ["rectangular", "round", "square", "flat", "hexagonal"],
        'beams': [],
        'channels': ["uChannel", "equalAngle", "unequalAngle"],
        'hollow': ["rhs", "shs", "chs"],
        'special': ["tBeam"],
        'plates': ["plate", "sheetMetal", "perforatedPlate"],
    },
    MaterialType.COPPER: {
        'basic': ["rectangular", "round", "square", "flat"],
        'beams': [],
        'channels': ["equalAngle"],
        'hollow': ["chs", "pipe"],
        'special': [],
        'plates': ["plate", "sheetMetal"],
    },
    MaterialType.TITANIUM: {
        'basic': ["rectangular", "round", "square", "flat"],
        'beams': [],
        'channels': [],
        'hollow': ["chs"],
        'special': [],
        'plates': ["plate", "sheetMetal"],
    },
    MaterialType.SPECIALTY: {
        'basic': ["rectangular", "round", "square", "flat"],
        'beams': [],
        'channels': [],
        'hollow': ["chs"],
        'special': [],
        'plates': ["plate", "sheetMetal"],
    },
}


def get_compatible_profiles(material_type: MaterialType) -> List[str]:
    """All profile family tags available in a material category."""
    mapping = MATERIAL_PROFILE_COMPATIBILITY.get(material_type, {})
    return [family for families in mapping.values() for family in families]


def is_profile_compatible(material_type: MaterialType, family) -> bool:
    """Check if a profile family is commonly produced in a material."""
    tag = getattr(family, 'value', family)
    return tag in get_compatible_profiles(material_type)


def get_compatible_categories(material_type: MaterialType) -> List[str]:
    """Profile categories with at least one available family."""
    mapping = MATERIAL_PROFILE_COMPATIBILITY.get(material_type, {})
    return [category for category, families in mapping.items() if families]


# ============================================================================
# Material Library Class
# ============================================================================

class MaterialLibrary:
    """
    Unified material library with search and management capabilities.
    """

    def __init__(self):
        self.materials: Dict[str, MaterialData] = {}
        self._load_standard_materials()

    def _load_standard_materials(self):
        """Load all standard grades."""
        self.materials.update(STEEL_MATERIALS)
        self.materials.update(STAINLESS_MATERIALS)
        self.materials.update(ALUMINUM_MATERIALS)
        self.materials.update(COPPER_MATERIALS)
        self.materials.update(TITANIUM_MATERIALS)
        self.materials.update(SPECIALTY_MATERIALS)

    def get_material(self, key: str) -> Optional[MaterialData]:
        """Get material by catalog key or by display name."""
        if key in self.materials:
            return self.materials[key]
        for material in self.materials.values():
            if material.name == key:
                return material
        return None

    def get_materials_by_type(self, material_type: MaterialType) -> List[MaterialData]:
        """Get all materials of a specific category."""
        return [m for m in self.materials.values() if m.type == material_type.value]

    def search(self, query: str) -> List[MaterialData]:
        """Search materials by name (partial match)."""
        query_lower = query.lower()
        return [m for m in self.materials.values() if query_lower in m.name.lower()]

    def get_all_keys(self) -> List[str]:
        """Get list of all catalog keys."""
        return sorted(self.materials.keys())

    def add_custom_material(self, key: str, material: MaterialData):
        """Add a custom material to the library."""
        self.materials[key] = material

    def export_to_json(self, filepath: str):
        """Export library to JSON file."""
        data = {key: mat.to_dict() for key, mat in self.materials.items()}
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def import_from_json(self, filepath: str):
        """Import materials from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        for key, mat_data in data.items():
            self.materials[key] = MaterialData.from_dict(mat_data)


# Global library instance
MATERIAL_LIB = MaterialLibrary()


def get_material(key: str) -> MaterialData:
    """Catalog lookup that fails loudly."""
    material = MATERIAL_LIB.get_material(key)
    if material is None:
        raise ValueError(f"Material '{key}' not found in library")
    return material


# ============================================================================
# Capacity cross-check
# ============================================================================

@dataclass(frozen=True)
class SectionCapacity:
    """Elastic capacity of a section in a given material."""
    yield_strength: float      # MPa
    yield_moment_x: float      # kN·m
    yield_moment_y: float      # kN·m
    squash_load: float         # kN


def calculate_section_capacity(
    properties: StructuralProperties,
    material: MaterialData
) -> Optional[SectionCapacity]:
    """
    Elastic capacity of a section.

    My = S · fy, Npl = A · fy

    With S in cm³ and fy in MPa, S·fy/1000 is in kN·m; with A in cm²,
    A·fy/10 is in kN.

    Returns:
        SectionCapacity, or None when the material has no yield strength
        or the properties are the empty sentinel
    """
    if not material.yield_strength or properties.is_empty:
        return None

    fy = material.yield_strength
    return SectionCapacity(
        yield_strength=fy,
        yield_moment_x=properties.section_modulus_x * fy / 1000,
        yield_moment_y=properties.section_modulus_y * fy / 1000,
        squash_load=properties.area * fy / 10
    )
