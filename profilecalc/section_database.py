"""
Standard Steel Section Database.
European standard sizes (IPN, IPE, HEA, HEB, equal angles) with their
nominal dimensions in millimeters.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import json

from .profiles import ProfileFamily
from .section_properties import StructuralProperties, compute_properties
from .units import get_length_factor


@dataclass(frozen=True)
class StandardSize:
    """Catalog size of a profile family."""
    designation: str
    family: ProfileFamily
    dimensions: Dict[str, str] = field(default_factory=dict)  # mm, as entered

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'designation': self.designation,
            'family': self.family.value,
            'dimensions': dict(self.dimensions)
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StandardSize':
        """Deserialize from dictionary."""
        return cls(
            designation=data['designation'],
            family=ProfileFamily(data['family']),
            dimensions=dict(data['dimensions'])
        )


def _sizes(family: ProfileFamily, prefix: str, rows) -> Dict[str, StandardSize]:
    """Build sizes from (label, dimension dict) rows."""
    return {
        f"{prefix} {label}": StandardSize(f"{prefix} {label}", family, dims)
        for label, dims in rows
    }


def _beam(h, b, tw, tf, r):
    return {'h': h, 'b': b, 'tw': tw, 'tf': tf, 'r': r}


# ============================================================================
# European I-Beams (DIN 1025-1 / EN 10365)
# ============================================================================

IPN_SECTIONS = _sizes(ProfileFamily.IPN, "IPN", [
    ('80', _beam("80", "42", "3.9", "5.9", "3.9")),
    ('100', _beam("100", "50", "4.5", "6.8", "4.5")),
    ('120', _beam("120", "58", "5.1", "7.7", "5.1")),
    ('140', _beam("140", "66", "5.7", "8.6", "5.7")),
    ('160', _beam("160", "74", "6.3", "9.5", "6.3")),
    ('180', _beam("180", "82", "6.9", "10.4", "6.9")),
    ('200', _beam("200", "90", "7.5", "11.3", "7.5")),
    ('240', _beam("240", "106", "8.7", "13.1", "8.7")),
    ('300', _beam("300", "125", "10.8", "16.2", "10.8")),
    ('400', _beam("400", "155", "14.4", "21.6", "14.4")),
    ('500', _beam("500", "185", "18.0", "27.0", "18.0")),
    ('600', _beam("600", "215", "21.6", "32.4", "21.6")),
])

IPE_SECTIONS = _sizes(ProfileFamily.IPE, "IPE", [
    ('80', _beam("80", "46", "3.8", "5.2", "5")),
    ('100', _beam("100", "55", "4.1", "5.7", "7")),
    ('120', _beam("120", "64", "4.4", "6.3", "7")),
    ('140', _beam("140", "73", "4.7", "6.9", "7")),
    ('160', _beam("160", "82", "5.0", "7.4", "9")),
    ('180', _beam("180", "91", "5.3", "8.0", "9")),
    ('200', _beam("200", "100", "5.6", "8.5", "12")),
    ('220', _beam("220", "110", "5.9", "9.2", "12")),
    ('240', _beam("240", "120", "6.2", "9.8", "15")),
    ('270', _beam("270", "135", "6.6", "10.2", "15")),
    ('300', _beam("300", "150", "7.1", "10.7", "15")),
    ('330', _beam("330", "160", "7.5", "11.5", "18")),
    ('360', _beam("360", "170", "8.0", "12.7", "18")),
    ('400', _beam("400", "180", "8.6", "13.5", "21")),
    ('450', _beam("450", "190", "9.4", "14.6", "21")),
    ('500', _beam("500", "200", "10.2", "16.0", "21")),
    ('550', _beam("550", "210", "11.1", "17.2", "24")),
    ('600', _beam("600", "220", "12.0", "19.0", "24")),
])


# ============================================================================
# European H-Beams (EN 53-62)
# ============================================================================

HEA_SECTIONS = _sizes(ProfileFamily.HEA, "HEA", [
    ('100', _beam("96", "100", "5", "8", "12")),
    ('120', _beam("114", "120", "5", "8", "12")),
    ('140', _beam("133", "140", "5.5", "8.5", "12")),
    ('160', _beam("152", "160", "6", "9", "15")),
    ('180', _beam("171", "180", "6", "9.5", "15")),
    ('200', _beam("190", "200", "6.5", "10", "18")),
    ('220', _beam("210", "220", "7", "11", "18")),
    ('240', _beam("230", "240", "7.5", "12", "21")),
    ('260', _beam("250", "260", "7.5", "12.5", "24")),
    ('280', _beam("270", "280", "8", "13", "24")),
    ('300', _beam("290", "300", "8.5", "14", "27")),
])

HEB_SECTIONS = _sizes(ProfileFamily.HEB, "HEB", [
    ('100', _beam("100", "100", "6", "10", "12")),
    ('120', _beam("120", "120", "6.5", "11", "12")),
    ('140', _beam("140", "140", "7", "12", "12")),
    ('160', _beam("160", "160", "8", "13", "15")),
    ('180', _beam("180", "180", "8.5", "14", "15")),
    ('200', _beam("200", "200", "9", "15", "18")),
    ('220', _beam("220", "220", "9.5", "16", "18")),
    ('240', _beam("240", "240", "10", "17", "21")),
    ('260', _beam("260", "260", "10", "17.5", "24")),
    ('280', _beam("280", "280", "10.5", "18", "24")),
    ('300', _beam("300", "300", "11", "19", "27")),
])


# ============================================================================
# Equal Angles (EN 10056-1)
# ============================================================================

EQUAL_ANGLE_SECTIONS: Dict[str, StandardSize] = {
    f"L{a}×{a}×{t}": StandardSize(f"L{a}×{a}×{t}", ProfileFamily.EQUAL_ANGLE, {'a': a, 't': t, 'r': r})
    for a, t, r in [
        ("20", "3", "3.5"), ("25", "3", "3.5"), ("30", "3", "5"), ("35", "4", "5"),
        ("40", "4", "6"), ("45", "4.5", "7"), ("50", "5", "7"), ("60", "6", "8"),
        ("70", "7", "9"), ("80", "8", "10"), ("90", "9", "11"), ("100", "10", "12"),
        ("120", "12", "13"), ("150", "15", "16"),
    ]
}


class SectionDatabase:
    """
    Standard size database with search and filtering capabilities.
    """

    def __init__(self):
        self.sections: Dict[str, StandardSize] = {}
        self._load_standard_sections()

    def _load_standard_sections(self):
        """Load all standard sizes."""
        self.sections.update(IPN_SECTIONS)
        self.sections.update(IPE_SECTIONS)
        self.sections.update(HEA_SECTIONS)
        self.sections.update(HEB_SECTIONS)
        self.sections.update(EQUAL_ANGLE_SECTIONS)

    def get_section(self, designation: str) -> Optional[StandardSize]:
        """Get section by designation."""
        return self.sections.get(designation)

    def get_sections_by_family(self, family) -> List[StandardSize]:
        """Get all sizes of a profile family, in catalog order."""
        parsed = ProfileFamily.parse(family)
        return [s for s in self.sections.values() if s.family == parsed]

    def get_sections_by_height_range(self, min_h: float, max_h: float) -> List[StandardSize]:
        """Get beam sizes with height (mm) in the given range."""
        return [
            s for s in self.sections.values()
            if 'h' in s.dimensions and min_h <= float(s.dimensions['h']) <= max_h
        ]

    def search(self, query: str) -> List[StandardSize]:
        """Search sections by designation (partial match)."""
        query_lower = query.lower()
        return [s for s in self.sections.values() if query_lower in s.designation.lower()]

    def get_all_designations(self) -> List[str]:
        """Get list of all designations."""
        return sorted(self.sections.keys())

    def get_properties(self, designation: str, density: float = 7.85) -> StructuralProperties:
        """
        Section properties of a standard size.

        Raises:
            ValueError: if the designation is not in the database
        """
        section = self.get_section(designation)
        if not section:
            raise ValueError(f"Section '{designation}' not found in database")
        return compute_properties(section.family, section.dimensions, density, get_length_factor('mm'))

    def add_custom_section(self, section: StandardSize):
        """Add a custom section to the database."""
        self.sections[section.designation] = section

    def export_to_json(self, filepath: str):
        """Export database to JSON file."""
        data = {name: sec.to_dict() for name, sec in self.sections.items()}
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def import_from_json(self, filepath: str):
        """Import sections from JSON file."""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)
        for name, sec_data in data.items():
            self.sections[name] = StandardSize.from_dict(sec_data)


# Global database instance
SECTION_DB = SectionDatabase()
