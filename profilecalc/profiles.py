"""
Profile Catalog Module.
Standard structural profile families with their dimension requirements.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from enum import Enum


class ProfileCategory(Enum):
    """Profile category enumeration."""
    BASIC = "basic"
    BEAMS = "beams"
    CHANNELS = "channels"
    HOLLOW = "hollow"
    SPECIAL = "special"
    PLATES = "plates"


class ProfileFamily(str, Enum):
    """Cross-section shape tag."""
    # Basic shapes
    RECTANGULAR = "rectangular"
    ROUND = "round"
    SQUARE = "square"
    FLAT = "flat"
    HEXAGONAL = "hexagonal"

    # I-Beams and H-Beams
    IPN = "ipn"
    IPE = "ipe"
    HEA = "hea"
    HEB = "heb"
    HEC = "hec"
    W_BEAM = "wBeam"

    # Channels
    UPN = "upn"
    UNP = "unp"
    U_CHANNEL = "uChannel"

    # Angles
    EQUAL_ANGLE = "equalAngle"
    UNEQUAL_ANGLE = "unequalAngle"

    # Hollow sections
    RHS = "rhs"
    SHS = "shs"
    CHS = "chs"
    PIPE = "pipe"

    # Special sections
    T_BEAM = "tBeam"
    BULB_FLAT = "bulbFlat"
    HALF_ROUND = "halfRound"

    # Plates
    PLATE = "plate"
    SHEET_METAL = "sheetMetal"
    CHECKERED_PLATE = "checkeredPlate"
    PERFORATED_PLATE = "perforatedPlate"

    @classmethod
    def parse(cls, value) -> Optional['ProfileFamily']:
        """Return the family for a tag, or None if the tag is unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class ProfileDefinition:
    """Display name and dimension keys of a profile family."""
    family: ProfileFamily
    name: str
    category: ProfileCategory
    dimensions: Tuple[str, ...]
    optional_dimensions: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            'family': self.family.value,
            'name': self.name,
            'category': self.category.value,
            'dimensions': list(self.dimensions),
            'optional_dimensions': list(self.optional_dimensions)
        }


PROFILE_CATEGORIES: Dict[ProfileCategory, str] = {
    ProfileCategory.BASIC: "Basic Shapes",
    ProfileCategory.BEAMS: "I-Beams & H-Beams",
    ProfileCategory.CHANNELS: "Channels & Angles",
    ProfileCategory.HOLLOW: "Hollow Sections",
    ProfileCategory.SPECIAL: "Special Sections",
    ProfileCategory.PLATES: "Steel Plates",
}


_BEAM_DIMS = ('h', 'b', 'tw', 'tf')
_PLATE_DIMS = ('length', 'width', 'thickness')


def _profile(family, name, category, dimensions, optional=()):
    return family, ProfileDefinition(family, name, category, tuple(dimensions), tuple(optional))


# ============================================================================
# Profile definitions
# ============================================================================

PROFILES: Dict[ProfileFamily, ProfileDefinition] = dict([
    _profile(ProfileFamily.RECTANGULAR, "Rectangular Bar", ProfileCategory.BASIC, ('width', 'height')),
    _profile(ProfileFamily.ROUND, "Round Bar", ProfileCategory.BASIC, ('diameter',)),
    _profile(ProfileFamily.SQUARE, "Square Bar", ProfileCategory.BASIC, ('side',)),
    _profile(ProfileFamily.FLAT, "Flat Bar", ProfileCategory.BASIC, ('width', 'thickness')),
    _profile(ProfileFamily.HEXAGONAL, "Hexagonal Bar", ProfileCategory.BASIC, ('distance',)),

    _profile(ProfileFamily.IPN, "IPN - I-Beam Narrow (European)", ProfileCategory.BEAMS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.IPE, "IPE - I-Beam European Standard", ProfileCategory.BEAMS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.HEA, "HEA - H-Beam Series A (European)", ProfileCategory.BEAMS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.HEB, "HEB - H-Beam Series B (European)", ProfileCategory.BEAMS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.HEC, "HEC - H-Beam Series C (European)", ProfileCategory.BEAMS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.W_BEAM, "W-Beam (AISC/American)", ProfileCategory.BEAMS, _BEAM_DIMS),

    _profile(ProfileFamily.UPN, "UPN - U-Channel Normal (European)", ProfileCategory.CHANNELS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.UNP, "UNP - U-Channel (European)", ProfileCategory.CHANNELS, _BEAM_DIMS, ('r',)),
    _profile(ProfileFamily.U_CHANNEL, "C-Channel (American)", ProfileCategory.CHANNELS, _BEAM_DIMS),
    _profile(ProfileFamily.EQUAL_ANGLE, "Equal Angle (L)", ProfileCategory.CHANNELS, ('a', 't'), ('r',)),
    _profile(ProfileFamily.UNEQUAL_ANGLE, "Unequal Angle (L)", ProfileCategory.CHANNELS, ('a', 'b', 't'), ('r',)),

    _profile(ProfileFamily.RHS, "RHS - Rectangular Hollow Section", ProfileCategory.HOLLOW, ('h', 'b', 't')),
    _profile(ProfileFamily.SHS, "SHS - Square Hollow Section", ProfileCategory.HOLLOW, ('a', 't')),
    _profile(ProfileFamily.CHS, "CHS - Circular Hollow Section", ProfileCategory.HOLLOW, ('od', 't')),
    _profile(ProfileFamily.PIPE, "Pipe (Schedule)", ProfileCategory.HOLLOW, ('od', 'wt')),

    _profile(ProfileFamily.T_BEAM, "T-Beam", ProfileCategory.SPECIAL, _BEAM_DIMS),
    _profile(ProfileFamily.BULB_FLAT, "Bulb Flat", ProfileCategory.SPECIAL, ('h', 'b', 't')),
    _profile(ProfileFamily.HALF_ROUND, "Half Round", ProfileCategory.SPECIAL, ('d', 't')),

    _profile(ProfileFamily.PLATE, "Steel Plate", ProfileCategory.PLATES, _PLATE_DIMS),
    _profile(ProfileFamily.SHEET_METAL, "Sheet Metal", ProfileCategory.PLATES, _PLATE_DIMS),
    _profile(ProfileFamily.CHECKERED_PLATE, "Checkered Plate", ProfileCategory.PLATES, _PLATE_DIMS),
    _profile(ProfileFamily.PERFORATED_PLATE, "Perforated Plate", ProfileCategory.PLATES, _PLATE_DIMS),
])


# Families grouped by the formula set they share
I_BEAM_FAMILIES = frozenset({
    ProfileFamily.IPN, ProfileFamily.IPE, ProfileFamily.HEA,
    ProfileFamily.HEB, ProfileFamily.HEC, ProfileFamily.W_BEAM,
})
CHANNEL_FAMILIES = frozenset({ProfileFamily.UPN, ProfileFamily.UNP, ProfileFamily.U_CHANNEL})
PLATE_FAMILIES = frozenset({
    ProfileFamily.PLATE, ProfileFamily.SHEET_METAL,
    ProfileFamily.CHECKERED_PLATE, ProfileFamily.PERFORATED_PLATE,
})


def get_profile(family) -> Optional[ProfileDefinition]:
    """Get the definition of a family (tag or enum member)."""
    parsed = ProfileFamily.parse(family)
    if parsed is None:
        return None
    return PROFILES[parsed]


def get_required_dimensions(family) -> Tuple[str, ...]:
    """Required dimension keys of a family; empty for unknown tags."""
    profile = get_profile(family)
    return profile.dimensions if profile else ()


def is_plate_family(family) -> bool:
    """Plates carry their length as a dimension."""
    return ProfileFamily.parse(family) in PLATE_FAMILIES


def get_families_by_category(category: ProfileCategory) -> List[ProfileFamily]:
    """Get all families of a category, in catalog order."""
    return [p.family for p in PROFILES.values() if p.category == category]
