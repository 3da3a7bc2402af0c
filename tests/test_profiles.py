"""
Tests for Profile Catalog Module.
"""
from profilecalc.profiles import (
    PROFILE_CATEGORIES,
    PROFILES,
    ProfileCategory,
    ProfileFamily,
    get_families_by_category,
    get_profile,
    get_required_dimensions,
    is_plate_family,
)


class TestProfileFamily:
    def test_parse(self):
        """Tags and enum members parse."""
        assert ProfileFamily.parse('hea') is ProfileFamily.HEA
        assert ProfileFamily.parse('wBeam') is ProfileFamily.W_BEAM
        assert ProfileFamily.parse(ProfileFamily.RHS) is ProfileFamily.RHS

    def test_parse_unknown(self):
        """Unknown or miscased tags give None."""
        assert ProfileFamily.parse('HEA') is None
        assert ProfileFamily.parse('inp') is None
        assert ProfileFamily.parse(None) is None

    def test_string_comparison(self):
        """Families compare equal to their tags."""
        assert ProfileFamily.CHS == 'chs'


class TestCatalog:
    def test_every_family_is_defined(self):
        """Every family and category has a catalog entry."""
        assert set(PROFILES) == set(ProfileFamily)
        assert set(PROFILE_CATEGORIES) == set(ProfileCategory)

    def test_required_dimensions(self):
        """Required keys per family."""
        assert get_required_dimensions('hea') == ('h', 'b', 'tw', 'tf')
        assert get_required_dimensions('pipe') == ('od', 'wt')
        assert get_required_dimensions('rectangular') == ('width', 'height')
        assert get_required_dimensions('plate') == ('length', 'width', 'thickness')

    def test_unknown_family(self):
        """Unknown families have no dimensions."""
        assert get_profile('zBeam') is None
        assert get_required_dimensions('zBeam') == ()

    def test_optional_root_radius(self):
        """Root radius is optional for catalog beams."""
        assert get_profile('ipe').optional_dimensions == ('r',)
        assert get_profile('wBeam').optional_dimensions == ()

    def test_plate_families(self):
        """Plate family membership."""
        assert is_plate_family('sheetMetal')
        assert is_plate_family(ProfileFamily.PERFORATED_PLATE)
        assert not is_plate_family('flat')
        assert not is_plate_family('unknown')

    def test_families_by_category(self):
        """Families listed in catalog order."""
        plates = get_families_by_category(ProfileCategory.PLATES)
        assert len(plates) == 4
        assert get_families_by_category(ProfileCategory.HOLLOW) == [
            ProfileFamily.RHS, ProfileFamily.SHS, ProfileFamily.CHS, ProfileFamily.PIPE
        ]

    def test_to_dict(self):
        """Profile definitions serialize to plain data."""
        data = get_profile('chs').to_dict()
        assert data == {
            'family': 'chs',
            'name': 'CHS - Circular Hollow Section',
            'category': 'hollow',
            'dimensions': ['od', 't'],
            'optional_dimensions': []
        }
