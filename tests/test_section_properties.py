"""
Tests for Section Properties Module.
"""
import math

import pytest
import numpy as np

from profilecalc.profiles import ProfileFamily
from profilecalc.section_properties import (
    StructuralProperties,
    adjust_density_for_temperature,
    calculate_cross_sectional_area,
    calculate_weight,
    compute_properties,
    compute_properties_with_temperature,
)

MM = 0.1  # mm -> cm


class TestBasicShapes:
    def test_rectangular_bar(self):
        """100 x 200 mm bar: textbook values in cm units."""
        props = compute_properties('rectangular', {'width': '100', 'height': '200'}, 7.85, MM)

        assert props.area == pytest.approx(200.0)
        assert props.moment_of_inertia_x == pytest.approx(20000 / 3)
        assert props.moment_of_inertia_y == pytest.approx(5000 / 3)
        assert props.section_modulus_x == pytest.approx(2000 / 3)
        assert props.section_modulus_y == pytest.approx(1000 / 3)
        assert props.radius_of_gyration_x == pytest.approx(20 / math.sqrt(12))
        assert props.radius_of_gyration_y == pytest.approx(10 / math.sqrt(12))
        assert props.centroid_x == pytest.approx(5.0)
        assert props.centroid_y == pytest.approx(10.0)
        assert props.perimeter == pytest.approx(60.0)
        assert props.weight == pytest.approx(1.57)
        assert not props.is_empty

    def test_rectangular_does_not_need_length(self):
        """Section properties never depend on member length."""
        props = compute_properties('rectangular', {'width': '100', 'height': '200'}, 7.85, MM)
        assert props.area > 0

    def test_round_bar(self):
        """Solid circle."""
        props = compute_properties('round', {'diameter': '20'}, 7.85, MM)

        assert props.area == pytest.approx(math.pi)
        assert props.moment_of_inertia_x == pytest.approx(math.pi / 4)
        assert props.moment_of_inertia_x == props.moment_of_inertia_y
        assert props.perimeter == pytest.approx(2 * math.pi)
        assert props.centroid_x == pytest.approx(1.0)

    def test_square_bar(self):
        """Solid square."""
        props = compute_properties('square', {'side': '10'}, 7.85, MM)

        assert props.area == pytest.approx(1.0)
        assert props.moment_of_inertia_x == pytest.approx(1 / 12)
        assert props.section_modulus_x == pytest.approx(1 / 6)
        assert props.perimeter == pytest.approx(4.0)

    def test_flat_bar_uses_thickness_as_height(self):
        """Flat bar lies on its width."""
        props = compute_properties('flat', {'width': '100', 'thickness': '10'}, 7.85, MM)

        assert props.area == pytest.approx(10.0)
        assert props.moment_of_inertia_x == pytest.approx(10 * 1**3 / 12)
        assert props.moment_of_inertia_y == pytest.approx(1 * 10**3 / 12)

    def test_hexagonal_bar(self):
        """Side length is taken as half the distance across flats."""
        props = compute_properties('hexagonal', {'distance': '20'}, 7.85, MM)

        assert props.area == pytest.approx(3 * math.sqrt(3) / 2)
        assert props.moment_of_inertia_x == pytest.approx(5 * math.sqrt(3) / 16)
        assert props.perimeter == pytest.approx(6.0)


class TestBeamsAndChannels:
    def test_i_beam(self):
        """HEB 200 nominal dimensions, fillets ignored."""
        dims = {'h': '200', 'b': '200', 'tw': '9', 'tf': '15'}
        props = compute_properties('heb', dims, 7.85, MM)

        h, b, tw, tf = 20.0, 20.0, 0.9, 1.5
        area = 2 * b * tf + (h - 2 * tf) * tw
        ix = b * h**3 / 12 - (b - tw) * (h - 2 * tf)**3 / 12

        assert props.area == pytest.approx(75.3)
        assert props.area == pytest.approx(area)
        assert props.moment_of_inertia_x == pytest.approx(ix)
        assert props.moment_of_inertia_y == pytest.approx(2 * tf * b**3 / 12)
        assert props.perimeter == pytest.approx(2 * b + 2 * (h - 2 * tf) + 4 * tf)

    def test_all_i_beam_families_agree(self):
        """ipn/ipe/hea/heb/hec/wBeam share one formula set."""
        dims = {'h': '300', 'b': '150', 'tw': '7.1', 'tf': '10.7'}
        reference = compute_properties('ipe', dims, 7.85, MM)
        for family in ('ipn', 'hea', 'heb', 'hec', 'wBeam'):
            assert compute_properties(family, dims, 7.85, MM) == reference

    def test_optional_root_radius_is_ignored(self):
        """Root radius does not change the result."""
        dims = {'h': '200', 'b': '100', 'tw': '5.6', 'tf': '8.5'}
        with_r = compute_properties('ipe', {**dims, 'r': '12'}, 7.85, MM)
        assert with_r == compute_properties('ipe', dims, 7.85, MM)

    def test_channel(self):
        """Channel area, inertia and perimeter."""
        dims = {'h': '100', 'b': '50', 'tw': '6', 'tf': '8.5'}
        props = compute_properties('upn', dims, 7.85, MM)

        h, b, tw, tf = 10.0, 5.0, 0.6, 0.85
        assert props.area == pytest.approx(b * tf + (h - tf) * tw)
        assert props.moment_of_inertia_x == pytest.approx(
            tw * h**3 / 12 + (b - tw) * tf * (h - tf / 2)**2)
        assert props.perimeter == pytest.approx(2 * h + 2 * b - tw)

    def test_equal_angle_is_symmetric(self):
        """Equal legs give equal axes."""
        props = compute_properties('equalAngle', {'a': '50', 't': '5'}, 7.85, MM)

        assert props.area == pytest.approx(4.75)
        assert props.moment_of_inertia_x == props.moment_of_inertia_y
        assert props.section_modulus_x == pytest.approx(
            props.moment_of_inertia_x / (5.0 / math.sqrt(2)))

    def test_unequal_angle(self):
        """Long leg gives the larger inertia."""
        props = compute_properties('unequalAngle', {'a': '80', 'b': '50', 't': '6'}, 7.85, MM)

        a, b, t = 8.0, 5.0, 0.6
        assert props.area == pytest.approx((a + b - t) * t)
        assert props.moment_of_inertia_x > props.moment_of_inertia_y
        assert props.centroid_x == pytest.approx(b / 2)
        assert props.centroid_y == pytest.approx(a / 2)

    def test_t_beam_centroid(self):
        """Centroid from the flange and stem areas."""
        dims = {'h': '100', 'b': '100', 'tw': '10', 'tf': '10'}
        props = compute_properties('tBeam', dims, 7.85, MM)

        a1, y1 = 10 * 1.0, 0.5
        a2, y2 = 9.0 * 1.0, 1.0 + 4.5
        yc = (a1 * y1 + a2 * y2) / (a1 + a2)

        assert props.area == pytest.approx(19.0)
        assert props.centroid_y == pytest.approx(yc)
        assert props.section_modulus_x == pytest.approx(
            props.moment_of_inertia_x / max(yc, 10.0 - yc))


class TestHollowSections:
    def test_rhs_area(self):
        """Outer minus inner rectangle."""
        props = compute_properties('rhs', {'h': '100', 'b': '50', 't': '5'}, 7.85, MM)
        assert props.area == pytest.approx(14.0)  # 1400 mm²

    def test_shs_is_symmetric(self):
        """Square tube has equal axes."""
        props = compute_properties('shs', {'a': '80', 't': '4'}, 7.85, MM)

        assert props.area == pytest.approx(8.0**2 - 7.2**2)
        assert props.moment_of_inertia_x == props.moment_of_inertia_y

    def test_pipe_matches_chs(self):
        """Pipe wall key maps to the CHS formula."""
        chs = compute_properties('chs', {'od': '114.3', 't': '6.3'}, 7.85, MM)
        pipe = compute_properties('pipe', {'od': '114.3', 'wt': '6.3'}, 7.85, MM)
        assert chs == pipe

    def test_degenerate_section_does_not_raise(self):
        """Wall as thick as the diameter: zero area, NaN radius, no exception."""
        props = compute_properties('chs', {'od': '10', 't': '10'}, 7.85, MM)

        assert props.area == 0.0
        assert np.isnan(props.radius_of_gyration_x)


class TestSpecialSections:
    def test_bulb_flat(self):
        """Flat bar plus a half-disc bulb; inertia from the flat alone."""
        props = compute_properties('bulbFlat', {'h': '120', 'b': '20', 't': '7'}, 7.85, MM)

        h, b, t = 12.0, 2.0, 0.7
        assert props.area == pytest.approx(h * t + math.pi * (b / 2)**2 / 2)
        assert props.moment_of_inertia_x == pytest.approx(100.8)
        assert props.moment_of_inertia_y == pytest.approx(0.343)
        assert props.section_modulus_x == pytest.approx(16.8)
        assert props.section_modulus_y == pytest.approx(0.98)
        assert props.radius_of_gyration_x == pytest.approx(math.sqrt(100.8 / props.area))
        assert props.centroid_x == pytest.approx(0.35)
        assert props.centroid_y == pytest.approx(6.0)
        assert props.perimeter == pytest.approx(2 * h + t + math.pi * b / 2)

    def test_half_round(self):
        """Thin half-ring: the y axis takes half of every x value."""
        props = compute_properties('halfRound', {'d': '40', 't': '5'}, 7.85, MM)

        assert props.area == pytest.approx(math.pi)
        assert props.moment_of_inertia_x == pytest.approx(math.pi / 16)
        assert props.moment_of_inertia_y == pytest.approx(math.pi / 32)
        assert props.section_modulus_x == pytest.approx(math.pi / 4)
        assert props.section_modulus_y == pytest.approx(math.pi / 8)
        assert props.radius_of_gyration_x == pytest.approx(0.25)
        assert props.radius_of_gyration_y == pytest.approx(0.25 / math.sqrt(2))
        assert props.centroid_x == pytest.approx(2.0)
        assert props.centroid_y == pytest.approx(0.25)
        assert props.perimeter == pytest.approx(2 * math.pi + 4)


class TestPlates:
    def test_plate_uses_width_and_thickness(self):
        """Plate section is width x thickness."""
        dims = {'length': '2000', 'width': '1000', 'thickness': '10'}
        props = compute_properties('plate', dims, 7.85, MM)

        assert props.area == pytest.approx(100.0)
        assert props.moment_of_inertia_x == pytest.approx(100 * 1**3 / 12)

    def test_plate_requires_length(self):
        """Plates need all three dimensions."""
        props = compute_properties('sheetMetal', {'width': '1000', 'thickness': '2'}, 7.85, MM)
        assert props.is_empty


class TestFailSoft:
    def test_missing_dimension_gives_empty(self):
        """Missing dimension gives the empty sentinel."""
        props = compute_properties('hea', {'h': '200', 'b': '200', 'tw': '9'}, 7.85, MM)

        assert props.is_empty
        assert props.area == 0.0
        assert props == StructuralProperties.empty()

    def test_zero_dimension_counts_as_missing(self):
        """Zero counts as missing."""
        props = compute_properties('round', {'diameter': '0'}, 7.85, MM)
        assert props.is_empty

    def test_unparsable_dimension_gives_empty(self):
        """Unparsable input counts as missing."""
        props = compute_properties('square', {'side': 'abc'}, 7.85, MM)
        assert props.is_empty

    def test_unknown_family_gives_empty(self):
        """Unknown family gives the empty sentinel."""
        props = compute_properties('zBeam', {'h': '100'}, 7.85, MM)
        assert props.is_empty

    def test_lenient_parsing(self):
        """Trailing text after the number is ignored."""
        props = compute_properties('square', {'side': '10mm'}, 7.85, MM)
        assert props.area == pytest.approx(1.0)

    def test_numeric_inputs(self):
        """Enum family and numeric dimensions."""
        props = compute_properties(ProfileFamily.SQUARE, {'side': 10}, 7.85, MM)
        assert props.area == pytest.approx(1.0)

    def test_oversized_integer_does_not_raise(self):
        """An int beyond float range gives infinite properties, not OverflowError."""
        props = compute_properties('square', {'side': 10**400}, 7.85, MM)

        assert not props.is_empty
        assert np.isinf(props.area)
        assert np.isinf(props.perimeter)


class TestDispatch:
    @pytest.mark.parametrize('family', list(ProfileFamily))
    def test_every_family_is_computed(self, family, sample_dimensions):
        """No family falls through to an all-zero result."""
        props = compute_properties(family, sample_dimensions[family], 7.85, MM)

        assert not props.is_empty
        assert props.area > 0
        assert props.weight == pytest.approx(props.area * 7.85 / 1000)

    @pytest.mark.parametrize('family', list(ProfileFamily))
    def test_repeatable(self, family, sample_dimensions):
        """Same input, same output."""
        dims = sample_dimensions[family]
        assert compute_properties(family, dims, 7.85, MM) == compute_properties(family, dims, 7.85, MM)

    def test_unit_factor_scaling(self):
        """Same bar entered in mm and cm."""
        in_mm = compute_properties('rectangular', {'width': '100', 'height': '200'}, 7.85, 0.1)
        in_cm = compute_properties('rectangular', {'width': '10', 'height': '20'}, 7.85, 1.0)
        assert in_mm.area == pytest.approx(in_cm.area)
        assert in_mm.moment_of_inertia_x == pytest.approx(in_cm.moment_of_inertia_x)


class TestTemperature:
    def test_density_adjustment(self):
        """Linear density change from 20 °C."""
        assert adjust_density_for_temperature(7.85, -0.0004, 120) == pytest.approx(7.536)

    def test_no_coefficient_leaves_density(self):
        """No coefficient, no change."""
        assert adjust_density_for_temperature(7.85, None, 500) == 7.85
        assert adjust_density_for_temperature(7.85, 0.0, 500) == 7.85

    def test_reference_temperature_leaves_density(self):
        """No change at the reference temperature."""
        assert adjust_density_for_temperature(7.85, -0.0004, 20) == pytest.approx(7.85)

    def test_properties_carry_adjusted_density(self):
        """Weight uses the adjusted density."""
        dims = {'width': '100', 'height': '200'}
        props = compute_properties_with_temperature('rectangular', dims, 7.85, MM, 120, -0.0004)

        assert props.adjusted_density == pytest.approx(7.536)
        assert props.operating_temperature == 120
        assert props.weight == pytest.approx(200 * 7.536 / 1000)

    def test_without_temperature(self):
        """Base density when no temperature is given."""
        dims = {'width': '100', 'height': '200'}
        props = compute_properties_with_temperature('rectangular', dims, 7.85, MM)

        assert props.adjusted_density == 7.85
        assert props.operating_temperature is None
        assert props.weight == pytest.approx(1.57)


class TestWeight:
    def test_cross_sectional_area(self):
        """Area pass-through."""
        area = calculate_cross_sectional_area('rectangular', {'width': '100', 'height': '200'}, MM)
        assert area == pytest.approx(200.0)

    def test_member_weight(self):
        """200 cm² x 100 cm x 7.85 g/cm³ = 157 kg."""
        weight = calculate_weight(
            'rectangular', {'width': '100', 'height': '200'}, 1000, 7.85, MM, 0.001)
        assert weight == pytest.approx(157.0)

    def test_zero_length_gives_zero(self):
        """Zero length weighs nothing."""
        weight = calculate_weight('rectangular', {'width': '100', 'height': '200'}, 0, 7.85, MM, 0.001)
        assert weight == 0.0

    def test_serialization(self):
        """Properties survive to_dict/from_dict."""
        props = compute_properties('round', {'diameter': '20'}, 7.85, MM)
        assert StructuralProperties.from_dict(props.to_dict()) == props


class TestReferenceValues:
    def test_rhs_in_centimeters(self):
        """Outer rectangle minus inner rectangle, exactly."""
        props = compute_properties('rhs', {'h': 100, 'b': 50, 't': 5}, 7.85, 1.0)
        assert props.area == 100 * 50 - 90 * 40

    @pytest.mark.parametrize('family, dims', [
        ('round', {'diameter': '50'}),
        ('square', {'side': '40'}),
        ('shs', {'a': '80', 't': '4'}),
        ('chs', {'od': '100', 't': '5'}),
        ('pipe', {'od': '100', 'wt': '5'}),
        ('hexagonal', {'distance': '30'}),
    ])
    def test_symmetric_families(self, family, dims):
        """Symmetric sections have equal axes."""
        props = compute_properties(family, dims, 7.85, MM)

        assert props.moment_of_inertia_x == props.moment_of_inertia_y
        assert props.radius_of_gyration_x == props.radius_of_gyration_y
        assert props.section_modulus_x == props.section_modulus_y

    def test_missing_tf_is_all_zero(self):
        """Empty sentinel is all zeros."""
        props = compute_properties('hea', {'h': '200', 'b': '200', 'tw': '9'}, 7.85, MM)
        values = [v for k, v in props.to_dict().items() if k not in ('is_empty', 'adjusted_density',
                                                                      'operating_temperature')]
        assert all(v == 0 for v in values)

    def test_temperature_without_coefficient(self):
        """Temperature alone changes nothing."""
        dims = {'width': '100', 'height': '200'}
        base = compute_properties('rectangular', dims, 7.85, MM)
        props = compute_properties_with_temperature('rectangular', dims, 7.85, MM, 300, None)

        assert props.adjusted_density == 7.85
        assert props.area == base.area
        assert props.weight == base.weight
