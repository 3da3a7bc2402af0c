"""
Shared fixtures for profilecalc tests.
"""
import pytest

from profilecalc.material_library import get_material
from profilecalc.profiles import ProfileFamily


_BEAM = {'h': '200', 'b': '100', 'tw': '6', 'tf': '9'}
_PLATE = {'length': '2000', 'width': '1000', 'thickness': '10'}

# Realistic inputs in millimeters for every family
SAMPLE_DIMENSIONS = {
    ProfileFamily.RECTANGULAR: {'width': '100', 'height': '200'},
    ProfileFamily.ROUND: {'diameter': '50'},
    ProfileFamily.SQUARE: {'side': '40'},
    ProfileFamily.FLAT: {'width': '100', 'thickness': '10'},
    ProfileFamily.HEXAGONAL: {'distance': '30'},
    ProfileFamily.IPN: _BEAM,
    ProfileFamily.IPE: _BEAM,
    ProfileFamily.HEA: _BEAM,
    ProfileFamily.HEB: _BEAM,
    ProfileFamily.HEC: _BEAM,
    ProfileFamily.W_BEAM: _BEAM,
    ProfileFamily.UPN: _BEAM,
    ProfileFamily.UNP: _BEAM,
    ProfileFamily.U_CHANNEL: _BEAM,
    ProfileFamily.EQUAL_ANGLE: {'a': '50', 't': '5'},
    ProfileFamily.UNEQUAL_ANGLE: {'a': '80', 'b': '50', 't': '6'},
    ProfileFamily.RHS: {'h': '100', 'b': '50', 't': '5'},
    ProfileFamily.SHS: {'a': '80', 't': '4'},
    ProfileFamily.CHS: {'od': '100', 't': '5'},
    ProfileFamily.PIPE: {'od': '100', 'wt': '5'},
    ProfileFamily.T_BEAM: {'h': '100', 'b': '100', 'tw': '8', 'tf': '10'},
    ProfileFamily.BULB_FLAT: {'h': '120', 'b': '20', 't': '7'},
    ProfileFamily.HALF_ROUND: {'d': '40', 't': '5'},
    ProfileFamily.PLATE: _PLATE,
    ProfileFamily.SHEET_METAL: _PLATE,
    ProfileFamily.CHECKERED_PLATE: _PLATE,
    ProfileFamily.PERFORATED_PLATE: _PLATE,
}


@pytest.fixture
def steel():
    return get_material('S235')


@pytest.fixture
def aluminum():
    return get_material('6061')


@pytest.fixture
def sample_dimensions():
    return SAMPLE_DIMENSIONS
