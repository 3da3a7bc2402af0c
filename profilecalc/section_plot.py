"""
Section Plot Module.
Cross-section outlines of profile families and their matplotlib rendering.
"""
import logging
from typing import Dict, List, Mapping, Optional, Union

import numpy as np

from .config_loader import PlotConfig, get_config
from .profiles import (
    ProfileFamily,
    PROFILES,
    I_BEAM_FAMILIES,
    CHANNEL_FAMILIES,
    PLATE_FAMILIES,
)
from .units import parse_number

logger = logging.getLogger(__name__)

ARC_SEGMENTS = 64


def _rect(x0, y0, w, h) -> np.ndarray:
    return np.array([[x0, y0], [x0 + w, y0], [x0 + w, y0 + h], [x0, y0 + h]], dtype=float)


def _arc(cx, cy, r, start, stop, n=ARC_SEGMENTS) -> np.ndarray:
    theta = np.linspace(start, stop, n)
    return np.column_stack([cx + r * np.cos(theta), cy + r * np.sin(theta)])


def _circle(cx, cy, r) -> np.ndarray:
    # Endpoint dropped; loops are closed implicitly
    return _arc(cx, cy, r, 0.0, 2 * np.pi, ARC_SEGMENTS + 1)[:-1]


def _signed_area(loop: np.ndarray) -> float:
    x, y = loop[:, 0], loop[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))


def _i_beam_outline(d):
    h, b, tw, tf = d['h'], d['b'], d['tw'], d['tf']
    xl = (b - tw) / 2
    xr = (b + tw) / 2
    return [np.array([
        [0, 0], [b, 0], [b, tf], [xr, tf], [xr, h - tf], [b, h - tf],
        [b, h], [0, h], [0, h - tf], [xl, h - tf], [xl, tf], [0, tf],
    ], dtype=float)]


def _channel_outline(d):
    h, b, tw, tf = d['h'], d['b'], d['tw'], d['tf']
    return [np.array([
        [0, 0], [b, 0], [b, tf], [tw, tf], [tw, h - tf], [b, h - tf], [b, h], [0, h],
    ], dtype=float)]


def _angle_outline(a, b, t):
    # Vertical leg a, horizontal leg b, heel at the origin
    return [np.array([[0, 0], [b, 0], [b, t], [t, t], [t, a], [0, a]], dtype=float)]


def _t_beam_outline(d):
    h, b, tw, tf = d['h'], d['b'], d['tw'], d['tf']
    xl = (b - tw) / 2
    xr = (b + tw) / 2
    return [np.array([
        [xl, 0], [xr, 0], [xr, h - tf], [b, h - tf], [b, h], [0, h], [0, h - tf], [xl, h - tf],
    ], dtype=float)]


def _bulb_flat_outline(d):
    h, b, t = d['h'], d['b'], d['t']
    r = b / 2
    bulb = _arc(t, h - r, r, -np.pi / 2, np.pi / 2)
    return [np.vstack([[[0, 0], [t, 0]], bulb, [[0, h]]])]


def _half_round_outline(d):
    diameter, t = d['d'], d['t']
    r = diameter / 2
    outer = _arc(r, 0, r, 0.0, np.pi)
    inner = _arc(r, 0, max(r - t, 0.0), np.pi, 0.0)
    return [np.vstack([outer, inner])]


def _hexagon(distance):
    # Distance across flats; flats top and bottom
    radius = distance / np.sqrt(3)
    angles = np.arange(6) * np.pi / 3
    return [np.column_stack([radius * np.cos(angles), radius * np.sin(angles)]) + [radius, distance / 2]]


_OUTLINES = {
    ProfileFamily.RECTANGULAR: lambda d: [_rect(0, 0, d['width'], d['height'])],
    ProfileFamily.ROUND: lambda d: [_circle(d['diameter'] / 2, d['diameter'] / 2, d['diameter'] / 2)],
    ProfileFamily.SQUARE: lambda d: [_rect(0, 0, d['side'], d['side'])],
    ProfileFamily.FLAT: lambda d: [_rect(0, 0, d['width'], d['thickness'])],
    ProfileFamily.HEXAGONAL: lambda d: _hexagon(d['distance']),
    ProfileFamily.EQUAL_ANGLE: lambda d: _angle_outline(d['a'], d['a'], d['t']),
    ProfileFamily.UNEQUAL_ANGLE: lambda d: _angle_outline(d['a'], d['b'], d['t']),
    ProfileFamily.RHS: lambda d: [
        _rect(0, 0, d['b'], d['h']),
        _rect(d['t'], d['t'], d['b'] - 2 * d['t'], d['h'] - 2 * d['t']),
    ],
    ProfileFamily.SHS: lambda d: [
        _rect(0, 0, d['a'], d['a']),
        _rect(d['t'], d['t'], d['a'] - 2 * d['t'], d['a'] - 2 * d['t']),
    ],
    ProfileFamily.CHS: lambda d: [
        _circle(d['od'] / 2, d['od'] / 2, d['od'] / 2),
        _circle(d['od'] / 2, d['od'] / 2, d['od'] / 2 - d['t']),
    ],
    ProfileFamily.PIPE: lambda d: [
        _circle(d['od'] / 2, d['od'] / 2, d['od'] / 2),
        _circle(d['od'] / 2, d['od'] / 2, d['od'] / 2 - d['wt']),
    ],
    ProfileFamily.T_BEAM: _t_beam_outline,
    ProfileFamily.BULB_FLAT: _bulb_flat_outline,
    ProfileFamily.HALF_ROUND: _half_round_outline,
}
_OUTLINES.update({family: _i_beam_outline for family in I_BEAM_FAMILIES})
_OUTLINES.update({family: _channel_outline for family in CHANNEL_FAMILIES})
# Plates are drawn as their width × thickness section
_OUTLINES.update({
    family: (lambda d: [_rect(0, 0, d['width'], d['thickness'])]) for family in PLATE_FAMILIES
})


def profile_outline(family, dimensions: Mapping[str, Union[str, float]]) -> List[np.ndarray]:
    """
    Closed outline loops of a cross-section.

    Args:
        family: Profile family tag or ProfileFamily
        dimensions: Raw magnitudes, in any single length unit

    Returns:
        List of (n, 2) arrays in the dimension unit: the outer boundary
        first (counter-clockwise), then any holes (clockwise). Empty when the
        family is unknown or a required dimension is missing or zero.
    """
    parsed = ProfileFamily.parse(family)
    if parsed is None:
        return []

    dims: Dict[str, float] = {}
    for key, raw in dimensions.items():
        value = parse_number(raw)
        if value is not None:
            dims[key] = value
    if any(not dims.get(key) for key in PROFILES[parsed].dimensions):
        return []

    loops = _OUTLINES[parsed](dims)
    oriented = []
    for i, loop in enumerate(loops):
        ccw = i == 0
        if (_signed_area(loop) > 0) != ccw:
            loop = loop[::-1]
        oriented.append(loop)
    return oriented


def plot_profile(
    family,
    dimensions: Mapping[str, Union[str, float]],
    unit: str = 'mm',
    ax=None,
    settings: Optional[PlotConfig] = None,
    title: Optional[str] = None
):
    """
    Draw a cross-section.

    Args:
        family: Profile family tag or ProfileFamily
        dimensions: Raw magnitudes in `unit`
        unit: Axis label unit
        ax: Existing axis or None
        settings: Plot colors and line width (the loaded plot config when None)

    Returns:
        The matplotlib axis

    Raises:
        ValueError: if the section cannot be outlined
    """
    import matplotlib.pyplot as plt
    from matplotlib.path import Path
    from matplotlib.patches import PathPatch

    settings = settings or get_config().plot

    loops = profile_outline(family, dimensions)
    if not loops:
        raise ValueError(f"Cannot draw profile '{family}' with dimensions {dict(dimensions)}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6), dpi=settings.dpi)

    vertices = []
    codes = []
    for loop in loops:
        vertices.extend(loop.tolist())
        vertices.append(loop[0].tolist())
        codes.extend([Path.MOVETO] + [Path.LINETO] * (len(loop) - 1) + [Path.CLOSEPOLY])

    patch = PathPatch(
        Path(vertices, codes),
        facecolor=settings.fill_color,
        edgecolor=settings.edge_color,
        linewidth=settings.line_width
    )
    ax.add_patch(patch)

    ax.set_aspect('equal')
    ax.autoscale_view()
    ax.margins(0.1)
    ax.set_xlabel(f'x ({unit})')
    ax.set_ylabel(f'y ({unit})')
    profile = PROFILES[ProfileFamily.parse(family)]
    ax.set_title(title or profile.name)
    ax.grid(True, alpha=0.3)

    return ax


def export_figure(fig, filepath: str, dpi: int = 150, transparent: bool = False):
    """Export figure to file."""
    fig.savefig(filepath, dpi=dpi, transparent=transparent, bbox_inches='tight')
    logger.info(f"Figure written to {filepath}")
