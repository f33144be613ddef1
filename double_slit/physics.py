"""Far-field double-slit intensity and the animated two-source wave field.

Coordinates follow the 3D scene: the slits sit in the barrier at x = 0,
the detection screen is the plane x = D, and positions on the screen are
measured along z. All lengths are in micrometres.
"""
import math

import numpy as np

from double_slit.constants import (
    FRINGE_MARKER_COUNT,
    FRINGE_MARKER_OFFSET,
    MAX_SOURCE_AMPLITUDE,
    MIN_SOURCE_DISTANCE,
)


def _degenerate(params) -> bool:
    return params.screen_distance <= 0 or params.wavelength <= 0


def intensity(z, params) -> float:
    """
    Normalized intensity in [0, 1] at screen position ``z``.

    Product of the two-source interference term cos²(φ/2), φ = k·d·z/D, and
    the single-slit envelope sinc²(β/2), β = k·w·z/D. Degenerate geometry
    (D <= 0 or λ <= 0) gives a dark screen.
    """
    if _degenerate(params):
        return 0.0

    k = 2.0 * math.pi / params.wavelength
    D = params.screen_distance

    phi = k * params.slit_separation * z / D
    interference = math.cos(phi / 2.0) ** 2

    beta = k * params.slit_width * z / D
    if beta == 0.0:
        sinc_half = 1.0
    else:
        sinc_half = math.sin(beta / 2.0) / (beta / 2.0)
    diffraction = sinc_half ** 2

    return interference * diffraction


def intensity_profile(z, params) -> np.ndarray:
    """Vectorized ``intensity`` over an array of screen positions."""
    z = np.asarray(z, dtype=float)
    if _degenerate(params):
        return np.zeros_like(z)

    k = 2.0 * np.pi / params.wavelength
    D = params.screen_distance

    phi = k * params.slit_separation * z / D
    interference = np.cos(phi / 2.0) ** 2

    half_beta = k * params.slit_width * z / D / 2.0
    centre = half_beta == 0.0
    # divide by 1 where beta vanishes, then overwrite with the limit
    safe = np.where(centre, 1.0, half_beta)
    sinc_half = np.where(centre, 1.0, np.sin(safe) / safe)

    return interference * sinc_half ** 2


# ---------------- Fringe geometry ----------------

def fringe_spacing(params) -> float:
    """Distance between adjacent bright fringes, λD/d."""
    if params.slit_separation <= 0 or _degenerate(params):
        return 0.0
    return params.wavelength * params.screen_distance / params.slit_separation


def fringe_position(order: int, params) -> float:
    """Screen position of the bright fringe of the given (signed) order."""
    return order * fringe_spacing(params)


def minimum_position(order: int, params) -> float:
    """Position of the n-th dark fringe above the centre (n >= 1)."""
    return (order - 0.5) * fringe_spacing(params)


def fringe_markers(params, count: int = FRINGE_MARKER_COUNT):
    """3D positions of marker posts at every bright fringe from -count to +count."""
    if params.slit_separation <= 0:
        return []
    spacing = fringe_spacing(params)
    x = params.screen_distance + FRINGE_MARKER_OFFSET
    return [(x, 0.0, i * spacing) for i in range(-count, count + 1)]


# ---------------- Wave field ----------------

def wave_field(x, z, params, t: float) -> np.ndarray:
    """
    Displacement of the superposed circular waves leaving both slits.

    ``x`` and ``z`` broadcast against each other (e.g. from ``np.meshgrid``).
    Each source decays as 1/sqrt(r), capped near the slit, and the pattern
    moves with angular frequency ω = k·wave_speed.
    """
    x = np.asarray(x, dtype=float)
    z = np.asarray(z, dtype=float)
    if params.wavelength <= 0:
        return np.zeros(np.broadcast(x, z).shape)

    k = 2.0 * np.pi / params.wavelength
    omega = k * params.wave_speed
    half_d = params.slit_separation / 2.0

    total = np.zeros(np.broadcast(x, z).shape)
    for slit_z in (half_d, -half_d):
        r = np.sqrt(x ** 2 + (z - slit_z) ** 2)
        amp = np.minimum(MAX_SOURCE_AMPLITUDE, 1.0 / np.sqrt(np.maximum(MIN_SOURCE_DISTANCE, r)))
        total += amp * np.cos(k * r - omega * t)

    return total * params.amplitude


__all__ = [
    "intensity",
    "intensity_profile",
    "fringe_spacing",
    "fringe_position",
    "minimum_position",
    "fringe_markers",
    "wave_field",
]
