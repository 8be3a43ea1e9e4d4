# -*- coding: utf-8 -*-
"""
Tincture: perceptual color difference for sRGB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

sRGB -> CIELAB Conversion
=========================
Converts one gamma-encoded 8-bit sRGB color into CIE L*a*b* (D65, 2 degree
observer) through three scalar stages:

1. Linearization: sRGB inverse transfer function (IEC 61966-2-1), per channel.
2. RGB -> XYZ: fixed sRGB/D65 matrix on a 0..100 scale.
3. XYZ -> Lab: D65 white normalization and the CIE companding function.

All constants are the four-digit EasyRGB set rather than the exact rational
CIE definitions. ``7.787`` and ``0.008856`` must stay paired or the companding
function gains a step at the threshold.

The XYZ triple is an intermediate of :func:`srgb_to_lab` only and is not part
of the public API.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
"""

import warnings
from typing import Final, NamedTuple, Sequence, Tuple, TypeAlias, Union

import numpy as np
import numpy.typing as npt
from numba import njit

from tincture_runtime import dual_kernel

__all__ = [
    # --- Types ---
    "RGBColor",
    "LabColor",
    "ColorLike",

    # --- Constants ---
    "REF_WHITE_D65",
    "SRGB_LINEAR_THRESHOLD",
    "LAB_EPSILON",
    "LAB_SLOPE",

    # --- Functions ---
    "linearize",
    "srgb_to_lab",
]


# --- Value Types ---

class RGBColor(NamedTuple):
    """Gamma-encoded sRGB color, channels in [0, 255]."""
    r: int
    g: int
    b: int


class LabColor(NamedTuple):
    """CIE L*a*b* color. L in [0, 100], a and b roughly [-150, 150]."""
    L: float
    a: float
    b: float


class _XYZ(NamedTuple):
    x: float
    y: float
    z: float


# Anything np.asarray turns into 3 (RGB) or 4 (RGBA) numbers.
ColorLike: TypeAlias = Union[RGBColor, Sequence[float], npt.NDArray[np.number]]


# --- Constants ---

# D65 reference white on the 0..100 scale
REF_WHITE_D65: Final[Tuple[float, float, float]] = (95.047, 100.000, 108.883)

SRGB_LINEAR_THRESHOLD: Final[float] = 0.04045
LAB_EPSILON: Final[float] = 0.008856
LAB_SLOPE: Final[float] = 7.787
_LAB_OFFSET: Final[float] = 16.0 / 116.0

_XN: Final[float] = REF_WHITE_D65[0]
_YN: Final[float] = REF_WHITE_D65[1]
_ZN: Final[float] = REF_WHITE_D65[2]


# =============================================================================
# 1. SCALAR KERNELS (Numba)
# =============================================================================

@njit(cache=True)
def _linearize(v: float) -> float:
    """sRGB EOTF for one normalized channel."""
    if v > SRGB_LINEAR_THRESHOLD:
        return ((v + 0.055) / 1.055) ** 2.4
    return v / 12.92


@njit(cache=True)
def _compand(t: float) -> float:
    """CIE f(t): cube root above LAB_EPSILON, linear segment below."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return LAB_SLOPE * t + _LAB_OFFSET


@dual_kernel()
def _srgb_to_xyz_kernel(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """8-bit sRGB channels -> XYZ (0..100), sRGB primaries, D65."""
    rl = _linearize(r / 255.0) * 100.0
    gl = _linearize(g / 255.0) * 100.0
    bl = _linearize(b / 255.0) * 100.0

    x = rl * 0.4124 + gl * 0.3576 + bl * 0.1805
    y = rl * 0.2126 + gl * 0.7152 + bl * 0.0722
    z = rl * 0.0193 + gl * 0.1192 + bl * 0.9505
    return x, y, z


@dual_kernel()
def _xyz_to_lab_kernel(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """XYZ (0..100) -> L*a*b*, D65 white."""
    fx = _compand(x / _XN)
    fy = _compand(y / _YN)
    fz = _compand(z / _ZN)

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return L, a, b


# =============================================================================
# 2. INPUT HANDLING
# =============================================================================

def _channels(color: ColorLike, stacklevel: int = 2) -> Tuple[float, float, float]:
    """
    Extracts red, green and blue from an RGB or RGBA color.

    Range is not enforced: out-of-range or non-finite channels only raise a
    ``RuntimeWarning`` and flow through the pipeline unchanged.

    Args:
        stacklevel: Passed to ``warnings.warn``; each private layer between
            the public entry point and this function adds one.

    Raises:
        ValueError: If the color is not 3 or 4 numbers.
    """
    arr = np.asarray(color, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] not in (3, 4):
        raise ValueError(f"Expected 3 (RGB) or 4 (RGBA) channels, got shape {arr.shape}")

    rgb = arr[:3]
    if not np.all(np.isfinite(rgb)):
        warnings.warn(
            f"Non-finite sRGB channel in {tuple(rgb.tolist())}; "
            "the color difference will be NaN or infinite.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
    elif np.any(rgb < 0.0) or np.any(rgb > 255.0):
        warnings.warn(
            f"sRGB channel outside [0, 255] in {tuple(rgb.tolist())}; "
            "converting without clipping.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
    return float(rgb[0]), float(rgb[1]), float(rgb[2])


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def linearize(v: float) -> float:
    """
    Decodes one gamma-encoded sRGB channel to linear light.

    Args:
        v: Channel value normalized to [0, 1] (8-bit value / 255).

    Returns:
        Linear intensity in [0, 1].
    """
    return float(_linearize(float(v)))


def _srgb_to_xyz(color: ColorLike, stacklevel: int = 2) -> _XYZ:
    return _XYZ(*_srgb_to_xyz_kernel(*_channels(color, stacklevel + 1)))


def _xyz_to_lab(xyz: _XYZ) -> LabColor:
    return LabColor(*_xyz_to_lab_kernel(float(xyz.x), float(xyz.y), float(xyz.z)))


def _srgb_to_lab(color: ColorLike, stacklevel: int = 2) -> LabColor:
    return _xyz_to_lab(_srgb_to_xyz(color, stacklevel + 1))


def srgb_to_lab(color: ColorLike) -> LabColor:
    """
    Converts an 8-bit sRGB color to CIE L*a*b* (D65).

    Args:
        color: ``RGBColor``, ``(r, g, b)`` or ``(r, g, b, a)``; alpha is
            ignored.

    Returns:
        A fresh ``LabColor``.

    Raises:
        ValueError: If the color does not have 3 or 4 channels.
    """
    return _srgb_to_lab(color, 3)
