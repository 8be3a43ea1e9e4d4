# -*- coding: utf-8 -*-
"""
Tincture: perceptual color difference for sRGB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIEDE2000 Color Difference
==========================
Pairwise CIEDE2000 (Delta E 00) between two Lab colors, and the sRGB
``distance`` built on top of it.

Reference conditions are fixed: k_L = k_C = k_H = 1, D65.

Implementation Notes:
    - All angles are in degrees; they are converted to radians only at the
      trigonometric calls.
    - Hue angles come from ``atan2(b, a')`` normalized into [0, 360). The
      origin (a' = b = 0) has no hue and is pinned to 0.
    - When either corrected chroma is zero the hue difference is 0 and the
      "mean" hue is the plain sum of both hues.
    - Hue differences and means are taken along the shorter arc of the hue
      circle.
    - R_T carries a negative sign, and R_C uses C'^7 + 25^7 in the
      denominator. Both are checked by the Sharma et al. table in
      ``tincture_reference``.

References:
    - Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000
      color-difference formula: Implementation notes, supplementary test
      data, and mathematical observations". Color Res. Appl. 30(1).
"""

from typing import Final, Sequence, Tuple, Union

import numpy as np
from numba import float64, njit

from tincture_colorspace import ColorLike, LabColor, _srgb_to_lab
from tincture_runtime import dual_kernel

__all__ = [
    # --- Constants ---
    "K_L",
    "K_C",
    "K_H",
    "C25_7",

    # --- Functions ---
    "delta_e_2000",
    "distance",
]

LabLike = Union[LabColor, Sequence[float]]

# Parametric weights (reference viewing conditions)
K_L: Final[float] = 1.0
K_C: Final[float] = 1.0
K_H: Final[float] = 1.0

C25_7: Final[float] = 25.0**7
DEG2RAD: Final[float] = np.pi / 180.0


# =============================================================================
# 1. HUE HELPERS
# =============================================================================

@njit(cache=True)
def _hue_angle(b: float, a_prime: float) -> float:
    """Hue angle in degrees, [0, 360). Achromatic origin -> 0."""
    if b == 0.0 and a_prime == 0.0:
        return 0.0
    h = np.degrees(np.arctan2(b, a_prime)) % 360.0
    # Tiny negative angles round up to exactly 360.0 under the modulo
    if h >= 360.0:
        h -= 360.0
    return h


@njit(cache=True)
def _hue_delta(h1: float, h2: float, chroma_product: float) -> float:
    """Signed hue difference h2 - h1 along the shorter arc, in degrees."""
    if chroma_product == 0.0:
        return 0.0
    diff = h2 - h1
    if diff > 180.0:
        return diff - 360.0
    if diff < -180.0:
        return diff + 360.0
    return diff


@njit(cache=True)
def _hue_mean(h1: float, h2: float, chroma_product: float) -> float:
    """Circular mean of two hues, in degrees."""
    total = h1 + h2
    if chroma_product == 0.0:
        return total
    if abs(h1 - h2) <= 180.0:
        return total * 0.5
    if total < 360.0:
        return (total + 360.0) * 0.5
    return (total - 360.0) * 0.5


# =============================================================================
# 2. KERNEL
# =============================================================================

@dual_kernel(float64(float64, float64, float64, float64, float64, float64))
def _delta_e_2000_kernel(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float) -> float:
    """Single-pair CIEDE2000."""
    # Chroma correction of the a* axis
    C1 = np.hypot(a1, b1)
    C2 = np.hypot(a2, b2)
    C_bar = (C1 + C2) * 0.5
    C_bar_7 = C_bar**7
    G = 0.5 * (1.0 - np.sqrt(C_bar_7 / (C_bar_7 + C25_7)))

    a1_p = (1.0 + G) * a1
    a2_p = (1.0 + G) * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)
    h1_p = _hue_angle(b1, a1_p)
    h2_p = _hue_angle(b2, a2_p)
    C_prod = C1_p * C2_p

    # Differences
    dL_p = L2 - L1
    dC_p = C2_p - C1_p
    dh_p = _hue_delta(h1_p, h2_p, C_prod)
    dH_p = 2.0 * np.sqrt(C_prod) * np.sin((dh_p * DEG2RAD) * 0.5)

    # Means
    L_bar_p = (L1 + L2) * 0.5
    C_bar_p = (C1_p + C2_p) * 0.5
    h_bar_p = _hue_mean(h1_p, h2_p, C_prod)

    # Weighting functions
    T = (1.0
         - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD)
         + 0.24 * np.cos((2.0 * h_bar_p) * DEG2RAD)
         + 0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD)
         - 0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD))

    d_theta = 30.0 * np.exp(-((h_bar_p - 275.0) / 25.0)**2)
    C_bar_p_7 = C_bar_p**7
    RC = 2.0 * np.sqrt(C_bar_p_7 / (C_bar_p_7 + C25_7))

    L_term = (L_bar_p - 50.0)**2
    SL = 1.0 + (0.015 * L_term) / np.sqrt(20.0 + L_term)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T

    RT = -np.sin((2.0 * d_theta) * DEG2RAD) * RC

    dL = dL_p / (K_L * SL)
    dC = dC_p / (K_C * SC)
    dH = dH_p / (K_H * SH)
    return np.sqrt(dL * dL + dC * dC + dH * dH + RT * dC * dH)


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def _lab_components(lab: LabLike) -> Tuple[float, float, float]:
    arr = np.asarray(lab, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected an (L, a, b) triple, got shape {arr.shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])


def delta_e_2000(lab1: LabLike, lab2: LabLike) -> float:
    """
    Calculates the CIEDE2000 color difference of two Lab colors.

    Args:
        lab1: First color, ``LabColor`` or ``(L, a, b)``.
        lab2: Second color, same form.

    Returns:
        Delta E 00 >= 0. Symmetric in its arguments and 0 for identical
        inputs. NaN or infinite components propagate to the result.

    Raises:
        ValueError: If either operand is not three numbers.
    """
    return float(_delta_e_2000_kernel(*_lab_components(lab1), *_lab_components(lab2)))


def distance(color_a: ColorLike, color_b: ColorLike) -> float:
    """
    Perceptual distance between two 8-bit sRGB colors (CIEDE2000, D65).

    A value near 1 is a just noticeable difference.

    Args:
        color_a: ``RGBColor``, ``(r, g, b)`` or ``(r, g, b, a)``; alpha is
            ignored.
        color_b: Same form.

    Returns:
        Delta E 00 as a Python float.

    Raises:
        ValueError: If a color does not have 3 or 4 channels.
    """
    # warnings from either conversion point at the caller of distance()
    return delta_e_2000(_srgb_to_lab(color_a, 3), _srgb_to_lab(color_b, 3))


# =============================================================================
# Validation Block
# =============================================================================
if __name__ == "__main__":
    from tincture_colorspace import RGBColor
    from tincture_reference import SHARMA_2005, reference_residuals
    from tincture_runtime import set_strict_ieee

    print("--- Tincture CIEDE2000 Validation ---")

    # 1. Sharma et al. (2005) table
    print(f"1. Testing {len(SHARMA_2005)} reference pairs (strict IEEE)...")
    residuals = reference_residuals()
    worst = int(np.argmax(residuals))
    print(f"   Max |error|: {residuals[worst]:.2e} (pair {worst + 1}) "
          f"{'[PASS]' if residuals[worst] < 1e-4 else '[FAIL]'}")

    # 2. Fast mode against the same table
    print("2. Testing fastmath kernels...")
    set_strict_ieee(False)
    fast_residuals = reference_residuals()
    set_strict_ieee(True)
    print(f"   Max |error| (fast): {np.max(fast_residuals):.2e} "
          f"{'[PASS]' if np.max(fast_residuals) < 1e-4 else '[FAIL]'}")

    # 3. Black vs white
    print("3. Testing black vs white...")
    bw = distance(RGBColor(0, 0, 0), RGBColor(255, 255, 255))
    print(f"   Delta E 00: {bw:.6f} (Expected ~100) "
          f"{'[PASS]' if abs(bw - 100.0) < 1e-3 else '[FAIL]'}")

    # 4. Symmetry and identity
    print("4. Testing symmetry / identity...")
    c1, c2 = RGBColor(200, 30, 90), RGBColor(12, 160, 240)
    sym = abs(distance(c1, c2) - distance(c2, c1))
    ident = distance(c1, c1)
    print(f"   |d(a,b) - d(b,a)|: {sym:.2e}, d(a,a): {ident:.2e} "
          f"{'[PASS]' if sym == 0.0 and ident == 0.0 else '[FAIL]'}")
