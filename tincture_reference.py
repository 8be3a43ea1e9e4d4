# -*- coding: utf-8 -*-
"""
Tincture: perceptual color difference for sRGB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

CIEDE2000 reference data from Sharma, Wu & Dalal (2005), Table 1.

The 34 pairs exercise every branch of the formula: the G factor near the blue
region (1-6), achromatic operands (7, 8), hue differences straddling 180
degrees (9-16), large differences (17-20), the JND ring around (50, 2.5, 0)
(21-24) and measured sample pairs (25-34). Published values are rounded to
four decimals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Final, Optional, Tuple

import numpy as np

from tincture_ciede2000 import delta_e_2000
from tincture_colorspace import LabColor

__all__ = [
    "ReferencePair",
    "SHARMA_2005",
    "reference_residuals",
]

LabMetric = Callable[[LabColor, LabColor], float]


@dataclass(slots=True, frozen=True)
class ReferencePair:
    """One row of the published table: two Lab colors and their Delta E 00."""
    lab1:    LabColor
    lab2:    LabColor
    delta_e: float


def _row(L1: float, a1: float, b1: float,
         L2: float, a2: float, b2: float, de: float) -> ReferencePair:
    return ReferencePair(LabColor(L1, a1, b1), LabColor(L2, a2, b2), de)


SHARMA_2005: Final[Tuple[ReferencePair, ...]] = (
    _row(50.0000,   2.6772, -79.7751, 50.0000,   0.0000, -82.7485,  2.0425),
    _row(50.0000,   3.1571, -77.2803, 50.0000,   0.0000, -82.7485,  2.8615),
    _row(50.0000,   2.8361, -74.0200, 50.0000,   0.0000, -82.7485,  3.4412),
    _row(50.0000,  -1.3802, -84.2814, 50.0000,   0.0000, -82.7485,  1.0000),
    _row(50.0000,  -1.1848, -84.8006, 50.0000,   0.0000, -82.7485,  1.0000),
    _row(50.0000,  -0.9009, -85.5211, 50.0000,   0.0000, -82.7485,  1.0000),
    _row(50.0000,   0.0000,   0.0000, 50.0000,  -1.0000,   2.0000,  2.3669),
    _row(50.0000,  -1.0000,   2.0000, 50.0000,   0.0000,   0.0000,  2.3669),
    _row(50.0000,   2.4900,  -0.0010, 50.0000,  -2.4900,   0.0009,  7.1792),
    _row(50.0000,   2.4900,  -0.0010, 50.0000,  -2.4900,   0.0010,  7.1792),
    _row(50.0000,   2.4900,  -0.0010, 50.0000,  -2.4900,   0.0011,  7.2195),
    _row(50.0000,   2.4900,  -0.0010, 50.0000,  -2.4900,   0.0012,  7.2195),
    _row(50.0000,  -0.0010,   2.4900, 50.0000,   0.0009,  -2.4900,  4.8045),
    _row(50.0000,  -0.0010,   2.4900, 50.0000,   0.0010,  -2.4900,  4.8045),
    _row(50.0000,  -0.0010,   2.4900, 50.0000,   0.0011,  -2.4900,  4.7461),
    _row(50.0000,   2.5000,   0.0000, 50.0000,   0.0000,  -2.5000,  4.3065),
    _row(50.0000,   2.5000,   0.0000, 73.0000,  25.0000, -18.0000, 27.1492),
    _row(50.0000,   2.5000,   0.0000, 61.0000,  -5.0000,  29.0000, 22.8977),
    _row(50.0000,   2.5000,   0.0000, 56.0000, -27.0000,  -3.0000, 31.9030),
    _row(50.0000,   2.5000,   0.0000, 58.0000,  24.0000,  15.0000, 19.4535),
    _row(50.0000,   2.5000,   0.0000, 50.0000,   3.1736,   0.5854,  1.0000),
    _row(50.0000,   2.5000,   0.0000, 50.0000,   3.2972,   0.0000,  1.0000),
    _row(50.0000,   2.5000,   0.0000, 50.0000,   1.8634,   0.5757,  1.0000),
    _row(50.0000,   2.5000,   0.0000, 50.0000,   3.2592,   0.3350,  1.0000),
    _row(60.2574, -34.0099,  36.2677, 60.4626, -34.1751,  39.4387,  1.2644),
    _row(63.0109, -31.0961,  -5.8663, 62.8187, -29.7946,  -4.0864,  1.2630),
    _row(61.2901,   3.7196,  -5.3901, 61.4292,   2.2480,  -4.9620,  1.8731),
    _row(35.0831, -44.1164,   3.7933, 35.0232, -40.0716,   1.5901,  1.8645),
    _row(22.7233,  20.0904, -46.6940, 23.0331,  14.9730, -42.5619,  2.0373),
    _row(36.4612,  47.8580,  18.3852, 36.2715,  50.5065,  21.2231,  1.4146),
    _row(90.8027,  -2.0831,   1.4410, 91.1528,  -1.6435,   0.0447,  1.4441),
    _row(90.9257,  -0.5406,  -0.9208, 88.6381,  -0.8985,  -0.7239,  1.5381),
    _row( 6.7747,  -0.2908,  -2.4247,  5.8714,  -0.0985,  -2.2286,  0.6377),
    _row( 2.0776,   0.0795,  -1.1350,  0.9033,  -0.0636,  -0.5514,  0.9082),
)


def reference_residuals(metric: Optional[LabMetric] = None) -> np.ndarray:
    """
    Absolute error of a Lab metric on every Sharma et al. pair.

    Args:
        metric: ``f(lab1, lab2) -> float``; defaults to ``delta_e_2000``.

    Returns:
        Array of shape (34,) with ``|metric(lab1, lab2) - published|``.
    """
    fn = delta_e_2000 if metric is None else metric
    return np.array(
        [abs(fn(p.lab1, p.lab2) - p.delta_e) for p in SHARMA_2005],
        dtype=np.float64,
    )
