# -*- coding: utf-8 -*-
"""
Tincture: perceptual color difference for sRGB
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Runtime Configuration
=====================
Numeric mode switch shared by every pipeline stage.

Each stage kernel is compiled twice by :func:`dual_kernel`: once with
``fastmath=False`` (strict IEEE 754, NaN/Inf propagate as documented) and once
with ``fastmath=True``. The public functions call whichever variant the
current mode selects.

Toggle at runtime via:
    import tincture_runtime as rt
    rt.set_strict_ieee(False)  # fast mode
    rt.set_strict_ieee(True)   # back to strict mode (default)
"""

import functools
import math
from typing import Any, Callable, Optional

from numba import njit

__all__ = [
    "set_strict_ieee",
    "strict_ieee_enabled",
    "dual_kernel",
]

# Strict by default: the pairwise API promises NaN propagation, which
# fastmath ("nnan") does not guarantee.
_STRICT_IEEE: bool = True


def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between strict (default) and fast IEEE 754 Numba kernels.

    When ``enabled=False``, the stage kernels built with :func:`dual_kernel`
    (sRGB -> XYZ, XYZ -> Lab, CIEDE2000) use ``fastmath=True`` variants that
    may reassociate floating-point operations. The scalar helpers they call
    (``_linearize``, ``_compand``, ``_hue_angle``, ``_hue_delta``,
    ``_hue_mean``) are single strict compilations in both modes. Results on
    finite input agree with strict mode to ~1e-12; calls with a non-finite
    argument always run the strict variant.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)


def strict_ieee_enabled() -> bool:
    """Returns True when the strict IEEE kernels are active."""
    return _STRICT_IEEE


class _DualKernel:
    """Callable holding a strict and a fastmath compilation of one function."""

    def __init__(self, py_func: Callable[..., Any], signature: Optional[Any] = None) -> None:
        # Both variants share one py_func, so on-disk caching would collide.
        if signature is None:
            self.strict = njit(cache=False, fastmath=False, error_model="numpy")(py_func)
            self.fast = njit(cache=False, fastmath=True, error_model="numpy")(py_func)
        else:
            self.strict = njit(signature, cache=False, fastmath=False, error_model="numpy")(
                py_func
            )
            self.fast = njit(signature, cache=False, fastmath=True, error_model="numpy")(
                py_func
            )
        self.py_func = py_func
        functools.update_wrapper(self, py_func)

    def __call__(self, *args: Any) -> Any:
        # fastmath assumes finite operands (no "nnan"/"ninf" guarantees)
        if _STRICT_IEEE or not all(math.isfinite(x) for x in args):
            return self.strict(*args)
        return self.fast(*args)


def dual_kernel(signature: Optional[Any] = None) -> Callable[[Callable[..., Any]], _DualKernel]:
    """
    Decorator compiling a scalar kernel in both numeric modes.

    Args:
        signature: Optional eager Numba signature, e.g.
            ``float64(float64, float64)``. Lazy compilation when omitted.

    Returns:
        A decorator producing a :class:`_DualKernel`.
    """
    def decorate(py_func: Callable[..., Any]) -> _DualKernel:
        return _DualKernel(py_func, signature)
    return decorate
