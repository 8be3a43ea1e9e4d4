"""
Unit tests for the sRGB -> XYZ -> Lab stages.

Tests: linearize, _srgb_to_xyz, _xyz_to_lab, srgb_to_lab, input handling
"""
import math

import numpy as np
import pytest

from tincture_colorspace import (
    LAB_EPSILON,
    REF_WHITE_D65,
    SRGB_LINEAR_THRESHOLD,
    LabColor,
    RGBColor,
    _compand,
    _srgb_to_xyz,
    _xyz_to_lab,
    _XYZ,
    linearize,
    srgb_to_lab,
)


class TestLinearize:
    """Tests for the sRGB inverse transfer function."""

    def test_endpoints(self):
        assert linearize(0.0) == 0.0
        assert linearize(1.0) == pytest.approx(1.0, abs=1e-15)

    def test_linear_segment_at_threshold(self):
        """The threshold itself belongs to the linear segment."""
        assert linearize(SRGB_LINEAR_THRESHOLD) == SRGB_LINEAR_THRESHOLD / 12.92

    def test_power_segment(self):
        assert linearize(0.5) == pytest.approx(0.214041, abs=1e-5)

    def test_continuous_at_threshold(self):
        below = linearize(SRGB_LINEAR_THRESHOLD)
        above = linearize(np.nextafter(SRGB_LINEAR_THRESHOLD, 1.0))
        assert abs(above - below) < 1e-6

    def test_monotonic_over_8bit_range(self):
        values = [linearize(v / 255.0) for v in range(256)]
        assert all(b > a for a, b in zip(values, values[1:]))


class TestCompanding:
    """Tests for the CIE f(t) function."""

    def test_branches_meet_at_threshold(self):
        cube_root = LAB_EPSILON ** (1.0 / 3.0)
        assert _compand(LAB_EPSILON) == pytest.approx(cube_root, abs=1e-6)

    def test_zero_maps_to_offset(self):
        assert _compand(0.0) == pytest.approx(16.0 / 116.0, abs=1e-15)

    def test_unity(self):
        assert _compand(1.0) == 1.0


class TestXYZ:
    """Tests for the sRGB -> XYZ matrix stage."""

    def test_primary_columns(self):
        """Each full primary reproduces one matrix column, scaled by 100."""
        red = _srgb_to_xyz((255, 0, 0))
        green = _srgb_to_xyz((0, 255, 0))
        blue = _srgb_to_xyz((0, 0, 255))

        assert red == pytest.approx((41.24, 21.26, 1.93), abs=1e-9)
        assert green == pytest.approx((35.76, 71.52, 11.92), abs=1e-9)
        assert blue == pytest.approx((18.05, 7.22, 95.05), abs=1e-9)

    def test_white_luminance(self):
        white = _srgb_to_xyz((255, 255, 255))
        assert white.y == pytest.approx(100.0, abs=1e-9)

    def test_black_is_origin(self):
        assert _srgb_to_xyz((0, 0, 0)) == (0.0, 0.0, 0.0)


class TestLab:
    """Tests for XYZ -> Lab and the composed conversion."""

    def test_reference_white_is_neutral(self):
        lab = _xyz_to_lab(_XYZ(*REF_WHITE_D65))
        assert lab == pytest.approx((100.0, 0.0, 0.0), abs=1e-12)

    def test_black(self):
        lab = srgb_to_lab(RGBColor(0, 0, 0))
        assert lab.L == pytest.approx(0.0, abs=1e-9)
        assert lab.a == 0.0
        assert lab.b == 0.0

    def test_white(self):
        lab = srgb_to_lab(RGBColor(255, 255, 255))
        assert lab.L == pytest.approx(100.0, abs=1e-6)
        # Four-digit matrix rows leave a tiny tint on white
        assert abs(lab.a) < 0.01
        assert abs(lab.b) < 0.02

    def test_mid_gray(self):
        lab = srgb_to_lab(RGBColor(128, 128, 128))
        assert lab.L == pytest.approx(53.585, abs=0.01)
        assert abs(lab.a) < 0.01
        assert abs(lab.b) < 0.01

    def test_red(self):
        lab = srgb_to_lab(RGBColor(255, 0, 0))
        assert lab == pytest.approx((53.24, 80.09, 67.20), abs=0.1)

    def test_blue_has_negative_b(self):
        lab = srgb_to_lab(RGBColor(0, 0, 255))
        assert lab.b < -100.0

    def test_returns_value_type(self):
        lab = srgb_to_lab((10, 20, 30))
        assert isinstance(lab, LabColor)
        assert lab == srgb_to_lab(RGBColor(10, 20, 30))


class TestInputHandling:
    """Tests for color coercion, alpha handling and diagnostics."""

    def test_alpha_is_ignored(self):
        assert srgb_to_lab((10, 20, 30, 0)) == srgb_to_lab((10, 20, 30))
        assert srgb_to_lab((10, 20, 30, 255)) == srgb_to_lab((10, 20, 30))

    def test_numpy_uint8(self):
        arr = np.array([255, 0, 0], dtype=np.uint8)
        assert srgb_to_lab(arr) == srgb_to_lab(RGBColor(255, 0, 0))

    @pytest.mark.parametrize("bad", [(1, 2), (1, 2, 3, 4, 5), ((1, 2, 3), (4, 5, 6)), 7])
    def test_wrong_channel_count_raises(self, bad):
        with pytest.raises(ValueError, match="channels"):
            srgb_to_lab(bad)

    def test_out_of_range_warns_and_converts(self):
        with pytest.warns(RuntimeWarning, match=r"outside \[0, 255\]"):
            lab = srgb_to_lab((300, 0, 0))
        assert math.isfinite(lab.L)

    def test_non_finite_warns_and_propagates(self):
        with pytest.warns(RuntimeWarning, match="Non-finite"):
            lab = srgb_to_lab((float("nan"), 0, 0))
        assert math.isnan(lab.L)

    def test_in_range_is_silent(self, recwarn):
        srgb_to_lab((0, 128, 255))
        assert len(recwarn) == 0

    def test_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning) as record:
            srgb_to_lab((-5, 0, 0))
        assert record[0].filename == __file__
