"""
Pytest fixtures for Tincture tests.

Every test starts in strict IEEE mode, whatever the previous test left behind.
"""
import pytest

from tincture_colorspace import RGBColor
from tincture_runtime import set_strict_ieee, strict_ieee_enabled


@pytest.fixture(autouse=True)
def strict_mode():
    """Restore the numeric mode after each test."""
    previous = strict_ieee_enabled()
    set_strict_ieee(True)
    yield
    set_strict_ieee(previous)


@pytest.fixture
def fast_mode():
    """Run one test with the fastmath kernels."""
    set_strict_ieee(False)
    yield
    set_strict_ieee(True)


@pytest.fixture
def palette():
    """A spread of sRGB colors covering grays, primaries and mixed hues."""
    return [
        RGBColor(0, 0, 0),
        RGBColor(255, 255, 255),
        RGBColor(128, 128, 128),
        RGBColor(255, 0, 0),
        RGBColor(0, 255, 0),
        RGBColor(0, 0, 255),
        RGBColor(255, 255, 0),
        RGBColor(0, 255, 255),
        RGBColor(255, 0, 255),
        RGBColor(200, 30, 90),
        RGBColor(12, 160, 240),
        RGBColor(3, 7, 11),
        RGBColor(250, 248, 240),
    ]
