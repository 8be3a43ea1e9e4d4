"""
Acceptance tests against Sharma, Wu & Dalal (2005), Table 1.

Tests: SHARMA_2005, reference_residuals, delta_e_2000 on every published pair
"""
import numpy as np
import pytest

from tincture_ciede2000 import delta_e_2000
from tincture_reference import SHARMA_2005, ReferencePair, reference_residuals


def test_table_is_complete():
    assert len(SHARMA_2005) == 34
    assert all(isinstance(p, ReferencePair) for p in SHARMA_2005)


def test_pairs_are_immutable():
    with pytest.raises(AttributeError):
        SHARMA_2005[0].delta_e = 0.0


@pytest.mark.parametrize(
    "pair", SHARMA_2005, ids=[f"pair{i + 1:02d}" for i in range(len(SHARMA_2005))]
)
def test_published_value(pair):
    assert delta_e_2000(pair.lab1, pair.lab2) == pytest.approx(pair.delta_e, abs=1e-4)


@pytest.mark.parametrize(
    "pair", SHARMA_2005, ids=[f"pair{i + 1:02d}" for i in range(len(SHARMA_2005))]
)
def test_published_value_reversed(pair):
    assert delta_e_2000(pair.lab2, pair.lab1) == pytest.approx(pair.delta_e, abs=1e-4)


def test_residuals_default_metric():
    residuals = reference_residuals()
    assert residuals.shape == (34,)
    assert np.max(residuals) < 1e-4


def test_residuals_fast_mode(fast_mode):
    assert np.max(reference_residuals()) < 1e-4


def test_residuals_flag_other_metrics():
    """Plain Euclidean Lab distance (Delta E 76) is far off the table."""
    def euclidean(lab1, lab2):
        return float(np.linalg.norm(np.subtract(lab1, lab2)))

    assert np.max(reference_residuals(euclidean)) > 1.0
