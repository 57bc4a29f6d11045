"""Shapiro-Wilk regression values, one dataset per code branch.

Reference values come from scipy.stats.shapiro, which wraps the same
AS R94 algorithm with an exact normal tail.
"""

from __future__ import annotations

import numpy as np
import pytest
from scipy.stats import shapiro

from envstats.normality import shapiro_wilk

_RNG = np.random.default_rng(20240611)

DATASETS = {
    "n3_closed_form": [1.0, 2.0, 4.0],
    "n4_small_weights": [2.1, 3.4, 1.9, 5.6],
    "n5_small_weights_outlier": [1.0, 2.0, 3.0, 4.0, 10.0],
    "n6_corrected_weights": [4.4, 5.1, 3.9, 6.2, 5.5, 4.8],
    "n11_gamma_transform": [21.3, 22.8, 23.1, 21.9, 24.6, 22.2, 23.7, 22.5, 25.9, 21.1, 23.0],
    "n12_log_n_polynomial": list(_RNG.normal(24.0, 1.5, size=12)),
    "n200_normal": list(_RNG.normal(55.0, 8.0, size=200)),
    "n100_exponential": list(_RNG.exponential(3.0, size=100)),
}


@pytest.mark.parametrize("name", sorted(DATASETS))
def test_matches_reference_implementation(name: str) -> None:
    values = DATASETS[name]
    expected = shapiro(values)

    result = shapiro_wilk(values)

    assert result.statistic == pytest.approx(float(expected.statistic), rel=1e-5)
    assert result.p_value == pytest.approx(float(expected.pvalue), abs=1e-4)


def test_exponential_sample_is_not_normal() -> None:
    assert shapiro_wilk(DATASETS["n100_exponential"]).p_value < 0.05
