import math

import numpy as np
import pytest

from envstats.models import NormalityStatus
from envstats.normality import (
    shapiro_wilk,
    shapiro_wilk_coefficients,
    shapiro_wilk_p_value,
    shapiro_wilk_statistic,
)
from envstats.normality.shapiro_wilk import C1, GAMMA, SMALL_P_VALUE, poly


def test_poly_evaluates_ascending_coefficients() -> None:
    assert poly((2.0,), 5.0) == 2.0
    assert poly(GAMMA, 4) == pytest.approx(-2.273 + 0.459 * 4)
    assert poly((1.0, 2.0, 3.0), 2.0) == 1.0 + 2.0 * 2.0 + 3.0 * 4.0
    assert poly(C1, 0.0) == 0.0


def test_constant_sample_is_degenerate_normal() -> None:
    result = shapiro_wilk([5.0, 5.0, 5.0, 5.0, 5.0])

    assert result.statistic == 1.0
    assert result.p_value == 1.0
    assert result.status is NormalityStatus.DEGENERATE
    assert result.is_tested


def test_too_small_sample_returns_sentinel() -> None:
    result = shapiro_wilk([1.0, 2.0])

    assert math.isnan(result.statistic)
    assert result.p_value == 0.0
    assert result.status is NormalityStatus.INVALID_SAMPLE_SIZE
    assert not result.is_tested
    assert not result.is_normal()


def test_sample_size_limits() -> None:
    rng = np.random.default_rng(5)

    assert shapiro_wilk(rng.normal(size=5001)).status is NormalityStatus.INVALID_SAMPLE_SIZE
    assert shapiro_wilk([]).status is NormalityStatus.INVALID_SAMPLE_SIZE
    assert shapiro_wilk(rng.normal(size=5000)).status is NormalityStatus.TESTED


def test_three_point_weight_is_closed_form() -> None:
    a = shapiro_wilk_coefficients(3)

    assert a.tolist() == [0.70710678]


@pytest.mark.parametrize("n", [4, 5, 6, 10, 51, 500])
def test_weights_are_normalised_and_decreasing(n: int) -> None:
    a = shapiro_wilk_coefficients(n)

    assert a.size == n // 2
    assert 2.0 * float(np.sum(a**2)) == pytest.approx(1.0, abs=1e-12)
    assert np.all(a > 0)
    assert np.all(np.diff(a) < 0)


def test_weights_for_ten_match_published_table() -> None:
    a = shapiro_wilk_coefficients(10)

    assert a == pytest.approx([0.5739, 0.3291, 0.2141, 0.1224, 0.0399], abs=5e-3)


def test_statistic_of_linear_three_points_is_one() -> None:
    values = np.array([1.0, 2.0, 3.0])

    w = shapiro_wilk_statistic(values, shapiro_wilk_coefficients(3))

    assert w == pytest.approx(1.0, abs=1e-7)
    assert shapiro_wilk_p_value(w, 3) == pytest.approx(1.0, abs=1e-3)


def test_three_point_p_value_is_clamped_at_lower_bound() -> None:
    assert shapiro_wilk_p_value(0.75, 3) == 0.0
    assert shapiro_wilk_p_value(1.0, 3) == pytest.approx(1.0, abs=1e-12)


def test_small_sample_p_value_floor() -> None:
    # log(1 - 0.1) exceeds gamma(4) = -0.437
    assert shapiro_wilk_p_value(0.1, 4) == SMALL_P_VALUE


def test_perfect_fit_has_unit_p_value() -> None:
    assert shapiro_wilk_p_value(1.0, 20) == 1.0
    assert shapiro_wilk_p_value(1.0, 8) == 1.0


def test_result_does_not_depend_on_input_order() -> None:
    values = [23.1, 21.4, 25.0, 22.2, 24.7, 22.9, 21.8, 23.6]

    forward = shapiro_wilk(values)
    backward = shapiro_wilk(values[::-1])

    assert forward == backward
    assert values[0] == 23.1


@pytest.mark.parametrize("n", [3, 4, 7, 11, 12, 40, 300])
def test_statistic_and_p_value_are_probabilities(n: int) -> None:
    rng = np.random.default_rng(n)
    result = shapiro_wilk(rng.uniform(10.0, 30.0, size=n))

    assert 0.0 <= result.statistic <= 1.0
    assert 0.0 <= result.p_value <= 1.0
    assert result.status is NormalityStatus.TESTED


def test_skewed_sample_is_rejected() -> None:
    result = shapiro_wilk([0.0] * 9 + [100.0])

    assert result.p_value < 0.05
    assert not result.is_normal(0.05)
