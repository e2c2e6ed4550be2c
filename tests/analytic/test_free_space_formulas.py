from __future__ import annotations

import math
from math import isclose

from rf_utility.constants import C_M_S
from rf_utility.conversions import free_space_path_loss, rf_link_range, times_further, wavelength_m


def test_path_loss_reference_point() -> None:
    assert isclose(free_space_path_loss(500.0, 1000.0), 381.53, abs_tol=0.01)


def test_path_loss_matches_term_by_term_sum() -> None:
    expected = (
        20.0 * math.log10(250.0)
        + 20.0 * math.log10(2400.0 * 1e6)
        + 20.0 * math.log10(C_M_S / (4.0 * math.pi))
    )
    assert isclose(free_space_path_loss(2400.0, 250.0), expected, rel_tol=1e-12)


def test_path_loss_grows_20_db_per_decade_of_distance() -> None:
    near = free_space_path_loss(915.0, 100.0)
    far = free_space_path_loss(915.0, 1000.0)
    assert isclose(far - near, 20.0, abs_tol=1e-9)


def test_link_range_reference_point() -> None:
    range_m = rf_link_range(-30.0, -60.0, 500.0)
    assert isclose(round(range_m, 6), 0.001509, abs_tol=1e-6)


def test_link_range_uses_wavelength_over_four_pi() -> None:
    # Equal powers leave only the lambda / (4 pi) factor.
    assert isclose(rf_link_range(0.0, 0.0, 300.0), wavelength_m(300.0) / (4.0 * math.pi))


def test_wavelength_at_300_mhz_is_about_one_meter() -> None:
    assert isclose(wavelength_m(300.0), C_M_S / 3e8, rel_tol=1e-12)


def test_times_further_is_exact_ratio() -> None:
    assert times_further(100.0, 200.0) == 2.0
    assert times_further(4.0, 1.0) == 0.25


def test_times_further_same_distance_is_one() -> None:
    for distance in (0.5, 7.0, 1e6, -3.0):
        assert times_further(distance, distance) == 1.0
