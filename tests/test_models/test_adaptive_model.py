"""
Tests for the adaptive (log-linear interpolated) indel error model
"""
import math

import pytest

from indelcal.models import AdaptiveIndelErrorModel, AdaptiveIndelErrorModelLogParams, linear_fit


def _dinucleotide_model():
    return AdaptiveIndelErrorModel(
        2,
        9,
        AdaptiveIndelErrorModelLogParams(math.log(1e-2), math.log(1e-3)),
        AdaptiveIndelErrorModelLogParams(math.log(1.8e-2), math.log(4e-3))
    )


def test_error_rate_at_anchors():
    model = _dinucleotide_model()
    assert model.error_rate(2) == pytest.approx(1e-2)
    assert model.error_rate(9) == pytest.approx(1.8e-2)


def test_error_rate_clamps_past_switch_point():
    model = _dinucleotide_model()
    assert model.error_rate(20) == model.error_rate(9)


def test_error_rate_is_interpolated_and_increasing():
    model = _dinucleotide_model()
    assert 1e-2 < model.error_rate(5) < 1.8e-2
    rates = [model.error_rate(count) for count in range(2, 12)]
    assert rates == sorted(rates)


def test_error_rate_is_log_linear():
    model = _dinucleotide_model()
    expected = math.exp(math.log(1e-2) + 3 * (math.log(1.8e-2) - math.log(1e-2)) / 7)
    assert model.error_rate(5) == pytest.approx(expected)


def test_noisy_locus_rate():
    model = _dinucleotide_model()
    assert model.noisy_locus_rate(2) == pytest.approx(1e-3)
    assert model.noisy_locus_rate(9) == pytest.approx(4e-3)
    assert model.noisy_locus_rate(30) == pytest.approx(4e-3)
    assert 1e-3 < model.noisy_locus_rate(4) < 4e-3


def test_repeat_count_of_one_is_a_contract_violation():
    model = _dinucleotide_model()
    with pytest.raises(AssertionError):
        model.error_rate(1)
    with pytest.raises(AssertionError):
        model.noisy_locus_rate(0)


def test_linear_fit():
    assert linear_fit(2, 2, 1., 4, 5.) == pytest.approx(1.)
    assert linear_fit(4, 2, 1., 4, 5.) == pytest.approx(5.)
    assert linear_fit(3, 2, 1., 4, 5.) == pytest.approx(3.)
    assert linear_fit(6, 2, 1., 4, 5.) == pytest.approx(9.)


def test_linear_fit_equal_x_is_a_contract_violation():
    with pytest.raises(AssertionError):
        linear_fit(3, 2, 1., 2, 5.)
