"""
Tests for the indel error rate table
"""
import pytest

from indelcal.common import InvalidRateTableError
from indelcal.models import IndelErrorRateSet, IndelErrorRateType
from indelcal.variants import IndelKey

INSERT = IndelErrorRateType.INSERT
DELETE = IndelErrorRateType.DELETE


def _table(entries):
    rates = IndelErrorRateSet()
    for unit, count, insert_rate, delete_rate in entries:
        rates.add_rate(unit, count, insert_rate, delete_rate)
    return rates


def test_lookup_by_direction():
    rates = _table([(1, 1, 0.1, 0.2), (1, 2, 0.3, 0.4)])
    rates.finalize_rates()
    assert rates.get_rate(1, 1, INSERT) == 0.1
    assert rates.get_rate(1, 1, DELETE) == 0.2
    assert rates.get_rate(1, 2, INSERT) == 0.3
    assert rates.get_rate(1, 2, DELETE) == 0.4


def test_repeat_count_past_table_clamps_to_last_entry():
    rates = _table([(1, 1, 0.1, 0.2), (1, 2, 0.3, 0.4), (2, 1, 0.01, 0.02)])
    rates.finalize_rates()
    assert rates.get_rate(1, 50, INSERT) == 0.3
    assert rates.get_rate(2, 7, DELETE) == 0.02


def test_missing_unit_length_uses_non_repeat_baseline():
    rates = _table([(1, 1, 0.1, 0.2), (1, 2, 0.3, 0.4)])
    rates.finalize_rates()
    assert rates.get_rate(3, 4, INSERT) == 0.1
    assert rates.get_rate(3, 4, DELETE) == 0.2


def test_gap_in_repeat_counts_fails_finalization():
    rates = _table([(1, 1, 0.1, 0.1), (1, 3, 0.2, 0.2)])
    with pytest.raises(InvalidRateTableError):
        rates.finalize_rates()


def test_empty_table_fails_finalization():
    with pytest.raises(InvalidRateTableError):
        IndelErrorRateSet().finalize_rates()


def test_table_without_baseline_fails_finalization():
    rates = _table([(2, 1, 0.1, 0.1)])
    with pytest.raises(InvalidRateTableError):
        rates.finalize_rates()


@pytest.mark.parametrize("bad_rate", [-0.1, 1.5, float("nan")])
def test_rates_outside_unit_interval_fail_finalization(bad_rate):
    rates = _table([(1, 1, 0.1, 0.1), (1, 2, bad_rate, 0.1)])
    with pytest.raises(InvalidRateTableError):
        rates.finalize_rates()


def test_decreasing_rates_are_kept_with_a_warning(caplog):
    rates = _table([(1, 1, 0.1, 0.1), (1, 2, 0.5, 0.5), (1, 3, 0.2, 0.2)])
    with caplog.at_level("WARNING"):
        rates.finalize_rates()
    assert "decrease" in caplog.text
    assert rates.get_rate(1, 3, INSERT) == 0.2


def test_non_repeat_baseline_is_not_part_of_monotonic_check(caplog):
    rates = _table([(1, 1, 0.5, 0.5), (1, 2, 0.1, 0.1), (1, 3, 0.2, 0.2)])
    with caplog.at_level("WARNING"):
        rates.finalize_rates()
    assert "decrease" not in caplog.text


def test_finalized_table_is_read_only():
    rates = _table([(1, 1, 0.1, 0.2)])
    rates.finalize_rates()
    rates.finalize_rates()
    assert rates.is_finalized
    with pytest.raises(AssertionError):
        rates.add_rate(1, 2, 0.1, 0.1)


def test_query_before_finalization_is_a_contract_violation():
    rates = _table([(1, 1, 0.1, 0.2)])
    with pytest.raises(AssertionError):
        rates.get_rate(1, 1, INSERT)


def test_duplicate_key_is_a_contract_violation():
    rates = _table([(1, 1, 0.1, 0.2)])
    with pytest.raises(AssertionError):
        rates.add_rate(1, 1, 0.3, 0.4)


def test_iter_rates_is_ordered():
    rates = _table([(2, 1, 0.05, 0.06), (1, 2, 0.3, 0.4), (1, 1, 0.1, 0.2)])
    rates.finalize_rates()
    assert list(rates.iter_rates()) == [
        (1, 1, 0.1, 0.2),
        (1, 2, 0.3, 0.4),
        (2, 1, 0.05, 0.06),
    ]
    assert rates.repeat_unit_lengths == [1, 2]
    assert rates.max_repeat_count(1) == 2
    assert len(rates) == 3


def test_rate_type_from_indel_key():
    assert IndelErrorRateType.from_indel_key(IndelKey(10, 0, "A")) == INSERT
    assert IndelErrorRateType.from_indel_key(IndelKey(10, 2)) == DELETE
    assert IndelErrorRateType.from_indel_key(IndelKey(10, 2, "T")) == IndelErrorRateType.COMPLEX
    assert INSERT.opposite() == DELETE
    assert DELETE.opposite() == INSERT
    with pytest.raises(AssertionError):
        IndelErrorRateType.COMPLEX.opposite()
