"""
Tests for the indel error model runners
"""
import gzip
from pathlib import Path

import pytest

from indelcal.calibration import Options, indel_error_rate_runner, show_rates_runner
from indelcal.calibration.runner import indel_key_for_type
from indelcal.models import AdaptiveDefaultModelSpec, LogLinearModelSpec


def test_indel_key_for_type():
    assert indel_key_for_type("insert", 2).is_insertion
    assert indel_key_for_type("delete", 2).is_deletion
    assert not indel_key_for_type("complex").is_simple
    assert indel_key_for_type("insert", 0).insert_length == 1


def test_show_rates_writes_table(tmp_path: Path):
    output = show_rates_runner(AdaptiveDefaultModelSpec(), False, tmp_path, "adaptive")
    assert output == tmp_path / "adaptive.indel_error_rates.tsv"
    lines = output.read_text().splitlines()
    assert lines[0].split("\t") == ["repeat_unit_length", "repeat_count", "insertion_rate", "deletion_rate"]
    # 16 homopolymer rows and 9 dinucleotide rows
    assert len(lines) == 1 + 16 + 9
    assert lines[1].split("\t") == ["1", "1", "0.008", "0.008"]


def test_show_rates_candidate_and_compressed(tmp_path: Path):
    output = show_rates_runner(AdaptiveDefaultModelSpec(), True, tmp_path, "cand", compress=True)
    assert output.name == "cand.indel_error_rates.tsv.gz"
    with gzip.open(output, "rt") as fh:
        lines = fh.read().splitlines()
    assert len(lines) == 1 + 16
    assert lines[1].split("\t")[2] == "5e-05"


def test_show_rates_refuses_to_overwrite(tmp_path: Path):
    show_rates_runner(LogLinearModelSpec(), False, tmp_path, "ll")
    with pytest.raises(SystemExit) as ei:
        show_rates_runner(LogLinearModelSpec(), False, tmp_path, "ll")
    assert ei.value.code == 3
    show_rates_runner(LogLinearModelSpec(), False, tmp_path, "ll", overwrite=True)


def test_indel_error_rate_runner():
    options = Options(indel_error_model="adaptiveDefault", repeat_unit_length=1, ref_repeat_count=2,
                      indel_repeat_count=16, indel_type="insert")
    ref_to_indel, indel_to_ref = indel_error_rate_runner(options)
    assert ref_to_indel == pytest.approx(4.9e-3)
    assert indel_to_ref == pytest.approx(4.5e-2)


def test_indel_error_rate_runner_candidate_complex():
    options = Options(indel_error_model="adaptiveDefault", indel_type="complex", candidate_rates=True)
    assert indel_error_rate_runner(options) == pytest.approx((5e-5, 5e-5))
