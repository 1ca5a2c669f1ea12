from __future__ import annotations

import pytest

from fastkst.core.calendar.kst import to_kst
from fastkst.diagnostics.benchmark import run_benchmark
from fastkst.diagnostics.concurrency import is_plausible, run_concurrency_check
from fastkst.diagnostics.reference import reference_fields
from fastkst.diagnostics.samples import SAMPLE_EPOCHS
from tests.factory_builders import civil_tuple


@pytest.mark.parametrize("sample", SAMPLE_EPOCHS, ids=lambda s: s.description)
def test_samples_match_reference_conversion(sample) -> None:
    civil = to_kst(sample.epoch)

    assert civil_tuple(civil) == reference_fields(sample.epoch)
    assert is_plausible(civil)


def test_sample_descriptions_match_conversion() -> None:
    for sample in SAMPLE_EPOCHS[1:]:
        assert sample.description.startswith(to_kst(sample.epoch).format()[:19])


def test_concurrency_check_reports_no_failures() -> None:
    epochs = [s.epoch for s in SAMPLE_EPOCHS]

    report = run_concurrency_check(epochs, workers=8, iterations_per_worker=50)

    assert report.passed
    assert report.total_success == len(epochs) * 8 * 50
    assert report.success_rate == 100.0
    assert [c.epoch for c in report.checks] == epochs


def test_concurrency_check_counts_out_of_range_results_as_failures() -> None:
    # 2038년 이후 3000년 초과 값은 범위 검증에서 실패로 집계
    report = run_concurrency_check([10**12, 1 << 62], workers=2, iterations_per_worker=3)

    assert not report.passed
    assert report.total_fail == 2 * 2 * 3


def test_concurrency_check_rejects_non_positive_sizes() -> None:
    with pytest.raises(ValueError):
        run_concurrency_check([0], workers=0, iterations_per_worker=1)


def test_benchmark_result_fields() -> None:
    result = run_benchmark(100, epoch=1735657200)

    assert result.iterations == 100
    assert result.epoch == 1735657200
    assert result.fastkst_us > 0
    assert result.zoneinfo_us > 0
    assert result.fastkst_text == "2025-01-01 00:00:00"
    assert result.results_match
    assert result.speedup > 0


def test_benchmark_rejects_epoch_outside_datetime_range() -> None:
    with pytest.raises(ValueError, match="outside the range supported"):
        run_benchmark(10, epoch=10**15)
