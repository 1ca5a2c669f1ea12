"""KST 변환 성능 벤치마크

목표:
1. to_kst 호출당 지연시간이 datetime + zoneinfo(Asia/Seoul) 변환보다 짧을 것
2. 현재 시각 기준 결과가 범용 변환 결과와 일치할 것
3. 다중 스레드 동시 호출에서 실패 0건

실행:
    python benchmark/kst_performance.py
    BENCH_ITERATIONS=1000000 python benchmark/kst_performance.py
"""

from __future__ import annotations

import statistics

from fastkst.config.settings import bench_settings
from fastkst.diagnostics.benchmark import BenchmarkResult, run_benchmark
from fastkst.diagnostics.concurrency import run_concurrency_check
from fastkst.diagnostics.samples import SAMPLE_EPOCHS

ROUNDS = 5


def summarize(results: list[BenchmarkResult]) -> None:
    fast = [r.fastkst_us for r in results]
    ref = [r.zoneinfo_us for r in results]
    local = [r.localtime_us for r in results]

    print(f"{'implementation':<20} {'median(us)':>12} {'min(us)':>10} {'max(us)':>10}")
    for name, samples in (
        ("fastkst to_kst", fast),
        ("datetime+zoneinfo", ref),
        ("time.localtime", local),
    ):
        print(
            f"{name:<20} {statistics.median(samples):>12.3f} "
            f"{min(samples):>10.3f} {max(samples):>10.3f}"
        )
    speedup = statistics.median(ref) / statistics.median(fast)
    print(f"\nmedian speedup vs zoneinfo: {speedup:.2f}x")
    mismatched = [r for r in results if not r.results_match]
    print("results match" if not mismatched else f"{len(mismatched)} rounds mismatched")


def main() -> None:
    iterations = bench_settings.iterations
    print(f"rounds={ROUNDS} iterations={iterations}\n")
    summarize([run_benchmark(iterations) for _ in range(ROUNDS)])

    report = run_concurrency_check(
        [s.epoch for s in SAMPLE_EPOCHS],
        workers=bench_settings.workers,
        iterations_per_worker=bench_settings.iterations_per_worker,
    )
    print(
        f"\nconcurrency: workers={report.workers} success={report.total_success} "
        f"fail={report.total_fail} ({report.success_rate:.2f}%)"
    )


if __name__ == "__main__":
    main()
