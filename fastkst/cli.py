"""fastkst 명령행 진입점

Usage:
    fastkst convert 0 2147483647 -118800
    fastkst convert 1735657200 --json
    fastkst selftest
    fastkst bench --iterations 100000
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from fastkst.common.logger import DiagnosticLogger
from fastkst.common.serde import to_text
from fastkst.config.settings import bench_settings
from fastkst.core.calendar.kst import to_kst_into, to_kst_safe
from fastkst.core.dto.internal.civil_time import CivilTime
from fastkst.core.dto.io.civil_time import ConversionResultDTO
from fastkst.core.types import InvalidArgumentError
from fastkst.diagnostics.benchmark import BenchmarkResult, run_benchmark
from fastkst.diagnostics.concurrency import ConcurrencyReport, run_concurrency_check
from fastkst.diagnostics.samples import SAMPLE_EPOCHS


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastkst",
        description="Fixed-offset KST (UTC+9) epoch to civil time conversion",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="convert epoch seconds to KST")
    convert.add_argument("epochs", nargs="+", type=int, help="epoch seconds (may be negative)")
    convert.add_argument("--json", action="store_true", help="print one JSON object per epoch")
    convert.add_argument(
        "--year-bits",
        type=int,
        choices=[32, 64],
        default=None,
        help="year field width (default: FASTKST_YEAR_FIELD_BITS)",
    )

    sub.add_parser("selftest", help="run sample, null-guard and concurrency checks")

    bench = sub.add_parser("bench", help="compare against datetime/zoneinfo and time.localtime")
    bench.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="iterations per implementation (default: BENCH_ITERATIONS)",
    )
    bench.add_argument("--epoch", type=int, default=None, help="epoch to measure (default: now)")
    return parser


def _describe(civil: CivilTime) -> list[str]:
    return [
        f"  Date: {civil.format()}",
        f"  Day of week: {civil.tm_wday}, Day of year: {civil.tm_yday}",
    ]


def _print_conversion(epoch: int, description: str, year_bits: int | None = None) -> bool:
    result = to_kst_safe(epoch, year_bits=year_bits)
    if result.success:
        print(f"[SUCCESS] {description}")
        print(f"  Time: {epoch}")
        for line in _describe(result.value):
            print(line)
    else:
        code = result.error_code
        print(f"[FAIL] {description}")
        print(f"  Time: {epoch}, error: {code} (errno {code.errno})")
    print()
    return result.success


def cmd_convert(args: argparse.Namespace) -> int:
    ok = True
    for epoch in args.epochs:
        if args.json:
            result = to_kst_safe(epoch, year_bits=args.year_bits)
            print(to_text(ConversionResultDTO.from_safe(epoch, result)))
            ok = ok and result.success
        else:
            ok = _print_conversion(epoch, f"epoch {epoch}", args.year_bits) and ok
    return 0 if ok else 1


def _print_concurrency(report: ConcurrencyReport) -> None:
    print("=== to_kst_safe Concurrency Check ===")
    print(f"  - Number of workers: {report.workers}")
    print(f"  - Iterations per worker: {report.iterations_per_worker}")
    for check in report.checks:
        status = "PASS" if check.passed else "FAIL"
        print(f"  [{status}] {check.epoch}: success={check.success} fail={check.fail}")
    print(f"Total Success: {report.total_success}")
    print(f"Total Fail: {report.total_fail}")
    print(f"Success Rate: {report.success_rate:.2f}%")


def cmd_selftest(logger: DiagnosticLogger) -> int:
    print("=== FASTKST 64-bit Test ===\n")
    ok = True
    for sample in SAMPLE_EPOCHS:
        ok = _print_conversion(sample.epoch, sample.description) and ok

    print("*** NULL TEST ***")
    try:
        to_kst_into(0, None)
    except InvalidArgumentError as e:
        print(f"[SUCCESS] missing output buffer correctly rejected ({e.code}, errno {e.errno})\n")
    else:
        print("[FAIL] missing output buffer was accepted\n")
        ok = False

    logger.info(
        "concurrency check start",
        extra={"workers": bench_settings.workers, "epochs": len(SAMPLE_EPOCHS)},
    )
    report = run_concurrency_check(
        [s.epoch for s in SAMPLE_EPOCHS],
        workers=bench_settings.workers,
        iterations_per_worker=bench_settings.iterations_per_worker,
    )
    _print_concurrency(report)
    ok = ok and report.passed

    print("\n[PASS] All checks passed!" if ok else "\n[FAIL] Some checks failed!")
    return 0 if ok else 1


def _print_benchmark(result: BenchmarkResult) -> None:
    print("=== Performance Benchmark ===\n")
    print(f"Iterations: {result.iterations}")
    print(f"Test epoch: {result.epoch}\n")
    print("Results:")
    print(f"  datetime+zoneinfo: {result.zoneinfo_us:.3f} microseconds/call")
    print(f"  time.localtime():  {result.localtime_us:.3f} microseconds/call")
    print(f"  fastkst to_kst():  {result.fastkst_us:.3f} microseconds/call")
    print(f"\n  Speedup: {result.speedup:.2f}x vs datetime+zoneinfo")
    print(f"  Improvement: {result.improvement_pct:.2f}%")
    if result.results_match:
        print(f"\n  [PASS] Results match: {result.fastkst_text}")
    else:
        print("\n  [WARN] Results differ:")
        print(f"    zoneinfo (Asia/Seoul): {result.reference_text}")
        print(f"    fastkst (KST):         {result.fastkst_text}")


def cmd_bench(args: argparse.Namespace, logger: DiagnosticLogger) -> int:
    iterations = args.iterations or bench_settings.iterations
    logger.info("benchmark start", extra={"iterations": iterations})
    try:
        result = run_benchmark(iterations, epoch=args.epoch)
    except (ValueError, OverflowError, OSError) as e:
        logger.error("benchmark failed", extra={"epoch": args.epoch, "error": str(e)})
        print(f"[FAIL] benchmark: {e}")
        return 1
    _print_benchmark(result)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    with DiagnosticLogger.get_logger("fastkst", "cli") as logger:
        if args.command == "convert":
            return cmd_convert(args)
        if args.command == "selftest":
            return cmd_selftest(logger)
        return cmd_bench(args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
