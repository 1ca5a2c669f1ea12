"""
to_kst 성능 벤치마크

범용 타임존 변환(datetime + zoneinfo Asia/Seoul, time.localtime) 대비
호출당 소요 시간과 결과 일치 여부를 측정합니다.

실행 방법:
    fastkst bench --iterations 100000
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, tzinfo

from fastkst.core.calendar.kst import to_kst
from fastkst.diagnostics.reference import seoul_tz


@dataclass(slots=True, frozen=True)
class BenchmarkResult:
    """벤치마크 결과"""

    iterations: int
    epoch: int
    fastkst_us: float
    zoneinfo_us: float
    localtime_us: float
    fastkst_text: str
    reference_text: str

    @property
    def speedup(self) -> float:
        """zoneinfo 대비 배수 (1보다 크면 fastkst가 빠름)"""
        if self.fastkst_us <= 0:
            return 0.0
        return self.zoneinfo_us / self.fastkst_us

    @property
    def improvement_pct(self) -> float:
        if self.zoneinfo_us <= 0:
            return 0.0
        return (self.zoneinfo_us - self.fastkst_us) / self.zoneinfo_us * 100.0

    @property
    def results_match(self) -> bool:
        return self.fastkst_text == self.reference_text


def _per_call_us(start: float, end: float, iterations: int) -> float:
    return (end - start) * 1_000_000.0 / iterations


def _require_reference_range(epoch: int, tz: tzinfo) -> None:
    """비교 대상(datetime, time.localtime)이 처리할 수 있는 epoch인지 확인

    100회마다 +1초 변동분까지 포함해 검사합니다.
    """
    for t in (epoch, epoch + 1):
        try:
            datetime.fromtimestamp(t, tz)
            time.localtime(t)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(
                f"epoch {epoch} is outside the range supported by "
                f"datetime/time.localtime on this platform: {e}"
            ) from e


def run_benchmark(iterations: int, epoch: int | None = None) -> BenchmarkResult:
    """fastkst vs 범용 변환 성능 비교.

    Args:
        iterations: 각 구현의 반복 횟수
        epoch: 측정 기준 epoch (None이면 현재 시각)

    Returns:
        BenchmarkResult

    Raises:
        ValueError: iterations가 0 이하이거나 epoch가 비교 대상 범위 밖
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    base = int(time.time()) if epoch is None else epoch
    tz = seoul_tz()
    _require_reference_range(base, tz)

    # 100회마다 1초씩 변동 (동일 입력 반복으로 인한 캐시 효과 완화)
    epochs = [base + (1 if i % 100 == 0 else 0) for i in range(iterations)]

    start = time.perf_counter()
    for t in epochs:
        datetime.fromtimestamp(t, tz)
    zoneinfo_us = _per_call_us(start, time.perf_counter(), iterations)

    start = time.perf_counter()
    for t in epochs:
        time.localtime(t)
    localtime_us = _per_call_us(start, time.perf_counter(), iterations)

    start = time.perf_counter()
    for t in epochs:
        to_kst(t)
    fastkst_us = _per_call_us(start, time.perf_counter(), iterations)

    reference = datetime.fromtimestamp(base, tz)
    return BenchmarkResult(
        iterations=iterations,
        epoch=base,
        fastkst_us=fastkst_us,
        zoneinfo_us=zoneinfo_us,
        localtime_us=localtime_us,
        fastkst_text=to_kst(base).format().removesuffix(" KST"),
        reference_text=reference.strftime("%Y-%m-%d %H:%M:%S"),
    )
