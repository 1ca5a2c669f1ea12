"""to_kst_safe 동시 호출 점검.

여러 스레드에서 같은 epoch를 반복 변환하고 결과 필드 범위를 검증합니다.
변환 함수는 공유 가변 상태가 없으므로 실패는 0건이어야 합니다.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from fastkst.core.calendar.kst import to_kst_safe
from fastkst.core.dto.internal.civil_time import CivilTime, TmBuffer

VALID_YEAR_RANGE = (1900, 3000)


@dataclass(slots=True, frozen=True)
class EpochCheck:
    epoch: int
    success: int
    fail: int

    @property
    def passed(self) -> bool:
        return self.fail == 0


@dataclass(slots=True)
class ConcurrencyReport:
    workers: int
    iterations_per_worker: int
    checks: list[EpochCheck] = field(default_factory=list)

    @property
    def total_success(self) -> int:
        return sum(c.success for c in self.checks)

    @property
    def total_fail(self) -> int:
        return sum(c.fail for c in self.checks)

    @property
    def success_rate(self) -> float:
        total = self.total_success + self.total_fail
        return self.total_success / total * 100.0 if total else 0.0

    @property
    def passed(self) -> bool:
        return self.total_fail == 0


def is_plausible(civil: CivilTime) -> bool:
    """필드 범위 검증 (연도는 기준 샘플 범위 1900-3000)"""
    low, high = VALID_YEAR_RANGE
    return (
        low <= civil.year <= high
        and 0 <= civil.tm_mon <= 11
        and 1 <= civil.tm_mday <= 31
        and 0 <= civil.tm_hour <= 23
        and 0 <= civil.tm_min <= 59
        and 0 <= civil.tm_sec <= 59
    )


def _worker(epoch: int, iterations: int) -> tuple[int, int]:
    buffer = TmBuffer()
    success = fail = 0
    for _ in range(iterations):
        result = to_kst_safe(epoch, buffer)
        if result.success and is_plausible(result.value):
            success += 1
        else:
            fail += 1
        # 다른 스레드와 경쟁 조건을 만들기 위해 GIL 양보
        time.sleep(0)
    return success, fail


def run_concurrency_check(
    epochs: Iterable[int],
    workers: int,
    iterations_per_worker: int,
) -> ConcurrencyReport:
    """epoch별로 workers개 스레드에서 동시에 to_kst_safe 호출.

    Args:
        epochs: 점검할 epoch 목록
        workers: 동시 스레드 수
        iterations_per_worker: 스레드당 호출 횟수

    Returns:
        ConcurrencyReport
    """
    if workers <= 0 or iterations_per_worker <= 0:
        raise ValueError("workers and iterations_per_worker must be positive")

    report = ConcurrencyReport(workers=workers, iterations_per_worker=iterations_per_worker)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fastkst") as pool:
        for epoch in epochs:
            futures = [
                pool.submit(_worker, epoch, iterations_per_worker) for _ in range(workers)
            ]
            outcomes = [f.result() for f in futures]
            report.checks.append(
                EpochCheck(
                    epoch=epoch,
                    success=sum(s for s, _ in outcomes),
                    fail=sum(f for _, f in outcomes),
                )
            )
    return report
