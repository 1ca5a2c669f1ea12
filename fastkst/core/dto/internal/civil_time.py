"""Civil time(struct tm) 내부 도메인 모델.

내부 처리용 도메인 객체 (dataclass 기반).
- CivilTime: 변환 결과 값 (불변)
- TmBuffer: 호출자가 소유하는 출력 버퍼 (가변, C의 struct tm 포인터 대응)
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass, fields
from datetime import datetime, timedelta, timezone
from typing import Any

from fastkst.core.types import InvalidArgumentError, YearOverflowError

TM_YEAR_BIAS = 1900
SECS_PER_DAY = 86400


@dataclass(slots=True, frozen=True, eq=True, repr=True, kw_only=True)
class CivilTime:
    """고정 오프셋 civil time 분해 결과 (불변).

    필드 규약은 C ``struct tm``과 동일합니다:
    - tm_year: 1900 바이어스 적용 연도 (1970년 → 70)
    - tm_mon: 0-11 (0 = 1월)
    - tm_mday: 1-31
    - tm_wday: 0-6 (0 = 일요일, 1970-01-01 목요일 = 4)
    - tm_yday: 0-365
    - tm_gmtoff: UTC 오프셋 (초)
    - tm_zone: 존 레이블 (예: "KST"), decompose 단독 결과는 None
    """

    tm_year: int
    tm_mon: int
    tm_mday: int
    tm_hour: int
    tm_min: int
    tm_sec: int
    tm_wday: int
    tm_yday: int
    tm_isdst: int = 0
    tm_gmtoff: int = 0
    tm_zone: str | None = None

    @classmethod
    def zero(cls) -> CivilTime:
        """모든 필드가 0인 값 (memset 초기화 상태)"""
        return cls(
            tm_year=0,
            tm_mon=0,
            tm_mday=0,
            tm_hour=0,
            tm_min=0,
            tm_sec=0,
            tm_wday=0,
            tm_yday=0,
        )

    @property
    def year(self) -> int:
        """절대 연도 (tm_year + 1900)"""
        return self.tm_year + TM_YEAR_BIAS

    def to_epoch(self) -> int:
        """civil 필드와 tm_gmtoff로 epoch seconds 재구성"""
        from fastkst.core.calendar.offtime import to_epoch

        return to_epoch(
            self.year,
            self.tm_mon,
            self.tm_mday,
            self.tm_hour,
            self.tm_min,
            self.tm_sec,
            offset_seconds=self.tm_gmtoff,
        )

    def _year_text(self) -> str:
        # 부호는 자릿수에서 제외: -2 -> "-0002"
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}"

    def format(self) -> str:
        """'YYYY-MM-DD HH:MM:SS ZONE' 형식 문자열"""
        text = (
            f"{self._year_text()}-{self.tm_mon + 1:02d}-{self.tm_mday:02d} "
            f"{self.tm_hour:02d}:{self.tm_min:02d}:{self.tm_sec:02d}"
        )
        return f"{text} {self.tm_zone}" if self.tm_zone else text

    def isoformat(self) -> str:
        """ISO 8601 문자열 (예: 1970-01-01T09:00:00+09:00)"""
        sign = "-" if self.tm_gmtoff < 0 else "+"
        off_h, off_rem = divmod(abs(self.tm_gmtoff), 3600)
        off_m, off_s = divmod(off_rem, 60)
        offset = f"{sign}{off_h:02d}:{off_m:02d}"
        if off_s:
            offset += f":{off_s:02d}"
        return (
            f"{self._year_text()}-{self.tm_mon + 1:02d}-{self.tm_mday:02d}"
            f"T{self.tm_hour:02d}:{self.tm_min:02d}:{self.tm_sec:02d}{offset}"
        )

    def as_struct_time(self) -> time.struct_time:
        """Python time.struct_time 변환.

        Python 규약을 따릅니다: tm_mon/tm_yday는 1부터, tm_wday는 월요일 = 0.
        """
        return time.struct_time(
            (
                self.year,
                self.tm_mon + 1,
                self.tm_mday,
                self.tm_hour,
                self.tm_min,
                self.tm_sec,
                (self.tm_wday + 6) % 7,
                self.tm_yday + 1,
                self.tm_isdst,
                self.tm_zone,
                self.tm_gmtoff,
            )
        )

    def to_datetime(self) -> datetime:
        """timezone-aware datetime 변환 (1-9999년, 오프셋 ±24시간 미만만 가능)"""
        if not datetime.min.year <= self.year <= datetime.max.year:
            raise YearOverflowError(
                f"year {self.year} is outside datetime range", year=self.year
            )
        if not -SECS_PER_DAY < self.tm_gmtoff < SECS_PER_DAY:
            raise InvalidArgumentError(
                f"utc offset {self.tm_gmtoff}s is outside datetime.timezone range (±24h)"
            )
        offset = timedelta(seconds=self.tm_gmtoff)
        tz = timezone(offset, self.tm_zone) if self.tm_zone else timezone(offset)
        return datetime(
            self.year,
            self.tm_mon + 1,
            self.tm_mday,
            self.tm_hour,
            self.tm_min,
            self.tm_sec,
            tzinfo=tz,
        )

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, eq=True, repr=True, kw_only=True)
class TmBuffer:
    """호출자 소유 출력 버퍼 (가변).

    특징:
    - clear(): memset(0) 대응, 실패 시 이전 데이터가 남지 않도록 초기화
    - fill(): 변환이 완전히 끝난 CivilTime을 한 번에 기록
    - freeze(): 불변 CivilTime 스냅샷
    """

    tm_year: int = 0
    tm_mon: int = 0
    tm_mday: int = 0
    tm_hour: int = 0
    tm_min: int = 0
    tm_sec: int = 0
    tm_wday: int = 0
    tm_yday: int = 0
    tm_isdst: int = 0
    tm_gmtoff: int = 0
    tm_zone: str | None = None

    def clear(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)

    def fill(self, civil: CivilTime) -> None:
        for f in fields(self):
            setattr(self, f.name, getattr(civil, f.name))

    def freeze(self) -> CivilTime:
        return CivilTime(**{f.name: getattr(self, f.name) for f in fields(self)})
