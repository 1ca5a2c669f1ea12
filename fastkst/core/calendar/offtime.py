"""고정 오프셋 epoch → civil time 분해 (64-bit safe offtime).

시스템 타임존 설정과 무관하게 epoch seconds를 고정 UTC 오프셋의
proleptic Gregorian 달력 시각으로 분해합니다.

특징:
    - 순수 함수: 인자와 불변 상수 테이블만 읽음 (공유 가변 상태 없음, 스레드 안전)
    - 2038 문제 없음: Python int 산술이므로 중간 계산 오버플로 없음
    - 연도 필드 범위 검사: 1900 바이어스 적용 후 연도 필드 폭(기본 32-bit)에
      들어가지 않으면 잘라내지 않고 YearOverflowError 발생

연도 필드 폭별 유효 절대 연도:
    - 32-bit: -2147481748 ~ 2147485547 (약 ±21억년)
    - 64-bit: -9223372036854773908 ~ 9223372036854777707
"""

from __future__ import annotations

from typing import Final

from fastkst.core.dto.internal.civil_time import TM_YEAR_BIAS, CivilTime
from fastkst.core.types import InvalidArgumentError, YearOverflowError

SECS_PER_HOUR: Final[int] = 60 * 60
SECS_PER_DAY: Final[int] = SECS_PER_HOUR * 24

EPOCH_YEAR: Final[int] = 1970
# 1970-01-01은 목요일
EPOCH_WDAY: Final[int] = 4

SUPPORTED_YEAR_BITS: Final[tuple[int, ...]] = (32, 64)
DEFAULT_YEAR_BITS: Final[int] = 32

# 월별 누적 일수 (평년, 윤년)
MON_YDAY: Final[tuple[tuple[int, ...], tuple[int, ...]]] = (
    (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365),
    (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366),
)


def is_leap(year: int) -> bool:
    """proleptic Gregorian 윤년 여부"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


def leaps_thru_end_of(year: int) -> int:
    """0년부터 year년 말까지의 윤일 수 (음수 연도는 floor 나눗셈 기준)"""
    return year // 4 - year // 100 + year // 400


def year_field_bounds(bits: int = DEFAULT_YEAR_BITS) -> tuple[int, int]:
    """연도 필드 폭에 들어가는 절대 연도 범위 (min, max).

    Args:
        bits: 부호 있는 연도 필드 폭 (32 또는 64)

    Returns:
        (최소 절대 연도, 최대 절대 연도)

    Examples:
        >>> year_field_bounds(32)
        (-2147481748, 2147485547)
    """
    if bits not in SUPPORTED_YEAR_BITS:
        raise InvalidArgumentError(
            f"unsupported year field width: {bits} (expected one of {SUPPORTED_YEAR_BITS})"
        )
    limit = 1 << (bits - 1)
    return -limit + TM_YEAR_BIAS, limit - 1 + TM_YEAR_BIAS


def _require_int(name: str, value: object) -> int:
    # bool은 int 서브클래스이지만 시각 값으로 받지 않음
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    return value


def decompose(
    epoch_seconds: int,
    offset_seconds: int,
    *,
    year_bits: int = DEFAULT_YEAR_BITS,
) -> CivilTime:
    """epoch seconds를 고정 오프셋 civil time으로 분해.

    Args:
        epoch_seconds: 1970-01-01T00:00:00Z 기준 초 (음수 허용, 크기 제한 없음)
        offset_seconds: UTC 오프셋 (초). 하루 경계를 넘기는 값도 허용
        year_bits: 연도 필드 폭 (32 또는 64)

    Returns:
        CivilTime (tm_gmtoff = offset_seconds, tm_zone = None)

    Raises:
        YearOverflowError: 연도가 연도 필드 범위를 벗어남 (EOVERFLOW)
        InvalidArgumentError: 인자가 int가 아니거나 year_bits가 지원되지 않음
    """
    epoch_seconds = _require_int("epoch_seconds", epoch_seconds)
    offset_seconds = _require_int("offset_seconds", offset_seconds)
    min_year, max_year = year_field_bounds(year_bits)

    days, rem = divmod(epoch_seconds, SECS_PER_DAY)
    # 오프셋이 하루를 넘겨도 한 번의 floor 나눗셈으로 정규화
    extra_days, rem = divmod(rem + offset_seconds, SECS_PER_DAY)
    days += extra_days

    hour, rem = divmod(rem, SECS_PER_HOUR)
    minute, second = divmod(rem, 60)

    # Python의 %는 음수 피제수에도 0-6을 반환
    wday = (EPOCH_WDAY + days) % 7

    year = EPOCH_YEAR
    while days < 0 or days >= days_in_year(year):
        # 1년 = 365일로 가정하고 연도를 추정한 뒤 윤일 차이만큼 보정
        guess = year + days // 365
        days -= (guess - year) * 365 + leaps_thru_end_of(guess - 1) - leaps_thru_end_of(year - 1)
        year = guess

    if year < min_year or year > max_year:
        raise YearOverflowError(
            f"year {year} does not fit a {year_bits}-bit year field "
            f"(allowed {min_year}..{max_year})",
            year=year,
        )

    yday = days
    table = MON_YDAY[is_leap(year)]
    mon = 11
    while days < table[mon]:
        mon -= 1

    return CivilTime(
        tm_year=year - TM_YEAR_BIAS,
        tm_mon=mon,
        tm_mday=days - table[mon] + 1,
        tm_hour=hour,
        tm_min=minute,
        tm_sec=second,
        tm_wday=wday,
        tm_yday=yday,
        tm_isdst=0,
        tm_gmtoff=offset_seconds,
    )


def to_epoch(
    year: int,
    month: int,
    mday: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    *,
    offset_seconds: int = 0,
) -> int:
    """civil 시각 → epoch seconds (timegm 역변환).

    Args:
        year: 절대 연도 (바이어스 미적용)
        month: 0-11
        mday: 1 ~ 해당 월 일수
        hour, minute, second: 0-23, 0-59, 0-59
        offset_seconds: civil 시각에 적용된 UTC 오프셋

    Raises:
        InvalidArgumentError: 필드가 범위를 벗어남
    """
    for name, value in (
        ("year", year),
        ("month", month),
        ("mday", mday),
        ("hour", hour),
        ("minute", minute),
        ("second", second),
        ("offset_seconds", offset_seconds),
    ):
        _require_int(name, value)

    if not 0 <= month <= 11:
        raise InvalidArgumentError(f"month out of range: {month}")
    table = MON_YDAY[is_leap(year)]
    if not 1 <= mday <= table[month + 1] - table[month]:
        raise InvalidArgumentError(f"day of month out of range: {mday}")
    if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
        raise InvalidArgumentError(f"time of day out of range: {hour}:{minute}:{second}")

    days = (
        (year - EPOCH_YEAR) * 365
        + leaps_thru_end_of(year - 1)
        - leaps_thru_end_of(EPOCH_YEAR - 1)
        + table[month]
        + mday
        - 1
    )
    return days * SECS_PER_DAY + hour * SECS_PER_HOUR + minute * 60 + second - offset_seconds
