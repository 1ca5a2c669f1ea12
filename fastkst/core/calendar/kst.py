"""KST(한국 표준시, UTC+9) 고정 오프셋 변환 진입점.

- to_kst: 새 CivilTime 반환
- to_kst_into: 호출자 소유 TmBuffer에 기록 (None이면 InvalidArgumentError)
- to_kst_safe: 버퍼 0 초기화 후 변환, 예외 대신 에러 코드를 반환값으로 전달

전역 에러 슬롯(errno)을 쓰지 않으므로 여러 스레드에서 동시에 호출해도 안전합니다.
"""

from __future__ import annotations

import dataclasses
from typing import Final, NamedTuple

from fastkst.config.settings import kst_settings
from fastkst.core.calendar.offtime import decompose
from fastkst.core.dto.internal.civil_time import CivilTime, TmBuffer
from fastkst.core.types import CONVERSION_EXCEPTIONS, ErrorCode, InvalidArgumentError

KST_OFFSET_SECONDS: Final[int] = 9 * 3600
KST_ZONE: Final[str] = "KST"


class SafeConversion(NamedTuple):
    """to_kst_safe 결과 (success, value, error_code)"""

    success: bool
    value: CivilTime
    error_code: ErrorCode | None = None


def _resolve_year_bits(year_bits: int | None) -> int:
    return kst_settings.year_field_bits if year_bits is None else year_bits


def to_kst(epoch_seconds: int, *, year_bits: int | None = None) -> CivilTime:
    """epoch seconds → KST civil time.

    Args:
        epoch_seconds: 1970-01-01T00:00:00Z 기준 초 (64-bit 이상 허용)
        year_bits: 연도 필드 폭 (None이면 FASTKST_YEAR_FIELD_BITS 설정값)

    Raises:
        YearOverflowError: 연도가 연도 필드 범위를 벗어남
        InvalidArgumentError: epoch_seconds가 int가 아님

    Examples:
        >>> to_kst(0).format()
        '1970-01-01 09:00:00 KST'
    """
    civil = decompose(epoch_seconds, KST_OFFSET_SECONDS, year_bits=_resolve_year_bits(year_bits))
    return dataclasses.replace(
        civil,
        tm_gmtoff=KST_OFFSET_SECONDS,
        tm_zone=KST_ZONE,
        tm_isdst=0,
    )


def to_kst_into(
    epoch_seconds: int,
    out: TmBuffer | None,
    *,
    year_bits: int | None = None,
) -> TmBuffer:
    """epoch seconds → KST civil time을 호출자 버퍼에 기록.

    변환이 끝까지 성공한 경우에만 버퍼에 기록하므로 실패 시 버퍼는 그대로입니다.

    Raises:
        InvalidArgumentError: out이 None
        YearOverflowError: 연도가 연도 필드 범위를 벗어남
    """
    if out is None:
        raise InvalidArgumentError("output buffer is required")
    out.fill(to_kst(epoch_seconds, year_bits=year_bits))
    return out


def to_kst_safe(
    epoch_seconds: int,
    out: TmBuffer | None = None,
    *,
    year_bits: int | None = None,
) -> SafeConversion:
    """예외 없이 KST 변환 결과를 반환.

    Args:
        epoch_seconds: 변환할 epoch seconds
        out: 결과를 받을 버퍼 (생략 시 새 버퍼 사용). 호출 시 0으로 초기화됨
        year_bits: 연도 필드 폭

    Returns:
        SafeConversion: 실패 시 success=False, value=CivilTime.zero(), error_code 설정
    """
    buffer = out if out is not None else TmBuffer()
    buffer.clear()
    try:
        to_kst_into(epoch_seconds, buffer, year_bits=year_bits)
    except CONVERSION_EXCEPTIONS as e:
        return SafeConversion(success=False, value=buffer.freeze(), error_code=e.code)
    return SafeConversion(success=True, value=buffer.freeze())
