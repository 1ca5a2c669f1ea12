"""변환 결과 직렬화 DTO (CLI JSON 출력 경계)."""

from __future__ import annotations

from pydantic import Field

from fastkst.core.calendar.kst import SafeConversion
from fastkst.core.dto.internal.civil_time import CivilTime
from fastkst.core.dto.io._base import BaseIOModelDTO
from fastkst.core.types import ErrorCode


class CivilTimeDTO(BaseIOModelDTO):
    """사람이 읽는 규약(절대 연도, 1부터 시작하는 월)의 civil time"""

    year: int = Field(..., description="절대 연도")
    month: int = Field(..., ge=1, le=12, description="월 (1-12)")
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    second: int = Field(..., ge=0, le=59)
    weekday: int = Field(..., ge=0, le=6, description="요일 (0 = 일요일)")
    yday: int = Field(..., ge=0, le=365, description="연중 일자 (0부터)")
    utc_offset: int = Field(..., description="UTC 오프셋 (초)")
    zone: str | None = None
    iso: str = Field(..., description="ISO 8601 문자열")

    @classmethod
    def from_domain(cls, civil: CivilTime) -> CivilTimeDTO:
        return cls(
            year=civil.year,
            month=civil.tm_mon + 1,
            day=civil.tm_mday,
            hour=civil.tm_hour,
            minute=civil.tm_min,
            second=civil.tm_sec,
            weekday=civil.tm_wday,
            yday=civil.tm_yday,
            utc_offset=civil.tm_gmtoff,
            zone=civil.tm_zone,
            iso=civil.isoformat(),
        )


class ConversionResultDTO(BaseIOModelDTO):
    """epoch 하나에 대한 변환 결과"""

    epoch: int
    success: bool
    error_code: ErrorCode | None = None
    errno: int | None = None
    civil: CivilTimeDTO | None = None

    @classmethod
    def from_safe(cls, epoch: int, result: SafeConversion) -> ConversionResultDTO:
        if not result.success:
            code = result.error_code
            return cls(
                epoch=epoch,
                success=False,
                error_code=code,
                errno=code.errno if code is not None else None,
            )
        return cls(epoch=epoch, success=True, civil=CivilTimeDTO.from_domain(result.value))
