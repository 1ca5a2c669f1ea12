"""fastkst - 고정 오프셋 KST(UTC+9) epoch → civil time 변환

시스템 타임존 DB 조회 없이 epoch seconds를 KST 달력 시각으로 분해합니다.
64-bit(그 이상) epoch 값을 지원하므로 2038 문제가 없습니다.

Example:
    >>> from fastkst import to_kst
    >>> to_kst(2147483647).format()
    '2038-01-19 12:14:07 KST'
"""

from fastkst.core.calendar import (
    KST_OFFSET_SECONDS,
    KST_ZONE,
    SafeConversion,
    decompose,
    to_epoch,
    to_kst,
    to_kst_into,
    to_kst_safe,
    year_field_bounds,
)
from fastkst.core.dto.internal import CivilTime, TmBuffer
from fastkst.core.types import (
    ErrorCode,
    InvalidArgumentError,
    KstTimeError,
    YearOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    "KST_OFFSET_SECONDS",
    "KST_ZONE",
    "CivilTime",
    "ErrorCode",
    "InvalidArgumentError",
    "KstTimeError",
    "SafeConversion",
    "TmBuffer",
    "YearOverflowError",
    "decompose",
    "to_epoch",
    "to_kst",
    "to_kst_into",
    "to_kst_safe",
    "year_field_bounds",
]
