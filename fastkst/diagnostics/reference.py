"""범용 타임존 변환(datetime + zoneinfo) 기준 구현.

fastkst 결과와 비교하기 위한 용도입니다.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

KST_FIXED = timezone(timedelta(hours=9), "KST")
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def seoul_tz() -> tzinfo:
    """Asia/Seoul 타임존 (tz 데이터가 없으면 고정 UTC+9)"""
    try:
        return ZoneInfo("Asia/Seoul")
    except ZoneInfoNotFoundError:
        return KST_FIXED


def reference_fields(epoch: int, tz: tzinfo = KST_FIXED) -> tuple[int, int, int, int, int, int]:
    """(year, month(0-11), day, hour, minute, second) via datetime

    fromtimestamp 대신 timedelta 덧셈을 사용해 플랫폼 time_t 범위의 영향을 받지 않음
    """
    dt = (UNIX_EPOCH + timedelta(seconds=epoch)).astimezone(tz)
    return (dt.year, dt.month - 1, dt.day, dt.hour, dt.minute, dt.second)
