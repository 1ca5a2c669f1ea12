"""변환 경계에서 사용하는 에러 코드와 예외 타입 정의 모듈.

광범위한 Exception 사용을 지양하고, 의도한 실패 종류만 명시적으로 표현하기 위해 사용합니다.
"""

from __future__ import annotations

import errno
from enum import StrEnum
from typing import Final


class ErrorCode(StrEnum):
    """에러 코드 분류"""

    INVALID_ARGUMENT = "invalid_argument"
    OVERFLOW = "overflow"

    @property
    def errno(self) -> int:
        """C errno 값 (EINVAL / EOVERFLOW)"""
        return _ERRNO_MAP[self]


_ERRNO_MAP: Final[dict[ErrorCode, int]] = {
    ErrorCode.INVALID_ARGUMENT: errno.EINVAL,
    ErrorCode.OVERFLOW: errno.EOVERFLOW,
}


class KstTimeError(Exception):
    """fastkst 변환 실패의 공통 베이스 예외.

    Attributes:
        code: 실패 종류 (ErrorCode)
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def errno(self) -> int:
        return self.code.errno


class InvalidArgumentError(KstTimeError, ValueError):
    """출력 대상이 없거나 입력 타입/범위가 잘못된 경우 (EINVAL)"""

    code = ErrorCode.INVALID_ARGUMENT


class YearOverflowError(KstTimeError, OverflowError):
    """계산된 연도가 연도 필드(1900 바이어스 적용) 범위를 벗어난 경우 (EOVERFLOW)"""

    code = ErrorCode.OVERFLOW

    def __init__(self, message: str, *, year: int | None = None) -> None:
        super().__init__(message)
        self.year = year


# try/except에서 함께 처리할 변환 실패 예외 묶음
CONVERSION_EXCEPTIONS: Final[tuple[type[KstTimeError], ...]] = (
    InvalidArgumentError,
    YearOverflowError,
)
