from fastkst.core.types._exception_types import (
    CONVERSION_EXCEPTIONS,
    ErrorCode,
    InvalidArgumentError,
    KstTimeError,
    YearOverflowError,
)

__all__ = [
    "CONVERSION_EXCEPTIONS",
    "ErrorCode",
    "InvalidArgumentError",
    "KstTimeError",
    "YearOverflowError",
]
