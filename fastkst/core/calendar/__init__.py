from fastkst.core.calendar.kst import (
    KST_OFFSET_SECONDS,
    KST_ZONE,
    SafeConversion,
    to_kst,
    to_kst_into,
    to_kst_safe,
)
from fastkst.core.calendar.offtime import (
    MON_YDAY,
    days_in_year,
    decompose,
    is_leap,
    leaps_thru_end_of,
    to_epoch,
    year_field_bounds,
)

__all__ = [
    "KST_OFFSET_SECONDS",
    "KST_ZONE",
    "MON_YDAY",
    "SafeConversion",
    "days_in_year",
    "decompose",
    "is_leap",
    "leaps_thru_end_of",
    "to_epoch",
    "to_kst",
    "to_kst_into",
    "to_kst_safe",
    "year_field_bounds",
]
