from __future__ import annotations

import pytest

from fastkst.core.calendar.offtime import (
    MON_YDAY,
    days_in_year,
    decompose,
    is_leap,
    leaps_thru_end_of,
    to_epoch,
    year_field_bounds,
)
from fastkst.core.types import ErrorCode, InvalidArgumentError, YearOverflowError
from tests.factory_builders import civil_tuple, epoch_of

INT32_MAX = (1 << 31) - 1
INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)


def test_decompose_epoch_anchor() -> None:
    civil = decompose(0, 0)

    assert civil.tm_year == 70
    assert civil.year == 1970
    assert (civil.tm_mon, civil.tm_mday) == (0, 1)
    assert (civil.tm_hour, civil.tm_min, civil.tm_sec) == (0, 0, 0)
    assert civil.tm_wday == 4  # Thursday
    assert civil.tm_yday == 0
    assert civil.tm_gmtoff == 0
    assert civil.tm_zone is None


def test_decompose_leap_day_2024() -> None:
    civil = decompose(epoch_of(2024, 2, 29), 0)

    assert civil.year == 2024
    assert civil.tm_mon == 1
    assert civil.tm_mday == 29
    assert civil.tm_yday == 59


def test_decompose_march_first_non_leap_year() -> None:
    civil = decompose(epoch_of(2023, 3, 1), 0)

    assert (civil.year, civil.tm_mon, civil.tm_mday) == (2023, 2, 1)
    assert civil.tm_yday == 59


def test_decompose_december_31_of_leap_year_has_yday_365() -> None:
    civil = decompose(epoch_of(2000, 12, 31, 23, 59, 59), 0)

    assert (civil.tm_mon, civil.tm_mday) == (11, 31)
    assert civil.tm_yday == 365


def test_decompose_century_years_follow_gregorian_rule() -> None:
    # 1900년은 평년, 2000년은 윤년
    assert decompose(epoch_of(1900, 3, 1), 0).tm_yday == 59
    assert decompose(epoch_of(2000, 3, 1), 0).tm_yday == 60


def test_decompose_negative_epoch_uses_floor_split() -> None:
    civil = decompose(-1, 0)

    assert civil_tuple(civil) == (1969, 11, 31, 23, 59, 59)
    assert civil.tm_wday == 3  # Wednesday
    assert civil.tm_yday == 364


@pytest.mark.parametrize(
    ("epoch", "offset", "expected"),
    [
        # 양의 오프셋으로 다음 날로 넘어감
        (epoch_of(2024, 12, 31, 20), 9 * 3600, (2025, 0, 1, 5, 0, 0)),
        # 음의 오프셋으로 전날로 넘어감
        (epoch_of(2024, 3, 1, 2), -5 * 3600, (2024, 1, 29, 21, 0, 0)),
        # 하루를 넘는 오프셋도 정규화
        (0, 2 * 86400 + 60, (1970, 0, 3, 0, 1, 0)),
        (0, -(86400 + 1), (1969, 11, 30, 23, 59, 59)),
    ],
)
def test_decompose_offset_crosses_day_boundary(epoch: int, offset: int, expected: tuple) -> None:
    civil = decompose(epoch, offset)

    assert civil_tuple(civil) == expected
    assert civil.tm_gmtoff == offset


@pytest.mark.parametrize("offset", [10**12, -(10**12), 10**15])
def test_decompose_huge_offset_equals_shifted_epoch(offset: int) -> None:
    civil = decompose(0, offset, year_bits=64)
    shifted = decompose(offset, 0, year_bits=64)

    assert civil_tuple(civil) == civil_tuple(shifted)
    assert (civil.tm_wday, civil.tm_yday) == (shifted.tm_wday, shifted.tm_yday)
    assert civil.tm_gmtoff == offset
    assert civil.to_epoch() == 0


def test_decompose_huge_offset_known_breakdown() -> None:
    # 10**12 s = 11574074일 + 6400초
    civil = decompose(0, 10**12)

    assert (civil.tm_hour, civil.tm_min, civil.tm_sec) == (1, 46, 40)
    assert civil.tm_wday == (4 + 11574074) % 7


def test_decompose_weekday_for_known_dates() -> None:
    assert decompose(epoch_of(1900, 1, 1), 0).tm_wday == 1  # Monday
    assert decompose(epoch_of(2000, 1, 1), 0).tm_wday == 6  # Saturday
    assert decompose(epoch_of(1, 1, 1), 0).tm_wday == 1  # Monday (proleptic)


def test_decompose_far_past_proleptic_year() -> None:
    # 0001-01-01 이전: 0년(1 BC)은 윤년
    civil = decompose(epoch_of(1, 1, 1) - 86400, 0)

    assert civil_tuple(civil) == (0, 11, 31, 0, 0, 0)
    assert civil.tm_yday == 365


def test_decompose_32bit_year_field_upper_boundary() -> None:
    _, max_year = year_field_bounds(32)
    last_second = to_epoch(max_year, 11, 31, 23, 59, 59)

    civil = decompose(last_second, 0)
    assert civil.year == max_year
    assert civil.tm_year == INT32_MAX

    with pytest.raises(YearOverflowError) as exc_info:
        decompose(last_second + 1, 0)
    assert exc_info.value.year == max_year + 1
    assert exc_info.value.code is ErrorCode.OVERFLOW


def test_decompose_32bit_year_field_lower_boundary() -> None:
    min_year, _ = year_field_bounds(32)
    first_second = to_epoch(min_year, 0, 1)

    civil = decompose(first_second, 0)
    assert civil.year == min_year
    assert civil.tm_year == -(1 << 31)

    with pytest.raises(YearOverflowError):
        decompose(first_second - 1, 0)


@pytest.mark.parametrize("epoch", [INT64_MAX, INT64_MIN])
def test_decompose_int64_extremes_overflow_32bit_field(epoch: int) -> None:
    with pytest.raises(YearOverflowError):
        decompose(epoch, 9 * 3600)


@pytest.mark.parametrize("epoch", [INT64_MAX, INT64_MIN])
def test_decompose_int64_extremes_fit_64bit_field(epoch: int) -> None:
    civil = decompose(epoch, 0, year_bits=64)

    assert civil.to_epoch() == epoch


def test_decompose_int64_max_known_breakdown() -> None:
    civil = decompose(INT64_MAX, 0, year_bits=64)

    assert civil_tuple(civil) == (292277026596, 11, 4, 15, 30, 7)
    assert civil.tm_wday == 0  # Sunday


def test_decompose_rejects_non_int_arguments() -> None:
    with pytest.raises(InvalidArgumentError):
        decompose(1.5, 0)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        decompose(True, 0)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        decompose(0, "9h")  # type: ignore[arg-type]


def test_decompose_rejects_unsupported_year_width() -> None:
    with pytest.raises(InvalidArgumentError):
        decompose(0, 0, year_bits=16)


def test_year_field_bounds() -> None:
    assert year_field_bounds(32) == (-2147481748, 2147485547)
    assert year_field_bounds(64) == (INT64_MIN + 1900, INT64_MAX + 1900)


def test_leap_helpers() -> None:
    assert is_leap(2024) and is_leap(2000) and is_leap(0) and is_leap(-4)
    assert not is_leap(1900) and not is_leap(2023) and not is_leap(-1)
    assert days_in_year(2024) == 366
    assert days_in_year(2100) == 365
    assert leaps_thru_end_of(1969) - leaps_thru_end_of(1899) == 17
    assert leaps_thru_end_of(-1) == -1


def test_month_tables_are_consistent() -> None:
    normal, leap = MON_YDAY
    assert normal[-1] == 365 and leap[-1] == 366
    assert [b - a for a, b in zip(normal, leap)] == [0, 0] + [1] * 11


def test_to_epoch_inverts_known_values() -> None:
    assert to_epoch(1970, 0, 1) == 0
    assert to_epoch(2038, 0, 19, 3, 14, 7) == INT32_MAX
    assert to_epoch(1970, 0, 1, 9, offset_seconds=9 * 3600) == 0
    assert to_epoch(1969, 11, 31) == -86400


@pytest.mark.parametrize(
    "fields",
    [
        (2023, 1, 29),  # 2023-02-29 없음
        (2024, 12, 1),
        (2024, -1, 1),
        (2024, 0, 0),
        (2024, 0, 1, 24),
        (2024, 0, 1, 0, 60),
        (2024, 0, 1, 0, 0, 60),
    ],
)
def test_to_epoch_rejects_out_of_range_fields(fields: tuple) -> None:
    with pytest.raises(InvalidArgumentError):
        to_epoch(*fields)
