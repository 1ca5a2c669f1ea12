"""자가 진단용 기준 epoch 테이블."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SampleEpoch:
    epoch: int
    description: str


SAMPLE_EPOCHS: tuple[SampleEpoch, ...] = (
    SampleEpoch(0, "Unix Epoch (1970-01-01 00:00:00 UTC)"),
    SampleEpoch(1735657200, "2025-01-01 00:00:00 KST"),
    SampleEpoch(2147451247, "2038-01-19 03:14:07 KST"),
    SampleEpoch(2147451248, "2038-01-19 03:14:08 KST"),
    SampleEpoch(4102412400, "2100-01-01 00:00:00 KST"),
    SampleEpoch(32503647600, "3000-01-01 00:00:00 KST"),
    SampleEpoch(-118800, "1969-12-31 00:00:00 KST"),
    SampleEpoch(-2209021200, "1900-01-01 00:00:00 KST"),
)
