from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple

SENTINEL_DATE = date(1, 1, 1)


class Resolution(str, Enum):
    DAILY = "D"
    MONTHLY = "M"

    @property
    def bucket(self) -> str:
        return "months" if self is Resolution.MONTHLY else "days"

    @classmethod
    def from_code(cls, code: str) -> "Resolution":
        # Anything that is not the monthly code reads the daily bucket.
        if code == cls.MONTHLY.value:
            return cls.MONTHLY
        return cls.DAILY


@dataclass(frozen=True)
class UserIdentity:
    user_id: int
    username: str


@dataclass(frozen=True)
class RawAggregate:
    timestamp_min: datetime | None
    timestamp_max: datetime | None
    consumption_min: int | None
    consumption_max: int | None
    temperature_min: int | None
    temperature_max: int | None


@dataclass(frozen=True)
class RawReading:
    timestamp: datetime
    temperature: int
    consumption: int


class Reading(NamedTuple):
    date: str
    temperature: int
    consumption: int


@dataclass(frozen=True)
class LimitsSummary:
    timestamp_min: date
    timestamp_max: date
    consumption_min: int
    consumption_max: int
    temperature_min: int
    temperature_max: int


@dataclass(frozen=True)
class DailyMonthlyLimits:
    daily: LimitsSummary
    monthly: LimitsSummary


@dataclass(frozen=True)
class DataQuery:
    resolution: Resolution
    start: date
    count: int
