from __future__ import annotations

import logging
from datetime import date, datetime

from app.models.usage import (
    SENTINEL_DATE,
    DailyMonthlyLimits,
    LimitsSummary,
    RawAggregate,
    Resolution,
)
from app.repositories.base import UsageRepository

logger = logging.getLogger(__name__)


def _as_date(value: datetime | date | None) -> date:
    if value is None:
        return SENTINEL_DATE
    if isinstance(value, datetime):
        return value.date()
    return value


def _or_zero(value: int | None) -> int:
    return 0 if value is None else int(value)


def to_summary(raw: RawAggregate) -> LimitsSummary:
    """Collapse an aggregate row into a summary; NULL aggregates mean an empty bucket."""
    return LimitsSummary(
        timestamp_min=_as_date(raw.timestamp_min),
        timestamp_max=_as_date(raw.timestamp_max),
        consumption_min=_or_zero(raw.consumption_min),
        consumption_max=_or_zero(raw.consumption_max),
        temperature_min=_or_zero(raw.temperature_min),
        temperature_max=_or_zero(raw.temperature_max),
    )


class LimitsAggregator:
    def __init__(self, repo: UsageRepository) -> None:
        self._repo = repo

    def summarize(self, user_id: int, resolution: Resolution) -> LimitsSummary:
        logger.debug(
            "Summarizing readings",
            extra={"user_id": user_id, "bucket": resolution.bucket},
        )
        raw = self._repo.summarize(user_id=user_id, resolution=resolution)
        return to_summary(raw)

    def summarize_all(self, user_id: int) -> DailyMonthlyLimits:
        daily = self.summarize(user_id, Resolution.DAILY)
        monthly = self.summarize(user_id, Resolution.MONTHLY)
        return DailyMonthlyLimits(daily=daily, monthly=monthly)
