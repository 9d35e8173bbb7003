from __future__ import annotations

import logging
from datetime import date

from app.core.errors import InternalError, StoreError
from app.models.usage import DailyMonthlyLimits, Reading, Resolution
from app.services.aggregator import LimitsAggregator
from app.services.window import WindowedReader

logger = logging.getLogger(__name__)


class UsageService:
    """Answers ``/limits`` and ``/data`` for an already authenticated user."""

    def __init__(self, *, aggregator: LimitsAggregator, reader: WindowedReader) -> None:
        self._aggregator = aggregator
        self._reader = reader

    def get_limits(self, user_id: int) -> DailyMonthlyLimits:
        logger.info("Fetching usage limits", extra={"user_id": user_id})
        try:
            return self._aggregator.summarize_all(user_id)
        except StoreError as e:
            raise InternalError() from e

    def get_data(
        self, user_id: int, count: int, resolution: Resolution | str, start: date
    ) -> list[Reading]:
        if not isinstance(resolution, Resolution):
            resolution = Resolution.from_code(resolution)
        logger.info(
            "Fetching usage data",
            extra={"user_id": user_id, "resolution": resolution.value},
        )
        try:
            return self._reader.query(user_id, resolution, start, count)
        except StoreError as e:
            raise InternalError() from e
