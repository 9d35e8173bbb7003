from __future__ import annotations

import logging
from datetime import date

from app.models.usage import RawReading, Reading, Resolution
from app.repositories.base import UsageRepository

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def to_reading(raw: RawReading) -> Reading:
    return Reading(
        date=raw.timestamp.strftime(DATE_FORMAT),
        temperature=int(raw.temperature),
        consumption=int(raw.consumption),
    )


class WindowedReader:
    def __init__(self, repo: UsageRepository) -> None:
        self._repo = repo

    def query(
        self, user_id: int, resolution: Resolution, start: date, count: int
    ) -> list[Reading]:
        rows = self._repo.window(
            user_id=user_id, resolution=resolution, start=start, count=count
        )
        logger.debug(
            "Read window",
            extra={
                "user_id": user_id,
                "bucket": resolution.bucket,
                "start": start.isoformat(),
                "count": count,
                "row_count": len(rows),
            },
        )
        return [to_reading(r) for r in rows[:count]]
