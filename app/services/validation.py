from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import date, datetime

from app.core.errors import BadRequestError
from app.models.usage import DataQuery, Resolution

logger = logging.getLogger(__name__)

REQUIRED_PARAMS = ("resolution", "count", "start")
START_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
COUNT_PATTERN = re.compile(r"^[+-]?[0-9]+$")
# Largest LIMIT a 64-bit SQL INTEGER can bind.
MAX_COUNT = 2**63 - 1

MISSING_PARAMS_REASON = "Missing mandatory query params"


def _parse_resolution(raw: str) -> Resolution | None:
    value = raw.strip()
    if value == Resolution.MONTHLY.value:
        return Resolution.MONTHLY
    if value == Resolution.DAILY.value:
        return Resolution.DAILY
    return None


def _parse_start(raw: str) -> date | None:
    value = raw.strip()
    if not START_DATE_PATTERN.match(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def _parse_count(raw: str) -> int | None:
    value = raw.strip()
    if not COUNT_PATTERN.match(value):
        return None
    try:
        count = int(value)
    except ValueError:
        # Beyond the interpreter's int-conversion digit limit.
        return None
    return count if 0 < count <= MAX_COUNT else None


def validate_data_query(params: Mapping[str, str]) -> DataQuery:
    """Check the ``/data`` query parameters before the store is touched.

    Every parameter is checked even after one fails so the debug log lists
    all offending fields; the caller only ever sees one ``BadRequestError``.
    """
    missing = [name for name in REQUIRED_PARAMS if params.get(name) is None]
    if missing:
        logger.debug("Missing query params: %s", ", ".join(missing))
        raise BadRequestError(MISSING_PARAMS_REASON, missing=True)

    resolution = _parse_resolution(params["resolution"])
    start = _parse_start(params["start"])
    count = _parse_count(params["count"])

    invalid = [
        name
        for name, parsed in (("resolution", resolution), ("start", start), ("count", count))
        if parsed is None
    ]
    if invalid or resolution is None or start is None or count is None:
        logger.debug("Invalid query params: %s", ", ".join(invalid))
        raise BadRequestError()

    return DataQuery(resolution=resolution, start=start, count=count)
