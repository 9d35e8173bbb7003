from __future__ import annotations

import logging

from app.core.logging import ContextualFormatter


def test_contextual_formatter_appends_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.LogRecord("usage", logging.INFO, __file__, 1, "Fetching", None, None)
    record.user_id = 1
    record.resolution = "M"

    assert formatter.format(record) == "Fetching | user_id=1 resolution=M"


def test_contextual_formatter_without_extras_is_plain() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")
    record = logging.LogRecord("usage", logging.INFO, __file__, 1, "pong", None, None)

    assert formatter.format(record) == "pong"
