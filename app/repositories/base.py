from __future__ import annotations

from datetime import date, datetime
from typing import Protocol

from app.models.usage import RawAggregate, RawReading, Resolution, UserIdentity


class UsageRepository(Protocol):
    def ping(self) -> None: ...

    def summarize(self, *, user_id: int, resolution: Resolution) -> RawAggregate: ...

    def window(
        self,
        *,
        user_id: int,
        resolution: Resolution,
        start: date,
        count: int,
    ) -> list[RawReading]: ...

    def add_reading(
        self,
        *,
        user_id: int,
        resolution: Resolution,
        reading_id: int,
        temperature: int,
        consumption: int,
        timestamp: datetime,
    ) -> None: ...


class UserRepository(Protocol):
    def get_user(self, *, username: str) -> tuple[UserIdentity, str] | None: ...

    def add_user(self, *, user_id: int, username: str, password_hash: str) -> None: ...
