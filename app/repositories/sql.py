from __future__ import annotations

import logging
from datetime import date, datetime

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import StoreError
from app.db.models import DailyReading, MonthlyReading, User
from app.models.usage import RawAggregate, RawReading, Resolution, UserIdentity

logger = logging.getLogger(__name__)

_BUCKETS = {
    Resolution.DAILY: (DailyReading, DailyReading.day_id),
    Resolution.MONTHLY: (MonthlyReading, MonthlyReading.month_id),
}


class SqlUsageRepository:
    def __init__(self, *, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def ping(self) -> None:
        try:
            with self._session_factory() as session:
                session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreError("database unreachable") from e

    def summarize(self, *, user_id: int, resolution: Resolution) -> RawAggregate:
        model, _ = _BUCKETS[resolution]
        query = select(
            func.min(model.timestamp),
            func.max(model.timestamp),
            func.min(model.consumption),
            func.max(model.consumption),
            func.min(model.temperature),
            func.max(model.temperature),
        ).where(model.user_id == user_id)

        try:
            with self._session_factory() as session:
                row = session.execute(query).one()
        except (SQLAlchemyError, ValueError) as e:
            raise StoreError(f"unable to summarize {model.__tablename__}") from e

        return RawAggregate(
            timestamp_min=row[0],
            timestamp_max=row[1],
            consumption_min=row[2],
            consumption_max=row[3],
            temperature_min=row[4],
            temperature_max=row[5],
        )

    def window(
        self,
        *,
        user_id: int,
        resolution: Resolution,
        start: date,
        count: int,
    ) -> list[RawReading]:
        model, sequence = _BUCKETS[resolution]
        query = (
            select(model.timestamp, model.temperature, model.consumption)
            .where(model.user_id == user_id)
            .where(func.date(model.timestamp) >= start)
            .order_by(model.timestamp, sequence)
            .limit(int(count))
        )

        try:
            with self._session_factory() as session:
                rows = session.execute(query).all()
        except (SQLAlchemyError, ValueError, OverflowError) as e:
            raise StoreError(f"unable to read window from {model.__tablename__}") from e

        return [
            RawReading(timestamp=ts, temperature=temperature, consumption=consumption)
            for ts, temperature, consumption in rows
        ]

    def add_reading(
        self,
        *,
        user_id: int,
        resolution: Resolution,
        reading_id: int,
        temperature: int,
        consumption: int,
        timestamp: datetime,
    ) -> None:
        model, sequence = _BUCKETS[resolution]
        row = model(
            **{sequence.key: reading_id},
            user_id=user_id,
            timestamp=timestamp.replace(microsecond=0),
            temperature=temperature,
            consumption=consumption,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(row)
        except SQLAlchemyError as e:
            raise StoreError(f"unable to insert into {model.__tablename__}") from e
        logger.debug(
            "Stored reading",
            extra={"user_id": user_id, "bucket": model.__tablename__},
        )


class SqlUserRepository:
    def __init__(self, *, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get_user(self, *, username: str) -> tuple[UserIdentity, str] | None:
        query = select(User.user_id, User.username, User.password).where(
            User.username == username
        )
        try:
            with self._session_factory() as session:
                row = session.execute(query).first()
        except SQLAlchemyError as e:
            raise StoreError("unable to look up user") from e

        if row is None:
            return None
        return UserIdentity(user_id=row.user_id, username=row.username), row.password

    def add_user(self, *, user_id: int, username: str, password_hash: str) -> None:
        try:
            with self._session_factory.begin() as session:
                session.add(User(user_id=user_id, username=username, password=password_hash))
        except SQLAlchemyError as e:
            raise StoreError("unable to insert user") from e
