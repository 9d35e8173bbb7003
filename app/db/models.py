from __future__ import annotations

import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "user"

    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, username={self.username!r})"


class DailyReading(Base):
    __tablename__ = "days"

    day_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user.user_id"), index=True, nullable=False
    )
    timestamp: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False)
    consumption: Mapped[int] = mapped_column(Integer, nullable=False)
    temperature: Mapped[int] = mapped_column(Integer, nullable=False)


class MonthlyReading(Base):
    __tablename__ = "months"

    month_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("user.user_id"), index=True, nullable=False
    )
    timestamp: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False)
    consumption: Mapped[int] = mapped_column(Integer, nullable=False)
    temperature: Mapped[int] = mapped_column(Integer, nullable=False)
