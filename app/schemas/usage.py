from __future__ import annotations

from pydantic import BaseModel

from app.models.usage import DailyMonthlyLimits, LimitsSummary, Reading

DataRow = tuple[str, int, int]


class MinMaxDate(BaseModel):
    minimum: str
    maximum: str


class MinMaxInt(BaseModel):
    minimum: int
    maximum: int


class LimitsRead(BaseModel):
    timestamp: MinMaxDate
    consumption: MinMaxInt
    temperature: MinMaxInt

    @classmethod
    def from_summary(cls, summary: LimitsSummary) -> "LimitsRead":
        # date.isoformat() pads the year to four digits, so year 1 renders as 0001-01-01.
        return cls(
            timestamp=MinMaxDate(
                minimum=summary.timestamp_min.isoformat(),
                maximum=summary.timestamp_max.isoformat(),
            ),
            consumption=MinMaxInt(
                minimum=summary.consumption_min, maximum=summary.consumption_max
            ),
            temperature=MinMaxInt(
                minimum=summary.temperature_min, maximum=summary.temperature_max
            ),
        )


class DailyMonthlyLimitsRead(BaseModel):
    daily: LimitsRead
    monthly: LimitsRead

    @classmethod
    def from_limits(cls, limits: DailyMonthlyLimits) -> "DailyMonthlyLimitsRead":
        return cls(
            daily=LimitsRead.from_summary(limits.daily),
            monthly=LimitsRead.from_summary(limits.monthly),
        )


class DataResponse(BaseModel):
    data: list[DataRow] | None

    @classmethod
    def from_readings(cls, readings: list[Reading]) -> "DataResponse":
        # An empty window is reported as null rather than [].
        if not readings:
            return cls(data=None)
        return cls(data=[tuple(r) for r in readings])


class ErrorBody(BaseModel):
    code: int
    reason: str


class ErrorResponse(BaseModel):
    error: ErrorBody
