from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import CurrentUser, get_data_query, get_usage_service
from app.models.usage import DataQuery
from app.schemas.usage import DailyMonthlyLimitsRead, DataResponse, ErrorResponse
from app.services.usage import UsageService

router = APIRouter()

_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing or unknown credentials"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}


@router.get(
    "/limits",
    response_model=DailyMonthlyLimitsRead,
    responses=_ERROR_RESPONSES,
)
def get_limits(
    user: CurrentUser,
    service: Annotated[UsageService, Depends(get_usage_service)],
) -> DailyMonthlyLimitsRead:
    limits = service.get_limits(user.user_id)
    return DailyMonthlyLimitsRead.from_limits(limits)


@router.get(
    "/data",
    response_model=DataResponse,
    responses={400: {"model": ErrorResponse, "description": "Bad query"}, **_ERROR_RESPONSES},
)
def get_data(
    user: CurrentUser,
    query: Annotated[DataQuery, Depends(get_data_query)],
    service: Annotated[UsageService, Depends(get_usage_service)],
) -> DataResponse:
    readings = service.get_data(user.user_id, query.count, query.resolution, query.start)
    return DataResponse.from_readings(readings)
