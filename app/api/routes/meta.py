from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_usage_repository
from app.core.errors import StoreError
from app.repositories.base import UsageRepository

router = APIRouter(tags=["meta"])


@router.get("/ping")
def ping() -> dict[str, str]:
    return {"response": "pong!!"}


@router.get("/health")
def health(
    repo: Annotated[UsageRepository, Depends(get_usage_repository)],
) -> dict[str, str]:
    try:
        repo.ping()
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unavailable",
        ) from e
    return {"status": "ok"}
