from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.core.errors import StoreError, UnauthorizedError
from app.models.usage import DataQuery
from app.repositories.base import UsageRepository, UserRepository
from app.repositories.sql import SqlUsageRepository, SqlUserRepository
from app.schemas.auth import User
from app.services.aggregator import LimitsAggregator
from app.services.auth import Authenticator
from app.services.usage import UsageService
from app.services.validation import validate_data_query
from app.services.window import WindowedReader

AUTH_REALM = "Usage"

class UsageBasic(HTTPBasic):
    """HTTP Basic scheme whose malformed-header rejection uses the usage error body."""

    async def __call__(self, request: Request) -> HTTPBasicCredentials | None:
        try:
            return await super().__call__(request)
        except HTTPException as e:
            raise UnauthorizedError() from e


basic_scheme = UsageBasic(realm=AUTH_REALM, auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_factory(request: Request) -> sessionmaker[Session]:
    return request.app.state.session_factory


def get_usage_repository(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> UsageRepository:
    return SqlUsageRepository(session_factory=session_factory)


def get_user_repository(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> UserRepository:
    return SqlUserRepository(session_factory=session_factory)


def get_authenticator(
    repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> Authenticator:
    return Authenticator(repo)


def get_usage_service(
    repo: Annotated[UsageRepository, Depends(get_usage_repository)],
) -> UsageService:
    return UsageService(aggregator=LimitsAggregator(repo), reader=WindowedReader(repo))


def get_current_user(
    credentials: Annotated[HTTPBasicCredentials | None, Security(basic_scheme)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
) -> User:
    if credentials is None:
        raise UnauthorizedError()

    try:
        identity = authenticator.resolve(credentials.username, credentials.password)
    except StoreError as e:
        # A failed lookup is treated like an unknown user.
        raise UnauthorizedError() from e
    if identity is None:
        raise UnauthorizedError()

    return User(user_id=identity.user_id, username=identity.username)


def get_data_query(request: Request) -> DataQuery:
    # First occurrence wins for repeated parameters.
    params = {
        key: request.query_params.getlist(key)[0] for key in request.query_params.keys()
    }
    return validate_data_query(params)


CurrentUser = Annotated[User, Security(get_current_user)]
