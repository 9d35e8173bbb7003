from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.factory import create_app
from app.models.usage import UserIdentity
from app.repositories.sql import SqlUsageRepository, SqlUserRepository
from app.services.auth import Authenticator

TEST_USERS = {
    1: ("username1", "password1"),
    2: ("username2", "password2"),
}


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        log_level="DEBUG",
        database_url=f"sqlite:///{tmp_path / 'usage_test.db'}",
        create_schema=True,
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def usage_repo(app: FastAPI, client: TestClient) -> SqlUsageRepository:
    return SqlUsageRepository(session_factory=app.state.session_factory)


@pytest.fixture()
def users(app: FastAPI, client: TestClient) -> dict[int, UserIdentity]:
    authenticator = Authenticator(
        SqlUserRepository(session_factory=app.state.session_factory)
    )
    return {
        user_id: authenticator.register(user_id=user_id, username=name, password=password)
        for user_id, (name, password) in TEST_USERS.items()
    }


@pytest.fixture()
def auth(users: dict[int, UserIdentity]) -> tuple[str, str]:
    return TEST_USERS[1]
