from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.security import get_password_hash
from app.services.auth import Authenticator
from tests.fakes import FakeUserRepository

CHALLENGE = 'Basic realm="Usage"'


def test_authenticator_resolves_known_user() -> None:
    repo = FakeUserRepository()
    repo.add_user(user_id=7, username="alice", password_hash=get_password_hash("s3cret"))
    authenticator = Authenticator(repo)

    user = authenticator.resolve("alice", "s3cret")

    assert user is not None
    assert user.user_id == 7
    assert authenticator.resolve("alice", "wrong") is None
    assert authenticator.resolve("bob", "s3cret") is None


@pytest.mark.parametrize("path", ["/limits", "/data"])
def test_missing_credentials_are_challenged(client: TestClient, path: str) -> None:
    resp = client.get(path)
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == CHALLENGE
    assert resp.json() == {"error": {"code": 401, "reason": "Unauthorized"}}


def test_unknown_user_is_unauthorized(client: TestClient, users) -> None:
    resp = client.get("/limits", auth=("invalidUsername", "invalidPassword"))
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == CHALLENGE


def test_wrong_password_is_unauthorized(client: TestClient, users) -> None:
    resp = client.get("/limits", auth=("username1", "password2"))
    assert resp.status_code == 401


def test_non_basic_scheme_is_unauthorized(client: TestClient, users) -> None:
    resp = client.get("/limits", headers={"Authorization": "Bearer abc.def"})
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == CHALLENGE


def test_malformed_basic_credentials_are_unauthorized(client: TestClient, users) -> None:
    resp = client.get("/limits", headers={"Authorization": "Basic %%%not-base64"})
    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == CHALLENGE
    assert resp.json() == {"error": {"code": 401, "reason": "Unauthorized"}}


def test_auth_is_checked_before_query_params(client: TestClient) -> None:
    resp = client.get("/data?start=2006-07-19")
    assert resp.status_code == 401
