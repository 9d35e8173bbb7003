from __future__ import annotations

import logging

from app.core.security import get_password_hash, verify_password
from app.models.usage import UserIdentity
from app.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class Authenticator:
    def __init__(self, repo: UserRepository) -> None:
        self._repo = repo

    def resolve(self, username: str, password: str) -> UserIdentity | None:
        found = self._repo.get_user(username=username)
        if found is None:
            logger.info("Unknown user", extra={"username": username})
            return None
        user, password_hash = found
        if not verify_password(password, password_hash):
            logger.info("Password mismatch", extra={"username": username})
            return None
        return user

    def register(self, *, user_id: int, username: str, password: str) -> UserIdentity:
        self._repo.add_user(
            user_id=user_id, username=username, password_hash=get_password_hash(password)
        )
        return UserIdentity(user_id=user_id, username=username)
