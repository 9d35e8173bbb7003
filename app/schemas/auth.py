from __future__ import annotations

from pydantic import BaseModel, Field


class User(BaseModel):
    user_id: int
    username: str = Field(min_length=1, max_length=64)
