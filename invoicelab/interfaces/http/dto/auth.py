from __future__ import annotations

from pydantic import BaseModel


class LoginFormDTO(BaseModel):
    # Type coercion only; missing fields become empty strings and simply fail to match.
    username: str = ""
    password: str = ""
