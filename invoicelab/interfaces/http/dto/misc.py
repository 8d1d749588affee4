from __future__ import annotations

from pydantic import BaseModel


class HealthDTO(BaseModel):
    ok: bool = True
    users: int
    invoices: int
