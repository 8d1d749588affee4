# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.sessions.repositories import SessionStore
from invoicelab.domain.sessions.state import SessionRecord


class InMemorySessionStore(SessionStore):
    """Process-local session store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._records: dict[str, SessionRecord] = {}

    def get(self, token: str) -> SessionRecord | None:
        return self._records.get(token)

    def save(self, record: SessionRecord) -> SessionRecord:
        self._records[record.token] = record
        return record

    def delete(self, token: str) -> None:
        self._records.pop(token, None)

    def __len__(self) -> int:
        return len(self._records)
