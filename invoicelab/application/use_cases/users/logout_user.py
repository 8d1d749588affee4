"""Use-case for ending a session."""

from __future__ import annotations

from invoicelab.application.ports import SessionPort
from invoicelab.domain.sessions.state import SessionRecord


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionPort) -> None:
        self._sessions = sessions

    def execute(self, token: str) -> SessionRecord:
        return self._sessions.destroy(token)
