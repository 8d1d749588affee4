# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from itsdangerous import BadSignature, Signer

from invoicelab.domain.exceptions import InvariantViolation
from invoicelab.domain.sessions import state
from invoicelab.domain.sessions.repositories import SessionStore
from invoicelab.domain.sessions.state import SessionRecord
from invoicelab.shared.logging import logger

_SALT = "invoicelab.session"


class SessionManager:
    """Maps signed session cookies to server-side session records.

    The cookie carries only the token, signed with the session secret.
    Everything else lives in the store.
    """

    def __init__(self, *, store: SessionStore, secret: str) -> None:
        self._store = store
        self._signer = Signer(secret, salt=_SALT)

    def sign(self, token: str) -> str:
        return self._signer.sign(token).decode("utf-8")

    def unsign(self, cookie_value: str | None) -> str | None:
        if not cookie_value:
            return None
        try:
            return self._signer.unsign(cookie_value).decode("utf-8")
        except BadSignature:
            logger.warning("session: rejected cookie with bad signature")
            return None

    def create_or_reuse(self, cookie_value: str | None) -> tuple[SessionRecord, bool]:
        token = self.unsign(cookie_value)
        if token is not None:
            record = self._store.get(token)
            if record is not None:
                return record, False

        record = self._store.save(state.open_session(secrets.token_urlsafe(32)))
        logger.debug(f"session: opened tok={record.token[:8]}…")
        return record, True

    def authenticate(self, token: str, user_id: int) -> SessionRecord:
        current = self._store.get(token)
        if current is None:
            raise InvariantViolation("unknown or destroyed session", field="token")
        record = self._store.save(state.authenticate(current, user_id))
        logger.info(f"session: bound user={user_id} tok={token[:8]}…")
        return record

    def is_authenticated(self, token: str) -> bool:
        record = self._store.get(token)
        return record is not None and record.is_authenticated

    def destroy(self, token: str) -> SessionRecord:
        current = self._store.get(token) or state.open_session(token)
        self._store.delete(token)
        logger.info(f"session: destroyed user={current.user_id} tok={token[:8]}…")
        return state.sign_out(current)
