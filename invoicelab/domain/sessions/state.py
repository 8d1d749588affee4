# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-session authentication state.

A session is either anonymous or bound to a user id. Transitions are pure
functions returning a new record; the session store only keeps the latest
record for each token.

    ANONYMOUS --authenticate--> AUTHENTICATED --sign_out--> ANONYMOUS

A failed login does not produce a transition.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass(slots=True, frozen=True)
class SessionRecord:
    token: str
    user_id: int | None = None

    @property
    def state(self) -> SessionState:
        if self.user_id is None:
            return SessionState.ANONYMOUS
        return SessionState.AUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED


def open_session(token: str) -> SessionRecord:
    return SessionRecord(token=token)


def authenticate(record: SessionRecord, user_id: int) -> SessionRecord:
    return replace(record, user_id=user_id)


def sign_out(record: SessionRecord) -> SessionRecord:
    return replace(record, user_id=None)
