# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .repositories import SessionStore
from .state import SessionRecord, SessionState, authenticate, open_session, sign_out

__all__ = [
    "SessionRecord",
    "SessionState",
    "SessionStore",
    "authenticate",
    "open_session",
    "sign_out",
]
