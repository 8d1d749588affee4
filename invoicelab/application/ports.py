# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from invoicelab.domain.sessions.state import SessionRecord


class SessionPort(Protocol):
    def authenticate(self, token: str, user_id: int) -> SessionRecord: ...
    def destroy(self, token: str) -> SessionRecord: ...
