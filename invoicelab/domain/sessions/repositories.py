# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .state import SessionRecord


class SessionStore(Protocol):
    def get(self, token: str) -> SessionRecord | None: ...
    def save(self, record: SessionRecord) -> SessionRecord: ...
    def delete(self, token: str) -> None: ...
