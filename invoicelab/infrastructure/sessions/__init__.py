# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory_store import InMemorySessionStore
from .session_manager import SessionManager

__all__ = ["InMemorySessionStore", "SessionManager"]
