# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Invoice


class InvoiceRepository(Protocol):
    def find_by_id(self, invoice_id: int) -> Invoice | None: ...
    def list_all(self) -> Sequence[Invoice]: ...
    def max_id(self) -> int | None: ...
