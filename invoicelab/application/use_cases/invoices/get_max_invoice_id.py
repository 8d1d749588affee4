# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.invoices.repositories import InvoiceRepository


class GetMaxInvoiceIdUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self) -> int | None:
        # Global maximum, not scoped to the caller.
        return self._invoices.max_id()
