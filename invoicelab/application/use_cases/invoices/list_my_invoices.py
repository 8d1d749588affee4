# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.invoices.entities import Invoice
from invoicelab.domain.invoices.policy import owns_invoice
from invoicelab.domain.invoices.repositories import InvoiceRepository
from invoicelab.domain.sessions.state import SessionRecord


class ListMyInvoicesUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self, session: SessionRecord) -> list[Invoice]:
        return [inv for inv in self._invoices.list_all() if owns_invoice(session, inv)]
