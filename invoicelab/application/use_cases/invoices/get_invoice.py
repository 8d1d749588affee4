# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.invoices.entities import InvoiceDetail
from invoicelab.domain.invoices.exceptions import InvoiceNotFoundError
from invoicelab.domain.invoices.repositories import InvoiceRepository
from invoicelab.domain.users.repositories import UserRepository


class GetInvoiceUseCase:
    """Look up any invoice by id and resolve its owner.

    There is deliberately no ownership check: every authenticated caller
    gets the full invoice, whoever owns it.
    """

    def __init__(self, *, invoices: InvoiceRepository, users: UserRepository) -> None:
        self._invoices = invoices
        self._users = users

    def execute(self, invoice_id: int | None) -> InvoiceDetail:
        invoice = self._invoices.find_by_id(invoice_id) if invoice_id is not None else None
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)
        owner = self._users.find_by_id(invoice.owner_user_id)
        return InvoiceDetail(invoice=invoice, owner=owner)
