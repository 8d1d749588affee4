# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from invoicelab.shared.errors.base import DomainError


class InvoiceNotFoundError(DomainError):
    code = "invoice_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Invoice not found"

    def __init__(self, invoice_id: int | None) -> None:
        super().__init__(context={"invoice_id": invoice_id})
