# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Invoice, InvoiceDetail
from .exceptions import InvoiceNotFoundError
from .ids import parse_invoice_id
from .policy import owns_invoice
from .repositories import InvoiceRepository

__all__ = [
    "Invoice",
    "InvoiceDetail",
    "InvoiceNotFoundError",
    "InvoiceRepository",
    "owns_invoice",
    "parse_invoice_id",
]
