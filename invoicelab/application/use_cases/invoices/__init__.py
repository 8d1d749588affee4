# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .get_invoice import GetInvoiceUseCase
from .get_max_invoice_id import GetMaxInvoiceIdUseCase
from .list_my_invoices import ListMyInvoicesUseCase

__all__ = ["GetInvoiceUseCase", "GetMaxInvoiceIdUseCase", "ListMyInvoicesUseCase"]
