# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.invoices.entities import Invoice
from invoicelab.domain.sessions.state import SessionRecord


def owns_invoice(session: SessionRecord, invoice: Invoice) -> bool:
    """Authorization gate: does the session's user own ``invoice``?

    The invoice list goes through this check. The invoice detail view
    does not call it, which is the IDOR the app exists to demonstrate.
    """
    return session.user_id is not None and invoice.owner_user_id == session.user_id
