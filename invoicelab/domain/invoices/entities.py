# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from invoicelab.domain.users.entities import User


@dataclass(slots=True, frozen=True)
class Invoice:
    """Invoice record tagged with its owner.

    ``owner_user_id`` is a plain reference and may point at a user that
    does not exist in the user store.
    """

    id: int
    owner_user_id: int
    title: str
    notes: str


@dataclass(slots=True, frozen=True)
class InvoiceDetail:
    invoice: Invoice
    owner: User | None

    @property
    def owner_name(self) -> str | None:
        return self.owner.username if self.owner else None
