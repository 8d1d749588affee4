# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable, Sequence

from invoicelab.domain.invoices.entities import Invoice
from invoicelab.domain.invoices.repositories import InvoiceRepository
from invoicelab.domain.users.entities import User
from invoicelab.domain.users.repositories import UserRepository
from invoicelab.domain.exceptions import InvariantViolation


class InMemoryUserRepository(UserRepository):
    """Read-only user store built once from a seed."""

    def __init__(self, users: Iterable[User]) -> None:
        self._users: tuple[User, ...] = tuple(users)
        self._by_username = {u.username: u for u in self._users}
        self._by_id = {u.id: u for u in self._users}
        if len(self._by_username) != len(self._users):
            raise InvariantViolation("duplicate username in seed", field="username")
        if len(self._by_id) != len(self._users):
            raise InvariantViolation("duplicate id in seed", field="id")

    def find_by_username(self, username: str) -> User | None:
        return self._by_username.get(username)

    def find_by_id(self, user_id: int) -> User | None:
        return self._by_id.get(user_id)

    def list_all(self) -> Sequence[User]:
        return self._users


class InMemoryInvoiceRepository(InvoiceRepository):
    """Read-only invoice store built once from a seed, in seed order."""

    def __init__(self, invoices: Iterable[Invoice]) -> None:
        self._invoices: tuple[Invoice, ...] = tuple(invoices)
        self._by_id = {inv.id: inv for inv in self._invoices}
        if len(self._by_id) != len(self._invoices):
            raise InvariantViolation("duplicate id in seed", field="id")

    def find_by_id(self, invoice_id: int) -> Invoice | None:
        return self._by_id.get(invoice_id)

    def list_all(self) -> Sequence[Invoice]:
        return self._invoices

    def max_id(self) -> int | None:
        return max(self._by_id, default=None)
