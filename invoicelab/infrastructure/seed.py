# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicelab.domain.invoices.entities import Invoice
from invoicelab.domain.users.entities import User

SEED_USERS: tuple[User, ...] = (
    User(id=1, username="alice", password="alicepass"),
    User(id=2, username="bob", password="bobpass"),
    User(id=3, username="carol", password="carolpass"),
)

# Ids are sequential and predictable on purpose. Owners 4 and 5 have no user record.
SEED_INVOICES: tuple[Invoice, ...] = (
    Invoice(id=-1, owner_user_id=2, title="Bob - Invoice #3", notes="flag{xakack12}"),
    Invoice(id=1, owner_user_id=1, title="Alice - Invoice #1", notes="Consulting services - paid."),
    Invoice(id=2, owner_user_id=1, title="Alice - Invoice #2", notes="Travel reimbursement."),
    Invoice(id=3, owner_user_id=2, title="Bob - Invoice #1", notes="Monthly subscription."),
    Invoice(id=4, owner_user_id=3, title="Carol - Invoice #1", notes="One-time setup fee."),
    Invoice(id=5, owner_user_id=2, title="Bob - Invoice #2", notes="License renewal."),
    Invoice(id=6, owner_user_id=4, title="Dave - Invoice #1", notes="Hardware purchase."),
    Invoice(id=7, owner_user_id=5, title="Eve - Invoice #1", notes="Consultation follow-up."),
    Invoice(id=8, owner_user_id=1, title="Alice - Invoice #3", notes="Additional hours."),
    Invoice(id=9, owner_user_id=2, title="Bob - Invoice #3", notes="Maintenance contract."),
    Invoice(id=10, owner_user_id=3, title="Carol - Invoice #2", notes="Refund processed."),
    Invoice(id=11, owner_user_id=4, title="Dave - Invoice #2", notes="Maintenance contract."),
    Invoice(id=12, owner_user_id=5, title="Eve - Invoice #2", notes="Quarterly review."),
    Invoice(id=13, owner_user_id=1, title="Alice - Invoice #4", notes="Project milestone 1."),
    Invoice(id=14, owner_user_id=2, title="Bob - Invoice #4", notes="Project milestone 2."),
    Invoice(id=15, owner_user_id=3, title="Carol - Invoice #3", notes="Audit fee."),
    Invoice(id=16, owner_user_id=4, title="Dave - Invoice #3", notes="Custom development."),
    Invoice(id=17, owner_user_id=5, title="Eve - Invoice #3", notes="Service charge."),
    Invoice(id=18, owner_user_id=2, title="Bob - Invoice #5", notes="Final payment."),
    Invoice(id=19, owner_user_id=1, title="Alice - Invoice #5", notes="Bonus hours."),
    Invoice(id=20, owner_user_id=3, title="Carol - Invoice #4", notes="Year-end adjustment."),
)
