# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from invoicelab.domain.invoices.repositories import InvoiceRepository
from invoicelab.domain.users.repositories import UserRepository
from invoicelab.interfaces.http.dto.misc import HealthDTO


class MiscController:
    def __init__(self, *, users: UserRepository, invoices: InvoiceRepository) -> None:
        self._users = users
        self._invoices = invoices

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status = HealthDTO(
            users=len(self._users.list_all()),
            invoices=len(self._invoices.list_all()),
        )
        return jsonify(status.model_dump())
