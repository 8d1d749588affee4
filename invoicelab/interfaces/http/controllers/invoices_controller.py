# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, render_template

from invoicelab.application.use_cases.invoices.get_invoice import GetInvoiceUseCase
from invoicelab.application.use_cases.invoices.get_max_invoice_id import GetMaxInvoiceIdUseCase
from invoicelab.application.use_cases.invoices.list_my_invoices import ListMyInvoicesUseCase
from invoicelab.domain.invoices.exceptions import InvoiceNotFoundError
from invoicelab.domain.invoices.ids import parse_invoice_id
from invoicelab.infrastructure.audit import AuditAction, audit_log
from invoicelab.infrastructure.auth import auth_required, client_ip, current_session
from invoicelab.interfaces.http.dto.invoices import MaxInvoiceDTO


class InvoicesController:
    def __init__(
        self,
        *,
        list_use_case: ListMyInvoicesUseCase,
        get_use_case: GetInvoiceUseCase,
        max_id_use_case: GetMaxInvoiceIdUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._max_id_use_case = max_id_use_case

    @auth_required
    def my_invoices(self):
        invoices = self._list_use_case.execute(current_session())
        return render_template("my_invoices.html", invoices=invoices)

    @auth_required
    def invoice_detail(self, invoice_id: str):
        viewer = current_session().user_id
        parsed = parse_invoice_id(invoice_id)
        try:
            detail = self._get_use_case.execute(parsed)
        except InvoiceNotFoundError:
            audit_log(
                AuditAction.INVOICE_NOT_FOUND,
                user_id=viewer,
                ip_address=client_ip(),
                details={"raw_id": invoice_id, "invoice_id": parsed},
                success=False,
            )
            raise

        audit_log(
            AuditAction.INVOICE_VIEWED,
            user_id=viewer,
            ip_address=client_ip(),
            details={
                "invoice_id": detail.invoice.id,
                "owner_user_id": detail.invoice.owner_user_id,
            },
        )
        return render_template("invoice.html", invoice=detail.invoice, owner=detail.owner)

    @auth_required
    def max_invoice(self):
        max_id = self._max_id_use_case.execute()
        audit_log(
            AuditAction.MAX_INVOICE_QUERIED,
            user_id=current_session().user_id,
            ip_address=client_ip(),
            details={"max_invoice_id": max_id},
        )
        return jsonify(MaxInvoiceDTO(max_invoice_id=max_id).model_dump(by_alias=True))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("invoices", __name__)
        bp.add_url_rule("/my-invoices", view_func=self.my_invoices, methods=["GET"])
        bp.add_url_rule(
            "/invoice/<invoice_id>", view_func=self.invoice_detail, methods=["GET"]
        )
        bp.add_url_rule(
            "/api/max-invoice",
            view_func=self.max_invoice,
            methods=["GET"],
            endpoint="max_invoice",
        )
        return bp
