# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, redirect, render_template, request

from invoicelab.application.use_cases.users.login_user import LoginUserUseCase
from invoicelab.application.use_cases.users.logout_user import LogoutUserUseCase
from invoicelab.domain.users.exceptions import InvalidCredentialsError
from invoicelab.infrastructure.audit import AuditAction, audit_log
from invoicelab.infrastructure.auth import client_ip, current_session, replace_session
from invoicelab.interfaces.http.dto.auth import LoginFormDTO
from invoicelab.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    def login_form(self):
        return render_template("login.html", error=None)

    def login(self):
        dto = LoginFormDTO.model_validate(request.form.to_dict())
        session = current_session()
        ip_address = client_ip()

        try:
            user, record = self._login_use_case.execute(session.token, dto.username, dto.password)
        except InvalidCredentialsError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                user_id=session.user_id,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            return render_template("login.html", error=exc.to_text())

        replace_session(record)
        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": user.username},
        )
        logger.info(f"auth.login: ok user_id={user.id}")
        return redirect("/my-invoices")

    def logout(self):
        session = current_session()
        replace_session(self._logout_use_case.execute(session.token), destroyed=True)

        audit_log(AuditAction.LOGOUT, user_id=session.user_id, ip_address=client_ip())
        logger.info("auth.logout: ok")
        return redirect("/")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login_form, methods=["GET"], endpoint="login_form")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"], endpoint="login")
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"], endpoint="logout")
        return bp
