# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import Flask, Response, current_app, g, redirect, request

from invoicelab.domain.sessions.state import SessionRecord
from invoicelab.infrastructure.audit import AuditAction, audit_log
from invoicelab.infrastructure.sessions import SessionManager
from invoicelab.shared.config import AppConfig
from invoicelab.shared.logging import logger

_EXTENSION_KEY = "invoicelab.sessions"
# Endpoints served without loading or opening a session.
_SESSIONLESS_ENDPOINTS = {"static", "misc.health"}
LOGIN_PATH = "/login"


def client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def session_manager() -> SessionManager:
    return current_app.extensions[_EXTENSION_KEY]


def current_session() -> SessionRecord:
    return g.session


def replace_session(record: SessionRecord, *, destroyed: bool = False) -> None:
    """Swap the request's session record after a login or logout."""
    g.session = record
    g.user_id = record.user_id
    if destroyed:
        g.session_destroyed = True


def configure_sessions(app: Flask, manager: SessionManager, config: AppConfig) -> None:
    app.extensions[_EXTENSION_KEY] = manager
    cookie_name = config.session_cookie_name

    @app.before_request
    def _load_session() -> None:
        if request.endpoint in _SESSIONLESS_ENDPOINTS:
            return
        record, created = manager.create_or_reuse(request.cookies.get(cookie_name))
        g.session = record
        g.user_id = record.user_id
        g.session_created = created

    @app.after_request
    def _write_session_cookie(response: Response) -> Response:
        if g.get("session_destroyed"):
            response.delete_cookie(
                cookie_name,
                httponly=True,
                secure=config.cookie_secure,
                samesite=config.cookie_samesite,
            )
        elif g.get("session_created"):
            response.set_cookie(
                cookie_name,
                manager.sign(g.session.token),
                httponly=True,
                secure=config.cookie_secure,
                samesite=config.cookie_samesite,
            )
        return response


def auth_required(f):
    """Redirect to the login page unless the request's session is authenticated."""

    @wraps(f)
    def inner(*a, **kw):
        record: SessionRecord | None = g.get("session")
        if record is None or not session_manager().is_authenticated(record.token):
            logger.warning(
                f"Unauthenticated access on {request.method} {request.path} "
                f"from {client_ip()}"
            )
            audit_log(
                AuditAction.AUTH_REDIRECT,
                ip_address=client_ip(),
                details={"path": request.path},
                success=False,
            )
            return redirect(LOGIN_PATH)

        logger.debug(f"Auth OK: user={record.user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


__all__ = [
    "LOGIN_PATH",
    "auth_required",
    "client_ip",
    "configure_sessions",
    "current_session",
    "replace_session",
    "session_manager",
]
