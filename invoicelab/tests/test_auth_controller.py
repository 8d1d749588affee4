from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from flask import Flask

from invoicelab.domain.sessions.state import SessionRecord
from invoicelab.domain.users.entities import User
from invoicelab.domain.users.exceptions import InvalidCredentialsError
from invoicelab.infrastructure.auth import configure_sessions
from invoicelab.infrastructure.sessions import InMemorySessionStore, SessionManager
from invoicelab.interfaces.http.controllers.auth_controller import AuthController
from invoicelab.shared.config import AppConfig
from invoicelab.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    # Rooted at the package so templates resolve.
    app = Flask("invoicelab.app")
    configure_error_handling(app)
    configure_sessions(
        app,
        SessionManager(store=InMemorySessionStore(), secret="test"),
        AppConfig(SESSION_SECRET="test"),
    )
    return app


def test_login_success_redirects_to_invoices(flask_app: Flask) -> None:
    called: dict[str, tuple[str, str]] = {}

    class StubLogin:
        def execute(self, token: str, username: str, password: str):
            called["args"] = (username, password)
            return User(id=2, username=username, password=password), SessionRecord(token, 2)

    controller = AuthController(login_use_case=StubLogin(), logout_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", data={"username": "bob", "password": "bobpass"})

    assert response.status_code == 302
    assert response.headers["Location"] == "/my-invoices"
    assert called["args"] == ("bob", "bobpass")


def test_login_failure_renders_inline_error(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(login_use_case=login, logout_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", data={"username": "bob"})

    assert response.status_code == 200
    assert b"Invalid credentials" in response.data
    assert login.execute.call_args.args[1:] == ("bob", "")


def test_logout_clears_cookie_and_redirects_home(flask_app: Flask) -> None:
    logout = MagicMock()
    logout.execute.side_effect = lambda token: SessionRecord(token)
    controller = AuthController(login_use_case=MagicMock(), logout_use_case=logout)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        client.get("/login")
        response = client.post("/logout")

    assert response.status_code == 302
    assert response.headers["Location"] == "/"
    assert logout.execute.call_count == 1
    set_cookie = response.headers["Set-Cookie"]
    assert set_cookie.startswith("sid=;")
    assert "Expires=Thu, 01 Jan 1970" in set_cookie
