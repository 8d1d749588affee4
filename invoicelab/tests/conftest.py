from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from invoicelab.app import create_app
from invoicelab.shared.config import AppConfig

COOKIE_NAME = "sid"


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        SESSION_SECRET="test-secret",
        SESSION_COOKIE_NAME=COOKIE_NAME,
    )


@pytest.fixture()
def app(config: AppConfig) -> Flask:
    return create_app(config)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def login(client: FlaskClient, username: str, password: str):
    return client.post("/login", data={"username": username, "password": password})
