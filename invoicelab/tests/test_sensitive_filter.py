from __future__ import annotations

from invoicelab.infrastructure.audit import _sanitize_details
from invoicelab.shared.logging import sanitize_message


def test_passwords_are_redacted() -> None:
    assert "alicepass" not in sanitize_message("login password=alicepass")
    assert "***REDACTED***" in sanitize_message("password: 'alicepass'")


def test_session_cookie_is_redacted() -> None:
    message = sanitize_message("sid=AbCdEfGhIjKlMnOpQrStUv.sig")

    assert "AbCdEfGhIjKlMnOpQrStUv" not in message


def test_plain_messages_untouched() -> None:
    assert sanitize_message("GET /invoice/3 -> 200") == "GET /invoice/3 -> 200"


def test_audit_details_redact_sensitive_keys() -> None:
    details = _sanitize_details({"username": "bob", "password": "bobpass", "invoice_id": 3})

    assert details == {"username": "bob", "password": "***REDACTED***", "invoice_id": 3}
