from __future__ import annotations

from invoicelab.domain.sessions import (
    SessionRecord,
    SessionState,
    authenticate,
    open_session,
    sign_out,
)


def test_new_session_is_anonymous() -> None:
    record = open_session("tok")

    assert record == SessionRecord(token="tok", user_id=None)
    assert record.state is SessionState.ANONYMOUS
    assert record.is_authenticated is False


def test_authenticate_binds_user_and_keeps_token() -> None:
    record = authenticate(open_session("tok"), 2)

    assert record.token == "tok"
    assert record.user_id == 2
    assert record.state is SessionState.AUTHENTICATED


def test_transitions_do_not_mutate_the_previous_record() -> None:
    anonymous = open_session("tok")
    authenticate(anonymous, 1)

    assert anonymous.user_id is None


def test_reauthenticate_rebinds_to_new_user() -> None:
    record = authenticate(authenticate(open_session("tok"), 1), 3)

    assert record.user_id == 3


def test_sign_out_returns_to_anonymous() -> None:
    record = sign_out(authenticate(open_session("tok"), 1))

    assert record.state is SessionState.ANONYMOUS
    assert record.token == "tok"
