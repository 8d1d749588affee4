from __future__ import annotations

import pytest

from invoicelab.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from invoicelab.application.use_cases.users.login_user import LoginUserUseCase
from invoicelab.application.use_cases.users.logout_user import LogoutUserUseCase
from invoicelab.domain.sessions.state import SessionRecord, open_session
from invoicelab.domain.users.entities import User
from invoicelab.domain.users.exceptions import InvalidCredentialsError
from invoicelab.infrastructure.repositories import InMemoryUserRepository
from invoicelab.infrastructure.seed import SEED_USERS
from invoicelab.infrastructure.sessions import InMemorySessionStore, SessionManager


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository(SEED_USERS)


@pytest.fixture()
def sessions() -> SessionManager:
    return SessionManager(store=InMemorySessionStore(), secret="test")


@pytest.fixture()
def token(sessions: SessionManager) -> str:
    record, _ = sessions.create_or_reuse(None)
    return record.token


@pytest.mark.parametrize("seeded", SEED_USERS, ids=lambda u: u.username)
def test_login_binds_session_to_user(
    users: InMemoryUserRepository, sessions: SessionManager, token: str, seeded: User
) -> None:
    login = LoginUserUseCase(users=users, sessions=sessions)

    user, record = login.execute(token, seeded.username, seeded.password)

    assert user == seeded
    assert record.user_id == seeded.id
    assert sessions.is_authenticated(token)


@pytest.mark.parametrize(
    ("username", "password"),
    [
        ("alice", "wrong"),
        ("mallory", "alicepass"),
        ("Alice", "alicepass"),
        ("alice", "ALICEPASS"),
        ("", ""),
        ("alice ", "alicepass"),
    ],
)
def test_login_rejects_bad_credentials_with_one_error(
    users: InMemoryUserRepository,
    sessions: SessionManager,
    token: str,
    username: str,
    password: str,
) -> None:
    login = LoginUserUseCase(users=users, sessions=sessions)

    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute(token, username, password)

    assert exc_info.value.code == "invalid_credentials"
    assert exc_info.value.to_text() == "Invalid credentials"
    assert exc_info.value.context is None
    assert not sessions.is_authenticated(token)


def test_failed_login_keeps_existing_identity(
    users: InMemoryUserRepository, sessions: SessionManager, token: str
) -> None:
    login = LoginUserUseCase(users=users, sessions=sessions)
    login.execute(token, "bob", "bobpass")

    with pytest.raises(InvalidCredentialsError):
        login.execute(token, "alice", "nope")

    assert sessions.is_authenticated(token)


def test_logout_destroys_session(
    users: InMemoryUserRepository, sessions: SessionManager, token: str
) -> None:
    LoginUserUseCase(users=users, sessions=sessions).execute(token, "carol", "carolpass")

    record = LogoutUserUseCase(sessions=sessions).execute(token)

    assert record.user_id is None
    assert not sessions.is_authenticated(token)


def test_current_user_resolution(users: InMemoryUserRepository) -> None:
    current = GetCurrentUserUseCase(users=users)

    assert current.execute(open_session("t")) is None
    assert current.execute(SessionRecord(token="t", user_id=1)).username == "alice"
    assert current.execute(SessionRecord(token="t", user_id=99)) is None
