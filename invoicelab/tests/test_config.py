from __future__ import annotations

import pytest

from invoicelab.shared.config import AppConfig, load_config


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "PORT", "SESSION_SECRET", "COOKIE_SECURE", "COOKIE_SAMESITE"):
        monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


def test_defaults() -> None:
    config = load_config()

    assert config.port == 3000
    assert config.session_secret == "ctf-idor-secret"
    assert config.cookie_secure is False
    assert config.cookie_samesite == "Lax"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SESSION_SECRET", "from-env")
    monkeypatch.setenv("COOKIE_SECURE", "yes")
    monkeypatch.setenv("COOKIE_SAMESITE", "strict")

    config = load_config()

    assert config.port == 8080
    assert config.session_secret == "from-env"
    assert config.cookie_secure is True
    assert config.cookie_samesite == "Strict"


def test_dotenv_file_is_read(tmp_path) -> None:
    (tmp_path / ".env").write_text("PORT=4000\n", encoding="utf-8")

    assert load_config().port == 4000


def test_production_rejects_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    with pytest.raises(SystemExit):
        load_config()


def test_production_accepts_strong_secret(capsys: pytest.CaptureFixture[str]) -> None:
    config = AppConfig(APP_ENV="prod", SESSION_SECRET="a-long-random-value")

    assert config.is_production()
    assert "Cookie Secure flag is DISABLED" in capsys.readouterr().err
