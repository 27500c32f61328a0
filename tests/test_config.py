# tests/test_config.py

import pydantic
import pytest
from core.config import Settings
from main import create_app


def test_missing_secret_refuses_to_start(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_blank_secret_refuses_to_start(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "   ")
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None)


def test_create_app_without_secret_fails(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(pydantic.ValidationError):
        create_app()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")
    s = Settings(_env_file=None)
    assert s.JWT_SECRET == "from-env"
    assert s.ACCESS_TOKEN_EXPIRE_MINUTES == 120
    assert s.BCRYPT_ROUNDS == 10
    assert s.cors_origins == ["http://a.test", "http://b.test"]


def test_rejects_too_few_rounds():
    with pytest.raises(pydantic.ValidationError):
        Settings(_env_file=None, JWT_SECRET="x", BCRYPT_ROUNDS=2)
