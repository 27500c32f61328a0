# tests/test_security.py

from datetime import datetime, timedelta, timezone
import pytest
from jose import jwt
from core.errors import ValidationError
from core.security import PasswordHasher, TokenService


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens():
    return TokenService("secret-a", expire_minutes=120)


def test_hash_is_salted_and_verifies(hasher):
    h1 = hasher.hash("pw123")
    h2 = hasher.hash("pw123")
    assert h1 != "pw123"
    assert h1 != h2
    assert hasher.verify("pw123", h1)
    assert hasher.verify("pw123", h2)


def test_wrong_password_does_not_verify(hasher):
    assert not hasher.verify("nope", hasher.hash("pw123"))


def test_verify_against_garbage_hash_is_false(hasher):
    assert not hasher.verify("pw123", "not-a-bcrypt-hash")
    assert not hasher.verify("", hasher.hash("pw123"))


def test_configured_rounds_are_used():
    h = PasswordHasher(rounds=5).hash("pw123")
    assert h.startswith("$2b$05$")


def test_issue_then_verify_returns_user_id(tokens):
    assert tokens.verify(tokens.issue(42)) == 42


def test_token_lifetime_is_two_hours(tokens):
    claims = jwt.get_unverified_claims(tokens.issue(7))
    assert claims["id"] == 7
    assert claims["exp"] - claims["iat"] == 2 * 60 * 60


def test_expired_token_is_invalid(tokens):
    issued = datetime.now(timezone.utc) - timedelta(hours=2, minutes=1)
    assert tokens.verify(tokens.issue(1, now=issued)) is None


def test_token_signed_with_other_key_is_invalid(tokens):
    other = TokenService("secret-b")
    assert tokens.verify(other.issue(1)) is None


@pytest.mark.parametrize("bad", ["", "abc", "a.b.c", "Bearer x", None, 123])
def test_malformed_tokens_never_raise(tokens, bad):
    assert tokens.verify(bad) is None


def test_token_without_integer_id_is_invalid(tokens):
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    assert tokens.verify(jwt.encode({"id": "1", "exp": exp}, "secret-a", algorithm="HS256")) is None
    assert tokens.verify(jwt.encode({"sub": "1", "exp": exp}, "secret-a", algorithm="HS256")) is None


def test_blank_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")


def test_hash_rejects_nul_byte(hasher):
    with pytest.raises(ValidationError):
        hasher.hash("a\x00b")
