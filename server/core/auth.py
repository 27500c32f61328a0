# server/core/auth.py

import logging
from dataclasses import dataclass
from sqlalchemy.orm import Session
from core.errors import AuthError, BookingError, Ok, Rejected, Result, ValidationError
from core.security import PasswordHasher, TokenService
from crud import users


logger = logging.getLogger(__name__)

LOGIN_FAILED = "Usuario o contraseña incorrectos"


@dataclass(frozen=True)
class LoginResult:
    token: str
    username: str


def handle_register(
    db: Session,
    hasher: PasswordHasher,
    username: str | None,
    email: str | None,
    password: str | None,
) -> Result[int]:
    """
    Creates an account. The caller still has to log in afterwards.
    """
    if not users.normalize_username(username) or not password:
        return Rejected(ValidationError("Usuario y contraseña son obligatorios"))

    try:
        user_id = users.register(db, hasher, username, email, password)
    except BookingError as e:
        logger.info("Registration rejected for %r: %s", username, e.message)
        return Rejected(e)

    logger.info("User %s registered (id=%s)", username, user_id)
    return Ok(user_id)


def handle_login(
    db: Session,
    hasher: PasswordHasher,
    tokens: TokenService,
    username: str | None,
    password: str | None,
) -> Result[LoginResult]:
    """
    Unknown user and wrong password produce the same rejection.
    """
    try:
        user = users.find_by_username(db, username or "")
    except BookingError as e:
        return Rejected(e)
    if user is None or not hasher.verify(password or "", user.password):
        logger.info("Failed login for %r", username)
        return Rejected(AuthError(LOGIN_FAILED, status_code=400))

    token = tokens.issue(user.id)
    logger.info("User %s logged in", user.username)
    return Ok(LoginResult(token=token, username=user.username))
