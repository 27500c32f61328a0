# server/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from core.errors import ValidationError


logger = logging.getLogger(__name__)


# -------------------------------
# Password hashing
# -------------------------------

class PasswordHasher:
    """
    Salted bcrypt hashing. The work factor comes from configuration.
    """

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        try:
            return self._context.hash(password)
        except (ValueError, TypeError):
            # bcrypt refuses NUL bytes
            raise ValidationError("Contraseña inválida")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        if not plain_password or not hashed_password:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # Unknown or corrupt hash format
            return False


# -------------------------------
# Access tokens
# -------------------------------

class TokenService:
    """
    Issues and verifies signed access tokens carrying `{"id": user_id}`.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 120):
        if not secret:
            raise ValueError("token secret must not be blank")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)

    def issue(self, user_id: int, now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {
            "id": int(user_id),
            "iat": int(issued.timestamp()),
            "exp": int((issued + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> int | None:
        """
        Returns the user id bound to the token, or None when the token is
        malformed, signed with another key, or expired.
        """
        if not token or not isinstance(token, str):
            return None
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            return None

        user_id = payload.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            return None
        return user_id
