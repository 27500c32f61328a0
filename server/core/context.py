# server/core/context.py

from dataclasses import dataclass
from core.config import Settings
from core.security import PasswordHasher, TokenService
from database import Database


@dataclass
class AppContext:
    """
    Everything a request handler needs, built once per application.
    """
    settings: Settings
    db: Database
    hasher: PasswordHasher
    tokens: TokenService

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            db=Database(
                settings.DATABASE_URL,
                pool_size=settings.DB_POOL_SIZE,
                pool_timeout=settings.DB_POOL_TIMEOUT,
            ),
            hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
            tokens=TokenService(
                settings.JWT_SECRET,
                algorithm=settings.JWT_ALGORITHM,
                expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            ),
        )
