# server/core/config.py

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration, read from the environment or a local .env file.
    JWT_SECRET has no default: the server refuses to start without it.
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120

    DATABASE_URL: str = "sqlite:///./data/app.db"
    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: float = 30.0

    BCRYPT_ROUNDS: int = 10

    CORS_ALLOW_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    @field_validator("JWT_SECRET")
    @classmethod
    def secret_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_SECRET must not be blank")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def rounds_in_range(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("ACCESS_TOKEN_EXPIRE_MINUTES", "DB_POOL_SIZE")
    @classmethod
    def positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
