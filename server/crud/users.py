# server/crud/users.py

import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import DuplicateUser, StorageError
from core.security import PasswordHasher
from models.user import User


logger = logging.getLogger(__name__)


def normalize_username(username: str | None) -> str:
    return (username or "").strip()


def find_by_username(db: Session, username: str) -> User | None:
    u = normalize_username(username)
    if not u:
        return None
    try:
        return db.query(User).filter(User.username == u).first()
    except SQLAlchemyError:
        logger.exception("Failed to look up user")
        raise StorageError("Error al iniciar sesión")


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def register(db: Session, hasher: PasswordHasher, username: str, email: str | None, password: str) -> int:
    """
    Hashes the password and inserts a new user row.
    Uniqueness is enforced by the table constraints, not by a prior lookup.
    """
    user = User(
        username=normalize_username(username),
        email=(email or "").strip() or None,
        password=hasher.hash(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateUser("El usuario ya existe")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to insert user")
        raise StorageError("Error al registrar usuario")
    db.refresh(user)
    return user.id
