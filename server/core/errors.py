# server/core/errors.py

from dataclasses import dataclass
from typing import Generic, TypeVar, Union


class BookingError(Exception):
    """
    Base error. `message` is the only thing ever shown to clients.
    """
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(BookingError):
    status_code = 400


class DuplicateUser(BookingError):
    status_code = 400


class AuthError(BookingError):
    status_code = 401


class StorageError(BookingError):
    status_code = 500


# -------------------------------
# Result values
# -------------------------------

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Rejected:
    error: BookingError

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def reason(self) -> str:
        return self.error.message


Result = Union[Ok[T], Rejected]
