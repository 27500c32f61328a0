# server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()


from .user import User  # noqa: E402,F401
from .reserva import Reserva  # noqa: E402,F401
from .mensaje import Mensaje  # noqa: E402,F401
