# server/crud/mensajes.py

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import StorageError
from models.mensaje import Mensaje


logger = logging.getLogger(__name__)


def submit(db: Session, nombre: str | None, email: str | None, mensaje: str | None) -> int:
    """
    Unconditional insert. Only the table constraints can reject a message.
    """
    row = Mensaje(nombre=nombre, email=email, mensaje=mensaje)
    db.add(row)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to store contact message")
        raise StorageError("Error al guardar mensaje")
    logger.info("New contact message from %s", nombre)
    return row.id
