# server/crud/reservas.py

import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.errors import StorageError
from models.reserva import Reserva


logger = logging.getLogger(__name__)


def create(db: Session, owner_id: int, destino: str, precio: str, fecha_viaje: str) -> int:
    reserva = Reserva(user_id=owner_id, destino=destino, precio=precio, fecha_viaje=fecha_viaje)
    db.add(reserva)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to insert reservation for user %s", owner_id)
        raise StorageError("Error al reservar")
    db.refresh(reserva)
    return reserva.id


def list_by_owner(db: Session, owner_id: int) -> list[Reserva]:
    """
    All reservations of one owner, most recent first.
    """
    try:
        return (
            db.query(Reserva)
            .filter(Reserva.user_id == owner_id)
            .order_by(Reserva.id.desc())
            .all()
        )
    except SQLAlchemyError:
        logger.exception("Failed to list reservations for user %s", owner_id)
        raise StorageError("Error al obtener reservas")


def delete_owned(db: Session, reserva_id: int, owner_id: int) -> bool:
    """
    Deletes the row only when both id and owner match, in one statement.
    Returns whether a row was removed; callers must not expose it.
    """
    try:
        deleted = (
            db.query(Reserva)
            .filter(Reserva.id == reserva_id, Reserva.user_id == owner_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete reservation %s", reserva_id)
        raise StorageError("Error al eliminar")
    return deleted > 0
