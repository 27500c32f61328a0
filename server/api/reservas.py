# server/api/reservas.py

import logging
from pydantic import BaseModel, ConfigDict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.auth import get_current_user_id
from core.errors import ValidationError
from crud import reservas
from database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class ReservaRequest(BaseModel):
    """
    Price and date are free text; numbers sent by clients are kept as strings.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True)

    destino: str | None = None
    precio: str | None = None
    fecha_viaje: str | None = None


@router.post("/reservas")
def create_reserva(
    body: ReservaRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    if not body.destino or body.precio in (None, "") or not body.fecha_viaje:
        raise ValidationError("destino, precio y fecha_viaje son obligatorios")

    reserva_id = reservas.create(db, user_id, body.destino, body.precio, body.fecha_viaje)
    logger.info("User %s created reservation %s", user_id, reserva_id)
    return {"message": "Guardado", "id": reserva_id}


@router.get("/reservas")
def list_reservas(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return [r.to_dict() for r in reservas.list_by_owner(db, user_id)]


@router.delete("/reservas/{reserva_id}")
def delete_reserva(
    reserva_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    # Response never reveals whether a row was removed.
    deleted = reservas.delete_owned(db, reserva_id, user_id)
    logger.info("User %s asked to delete reservation %s (removed=%s)", user_id, reserva_id, deleted)
    return {"message": "Eliminado"}
