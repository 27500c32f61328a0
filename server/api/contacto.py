# server/api/contacto.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from crud import mensajes
from database import get_db


router = APIRouter(prefix="/api")


class ContactoRequest(BaseModel):
    nombre: str | None = None
    email: str | None = None
    mensaje: str | None = None


@router.post("/contacto")
def submit_contacto(body: ContactoRequest, db: Session = Depends(get_db)):
    mensajes.submit(db, body.nombre, body.email, body.mensaje)
    return {"message": "Enviado"}
