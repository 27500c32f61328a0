# server/models/reserva.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from . import Base


class Reserva(Base):
    """
    A trip booked by one user. Price and travel date are kept as free text.
    """
    __tablename__ = "reservas"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    destino = Column(String(255), nullable=False)
    precio = Column(String(64), nullable=False)
    fecha_viaje = Column(String(64), nullable=False)
    created_at = Column(DateTime, default=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "destino": self.destino,
            "precio": self.precio,
            "fecha_viaje": self.fecha_viaje,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
