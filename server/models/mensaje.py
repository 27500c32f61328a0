# server/models/mensaje.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from . import Base


class Mensaje(Base):
    __tablename__ = "mensajes"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    mensaje = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.now)
