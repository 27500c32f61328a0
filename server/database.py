# server/database.py

import logging
from pathlib import Path
from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from models import Base


logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and its bounded connection pool.
    Requests wait up to `pool_timeout` seconds for a free connection.
    """

    def __init__(self, url: str, pool_size: int = 10, pool_timeout: float = 30.0):
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            _ensure_sqlite_dir(url)

        self.engine = create_engine(
            url,
            connect_args=connect_args,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def init_db(self):
        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Database unreachable: %s", e)
            return False

    def dispose(self):
        self.engine.dispose()


def _ensure_sqlite_dir(url: str):
    path = url.split("///", 1)[-1] if "///" in url else ""
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


def get_db(request: Request):
    db = request.app.state.ctx.db.SessionLocal()
    try:
        yield db
    finally:
        db.close()
