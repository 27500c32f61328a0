# server/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api import auth, reservas, contacto
from core.config import Settings
from core.context import AppContext
from core.errors import BookingError
from core.log import configure_logging


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Application factory. Run with `uvicorn main:create_app --factory`.
    Building Settings fails when JWT_SECRET is not configured.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    ctx = AppContext.from_settings(settings)
    if ctx.db.ping():
        logger.info("Connected to database")
        ctx.db.init_db()
    else:
        logger.error("Starting without a database connection; check DATABASE_URL")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        ctx.db.dispose()

    app = FastAPI(lifespan=lifespan)
    app.state.ctx = ctx

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BookingError)
    def booking_error_handler(request: Request, exc: BookingError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Solicitud inválida"})

    @app.get("/health")
    def health(request: Request):
        if not request.app.state.ctx.db.ping():
            return JSONResponse(status_code=500, content={"error": "Base de datos no disponible"})
        return {"status": "ok"}

    app.include_router(auth.router)
    app.include_router(reservas.router)
    app.include_router(contacto.router)

    logger.info("Server ready")
    return app
