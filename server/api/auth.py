# server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from core import auth as auth_flow
from core.errors import AuthError, Rejected
from crud.users import get_user
from database import get_db


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


class RegisterRequest(BaseModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    username: str


class UserInfo(BaseModel):
    id: int
    username: str
    email: str | None = None


def rejected_response(result: Rejected) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content={"error": result.reason})


# -------------------------------
# Request gate
# -------------------------------

_bearer = HTTPBearer(auto_error=False)


def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> int:
    """
    Resolves the caller from `Authorization: Bearer <token>`.
    Missing token -> 401, invalid or expired token -> 403.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("Falta token", status_code=status.HTTP_401_UNAUTHORIZED)

    user_id = request.app.state.ctx.tokens.verify(credentials.credentials)
    if user_id is None:
        logger.info("Rejected invalid token on %s %s", request.method, request.url.path)
        raise AuthError("Token inválido", status_code=status.HTTP_403_FORBIDDEN)

    request.state.user_id = user_id
    return user_id


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, request: Request, db: Session = Depends(get_db)):
    ctx = request.app.state.ctx
    result = auth_flow.handle_register(db, ctx.hasher, body.username, body.email, body.password)
    if isinstance(result, Rejected):
        return rejected_response(result)
    return {"message": "Usuario creado"}


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    ctx = request.app.state.ctx
    result = auth_flow.handle_login(db, ctx.hasher, ctx.tokens, body.username, body.password)
    if isinstance(result, Rejected):
        return rejected_response(result)
    return {"token": result.value.token, "username": result.value.username}


@router.get("/me", response_model=UserInfo)
def read_users_me(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    user = get_user(db, user_id)
    if user is None:
        raise AuthError("Token inválido", status_code=status.HTTP_403_FORBIDDEN)
    return {"id": user.id, "username": user.username, "email": user.email}
