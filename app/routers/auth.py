# app/routers/auth.py
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.exceptions import NotAuthorized
from app.database import get_session
from app.schemas.auth import LoginRequest, LoginResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

logger = logging.getLogger("uvicorn")


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "Unknown email or wrong password"},
        500: {"description": "Unexpected failure (details hidden)"},
    },
)
def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    """
    Exchange email/password for a 1-hour access token.

    Unlike other routes, an unexpected failure here answers with a fixed
    message instead of the underlying error.
    """
    try:
        token = service.login(payload)
    except NotAuthorized as exc:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
        )
    except Exception:
        logger.exception("Login failed unexpectedly")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
    return LoginResponse(token=token)
