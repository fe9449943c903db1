"""Session authentication endpoints."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import get_current_user
from app.core.config import settings
from app.core.db import get_session
from app.core.exceptions import AuthenticationError, BadRequestError
from app.core.logging import get_logger
from app.core.security import create_session_token, hash_password, verify_password
from app.database.models import UserModel
from app.database.repositories import UserRepository
from app.models.auth import ChangePasswordRequest, LoginRequest, User, UserEnvelope
from app.models.response import SuccessResponse

logger = get_logger("app.api.v1.auth")

router = APIRouter(prefix="/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/login", response_model=UserEnvelope)
async def login(
    credentials: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(get_session),
) -> UserEnvelope:
    """
    Sign in with e-mail and password.

    On success an http-only session cookie is set. Unknown e-mail and wrong
    password produce the same error.
    """
    user = await UserRepository(session).get_by_email(credentials.email)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.warning("login_failed", email=credentials.email)
        raise AuthenticationError("Invalid credentials")

    set_session_cookie(response, create_session_token(user.id))
    logger.info("login_succeeded", user_id=user.id)
    return UserEnvelope(user=User.model_validate(user))


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return SuccessResponse()


@router.get("/me", response_model=UserEnvelope)
async def me(user: UserModel = Depends(get_current_user)) -> UserEnvelope:
    """The signed-in user."""
    return UserEnvelope(user=User.model_validate(user))


@router.post("/change-password", response_model=SuccessResponse)
async def change_password(
    payload: ChangePasswordRequest,
    user: UserModel = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> SuccessResponse:
    if not verify_password(payload.current_password, user.password_hash):
        raise BadRequestError("Current password is incorrect")

    await UserRepository(session).update(
        user.id, password_hash=hash_password(payload.new_password)
    )
    logger.info("password_changed", user_id=user.id)
    return SuccessResponse()
