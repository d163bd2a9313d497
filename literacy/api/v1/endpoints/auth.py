import logging
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.constants.constants import Message
from literacy.core.config import settings
from literacy.core.database import aget_db
from literacy.core.dependencies import get_current_user, get_session_authority, get_session_token
from literacy.core.rate_limit import limiter
from literacy.core.security import clear_auth_cookie, set_auth_cookie
from literacy.models.user import User
from literacy.schemas.authSchema import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UserResponse,
    UserSummary,
    VerifyEmailRequest,
)
from literacy.services.SessionAuthority import SessionAuthority

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


# -----------------------------
# Register
# -----------------------------
@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def register(
    request: Request,
    payload: RegisterRequest,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    """
    Create an unverified account and email a verification link.
    A failed email does not fail the registration.
    """
    user = await authority.register(
        db,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return RegisterResponse(message=Message.registered.value, user_id=user.user_id)


# -----------------------------
# Login
# -----------------------------
@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    result = await authority.login(db, payload.email, payload.password)
    set_auth_cookie(response, result.token, result.expires_in)
    return LoginResponse(
        message=Message.login_success.value,
        user=UserSummary.model_validate(result.user),
    )


# -----------------------------
# Verify Email
# -----------------------------
@router.post("/verify-email", response_model=MessageResponse)
async def verify_email(
    payload: VerifyEmailRequest,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    await authority.verify_email(db, payload.token)
    return MessageResponse(message=Message.email_verified.value)


# -----------------------------
# Logout
# -----------------------------
@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    """Always succeeds, with or without a live session."""
    await authority.logout(db, get_session_token(request))
    clear_auth_cookie(response)
    return MessageResponse(message=Message.logout_success.value)


# -----------------------------
# Get Current User
# -----------------------------
@router.get("/user", response_model=UserResponse)
async def get_user(current_user: User = Depends(get_current_user)):
    """Return current authenticated user info, without the password hash"""
    return UserResponse.model_validate(current_user)


# -----------------------------
# Password Reset
# -----------------------------
@router.post("/forgot-password", response_model=MessageResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def forgot_password(
    request: Request,
    payload: ForgotPasswordRequest,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    await authority.request_password_reset(db, payload.email)
    return MessageResponse(message=Message.reset_requested.value)


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(
    payload: ResetPasswordRequest,
    db: AsyncSession = Depends(aget_db),
    authority: SessionAuthority = Depends(get_session_authority)
):
    await authority.reset_password(db, payload.token, payload.password)
    return MessageResponse(message=Message.password_reset.value)
