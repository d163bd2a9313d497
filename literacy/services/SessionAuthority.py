"""Account and session lifecycle: registration, email verification, login, logout and password reset."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.constants.constants import Message
from literacy.core.exceptions import (
    AuthError,
    ConflictError,
    EmailNotVerifiedError,
    InvalidTokenError,
    ValidationError,
)
from literacy.core.security import (
    create_jwt_token,
    decode_jwt_token,
    generate_token,
    hash_password,
    verify_password,
)
from literacy.models.base import utcnow
from literacy.models.user import User
from literacy.services.CredentialStore import CredentialStore
from literacy.utils.validators import is_valid_email, is_valid_password

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    token: str
    expires_in: timedelta


class SessionAuthority:
    """
    Issues and validates server-side sessions.

    A session is a row in the sessions table; the cookie carries a signed JWT
    whose ``sid`` claim references that row, so a session can be revoked by
    deleting the row even while the JWT itself is still valid.

    ``require_email_verification`` switches between the two deployment
    variants: when set, unverified accounts can neither log in nor use an
    existing session.
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        mailer,
        require_email_verification: bool = True,
        session_ttl: timedelta = timedelta(days=7),
        verification_token_ttl: timedelta = timedelta(hours=24),
        reset_token_ttl: timedelta = timedelta(hours=1),
        bcrypt_rounds: Optional[int] = None,
    ):
        self.store = credential_store
        self.mailer = mailer
        self.require_email_verification = require_email_verification
        self.session_ttl = session_ttl
        self.verification_token_ttl = verification_token_ttl
        self.reset_token_ttl = reset_token_ttl
        self.bcrypt_rounds = bcrypt_rounds
        self._dummy_hash: Optional[str] = None

    # -----------------------------
    # Registration
    # -----------------------------
    async def register(
        self,
        db: AsyncSession,
        email: str,
        password: str,
        first_name: str,
        last_name: str
    ) -> User:
        if not is_valid_email(email):
            raise ValidationError(Message.invalid_email.value)
        if not is_valid_password(password):
            raise ValidationError(Message.password_too_short.value)
        if not first_name or not first_name.strip():
            raise ValidationError(Message.first_name_required.value)
        if not last_name or not last_name.strip():
            raise ValidationError(Message.last_name_required.value)

        if await self.store.get_user_by_email(db, email):
            logger.info(f"Registration rejected, email already registered: {email}")
            raise ConflictError()

        password_hash = await hash_password(password, self.bcrypt_rounds)
        verification_token = generate_token()

        try:
            user = await self.store.create_user(
                db,
                email=email,
                password_hash=password_hash,
                first_name=first_name,
                last_name=last_name,
                email_verified=False,
                verification_token=verification_token,
                verification_token_expires=utcnow() + self.verification_token_ttl,
            )
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info(f"Registration lost a race on email: {email}")
            raise ConflictError()

        logger.info(f"Registered user {user.user_id}")

        try:
            await self.mailer.send_verification_email(email, verification_token, first_name or "Қолданушы")
        except Exception as e:
            logger.error(f"Error sending verification email to {email}: {e}")

        return user

    async def verify_email(self, db: AsyncSession, token: str) -> User:
        if not token:
            raise InvalidTokenError(Message.token_missing.value)

        user = await self.store.get_user_by_verification_token(db, token)
        if not user:
            raise InvalidTokenError()

        if user.verification_token_expires and utcnow() > user.verification_token_expires:
            logger.info(f"Expired verification token used for user {user.user_id}")
            raise InvalidTokenError(Message.token_expired.value)

        await self.store.update_user(
            db,
            user,
            email_verified=True,
            verification_token=None,
            verification_token_expires=None,
        )
        await db.commit()
        logger.info(f"Email verified for user {user.user_id}")
        return user

    # -----------------------------
    # Login / Logout
    # -----------------------------
    async def _check_password_against_nothing(self, password: str) -> None:
        if self._dummy_hash is None:
            self._dummy_hash = await hash_password(generate_token(), self.bcrypt_rounds)
        await verify_password(password, self._dummy_hash)

    async def login(self, db: AsyncSession, email: str, password: str) -> LoginResult:
        user = await self.store.get_user_by_email(db, email)
        if not user:
            await self._check_password_against_nothing(password)
            logger.info(f"Login failed, no such email: {email}")
            raise AuthError()

        if not await verify_password(password, user.password_hash):
            logger.info(f"Login failed, wrong password for user {user.user_id}")
            raise AuthError()

        if self.require_email_verification and not user.email_verified:
            logger.info(f"Login refused, email not verified for user {user.user_id}")
            raise EmailNotVerifiedError(Message.email_not_verified_login.value)

        auth_session = await self.store.create_session(db, user.user_id, utcnow() + self.session_ttl)
        await db.commit()

        token = create_jwt_token(
            {"sub": user.user_id, "sid": auth_session.session_id},
            expires_delta=self.session_ttl,
        )
        logger.info(f"User {user.user_id} logged in")
        return LoginResult(user=user, token=token, expires_in=self.session_ttl)

    async def logout(self, db: AsyncSession, token: Optional[str]) -> None:
        """Delete the session behind the token, if any. Never fails on a bad token."""
        if not token:
            return
        try:
            payload = decode_jwt_token(token, verify_exp=False)
        except jwt.PyJWTError:
            return

        session_id = payload.get("sid")
        if session_id:
            await self.store.delete_session(db, session_id)
            await db.commit()

    async def current_user(self, db: AsyncSession, token: Optional[str]) -> User:
        if not token:
            raise AuthError(Message.auth_required.value)

        try:
            payload = decode_jwt_token(token)
        except jwt.PyJWTError as e:
            logger.info(f"Rejected session token: {e}")
            raise AuthError(Message.auth_required.value)

        session_id = payload.get("sid")
        user_id = payload.get("sub")
        if not session_id or not user_id:
            raise AuthError(Message.auth_required.value)

        auth_session = await self.store.get_session(db, session_id)
        if not auth_session or auth_session.user_id != user_id:
            raise AuthError(Message.auth_required.value)

        if auth_session.is_expired():
            await self.store.delete_session(db, session_id)
            await db.commit()
            raise AuthError(Message.auth_required.value)

        user = await self.store.get_user(db, user_id)
        if not user:
            logger.warning(f"Session {session_id} references unknown user {user_id}")
            raise AuthError(Message.auth_required.value)

        if self.require_email_verification and not user.email_verified:
            raise EmailNotVerifiedError()

        return user

    # -----------------------------
    # Password reset
    # -----------------------------
    async def request_password_reset(self, db: AsyncSession, email: str) -> None:
        """Silently does nothing for unknown emails so callers cannot probe for accounts."""
        user = await self.store.get_user_by_email(db, email)
        if not user:
            logger.info(f"Password reset requested for unknown email: {email}")
            return

        reset_token = generate_token()
        await self.store.update_user(
            db,
            user,
            reset_password_token=reset_token,
            reset_password_expires=utcnow() + self.reset_token_ttl,
        )
        await db.commit()

        try:
            await self.mailer.send_password_reset_email(email, reset_token, user.first_name or "Қолданушы")
        except Exception as e:
            logger.error(f"Error sending password reset email to {email}: {e}")

    async def reset_password(self, db: AsyncSession, token: str, new_password: str) -> User:
        if not is_valid_password(new_password):
            raise ValidationError(Message.password_too_short.value)
        if not token:
            raise InvalidTokenError(Message.token_missing.value)

        user = await self.store.get_user_by_reset_token(db, token)
        if not user:
            raise InvalidTokenError()

        if user.reset_password_expires and utcnow() > user.reset_password_expires:
            raise InvalidTokenError(Message.token_expired.value)

        password_hash = await hash_password(new_password, self.bcrypt_rounds)
        await self.store.update_user(
            db,
            user,
            password_hash=password_hash,
            reset_password_token=None,
            reset_password_expires=None,
        )
        await self.store.delete_user_sessions(db, user.user_id)
        await db.commit()
        logger.info(f"Password reset for user {user.user_id}")
        return user
