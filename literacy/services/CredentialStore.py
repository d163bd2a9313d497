"""Persistence for users, their credentials and server-side sessions."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.models.authsession import AuthSession
from literacy.models.user import User


class CredentialStore:
    """Narrow repository over the users and sessions tables. Callers own the transaction."""

    async def get_user(self, db: AsyncSession, user_id: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_user_by_verification_token(self, db: AsyncSession, token: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.verification_token == token))
        return result.scalar_one_or_none()

    async def get_user_by_reset_token(self, db: AsyncSession, token: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.reset_password_token == token))
        return result.scalar_one_or_none()

    async def create_user(self, db: AsyncSession, **fields) -> User:
        user = User(**fields)
        db.add(user)
        await db.flush()
        return user

    async def update_user(self, db: AsyncSession, user: User, **updates) -> User:
        for key, value in updates.items():
            setattr(user, key, value)
        await db.flush()
        return user

    async def create_session(self, db: AsyncSession, user_id: str, expires_at: datetime) -> AuthSession:
        auth_session = AuthSession(user_id=user_id, expires_at=expires_at)
        db.add(auth_session)
        await db.flush()
        return auth_session

    async def get_session(self, db: AsyncSession, session_id: str) -> Optional[AuthSession]:
        result = await db.execute(select(AuthSession).where(AuthSession.session_id == session_id))
        return result.scalar_one_or_none()

    async def delete_session(self, db: AsyncSession, session_id: str) -> None:
        await db.execute(delete(AuthSession).where(AuthSession.session_id == session_id))

    async def delete_user_sessions(self, db: AsyncSession, user_id: str) -> None:
        await db.execute(delete(AuthSession).where(AuthSession.user_id == user_id))
