"""Server-side login sessions."""

import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from literacy.models.base import Base, utcnow


class AuthSession(Base):
    """One row per login; the session cookie only carries a signed reference to it."""

    __tablename__ = "sessions"
    session_id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="sessions")

    def is_expired(self, now=None) -> bool:
        return (now or utcnow()) >= self.expires_at
