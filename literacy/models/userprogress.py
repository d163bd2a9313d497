"""Per-user, per-module progress."""

import uuid
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from literacy.models.base import Base, utcnow


class UserProgress(Base):
    """One row per (user_id, module_id). best_score never decreases."""

    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "module_id", name="uq_user_progress_user_module"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String, ForeignKey("users.user_id"), nullable=False, index=True)
    module_id = Column(String, ForeignKey("modules.id"), nullable=False)
    content_completed = Column(Boolean, default=False, nullable=False)
    quiz_completed = Column(Boolean, default=False, nullable=False)
    best_score = Column(Integer, nullable=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="progress")
