"""Course modules and their quiz questions."""

import uuid
from sqlalchemy import Column, String, Text, Integer, JSON, ForeignKey
from sqlalchemy.orm import relationship

from literacy.models.base import Base


class Module(Base):
    """A static content unit seeded from the course catalog."""

    __tablename__ = "modules"
    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    icon = Column(String, nullable=False)
    order_index = Column(Integer, nullable=False)

    questions = relationship(
        "Question",
        back_populates="module",
        order_by="Question.order_index",
        cascade="all, delete-orphan"
    )


class Question(Base):
    """A multiple-choice question. correct_answer is a zero-based index into options."""

    __tablename__ = "questions"
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    module_id = Column(String, ForeignKey("modules.id"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)
    correct_answer = Column(Integer, nullable=False)
    order_index = Column(Integer, nullable=False)

    module = relationship("Module", back_populates="questions")
