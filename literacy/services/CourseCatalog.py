"""Read access to the seeded modules and their quiz questions."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.core.exceptions import NotFoundError
from literacy.models.module import Module, Question
from literacy.schemas.moduleSchema import QuestionPublic


class CourseCatalog:

    async def list_modules(self, db: AsyncSession) -> List[Module]:
        result = await db.execute(select(Module).order_by(Module.order_index))
        return list(result.scalars().all())

    async def get_module(self, db: AsyncSession, module_id: str) -> Module:
        result = await db.execute(select(Module).where(Module.id == module_id))
        module = result.scalar_one_or_none()
        if not module:
            raise NotFoundError()
        return module

    async def list_questions(self, db: AsyncSession, module_id: str) -> List[QuestionPublic]:
        """Questions in quiz order with the answer key stripped."""
        await self.get_module(db, module_id)
        questions = await self.list_questions_with_answers(db, module_id)
        return [QuestionPublic.model_validate(q) for q in questions]

    async def list_questions_with_answers(self, db: AsyncSession, module_id: str) -> List[Question]:
        """Full questions including correct_answer. Only the quiz evaluator may use this."""
        result = await db.execute(
            select(Question)
            .where(Question.module_id == module_id)
            .order_by(Question.order_index)
        )
        return list(result.scalars().all())
