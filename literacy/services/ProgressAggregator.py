"""Per-user, per-module progress records and the merge rule that keeps them monotonic."""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.models.base import utcnow
from literacy.models.userprogress import UserProgress

logger = logging.getLogger(__name__)


class ProgressAggregator:
    """
    Folds completion and score signals into UserProgress rows.

    Merge rule for an existing row:
    - content_completed / quiz_completed take the patch value when given, otherwise keep the stored value
    - best_score becomes max(patch, stored or 0) when given, otherwise keeps the stored value
    - updated_at is refreshed on every upsert

    The whole merge is one INSERT ... ON CONFLICT DO UPDATE statement, so two
    concurrent upserts for the same (user, module) cannot overwrite each other.
    """

    def _insert_for(self, db: AsyncSession):
        if db.get_bind().dialect.name == "postgresql":
            return postgresql_insert
        return sqlite_insert

    async def upsert(
        self,
        db: AsyncSession,
        user_id: str,
        module_id: str,
        content_completed: Optional[bool] = None,
        quiz_completed: Optional[bool] = None,
        best_score: Optional[int] = None,
    ) -> UserProgress:
        """Apply a patch to the (user_id, module_id) row. None means "not provided"."""
        now = utcnow()
        insert = self._insert_for(db)

        stmt = insert(UserProgress).values(
            id=str(uuid.uuid4()),
            user_id=user_id,
            module_id=module_id,
            content_completed=bool(content_completed),
            quiz_completed=bool(quiz_completed),
            best_score=best_score,
            updated_at=now,
        )

        merged = {"updated_at": now}
        if content_completed is not None:
            merged["content_completed"] = stmt.excluded.content_completed
        if quiz_completed is not None:
            merged["quiz_completed"] = stmt.excluded.quiz_completed
        if best_score is not None:
            stored = func.coalesce(UserProgress.best_score, 0)
            merged["best_score"] = case(
                (stored > stmt.excluded.best_score, stored),
                else_=stmt.excluded.best_score,
            )

        stmt = stmt.on_conflict_do_update(
            index_elements=[UserProgress.user_id, UserProgress.module_id],
            set_=merged,
        ).returning(UserProgress)

        result = await db.scalars(stmt, execution_options={"populate_existing": True})
        progress = result.one()
        logger.debug(f"Progress upserted for user {user_id} module {module_id}: best_score={progress.best_score}")
        return progress

    async def list_for_user(self, db: AsyncSession, user_id: str) -> List[UserProgress]:
        result = await db.execute(select(UserProgress).where(UserProgress.user_id == user_id))
        return list(result.scalars().all())

    async def get_for_user(self, db: AsyncSession, user_id: str, module_id: str) -> Optional[UserProgress]:
        result = await db.execute(
            select(UserProgress).where(
                UserProgress.user_id == user_id,
                UserProgress.module_id == module_id,
            )
        )
        return result.scalar_one_or_none()
