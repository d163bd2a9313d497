import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.core.database import aget_db
from literacy.core.dependencies import get_course_catalog, get_current_user, get_progress_aggregator
from literacy.models.user import User
from literacy.schemas.progressSchema import ProgressResponse
from literacy.services.CourseCatalog import CourseCatalog
from literacy.services.ProgressAggregator import ProgressAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=List[ProgressResponse])
async def get_progress(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(aget_db),
    progress: ProgressAggregator = Depends(get_progress_aggregator)
):
    """All progress rows of the current user."""
    return await progress.list_for_user(db, current_user.user_id)


@router.post("/{module_id}/content-completed", response_model=ProgressResponse)
async def mark_content_completed(
    module_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(aget_db),
    catalog: CourseCatalog = Depends(get_course_catalog),
    progress: ProgressAggregator = Depends(get_progress_aggregator)
):
    await catalog.get_module(db, module_id)
    row = await progress.upsert(db, current_user.user_id, module_id, content_completed=True)
    await db.commit()
    logger.info(f"User {current_user.user_id} finished reading module {module_id}")
    return row
