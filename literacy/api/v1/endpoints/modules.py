from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.core.database import aget_db
from literacy.core.dependencies import get_course_catalog, get_current_user
from literacy.models.user import User
from literacy.schemas.moduleSchema import ModuleResponse, QuestionPublic
from literacy.services.CourseCatalog import CourseCatalog

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("", response_model=List[ModuleResponse])
async def list_modules(
    db: AsyncSession = Depends(aget_db),
    catalog: CourseCatalog = Depends(get_course_catalog)
):
    """All modules in course order. Public."""
    return await catalog.list_modules(db)


@router.get("/{module_id}", response_model=ModuleResponse)
async def get_module(
    module_id: str,
    db: AsyncSession = Depends(aget_db),
    catalog: CourseCatalog = Depends(get_course_catalog)
):
    return await catalog.get_module(db, module_id)


@router.get("/{module_id}/questions", response_model=List[QuestionPublic])
async def get_module_questions(
    module_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(aget_db),
    catalog: CourseCatalog = Depends(get_course_catalog)
):
    """Quiz questions without the answer key."""
    return await catalog.list_questions(db, module_id)
