from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.core.database import aget_db
from literacy.core.dependencies import get_current_user, get_quiz_evaluator
from literacy.models.user import User
from literacy.schemas.quizSchema import QuizResultResponse, QuizSubmitRequest, QuizSubmitResponse
from literacy.services.QuizEvaluator import QuizEvaluator

router = APIRouter(tags=["quiz"])


@router.get("/results", response_model=List[QuizResultResponse])
async def get_results(
    module_id: Optional[str] = Query(None, alias="moduleId"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(aget_db),
    evaluator: QuizEvaluator = Depends(get_quiz_evaluator)
):
    """Quiz attempts of the current user, oldest first, optionally for one module."""
    return await evaluator.list_results(db, current_user.user_id, module_id)


@router.post("/quiz/submit", response_model=QuizSubmitResponse)
async def submit_quiz(
    payload: QuizSubmitRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(aget_db),
    evaluator: QuizEvaluator = Depends(get_quiz_evaluator)
):
    """
    Score a quiz attempt. The response reveals the correct answers so the
    client can show a review screen after submission.
    """
    outcome = await evaluator.submit(
        db,
        current_user.user_id,
        payload.module_id,
        [(answer.question_id, answer.selected_answer) for answer in payload.answers],
    )
    return QuizSubmitResponse(
        score=outcome.score,
        total_questions=outcome.total_questions,
        passed=outcome.passed,
        correct_answers=outcome.correct_answers,
    )
