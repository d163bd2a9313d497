"""Quiz scoring and quiz-result persistence."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.constants.constants import Message, PASS_THRESHOLD
from literacy.core.exceptions import NotFoundError
from literacy.models.module import Question
from literacy.models.quizresult import QuizResult
from literacy.services.CourseCatalog import CourseCatalog
from literacy.services.ProgressAggregator import ProgressAggregator

logger = logging.getLogger(__name__)


@dataclass
class QuizOutcome:
    score: int
    total_questions: int
    passed: bool
    correct_answers: List[int] = field(default_factory=list)


def first_answer_per_question(answers: Iterable[Tuple[str, int]]) -> Dict[str, int]:
    """Collapse submitted (question_id, selected_answer) pairs; the first answer for a question wins."""
    selected: Dict[str, int] = {}
    for question_id, selected_answer in answers:
        if question_id not in selected:
            selected[question_id] = selected_answer
    return selected


def score_quiz(
    questions: Sequence[Question],
    answers: Iterable[Tuple[str, int]],
    pass_threshold: float = PASS_THRESHOLD
) -> QuizOutcome:
    """
    Score answers against the catalog's key.

    Questions are taken in catalog order. A question with no submitted answer,
    or with an answer other than the stored index, counts as incorrect.
    """
    if not questions:
        raise NotFoundError(Message.questions_not_found.value)

    selected = first_answer_per_question(answers)
    score = 0
    correct_answers = []
    for question in questions:
        if selected.get(question.id) == question.correct_answer:
            score += 1
        correct_answers.append(question.correct_answer)

    total = len(questions)
    return QuizOutcome(
        score=score,
        total_questions=total,
        passed=score / total >= pass_threshold,
        correct_answers=correct_answers,
    )


class QuizEvaluator:

    def __init__(self, catalog: CourseCatalog, progress: ProgressAggregator, pass_threshold: float = PASS_THRESHOLD):
        self.catalog = catalog
        self.progress = progress
        self.pass_threshold = pass_threshold

    async def submit(
        self,
        db: AsyncSession,
        user_id: str,
        module_id: str,
        answers: Iterable[Tuple[str, int]]
    ) -> QuizOutcome:
        """Score a submission, record the attempt and fold it into the user's progress."""
        questions = await self.catalog.list_questions_with_answers(db, module_id)
        outcome = score_quiz(questions, answers, self.pass_threshold)

        db.add(QuizResult(
            user_id=user_id,
            module_id=module_id,
            score=outcome.score,
            total_questions=outcome.total_questions,
            passed=outcome.passed,
        ))
        await db.flush()

        await self.progress.upsert(
            db,
            user_id,
            module_id,
            quiz_completed=True,
            best_score=outcome.score,
        )
        await db.commit()

        logger.info(
            f"Quiz submitted by {user_id} for module {module_id}: "
            f"{outcome.score}/{outcome.total_questions} passed={outcome.passed}"
        )
        return outcome

    async def list_results(self, db: AsyncSession, user_id: str, module_id: Optional[str] = None) -> List[QuizResult]:
        query = select(QuizResult).where(QuizResult.user_id == user_id)
        if module_id:
            query = query.where(QuizResult.module_id == module_id)
        result = await db.execute(query.order_by(QuizResult.completed_at))
        return list(result.scalars().all())
