from datetime import datetime
from typing import List, Optional
from pydantic import Field, StrictInt, StrictStr

from literacy.schemas.baseSchema import CamelModel


class AnswerSubmission(CamelModel):
    question_id: StrictStr
    selected_answer: StrictInt


class QuizSubmitRequest(CamelModel):
    module_id: str = Field(..., min_length=1)
    answers: List[AnswerSubmission]


class QuizSubmitResponse(CamelModel):
    score: int
    total_questions: int
    passed: bool
    correct_answers: List[int]


class QuizResultResponse(CamelModel):
    id: str
    user_id: str
    module_id: str
    score: int
    total_questions: int
    passed: bool
    completed_at: Optional[datetime]
