from typing import List

from literacy.schemas.baseSchema import CamelModel


class ModuleResponse(CamelModel):
    id: str
    title: str
    description: str
    content: str
    icon: str
    order_index: int


class QuestionPublic(CamelModel):
    """A quiz question as clients see it: no correct answer."""
    id: str
    module_id: str
    question_text: str
    options: List[str]
    order_index: int
