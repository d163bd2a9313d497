from datetime import datetime
from typing import Optional

from literacy.schemas.baseSchema import CamelModel


class ProgressResponse(CamelModel):
    id: str
    user_id: str
    module_id: str
    content_completed: bool
    quiz_completed: bool
    best_score: Optional[int]
    updated_at: Optional[datetime]
