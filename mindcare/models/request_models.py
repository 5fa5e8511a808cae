from pydantic import BaseModel, Field, StrictInt
from typing import List, Optional


class ScoreRequest(BaseModel):
    # Items may arrive unanswered; the scorer rejects them. Answers are not
    # coerced, so true / "2" / 2.0 fail here just as they fail in the scorer.
    phq9_answers: List[Optional[StrictInt]]
    gad7_answers: List[Optional[StrictInt]]


class AssessmentRequest(ScoreRequest):
    user_id: str


class ChatRequest(BaseModel):
    user_id: str
    message: str = Field(min_length=1)
