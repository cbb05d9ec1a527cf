# safepin/schemas/feedback.py
import uuid
from datetime import datetime

from pydantic import BaseModel


class FeedbackUpsert(BaseModel):
    safety_pin_id: uuid.UUID
    feedback: str


class FeedbackPublic(BaseModel):
    id: uuid.UUID
    safety_pin_id: uuid.UUID
    teacher_id: int
    feedback: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}


class FeedbackList(BaseModel):
    """All feedback on a pin, newest first, plus the newest one on its own."""
    feedbacks: list[FeedbackPublic]
    feedback: FeedbackPublic | None = None


class FeedbackEnvelope(BaseModel):
    feedback: FeedbackPublic
