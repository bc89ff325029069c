# careerguide/models/assessment.py - Assessment session DTOs

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, List, Literal, Optional
from datetime import datetime

from careerguide.models.roadmap import RoadmapPayload, RoadmapStages, SkillGapItem

class QAPair(BaseModel):
    question: str
    answer: str

class HistoryMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str

class AssessmentResult(BaseModel):
    strength_profile: str
    career_persona: str
    suggested_career_path: str
    roadmap: RoadmapStages
    skill_gap_preview: List[SkillGapItem] = []
    payload: Optional[RoadmapPayload] = None

class AssessmentSession(BaseModel):
    user_id: str
    answers: List[QAPair] = []
    conversation_history: List[HistoryMessage] = []
    assessment_step: int = 0
    current_question: str = ""
    is_completed: bool = False
    result: Optional[AssessmentResult] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("answers", "conversation_history", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value

    @field_validator("current_question", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("assessment_step", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0 if value is None else value

    @field_validator("is_completed", mode="before")
    @classmethod
    def _none_to_false(cls, value):
        return bool(value)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _none_to_now(cls, value):
        return datetime.utcnow() if value is None else value

    @classmethod
    def from_document(cls, user_id: str, data: Optional[Dict[str, Any]]) -> "AssessmentSession":
        """Build a session DTO from a raw stored document.

        Absent or null fields become their documented defaults ([] / "" / 0 /
        False) so the engine never sees a partially shaped record.
        """
        data = dict(data or {})
        data["user_id"] = user_id
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()

    @property
    def assistant_questions(self) -> List[str]:
        return [m.content for m in self.conversation_history if m.role == "assistant"]

class AssessmentRequest(BaseModel):
    """Body of POST /api/career-assessment"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    action: Optional[str] = None
    answer: Optional[str] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, value):
        # Legacy numeric ids arrive as JSON numbers
        if value is None:
            return None
        return str(value).strip() or None

    @field_validator("answer", mode="before")
    @classmethod
    def _coerce_answer(cls, value):
        # "How many hours a week?" is often answered with a bare number
        if value is None or isinstance(value, str):
            return value
        return str(value)
