from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, Optional
from datetime import datetime
from enum import Enum

class ActivityType(str, Enum):
    LOGIN = "LOGIN"
    ASSESSMENT_START = "ASSESSMENT_START"
    QUESTION_ANSWERED = "QUESTION_ANSWERED"
    ROADMAP_GENERATED = "ROADMAP_GENERATED"
    CHAT_MESSAGE = "CHAT_MESSAGE"
    SKILL_GAP_CHECK = "SKILL_GAP_CHECK"
    LOGOUT = "LOGOUT"

class ActivityEvent(BaseModel):
    user_id: str
    activity_type: ActivityType
    metadata: Dict[str, Any] = {}
    timestamp: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_to_dict(cls, value):
        return {} if value is None else value

    def to_document(self) -> Dict[str, Any]:
        doc = self.model_dump()
        doc["activity_type"] = self.activity_type.value
        return doc

class ActivityLogRequest(BaseModel):
    """Body of POST /api/activity"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    activity_type: Optional[str] = Field(None, alias="activityType")
    metadata: Optional[Dict[str, Any]] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def _coerce_user_id(cls, value):
        if value is None:
            return None
        return str(value).strip() or None
