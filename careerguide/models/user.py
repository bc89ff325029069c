from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any
from datetime import datetime

class UserRecord(BaseModel):
    user_id: str
    name: str = ""
    email: str = ""
    phone_number: str = ""
    role: str = "student"  # 'student', 'teacher' or 'admin'
    roll_number: Optional[str] = None
    preferred_language: str = "en"
    location: Optional[str] = None
    education_level: Optional[str] = None
    assessment_completed: bool = False
    legacy_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @field_validator("name", "email", "phone_number", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("role", mode="before")
    @classmethod
    def _default_role(cls, value):
        return value or "student"

    @field_validator("preferred_language", mode="before")
    @classmethod
    def _default_language(cls, value):
        return value or "en"

    @field_validator("assessment_completed", mode="before")
    @classmethod
    def _none_to_false(cls, value):
        return bool(value)

    @classmethod
    def from_document(cls, user_id: str, data: Optional[Dict[str, Any]]) -> "UserRecord":
        """Build a user DTO from a raw document, filling documented defaults"""
        data = dict(data or {})
        data["user_id"] = user_id
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude={"user_id"})

class UserCreateRequest(BaseModel):
    """Body of POST /api/users"""
    model_config = ConfigDict(populate_by_name=True)

    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    name: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")
    role: Optional[str] = None
    email: Optional[str] = None
    roll_number: Optional[str] = Field(None, alias="rollNumber")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    location: Optional[str] = None
    education_level: Optional[str] = Field(None, alias="educationLevel")

    @field_validator("phone_number", "name", "roll_number", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        # Phone and roll numbers arrive as JSON numbers from some clients
        if value is None:
            return None
        return str(value).strip() or None
