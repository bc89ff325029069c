# careerguide/models/roadmap.py - Role catalog and stored roadmap models

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, List, Optional
from datetime import datetime

class RoadmapStages(BaseModel):
    beginner: List[str] = []
    intermediate: List[str] = []
    advanced: List[str] = []

    @field_validator("beginner", "intermediate", "advanced", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value

class SkillGapItem(BaseModel):
    skill: str
    gap: int = Field(ge=0, le=100)

class FixedRoleRoadmap(BaseModel):
    """A catalog entry. Catalog instances are shared, so they are frozen."""
    model_config = ConfigDict(frozen=True)

    canonical_role: str
    aliases: List[str]
    strength_profile: str
    career_persona: str
    roadmap: RoadmapStages
    tools_to_learn: List[str]
    certifications: List[str]
    real_world_projects: List[str]
    portfolio_requirements: List[str]
    interview_preparation_topics: List[str]
    job_platforms_to_apply: List[str]
    estimated_timeline: str
    salary_range: Optional[str] = None
    required_technical_skills: Optional[List[str]] = None
    required_soft_skills: Optional[List[str]] = None
    internship_strategy: Optional[List[str]] = None
    freelancing_strategy: Optional[List[str]] = None
    salary_insight: Optional[str] = None
    resume_tips: List[str]
    job_ready_checklist: Optional[List[str]] = None
    skill_gap_preview: List[SkillGapItem]

class RoadmapPayload(BaseModel):
    """Roadmap handed back to callers: an enriched catalog entry or the unsupported fallback"""
    strength_profile: str
    career_persona: str
    recommended_career: str
    roadmap: RoadmapStages
    estimated_timeline: str = ""
    tools_to_learn: List[str] = []
    certifications: List[str] = []
    real_world_projects: List[str] = []
    portfolio_requirements: List[str] = []
    interview_preparation_topics: List[str] = []
    required_technical_skills: List[str] = []
    required_soft_skills: List[str] = []
    internship_strategy: List[str] = []
    freelancing_strategy: List[str] = []
    salary_insight: str = ""
    job_platforms_to_apply: List[str] = []
    resume_tips: List[str] = []
    job_ready_checklist: List[str] = []
    skill_gap_preview: List[SkillGapItem] = []
    source: str = "fixed_catalog"

    @property
    def is_supported(self) -> bool:
        return self.source == "fixed_catalog"

class RoadmapRecord(BaseModel):
    """Roadmap persisted per user (one document per user, overwritten on regeneration)"""
    user_id: str
    career_title: str = ""
    stages: RoadmapStages = Field(default_factory=RoadmapStages)
    payload: Optional[RoadmapPayload] = None
    source: str = "fixed_catalog"
    generated_at: datetime = Field(default_factory=datetime.utcnow)

    @field_validator("career_title", "source", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("stages", mode="before")
    @classmethod
    def _none_to_stages(cls, value):
        return {} if value is None else value

    @field_validator("generated_at", mode="before")
    @classmethod
    def _none_to_now(cls, value):
        return datetime.utcnow() if value is None else value

    @classmethod
    def from_document(cls, user_id: str, data: Optional[Dict[str, Any]]) -> "RoadmapRecord":
        data = dict(data or {})
        data["user_id"] = user_id
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump()

class ResolveRoleRequest(BaseModel):
    target_role: str = Field("", alias="targetRole")

    model_config = ConfigDict(populate_by_name=True)
