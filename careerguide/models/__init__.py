"""Pydantic models package"""

from .user import UserRecord, UserCreateRequest
from .assessment import QAPair, HistoryMessage, AssessmentResult, AssessmentSession, AssessmentRequest
from .roadmap import RoadmapStages, SkillGapItem, FixedRoleRoadmap, RoadmapPayload, RoadmapRecord, ResolveRoleRequest
from .activity import ActivityType, ActivityEvent, ActivityLogRequest
from .common import ErrorResponse

__all__ = [
    "UserRecord", "UserCreateRequest",
    "QAPair", "HistoryMessage", "AssessmentResult", "AssessmentSession", "AssessmentRequest",
    "RoadmapStages", "SkillGapItem", "FixedRoleRoadmap", "RoadmapPayload", "RoadmapRecord", "ResolveRoleRequest",
    "ActivityType", "ActivityEvent", "ActivityLogRequest",
    "ErrorResponse"
]
