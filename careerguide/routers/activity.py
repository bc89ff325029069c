# careerguide/routers/activity.py - Activity logging endpoints

from fastapi import APIRouter, Depends, Query
from typing import Optional

from careerguide.core.config import get_settings
from careerguide.core.dependencies import ServiceContainer, get_services
from careerguide.core.exceptions import InvalidInput, NotFound
from careerguide.models.activity import ActivityLogRequest, ActivityType
from careerguide.utils.utils import failure_response, success_response

router = APIRouter()

VALID_ACTIVITY_TYPES = {t.value for t in ActivityType}


def _require_user_id(services: ServiceContainer, user_id: Optional[str]) -> str:
    if not user_id:
        raise InvalidInput("Missing user_id")
    user = services.users.resolve_user(user_id)
    if user is None:
        raise NotFound("User not found")
    return user.user_id


@router.post("")
def log_activity(
    request: ActivityLogRequest,
    services: ServiceContainer = Depends(get_services),
):
    try:
        if not request.user_id or not request.activity_type:
            raise InvalidInput("Missing userId or activityType")
        if request.activity_type not in VALID_ACTIVITY_TYPES:
            raise InvalidInput(f"Unknown activityType: {request.activity_type}")

        user_id = _require_user_id(services, request.user_id)
        event = services.activity.record(user_id, request.activity_type, request.metadata, raise_errors=True)
        return success_response(event.model_dump(mode="json") if event else None)

    except Exception as e:
        return failure_response(e, "Failed to log activity")


@router.get("")
def list_activity(
    user_id: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=200),
    services: ServiceContainer = Depends(get_services),
):
    """Persisted activity for a user, newest first"""
    try:
        resolved_id = _require_user_id(services, user_id)
        events = services.activity.history(resolved_id, limit or get_settings().ACTIVITY_DEFAULT_LIMIT)
        return success_response([e.model_dump(mode="json") for e in events])

    except Exception as e:
        return failure_response(e, "Failed to fetch activities")


@router.get("/recent")
def recent_activity(
    user_id: Optional[str] = Query(None),
    services: ServiceContainer = Depends(get_services),
):
    """Activity held in this process's recent-activity cache"""
    try:
        resolved_id = _require_user_id(services, user_id)
        return success_response([e.model_dump(mode="json") for e in services.activity.recent(resolved_id)])

    except Exception as e:
        return failure_response(e, "Failed to fetch recent activity")
