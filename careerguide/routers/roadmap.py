from fastapi import APIRouter, Depends, Query
from typing import Optional

from careerguide.core.dependencies import ServiceContainer, get_services
from careerguide.core.exceptions import InvalidInput, NotFound
from careerguide.models.roadmap import ResolveRoleRequest
from careerguide.services.role_resolver import resolve_roadmap, supported_roles
from careerguide.utils.utils import failure_response, success_response

router = APIRouter()


@router.get("")
def get_user_roadmap(
    user_id: Optional[str] = Query(None),
    services: ServiceContainer = Depends(get_services),
):
    """Roadmap generated by the user's last completed assessment"""
    try:
        if not user_id:
            raise InvalidInput("Missing user_id")
        user = services.users.resolve_user(user_id)
        if user is None:
            raise NotFound("User not found")

        record = services.roadmaps.get_roadmap(user.user_id)
        if record is None:
            raise NotFound("Roadmap not found for this user")
        return success_response(record.model_dump(mode="json"))

    except Exception as e:
        return failure_response(e, "Failed to fetch roadmap")


@router.get("/roles")
def list_supported_roles():
    roles = supported_roles()
    return success_response({"roles": roles, "total_count": len(roles)})


@router.post("/resolve")
def resolve_target_role(request: ResolveRoleRequest):
    """Preview the roadmap a target role resolves to, without touching any user data"""
    try:
        if not request.target_role.strip():
            raise InvalidInput("Missing targetRole")
        payload = resolve_roadmap(request.target_role)
        return success_response({
            "supported": payload.is_supported,
            "roadmap": payload.model_dump(mode="json"),
        })

    except Exception as e:
        return failure_response(e, "Failed to resolve role")
