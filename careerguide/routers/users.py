# careerguide/routers/users.py - User registration and lookup

import logging
import re
from fastapi import APIRouter, Depends, Query
from typing import Optional

from careerguide.core.dependencies import ServiceContainer, get_services
from careerguide.core.exceptions import InvalidInput, NotFound
from careerguide.models.user import UserCreateRequest, UserRecord
from careerguide.utils.utils import failure_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()

PHONE_RE = re.compile(r"^\+?[0-9\-\s()]{7,20}$")
NAME_RE = re.compile(r"^[A-Za-z\s'.-]{2,80}$")


def validate_new_user(request: UserCreateRequest) -> UserRecord:
    """Check a registration body and turn it into a UserRecord (without id)"""
    if not request.phone_number or not request.name or not request.user_type:
        raise InvalidInput("Missing required fields: phone_number, name, user_type")

    digits = re.sub(r"\D", "", request.phone_number)
    if not PHONE_RE.match(request.phone_number) or not 10 <= len(digits) <= 15:
        raise InvalidInput("Invalid phone number format")
    if not NAME_RE.match(request.name):
        raise InvalidInput("Invalid name format")

    return UserRecord(
        user_id="",
        name=request.name,
        phone_number=request.phone_number,
        email=(request.email or "").strip(),
        role=request.role or request.user_type,
        roll_number=request.roll_number,
        preferred_language=request.preferred_language,
        location=request.location,
        education_level=request.education_level,
    )


@router.post("")
def create_user(
    request: UserCreateRequest,
    services: ServiceContainer = Depends(get_services),
):
    """Register a user. Phone number and email must not already be registered."""
    try:
        user = services.users.create_user(validate_new_user(request))
        logger.info("Registered user %s", user.user_id)
        return success_response(user.model_dump(mode="json"))

    except Exception as e:
        return failure_response(e, "Failed to create user")


@router.get("")
def list_users(
    phone: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=500),
    services: ServiceContainer = Depends(get_services),
):
    """All users, or the single user registered with `phone`"""
    try:
        if phone:
            user = services.users.find_by_phone(phone)
            if user is None:
                raise NotFound("User not found")
            return success_response(user.model_dump(mode="json"))

        users = services.users.list_users(limit)
        return success_response([u.model_dump(mode="json") for u in users])

    except Exception as e:
        return failure_response(e, "Failed to fetch users")


@router.get("/{user_id}")
def get_user(user_id: str, services: ServiceContainer = Depends(get_services)):
    try:
        user = services.users.resolve_user(user_id)
        if user is None:
            raise NotFound("User not found")
        return success_response(user.model_dump(mode="json"))

    except Exception as e:
        return failure_response(e, "Failed to fetch user")
