# careerguide/core/exceptions.py - Error taxonomy shared by services and routers

from fastapi import status


class CareerGuideError(Exception):
    """Base error; carries the HTTP status the API layer maps it to"""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(CareerGuideError):
    """Missing or malformed request data (userId, action, answer, ...)"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(CareerGuideError):
    """Unknown user"""
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(CareerGuideError):
    """A record with the same unique key already exists"""
    status_code = status.HTTP_409_CONFLICT


class PersistenceError(CareerGuideError):
    """Store unreachable or a write conflict that survived one retry"""


class UpstreamError(CareerGuideError):
    """Role resolution or roadmap persistence failed during completion"""
