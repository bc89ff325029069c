import logging
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from careerguide.core.exceptions import CareerGuideError
from careerguide.models.common import ErrorResponse

logger = logging.getLogger(__name__)

def success_response(data: Any) -> JSONResponse:
    """Wrap `data` in the {success, data} envelope"""
    return JSONResponse(content={"success": True, "data": jsonable_encoder(data)})

def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(error=message).model_dump(mode="json", exclude={"timestamp"})
    return JSONResponse(status_code=status_code, content=body)

def failure_response(error: Exception, fallback_message: str) -> JSONResponse:
    """Map an exception to the error envelope.

    Client errors (400/404/409) keep their message; everything else is logged and
    reported with `fallback_message` only.
    """
    if isinstance(error, CareerGuideError) and error.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        return error_response(error.status_code, error.message)
    logger.error("%s: %s", fallback_message, error, exc_info=error)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, fallback_message)
