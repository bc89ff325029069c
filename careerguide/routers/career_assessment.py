# careerguide/routers/career_assessment.py - Start / answer / status of the career assessment

from fastapi import APIRouter, Depends, Query
from typing import Optional

from careerguide.core.dependencies import get_assessment_engine
from careerguide.core.exceptions import InvalidInput
from careerguide.models.assessment import AssessmentRequest
from careerguide.services.assessment_engine import AssessmentEngine
from careerguide.utils.utils import failure_response, success_response

router = APIRouter()


@router.post("")
def career_assessment_action(
    request: AssessmentRequest,
    engine: AssessmentEngine = Depends(get_assessment_engine),
):
    """
    Drive the assessment conversation.

    Body:
        userId: user id (or numeric legacy id)
        action: "start" to begin or restart, "answer" to submit the current answer
        answer: answer text, required for "answer"

    Returns:
        The session progress, or the full result once the last answer is in.
    """
    try:
        if not request.user_id or not request.action:
            raise InvalidInput("Missing userId or action")

        if request.action == "start":
            data = engine.start(request.user_id)
        elif request.action == "answer":
            data = engine.submit_answer(request.user_id, request.answer)
        else:
            raise InvalidInput("Invalid action")

        return success_response(data)

    except Exception as e:
        return failure_response(e, "Failed to process assessment")


@router.get("")
def get_career_assessment(
    user_id: Optional[str] = Query(None),
    engine: AssessmentEngine = Depends(get_assessment_engine),
):
    """Current progress, or the stored result for a completed assessment"""
    try:
        if not user_id:
            raise InvalidInput("Missing user_id")
        return success_response(engine.get_status(user_id))

    except Exception as e:
        return failure_response(e, "Failed to fetch assessment")
