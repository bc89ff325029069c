# careerguide/services/assessment_engine.py - Six-question career assessment state machine

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Sequence

from careerguide.core.exceptions import InvalidInput, NotFound, UpstreamError
from careerguide.models.activity import ActivityType
from careerguide.models.assessment import AssessmentResult, AssessmentSession, HistoryMessage, QAPair
from careerguide.models.roadmap import RoadmapRecord
from careerguide.models.user import UserRecord
from careerguide.services.activity_log import ActivityLog
from careerguide.services.question_flow import (
    FIRST_QUESTION,
    TOTAL_QUESTIONS,
    next_question_without_duplicates,
)
from careerguide.services.role_resolver import build_assessment_result
from careerguide.services.stores import RoadmapStore, SessionStore, UserDirectory

logger = logging.getLogger(__name__)

ResultBuilder = Callable[[Sequence[QAPair]], AssessmentResult]


def new_session(user_id: str, previous: Optional[AssessmentSession] = None) -> AssessmentSession:
    """Fresh session at step 1, keeping the original creation time on a retake"""
    now = datetime.utcnow()
    return AssessmentSession(
        user_id=user_id,
        answers=[],
        conversation_history=[HistoryMessage(role="assistant", content=FIRST_QUESTION)],
        assessment_step=1,
        current_question=FIRST_QUESTION,
        is_completed=False,
        result=None,
        created_at=previous.created_at if previous else now,
        updated_at=now,
    )


def apply_answer(session: AssessmentSession, answer: str, build_result: ResultBuilder) -> AssessmentSession:
    """Return the session that follows `session` once `answer` is recorded.

    Below TOTAL_QUESTIONS answers the next (deduplicated) question is appended
    and the step advances; the last answer completes the session with the
    result from `build_result`. `session` itself is not modified.
    """
    question = session.current_question or FIRST_QUESTION
    answers = [*session.answers, QAPair(question=question, answer=answer)]
    history = [*session.conversation_history, HistoryMessage(role="user", content=answer)]
    answered = len(answers)

    if answered < TOTAL_QUESTIONS:
        next_question = next_question_without_duplicates(answer, answered, history, answers)
        history.append(HistoryMessage(role="assistant", content=next_question))
        return session.model_copy(update={
            "answers": answers,
            "conversation_history": history,
            "assessment_step": answered + 1,
            "current_question": next_question,
            "is_completed": False,
            "result": None,
            "updated_at": datetime.utcnow(),
        })

    return complete_session(session.model_copy(update={
        "answers": answers,
        "conversation_history": history,
    }), build_result)


def complete_session(session: AssessmentSession, build_result: ResultBuilder) -> AssessmentSession:
    return session.model_copy(update={
        "assessment_step": TOTAL_QUESTIONS,
        "current_question": "",
        "is_completed": True,
        "result": build_result(session.answers),
        "updated_at": datetime.utcnow(),
    })


class AssessmentEngine:
    """Drives the per-user assessment conversation.

    Every step is committed through a single SessionStore.upsert_session call,
    so a failure anywhere before that commit leaves the stored session as it
    was and the same answer can simply be submitted again.
    """

    def __init__(
        self,
        users: UserDirectory,
        sessions: SessionStore,
        roadmaps: RoadmapStore,
        activity: ActivityLog,
    ):
        self.users = users
        self.sessions = sessions
        self.roadmaps = roadmaps
        self.activity = activity

    def _require_user(self, identifier: Optional[str]) -> UserRecord:
        if not identifier or not str(identifier).strip():
            raise InvalidInput("Missing userId")
        user = self.users.resolve_user(str(identifier).strip())
        if user is None:
            raise NotFound("User not found")
        return user

    def _build_result(self, answers: Sequence[QAPair]) -> AssessmentResult:
        try:
            return build_assessment_result(answers)
        except Exception as e:
            raise UpstreamError("Failed to resolve career roadmap") from e

    def _save_roadmap(self, user_id: str, result: AssessmentResult) -> None:
        payload = result.payload
        record = RoadmapRecord(
            user_id=user_id,
            career_title=result.suggested_career_path,
            stages=result.roadmap,
            payload=payload,
            source=payload.source if payload else "fixed_catalog",
        )
        try:
            self.roadmaps.upsert_roadmap(user_id, record)
        except Exception as e:
            raise UpstreamError("Failed to save generated roadmap") from e

    def start(self, identifier: Optional[str]) -> Dict[str, Any]:
        """Start, or restart from scratch, the user's assessment"""
        user = self._require_user(identifier)
        existing = self.sessions.get_session(user.user_id)
        is_retake = bool(
            user.assessment_completed
            or (existing is not None and (existing.is_completed or existing.answers))
        )

        session = self.sessions.upsert_session(
            user.user_id, lambda current: new_session(user.user_id, current)
        )
        self.users.set_assessment_completed(user.user_id, False)

        self.activity.record(user.user_id, ActivityType.ASSESSMENT_START, {
            "assessment_step": session.assessment_step,
            "retake": is_retake,
        })
        logger.info("Assessment started for user %s (retake=%s)", user.user_id, is_retake)
        return self._progress_payload(session, completed_flag=False)

    def submit_answer(self, identifier: Optional[str], answer_text: Optional[str]) -> Dict[str, Any]:
        answer = str(answer_text or "").strip()
        if not answer:
            raise InvalidInput("Missing answer text")

        user = self._require_user(identifier)
        user_id = user.user_id
        session = self.sessions.get_session(user_id)

        if session is not None and session.is_completed:
            # Repeat of the final submission: nothing new to record
            self.users.mark_assessment_completed(user_id)
            return self._completed_payload(session)

        if session is not None and len(session.answers) >= TOTAL_QUESTIONS:
            return self._resume_completion(user_id, session)

        # What the last (committed) mutator run did: "answered", "completed" or "unchanged"
        outcome = "answered"

        def mutator(current: Optional[AssessmentSession]) -> AssessmentSession:
            nonlocal outcome
            if current is not None and current.is_completed:
                outcome = "unchanged"
                return current
            if current is not None and len(current.answers) >= TOTAL_QUESTIONS:
                outcome = "completed"
                return complete_session(current, self._build_result)
            outcome = "answered"
            return apply_answer(current or new_session(user_id), answer, self._build_result)

        preview = mutator(session)
        if preview.is_completed:
            self._save_roadmap(user_id, preview.result)

        committed = self.sessions.upsert_session(user_id, mutator)
        if outcome == "unchanged":
            # A concurrent submission completed the session first; this answer was dropped
            logger.info("Answer from user %s arrived after completion; ignored", user_id)
            self.users.mark_assessment_completed(user_id)
            return self._completed_payload(committed)

        if committed.is_completed and not preview.is_completed:
            # A concurrent submission filled the last answer; this run completed it
            self._save_roadmap(user_id, committed.result)

        if outcome == "answered":
            self.activity.record(user_id, ActivityType.QUESTION_ANSWERED, {
                "step": len(committed.answers),
                "question": committed.answers[-1].question,
                "answer": answer,
            })

        if not committed.is_completed:
            return self._progress_payload(committed, completed_flag=False)
        return self._finish(user_id, committed)

    def _resume_completion(self, user_id: str, session: AssessmentSession) -> Dict[str, Any]:
        logger.warning("Resuming completion for user %s with %d stored answers", user_id, len(session.answers))
        preview = complete_session(session, self._build_result)
        self._save_roadmap(user_id, preview.result)
        committed = self.sessions.upsert_session(
            user_id, lambda current: complete_session(current or session, self._build_result)
        )
        return self._finish(user_id, committed)

    def _finish(self, user_id: str, session: AssessmentSession) -> Dict[str, Any]:
        self.users.mark_assessment_completed(user_id)
        result = session.result
        self.activity.record(user_id, ActivityType.ROADMAP_GENERATED, {
            "persona": result.career_persona,
            "suggested_career": result.suggested_career_path,
            "mode": "rule_based",
            "source": result.payload.source if result.payload else "fixed_catalog",
        })
        logger.info("Assessment completed for user %s: %s", user_id, result.suggested_career_path)
        return self._completed_payload(session)

    def get_status(self, identifier: Optional[str]) -> Dict[str, Any]:
        user = self._require_user(identifier)
        session = self.sessions.get_session(user.user_id)

        if session is None:
            return {
                "assessment_completed": user.assessment_completed,
                "assessment_started": False,
                "assessment_step": 0,
                "total_questions": TOTAL_QUESTIONS,
                "current_question": FIRST_QUESTION,
                "answers": [],
                "conversation_history": [],
            }

        if not session.is_completed or session.result is None:
            payload = self._progress_payload(session, completed_flag=user.assessment_completed)
            payload["assessment_started"] = True
            return payload

        self.activity.record(user.user_id, ActivityType.SKILL_GAP_CHECK, {"source": "assessment_fetch"})
        payload = self._completed_payload(session)
        payload["assessment_started"] = True
        payload["updated_at"] = session.updated_at.isoformat()
        return payload

    @staticmethod
    def _progress_payload(session: AssessmentSession, completed_flag: bool) -> Dict[str, Any]:
        return {
            "completed": False,
            "assessment_completed": completed_flag,
            "assessment_step": session.assessment_step,
            "total_questions": TOTAL_QUESTIONS,
            "current_question": session.current_question or FIRST_QUESTION,
            "answers": [qa.model_dump() for qa in session.answers],
            "conversation_history": [m.model_dump() for m in session.conversation_history],
        }

    @staticmethod
    def _completed_payload(session: AssessmentSession) -> Dict[str, Any]:
        return {
            "completed": True,
            "assessment_completed": True,
            "assessment_step": TOTAL_QUESTIONS,
            "total_questions": TOTAL_QUESTIONS,
            "answers": [qa.model_dump() for qa in session.answers],
            "conversation_history": [m.model_dump() for m in session.conversation_history],
            "result": session.result.model_dump(mode="json") if session.result else None,
        }
