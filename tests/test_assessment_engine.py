import pytest

from careerguide.core.dependencies import ServiceContainer
from careerguide.core.exceptions import InvalidInput, NotFound, UpstreamError
from careerguide.models.activity import ActivityType
from careerguide.models.assessment import AssessmentSession, HistoryMessage, QAPair
from careerguide.services.memory_stores import (
    MemoryActivityStore,
    MemoryRoadmapStore,
    MemorySessionStore,
)
from careerguide.services.question_flow import (
    ALTERNATE_QUESTIONS,
    FIRST_QUESTION,
    INSPIRATION_QUESTION,
    TOTAL_QUESTIONS,
    normalize_question,
)
from careerguide.services.stores import DuplicateSessionError

from conftest import SIX_ANSWERS, run_assessment

SPORTS_FOLLOW_UP = "What level are you currently playing at (school, district, state)?"


class FailingRoadmapStore(MemoryRoadmapStore):
    def upsert_roadmap(self, user_id, record):
        raise RuntimeError("roadmap store unavailable")


class FailingActivityStore(MemoryActivityStore):
    def add(self, event):
        raise RuntimeError("activity store unavailable")


class RacingSessionStore(MemorySessionStore):
    """Another writer creates the record between our read and our create"""

    def __init__(self, competing):
        super().__init__()
        self.competing = competing

    def _create(self, user_id, session):
        super()._create(user_id, self.competing)
        raise DuplicateSessionError(user_id)


def _container(services, settings, **overrides):
    parts = {
        "users": services.users,
        "sessions": MemorySessionStore(),
        "roadmaps": MemoryRoadmapStore(),
        "activity_store": MemoryActivityStore(),
    }
    parts.update(overrides)
    return ServiceContainer(settings=settings, **parts)


def _activity_types(services, user_id):
    return [e.activity_type for e in services.activity.history(user_id, 50)]


def test_start_creates_session_at_step_one(engine, services):
    data = engine.start("user-1")

    assert data["completed"] is False
    assert data["assessment_step"] == 1
    assert data["total_questions"] == TOTAL_QUESTIONS
    assert data["current_question"] == FIRST_QUESTION
    assert data["answers"] == []
    assert data["conversation_history"] == [{"role": "assistant", "content": FIRST_QUESTION}]
    assert services.sessions.get_session("user-1").assessment_step == 1


def test_first_answer_asks_inspiration_question(engine):
    engine.start("user-1")

    data = engine.submit_answer("user-1", "Frontend Developer")

    assert data["assessment_step"] == 2
    assert data["current_question"] == INSPIRATION_QUESTION
    assert data["answers"] == [{"question": FIRST_QUESTION, "answer": "Frontend Developer"}]
    assert [m["role"] for m in data["conversation_history"]] == ["assistant", "user", "assistant"]


def test_full_assessment_completes_with_result(engine, services):
    payloads = run_assessment(engine, "user-1")
    final = payloads[-1]

    assert final["completed"] is True
    assert final["assessment_completed"] is True
    assert final["assessment_step"] == TOTAL_QUESTIONS
    assert len(final["answers"]) == TOTAL_QUESTIONS
    assert [qa["answer"] for qa in final["answers"]] == SIX_ANSWERS
    assert final["result"]["suggested_career_path"] == "Frontend Developer"
    assert len(final["result"]["roadmap"]["beginner"]) >= 10

    session = services.sessions.get_session("user-1")
    assert session.is_completed
    assert session.current_question == ""
    assert services.users.resolve_user("user-1").assessment_completed is True

    record = services.roadmaps.get_roadmap("user-1")
    assert record.career_title == "Frontend Developer"
    assert record.source == "fixed_catalog"


def test_steps_advance_one_at_a_time(engine):
    payloads = run_assessment(engine, "user-1")

    steps = [p["assessment_step"] for p in payloads[:-1]]
    assert steps == [1, 2, 3, 4, 5, 6]
    for payload in payloads[:-1]:
        assert len(payload["answers"]) == payload["assessment_step"] - 1


def test_no_question_is_asked_twice(engine, services):
    run_assessment(engine, "user-1")
    session = services.sessions.get_session("user-1")

    asked = [normalize_question(q) for q in session.assistant_questions]
    assert len(asked) == TOTAL_QUESTIONS
    assert len(set(asked)) == len(asked)


def test_repeated_cricket_answers_get_distinct_questions(engine, services):
    engine.start("user-1")
    engine.submit_answer("user-1", "Cricketer")
    second = engine.submit_answer("user-1", "I love cricket")
    third = engine.submit_answer("user-1", "cricket, cricket and more cricket")

    assert second["current_question"] == SPORTS_FOLLOW_UP
    assert third["current_question"] == ALTERNATE_QUESTIONS[0]

    asked = [normalize_question(q) for q in services.sessions.get_session("user-1").assistant_questions]
    assert len(set(asked)) == len(asked)


def test_blank_answer_is_rejected_without_changing_session(engine, services):
    engine.start("user-1")
    engine.submit_answer("user-1", "Backend")
    before = services.sessions.get_session("user-1").model_dump()

    with pytest.raises(InvalidInput):
        engine.submit_answer("user-1", "   ")

    assert services.sessions.get_session("user-1").model_dump() == before


def test_missing_and_unknown_users(engine):
    with pytest.raises(InvalidInput):
        engine.start("")
    with pytest.raises(InvalidInput):
        engine.get_status(None)
    with pytest.raises(NotFound):
        engine.start("nobody")
    with pytest.raises(NotFound):
        engine.submit_answer("nobody", "Frontend")


def test_legacy_numeric_id_resolves_to_user(engine, services):
    engine.start("42")

    assert services.sessions.get_session("user-legacy") is not None


def test_restart_resets_progress(engine, services):
    engine.start("user-1")
    engine.submit_answer("user-1", "Backend")
    created_at = services.sessions.get_session("user-1").created_at

    data = engine.start("user-1")

    assert data["assessment_step"] == 1
    assert data["answers"] == []
    session = services.sessions.get_session("user-1")
    assert session.answers == []
    assert session.created_at == created_at

    starts = [e for e in services.activity.history("user-1", 50) if e.activity_type == ActivityType.ASSESSMENT_START]
    assert [e.metadata["retake"] for e in starts] == [True, False]


def test_retake_after_completion_clears_completed_flag(engine, services):
    run_assessment(engine, "user-1")

    data = engine.start("user-1")

    assert data["assessment_step"] == 1
    assert data["assessment_completed"] is False
    assert services.users.resolve_user("user-1").assessment_completed is False
    assert services.sessions.get_session("user-1").is_completed is False


def test_activity_events_for_full_run(engine, services):
    run_assessment(engine, "user-1")

    types = _activity_types(services, "user-1")
    assert types[0] == ActivityType.ROADMAP_GENERATED
    assert types.count(ActivityType.QUESTION_ANSWERED) == TOTAL_QUESTIONS
    assert types[-1] == ActivityType.ASSESSMENT_START

    generated = services.activity.history("user-1", 1)[0]
    assert generated.metadata["suggested_career"] == "Frontend Developer"
    assert generated.metadata["mode"] == "rule_based"


def test_roadmap_failure_leaves_session_untouched(services, settings):
    container = _container(services, settings, roadmaps=FailingRoadmapStore())
    engine = container.engine
    engine.start("user-1")
    for answer in SIX_ANSWERS[:-1]:
        engine.submit_answer("user-1", answer)
    before = container.sessions.get_session("user-1").model_dump()

    with pytest.raises(UpstreamError):
        engine.submit_answer("user-1", SIX_ANSWERS[-1])

    assert container.sessions.get_session("user-1").model_dump() == before
    assert container.users.resolve_user("user-1").assessment_completed is False

    # Same answer again once the store recovers
    engine.roadmaps = MemoryRoadmapStore()
    final = engine.submit_answer("user-1", SIX_ANSWERS[-1])
    assert final["completed"] is True
    assert len(final["answers"]) == TOTAL_QUESTIONS


def test_activity_store_failure_does_not_block_assessment(services, settings):
    container = _container(services, settings, activity_store=FailingActivityStore())

    payloads = run_assessment(container.engine, "user-1")

    assert payloads[-1]["completed"] is True
    recent = container.activity.recent("user-1")
    assert recent[0].activity_type == ActivityType.ROADMAP_GENERATED
    assert len(recent) == TOTAL_QUESTIONS + 2


def test_lost_create_race_is_retried_as_update(services, settings):
    competing = AssessmentSession(
        user_id="user-1",
        answers=[QAPair(question=FIRST_QUESTION, answer="Backend")],
        assessment_step=2,
        current_question=INSPIRATION_QUESTION,
    )
    container = _container(services, settings, sessions=RacingSessionStore(competing))

    data = container.engine.start("user-1")

    assert data["assessment_step"] == 1
    session = container.sessions.get_session("user-1")
    assert session.answers == []
    assert session.created_at == competing.created_at


def test_answer_without_session_starts_one(engine, services):
    data = engine.submit_answer("user-2", "Data Scientist")

    assert data["assessment_step"] == 2
    assert services.sessions.get_session("user-2").answers[0].question == FIRST_QUESTION


def test_answer_after_completion_does_not_add_answers(engine, services):
    run_assessment(engine, "user-1")
    services.users.set_assessment_completed("user-1", False)

    data = engine.submit_answer("user-1", "one more thing")

    assert data["completed"] is True
    assert len(data["answers"]) == TOTAL_QUESTIONS
    assert len(services.sessions.get_session("user-1").answers) == TOTAL_QUESTIONS
    assert services.users.resolve_user("user-1").assessment_completed is True


def test_stored_session_with_all_answers_is_completed_on_next_answer(engine, services):
    answers = [QAPair(question=f"Question {i}", answer=a) for i, a in enumerate(SIX_ANSWERS, 1)]
    legacy = AssessmentSession(
        user_id="user-1",
        answers=answers,
        conversation_history=[HistoryMessage(role="user", content=a) for a in SIX_ANSWERS],
        assessment_step=6,
        current_question="Question 6",
    )
    services.sessions.upsert_session("user-1", lambda current: legacy)

    data = engine.submit_answer("user-1", "anything")

    assert data["completed"] is True
    assert len(data["answers"]) == TOTAL_QUESTIONS
    assert data["result"]["suggested_career_path"] == "Frontend Developer"
    assert services.roadmaps.get_roadmap("user-1") is not None


def test_status_without_session(engine):
    data = engine.get_status("user-2")

    assert data["assessment_started"] is False
    assert data["assessment_step"] == 0
    assert data["current_question"] == FIRST_QUESTION
    assert data["answers"] == []


def test_status_in_progress(engine):
    engine.start("user-1")
    engine.submit_answer("user-1", "Frontend")

    data = engine.get_status("user-1")

    assert data["assessment_started"] is True
    assert data["completed"] is False
    assert data["assessment_step"] == 2
    assert data["current_question"] == INSPIRATION_QUESTION


def test_status_after_completion_returns_result(engine, services):
    run_assessment(engine, "user-1")

    data = engine.get_status("user-1")

    assert data["completed"] is True
    assert data["result"]["career_persona"]
    assert "updated_at" in data
    assert _activity_types(services, "user-1")[0] == ActivityType.SKILL_GAP_CHECK


def test_six_identical_sports_answers_never_repeat_a_question(engine, services):
    engine.start("user-1")
    payloads = [engine.submit_answer("user-1", "cricket") for _ in range(TOTAL_QUESTIONS)]

    assert payloads[-1]["completed"] is True
    asked = services.sessions.get_session("user-1").assistant_questions
    assert asked == [
        FIRST_QUESTION,
        INSPIRATION_QUESTION,
        SPORTS_FOLLOW_UP,
        *ALTERNATE_QUESTIONS[:3],
    ]
    normalized = [normalize_question(q) for q in asked]
    assert len(set(normalized)) == TOTAL_QUESTIONS


class StaleReadSessionStore(MemorySessionStore):
    """get_session keeps answering with an older snapshot once `stale` is set"""

    stale = None

    def get_session(self, user_id):
        if self.stale is not None:
            return self.stale.model_copy(deep=True)
        return super().get_session(user_id)


def test_answer_racing_a_completed_session_records_nothing(services, settings):
    sessions = StaleReadSessionStore()
    container = _container(services, settings, sessions=sessions)
    engine = container.engine
    engine.start("user-1")
    for answer in SIX_ANSWERS[:-1]:
        engine.submit_answer("user-1", answer)
    snapshot = sessions.get_session("user-1")
    engine.submit_answer("user-1", SIX_ANSWERS[-1])

    # Our read predates the completing write
    sessions.stale = snapshot
    data = engine.submit_answer("user-1", "a late duplicate answer")

    assert data["completed"] is True
    assert [qa["answer"] for qa in data["answers"]] == SIX_ANSWERS
    types = _activity_types(container, "user-1")
    assert types.count(ActivityType.QUESTION_ANSWERED) == TOTAL_QUESTIONS
    assert types.count(ActivityType.ROADMAP_GENERATED) == 1
