import os

# The app module reads settings at import time; keep it off Firestore
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
from fastapi.testclient import TestClient

from careerguide.core.config import Settings
from careerguide.core.dependencies import build_memory_services, get_services
from careerguide.main import app
from careerguide.models.user import UserRecord


@pytest.fixture
def settings():
    return Settings(STORAGE_BACKEND="memory", MEMORY_SEED_USERS="user-1,user-2")


@pytest.fixture
def services(settings):
    container = build_memory_services(settings)
    container.users.add_user(UserRecord(user_id="user-legacy", name="Legacy User", legacy_id=42))
    return container


@pytest.fixture
def engine(services):
    return services.engine


@pytest.fixture
def client(services):
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()


SIX_ANSWERS = [
    "Frontend Developer",
    "I enjoy turning designs into working pages",
    "Layout and styling",
    "Beginner, I finished a few tutorials",
    "About ten hours a week",
    "Land an internship",
]


def run_assessment(engine, user_id, answers=SIX_ANSWERS):
    """Start an assessment and submit every answer, returning each step's payload"""
    payloads = [engine.start(user_id)]
    for answer in answers:
        payloads.append(engine.submit_answer(user_id, answer))
    return payloads
