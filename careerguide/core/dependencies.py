# careerguide/core/dependencies.py - Wiring of collaborators for the API layer

import logging
from typing import Optional

from fastapi import Depends

from careerguide.core.config import Settings, get_settings
from careerguide.models.user import UserRecord
from careerguide.services.activity_log import ActivityLog, RecentActivityCache
from careerguide.services.assessment_engine import AssessmentEngine
from careerguide.services.stores import ActivityStore, RoadmapStore, SessionStore, UserDirectory

logger = logging.getLogger(__name__)


class ServiceContainer:
    """The collaborators one process shares across requests"""

    def __init__(
        self,
        users: UserDirectory,
        sessions: SessionStore,
        roadmaps: RoadmapStore,
        activity_store: ActivityStore,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.users = users
        self.sessions = sessions
        self.roadmaps = roadmaps
        self.activity = ActivityLog(
            activity_store,
            RecentActivityCache(
                per_user=settings.ACTIVITY_CACHE_PER_USER,
                max_users=settings.ACTIVITY_CACHE_MAX_USERS,
            ),
        )
        self.engine = AssessmentEngine(users, sessions, roadmaps, self.activity)


def build_memory_services(settings: Optional[Settings] = None) -> ServiceContainer:
    from careerguide.services.memory_stores import (
        MemoryActivityStore,
        MemoryRoadmapStore,
        MemorySessionStore,
        MemoryUserDirectory,
    )

    settings = settings or get_settings()
    users = MemoryUserDirectory([UserRecord(user_id=uid) for uid in settings.seed_user_ids])
    return ServiceContainer(
        users, MemorySessionStore(), MemoryRoadmapStore(), MemoryActivityStore(), settings
    )


def build_firestore_services(settings: Optional[Settings] = None) -> ServiceContainer:
    from careerguide.core.firebase import get_firestore_client
    from careerguide.services.firestore_stores import (
        FirestoreActivityStore,
        FirestoreRoadmapStore,
        FirestoreSessionStore,
        FirestoreUserDirectory,
    )

    settings = settings or get_settings()
    db = get_firestore_client()
    return ServiceContainer(
        FirestoreUserDirectory(db, settings.USERS_COLLECTION),
        FirestoreSessionStore(db, settings.ASSESSMENTS_COLLECTION),
        FirestoreRoadmapStore(db, settings.ROADMAPS_COLLECTION),
        FirestoreActivityStore(db, settings.ACTIVITY_LOGS_COLLECTION),
        settings,
    )


# Global services instance
_services: Optional[ServiceContainer] = None

def get_services() -> ServiceContainer:
    """Get the service container (singleton pattern)"""
    global _services
    if _services is None:
        settings = get_settings()
        if settings.uses_firestore:
            _services = build_firestore_services(settings)
        else:
            logger.warning("Using in-memory storage; data is lost on restart")
            _services = build_memory_services(settings)
    return _services


def get_assessment_engine(services: ServiceContainer = Depends(get_services)) -> AssessmentEngine:
    return services.engine

