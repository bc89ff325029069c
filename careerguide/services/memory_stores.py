# careerguide/services/memory_stores.py - In-process collaborators for local runs and tests

import threading
import uuid
from datetime import datetime
from typing import Dict, List, Optional

from careerguide.core.exceptions import Conflict, PersistenceError
from careerguide.models.activity import ActivityEvent
from careerguide.models.assessment import AssessmentSession
from careerguide.models.roadmap import RoadmapRecord
from careerguide.models.user import UserRecord
from careerguide.services.stores import (
    ActivityStore,
    DuplicateSessionError,
    RoadmapStore,
    SessionMutator,
    SessionStore,
    UserDirectory,
)


class MemoryUserDirectory(UserDirectory):
    def __init__(self, users: Optional[List[UserRecord]] = None):
        self._lock = threading.Lock()
        self._users: Dict[str, UserRecord] = {}
        for user in users or []:
            self.add_user(user)

    def add_user(self, user: UserRecord) -> UserRecord:
        with self._lock:
            self._users[user.user_id] = user.model_copy(deep=True)
        return user

    def resolve_user(self, identifier: str) -> Optional[UserRecord]:
        identifier = str(identifier or "").strip()
        if not identifier:
            return None
        with self._lock:
            user = self._users.get(identifier)
            if user is None and identifier.isdigit():
                legacy_id = int(identifier)
                user = next((u for u in self._users.values() if u.legacy_id == legacy_id), None)
            return user.model_copy(deep=True) if user else None

    def find_by_phone(self, phone_number: str) -> Optional[UserRecord]:
        phone_number = str(phone_number or "").strip()
        if not phone_number:
            return None
        with self._lock:
            user = next((u for u in self._users.values() if u.phone_number == phone_number), None)
            return user.model_copy(deep=True) if user else None

    def create_user(self, user: UserRecord) -> UserRecord:
        email = user.email.lower()
        with self._lock:
            for existing in self._users.values():
                same_phone = bool(user.phone_number) and existing.phone_number == user.phone_number
                if same_phone or (email and existing.email.lower() == email):
                    raise Conflict("User already exists")
            created = user.model_copy(update={
                "user_id": uuid.uuid4().hex,
                "email": email,
                "created_at": user.created_at or datetime.utcnow(),
            })
            self._users[created.user_id] = created
            return created.model_copy(deep=True)

    def list_users(self, limit: int = 100) -> List[UserRecord]:
        with self._lock:
            return [u.model_copy(deep=True) for u in list(self._users.values())[:max(limit, 0)]]

    def set_assessment_completed(self, user_id: str, completed: bool) -> None:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise PersistenceError(f"User {user_id} does not exist")
            self._users[user_id] = user.model_copy(update={"assessment_completed": completed})


class MemorySessionStore(SessionStore):
    def __init__(self):
        self._lock = threading.RLock()
        self._sessions: Dict[str, AssessmentSession] = {}

    def get_session(self, user_id: str) -> Optional[AssessmentSession]:
        with self._lock:
            session = self._sessions.get(user_id)
            return session.model_copy(deep=True) if session else None

    def _create(self, user_id: str, session: AssessmentSession) -> None:
        with self._lock:
            if user_id in self._sessions:
                raise DuplicateSessionError(user_id)
            self._sessions[user_id] = session.model_copy(deep=True)

    def _update(self, user_id: str, mutator: SessionMutator) -> AssessmentSession:
        with self._lock:
            current = self._sessions.get(user_id)
            # The mutator works on a copy so a raising mutator leaves the record untouched
            updated = mutator(current.model_copy(deep=True) if current else None)
            self._sessions[user_id] = updated.model_copy(deep=True)
            return updated


class MemoryRoadmapStore(RoadmapStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._roadmaps: Dict[str, RoadmapRecord] = {}

    def upsert_roadmap(self, user_id: str, record: RoadmapRecord) -> None:
        with self._lock:
            self._roadmaps[user_id] = record.model_copy(deep=True)

    def get_roadmap(self, user_id: str) -> Optional[RoadmapRecord]:
        with self._lock:
            record = self._roadmaps.get(user_id)
            return record.model_copy(deep=True) if record else None


class MemoryActivityStore(ActivityStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._events: List[ActivityEvent] = []

    def add(self, event: ActivityEvent) -> None:
        with self._lock:
            self._events.append(event.model_copy(deep=True))

    def list_for_user(self, user_id: str, limit: int) -> List[ActivityEvent]:
        with self._lock:
            events = [e for e in reversed(self._events) if e.user_id == user_id]
        events.sort(key=lambda e: e.timestamp, reverse=True)
        return events[:max(limit, 0)]
