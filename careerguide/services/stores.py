# careerguide/services/stores.py - Collaborator contracts used by the assessment engine

import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from careerguide.core.exceptions import PersistenceError
from careerguide.models.activity import ActivityEvent
from careerguide.models.assessment import AssessmentSession
from careerguide.models.roadmap import RoadmapRecord
from careerguide.models.user import UserRecord

logger = logging.getLogger(__name__)

# Receives the stored session (None when there is none yet) and returns the new one
SessionMutator = Callable[[Optional[AssessmentSession]], AssessmentSession]


class DuplicateSessionError(Exception):
    """Raised by SessionStore._create when another writer created the record first"""


class UserDirectory(ABC):
    @abstractmethod
    def resolve_user(self, identifier: str) -> Optional[UserRecord]:
        """Look a user up by id, falling back to the numeric legacy id"""

    @abstractmethod
    def find_by_phone(self, phone_number: str) -> Optional[UserRecord]:
        ...

    @abstractmethod
    def create_user(self, user: UserRecord) -> UserRecord:
        """Store a new user under a generated id.

        Raises Conflict when the phone number (or a non-empty email,
        compared case-insensitively) is already registered.
        """

    @abstractmethod
    def list_users(self, limit: int = 100) -> List[UserRecord]:
        ...

    @abstractmethod
    def set_assessment_completed(self, user_id: str, completed: bool) -> None:
        ...

    def mark_assessment_completed(self, user_id: str) -> None:
        self.set_assessment_completed(user_id, True)


class SessionStore(ABC):
    """Per-user assessment session record (one per user)"""

    @abstractmethod
    def get_session(self, user_id: str) -> Optional[AssessmentSession]:
        ...

    @abstractmethod
    def _create(self, user_id: str, session: AssessmentSession) -> None:
        """Insert a new record; raise DuplicateSessionError if one exists"""

    @abstractmethod
    def _update(self, user_id: str, mutator: SessionMutator) -> AssessmentSession:
        """Atomic read-modify-write of an existing record"""

    def upsert_session(self, user_id: str, mutator: SessionMutator) -> AssessmentSession:
        """Apply `mutator` to the user's session as one read-modify-write.

        A lost create race is retried once as an update against the record
        the other writer created.
        """
        if self.get_session(user_id) is None:
            created = mutator(None)
            try:
                self._create(user_id, created)
                return created
            except DuplicateSessionError:
                logger.info("Session for user %s created concurrently; retrying as update", user_id)

        try:
            return self._update(user_id, mutator)
        except DuplicateSessionError as e:
            raise PersistenceError(f"Unresolved session write conflict for user {user_id}") from e


class RoadmapStore(ABC):
    @abstractmethod
    def upsert_roadmap(self, user_id: str, record: RoadmapRecord) -> None:
        """Persist `record`, replacing any earlier roadmap for the user"""

    @abstractmethod
    def get_roadmap(self, user_id: str) -> Optional[RoadmapRecord]:
        ...


class ActivityStore(ABC):
    @abstractmethod
    def add(self, event: ActivityEvent) -> None:
        ...

    @abstractmethod
    def list_for_user(self, user_id: str, limit: int) -> List[ActivityEvent]:
        """Newest first"""
