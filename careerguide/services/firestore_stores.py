# careerguide/services/firestore_stores.py - Firestore-backed collaborators

import logging
from datetime import datetime
from functools import wraps
from typing import List, Optional

from firebase_admin import firestore
from google.api_core.exceptions import AlreadyExists, GoogleAPICallError, RetryError

from careerguide.core.config import get_settings
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

logger = logging.getLogger(__name__)


def firestore_errors(operation: str):
    """Re-raise Firestore API failures as PersistenceError"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (GoogleAPICallError, RetryError) as e:
                logger.error("Firestore %s failed: %s", operation, e)
                raise PersistenceError(f"Failed to {operation}") from e
        return wrapper
    return decorator


class FirestoreUserDirectory(UserDirectory):
    def __init__(self, db, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or get_settings().USERS_COLLECTION

    @firestore_errors("resolve user")
    def resolve_user(self, identifier: str) -> Optional[UserRecord]:
        identifier = str(identifier or "").strip()
        if not identifier:
            return None

        users = self.db.collection(self.collection)
        if "/" not in identifier:
            snapshot = users.document(identifier).get()
            if snapshot.exists:
                return UserRecord.from_document(snapshot.id, snapshot.to_dict())

        # Accounts migrated from the old portal are still addressed by numeric id
        if identifier.isdigit():
            for doc in users.where("legacy_id", "==", int(identifier)).limit(1).stream():
                return UserRecord.from_document(doc.id, doc.to_dict())
        return None

    @firestore_errors("look up user by phone")
    def find_by_phone(self, phone_number: str) -> Optional[UserRecord]:
        phone_number = str(phone_number or "").strip()
        if not phone_number:
            return None
        query = self.db.collection(self.collection).where("phone_number", "==", phone_number).limit(1)
        for doc in query.stream():
            return UserRecord.from_document(doc.id, doc.to_dict())
        return None

    @firestore_errors("create user")
    def create_user(self, user: UserRecord) -> UserRecord:
        users = self.db.collection(self.collection)
        email = user.email.lower()

        # Not transactional: two simultaneous sign-ups with one phone can both pass
        if user.phone_number and self.find_by_phone(user.phone_number) is not None:
            raise Conflict("User already exists")
        if email and any(True for _ in users.where("email", "==", email).limit(1).stream()):
            raise Conflict("User already exists")

        new_user_ref = users.document()
        created = user.model_copy(update={
            "user_id": new_user_ref.id,
            "email": email,
            "created_at": user.created_at or datetime.utcnow(),
        })
        new_user_ref.set(created.to_document())
        logger.info("Created user %s", created.user_id)
        return created

    @firestore_errors("list users")
    def list_users(self, limit: int = 100) -> List[UserRecord]:
        docs = self.db.collection(self.collection).limit(limit).stream()
        return [UserRecord.from_document(doc.id, doc.to_dict()) for doc in docs]

    @firestore_errors("update user completion flag")
    def set_assessment_completed(self, user_id: str, completed: bool) -> None:
        self.db.collection(self.collection).document(user_id).update({
            "assessment_completed": completed,
            "updated_at": datetime.utcnow(),
        })


class FirestoreSessionStore(SessionStore):
    def __init__(self, db, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or get_settings().ASSESSMENTS_COLLECTION

    def _ref(self, user_id: str):
        return self.db.collection(self.collection).document(user_id)

    @firestore_errors("read assessment session")
    def get_session(self, user_id: str) -> Optional[AssessmentSession]:
        snapshot = self._ref(user_id).get()
        if not snapshot.exists:
            return None
        return AssessmentSession.from_document(user_id, snapshot.to_dict())

    @firestore_errors("create assessment session")
    def _create(self, user_id: str, session: AssessmentSession) -> None:
        try:
            self._ref(user_id).create(session.to_document())
        except AlreadyExists as e:
            raise DuplicateSessionError(user_id) from e

    @firestore_errors("update assessment session")
    def _update(self, user_id: str, mutator: SessionMutator) -> AssessmentSession:
        ref = self._ref(user_id)

        @firestore.transactional
        def apply(transaction):
            snapshot = ref.get(transaction=transaction)
            current = AssessmentSession.from_document(user_id, snapshot.to_dict()) if snapshot.exists else None
            updated = mutator(current)
            transaction.set(ref, updated.to_document())
            return updated

        return apply(self.db.transaction())


class FirestoreRoadmapStore(RoadmapStore):
    def __init__(self, db, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or get_settings().ROADMAPS_COLLECTION

    @firestore_errors("save roadmap")
    def upsert_roadmap(self, user_id: str, record: RoadmapRecord) -> None:
        self.db.collection(self.collection).document(user_id).set(record.to_document())

    @firestore_errors("read roadmap")
    def get_roadmap(self, user_id: str) -> Optional[RoadmapRecord]:
        snapshot = self.db.collection(self.collection).document(user_id).get()
        if not snapshot.exists:
            return None
        return RoadmapRecord.from_document(user_id, snapshot.to_dict())


class FirestoreActivityStore(ActivityStore):
    def __init__(self, db, collection: Optional[str] = None):
        self.db = db
        self.collection = collection or get_settings().ACTIVITY_LOGS_COLLECTION

    @firestore_errors("write activity log")
    def add(self, event: ActivityEvent) -> None:
        self.db.collection(self.collection).add(event.to_document())

    @firestore_errors("read activity log")
    def list_for_user(self, user_id: str, limit: int) -> List[ActivityEvent]:
        # Needs a composite index on (user_id ASC, timestamp DESC)
        docs = (
            self.db.collection(self.collection)
            .where("user_id", "==", user_id)
            .order_by("timestamp", direction=firestore.Query.DESCENDING)
            .limit(limit)
            .stream()
        )
        return [ActivityEvent.model_validate(doc.to_dict()) for doc in docs]
