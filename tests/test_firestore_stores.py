from unittest.mock import MagicMock

import firebase_admin
import pytest
from google.api_core.exceptions import AlreadyExists, ServiceUnavailable

from careerguide.core import firebase
from careerguide.core.exceptions import Conflict, PersistenceError
from careerguide.models.assessment import AssessmentSession
from careerguide.models.user import UserRecord
from careerguide.services.firestore_stores import (
    FirestoreRoadmapStore,
    FirestoreSessionStore,
    FirestoreUserDirectory,
)
from careerguide.services.stores import DuplicateSessionError


def _snapshot(doc_id, data, exists=True):
    snapshot = MagicMock(exists=exists, id=doc_id)
    snapshot.to_dict.return_value = data
    return snapshot


def test_user_resolved_by_document_id():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = _snapshot(
        "abc123", {"name": "Asha", "email": None, "assessment_completed": None}
    )

    user = FirestoreUserDirectory(db, "users").resolve_user("abc123")

    assert user.user_id == "abc123"
    assert user.name == "Asha"
    assert user.email == ""
    assert user.assessment_completed is False
    assert user.role == "student"


def test_user_resolved_by_legacy_id():
    db = MagicMock()
    users = db.collection.return_value
    users.document.return_value.get.return_value = _snapshot("17", None, exists=False)
    users.where.return_value.limit.return_value.stream.return_value = [
        _snapshot("migrated-user", {"legacy_id": 17, "name": "Ravi"})
    ]

    user = FirestoreUserDirectory(db, "users").resolve_user("17")

    assert user.user_id == "migrated-user"
    assert user.legacy_id == 17
    users.where.assert_called_once_with("legacy_id", "==", 17)


def test_unknown_non_numeric_user_is_none():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = _snapshot("x", None, exists=False)

    assert FirestoreUserDirectory(db, "users").resolve_user("someone") is None
    db.collection.return_value.where.assert_not_called()


def test_session_document_defaults():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.return_value = _snapshot(
        "u1", {"answers": None, "assessment_step": None, "current_question": None}
    )

    session = FirestoreSessionStore(db, "assessments").get_session("u1")

    assert session.user_id == "u1"
    assert session.answers == []
    assert session.assessment_step == 0
    assert session.current_question == ""
    assert session.is_completed is False


def test_existing_session_on_create_is_duplicate():
    db = MagicMock()
    db.collection.return_value.document.return_value.create.side_effect = AlreadyExists("exists")

    with pytest.raises(DuplicateSessionError):
        FirestoreSessionStore(db, "assessments")._create("u1", AssessmentSession(user_id="u1"))


def test_api_errors_become_persistence_errors():
    db = MagicMock()
    db.collection.return_value.document.return_value.get.side_effect = ServiceUnavailable("down")

    with pytest.raises(PersistenceError):
        FirestoreRoadmapStore(db, "roadmaps").get_roadmap("u1")


def test_create_user_uses_generated_document_id():
    db = MagicMock()
    users = db.collection.return_value
    users.where.return_value.limit.return_value.stream.return_value = []
    users.document.return_value.id = "generated-id"

    created = FirestoreUserDirectory(db, "users").create_user(
        UserRecord(user_id="", name="Asha", phone_number="9876543210", email="Asha@Example.com")
    )

    assert created.user_id == "generated-id"
    assert created.email == "asha@example.com"
    stored = users.document.return_value.set.call_args[0][0]
    assert stored["phone_number"] == "9876543210"
    assert "user_id" not in stored


def test_create_user_with_registered_phone_conflicts():
    db = MagicMock()
    users = db.collection.return_value
    users.where.return_value.limit.return_value.stream.return_value = [
        _snapshot("existing", {"phone_number": "9876543210"})
    ]

    with pytest.raises(Conflict):
        FirestoreUserDirectory(db, "users").create_user(
            UserRecord(user_id="", name="Asha", phone_number="9876543210")
        )
    users.document.return_value.set.assert_not_called()


def test_close_firestore_client_releases_client_and_app(monkeypatch):
    deleted = []
    monkeypatch.setattr(firebase, "_firestore_client", object())
    monkeypatch.setattr(firebase_admin, "_apps", {"[DEFAULT]": "app"})
    monkeypatch.setattr(firebase_admin, "get_app", lambda: "app")
    monkeypatch.setattr(firebase_admin, "delete_app", deleted.append)

    firebase.close_firestore_client()

    assert firebase._firestore_client is None
    assert deleted == ["app"]
