from datetime import datetime, timedelta

import pytest

from careerguide.core.exceptions import PersistenceError
from careerguide.models.activity import ActivityEvent, ActivityType
from careerguide.services.activity_log import ActivityLog, RecentActivityCache
from careerguide.services.memory_stores import MemoryActivityStore


class BrokenStore(MemoryActivityStore):
    def add(self, event):
        raise RuntimeError("down")


def _event(user_id, activity_type=ActivityType.LOGIN, **metadata):
    return ActivityEvent(user_id=user_id, activity_type=activity_type, metadata=metadata)


def test_cache_keeps_newest_events_per_user():
    cache = RecentActivityCache(per_user=3, max_users=10)
    for i in range(5):
        cache.push(_event("u1", n=i))

    events = cache.get("u1")

    assert [e.metadata["n"] for e in events] == [4, 3, 2]
    assert [e.metadata["n"] for e in cache.get("u1", limit=2)] == [4, 3]
    assert cache.get("unknown") == []


def test_cache_evicts_least_recently_used_user():
    cache = RecentActivityCache(per_user=5, max_users=2)
    cache.push(_event("u1"))
    cache.push(_event("u2"))
    cache.get("u1")
    cache.push(_event("u3"))

    assert len(cache) == 2
    assert cache.get("u2") == []
    assert cache.get("u1")
    assert cache.get("u3")


def test_record_persists_and_caches():
    store = MemoryActivityStore()
    log = ActivityLog(store, RecentActivityCache())

    event = log.record("u1", "LOGIN", {"ip": "127.0.0.1"})

    assert event.activity_type == ActivityType.LOGIN
    assert log.history("u1") == [event]
    assert log.recent("u1") == [event]


def test_record_ignores_missing_fields():
    log = ActivityLog(MemoryActivityStore())

    assert log.record("", ActivityType.LOGIN) is None
    assert log.record("u1", "") is None
    assert log.recent("u1") == []


def test_record_rejects_unknown_type():
    log = ActivityLog(MemoryActivityStore())

    with pytest.raises(ValueError):
        log.record("u1", "DANCE")


def test_store_failure_is_swallowed_but_cached():
    log = ActivityLog(BrokenStore())

    assert log.record("u1", ActivityType.CHAT_MESSAGE, {"text": "hi"}) is None
    assert [e.activity_type for e in log.recent("u1")] == [ActivityType.CHAT_MESSAGE]


def test_memory_store_lists_newest_first_with_limit():
    store = MemoryActivityStore()
    now = datetime.utcnow()
    for minutes in (5, 1, 3):
        store.add(ActivityEvent(
            user_id="u1",
            activity_type=ActivityType.LOGIN,
            metadata={"m": minutes},
            timestamp=now - timedelta(minutes=minutes),
        ))
    store.add(_event("u2"))

    events = store.list_for_user("u1", 2)

    assert [e.metadata["m"] for e in events] == [1, 3]


def test_strict_record_raises_and_skips_cache():
    log = ActivityLog(BrokenStore())

    with pytest.raises(PersistenceError):
        log.record("u1", ActivityType.LOGIN, raise_errors=True)

    assert log.recent("u1") == []
