# careerguide/services/activity_log.py - Best-effort activity recording with a recent-events cache

import logging
import threading
from collections import OrderedDict, deque
from typing import Any, Deque, Dict, List, Optional, Union

from careerguide.core.exceptions import PersistenceError
from careerguide.models.activity import ActivityEvent, ActivityType
from careerguide.services.stores import ActivityStore

logger = logging.getLogger(__name__)


class RecentActivityCache:
    """Newest `per_user` events for at most `max_users` users (least recently used evicted)"""

    def __init__(self, per_user: int = 50, max_users: int = 1000):
        self.per_user = per_user
        self.max_users = max_users
        self._lock = threading.Lock()
        self._events: "OrderedDict[str, Deque[ActivityEvent]]" = OrderedDict()

    def push(self, event: ActivityEvent) -> None:
        with self._lock:
            history = self._events.get(event.user_id)
            if history is None:
                history = deque(maxlen=self.per_user)
                self._events[event.user_id] = history
            self._events.move_to_end(event.user_id)
            history.appendleft(event)
            while len(self._events) > self.max_users:
                self._events.popitem(last=False)

    def get(self, user_id: str, limit: Optional[int] = None) -> List[ActivityEvent]:
        with self._lock:
            history = self._events.get(user_id)
            if history is None:
                return []
            self._events.move_to_end(user_id)
            events = list(history)
        return events if limit is None else events[:limit]

    def __len__(self) -> int:
        return len(self._events)


class ActivityLog:
    """Records user activity.

    Engine side effects record best effort: a failing store is logged and the
    event is still kept in the recent cache, so the request that produced it
    carries on. Callers whose only job is the write pass `raise_errors=True`.
    """

    def __init__(self, store: ActivityStore, cache: Optional[RecentActivityCache] = None):
        self.store = store
        self.cache = cache or RecentActivityCache()

    def record(
        self,
        user_id: str,
        activity_type: Union[ActivityType, str],
        metadata: Optional[Dict[str, Any]] = None,
        raise_errors: bool = False,
    ) -> Optional[ActivityEvent]:
        """Persist and cache one event.

        With `raise_errors` a store failure surfaces as PersistenceError and
        the event is not cached; otherwise it is logged and None is returned.
        """
        if not user_id or not activity_type:
            return None

        event = ActivityEvent(
            user_id=user_id,
            activity_type=ActivityType(activity_type),
            metadata=metadata or {},
        )
        try:
            self.store.add(event)
        except Exception as e:
            if raise_errors:
                raise PersistenceError("Failed to log activity") from e
            logger.warning("Activity %s for user %s not persisted: %s", event.activity_type.value, user_id, e)
            self.cache.push(event)
            return None
        self.cache.push(event)
        return event

    def history(self, user_id: str, limit: int = 20) -> List[ActivityEvent]:
        return self.store.list_for_user(user_id, limit)

    def recent(self, user_id: str, limit: Optional[int] = None) -> List[ActivityEvent]:
        return self.cache.get(user_id, limit)
