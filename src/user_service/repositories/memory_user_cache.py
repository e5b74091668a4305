"""Process-local implementation of UserCache."""

import threading

from user_service.entities import UserEntity


class InMemoryUserCache:
    """Dictionary-backed user cache.

    Satisfies the UserCache protocol. Each call is atomic; nothing spans
    several calls. Only useful for a single process (tests, local runs with
    ``CACHE_BACKEND=memory``).
    """

    def __init__(self) -> None:
        self._entries: dict[int, UserEntity] = {}
        self._lock = threading.Lock()

    def get(self, user_id: int) -> UserEntity | None:
        with self._lock:
            return self._entries.get(user_id)

    def put(self, user_id: int, user: UserEntity) -> None:
        with self._lock:
            self._entries[user_id] = user

    def evict(self, user_id: int) -> None:
        with self._lock:
            self._entries.pop(user_id, None)

    def health_check(self) -> bool:
        return True

    def close(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
