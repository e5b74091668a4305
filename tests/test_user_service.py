"""
Tests for the user service cache policy.
"""

from unittest.mock import MagicMock, call

import pytest
from sqlalchemy.exc import OperationalError

from user_service.entities import UserEntity
from user_service.exceptions import UserNotFoundError
from user_service.services import UserService


def test_create_assigns_new_ids(service):
    """Each create returns a fresh, store-assigned id."""
    alice = service.create(UserEntity(name="Alice"))
    bob = service.create(UserEntity(name="Bob"))

    assert alice.id is not None
    assert bob.id is not None
    assert alice.id != bob.id
    assert alice.name == "Alice"


def test_create_ignores_caller_id(service, store_probe):
    """An id supplied on create is dropped before reaching the store."""
    created = service.create(UserEntity(id=42, name="Alice"))

    store_probe.save.assert_called_once_with(UserEntity(id=None, name="Alice"))
    assert created.id == 1


def test_create_does_not_populate_cache(service, cache, cache_probe):
    """Newly created users are not pre-warmed in the cache."""
    created = service.create(UserEntity(name="Alice"))

    assert created.id not in cache
    cache_probe.put.assert_not_called()


def test_get_after_create_returns_equal_record(service):
    """get returns the record that create stored."""
    created = service.create(UserEntity(name="Alice"))

    assert service.get(created.id) == created


def test_get_unknown_id_raises_not_found(service, cache):
    """get on an id that was never created raises and caches nothing."""
    with pytest.raises(UserNotFoundError) as exc_info:
        service.get(999)

    assert exc_info.value.user_id == 999
    assert len(cache) == 0


def test_get_reads_through_cache(service, store_probe, cache):
    """A miss goes to the store once; the repeat is served from the cache."""
    created = service.create(UserEntity(name="Alice"))

    first = service.get(created.id)
    assert store_probe.find_by_id.call_count == 1
    assert cache.get(created.id) == created

    second = service.get(created.id)
    assert store_probe.find_by_id.call_count == 1
    assert first == second == created


def test_update_replaces_record(service):
    """After update, get returns the new record."""
    created = service.create(UserEntity(name="Alice"))

    updated = service.update(UserEntity(id=created.id, name="Bob"))

    assert updated == UserEntity(id=created.id, name="Bob")
    assert service.get(created.id) == updated


def test_update_evicts_and_does_not_repopulate(service, cache, cache_probe):
    """update removes the cached entry without writing the new value."""
    created = service.create(UserEntity(name="Alice"))
    service.get(created.id)
    assert created.id in cache

    service.update(UserEntity(id=created.id, name="Bob"))

    assert created.id not in cache
    cache_probe.evict.assert_called_once_with(created.id)
    assert cache_probe.put.call_count == 1


def test_update_unknown_id_raises_not_found(service, cache_probe):
    """The store rejects a replacement for an id it does not hold."""
    with pytest.raises(UserNotFoundError):
        service.update(UserEntity(id=7, name="Ghost"))

    cache_probe.evict.assert_not_called()


def test_update_without_id_never_inserts(service, store, store_probe, cache_probe):
    """update on a record with no id is rejected before the store is written."""
    with pytest.raises(ValueError):
        service.update(UserEntity(name="Ghost"))

    store_probe.save.assert_not_called()
    cache_probe.evict.assert_not_called()
    assert store.find_by_id(1) is None


def test_delete_removes_record_and_cache_entry(service, cache):
    """After delete the user is gone from both store and cache."""
    created = service.create(UserEntity(name="Alice"))
    service.get(created.id)

    service.delete(created.id)

    assert created.id not in cache
    with pytest.raises(UserNotFoundError):
        service.get(created.id)


def test_delete_unknown_id_is_silent(service, cache_probe):
    """Deleting an id that does not exist is not an error."""
    service.delete(12345)

    cache_probe.evict.assert_called_once_with(12345)


def test_store_write_happens_before_eviction():
    """update and delete touch the store first, then the cache."""
    calls = MagicMock()
    calls.store.save.return_value = UserEntity(id=3, name="Carol")
    users = UserService(store=calls.store, cache=calls.cache)

    users.update(UserEntity(id=3, name="Carol"))
    users.delete(3)

    assert calls.mock_calls == [
        call.store.save(UserEntity(id=3, name="Carol")),
        call.cache.evict(3),
        call.store.delete_by_id(3),
        call.cache.evict(3),
    ]


def test_store_failure_propagates_without_eviction():
    """A failing store aborts update/delete before the cache is touched."""
    store = MagicMock()
    cache = MagicMock()
    failure = OperationalError("UPDATE user_table", {}, Exception("database is locked"))
    store.save.side_effect = failure
    store.delete_by_id.side_effect = failure
    users = UserService(store=store, cache=cache)

    with pytest.raises(OperationalError):
        users.update(UserEntity(id=1, name="Bob"))
    with pytest.raises(OperationalError):
        users.delete(1)

    cache.evict.assert_not_called()


def test_cache_failure_propagates():
    """A failing cache aborts get; nothing is retried."""
    store = MagicMock()
    cache = MagicMock()
    cache.get.side_effect = ConnectionError("cache down")
    users = UserService(store=store, cache=cache)

    with pytest.raises(ConnectionError):
        users.get(1)

    store.find_by_id.assert_not_called()
    assert cache.get.call_count == 1


def test_stale_entry_survives_racing_read(store, cache):
    """A read that caches the old row after an update's eviction stays stale.

    This interleaving is not guarded against: the entry remains until the
    next write on that id.
    """
    users = UserService(store=store, cache=cache)
    created = users.create(UserEntity(name="Alice"))

    # Reader misses and loads the old row before the writer commits
    old_row = store.find_by_id(created.id)
    users.update(UserEntity(id=created.id, name="Bob"))
    cache.put(created.id, old_row)

    assert users.get(created.id).name == "Alice"

    users.update(UserEntity(id=created.id, name="Bob"))
    assert users.get(created.id).name == "Bob"


def test_concrete_scenario(service, store_probe):
    """create Alice, read twice, rename to Bob, delete."""
    alice = service.create(UserEntity(name="Alice"))
    assert alice == UserEntity(id=1, name="Alice")

    assert service.get(1) == alice
    assert store_probe.find_by_id.call_count == 1
    assert service.get(1) == alice
    assert store_probe.find_by_id.call_count == 1

    service.update(UserEntity(id=1, name="Bob"))
    assert service.get(1) == UserEntity(id=1, name="Bob")

    service.delete(1)
    with pytest.raises(UserNotFoundError):
        service.get(1)


def test_is_healthy_reports_both_backends(service):
    """Both in-process backends report healthy."""
    assert service.is_healthy() == (True, True)
