#!/usr/bin/env python3
"""
Demo script for the cached user service.

Runs the create / read / update / delete walkthrough against an in-memory
SQLite store and prints how often the store is actually read.
"""

from unittest.mock import MagicMock

from user_service import InMemoryUserCache, SqlUserRepository, UserEntity, UserNotFoundError, UserService
from user_service.config import get_engine


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def main() -> None:
    store = SqlUserRepository(engine=get_engine("sqlite://"))
    store_probe = MagicMock(wraps=store)
    cache = InMemoryUserCache()
    users = UserService(store=store_probe, cache=cache)

    print_section("Create")
    alice = users.create(UserEntity(name="Alice"))
    print(f"  ✓ Created: {alice}")
    print(f"  Cached after create: {alice.id in cache}")

    print_section("Read-through")
    for attempt in (1, 2):
        user = users.get(alice.id)
        print(f"  get #{attempt}: {user} (store reads so far: {store_probe.find_by_id.call_count})")

    print_section("Update invalidates")
    users.update(UserEntity(id=alice.id, name="Bob"))
    print(f"  Cached after update: {alice.id in cache}")
    print(f"  get: {users.get(alice.id)} (store reads so far: {store_probe.find_by_id.call_count})")

    print_section("Delete invalidates")
    users.delete(alice.id)
    print(f"  Cached after delete: {alice.id in cache}")
    try:
        users.get(alice.id)
    except UserNotFoundError as e:
        print(f"  ✓ {e}")

    store.close()


if __name__ == "__main__":
    main()
