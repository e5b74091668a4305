"""SQL implementation of UserStore.

This repository uses SQLAlchemy Core against a single flat table. It is the
authoritative store for user records and satisfies the UserStore protocol.
"""

import logging

from sqlalchemy import Column, Integer, MetaData, String, Table, delete, insert, select, text, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from user_service.config import get_engine
from user_service.entities import UserEntity
from user_service.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "user_table",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    # ids of deleted rows must never be handed out again
    sqlite_autoincrement=True,
)


class SqlUserRepository:
    """SQLAlchemy Core implementation of the user store.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.

    Every call runs in its own connection; writes run inside
    ``engine.begin()`` and are committed before the call returns.
    """

    def __init__(self, engine: Engine | None = None, create_schema: bool = True) -> None:
        """Initialize the SQL user repository.

        Args:
            engine: SQLAlchemy engine. If None, creates default from settings.
            create_schema: Create the user table if it does not exist yet.
        """
        self._engine = engine or get_engine()

        if create_schema:
            self._ensure_schema()

    @classmethod
    def create(
        cls,
        database_url: str | None = None,
        create_schema: bool = True,
    ) -> "SqlUserRepository":
        """Factory method to create SqlUserRepository with defaults.

        Args:
            database_url: Database URL. If None, uses settings.
            create_schema: Create the user table if missing.

        Returns:
            Configured SqlUserRepository
        """
        return cls(engine=get_engine(database_url), create_schema=create_schema)

    def _ensure_schema(self) -> None:
        """Ensure the user table exists."""
        metadata.create_all(self._engine, tables=[users_table])
        logger.info("Using table %s on %s", users_table.name, self._engine.url.render_as_string())

    def save(self, user: UserEntity) -> UserEntity:
        """Insert a new user or fully replace an existing one.

        Args:
            user: Record to persist

        Returns:
            The persisted record, including its id

        Raises:
            UserNotFoundError: If ``user.id`` is set but no such row exists
        """
        with self._engine.begin() as conn:
            if user.id is None:
                result = conn.execute(insert(users_table).values(name=user.name))
                user_id = result.inserted_primary_key[0]
                logger.debug("Inserted user %s", user_id)
                return UserEntity(id=user_id, name=user.name)

            result = conn.execute(
                update(users_table)
                .where(users_table.c.id == user.id)
                .values(name=user.name)
            )
            if result.rowcount == 0:
                raise UserNotFoundError(user.id)

        logger.debug("Replaced user %s", user.id)
        return user

    def find_by_id(self, user_id: int) -> UserEntity | None:
        """Look up a user by id.

        Args:
            user_id: The user identifier

        Returns:
            The stored record, or None if absent
        """
        with self._engine.connect() as conn:
            row = conn.execute(
                select(users_table.c.id, users_table.c.name).where(users_table.c.id == user_id)
            ).first()

        if row is None:
            return None
        return UserEntity(id=row.id, name=row.name)

    def delete_by_id(self, user_id: int) -> None:
        """Delete a user by id. Missing ids are ignored.

        Args:
            user_id: The user identifier
        """
        with self._engine.begin() as conn:
            conn.execute(delete(users_table).where(users_table.c.id == user_id))

    def health_check(self) -> bool:
        """Check if the database is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.warning("User store health check failed", exc_info=True)
            return False

    def close(self) -> None:
        """Release pooled database connections."""
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        return self._engine
