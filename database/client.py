"""
Data-access client - typed CRUD operations per entity kind.

One DataClient owns one engine and exposes a Repository per entity kind:

    async with DataClient.from_url(url) as client:
        user = await client.user.insert(UserCreate(name="Ada", email="ada@example.com"))
        same = await client.user.find_one(user.id)

Every operation runs in its own session and transaction. SQLAlchemy and
driver errors are translated to the shared.errors taxonomy; a lookup that
finds nothing returns None and is never an error. Nothing is retried.
"""

import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from database.connection import (
    create_engine_from_url,
    create_session_factory,
    init_db,
    session_scope,
)
from database.models import Base, Category, Post, User
from database.records import (
    CategoryCreate,
    CategoryRecord,
    PostCreate,
    PostRecord,
    UserCreate,
    UserRecord,
)
from shared.config import Settings, get_settings
from shared.errors import RecordNotFoundError, translate_db_error

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)


class EntityKind(str, Enum):
    """Entity kinds handled by the client."""

    USER = "user"
    POST = "post"
    CATEGORY = "category"


class Repository(Generic[RecordT, CreateT]):
    """
    CRUD operations for a single entity kind.

    Records returned by insert/update are re-read from the store after
    commit, so they carry the identifier and timestamp the store assigned.
    """

    def __init__(
        self,
        kind: EntityKind,
        model: type[Base],
        record_type: type[RecordT],
        session_factory: async_sessionmaker[AsyncSession],
    ):
        self.kind = kind
        self.model = model
        self.record_type = record_type
        self._session_factory = session_factory

    def _to_record(self, instance: Base) -> RecordT:
        return self.record_type.model_validate(instance)

    @asynccontextmanager
    async def _operation(
        self,
        operation: str,
        record_id: uuid.UUID | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        try:
            async with session_scope(self._session_factory) as session:
                yield session
        except (SQLAlchemyError, OSError) as exc:
            error = translate_db_error(exc, entity=self.kind.value, operation=operation)
            logger.debug(
                f"{self.kind.value}.{operation} failed: {error}",
                extra={
                    "entity": self.kind.value,
                    "operation": operation,
                    "record_id": str(record_id) if record_id else None,
                },
            )
            raise error from exc

    def _log_done(self, operation: str, record_id: Any = None) -> None:
        logger.debug(
            f"{self.kind.value}.{operation} ok",
            extra={
                "entity": self.kind.value,
                "operation": operation,
                "record_id": str(record_id) if record_id else None,
            },
        )

    def _not_found(self, operation: str, record_id: uuid.UUID) -> RecordNotFoundError:
        return RecordNotFoundError(
            f"{self.kind.value} {record_id} not found",
            entity=self.kind.value,
            operation=operation,
        )

    async def insert(self, data: CreateT) -> RecordT:
        """Persist a new record and return it as stored."""
        async with self._operation("insert") as session:
            instance = self.model(**data.model_dump())
            session.add(instance)
            await session.commit()
            await session.refresh(instance)
            record = self._to_record(instance)

        self._log_done("insert", record.id)
        return record

    async def find_one(self, record_id: uuid.UUID) -> RecordT | None:
        """Fetch a record by id; None when it does not exist."""
        async with self._operation("find_one", record_id) as session:
            instance = await session.get(self.model, record_id)
            record = self._to_record(instance) if instance is not None else None

        self._log_done("find_one", record_id)
        return record

    async def find_all(self) -> list[RecordT]:
        """Fetch every record of this kind, oldest first."""
        async with self._operation("find_all") as session:
            result = await session.execute(
                select(self.model).order_by(self.model.created_at, self.model.id)
            )
            records = [self._to_record(instance) for instance in result.scalars().all()]

        self._log_done("find_all")
        return records

    async def update(self, record_id: uuid.UUID, data: CreateT) -> RecordT:
        """
        Overwrite every caller-supplied field of an existing record.

        Raises:
            RecordNotFoundError: No record has this id
        """
        async with self._operation("update", record_id) as session:
            instance = await session.get(self.model, record_id)
            if instance is None:
                raise self._not_found("update", record_id)
            for key, value in data.model_dump().items():
                setattr(instance, key, value)
            await session.commit()
            await session.refresh(instance)
            record = self._to_record(instance)

        self._log_done("update", record_id)
        return record

    async def delete(self, record_id: uuid.UUID) -> RecordT:
        """
        Delete a record by id and return what was removed.

        Raises:
            RecordNotFoundError: No record has this id
        """
        async with self._operation("delete", record_id) as session:
            instance = await session.get(self.model, record_id)
            if instance is None:
                raise self._not_found("delete", record_id)
            record = self._to_record(instance)
            await session.delete(instance)
            await session.commit()

        self._log_done("delete", record_id)
        return record

    async def count(self) -> int:
        """Number of records of this kind."""
        async with self._operation("count") as session:
            result = await session.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()


class DataClient:
    """
    Entry point to the store: one engine, one repository per entity kind.

    Pass the client explicitly to whatever needs the store (seeder,
    factories, tests); there is no module-level instance.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = create_session_factory(engine)
        self._closed = False

        self.user: Repository[UserRecord, UserCreate] = Repository(
            EntityKind.USER, User, UserRecord, self._session_factory
        )
        self.post: Repository[PostRecord, PostCreate] = Repository(
            EntityKind.POST, Post, PostRecord, self._session_factory
        )
        self.category: Repository[CategoryRecord, CategoryCreate] = Repository(
            EntityKind.CATEGORY, Category, CategoryRecord, self._session_factory
        )
        self._repositories: dict[EntityKind, Repository] = {
            EntityKind.USER: self.user,
            EntityKind.POST: self.post,
            EntityKind.CATEGORY: self.category,
        }

    @classmethod
    def from_url(cls, url: str, **engine_kwargs: Any) -> "DataClient":
        """Build a client with a fresh engine for the given URL."""
        return cls(create_engine_from_url(url, **engine_kwargs))

    @property
    def closed(self) -> bool:
        return self._closed

    def repository(self, kind: EntityKind | str) -> Repository:
        """Look up the repository for an entity kind."""
        return self._repositories[EntityKind(kind)]

    async def create_tables(self) -> None:
        """Create the schema directly (tests and local SQLite only)."""
        await init_db(self.engine)

    async def disconnect(self) -> None:
        """Release every pooled connection. Safe to call more than once."""
        if self._closed:
            return
        await self.engine.dispose()
        self._closed = True
        logger.debug("Data client disconnected")

    async def __aenter__(self) -> "DataClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()


def create_data_client(
    settings: Settings | None = None,
    *,
    url: str | None = None,
) -> DataClient:
    """
    Build a DataClient from settings.

    Args:
        settings: Settings to read (defaults to get_settings())
        url: Override for DATABASE_URL

    Returns:
        DataClient bound to a new engine
    """
    settings = settings or get_settings()
    return DataClient.from_url(
        url or settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
