from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import sqlalchemy.ext.asyncio
from sqlalchemy import select
from sqlalchemy.orm import QueryableAttribute, selectinload

from ._table_base import BaseModel
from ..results import DataResult, ErrorType, Result
from ..trying import try_catch_async

logger = logging.getLogger(__name__)


class BaseProvider[E: BaseModel]:
    """Generic access to the rows of a table.

    Each operation opens its own session and returns its outcome as a result.
    No exception raised by the database layer escapes an operation: it is returned
    as an exception outcome whose message contains the message of the exception.
    Operations on a row that does not exist return a failure with error type
    :attr:`ErrorType.NO_DATA`.

    Entities returned by the provider are detached from their session.
    Relationships are not loaded unless they are passed to one of the ``*_including``
    methods.

    Args:
        engine: Used to connect to the database.
        entity_type: The mapped class handled by this provider.
    """

    def __init__(
        self,
        engine: sqlalchemy.ext.asyncio.AsyncEngine,
        entity_type: type[E],
    ) -> None:
        self._engine = engine
        self._entity_type = entity_type
        self._session_maker = sqlalchemy.ext.asyncio.async_sessionmaker(
            self._engine, expire_on_commit=False
        )

    @property
    def entity_type(self) -> type[E]:
        return self._entity_type

    async def fetch_all(self) -> DataResult[list[E]]:
        return await self.fetch_all_including()

    async def fetch_all_including(
        self, *relationships: QueryableAttribute[Any]
    ) -> DataResult[list[E]]:
        """Fetch all rows, eagerly loading the given relationships."""

        try_ = await try_catch_async(lambda: self._select_all(relationships))
        return try_.to_data_result()

    async def fetch(self, id_: int) -> DataResult[E]:
        return await self.fetch_including(id_)

    async def fetch_including(
        self, id_: int, *relationships: QueryableAttribute[Any]
    ) -> DataResult[E]:
        """Fetch a single row by primary key, eagerly loading the relationships.

        Returns:
            A success holding the entity, or a failure with error type
            :attr:`ErrorType.NO_DATA` if there is no row with this key.
        """

        try_ = await try_catch_async(lambda: self._select_one(id_, relationships))
        return try_.to_data_result()

    async def insert(self, entity: E) -> Result:
        try_ = await try_catch_async(lambda: self._insert(entity))
        return try_.to_result()

    async def update(self, entity: E) -> Result:
        """Overwrite the row with the same primary key as the entity.

        Returns:
            A success if the row was updated, or a failure with error type
            :attr:`ErrorType.NO_DATA` if there is no row with this key.
        """

        try_ = await try_catch_async(lambda: self._update(entity))
        return try_.to_result()

    async def delete(self, id_: int) -> Result:
        try_ = await try_catch_async(lambda: self._delete(id_))
        return try_.to_result()

    def _no_row(self, id_: Optional[int]) -> Result:
        return Result.on_failure(
            f"No {self._entity_type.__name__} with id {id_}", ErrorType.NO_DATA
        )

    async def _select_all(
        self, relationships: Sequence[QueryableAttribute[Any]]
    ) -> list[E]:
        logger.debug("Fetching all %s", self._entity_type.__name__)
        statement = select(self._entity_type).options(
            *(selectinload(relationship) for relationship in relationships)
        )
        async with self._session_maker() as session:
            return list((await session.scalars(statement)).all())

    async def _select_one(
        self, id_: int, relationships: Sequence[QueryableAttribute[Any]]
    ) -> Optional[E]:
        logger.debug("Fetching %s %s", self._entity_type.__name__, id_)
        async with self._session_maker() as session:
            if not relationships:
                return await session.get(self._entity_type, id_)
            statement = (
                select(self._entity_type)
                .where(self._entity_type.id_ == id_)
                .options(*(selectinload(relationship) for relationship in relationships))
            )
            return (await session.scalars(statement)).one_or_none()

    async def _insert(self, entity: E) -> Result:
        async with self._session_maker() as session, session.begin():
            session.add(entity)
        logger.debug("Inserted %s %s", self._entity_type.__name__, entity.id_)
        return Result.on_success()

    async def _update(self, entity: E) -> Result:
        async with self._session_maker() as session, session.begin():
            if await session.get(self._entity_type, entity.id_) is None:
                return self._no_row(entity.id_)
            await session.merge(entity)
        logger.debug("Updated %s %s", self._entity_type.__name__, entity.id_)
        return Result.on_success()

    async def _delete(self, id_: int) -> Result:
        async with self._session_maker() as session, session.begin():
            entity = await session.get(self._entity_type, id_)
            if entity is None:
                return self._no_row(id_)
            await session.delete(entity)
        logger.debug("Deleted %s %s", self._entity_type.__name__, id_)
        return Result.on_success()
