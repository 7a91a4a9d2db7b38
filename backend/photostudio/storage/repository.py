"""
PhotoStudio Backend — Generic Entity Repository
=================================================

What:  The single create/read/update/delete implementation shared by every
       entity table.
How:   `EntityRepository` is parameterized by an `EntityMeta` record (ORM model
       = table identity, insert shape, optional patch shape). The five
       repositories on `Storage` are five instances of this class; there is no
       per-entity query code anywhere else.
Who:   Route handlers call it through the injected `Storage` handle.

Operation contract:
    create(data)          → row with generated id / created_at
    list()                → every row, store-native order; [] when empty
    get_by_id(id)         → row or None (a miss is not an error)
    get_by(**criteria)    → first matching row or None
    update(id, patch)     → updated row or None (patch-capable entities only)
    delete(id)            → True if a row was removed, False if none matched

    An id outside the key column range matches nothing: it is answered as a
    miss without a statement being sent.

    Each operation opens its own session and wraps exactly one statement in
    one transaction. Any driver/SQLAlchemy failure is logged with detail and
    re-raised as StorageError; nothing is retried.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from photostudio.database import Base
from photostudio.exceptions import StorageError
from photostudio.schemas.entities import InsertModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResultT = TypeVar("ResultT")

# Columns the store assigns; stripped from every insert and patch
GENERATED_COLUMNS = frozenset({"id", "created_at"})

# Primary keys are 32-bit INTEGER columns; nothing outside this range can match
MIN_ID = 1
MAX_ID = 2**31 - 1


@dataclass(frozen=True)
class EntityMeta(Generic[ModelT]):
    """
    Everything the generic repository needs to know about one entity.

    Attributes:
        name:          Human-readable entity name used in logs and errors
        model:         ORM class (table identity)
        insert_schema: Pydantic insert shape
        patch_schema:  Pydantic patch shape, or None when updates are unsupported
    """

    name: str
    model: Type[ModelT]
    insert_schema: Type[InsertModel]
    patch_schema: Optional[Type[InsertModel]] = None


class EntityRepository(Generic[ModelT]):
    """
    Async repository over one table.

    Args:
        meta:     Entity metadata (table, insert shape, optional patch shape)
        sessions: Session factory bound to the shared engine
        timeout:  Optional upper bound in seconds for each operation
    """

    def __init__(
        self,
        meta: EntityMeta[ModelT],
        sessions: async_sessionmaker[AsyncSession],
        timeout: Optional[float] = None,
    ):
        self.meta = meta
        self.model = meta.model
        self._sessions = sessions
        self._timeout = timeout or None

    def __repr__(self) -> str:
        return f"<EntityRepository({self.meta.name})>"

    @property
    def supports_update(self) -> bool:
        return self.meta.patch_schema is not None

    # ── Public operations ─────────────────────────────────────────────────

    async def create(self, data: Union[InsertModel, Mapping[str, Any]]) -> ModelT:
        """
        Insert one row and return it fully populated.

        Args:
            data: An instance of the entity's insert shape, or a mapping that
                  validates against it. `id` / `created_at` are never written.

        Raises:
            StorageError: constraint violation, connection loss, timeout
        """
        values = self._insert_values(data)

        async def work() -> ModelT:
            async with self._sessions() as session:
                async with session.begin():
                    row = self.model(**values)
                    session.add(row)
                # Committed: id (and created_at) are populated on the instance
                return row

        row = await self._run("create", work)
        logger.info("Created %s id=%s", self.meta.name, row.id)
        return row

    async def list(self) -> List[ModelT]:
        """Every row of the table, in whatever order the store returns them."""

        async def work() -> List[ModelT]:
            async with self._sessions() as session:
                result = await session.scalars(select(self.model))
                return list(result.all())

        rows = await self._run("list", work)
        logger.debug("Listed %d %s rows", len(rows), self.meta.name)
        return rows

    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """The row with primary key `entity_id`, or None."""
        if not self._addressable(entity_id):
            return None

        async def work() -> Optional[ModelT]:
            async with self._sessions() as session:
                return await session.get(self.model, entity_id)

        return await self._run("get_by_id", work, entity_id=entity_id)

    async def get_by(self, **criteria: Any) -> Optional[ModelT]:
        """
        First row whose columns equal every keyword given, or None.

        Example:
            await storage.users.get_by(username="admin")
        """
        if not criteria:
            raise ValueError("get_by() needs at least one column criterion")
        clauses = [self._column(name) == value for name, value in criteria.items()]

        async def work() -> Optional[ModelT]:
            async with self._sessions() as session:
                result = await session.scalars(select(self.model).where(*clauses).limit(1))
                return result.first()

        return await self._run("get_by", work, criteria=sorted(criteria))

    async def update(
        self,
        entity_id: int,
        patch: Union[InsertModel, Mapping[str, Any]],
    ) -> Optional[ModelT]:
        """
        Apply the fields present in `patch` to the row with `entity_id`.

        Unsupplied fields keep their stored values. An empty patch changes
        nothing and returns the current row.

        Returns:
            The updated row, or None if no row matched (nothing is created).

        Raises:
            TypeError:    the entity has no patch shape
            StorageError: write fault (distinct from "no row matched")
        """
        if self.meta.patch_schema is None:
            raise TypeError(f"{self.meta.name} does not support update")
        if not self._addressable(entity_id):
            logger.info("Update of %s id=%s matched no row (out of range)", self.meta.name, entity_id)
            return None
        values = self._patch_values(patch)
        if not values:
            return await self.get_by_id(entity_id)

        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**values)
            .returning(self.model)
        )

        async def work() -> Optional[ModelT]:
            async with self._sessions() as session:
                async with session.begin():
                    result = await session.scalars(stmt)
                    return result.one_or_none()

        row = await self._run("update", work, entity_id=entity_id, fields=sorted(values))
        if row is None:
            logger.info("Update of %s id=%s matched no row", self.meta.name, entity_id)
        else:
            logger.info("Updated %s id=%s fields=%s", self.meta.name, entity_id, sorted(values))
        return row

    async def delete(self, entity_id: int) -> bool:
        """
        Remove the row with `entity_id` if it exists.

        A missing row is not an error: the call succeeds and returns False.

        Returns:
            True when a row was removed.
        """
        if not self._addressable(entity_id):
            logger.info("Deleted %s id=%s (removed=False, out of range)", self.meta.name, entity_id)
            return False
        stmt = (
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )

        async def work() -> bool:
            async with self._sessions() as session:
                async with session.begin():
                    result = await session.execute(stmt)
                    return (result.rowcount or 0) > 0

        removed = await self._run("delete", work, entity_id=entity_id)
        logger.info("Deleted %s id=%s (removed=%s)", self.meta.name, entity_id, removed)
        return removed

    # ── Internals ─────────────────────────────────────────────────────────

    @staticmethod
    def _addressable(entity_id: int) -> bool:
        return MIN_ID <= entity_id <= MAX_ID

    def _column(self, name: str):
        if name not in self.model.__table__.columns:
            raise ValueError(f"{self.meta.name} has no column '{name}'")
        return getattr(self.model, name)

    def _insert_values(self, data: Union[InsertModel, Mapping[str, Any]]) -> Dict[str, Any]:
        if not isinstance(data, self.meta.insert_schema):
            data = self.meta.insert_schema.model_validate(dict(data))
        return self._strip_generated(data.to_values())

    def _patch_values(self, patch: Union[InsertModel, Mapping[str, Any]]) -> Dict[str, Any]:
        if not isinstance(patch, BaseModel):
            patch = self.meta.patch_schema.model_validate(dict(patch))
        return self._strip_generated(patch.to_values())

    @staticmethod
    def _strip_generated(values: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in values.items() if k not in GENERATED_COLUMNS}

    async def _run(
        self,
        operation: str,
        work: Callable[[], Awaitable[ResultT]],
        **log_context: Any,
    ) -> ResultT:
        """
        Run one storage operation, translating store faults into StorageError.

        The detailed cause goes to the log and to `StorageError.context`; the
        exception message stays generic.
        """
        context = {"entity": self.meta.name, "operation": operation, **log_context}
        try:
            if self._timeout:
                return await asyncio.wait_for(work(), timeout=self._timeout)
            return await work()
        except asyncio.TimeoutError as exc:
            logger.error(
                "Storage %s on %s timed out after %.1fs",
                operation,
                self.meta.name,
                self._timeout,
            )
            raise StorageError(context={**context, "error_type": "TimeoutError"}) from exc
        except (SQLAlchemyError, OSError) as exc:
            logger.error(
                "Storage %s on %s failed: %s",
                operation,
                self.meta.name,
                str(exc),
                exc_info=True,
            )
            raise StorageError(
                context={**context, "error_type": type(exc).__name__, "error": str(exc)},
            ) from exc
