"""Generic Data Access - query/insert/update/delete/find_by_id over named tables.

Invariants:
    - Table names resolve against Base.metadata; unknown tables/columns raise DataAccessError
    - Filters are column equality only, ANDed together; columns named in ignore_case
      compare lower(column) = lower(value)
    - Every SQLAlchemy failure surfaces as DataAccessError; integrity violations are
      flagged constraint_violation=True so callers can report them as conflicts
    - find_by_id/update return None for a missing row: "not found" is not an error here
    - Writes commit immediately unless issued inside transaction()
    - No validation and no business rules: pure translation to SQL
"""

import logging
import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncGenerator

from sqlalchemy import Column, Table, Uuid, delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

import club_api.models  # noqa: F401  (registers every table on Base.metadata)
from club_api.core.errors import DataAccessError
from club_api.db.base import Base

logger = logging.getLogger(__name__)

Row = dict[str, Any]


@dataclass(frozen=True)
class OrderBy:
    column: str
    ascending: bool = True


class DataAccess:
    """Storage seam between resource services and the relational store."""

    def __init__(self, session: AsyncSession, metadata=Base.metadata):
        self._session = session
        self._tables = metadata.tables
        self._tx_depth = 0

    # ─── Reads ───────────────────────────────────────────────────

    async def query(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: OrderBy | None = None,
        limit: int | None = None,
        ignore_case: tuple[str, ...] = (),
    ) -> list[Row]:
        """Rows matching every filter, in the requested order."""
        t = self._table(table)
        stmt = select(t)
        for clause in self._where(t, filters, ignore_case):
            stmt = stmt.where(clause)
        if order_by is not None:
            col = self._column(t, order_by.column)
            stmt = stmt.order_by(col.asc() if order_by.ascending else col.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self._guard("query", table):
            result = await self._session.execute(stmt)
            return [dict(r) for r in result.mappings().all()]

    async def find_by_id(
        self, table: str, id: Any, for_update: bool = False,
    ) -> Row | None:
        """Single row by primary key, or None. for_update locks the row until commit."""
        t = self._table(table)
        stmt = select(t).where(t.c.id == self._coerce(t.c.id, id, table))
        if for_update:
            stmt = stmt.with_for_update()
        async with self._guard("find_by_id", table):
            result = await self._session.execute(stmt)
            row = result.mappings().first()
        return dict(row) if row is not None else None

    async def count(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        ignore_case: tuple[str, ...] = (),
    ) -> int:
        t = self._table(table)
        stmt = select(func.count()).select_from(t)
        for clause in self._where(t, filters, ignore_case):
            stmt = stmt.where(clause)
        async with self._guard("count", table):
            result = await self._session.execute(stmt)
            return int(result.scalar_one())

    # ─── Writes ──────────────────────────────────────────────────

    async def insert(self, table: str, record: dict[str, Any]) -> Row:
        """Insert one row and return it with generated id and timestamps."""
        t = self._table(table)
        values = self._values(t, record, table)
        async with self._guard("insert", table):
            result = await self._session.execute(
                insert(t).values(**values).returning(*t.c),
            )
            row = dict(result.mappings().one())
            await self._commit()
        return row

    async def update(self, table: str, id: Any, values: dict[str, Any]) -> Row | None:
        """Apply values to the row with this id; None when no row matched."""
        t = self._table(table)
        if not values:
            return await self.find_by_id(table, id)
        coerced = self._values(t, values, table)
        stmt = (
            update(t)
            .where(t.c.id == self._coerce(t.c.id, id, table))
            .values(**coerced)
            .returning(*t.c)
        )
        async with self._guard("update", table):
            result = await self._session.execute(stmt)
            row = result.mappings().first()
            updated = dict(row) if row is not None else None
            await self._commit()
        return updated

    async def delete(self, table: str, id: Any) -> bool:
        """Delete the row with this id. True when a row was removed."""
        t = self._table(table)
        stmt = delete(t).where(t.c.id == self._coerce(t.c.id, id, table))
        async with self._guard("delete", table):
            result = await self._session.execute(stmt)
            await self._commit()
        return result.rowcount > 0

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator["DataAccess", None]:
        """Group several calls into a single commit; rolls back on any exception."""
        self._tx_depth += 1
        try:
            yield self
        except Exception:
            self._tx_depth -= 1
            if self._tx_depth == 0:
                await self._session.rollback()
            raise
        self._tx_depth -= 1
        if self._tx_depth == 0:
            async with self._guard("commit", None):
                await self._session.commit()

    # ─── Internals ───────────────────────────────────────────────

    async def _commit(self) -> None:
        if self._tx_depth == 0:
            await self._session.commit()

    @asynccontextmanager
    async def _guard(self, operation: str, table: str | None) -> AsyncGenerator[None, None]:
        try:
            yield
        except IntegrityError as e:
            await self._rollback_outside_tx()
            logger.warning(
                f"Constraint violation during {operation} on {table}: {e.orig}",
                extra={"table": table, "operation": operation},
            )
            raise DataAccessError(
                str(e.orig), operation, table, constraint_violation=True,
            ) from e
        except SQLAlchemyError as e:
            await self._rollback_outside_tx()
            logger.error(
                f"Database {operation} error on {table}: {e}",
                extra={"table": table, "operation": operation},
            )
            raise DataAccessError(str(e), operation, table) from e

    async def _rollback_outside_tx(self) -> None:
        # inside transaction() the rollback happens when the block unwinds
        if self._tx_depth == 0:
            await self._session.rollback()

    def _table(self, name: str) -> Table:
        table = self._tables.get(name)
        if table is None:
            raise DataAccessError(f"unknown table '{name}'", "lookup", name)
        return table

    def _column(self, table: Table, name: str) -> Column:
        if name not in table.c:
            raise DataAccessError(f"unknown column '{name}'", "lookup", table.name)
        return table.c[name]

    def _where(
        self, table: Table, filters: dict[str, Any] | None, ignore_case: tuple[str, ...] = (),
    ) -> list:
        clauses = []
        for name, value in (filters or {}).items():
            col = self._column(table, name)
            if name in ignore_case and isinstance(value, str):
                clauses.append(func.lower(col) == value.lower())
            else:
                clauses.append(col == self._coerce(col, value, table.name))
        return clauses

    def _values(self, table: Table, record: dict[str, Any], table_name: str) -> dict[str, Any]:
        return {
            name: self._coerce(self._column(table, name), value, table_name)
            for name, value in record.items()
        }

    @staticmethod
    def _coerce(column: Column, value: Any, table_name: str) -> Any:
        """Bind UUID columns with uuid.UUID values even when given strings."""
        if isinstance(column.type, Uuid) and isinstance(value, str):
            try:
                return uuid.UUID(value)
            except ValueError as e:
                raise DataAccessError(
                    f"invalid UUID for column '{column.name}'", "bind", table_name,
                ) from e
        return value
