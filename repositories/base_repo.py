"""
repositories/base_repo.py
-------------------------
Generic CRUD repository shared by every entity.
Each entity supplies a TableDescriptor, a row mapper and a parameter binder;
the five operations are implemented once here.
"""

from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Generic, Iterator, Mapping, Optional, Sequence, TypeVar

import psycopg2
from psycopg2 import extras

from db.connection import connection
from db.errors import BindingTypeError, ExecutionError, GeneratedKeyMissingError
from repositories.descriptor import TableDescriptor, build_statements
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

RowMapper = Callable[[Mapping[str, Any]], T]
ParamBinder = Callable[[T], Sequence[Any]]
ConnectionProvider = Callable[[], ContextManager[Any]]


class BaseRepository(Generic[T]):
    """
    CRUD operations for one table.

    Args:
        descriptor: Table metadata; SQL is rendered from it once, here.
        mapper: Builds an entity from a row keyed by column name.
        binder: Returns the entity's value-column values in descriptor order.
        provider: Context manager factory handing out a pooled connection.
            Defaults to ``db.connection.connection``.
    """

    def __init__(
        self,
        descriptor: TableDescriptor,
        mapper: RowMapper,
        binder: ParamBinder,
        provider: ConnectionProvider = connection,
    ):
        self.descriptor = descriptor
        self._mapper = mapper
        self._binder = binder
        self._provider = provider
        self._sql = build_statements(descriptor)

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[T]:
        """
        Fetch every row of the table, ordered by primary key.

        Returns:
            List of entities; empty if the table has no rows.

        Raises:
            ConnectivityError, ExecutionError: On any failure.
        """
        with self._cursor("load all rows") as cur:
            cur.execute(self._sql.select_all)
            rows = cur.fetchall()
        logger.debug(f"Loaded {len(rows)} rows from {self.descriptor.table}")
        return [self._mapper(row) for row in rows]

    def find(self, entity_id) -> Optional[T]:
        """
        Fetch a single entity by primary key.

        Returns:
            The entity, or None if no row has that key.
        """
        entity_id = self.descriptor.id_column.check(entity_id)
        with self._cursor(f"find {entity_id!r}") as cur:
            cur.execute(self._sql.select_by_id, (entity_id,))
            row = cur.fetchone()
        return self._mapper(row) if row else None

    def count(self) -> int:
        """Number of rows currently in the table."""
        with self._cursor("count rows") as cur:
            cur.execute(self._sql.count)
            row = cur.fetchone()
        return int(row["total"])

    # ── CREATE ────────────────────────────────────────────

    def add(self, entity: T) -> T:
        """
        Insert a new row.

        For store-assigned keys the generated id is read back and set on
        `entity`; for caller-assigned keys the entity's own id is inserted.

        Returns:
            The same entity, with its id populated.

        Raises:
            GeneratedKeyMissingError: The database returned no key (the insert is rolled back).
            BindingTypeError: A field does not match its column type.
        """
        desc = self.descriptor
        params = self._bind(entity)
        if not desc.store_assigned:
            entity_id = self._entity_id(entity)
            if entity_id is None or entity_id == "":
                raise BindingTypeError(desc.id_column.name, f"caller-assigned {desc.id_column.type.value}", entity_id)
            params = (desc.id_column.check(entity_id),) + params

        with self._cursor("add row") as cur:
            cur.execute(self._sql.insert, params)
            if desc.store_assigned:
                row = cur.fetchone()
                new_id = row[desc.id_column.name] if row else None
                if new_id is None:
                    logger.error(f"Insert into {desc.table} returned no {desc.id_column.name}")
                    raise GeneratedKeyMissingError(desc.table, desc.id_column.name)

        # only after the commit went through
        if desc.store_assigned:
            setattr(entity, desc.id_column.attr, new_id)
        logger.info(f"Added {desc.table} #{self._entity_id(entity)}")
        return entity

    # ── UPDATE ────────────────────────────────────────────

    def update(self, entity: T) -> bool:
        """
        Overwrite every value column of the row matching the entity's id.

        Returns:
            True if a row was updated, False if no row has that id.
        """
        entity_id = self.descriptor.id_column.check(self._entity_id(entity))
        params = self._bind(entity) + (entity_id,)
        with self._cursor(f"update {entity_id!r}") as cur:
            cur.execute(self._sql.update, params)
            updated = cur.rowcount > 0
        if updated:
            logger.info(f"Updated {self.descriptor.table} #{entity_id}")
        else:
            logger.warning(f"No {self.descriptor.table} row with id {entity_id!r} to update")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, entity_id) -> bool:
        """
        Delete the row with the given id. Deleting a missing row is a no-op.

        Returns:
            True if a row was deleted, False otherwise.
        """
        entity_id = self.descriptor.id_column.check(entity_id)
        with self._cursor(f"delete {entity_id!r}") as cur:
            cur.execute(self._sql.delete, (entity_id,))
            deleted = cur.rowcount > 0
        if deleted:
            logger.info(f"Deleted {self.descriptor.table} #{entity_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    def _entity_id(self, entity: T):
        return getattr(entity, self.descriptor.id_column.attr)

    def _bind(self, entity: T) -> tuple:
        """Run the binder and check each value against its column's declared type."""
        columns = self.descriptor.columns
        values = tuple(self._binder(entity))
        if len(values) != len(columns):
            raise BindingTypeError(
                f"{self.descriptor.table}.*", f"{len(columns)} bound values", values
            )
        return tuple(col.check(value) for col, value in zip(columns, values))

    @contextmanager
    def _cursor(self, action: str) -> Iterator:
        """
        Borrow a connection and open a dict cursor on it.

        Driver errors (including a failed commit) are logged and re-raised as
        ExecutionError; the provider rolls back and releases the connection
        on every path.
        """
        try:
            with self._provider() as conn:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    yield cur
        except psycopg2.Error as e:
            logger.error(f"Failed to {action} on {self.descriptor.table}: {e}")
            raise ExecutionError(self.descriptor.table, action, e) from e
