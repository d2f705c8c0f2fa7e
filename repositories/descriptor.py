"""
repositories/descriptor.py
--------------------------
Static per-table metadata that drives SQL construction in BaseRepository.
A descriptor names the table, its identifier column, the ordered value
columns and how identifiers are assigned.
"""

import re
from dataclasses import dataclass
from enum import Enum

from db.errors import BindingTypeError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class IdStrategy(Enum):
    """Who supplies the primary key value."""
    CALLER_ASSIGNED = "caller"  # part of the INSERT column list
    STORE_ASSIGNED = "store"    # generated on INSERT, read back with RETURNING


class ColumnType(Enum):
    """Semantic type of a column, used to check bound parameter values."""
    TEXT = "text"
    INTEGER = "integer"
    REAL = "real"
    BOOLEAN = "boolean"

    def accepts(self, value: object) -> bool:
        # bool is an int subclass; it is only valid for BOOLEAN columns
        if isinstance(value, bool):
            return self is ColumnType.BOOLEAN
        if self is ColumnType.TEXT:
            return isinstance(value, str)
        if self is ColumnType.INTEGER:
            return isinstance(value, int)
        if self is ColumnType.REAL:
            return isinstance(value, (int, float))
        return False


@dataclass(frozen=True)
class Column:
    """One table column and the entity attribute it maps to."""
    name: str
    type: ColumnType
    attr: str = ""
    nullable: bool = True

    def __post_init__(self):
        if not self.attr:
            object.__setattr__(self, "attr", self.name)

    def check(self, value: object) -> object:
        """Return `value` unchanged, or raise BindingTypeError if it does not fit this column."""
        if value is None:
            if self.nullable:
                return None
            raise BindingTypeError(self.name, f"non-null {self.type.value}", value)
        if not self.type.accepts(value):
            raise BindingTypeError(self.name, self.type.value, value)
        return value


@dataclass(frozen=True)
class TableDescriptor:
    """
    Immutable description of one entity table.

    Attributes:
        table: Table name.
        id_column: The primary key column.
        columns: Value columns (everything except the primary key), in
            the order the binder returns their values.
        id_strategy: Whether the caller or the database supplies the key.
    """
    table: str
    id_column: Column
    columns: tuple[Column, ...]
    id_strategy: IdStrategy = IdStrategy.STORE_ASSIGNED

    def __post_init__(self):
        if not self.columns:
            raise ValueError(f"Descriptor for '{self.table}' has no value columns")
        names = [self.table, self.id_column.name] + [c.name for c in self.columns]
        for name in names:
            if not _IDENTIFIER.match(name):
                raise ValueError(f"Not a plain SQL identifier: {name!r}")
        column_names = names[1:]
        if len(set(column_names)) != len(column_names):
            raise ValueError(f"Duplicate column names in descriptor for '{self.table}'")
        if self.id_strategy is IdStrategy.STORE_ASSIGNED and self.id_column.type is not ColumnType.INTEGER:
            raise ValueError(f"Store-assigned key '{self.id_column.name}' must be an INTEGER column")

    @property
    def store_assigned(self) -> bool:
        return self.id_strategy is IdStrategy.STORE_ASSIGNED

    @property
    def select_columns(self) -> tuple[Column, ...]:
        """Identifier first, then the value columns."""
        return (self.id_column,) + self.columns

    @property
    def insert_columns(self) -> tuple[Column, ...]:
        """Columns listed in INSERT; never contains a store-assigned key."""
        if self.store_assigned:
            return self.columns
        return (self.id_column,) + self.columns


@dataclass(frozen=True)
class Statements:
    """SQL text prepared once per descriptor."""
    select_all: str
    select_by_id: str
    insert: str
    update: str
    delete: str
    count: str


def build_statements(descriptor: TableDescriptor) -> Statements:
    """Render the CRUD statements for a descriptor using psycopg2 `%s` placeholders."""
    table = descriptor.table
    id_name = descriptor.id_column.name
    select_list = ", ".join(c.name for c in descriptor.select_columns)
    insert_cols = descriptor.insert_columns
    insert = (
        f"INSERT INTO {table} ({', '.join(c.name for c in insert_cols)}) "
        f"VALUES ({', '.join(['%s'] * len(insert_cols))})"
    )
    if descriptor.store_assigned:
        insert += f" RETURNING {id_name}"
    assignments = ", ".join(f"{c.name} = %s" for c in descriptor.columns)
    return Statements(
        select_all=f"SELECT {select_list} FROM {table} ORDER BY {id_name};",
        select_by_id=f"SELECT {select_list} FROM {table} WHERE {id_name} = %s;",
        insert=insert + ";",
        update=f"UPDATE {table} SET {assignments} WHERE {id_name} = %s;",
        delete=f"DELETE FROM {table} WHERE {id_name} = %s;",
        count=f"SELECT COUNT(*) AS total FROM {table};",
    )
