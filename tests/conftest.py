"""
Shared fixtures: an in-memory stand-in for PostgreSQL that understands the
statement shapes rendered by repositories.descriptor.build_statements.
"""

import copy
import re
from contextlib import contextmanager

import psycopg2
import pytest

from models.customer import Customer
from models.product import Product
from models.shipper import Shipper
from repositories.customer_repo import CustomerRepository
from repositories.product_repo import ProductRepository
from repositories.shipper_repo import ShipperRepository

_COUNT = re.compile(r"^SELECT COUNT\(\*\) AS total FROM (\w+);$")
_SELECT_ALL = re.compile(r"^SELECT (.+) FROM (\w+) ORDER BY (\w+);$")
_SELECT_ONE = re.compile(r"^SELECT (.+) FROM (\w+) WHERE (\w+) = %s;$")
_INSERT = re.compile(r"^INSERT INTO (\w+) \((.+)\) VALUES \((.+)\)(?: RETURNING (\w+))?;$")
_UPDATE = re.compile(r"^UPDATE (\w+) SET (.+) WHERE (\w+) = %s;$")
_DELETE = re.compile(r"^DELETE FROM (\w+) WHERE (\w+) = %s;$")


def _names(column_list: str) -> list[str]:
    return [c.strip() for c in column_list.split(",")]


class FakeDatabase:
    """Tables keyed by primary key; SERIAL keys count up from 1 like PostgreSQL."""

    SCHEMA = {
        "customers": ("customer_id", False),
        "shippers": ("shipper_id", True),
        "products": ("product_id", True),
    }

    def __init__(self):
        self.tables = {name: {} for name in self.SCHEMA}
        self.sequences = {name: 0 for name in self.SCHEMA}
        self.executed = []
        self.fail_next = None
        self.drop_returning = False
        self.null_returning = False
        self.fail_commit = None
        self.duplicate_row = None
        self.commits = 0
        self.rollbacks = 0
        self.acquired = 0
        self.released = 0

    def execute(self, sql, params=()):
        self.executed.append((sql, tuple(params)))
        if self.fail_next is not None:
            error, self.fail_next = self.fail_next, None
            raise error

        if m := _COUNT.match(sql):
            return [{"total": len(self.tables[m[1]])}], 0
        if m := _SELECT_ALL.match(sql):
            cols, table = _names(m[1]), m[2]
            rows = [self.tables[table][k] for k in sorted(self.tables[table])]
            return [{c: row[c] for c in cols} for row in rows], len(rows)
        if m := _SELECT_ONE.match(sql):
            cols, table = _names(m[1]), m[2]
            row = self.tables[table].get(params[0])
            rows = [{c: row[c] for c in cols}] if row else []
            if rows and self.duplicate_row is not None:
                rows.append(dict(rows[0], **self.duplicate_row))
            return rows, len(rows)
        if m := _INSERT.match(sql):
            return self._insert(m[1], _names(m[2]), params, m[4])
        if m := _UPDATE.match(sql):
            table = m[1]
            assignments = [a.split("=")[0].strip() for a in m[2].split(",")]
            row = self.tables[table].get(params[-1])
            if row is None:
                return [], 0
            row.update(zip(assignments, params[:-1]))
            return [], 1
        if m := _DELETE.match(sql):
            return [], int(self.tables[m[1]].pop(params[0], None) is not None)
        raise psycopg2.ProgrammingError(f"fake database cannot run: {sql}")

    def _insert(self, table, cols, params, returning):
        id_column, serial = self.SCHEMA[table]
        row = dict(zip(cols, params))
        if serial:
            self.sequences[table] += 1
            row[id_column] = self.sequences[table]
        elif row[id_column] in self.tables[table]:
            raise psycopg2.IntegrityError(f"duplicate key value violates unique constraint on {table}")
        self.tables[table][row[id_column]] = row
        if returning and self.null_returning:
            return [{returning: None}], 1
        if returning and not self.drop_returning:
            return [{returning: row[returning]}], 1
        return [], 1


class FakeCursor:
    def __init__(self, db):
        self.db = db
        self.rows = []
        self.rowcount = -1
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def execute(self, sql, params=()):
        self.rows, self.rowcount = self.db.execute(sql, params)

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def fetchall(self):
        return list(self.rows)


class FakeConnection:
    def __init__(self, db):
        self.db = db
        self._snapshot = copy.deepcopy(db.tables)

    def cursor(self, cursor_factory=None):
        return FakeCursor(self.db)

    def commit(self):
        if self.db.fail_commit is not None:
            error, self.db.fail_commit = self.db.fail_commit, None
            raise error
        self.db.commits += 1
        self._snapshot = copy.deepcopy(self.db.tables)

    def rollback(self):
        self.db.rollbacks += 1
        self.db.tables = copy.deepcopy(self._snapshot)


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def provider(fake_db):
    """Mirrors db.connection.connection: commit on success, rollback on error, always release."""

    @contextmanager
    def _provide():
        fake_db.acquired += 1
        conn = FakeConnection(fake_db)
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            fake_db.released += 1

    return _provide


@pytest.fixture
def customer_repo(provider):
    return CustomerRepository(provider)


@pytest.fixture
def shipper_repo(provider):
    return ShipperRepository(provider)


@pytest.fixture
def product_repo(provider):
    return ProductRepository(provider)


@pytest.fixture
def test_customer():
    return Customer(
        customer_id="TSTID",
        company_name="Test Company",
        contact_name="Test Contact",
        contact_title="Owner",
        address="1 Test Street",
        city="Testville",
        region=None,
        postal_code="00000",
        country="Testland",
        phone="555-0100",
        fax=None,
    )


@pytest.fixture
def test_shipper():
    shipper = Shipper()
    shipper.company_name = "Test Shipper"
    shipper.phone = "555-0199"
    return shipper


@pytest.fixture
def test_product():
    return Product(
        product_name="Chai",
        supplier_id=1,
        category_id=1,
        quantity_per_unit="10 boxes x 20 bags",
        unit_price=18.0,
        units_in_stock=39,
        units_on_order=0,
        reorder_level=10,
        discontinued=False,
    )
