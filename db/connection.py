"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so that concurrent callers can share
one bounded set of connections safely.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.errors import ConnectivityError
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None


def init_pool(
    min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: Optional[str] = None
) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        dsn: Connection string; defaults to ``config.DATABASE_URL``.

    Raises:
        ConnectivityError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise ConnectivityError(f"Cannot reach database: {e}") from e


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        ConnectivityError: If the pool was never initialized, is exhausted,
            or the store is unreachable.
    """
    if _pool is None:
        raise ConnectivityError("Database pool not initialized. Call init_pool() first.")
    try:
        return _pool.getconn()
    except (pool.PoolError, psycopg2.OperationalError) as e:
        logger.error(f"Failed to acquire a database connection: {e}")
        raise ConnectivityError(f"Cannot acquire a database connection: {e}") from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


@contextmanager
def connection() -> Iterator:
    """
    Borrow a pooled connection for the duration of a ``with`` block.

    Commits when the block exits normally, rolls back when it raises,
    and always hands the connection back to the pool.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        release_connection(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")
