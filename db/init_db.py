"""
db/init_db.py
-------------
Creates the Northwind tables used by the repositories if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Customers: identified by a short code chosen by the caller
CREATE TABLE IF NOT EXISTS customers (
    customer_id     VARCHAR(5) PRIMARY KEY,
    company_name    VARCHAR(40) NOT NULL,
    contact_name    VARCHAR(30),
    contact_title   VARCHAR(30),
    address         VARCHAR(60),
    city            VARCHAR(15),
    region          VARCHAR(15),
    postal_code     VARCHAR(10),
    country         VARCHAR(15),
    phone           VARCHAR(24),
    fax             VARCHAR(24)
);

-- Shippers: identifier generated by the database
CREATE TABLE IF NOT EXISTS shippers (
    shipper_id      SERIAL PRIMARY KEY,
    company_name    VARCHAR(40) NOT NULL,
    phone           VARCHAR(24)
);

-- Products: identifier generated by the database
CREATE TABLE IF NOT EXISTS products (
    product_id          SERIAL PRIMARY KEY,
    product_name        VARCHAR(40) NOT NULL,
    supplier_id         INT,
    category_id         INT,
    quantity_per_unit   VARCHAR(20),
    unit_price          NUMERIC(10,2) DEFAULT 0,
    units_in_stock      SMALLINT DEFAULT 0,
    units_on_order      SMALLINT DEFAULT 0,
    reorder_level       SMALLINT DEFAULT 0,
    discontinued        BOOLEAN NOT NULL DEFAULT FALSE
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with connection() as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
