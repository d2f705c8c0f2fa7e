"""
main.py
-------
Demo driver for the Northwind data access layer.

Responsibilities:
    - Initialize the database connection pool and schema.
    - List every customer.
    - Walk a customer (caller-assigned id) and a shipper (database-assigned id)
      through add / find / update / delete.
    - List the products currently in the catalogue.
"""

from db.connection import close_pool, init_pool
from db.errors import DataAccessError
from db.init_db import create_tables
from models.customer import Customer
from models.product import Product
from models.shipper import Shipper
from repositories.customer_repo import CustomerRepository
from repositories.product_repo import ProductRepository
from repositories.shipper_repo import ShipperRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def customer_round_trip(repo: CustomerRepository) -> None:
    """Add, read back, rename and remove the TSTID test customer."""
    customer = Customer(
        customer_id="TSTID",
        company_name="Test Company",
        contact_name="Test Contact",
        contact_title="Owner",
        address="1 Test Street",
        city="Testville",
        postal_code="00000",
        country="Testland",
        phone="555-0100",
    )
    repo.add(customer)
    logger.info(f"Found after add: {repo.find('TSTID')}")

    customer.company_name = "Updated Test Company"
    repo.update(customer)
    logger.info(f"Found after update: {repo.find('TSTID')}")

    repo.delete("TSTID")
    logger.info(f"Found after delete: {repo.find('TSTID')}")


def shipper_round_trip(repo: ShipperRepository) -> None:
    """Add a shipper without an id and follow the id the database assigns."""
    shipper = Shipper()
    shipper.company_name = "Test Shipper"
    shipper.phone = "555-0199"
    repo.add(shipper)
    logger.info(f"Database assigned shipper id {shipper.shipper_id}")
    logger.info(f"Found after add: {repo.find(shipper.shipper_id)}")

    repo.delete(shipper.shipper_id)
    logger.info(f"Found after delete: {repo.find(shipper.shipper_id)}")


def list_customers(repo: CustomerRepository) -> list[Customer]:
    customers = repo.get_all()
    logger.info(f"{len(customers)} customers on file")
    for customer in customers:
        logger.info(f"  {customer}")
    return customers


def list_products(repo: ProductRepository) -> list[Product]:
    products = repo.get_all()
    logger.info(f"{len(products)} products in catalogue")
    for product in products:
        logger.info(f"  {product}")
    return products


def main() -> None:
    """Run the demo against the configured database."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Exercise each repository ───────────────────────
    try:
        customers = CustomerRepository()
        list_customers(customers)
        customer_round_trip(customers)
        shipper_round_trip(ShipperRepository())
        list_products(ProductRepository())
    except DataAccessError as e:
        logger.error(f"Demo aborted: {e}")
        raise
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    main()
