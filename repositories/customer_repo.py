"""
repositories/customer_repo.py
-----------------------------
Data access layer for customers.
Customer ids are short codes chosen by the caller, so they are part of every INSERT.
"""

from typing import Any, Mapping

from db.connection import connection
from models.customer import Customer
from repositories.base_repo import BaseRepository, ConnectionProvider
from repositories.descriptor import Column, ColumnType, IdStrategy, TableDescriptor

CUSTOMERS = TableDescriptor(
    table="customers",
    id_column=Column("customer_id", ColumnType.TEXT, nullable=False),
    columns=(
        Column("company_name", ColumnType.TEXT, nullable=False),
        Column("contact_name", ColumnType.TEXT),
        Column("contact_title", ColumnType.TEXT),
        Column("address", ColumnType.TEXT),
        Column("city", ColumnType.TEXT),
        Column("region", ColumnType.TEXT),
        Column("postal_code", ColumnType.TEXT),
        Column("country", ColumnType.TEXT),
        Column("phone", ColumnType.TEXT),
        Column("fax", ColumnType.TEXT),
    ),
    id_strategy=IdStrategy.CALLER_ASSIGNED,
)


def _row_to_customer(row: Mapping[str, Any]) -> Customer:
    """Convert a database row to a Customer domain object."""
    return Customer(
        # CHAR(5) columns in stock Northwind dumps are right-padded with blanks
        customer_id=row["customer_id"].rstrip(),
        company_name=row["company_name"],
        contact_name=row["contact_name"],
        contact_title=row["contact_title"],
        address=row["address"],
        city=row["city"],
        region=row["region"],
        postal_code=row["postal_code"],
        country=row["country"],
        phone=row["phone"],
        fax=row["fax"],
    )


def _customer_params(customer: Customer) -> tuple:
    return (
        customer.company_name, customer.contact_name, customer.contact_title,
        customer.address, customer.city, customer.region, customer.postal_code,
        customer.country, customer.phone, customer.fax,
    )


class CustomerRepository(BaseRepository[Customer]):
    """Repository for CRUD operations on the customers table."""

    def __init__(self, provider: ConnectionProvider = connection):
        super().__init__(CUSTOMERS, _row_to_customer, _customer_params, provider)
