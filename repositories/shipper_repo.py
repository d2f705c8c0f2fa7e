"""
repositories/shipper_repo.py
----------------------------
Data access layer for shippers. Ids are generated by the database.
"""

from typing import Any, Mapping

from db.connection import connection
from models.shipper import Shipper
from repositories.base_repo import BaseRepository, ConnectionProvider
from repositories.descriptor import Column, ColumnType, IdStrategy, TableDescriptor

SHIPPERS = TableDescriptor(
    table="shippers",
    id_column=Column("shipper_id", ColumnType.INTEGER, nullable=False),
    columns=(
        Column("company_name", ColumnType.TEXT, nullable=False),
        Column("phone", ColumnType.TEXT),
    ),
    id_strategy=IdStrategy.STORE_ASSIGNED,
)


def _row_to_shipper(row: Mapping[str, Any]) -> Shipper:
    """Convert a database row to a Shipper domain object."""
    return Shipper(
        shipper_id=row["shipper_id"],
        company_name=row["company_name"],
        phone=row["phone"],
    )


def _shipper_params(shipper: Shipper) -> tuple:
    return (shipper.company_name, shipper.phone)


class ShipperRepository(BaseRepository[Shipper]):
    """Repository for CRUD operations on the shippers table."""

    def __init__(self, provider: ConnectionProvider = connection):
        super().__init__(SHIPPERS, _row_to_shipper, _shipper_params, provider)
