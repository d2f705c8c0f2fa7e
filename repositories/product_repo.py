"""
repositories/product_repo.py
----------------------------
Data access layer for products. Ids are generated by the database.
"""

from typing import Any, Mapping

from db.connection import connection
from models.product import Product
from repositories.base_repo import BaseRepository, ConnectionProvider
from repositories.descriptor import Column, ColumnType, IdStrategy, TableDescriptor

PRODUCTS = TableDescriptor(
    table="products",
    id_column=Column("product_id", ColumnType.INTEGER, nullable=False),
    columns=(
        Column("product_name", ColumnType.TEXT, nullable=False),
        Column("supplier_id", ColumnType.INTEGER),
        Column("category_id", ColumnType.INTEGER),
        Column("quantity_per_unit", ColumnType.TEXT),
        Column("unit_price", ColumnType.REAL, nullable=False),
        Column("units_in_stock", ColumnType.INTEGER, nullable=False),
        Column("units_on_order", ColumnType.INTEGER, nullable=False),
        Column("reorder_level", ColumnType.INTEGER, nullable=False),
        Column("discontinued", ColumnType.BOOLEAN, nullable=False),
    ),
    id_strategy=IdStrategy.STORE_ASSIGNED,
)


def _row_to_product(row: Mapping[str, Any]) -> Product:
    """Convert a database row to a Product domain object."""
    return Product(
        product_id=row["product_id"],
        product_name=row["product_name"],
        supplier_id=row["supplier_id"],
        category_id=row["category_id"],
        quantity_per_unit=row["quantity_per_unit"],
        # NUMERIC comes back as Decimal
        unit_price=float(row["unit_price"] or 0),
        units_in_stock=row["units_in_stock"] or 0,
        units_on_order=row["units_on_order"] or 0,
        reorder_level=row["reorder_level"] or 0,
        discontinued=bool(row["discontinued"]),
    )


def _product_params(product: Product) -> tuple:
    return (
        product.product_name, product.supplier_id, product.category_id,
        product.quantity_per_unit, product.unit_price, product.units_in_stock,
        product.units_on_order, product.reorder_level, product.discontinued,
    )


class ProductRepository(BaseRepository[Product]):
    """Repository for CRUD operations on the products table."""

    def __init__(self, provider: ConnectionProvider = connection):
        super().__init__(PRODUCTS, _row_to_product, _product_params, provider)
