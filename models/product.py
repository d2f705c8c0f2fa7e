"""
models/product.py
-----------------
Domain model for products in the catalogue.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """
    Represents a product.

    Attributes:
        product_id: Database primary key (None for new records).
        product_name: Display name.
        supplier_id: Supplier reference, if known.
        category_id: Category reference, if known.
        quantity_per_unit: Packaging description (e.g. '10 boxes x 20 bags').
        unit_price: Price of one unit.
        units_in_stock: Units currently in stock.
        units_on_order: Units ordered but not yet received.
        reorder_level: Stock level that triggers a reorder.
        discontinued: Whether the product is no longer sold.
    """
    product_name: str = ""
    supplier_id: Optional[int] = None
    category_id: Optional[int] = None
    quantity_per_unit: Optional[str] = None
    unit_price: float = 0.0
    units_in_stock: int = 0
    units_on_order: int = 0
    reorder_level: int = 0
    discontinued: bool = False
    product_id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.product_id} {self.product_name} | {self.unit_price:.2f} | stock {self.units_in_stock}"
