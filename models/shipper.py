"""
models/shipper.py
-----------------
Domain model for shipping companies.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Shipper:
    """A shipping company. `shipper_id` is None until the database assigns one."""
    company_name: str = ""
    phone: Optional[str] = None
    shipper_id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.shipper_id} {self.company_name} ({self.phone or 'no phone'})"
