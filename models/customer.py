"""
models/customer.py
------------------
Domain model for customers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """
    Represents a customer company.

    Attributes:
        customer_id: Short alphanumeric code chosen by the caller (e.g. 'ALFKI').
        company_name: Registered company name.
        contact_name: Name of the main contact person.
        contact_title: Job title of the main contact person.
        address: Street address.
        city: City.
        region: Region or state.
        postal_code: Postal / ZIP code.
        country: Country.
        phone: Phone number.
        fax: Fax number.
    """
    customer_id: str = ""
    company_name: str = ""
    contact_name: Optional[str] = None
    contact_title: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.customer_id} | {self.company_name} | {self.city or '-'}, {self.country or '-'}"
