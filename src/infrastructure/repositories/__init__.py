"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer, reading rows from the data
backend and mapping them onto domain entities.
"""

from .customer_repository import CustomerRepository
from .product_repository import ProductRepository
from .purchase_repository import PurchaseRepository
from .sale_repository import SaleRepository

__all__ = [
    "SaleRepository",
    "ProductRepository",
    "CustomerRepository",
    "PurchaseRepository",
]
