"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .customer_repository import ICustomerRepository
from .product_repository import IProductRepository
from .purchase_repository import IPurchaseRepository
from .sale_repository import ISaleRepository

__all__ = [
    "ISaleRepository",
    "IProductRepository",
    "ICustomerRepository",
    "IPurchaseRepository",
]
