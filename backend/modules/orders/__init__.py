"""
Orders module.

Customer orders, looked up by id or by the customer's email.

Public API:
- OrderRepository: Order access in privileged or restricted mode
- Order: Stored order
- OrderCreate / OrderUpdate: Write payloads
"""

from .models import Order, OrderCreate, OrderLine, OrderUpdate
from .repository import OrderRepository

__all__ = [
    # Repository
    "OrderRepository",
    # Models
    "Order",
    "OrderCreate",
    "OrderUpdate",
    "OrderLine",
]
