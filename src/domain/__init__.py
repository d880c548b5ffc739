from .base import BaseModel, generate_uuid
from .invoice import Invoice, LineItem, DiscountType
from .totals import Totals
from . import calculator

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Invoice",
    "LineItem",
    "DiscountType",
    "Totals",
    "calculator",
]
