"""Invoice Totals Value

Derived from an Invoice by src.domain.calculator; never stored.
"""

from decimal import Decimal
from pydantic import Field
from src.domain.base import BaseModel


class Totals(BaseModel):
    """
    Totals - Aggregates of one invoice, all in the invoice currency

    Domain Rules:
    - subtotal is already net of item discounts
    - taxable_amount = subtotal - invoice_discount (not clamped at zero)
    - grand_total = taxable_amount + tax
    """

    subtotal: Decimal = Field(description="Sum of item net totals")
    item_discounts_total: Decimal = Field(description="Sum of item discounts")
    invoice_discount: Decimal = Field(description="Invoice-level discount")
    taxable_amount: Decimal = Field(description="Subtotal less invoice discount")
    tax: Decimal = Field(description="Tax on the taxable amount")
    grand_total: Decimal = Field(description="Taxable amount plus tax")
