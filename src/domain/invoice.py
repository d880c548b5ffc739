"""Invoice Domain Values

An Invoice is the aggregate root: header fields, parties, branding and an
ordered list of LineItems. Totals are never stored on it; they are derived
on demand by src.domain.calculator.
"""

import random
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from pydantic import Field
from src.domain.base import BaseModel, generate_uuid


class DiscountType(str, Enum):
    """How a discount value is interpreted"""
    PERCENTAGE = "percentage"
    AMOUNT = "amount"


class LineItem(BaseModel):
    """
    Line Item - One billable row on an invoice

    Domain Rules:
    - quantity and price are in the item's own currency
    - exchange_rate converts one unit of the item currency into the invoice
      currency; it is ignored when both currencies match (stored as 1)
    - a fixed-amount discount never takes the net line total below zero
    """

    id: str = Field(
        default_factory=generate_uuid,
        description="Opaque identifier, unique within an invoice"
    )

    description: str = Field(
        default="",
        description="Free-text description of the billed work or goods"
    )

    quantity: Decimal = Field(
        default=Decimal("1"),
        description="Quantity (fractional allowed)"
    )

    price: Decimal = Field(
        default=Decimal("0"),
        description="Unit price in the item currency"
    )

    currency: str = Field(
        default="USD",
        description="Currency code of the item (e.g., USD)"
    )

    exchange_rate: Decimal = Field(
        default=Decimal("1"),
        description="Invoice-currency units per one unit of the item currency"
    )

    discount_type: DiscountType = Field(
        default=DiscountType.PERCENTAGE,
        description="percentage or amount"
    )

    discount_value: Decimal = Field(
        default=Decimal("0"),
        description="Percent (0-100) or absolute amount in the item currency"
    )

    @property
    def gross_amount(self) -> Decimal:
        """quantity x price, before any discount, in the item currency"""
        return self.quantity * self.price

    @property
    def has_discount(self) -> bool:
        return self.discount_value > 0


class Invoice(BaseModel):
    """
    Invoice - Aggregate root for one invoice document

    Domain Rules:
    - items keeps presentation order only; order never affects totals
    - the editing helpers always keep at least one line item
    - discount_type/discount_value describe the invoice-level discount
    - apply_invoice_discount_to_discounted_items selects the discountable base
    """

    invoice_number: str = Field(default="", description="Invoice number (e.g., INV-1024)")
    issue_date: str = Field(default="", description="Issue date (YYYY-MM-DD)")
    due_date: str = Field(default="", description="Due date (YYYY-MM-DD)")

    company_name: str = Field(default="")
    company_logo: Optional[str] = Field(
        default=None,
        description="Company logo as a base64 image data URL"
    )
    company_details: str = Field(default="")

    from_name: str = Field(default="")
    from_email: str = Field(default="")
    from_address: str = Field(default="")
    to_name: str = Field(default="")
    to_email: str = Field(default="")
    to_address: str = Field(default="")

    items: List[LineItem] = Field(default_factory=list)

    notes: str = Field(default="")
    footer: str = Field(default="")

    currency: str = Field(default="USD", description="Invoice currency code")
    tax_rate: Decimal = Field(default=Decimal("0"), description="Tax rate in percent")

    discount_type: DiscountType = Field(default=DiscountType.PERCENTAGE)
    discount_value: Decimal = Field(default=Decimal("0"))
    apply_invoice_discount_to_discounted_items: bool = Field(
        default=True,
        description="Include items carrying their own discount in the invoice discount base"
    )

    @property
    def has_foreign_items(self) -> bool:
        return any(item.currency != self.currency for item in self.items)

    @classmethod
    def new_draft(
        cls,
        currency: str = "USD",
        footer: str = "Thank you for your business!",
        due_days: int = 30,
        today: Optional[date] = None,
    ) -> "Invoice":
        """Blank invoice with one empty line item, as shown when the form opens"""
        today = today or date.today()
        return cls(
            invoice_number=f"INV-{random.randint(0, 9999)}",
            issue_date=today.isoformat(),
            due_date=(today + timedelta(days=due_days)).isoformat(),
            items=[LineItem(currency=currency)],
            currency=currency,
            footer=footer,
        )

    def with_currency(self, currency: str) -> "Invoice":
        """
        Switch the invoice currency

        Items that were priced in the old invoice currency follow it to the
        new one (with rate 1); foreign items keep their currency and rate.
        """
        items = [
            item.model_copy(update={"currency": currency, "exchange_rate": Decimal("1")})
            if item.currency == self.currency
            else item
            for item in self.items
        ]
        return self.model_copy(update={"currency": currency, "items": items})

    def with_item_currency(self, item_id: str, currency: str) -> "Invoice":
        """Change one item's currency, resetting its rate when it matches the invoice"""
        def change(item: LineItem) -> LineItem:
            rate = Decimal("1") if currency == self.currency else item.exchange_rate
            return item.model_copy(update={"currency": currency, "exchange_rate": rate})

        return self._map_item(item_id, change)

    def with_item_updated(self, item_id: str, **changes) -> "Invoice":
        """Replace fields of one item; currency changes go through with_item_currency"""
        currency = changes.pop("currency", None)
        invoice = self._map_item(
            item_id, lambda item: LineItem.model_validate({**item.model_dump(), **changes})
        )
        if currency is not None:
            invoice = invoice.with_item_currency(item_id, currency)
        return invoice

    def with_item_added(self) -> "Invoice":
        return self.model_copy(
            update={"items": [*self.items, LineItem(currency=self.currency)]}
        )

    def with_item_removed(self, item_id: str) -> "Invoice":
        if len(self.items) <= 1:
            return self
        items = [item for item in self.items if item.id != item_id]
        return self.model_copy(update={"items": items})

    def _map_item(self, item_id: str, change) -> "Invoice":
        items = [change(item) if item.id == item_id else item for item in self.items]
        return self.model_copy(update={"items": items})
