"""Request schemas for Invoice API

Pydantic models for validating incoming invoice payloads. The wire format
uses camelCase names (invoiceNumber, exchangeRate, ...); snake_case names
are accepted too.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.base import generate_uuid
from src.domain.invoice import DiscountType, Invoice, LineItem


def _number(value: Optional[Decimal]) -> Decimal:
    """JSON null in a numeric field counts as 0"""
    return Decimal("0") if value is None else value


class LineItemSchema(BaseModel):
    """One line item of an invoice payload"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(
        default_factory=generate_uuid,
        description="Opaque item identifier (generated when omitted)"
    )

    description: Optional[str] = Field(default="")

    quantity: Optional[Decimal] = Field(
        default=Decimal("1"),
        description="Quantity (fractional allowed)"
    )

    price: Optional[Decimal] = Field(
        default=Decimal("0"),
        description="Unit price in the item currency"
    )

    currency: Optional[str] = Field(
        default=None,
        description="Item currency (defaults to the invoice currency)"
    )

    exchange_rate: Optional[Decimal] = Field(
        default=Decimal("1"),
        description="Invoice-currency units per one unit of the item currency"
    )

    discount_type: DiscountType = Field(default=DiscountType.PERCENTAGE)

    discount_value: Optional[Decimal] = Field(
        default=Decimal("0"),
        description="Percent (0-100) or amount in the item currency"
    )

    def to_line_item(self, invoice_currency: str) -> LineItem:
        return LineItem(
            id=self.id,
            description=self.description or "",
            quantity=_number(self.quantity),
            price=_number(self.price),
            currency=self.currency or invoice_currency,
            exchange_rate=_number(self.exchange_rate),
            discount_type=self.discount_type,
            discount_value=_number(self.discount_value),
        )

    @classmethod
    def from_line_item(cls, item: LineItem) -> "LineItemSchema":
        return cls(**item.model_dump())


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for an invoice

    Used by POST /invoices/totals, /invoices/preview and /invoices/create.
    Required-field checks (invoice number, items, logo format) are done by
    the use cases so that they answer 400 with a readable message.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "invoiceNumber": "INV-1024",
                "date": "2025-06-06",
                "dueDate": "2025-07-06",
                "companyName": "Acme Studio",
                "fromName": "Acme Studio",
                "fromEmail": "billing@acme.test",
                "fromAddress": "1 Main St",
                "toName": "Globex",
                "toEmail": "ap@globex.test",
                "toAddress": "9 Side Rd",
                "items": [
                    {
                        "id": "1",
                        "description": "Consulting",
                        "quantity": 40,
                        "price": 150,
                        "currency": "USD",
                        "exchangeRate": 1,
                        "discountType": "percentage",
                        "discountValue": 0
                    }
                ],
                "taxRate": 8.5,
                "currency": "USD",
                "discountType": "percentage",
                "discountValue": 0,
                "applyInvoiceDiscountToDiscountedItems": True,
                "footer": "Thank you for your business!"
            }
        },
    )

    invoice_number: Optional[str] = Field(default="")
    date: Optional[str] = Field(
        default="",
        validation_alias=AliasChoices("date", "issueDate", "issue_date"),
        description="Issue date (YYYY-MM-DD)"
    )
    due_date: Optional[str] = Field(default="", description="Due date (YYYY-MM-DD)")

    company_name: Optional[str] = Field(default="")
    company_logo: Optional[str] = Field(
        default=None,
        description="Base64 image data URL (data:image/<type>;base64,<data>)"
    )
    company_details: Optional[str] = Field(default="")

    from_name: Optional[str] = Field(default="")
    from_email: Optional[str] = Field(default="")
    from_address: Optional[str] = Field(default="")
    to_name: Optional[str] = Field(default="")
    to_email: Optional[str] = Field(default="")
    to_address: Optional[str] = Field(default="")

    items: List[LineItemSchema] = Field(default_factory=list)

    notes: Optional[str] = Field(default="")
    footer: Optional[str] = Field(default="")

    currency: str = Field(default="USD", description="Invoice currency code")
    tax_rate: Optional[Decimal] = Field(default=Decimal("0"), description="Tax rate in percent")

    discount_type: DiscountType = Field(default=DiscountType.PERCENTAGE)
    discount_value: Optional[Decimal] = Field(default=Decimal("0"))
    apply_invoice_discount_to_discounted_items: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "applyInvoiceDiscountToDiscountedItems",
            "applyDiscountToAlreadyDiscountedItems",
            "apply_invoice_discount_to_discounted_items",
        ),
        serialization_alias="applyInvoiceDiscountToDiscountedItems",
    )

    def to_invoice(self) -> Invoice:
        """Convert the payload into a frozen domain Invoice"""
        return Invoice(
            invoice_number=self.invoice_number or "",
            issue_date=self.date or "",
            due_date=self.due_date or "",
            company_name=self.company_name or "",
            company_logo=self.company_logo or None,
            company_details=self.company_details or "",
            from_name=self.from_name or "",
            from_email=self.from_email or "",
            from_address=self.from_address or "",
            to_name=self.to_name or "",
            to_email=self.to_email or "",
            to_address=self.to_address or "",
            items=[item.to_line_item(self.currency) for item in self.items],
            notes=self.notes or "",
            footer=self.footer or "",
            currency=self.currency,
            tax_rate=_number(self.tax_rate),
            discount_type=self.discount_type,
            discount_value=_number(self.discount_value),
            apply_invoice_discount_to_discounted_items=self.apply_invoice_discount_to_discounted_items,
        )

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceRequestSchema":
        """Wire representation of a domain Invoice (used for drafts)"""
        data = invoice.model_dump(exclude={"issue_date", "items"})
        return cls(
            date=invoice.issue_date,
            items=[LineItemSchema.from_line_item(item) for item in invoice.items],
            **data,
        )
