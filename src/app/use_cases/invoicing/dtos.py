"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for use case outputs.
"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class LineItemBreakdownDTO(BaseModel):
    """
    Per-item amounts, as shown in the item table

    discount is in the item currency; net_total is in the invoice currency.
    """

    id: str = Field(
        ...,
        description="Line item identifier"
    )

    currency: str = Field(
        ...,
        description="Currency code of the item"
    )

    discount: Decimal = Field(
        ...,
        description="Item discount in the item currency"
    )

    net_total: Decimal = Field(
        ...,
        description="Net item total converted to the invoice currency"
    )


class InvoiceTotalsResponseDTO(BaseModel):
    """
    Response DTO for totals calculation

    Returned by CalculateInvoiceTotals use case.
    """

    invoice_number: str = Field(
        ...,
        description="Invoice number"
    )

    currency: str = Field(
        ...,
        description="Invoice currency code, the denomination of every total"
    )

    subtotal: Decimal = Field(..., description="Sum of item net totals")
    item_discounts_total: Decimal = Field(..., description="Sum of item discounts")
    invoice_discount: Decimal = Field(..., description="Invoice-level discount")
    taxable_amount: Decimal = Field(..., description="Subtotal less invoice discount")
    tax: Decimal = Field(..., description="Tax on the taxable amount")
    grand_total: Decimal = Field(..., description="Taxable amount plus tax")

    items: List[LineItemBreakdownDTO] = Field(
        default_factory=list,
        description="Per-item breakdown in presentation order"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "invoice_number": "INV-1024",
                "currency": "USD",
                "subtotal": "6000",
                "item_discounts_total": "0",
                "invoice_discount": "0",
                "taxable_amount": "6000",
                "tax": "510.000",
                "grand_total": "6510.000",
                "items": [
                    {"id": "1", "currency": "USD", "discount": "0", "net_total": "6000"}
                ]
            }
        }
    )


class InvoicePreviewDTO(BaseModel):
    """
    Response DTO for HTML preview rendering

    Returned by RenderInvoicePreview use case.
    """

    invoice_number: str = Field(..., description="Invoice number")
    html: str = Field(..., description="Standalone HTML document")


class InvoicePdfDTO(BaseModel):
    """
    Response DTO for PDF generation

    Returned by CreateInvoicePdf use case.
    """

    invoice_number: str = Field(..., description="Invoice number")
    filename: str = Field(..., description="Suggested download file name")
    pdf_bytes: bytes = Field(..., description="Rendered PDF document")
    grand_total: Decimal = Field(..., description="Grand total printed on the document")
