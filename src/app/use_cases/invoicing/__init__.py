"""Invoicing use cases"""
from .calculate_totals import CalculateInvoiceTotals
from .render_preview import RenderInvoicePreview
from .create_invoice_pdf import CreateInvoicePdf
from .create_draft import CreateDraftInvoice
from .validation import validate_invoice, is_valid_base64_image
from .dtos import (
    LineItemBreakdownDTO,
    InvoiceTotalsResponseDTO,
    InvoicePreviewDTO,
    InvoicePdfDTO,
)

__all__ = [
    "CalculateInvoiceTotals",
    "RenderInvoicePreview",
    "CreateInvoicePdf",
    "CreateDraftInvoice",
    "validate_invoice",
    "is_valid_base64_image",
    "LineItemBreakdownDTO",
    "InvoiceTotalsResponseDTO",
    "InvoicePreviewDTO",
    "InvoicePdfDTO",
]
