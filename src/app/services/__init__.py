from .pdf_service import PdfService
from .invoice_renderer import InvoiceRenderer

__all__ = [
    "PdfService",
    "InvoiceRenderer",
]
