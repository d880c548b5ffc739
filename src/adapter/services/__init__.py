from .pdf_service import ReportLabPdfService
from .html_renderer import HtmlInvoiceRenderer
from .formatting import (
    SUPPORTED_CURRENCIES,
    format_currency,
    format_date,
    format_number,
)

__all__ = [
    "ReportLabPdfService",
    "HtmlInvoiceRenderer",
    "SUPPORTED_CURRENCIES",
    "format_currency",
    "format_date",
    "format_number",
]
