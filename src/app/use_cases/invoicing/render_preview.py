"""RenderInvoicePreview Use Case

Renders an invoice as the standalone HTML document shown in the preview pane.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.invoice_renderer import InvoiceRenderer
from src.domain import calculator
from src.domain.invoice import Invoice
from .dtos import InvoicePreviewDTO
from .validation import validate_invoice

logger = logging.getLogger(__name__)


class RenderInvoicePreview:
    """
    Use Case: Render invoice HTML preview

    Business Rules:
    1. Invoice passes request validation (number, items, logo)
    2. Totals come from the calculation engine, never from the renderer

    Flow:
    1. Validate invoice
    2. Calculate totals
    3. Render HTML
    """

    def __init__(self, renderer: InvoiceRenderer):
        self.renderer = renderer

    async def execute(self, invoice: Invoice) -> Result[InvoicePreviewDTO]:
        error = validate_invoice(invoice)
        if error:
            logger.warning(f"Preview rejected for invoice '{invoice.invoice_number}': {error.code}")
            return Return.err(error)

        try:
            totals = calculator.calculate_totals(invoice)
            html = self.renderer.render_html(invoice, totals)
        except Exception as e:
            logger.error(f"Failed to render preview for invoice {invoice.invoice_number}: {e}")
            return Return.err(
                Error(
                    code="RENDER_PREVIEW_FAILED",
                    message="Failed to render invoice preview",
                    reason=str(e),
                )
            )

        return Return.ok(InvoicePreviewDTO(invoice_number=invoice.invoice_number, html=html))
