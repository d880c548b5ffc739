"""CreateInvoicePdf Use Case

Validates an invoice, calculates its totals and renders it to a PDF document.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.pdf_service import PdfService
from src.domain import calculator
from src.domain.invoice import Invoice
from .dtos import InvoicePdfDTO
from .validation import validate_invoice

logger = logging.getLogger(__name__)


class CreateInvoicePdf:
    """
    Use Case: Create invoice PDF

    Business Rules:
    1. Invoice number is required
    2. At least one line item is required
    3. Company logo, when given, must be a base64 image data URL
    4. Totals printed on the PDF come from the calculation engine

    Flow:
    1. Validate invoice
    2. Calculate totals
    3. Generate PDF using PDF service
    4. Return PDF bytes with a download file name
    """

    def __init__(self, pdf_service: PdfService):
        self.pdf_service = pdf_service

    async def execute(self, invoice: Invoice) -> Result[InvoicePdfDTO]:
        """
        Execute invoice PDF generation

        Args:
            invoice: Invoice to export

        Returns:
            Result[InvoicePdfDTO]: PDF bytes or a validation/rendering error
        """
        # Step 1: Validate request
        error = validate_invoice(invoice)
        if error:
            logger.warning(f"PDF rejected for invoice '{invoice.invoice_number}': {error.code}")
            return Return.err(error)

        try:
            # Step 2: Calculate totals
            totals = calculator.calculate_totals(invoice)

            # Step 3: Generate PDF
            pdf_bytes = self.pdf_service.generate_invoice_pdf(invoice=invoice, totals=totals)

        except Exception as e:
            logger.error(f"Error generating PDF for invoice {invoice.invoice_number}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_PDF_FAILED",
                    message="Failed to generate PDF",
                    reason=str(e),
                )
            )

        logger.info(
            f"Generated PDF for invoice {invoice.invoice_number} "
            f"({len(pdf_bytes)} bytes, total {totals.grand_total} {invoice.currency})"
        )

        # Step 4: Build response
        return Return.ok(
            InvoicePdfDTO(
                invoice_number=invoice.invoice_number,
                filename=f"invoice-{invoice.invoice_number}.pdf",
                pdf_bytes=pdf_bytes,
                grand_total=totals.grand_total,
            )
        )
