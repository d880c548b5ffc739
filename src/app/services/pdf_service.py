"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice
from src.domain.totals import Totals


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders an invoice and its already computed totals to a PDF document.
    Implementations format values; they never recompute the aggregates.
    """

    @abstractmethod
    def generate_invoice_pdf(self, invoice: Invoice, totals: Totals) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice with header, parties and line items
            totals: Totals computed by the calculation engine for this invoice

        Returns:
            PDF document as bytes
        """
        pass
