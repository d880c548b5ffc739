"""Invoice Renderer Interface

Defines the contract for rendering an invoice as a standalone HTML document.
"""

from abc import ABC, abstractmethod
from src.domain.invoice import Invoice
from src.domain.totals import Totals


class InvoiceRenderer(ABC):
    """Service interface for HTML invoice rendering"""

    @abstractmethod
    def render_html(self, invoice: Invoice, totals: Totals) -> str:
        """
        Render an invoice as a complete HTML document

        Args:
            invoice: Invoice to render
            totals: Totals computed by the calculation engine for this invoice

        Returns:
            HTML document as a string
        """
        pass
