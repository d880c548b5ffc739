"""CalculateInvoiceTotals Use Case

Computes invoice totals and the per-item breakdown without rendering anything.
"""

from libs.result import Result, Return
from src.domain import calculator
from src.domain.invoice import Invoice
from .dtos import InvoiceTotalsResponseDTO, LineItemBreakdownDTO


class CalculateInvoiceTotals:
    """
    Use Case: Calculate invoice totals

    Read-only and stateless; no validation beyond what the request schema
    enforces. An invoice without items yields all-zero totals.
    """

    async def execute(self, invoice: Invoice) -> Result[InvoiceTotalsResponseDTO]:
        """
        Calculate totals for an invoice

        Args:
            invoice: Invoice value to calculate

        Returns:
            Result[InvoiceTotalsResponseDTO]: Totals and item breakdown
        """
        totals = calculator.calculate_totals(invoice)

        breakdown = [
            LineItemBreakdownDTO(
                id=item.id,
                currency=item.currency,
                discount=calculator.item_discount(item),
                net_total=calculator.item_net_total(item, invoice.currency),
            )
            for item in invoice.items
        ]

        return Return.ok(
            InvoiceTotalsResponseDTO(
                invoice_number=invoice.invoice_number,
                currency=invoice.currency,
                subtotal=totals.subtotal,
                item_discounts_total=totals.item_discounts_total,
                invoice_discount=totals.invoice_discount,
                taxable_amount=totals.taxable_amount,
                tax=totals.tax,
                grand_total=totals.grand_total,
                items=breakdown,
            )
        )
