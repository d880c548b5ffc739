"""CreateDraftInvoice Use Case

Builds the blank invoice a new form starts from.
"""

from datetime import date
from typing import Optional
from libs.result import Result, Return
from src.domain.invoice import Invoice


class CreateDraftInvoice:
    """
    Use Case: Create a blank draft invoice

    The draft carries a random INV-<n> number, today's date, a due date
    due_days later, one empty line item and the default footer.
    """

    def __init__(
        self,
        currency: str = "USD",
        footer: str = "Thank you for your business!",
        due_days: int = 30,
    ):
        self.currency = currency
        self.footer = footer
        self.due_days = due_days

    async def execute(self, today: Optional[date] = None) -> Result[Invoice]:
        return Return.ok(
            Invoice.new_draft(
                currency=self.currency,
                footer=self.footer,
                due_days=self.due_days,
                today=today,
            )
        )
