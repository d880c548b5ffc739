"""Invoice Calculation Engine

Pure functions from an Invoice (or one LineItem) to money amounts. Every
consumer (totals endpoint, HTML preview, PDF export) goes through this module
so all of them agree to the last digit.

Amounts are Decimals. Nothing is cached: every call recomputes from the
invoice value it is given. Input is never validated here; negative
quantities or odd rates produce whatever the arithmetic yields.
"""

from decimal import Decimal
from typing import Iterable
from src.domain.invoice import DiscountType, Invoice, LineItem
from src.domain.totals import Totals

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_invoice_currency(amount: Decimal, item: LineItem, invoice_currency: str) -> Decimal:
    """Convert an amount in the item currency; the rate is only read for foreign items"""
    if item.currency == invoice_currency:
        return amount
    return amount * item.exchange_rate


def item_discount(item: LineItem) -> Decimal:
    """Discount of one item, in the item's own currency, never above its gross amount"""
    if item.discount_value <= 0:
        return ZERO

    gross = item.gross_amount
    if item.discount_type == DiscountType.PERCENTAGE:
        return gross * (item.discount_value / HUNDRED)
    return min(item.discount_value, gross)


def item_net_total(item: LineItem, invoice_currency: str) -> Decimal:
    net = item.gross_amount - item_discount(item)
    return to_invoice_currency(net, item, invoice_currency)


def subtotal(items: Iterable[LineItem], invoice_currency: str) -> Decimal:
    return sum((item_net_total(item, invoice_currency) for item in items), ZERO)


def item_discounts_total(items: Iterable[LineItem], invoice_currency: str) -> Decimal:
    # Each discount is converted on its own, not backed out of the net totals
    return sum(
        (to_invoice_currency(item_discount(item), item, invoice_currency) for item in items),
        ZERO,
    )


def discountable_base(invoice: Invoice) -> Decimal:
    """
    Amount the invoice-level discount is computed against

    With apply_invoice_discount_to_discounted_items the base is the subtotal
    (after item discounts). Otherwise only items without a discount of their
    own count, at their full gross amount.
    """
    if invoice.apply_invoice_discount_to_discounted_items:
        return subtotal(invoice.items, invoice.currency)

    return sum(
        (
            to_invoice_currency(item.gross_amount, item, invoice.currency)
            for item in invoice.items
            if item.discount_value <= 0
        ),
        ZERO,
    )


def invoice_discount(invoice: Invoice) -> Decimal:
    if invoice.discount_value <= 0:
        return ZERO

    base = discountable_base(invoice)
    if invoice.discount_type == DiscountType.PERCENTAGE:
        return base * (invoice.discount_value / HUNDRED)
    return min(invoice.discount_value, base)


def taxable_amount(invoice: Invoice) -> Decimal:
    # Not clamped at zero
    return subtotal(invoice.items, invoice.currency) - invoice_discount(invoice)


def tax(invoice: Invoice) -> Decimal:
    return taxable_amount(invoice) * (invoice.tax_rate / HUNDRED)


def grand_total(invoice: Invoice) -> Decimal:
    return taxable_amount(invoice) + tax(invoice)


def calculate_totals(invoice: Invoice) -> Totals:
    """All six aggregates of an invoice in one value"""
    return Totals(
        subtotal=subtotal(invoice.items, invoice.currency),
        item_discounts_total=item_discounts_total(invoice.items, invoice.currency),
        invoice_discount=invoice_discount(invoice),
        taxable_amount=taxable_amount(invoice),
        tax=tax(invoice),
        grand_total=grand_total(invoice),
    )
