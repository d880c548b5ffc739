"""HTML Invoice Renderer

Renders an invoice as a standalone HTML document (the preview pane layout).
"""

import html
from typing import List
from src.app.services.invoice_renderer import InvoiceRenderer
from src.domain import calculator
from src.domain.invoice import DiscountType, Invoice, LineItem
from src.domain.totals import Totals
from .formatting import format_currency, format_date, format_number

STYLESHEET = """
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
       line-height: 1.5; color: #333; background: white; }
.invoice { max-width: 800px; margin: 0 auto; padding: 32px; }
.header { display: flex; justify-content: space-between; align-items: flex-start; margin-bottom: 24px; }
.logo { max-height: 64px; max-width: 200px; object-fit: contain; }
.company-details { text-align: right; }
.company-name { font-size: 20px; font-weight: bold; }
.company-info { color: #666; white-space: pre-line; }
.separator { border-top: 1px solid #e5e5e5; margin: 24px 0; }
.invoice-info { display: flex; justify-content: space-between; margin-bottom: 32px; }
.invoice-title { font-size: 32px; font-weight: bold; margin-bottom: 8px; }
.invoice-number { color: #666; }
.dates { text-align: right; }
.parties { display: grid; grid-template-columns: 1fr 1fr; gap: 32px; margin-bottom: 32px; }
.party h3 { font-weight: 600; margin-bottom: 8px; }
.party-name { font-weight: 500; }
.party-info { color: #666; white-space: pre-line; }
.items-table { width: 100%; border-collapse: collapse; margin-bottom: 32px; }
.items-table th { text-align: left; padding: 8px 0; border-bottom: 1px solid #e5e5e5; font-weight: 600; }
.items-table th:not(:first-child) { text-align: right; }
.items-table td { padding: 8px 0; border-bottom: 1px solid #e5e5e5; }
.currency-info, .discount-info { font-size: 12px; color: #666; display: block; }
.totals { display: flex; justify-content: flex-end; margin-bottom: 32px; }
.totals-table { width: 300px; }
.totals-row { display: flex; justify-content: space-between; padding: 8px 0; }
.totals-row.border-top { border-top: 1px solid #e5e5e5; margin-top: 8px; padding-top: 16px; }
.totals-row.total { font-weight: bold; font-size: 18px; }
.discount-text { font-weight: 600; color: #000; }
.discount-note { font-size: 12px; color: #666; font-weight: normal; }
.notes { margin-bottom: 32px; }
.notes h3 { font-size: 18px; font-weight: 600; margin-bottom: 8px; }
.notes-content { color: #666; white-space: pre-line; }
.footer { text-align: center; color: #666; font-size: 14px; margin-top: 64px; padding-top: 16px;
          border-top: 1px solid #e5e5e5; }
@media print { .invoice { padding: 0; margin: 0; } }
"""


def _e(value) -> str:
    return html.escape(str(value or ""))


class HtmlInvoiceRenderer(InvoiceRenderer):
    """
    f-string/html.escape implementation of InvoiceRenderer

    Every piece of user-supplied text is escaped. Money values come from the
    calculation engine and are only formatted here.
    """

    def render_html(self, invoice: Invoice, totals: Totals) -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Invoice {_e(invoice.invoice_number)}</title>
  <style>{STYLESHEET}</style>
</head>
<body>
  <div class="invoice">
    {self._header(invoice)}
    <div class="separator"></div>
    <div class="invoice-info">
      <div>
        <h1 class="invoice-title">INVOICE</h1>
        <p class="invoice-number">#{_e(invoice.invoice_number)}</p>
      </div>
      <div class="dates">
        <p>Date: {_e(format_date(invoice.issue_date))}</p>
        <p>Due Date: {_e(format_date(invoice.due_date))}</p>
      </div>
    </div>
    <div class="parties">
      {self._party("From:", invoice.from_name, invoice.from_email, invoice.from_address)}
      {self._party("To:", invoice.to_name, invoice.to_email, invoice.to_address)}
    </div>
    {self._items_table(invoice)}
    {self._totals(invoice, totals)}
    {self._notes(invoice)}
    <div class="footer">
      <p>{_e(invoice.footer)}</p>
    </div>
  </div>
</body>
</html>
"""

    def _header(self, invoice: Invoice) -> str:
        logo = ""
        if invoice.company_logo:
            logo = f'<img src="{html.escape(invoice.company_logo, quote=True)}" alt="Company Logo" class="logo" />'

        details: List[str] = []
        if invoice.company_name:
            details.append(f'<div class="company-name">{_e(invoice.company_name)}</div>')
        if invoice.company_details:
            details.append(f'<div class="company-info">{_e(invoice.company_details)}</div>')

        return (
            '<div class="header">'
            f'<div class="logo-section">{logo}</div>'
            f'<div class="company-details">{"".join(details)}</div>'
            "</div>"
        )

    def _party(self, title: str, name: str, email: str, address: str) -> str:
        return (
            '<div class="party">'
            f"<h3>{title}</h3>"
            f'<div class="party-name">{_e(name)}</div>'
            f'<div class="party-info">{_e(email)}</div>'
            f'<div class="party-info">{_e(address)}</div>'
            "</div>"
        )

    def _items_table(self, invoice: Invoice) -> str:
        show_currency = invoice.has_foreign_items

        headers = ["Description", "Quantity", "Price"]
        if show_currency:
            headers.append("Currency")
        headers += ["Discount", "Amount"]
        head = "".join(f"<th>{h}</th>" for h in headers)

        rows = "".join(self._item_row(invoice, item, show_currency) for item in invoice.items)
        return (
            '<table class="items-table">'
            f"<thead><tr>{head}</tr></thead>"
            f"<tbody>{rows}</tbody>"
            "</table>"
        )

    def _item_row(self, invoice: Invoice, item: LineItem, show_currency: bool) -> str:
        foreign = item.currency != invoice.currency
        right = ' style="text-align: right;"'

        cells = [
            f"<td>{_e(item.description)}</td>",
            f"<td{right}>{format_number(item.quantity)}</td>",
            f"<td{right}>{_e(format_currency(item.price, item.currency))}</td>",
        ]

        if show_currency:
            rate = f'<span class="currency-info">Rate: {format_number(item.exchange_rate)}</span>' if foreign else ""
            cells.append(f"<td{right}>{_e(item.currency)}{rate}</td>")

        if item.has_discount:
            if item.discount_type == DiscountType.PERCENTAGE:
                label = f"{format_number(item.discount_value)}%"
            else:
                label = format_currency(item.discount_value, item.currency)
            cells.append(f'<td{right}><span class="discount-info">{_e(label)}</span></td>')
        else:
            cells.append(f"<td{right}>-</td>")

        amount = ""
        if foreign:
            own_net = item.gross_amount - calculator.item_discount(item)
            amount = f'<span class="currency-info">{_e(format_currency(own_net, item.currency))}</span>'
        net_total = calculator.item_net_total(item, invoice.currency)
        amount += _e(format_currency(net_total, invoice.currency))
        cells.append(f"<td{right}>{amount}</td>")

        return f"<tr>{''.join(cells)}</tr>"

    def _totals(self, invoice: Invoice, totals: Totals) -> str:
        currency = invoice.currency
        rows = [self._totals_row("Subtotal:", format_currency(totals.subtotal, currency))]

        if totals.item_discounts_total > 0:
            rows.append(
                self._totals_row(
                    '<span class="discount-text">Item Discounts:</span>',
                    f"-{format_currency(totals.item_discounts_total, currency)}",
                )
            )

        if invoice.discount_value > 0:
            label = "Invoice Discount"
            if invoice.discount_type == DiscountType.PERCENTAGE:
                label += f" ({format_number(invoice.discount_value)}%)"
            label += ":"
            if not invoice.apply_invoice_discount_to_discounted_items:
                label += '<br><span class="discount-note">(Applied only to non-discounted items)</span>'
            rows.append(
                self._totals_row(
                    f'<span class="discount-text">{label}</span>',
                    f"-{format_currency(totals.invoice_discount, currency)}",
                )
            )

        rows.append(
            self._totals_row(
                f"Tax ({format_number(invoice.tax_rate)}%):",
                format_currency(totals.tax, currency),
            )
        )
        rows.append(
            self._totals_row(
                "Total:",
                format_currency(totals.grand_total, currency),
                css_class="totals-row border-top total",
            )
        )

        return f'<div class="totals"><div class="totals-table">{"".join(rows)}</div></div>'

    def _totals_row(self, label: str, value: str, css_class: str = "totals-row") -> str:
        return f'<div class="{css_class}"><span>{label}</span><span>{_e(value)}</span></div>'

    def _notes(self, invoice: Invoice) -> str:
        if not invoice.notes:
            return ""
        return (
            '<div class="notes">'
            "<h3>Notes:</h3>"
            f'<div class="notes-content">{_e(invoice.notes)}</div>'
            "</div>"
        )
