"""ReportLab PDF Generation Service Implementation

Implements invoice PDF generation using ReportLab library.
"""

import base64
import html
import logging
from io import BytesIO
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
    Image,
)

from src.app.services.pdf_service import PdfService
from src.domain import calculator
from src.domain.invoice import DiscountType, Invoice
from src.domain.totals import Totals
from .formatting import format_currency, format_date, format_number

logger = logging.getLogger(__name__)

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}

LOGO_MAX_WIDTH = 50 * mm
LOGO_MAX_HEIGHT = 20 * mm


def _text(value: Optional[str]) -> str:
    """Escape user text for a Paragraph, keeping line breaks"""
    return html.escape(value or "").replace("\n", "<br/>")


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Lays the invoice out like the HTML preview: branding header, invoice
    number and dates, parties, item table, totals block, notes and footer.
    """

    def __init__(
        self,
        page_size: str = "A4",
        margin_top_mm: float = 20,
        margin_bottom_mm: float = 20,
        margin_left_mm: float = 15,
        margin_right_mm: float = 15,
    ):
        self.page_size = PAGE_SIZES.get(str(page_size).upper(), A4)
        self.margins = {
            "topMargin": margin_top_mm * mm,
            "bottomMargin": margin_bottom_mm * mm,
            "leftMargin": margin_left_mm * mm,
            "rightMargin": margin_right_mm * mm,
        }

    def generate_invoice_pdf(self, invoice: Invoice, totals: Totals) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice with header, parties and line items
            totals: Totals computed by the calculation engine for this invoice

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=self.page_size, **self.margins)

        styles = getSampleStyleSheet()
        elements = []

        # Custom styles
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=26,
            spaceAfter=4,
            textColor=colors.HexColor("#111111"),
        )
        company_style = ParagraphStyle(
            "CompanyStyle",
            parent=styles["Normal"],
            fontSize=14,
            fontName="Helvetica-Bold",
            alignment=2,
        )
        muted_style = ParagraphStyle(
            "MutedStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=colors.HexColor("#666666"),
        )
        muted_right_style = ParagraphStyle("MutedRightStyle", parent=muted_style, alignment=2)
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        bold_style = ParagraphStyle(
            "BoldStyle",
            parent=styles["Normal"],
            fontSize=11,
            fontName="Helvetica-Bold",
            spaceAfter=4,
        )
        cell_style = ParagraphStyle("CellStyle", parent=styles["Normal"], fontSize=9)
        cell_right_style = ParagraphStyle("CellRightStyle", parent=cell_style, alignment=2)

        width = self.page_size[0] - self.margins["leftMargin"] - self.margins["rightMargin"]

        # Header - Logo and company block
        logo = self._logo(invoice.company_logo)
        company_block = []
        if invoice.company_name:
            company_block.append(Paragraph(_text(invoice.company_name), company_style))
        if invoice.company_details:
            company_block.append(Paragraph(_text(invoice.company_details), muted_right_style))

        header_table = Table([[logo or "", company_block or ""]], colWidths=[width / 2, width / 2])
        header_table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LINEBELOW", (0, 0), (-1, 0), 0.5, colors.HexColor("#E5E5E5")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 12),
                ]
            )
        )
        elements.append(header_table)
        elements.append(Spacer(1, 8 * mm))

        # Invoice number and dates
        info_table = Table(
            [
                [
                    [
                        Paragraph("INVOICE", title_style),
                        Paragraph(f"#{_text(invoice.invoice_number)}", muted_style),
                    ],
                    [
                        Paragraph(f"Date: {_text(format_date(invoice.issue_date))}", muted_right_style),
                        Paragraph(f"Due Date: {_text(format_date(invoice.due_date))}", muted_right_style),
                    ],
                ]
            ],
            colWidths=[width / 2, width / 2],
        )
        info_table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        elements.append(info_table)
        elements.append(Spacer(1, 8 * mm))

        # Parties
        def party(title: str, name: str, email: str, address: str) -> list:
            return [
                Paragraph(title, bold_style),
                Paragraph(_text(name), normal_style),
                Paragraph(_text(email), muted_style),
                Paragraph(_text(address), muted_style),
            ]

        parties_table = Table(
            [
                [
                    party("From:", invoice.from_name, invoice.from_email, invoice.from_address),
                    party("To:", invoice.to_name, invoice.to_email, invoice.to_address),
                ]
            ],
            colWidths=[width / 2, width / 2],
        )
        parties_table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        elements.append(parties_table)
        elements.append(Spacer(1, 8 * mm))

        # Line Items Table
        show_currency = invoice.has_foreign_items
        header = ["Description", "Quantity", "Price"]
        if show_currency:
            header.append("Currency")
        header += ["Discount", "Amount"]

        line_data: List[list] = [header]
        for item in invoice.items:
            foreign = item.currency != invoice.currency
            row = [
                Paragraph(_text(item.description), cell_style),
                format_number(item.quantity),
                format_currency(item.price, item.currency),
            ]
            if show_currency:
                currency_cell = _text(item.currency)
                if foreign:
                    currency_cell += f'<br/><font size="7" color="#666666">Rate: {format_number(item.exchange_rate)}</font>'
                row.append(Paragraph(currency_cell, cell_right_style))

            if item.has_discount:
                if item.discount_type == DiscountType.PERCENTAGE:
                    row.append(f"{format_number(item.discount_value)}%")
                else:
                    row.append(format_currency(item.discount_value, item.currency))
            else:
                row.append("-")

            amount = _text(format_currency(calculator.item_net_total(item, invoice.currency), invoice.currency))
            if foreign:
                own_net = item.gross_amount - calculator.item_discount(item)
                amount = (
                    f'<font size="7" color="#666666">{_text(format_currency(own_net, item.currency))}</font>'
                    f"<br/>{amount}"
                )
            row.append(Paragraph(amount, cell_right_style))
            line_data.append(row)

        numeric_width = 25 * mm
        numeric_columns = len(header) - 1
        col_widths = [width - numeric_width * numeric_columns] + [numeric_width] * numeric_columns

        line_table = Table(line_data, colWidths=col_widths, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (1, 0), (-1, 0), "RIGHT"),
                    ("LINEBELOW", (0, 0), (-1, 0), 1, colors.HexColor("#E5E5E5")),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LINEBELOW", (0, 1), (-1, -1), 0.5, colors.HexColor("#E5E5E5")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ("TOPPADDING", (0, 0), (-1, -1), 6),
                ]
            )
        )

        elements.append(line_table)
        elements.append(Spacer(1, 6 * mm))

        # Totals
        currency = invoice.currency
        total_data = [["Subtotal:", format_currency(totals.subtotal, currency)]]
        if totals.item_discounts_total > 0:
            total_data.append(
                ["Item Discounts:", f"-{format_currency(totals.item_discounts_total, currency)}"]
            )
        if invoice.discount_value > 0:
            label = "Invoice Discount"
            if invoice.discount_type == DiscountType.PERCENTAGE:
                label += f" ({format_number(invoice.discount_value)}%)"
            label += ":"
            if not invoice.apply_invoice_discount_to_discounted_items:
                label += '<br/><font size="8" color="#666666">(Applied only to non-discounted items)</font>'
            total_data.append(
                [Paragraph(label, normal_style), f"-{format_currency(totals.invoice_discount, currency)}"]
            )
        total_data.append([f"Tax ({format_number(invoice.tax_rate)}%):", format_currency(totals.tax, currency)])
        total_data.append(["Total:", format_currency(totals.grand_total, currency)])

        total_table = Table(total_data, colWidths=[55 * mm, 35 * mm], hAlign="RIGHT")
        total_table.setStyle(
            TableStyle(
                [
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, -1), (-1, -1), 12),
                    ("LINEABOVE", (0, -1), (-1, -1), 1, colors.HexColor("#E5E5E5")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    ("TOPPADDING", (0, -1), (-1, -1), 8),
                ]
            )
        )

        elements.append(total_table)
        elements.append(Spacer(1, 10 * mm))

        # Notes
        if invoice.notes:
            elements.append(Paragraph("Notes:", bold_style))
            elements.append(Paragraph(_text(invoice.notes), muted_style))
            elements.append(Spacer(1, 10 * mm))

        # Footer note
        if invoice.footer:
            footer_note = Paragraph(
                _text(invoice.footer),
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=9,
                    alignment=1,
                    textColor=colors.HexColor("#666666"),
                ),
            )
            elements.append(Spacer(1, 10 * mm))
            elements.append(footer_note)

        # Build PDF
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    def _logo(self, data_url: Optional[str]) -> Optional[Image]:
        """Decode a base64 image data URL into a scaled Image flowable"""
        if not data_url or "," not in data_url:
            return None

        try:
            payload = data_url.split(",", 1)[1].rstrip("=")
            raw = base64.b64decode(payload + "=" * (-len(payload) % 4))
            img_width, img_height = ImageReader(BytesIO(raw)).getSize()
        except Exception as e:
            # SVG and other formats ReportLab cannot rasterize
            logger.warning(f"Skipping company logo that could not be loaded: {e}")
            return None

        scale = min(LOGO_MAX_WIDTH / img_width, LOGO_MAX_HEIGHT / img_height, 1)
        return Image(BytesIO(raw), width=img_width * scale, height=img_height * scale, hAlign="LEFT")
