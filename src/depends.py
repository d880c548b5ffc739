from config import ApplicationConfig
from src.adapter.services.html_renderer import HtmlInvoiceRenderer
from src.adapter.services.pdf_service import ReportLabPdfService
from src.app.services.invoice_renderer import InvoiceRenderer
from src.app.services.pdf_service import PdfService


def get_pdf_service() -> PdfService:
    return ReportLabPdfService(
        page_size=ApplicationConfig.PDF_PAGE_SIZE,
        margin_top_mm=ApplicationConfig.PDF_MARGIN_TOP_MM,
        margin_bottom_mm=ApplicationConfig.PDF_MARGIN_BOTTOM_MM,
        margin_left_mm=ApplicationConfig.PDF_MARGIN_LEFT_MM,
        margin_right_mm=ApplicationConfig.PDF_MARGIN_RIGHT_MM,
    )


def get_invoice_renderer() -> InvoiceRenderer:
    return HtmlInvoiceRenderer()
