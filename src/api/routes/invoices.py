"""Invoice API Routes

FastAPI routes for invoice drafts, totals, HTML preview and PDF export.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, Response

from config import ApplicationConfig
from src.api.error import ClientError
from src.api.schemas.invoice_request import InvoiceRequestSchema
from src.app.services.invoice_renderer import InvoiceRenderer
from src.app.services.pdf_service import PdfService
from src.app.use_cases.invoicing.calculate_totals import CalculateInvoiceTotals
from src.app.use_cases.invoicing.create_draft import CreateDraftInvoice
from src.app.use_cases.invoicing.create_invoice_pdf import CreateInvoicePdf
from src.app.use_cases.invoicing.dtos import InvoiceTotalsResponseDTO
from src.app.use_cases.invoicing.render_preview import RenderInvoicePreview
from src.depends import get_invoice_renderer, get_pdf_service

router = APIRouter(prefix="/invoices", tags=["Invoices"])

# Use case error codes answered with 500 instead of 400
SERVER_ERROR_CODES = {"GENERATE_PDF_FAILED", "RENDER_PREVIEW_FAILED"}

VALIDATION_RESPONSES = {
    400: {
        "description": "Invalid invoice",
        "content": {
            "application/json": {
                "example": {
                    "error": "Invoice number is required",
                    "code": "INVOICE_NUMBER_REQUIRED"
                }
            }
        }
    },
    500: {
        "description": "Rendering failed",
        "content": {
            "application/json": {
                "example": {
                    "error": "Failed to generate PDF",
                    "code": "GENERATE_PDF_FAILED"
                }
            }
        }
    }
}


def _raise_for_error(error):
    if error.code in SERVER_ERROR_CODES:
        raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    raise ClientError(error)


@router.get(
    "/draft",
    response_model=InvoiceRequestSchema,
    status_code=status.HTTP_200_OK,
)
async def get_draft_invoice():
    """
    Create a blank draft invoice.

    Returns the invoice the form starts from: a random `INV-<n>` number,
    today's date, a due date `DEFAULT_DUE_DAYS` later, one empty line item
    and the default footer. The body can be posted back to any other
    invoice endpoint as is.
    """
    use_case = CreateDraftInvoice(
        currency=ApplicationConfig.DEFAULT_CURRENCY,
        footer=ApplicationConfig.DEFAULT_FOOTER,
        due_days=ApplicationConfig.DEFAULT_DUE_DAYS,
    )
    result = await use_case.execute()

    return InvoiceRequestSchema.from_invoice(result.value)


@router.post(
    "/totals",
    response_model=InvoiceTotalsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def calculate_invoice_totals(request: InvoiceRequestSchema):
    """
    Calculate invoice totals.

    **Returns:**
    - 200: subtotal, item discounts, invoice discount, taxable amount, tax,
      grand total (all in the invoice currency) and a per-item breakdown
    - 422: Malformed payload
    """
    use_case = CalculateInvoiceTotals()
    result = await use_case.execute(request.to_invoice())

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "/preview",
    response_class=HTMLResponse,
    status_code=status.HTTP_200_OK,
    responses=VALIDATION_RESPONSES,
)
async def preview_invoice(
    request: InvoiceRequestSchema,
    renderer: InvoiceRenderer = Depends(get_invoice_renderer),
):
    """
    Render the invoice as a standalone HTML document.

    **Returns:**
    - 200: HTML document
    - 400: Missing invoice number, no items, or invalid logo
    - 500: Rendering failed
    """
    use_case = RenderInvoicePreview(renderer)
    result = await use_case.execute(request.to_invoice())

    if result.is_err():
        _raise_for_error(result.error)

    return HTMLResponse(content=result.value.html)


@router.post(
    "/create",
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        **VALIDATION_RESPONSES,
    }
)
async def create_invoice_pdf(
    request: InvoiceRequestSchema,
    pdf_service: PdfService = Depends(get_pdf_service),
):
    """
    Render the invoice to PDF and return it for download.

    **Returns:**
    - 200: PDF file as binary response
    - 400: Missing invoice number, no items, or invalid logo
    - 500: PDF generation failed
    """
    use_case = CreateInvoicePdf(pdf_service)
    result = await use_case.execute(request.to_invoice())

    if result.is_err():
        _raise_for_error(result.error)

    return Response(
        content=result.value.pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{result.value.filename}"'
        }
    )
