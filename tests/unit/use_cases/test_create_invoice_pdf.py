"""Unit tests for CreateInvoicePdf use case

Tests cover:
- PDF generated for a valid invoice with engine-computed totals
- Validation errors stop before the PDF service is called
- Rendering failures are wrapped as GENERATE_PDF_FAILED
"""

import pytest
from decimal import Decimal
from unittest.mock import MagicMock

from src.app.use_cases.invoicing.create_invoice_pdf import CreateInvoicePdf
from src.domain.invoice import Invoice, LineItem
from src.domain.totals import Totals


@pytest.fixture
def mock_pdf_service():
    """Mock PDF service"""
    return MagicMock()


@pytest.fixture
def create_invoice_pdf_use_case(mock_pdf_service):
    return CreateInvoicePdf(pdf_service=mock_pdf_service)


@pytest.fixture
def sample_invoice():
    return Invoice(
        invoice_number="INV-1024",
        currency="USD",
        tax_rate=Decimal("8.5"),
        items=[LineItem(id="1", description="Consulting", quantity=Decimal("40"), price=Decimal("150"))],
    )


@pytest.fixture
def sample_pdf_bytes():
    return b"%PDF-1.4\nTest PDF content"


@pytest.mark.asyncio
class TestCreateInvoicePdfSuccess:
    """Test successful PDF generation"""

    async def test_generate_pdf(
        self,
        create_invoice_pdf_use_case,
        mock_pdf_service,
        sample_invoice,
        sample_pdf_bytes,
    ):
        """
        Given: A valid invoice
        When: execute is called
        Then: The PDF service output is returned with a download file name
        """
        # Arrange
        mock_pdf_service.generate_invoice_pdf = MagicMock(return_value=sample_pdf_bytes)

        # Act
        result = await create_invoice_pdf_use_case.execute(sample_invoice)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.invoice_number == "INV-1024"
        assert response.filename == "invoice-INV-1024.pdf"
        assert response.pdf_bytes == sample_pdf_bytes
        assert response.grand_total == Decimal("6510")

    async def test_pdf_service_receives_engine_totals(
        self,
        create_invoice_pdf_use_case,
        mock_pdf_service,
        sample_invoice,
        sample_pdf_bytes,
    ):
        # Arrange
        mock_pdf_service.generate_invoice_pdf = MagicMock(return_value=sample_pdf_bytes)

        # Act
        await create_invoice_pdf_use_case.execute(sample_invoice)

        # Assert
        call_args = mock_pdf_service.generate_invoice_pdf.call_args
        assert call_args.kwargs["invoice"] == sample_invoice
        totals = call_args.kwargs["totals"]
        assert isinstance(totals, Totals)
        assert totals.subtotal == Decimal("6000")
        assert totals.tax == Decimal("510")
        assert totals.grand_total == Decimal("6510")


@pytest.mark.asyncio
class TestCreateInvoicePdfValidation:
    """Test request validation errors"""

    @pytest.mark.parametrize(
        "overrides,code",
        [
            ({"invoice_number": ""}, "INVOICE_NUMBER_REQUIRED"),
            ({"items": []}, "ITEMS_REQUIRED"),
            ({"company_logo": "not-a-data-url"}, "INVALID_COMPANY_LOGO"),
        ],
    )
    async def test_invalid_invoice_is_rejected(
        self,
        create_invoice_pdf_use_case,
        mock_pdf_service,
        sample_invoice,
        overrides,
        code,
    ):
        # Arrange
        invoice = sample_invoice.model_copy(update=overrides)

        # Act
        result = await create_invoice_pdf_use_case.execute(invoice)

        # Assert
        assert result.is_err()
        assert result.error.code == code
        mock_pdf_service.generate_invoice_pdf.assert_not_called()


@pytest.mark.asyncio
class TestCreateInvoicePdfFailure:
    """Test PDF rendering failures"""

    async def test_rendering_error_is_wrapped(
        self,
        create_invoice_pdf_use_case,
        mock_pdf_service,
        sample_invoice,
    ):
        # Arrange
        mock_pdf_service.generate_invoice_pdf = MagicMock(side_effect=RuntimeError("layout overflow"))

        # Act
        result = await create_invoice_pdf_use_case.execute(sample_invoice)

        # Assert
        assert result.is_err()
        assert result.error.code == "GENERATE_PDF_FAILED"
        assert result.error.message == "Failed to generate PDF"
        assert result.error.reason == "layout overflow"
