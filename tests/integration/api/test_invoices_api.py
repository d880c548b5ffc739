"""Integration tests for Invoice API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient

from src.app.services.pdf_service import PdfService
from src.depends import get_pdf_service

VALID_LOGO = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


def invoice_payload(**overrides):
    payload = {
        "invoiceNumber": "TEST-001",
        "date": "2025-06-06",
        "dueDate": "2025-07-06",
        "companyName": "Test Company",
        "fromName": "Test Sender",
        "fromEmail": "sender@test.com",
        "fromAddress": "123 Test St",
        "toName": "Test Recipient",
        "toEmail": "recipient@test.com",
        "toAddress": "456 Test Ave",
        "items": [
            {
                "id": "1",
                "description": "Consulting",
                "quantity": 40,
                "price": 150,
                "currency": "USD",
                "exchangeRate": 1,
                "discountType": "percentage",
                "discountValue": 0,
            }
        ],
        "taxRate": 8.5,
        "currency": "USD",
        "discountType": "percentage",
        "discountValue": 0,
        "applyInvoiceDiscountToDiscountedItems": False,
    }
    payload.update(overrides)
    return payload


class FailingPdfService(PdfService):
    def generate_invoice_pdf(self, invoice, totals) -> bytes:
        raise RuntimeError("renderer crashed")


class TestHealthAPI:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestTotalsAPI:
    """Integration tests for POST /api/invoices/totals"""

    @pytest.mark.asyncio
    async def test_totals_single_item_with_tax(self, client: AsyncClient):
        # Act
        response = await client.post("/api/invoices/totals", json=invoice_payload())

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["currency"] == "USD"
        assert Decimal(data["subtotal"]) == Decimal("6000")
        assert Decimal(data["tax"]) == Decimal("510")
        assert Decimal(data["grand_total"]) == Decimal("6510")
        assert Decimal(data["items"][0]["net_total"]) == Decimal("6000")

    @pytest.mark.asyncio
    async def test_totals_with_foreign_item_and_invoice_discount(self, client: AsyncClient):
        # Arrange
        payload = invoice_payload(
            taxRate=0,
            discountType="percentage",
            discountValue=5,
            items=[
                {
                    "id": "a",
                    "quantity": 8,
                    "price": 200,
                    "currency": "EUR",
                    "exchangeRate": 1.1,
                    "discountType": "percentage",
                    "discountValue": 5,
                },
                {"id": "b", "quantity": 2, "price": 100, "currency": "USD"},
            ],
        )

        # Act
        response = await client.post("/api/invoices/totals", json=payload)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["items"][0]["discount"]) == Decimal("80")
        assert Decimal(data["items"][0]["net_total"]) == Decimal("1672")
        assert Decimal(data["subtotal"]) == Decimal("1872")
        assert Decimal(data["item_discounts_total"]) == Decimal("88")
        assert Decimal(data["invoice_discount"]) == Decimal("10")
        assert Decimal(data["grand_total"]) == Decimal("1862")

    @pytest.mark.asyncio
    async def test_legacy_flag_name_is_accepted(self, client: AsyncClient):
        payload = invoice_payload(
            taxRate=0,
            discountValue=10,
            items=[
                {"id": "a", "quantity": 1, "price": 100, "discountValue": 50},
                {"id": "b", "quantity": 1, "price": 100},
            ],
        )
        del payload["applyInvoiceDiscountToDiscountedItems"]
        payload["applyDiscountToAlreadyDiscountedItems"] = True

        response = await client.post("/api/invoices/totals", json=payload)

        assert response.status_code == 200
        assert Decimal(response.json()["invoice_discount"]) == Decimal("15")

    @pytest.mark.asyncio
    async def test_null_numbers_count_as_zero(self, client: AsyncClient):
        # Arrange
        payload = invoice_payload(
            taxRate=None,
            discountValue=None,
            items=[
                {"id": "a", "quantity": 2, "price": 50, "discountValue": None},
                {"id": "b", "quantity": None, "price": 10},
                {"id": "c", "quantity": 3, "price": None, "currency": "EUR", "exchangeRate": None},
            ],
        )

        # Act
        response = await client.post("/api/invoices/totals", json=payload)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["subtotal"]) == Decimal("100")
        assert Decimal(data["item_discounts_total"]) == Decimal("0")
        assert Decimal(data["tax"]) == Decimal("0")
        assert Decimal(data["grand_total"]) == Decimal("100")

    @pytest.mark.asyncio
    async def test_malformed_payload_returns_422(self, client: AsyncClient):
        payload = invoice_payload(taxRate="eight")

        response = await client.post("/api/invoices/totals", json=payload)

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert data["error"] == "Invalid invoice payload"


class TestDraftAPI:
    """Integration tests for GET /api/invoices/draft"""

    @pytest.mark.asyncio
    async def test_draft_round_trips_through_totals(self, client: AsyncClient):
        # Act
        response = await client.get("/api/invoices/draft")

        # Assert
        assert response.status_code == 200
        draft = response.json()
        assert draft["invoiceNumber"].startswith("INV-")
        assert draft["currency"] == "USD"
        assert draft["footer"] == "Thank you for your business!"
        assert draft["applyInvoiceDiscountToDiscountedItems"] is True
        assert len(draft["items"]) == 1

        totals = await client.post("/api/invoices/totals", json=draft)
        assert totals.status_code == 200
        assert Decimal(totals.json()["grand_total"]) == Decimal("0")


class TestPreviewAPI:
    """Integration tests for POST /api/invoices/preview"""

    @pytest.mark.asyncio
    async def test_preview_returns_html(self, client: AsyncClient):
        response = await client.post("/api/invoices/preview", json=invoice_payload())

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "#TEST-001" in response.text
        assert "$6,510.00" in response.text

    @pytest.mark.asyncio
    async def test_preview_requires_items(self, client: AsyncClient):
        response = await client.post("/api/invoices/preview", json=invoice_payload(items=[]))

        assert response.status_code == 400
        assert response.json() == {"error": "At least one item is required", "code": "ITEMS_REQUIRED"}


class TestCreatePdfAPI:
    """Integration tests for POST /api/invoices/create"""

    @pytest.mark.asyncio
    async def test_create_returns_pdf(self, client: AsyncClient):
        # Act
        response = await client.post("/api/invoices/create", json=invoice_payload(companyLogo=VALID_LOGO))

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == 'attachment; filename="invoice-TEST-001.pdf"'
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("logo", ["", None])
    async def test_empty_logo_is_accepted(self, client: AsyncClient, logo):
        response = await client.post("/api/invoices/create", json=invoice_payload(companyLogo=logo))

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_invoice_number_returns_400(self, client: AsyncClient):
        payload = invoice_payload()
        del payload["invoiceNumber"]

        response = await client.post("/api/invoices/create", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Invoice number is required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "logo",
        [
            "not-a-data-url",
            "data:text/plain;base64,SGVsbG8gd29ybGQ=",
            "data:image/png;base64,invalid-base64-data!!!",
        ],
    )
    async def test_invalid_logo_returns_400(self, client: AsyncClient, logo):
        response = await client.post("/api/invoices/create", json=invoice_payload(companyLogo=logo))

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "INVALID_COMPANY_LOGO"
        assert data["error"].startswith("Company logo must be a valid Base64 encoded image")

    @pytest.mark.asyncio
    async def test_rendering_failure_returns_500(self, app, client: AsyncClient):
        # Arrange
        app.dependency_overrides[get_pdf_service] = lambda: FailingPdfService()

        # Act
        response = await client.post("/api/invoices/create", json=invoice_payload())

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate PDF", "code": "GENERATE_PDF_FAILED"}


class TestLargeAmounts:
    """Amounts beyond the default Decimal precision still render"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/api/invoices/preview", "/api/invoices/create"])
    async def test_large_amounts_render(self, client: AsyncClient, path):
        # Arrange
        payload = invoice_payload(
            taxRate=0,
            items=[{"id": "1", "description": "Bulk", "quantity": 1e20, "price": 1e20}],
        )

        # Act
        response = await client.post(path, json=payload)

        # Assert
        assert response.status_code == 200
        if path.endswith("preview"):
            assert f"${10 ** 40:,}.00" in response.text
        else:
            assert response.content.startswith(b"%PDF")
