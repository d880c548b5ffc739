"""Invoice Request Validation

Checks run on an incoming invoice before it is rendered. The calculation
engine itself never validates; these rules only guard the export paths.
"""

import base64
import binascii
import re
from typing import Optional
from libs.result import Error
from src.domain.invoice import Invoice

DATA_URL_PATTERN = re.compile(r"^data:image/(png|jpg|jpeg|gif|webp|svg\+xml);base64,", re.IGNORECASE)
BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")


def is_valid_base64_image(value: Optional[str]) -> bool:
    """
    True for a data URL carrying a base64 encoded image

    Accepted: data:image/<png|jpg|jpeg|gif|webp|svg+xml>;base64,<payload>
    where the payload uses only the base64 alphabet and decodes cleanly.
    Trailing "=" padding may be omitted.
    """
    if not value or not isinstance(value, str):
        return False

    if not DATA_URL_PATTERN.match(value):
        return False

    parts = value.split(",")
    if len(parts) < 2 or not parts[1]:
        return False
    payload = parts[1]

    if not BASE64_PATTERN.match(payload):
        return False

    data = payload.rstrip("=")
    if len(data) % 4 == 1:
        return False

    try:
        base64.b64decode(data + "=" * (-len(data) % 4), validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def validate_invoice(invoice: Invoice) -> Optional[Error]:
    """
    Validate an invoice for rendering

    Returns:
        None when valid, otherwise the first Error found
    """
    if not invoice.invoice_number:
        return Error(
            code="INVOICE_NUMBER_REQUIRED",
            message="Invoice number is required",
            reason="Missing invoiceNumber",
        )

    if not invoice.items:
        return Error(
            code="ITEMS_REQUIRED",
            message="At least one item is required",
            reason="Empty items list",
        )

    if invoice.company_logo and not is_valid_base64_image(invoice.company_logo):
        return Error(
            code="INVALID_COMPANY_LOGO",
            message="Company logo must be a valid Base64 encoded image "
                    "(data:image/[type];base64,[data])",
            reason="companyLogo is not an image data URL",
        )

    return None
