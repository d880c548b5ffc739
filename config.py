import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Draft invoice defaults
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "USD")
    DEFAULT_FOOTER = data.get("DEFAULT_FOOTER", "Thank you for your business!")
    DEFAULT_DUE_DAYS = data.get("DEFAULT_DUE_DAYS", 30)

    # PDF rendering
    PDF_PAGE_SIZE = data.get("PDF_PAGE_SIZE", "A4")  # A4 or LETTER
    PDF_MARGIN_TOP_MM = data.get("PDF_MARGIN_TOP_MM", 20)
    PDF_MARGIN_BOTTOM_MM = data.get("PDF_MARGIN_BOTTOM_MM", 20)
    PDF_MARGIN_LEFT_MM = data.get("PDF_MARGIN_LEFT_MM", 15)
    PDF_MARGIN_RIGHT_MM = data.get("PDF_MARGIN_RIGHT_MM", 15)
