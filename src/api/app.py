import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import register_exception_handlers
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import health, invoices


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Invoice Generator Service",
        description="Invoice totals, HTML preview and PDF export",
        version="0.1.0",
    )

    register_exception_handlers(app)

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(invoices.router, prefix=config.API_PREFIX)

    return app
