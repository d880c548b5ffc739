import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def app():
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """Create test client bound to the ASGI app"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
