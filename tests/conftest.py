from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from server import app


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """In-process client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://localhost") as ac:
        yield ac
