"""Pytest configuration and shared fixtures.

This module provides:
- Settings cache reset between tests
- A fresh redirect table fixture for tests that need a small, known table
- An async HTTP client bound to the FastAPI app
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.config import clear_settings_cache
from services.redirect_service import RedirectTable


@pytest.fixture(autouse=True)
def _clear_settings():
    """Each test sees settings built from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def small_table() -> RedirectTable:
    """A deterministic table independent of the production data."""
    return RedirectTable.from_pairs(
        [
            ("/old", "/new"),
            ("/old_with_anchor", "/new#section"),
            ("/renamed", "/old"),
        ]
    )


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """HTTP client for the real app; redirects are not followed."""
    from main import app

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
