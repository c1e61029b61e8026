"""Unit-specific fixtures (HTTP is always mocked with respx)."""

from __future__ import annotations

import httpx
import pytest
import structlog

from dibapi.client import DibApi

TOKEN = "test-token"
BLOG_ID = "blog-1"


@pytest.fixture()
async def http_client():
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture()
async def api(http_client: httpx.AsyncClient) -> DibApi:
    """Client with valid credentials and the default five-minute TTL."""
    return DibApi(TOKEN, BLOG_ID, http_client=http_client)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
