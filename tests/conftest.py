"""Root conftest: test infrastructure for all tests.

Provides:
- API client bound to the ASGI app (no network, no database)
- Shared sample datasets for engine and API tests
"""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from tests.helpers.factories import make_impact_data


@pytest.fixture
async def api_client():
    """HTTP client that talks to the app in-process."""
    from gitiary.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def impact_data():
    """Two repositories with churn over 2026-01-01..2026-01-10."""
    return make_impact_data()
