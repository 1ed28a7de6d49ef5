"""Pytest configuration and fixtures for scheduler tests.

Every test gets its own store seeded for the week of 2024-03-04 (a Monday),
so nothing leaks between tests through shared state.
"""

from datetime import date
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.deps import get_store
from app.main import app
from app.models.seed import SeedData
from app.services.seed import build_seed_data
from app.services.store import InMemoryStore

SEED_WEEK = date(2024, 3, 4)


# ── Store Fixtures ───────────────────────────────────────────────

@pytest.fixture
def seed() -> SeedData:
    return build_seed_data(SEED_WEEK)


@pytest.fixture
def store(seed: SeedData) -> InMemoryStore:
    """Fresh seeded store."""
    return InMemoryStore(seed)


@pytest.fixture
def template_draft() -> dict:
    return {
        "name": "Honey Harvest",
        "description": "Pull supers and record yield",
        "expected_duration_minutes": 120,
        "default_location_type": "yard",
        "sub_tasks": [
            {"label": "Pull supers", "input_type": "checkbox", "required": True},
            {"label": "Record yield", "input_type": "number", "required": True, "default_target": 30},
            {"label": "Photo of frames", "input_type": "photo", "required": False},
        ],
    }


@pytest.fixture
def single_checkbox_template(store: InMemoryStore):
    """Template with exactly one required checkbox sub-task."""
    return store.create_template({
        "name": "Feeder Check",
        "expected_duration_minutes": 15,
        "default_location_type": "yard",
        "sub_tasks": [
            {"label": "Refill feeder", "input_type": "checkbox", "required": True},
        ],
    })


# ── HTTP Client ──────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client(store: InMemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Test client with the store dependency pointed at the per-test store."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ── Test Markers ─────────────────────────────────────────────────

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "api: HTTP API tests")
