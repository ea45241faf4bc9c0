"""Root conftest: fresh store and app per test, httpx client over ASGI.

Invariants:
    - Every test gets its own EmployeeStore (no state leaks between tests)
    - The client talks to create_app(...) built around that store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employees_api.config import Settings
from employees_api.infrastructure.memory_store import EmployeeStore
from employees_api.main import create_app

EMPLOYEES = [
    {"name": "Asaf Granit", "position": "Chef"},
    {"name": "Eyal Shani", "position": "Head Chef"},
    {"name": "Shani Knafo", "position": "Pastry Chef"},
    {"name": "Haim Cohen", "position": "Chef"},
    {"name": "Meir Adoni", "position": "Sous Chef"},
]


@pytest.fixture
def store():
    return EmployeeStore()


@pytest.fixture
def settings():
    return Settings(log_format="text", default_page_limit=10)


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def seeded(store):
    """Store holding the first three EMPLOYEES, ids 1..3."""
    return [store.create(e["name"], e["position"]) for e in EMPLOYEES[:3]]
