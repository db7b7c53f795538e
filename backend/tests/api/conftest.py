"""API test fixtures - FastAPI client over the in-memory test database.

Invariants:
    - get_db overridden so every request gets a session from the test factory
    - db_manager points at the test engine so /health/ready sees a live database
"""

import pytest
from httpx import ASGITransport, AsyncClient

import club_api.infrastructure.database as db_module
from club_api.infrastructure.database import DatabaseSessionManager, get_db
from club_api.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def application_payload():
    def _make(**overrides) -> dict:
        body = {
            "firstName": "Yasmine",
            "lastName": "Trabelsi",
            "email": "yasmine.trabelsi@univ-club.org",
            "phone": "+21612345678",
            "academicYear": "3",
            "fieldOfStudy": "Computer Science",
            "preferredDepartment": "it",
            "motivation": "I want to help organise hackathons and workshops.",
        }
        body.update(overrides)
        return body
    return _make


@pytest.fixture
def event_payload(future_date):
    def _make(**overrides) -> dict:
        body = {
            "title": "Intro to Robotics",
            "description": "Hands-on workshop building a line-following robot.",
            "eventDate": future_date(),
            "eventTime": "14:30",
            "location": "Lab B-204",
            "maxAttendees": 20,
            "category": "workshop",
            "difficulty": "beginner",
            "department": "it",
        }
        body.update(overrides)
        return body
    return _make


@pytest.fixture
def active_event(client, event_payload):
    """Create an event through the API and activate it; returns its id."""
    async def _make(**overrides) -> str:
        payload = event_payload(**overrides)
        res = await client.post("/api/events", json=payload)
        assert res.status_code == 201, res.text
        event_id = res.json()["data"]["id"]
        res = await client.put(f"/api/events/{event_id}", json={**payload, "isActive": True})
        assert res.status_code == 200, res.text
        return event_id
    return _make
