"""Event API - CRUD, activation, registration capacity and roll-up.

Invariants:
    - New events are draft and inactive
    - activation_date stamped on first activation only
    - Registration: 404 -> 400 not active -> 409 duplicate -> 400 full
    - Registered count never exceeds maxAttendees; rejected attempts store nothing
"""

import uuid
from datetime import datetime, timedelta, timezone

from club_api.infrastructure.data_access import DataAccess


async def test_create_event_starts_as_inactive_draft(client, event_payload):
    res = await client.post("/api/events", json=event_payload())

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Event created successfully"
    assert body["data"]["status"] == "draft"
    assert body["data"]["isActive"] is False
    assert body["data"]["currentAttendees"] == 0
    assert body["data"]["activationDate"] is None


async def test_create_event_in_the_past_is_rejected(client, event_payload):
    past = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()

    res = await client.post("/api/events", json=event_payload(eventDate=past))

    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "eventDate"


async def test_create_event_validates_time_and_capacity(client, event_payload):
    res = await client.post(
        "/api/events", json=event_payload(eventTime="25:00", maxAttendees=0),
    )

    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["details"]}
    assert fields == {"eventTime", "maxAttendees"}


async def test_empty_difficulty_and_image_url_become_null(client, event_payload):
    res = await client.post("/api/events", json=event_payload(difficulty="", imageUrl=""))

    assert res.status_code == 201
    assert res.json()["data"]["difficulty"] is None
    assert res.json()["data"]["imageUrl"] is None


async def test_get_event_recomputes_current_attendees(client, active_event, make_user):
    event_id = await active_event()
    user = await make_user()
    await client.post(f"/api/events/{event_id}/register", json={"userId": str(user["id"])})

    res = await client.get(f"/api/events/{event_id}")

    assert res.status_code == 200
    assert res.json()["data"]["currentAttendees"] == 1


async def test_get_unknown_event_returns_404(client):
    res = await client.get(f"/api/events/{uuid.uuid4()}")

    assert res.status_code == 404
    assert res.json()["error"] == "Event not found"


async def test_activation_date_is_stamped_once(client, event_payload):
    payload = event_payload()
    event_id = (await client.post("/api/events", json=payload)).json()["data"]["id"]

    first = await client.put(f"/api/events/{event_id}", json={**payload, "isActive": True})
    stamped = first.json()["data"]["activationDate"]
    await client.put(f"/api/events/{event_id}", json={**payload, "isActive": False})
    again = await client.put(f"/api/events/{event_id}", json={**payload, "isActive": True})

    assert stamped is not None
    assert again.json()["data"]["activationDate"] == stamped
    assert again.json()["data"]["isActive"] is True


async def test_update_applies_status(client, event_payload):
    payload = event_payload()
    event_id = (await client.post("/api/events", json=payload)).json()["data"]["id"]

    res = await client.put(f"/api/events/{event_id}", json={**payload, "status": "active"})

    assert res.status_code == 200
    assert res.json()["data"]["status"] == "active"


async def test_update_unknown_event_returns_404_before_validation(client):
    res = await client.put(f"/api/events/{uuid.uuid4()}", json={})

    assert res.status_code == 404


async def test_delete_event_removes_its_registrations(client, active_event, make_user, data):
    event_id = await active_event()
    user = await make_user()
    await client.post(f"/api/events/{event_id}/register", json={"userId": str(user["id"])})

    res = await client.delete(f"/api/events/{event_id}")

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Event deleted successfully"}
    assert await data.count("events") == 0
    assert await data.count("event_registrations") == 0


async def test_delete_unknown_event_leaves_store_unchanged(client, event_payload, data):
    await client.post("/api/events", json=event_payload())

    res = await client.delete(f"/api/events/{uuid.uuid4()}")

    assert res.status_code == 404
    assert await data.count("events") == 1


async def test_list_orders_by_date_and_filters(client, event_payload, future_date):
    later = (await client.post("/api/events", json=event_payload(
        title="Later Event", eventDate=future_date(60), department="design",
    ))).json()["data"]["id"]
    sooner = (await client.post("/api/events", json=event_payload(
        title="Sooner Event", eventDate=future_date(5),
    ))).json()["data"]["id"]

    everything = (await client.get("/api/events")).json()
    design = (await client.get("/api/events", params={"department": "design"})).json()
    active_only = (await client.get("/api/events", params={"active": "true"})).json()
    bogus = (await client.get("/api/events", params={"status": "archived"})).json()

    assert [e["id"] for e in everything["data"]] == [sooner, later]
    assert everything["pagination"]["totalPages"] == 1
    assert [e["id"] for e in design["data"]] == [later]
    assert active_only["total"] == 0
    assert bogus["total"] == 2


async def test_list_pagination_rounds_total_pages_up(client, event_payload, future_date):
    for day in range(1, 6):
        await client.post("/api/events", json=event_payload(eventDate=future_date(day)))

    res = await client.get("/api/events", params={"page": 3, "limit": 2, "upcoming": "true"})

    body = res.json()
    assert body["count"] == 1
    assert body["total"] == 5
    assert body["pagination"] == {
        "currentPage": 3, "totalPages": 3, "hasNext": False, "hasPrev": True,
    }


async def test_invalid_page_returns_400(client):
    res = await client.get("/api/events", params={"page": 0})

    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "page"


# ─── Registration ────────────────────────────────────────────────

async def test_register_returns_201(client, active_event, make_user, data):
    event_id = await active_event()
    user = await make_user()

    res = await client.post(f"/api/events/{event_id}/register", json={"userId": str(user["id"])})

    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Successfully registered for event"
    assert body["data"]["eventId"] == event_id
    assert body["data"]["userId"] == str(user["id"])
    event = await data.find_by_id("events", event_id)
    assert event["current_attendees"] == 1


async def test_register_requires_user_id(client, active_event):
    event_id = await active_event()

    res = await client.post(f"/api/events/{event_id}/register", json={})

    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "userId"


async def test_register_unknown_event_returns_404(client, make_user):
    user = await make_user()

    res = await client.post(f"/api/events/{uuid.uuid4()}/register", json={"userId": str(user["id"])})

    assert res.status_code == 404


async def test_register_inactive_event_returns_400(client, event_payload, make_user, data):
    event_id = (await client.post("/api/events", json=event_payload())).json()["data"]["id"]
    user = await make_user()

    res = await client.post(f"/api/events/{event_id}/register", json={"userId": str(user["id"])})

    assert res.status_code == 400
    assert res.json()["error"] == "Event is not available for registration"
    assert await data.count("event_registrations") == 0


async def test_register_unknown_user_is_rejected(client, active_event, data):
    event_id = await active_event()

    res = await client.post(f"/api/events/{event_id}/register", json={"userId": str(uuid.uuid4())})

    assert res.status_code == 400
    assert res.json()["details"] == [{"field": "userId", "message": "User not found"}]
    assert await data.count("event_registrations") == 0


async def test_double_registration_returns_409_and_count_unchanged(client, active_event, make_user, data):
    event_id = await active_event()
    user = await make_user()
    body = {"userId": str(user["id"])}
    await client.post(f"/api/events/{event_id}/register", json=body)

    res = await client.post(f"/api/events/{event_id}/register", json=body)

    assert res.status_code == 409
    assert res.json()["error"] == "Already registered for this event"
    assert await data.count("event_registrations", {"event_id": event_id}) == 1


async def test_double_registration_caught_by_unique_constraint(
    client, active_event, make_user, data, monkeypatch,
):
    event_id = await active_event()
    user = await make_user()
    body = {"userId": str(user["id"])}
    await client.post(f"/api/events/{event_id}/register", json=body)

    async def no_rows(self, table, filters=None, ignore_case=()):
        return 0

    monkeypatch.setattr(DataAccess, "count", no_rows)

    res = await client.post(f"/api/events/{event_id}/register", json=body)

    assert res.status_code == 409
    assert res.json()["error"] == "Already registered for this event"
    assert len(await data.query("event_registrations", {"event_id": event_id})) == 1


async def test_single_seat_event(client, active_event, make_user, data):
    event_id = await active_event(maxAttendees=1)
    user_a = await make_user()
    user_b = await make_user()
    url = f"/api/events/{event_id}/register"

    first = await client.post(url, json={"userId": str(user_a["id"])})
    second = await client.post(url, json={"userId": str(user_b["id"])})
    repeat = await client.post(url, json={"userId": str(user_a["id"])})

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["error"] == "Event is full"
    assert repeat.status_code == 409
    assert repeat.json()["error"] == "Already registered for this event"
    assert await data.count("event_registrations", {"event_id": event_id}) == 1


async def test_registrations_roll_up(client, active_event, make_user, data):
    event_id = await active_event()
    users = [await make_user() for _ in range(3)]
    for user in users:
        await client.post(f"/api/events/{event_id}/register", json={"userId": str(user["id"])})
    rows = await data.query("event_registrations", {"user_id": users[0]["id"]})
    await data.update("event_registrations", rows[0]["id"], {"status": "attended"})

    res = await client.get(f"/api/events/{event_id}/registrations")

    assert res.status_code == 200
    body = res.json()
    assert body["event"]["id"] == event_id
    assert body["event"]["maxAttendees"] == 20
    assert body["registrations"] == {
        "total": 3, "registered": 2, "attended": 1, "cancelled": 0,
    }
    assert len(body["data"]) == 3
    assert {"id", "userId", "status", "registeredAt"} == set(body["data"][0])


async def test_registrations_unknown_event_returns_404(client):
    res = await client.get(f"/api/events/{uuid.uuid4()}/registrations")

    assert res.status_code == 404
