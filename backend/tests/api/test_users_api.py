"""User API - provisioning, directory listing, profile updates.

Invariants:
    - password_hash never appears in any response
    - Provisioned users start from the default member profile; overrides win
    - Duplicate email, whatever its letter case -> 409
"""

import uuid

from club_api.infrastructure.data_access import DataAccess
from club_api.infrastructure.security import verify_password


async def test_provision_creates_member_with_hashed_password(client, data):
    res = await client.post("/api/users", json={
        "email": "Karim.Mansour@Univ-Club.org",
        "password": "s3cret-pass",
        "firstName": "Karim",
        "department": "events",
    })

    assert res.status_code == 201
    user = res.json()["data"]
    assert user["email"] == "karim.mansour@univ-club.org"
    assert user["firstName"] == "Karim"
    assert user["lastName"] == "Member"
    assert user["role"] == "member"
    assert user["department"] == "events"
    assert user["isActive"] is True
    assert "passwordHash" not in user and "password_hash" not in user

    row = (await data.query("users", {"email": "karim.mansour@univ-club.org"}))[0]
    assert row["password_hash"] != "s3cret-pass"
    assert verify_password("s3cret-pass", row["password_hash"])


async def test_provision_requires_email_and_password(client):
    res = await client.post("/api/users", json={"firstName": "Karim"})

    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["details"]}
    assert fields == {"email", "password"}


async def test_provision_duplicate_email_returns_409(client, make_user, data):
    await make_user(email="karim.mansour@univ-club.org")

    res = await client.post("/api/users", json={
        "email": "karim.mansour@univ-club.org", "password": "another-pass",
    })

    assert res.status_code == 409
    assert res.json()["error"] == "User with this email already exists"
    assert await data.count("users") == 1


async def test_provision_matches_stored_email_ignoring_case(client, make_user, data):
    await make_user(email="Karim.Mansour@Univ-Club.org")

    res = await client.post("/api/users", json={
        "email": "karim.mansour@univ-club.org", "password": "another-pass",
    })

    assert res.status_code == 409
    assert await data.count("users") == 1


async def test_provision_duplicate_caught_by_unique_email_constraint(
    client, make_user, data, monkeypatch,
):
    await make_user(email="karim.mansour@univ-club.org")

    async def no_rows(self, table, filters=None, ignore_case=()):
        return 0

    monkeypatch.setattr(DataAccess, "count", no_rows)

    res = await client.post("/api/users", json={
        "email": "karim.mansour@univ-club.org", "password": "another-pass",
    })

    assert res.status_code == 409
    assert res.json()["error"] == "User with this email already exists"
    assert len(await data.query("users")) == 1


async def test_list_users_filters_and_paginates(client, make_user):
    await make_user(role="admin", department="it")
    await make_user(department="design")
    await make_user(department="design", is_active=False)

    design = (await client.get("/api/users", params={"department": "design"})).json()
    inactive = (await client.get("/api/users", params={"active": "false"})).json()
    admins = (await client.get("/api/users", params={"role": "admin"})).json()

    assert design["total"] == 2
    assert design["pagination"]["totalPages"] == 1
    assert inactive["total"] == 1
    assert admins["total"] == 1
    assert all("passwordHash" not in u for u in design["data"])


async def test_get_user_detail(client, make_user):
    user = await make_user(telegram_id="@amira")

    res = await client.get(f"/api/users/{user['id']}")

    assert res.status_code == 200
    detail = res.json()["data"]
    assert detail["telegramId"] == "@amira"
    assert detail["email"] == user["email"]
    assert "password_hash" not in detail


async def test_get_unknown_user_returns_404(client):
    res = await client.get(f"/api/users/{uuid.uuid4()}")

    assert res.status_code == 404
    assert res.json()["error"] == "User not found"


async def test_update_user_only_touches_allowed_fields(client, make_user):
    user = await make_user(telegram_id="@amira")

    res = await client.put(f"/api/users/{user['id']}", json={
        "lastName": "Ben Salah",
        "telegramId": "",
        "role": "admin",
        "email": "hijack@univ-club.org",
    })

    assert res.status_code == 200
    updated = res.json()["data"]
    assert updated["lastName"] == "Ben Salah"
    assert updated["telegramId"] is None
    assert updated["role"] == "member"
    assert updated["email"] == user["email"]


async def test_update_user_validation(client, make_user):
    user = await make_user()

    res = await client.put(f"/api/users/{user['id']}", json={"phone": "0000"})

    assert res.status_code == 400
    assert res.json()["details"][0]["field"] == "phone"


async def test_update_unknown_user_returns_404(client):
    res = await client.put(f"/api/users/{uuid.uuid4()}", json={"firstName": "Nobody"})

    assert res.status_code == 404
