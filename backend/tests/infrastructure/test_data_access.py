"""DataAccess - generic CRUD over named tables against in-memory SQLite.

Invariants:
    - Missing rows are None/False, never errors
    - Constraint violations surface as DataAccessError(constraint_violation=True)
    - transaction() commits once at the end, or rolls everything back
"""

import uuid

import pytest

from club_api.core.errors import DataAccessError
from club_api.infrastructure.data_access import DataAccess, OrderBy


async def test_insert_returns_generated_fields(make_user):
    row = await make_user(first_name="Nour")

    assert isinstance(row["id"], uuid.UUID)
    assert row["created_at"] is not None
    assert row["first_name"] == "Nour"


async def test_query_filters_orders_and_limits(data, make_user):
    await make_user(first_name="Bilel", department="it")
    await make_user(first_name="Asma", department="it")
    await make_user(first_name="Chiraz", department="design")

    rows = await data.query(
        "users", filters={"department": "it"}, order_by=OrderBy("first_name"), limit=5,
    )
    last = await data.query("users", order_by=OrderBy("first_name", ascending=False), limit=1)

    assert [r["first_name"] for r in rows] == ["Asma", "Bilel"]
    assert last[0]["first_name"] == "Chiraz"


async def test_find_by_id_accepts_string_ids(data, make_user):
    user = await make_user()

    assert (await data.find_by_id("users", str(user["id"])))["email"] == user["email"]
    assert await data.find_by_id("users", uuid.uuid4()) is None


async def test_update_returns_row_or_none(data, make_user):
    user = await make_user()

    updated = await data.update("users", user["id"], {"first_name": "Rania"})
    missing = await data.update("users", uuid.uuid4(), {"first_name": "Ghost"})
    unchanged = await data.update("users", user["id"], {})

    assert updated["first_name"] == "Rania"
    assert missing is None
    assert unchanged["first_name"] == "Rania"


async def test_delete_reports_whether_a_row_went(data, make_user):
    user = await make_user()

    assert await data.delete("users", user["id"]) is True
    assert await data.delete("users", user["id"]) is False
    assert await data.count("users") == 0


async def test_unique_violation_is_flagged(data, make_user):
    await make_user(email="dup@univ-club.org")

    with pytest.raises(DataAccessError) as exc_info:
        await make_user(email="dup@univ-club.org")

    assert exc_info.value.constraint_violation is True
    assert exc_info.value.table == "users"
    assert await data.count("users") == 1


async def test_ignore_case_compares_lowered_values(data, make_user):
    await make_user(email="Mixed@Club.org")

    assert await data.count("users", {"email": "mixed@club.org"}) == 0
    assert await data.count("users", {"email": "mixed@club.org"}, ignore_case=("email",)) == 1
    rows = await data.query("users", {"email": "MIXED@club.org"}, ignore_case=("email",))
    assert [r["email"] for r in rows] == ["Mixed@Club.org"]


async def test_unknown_table_and_column_raise(data):
    with pytest.raises(DataAccessError):
        await data.query("members")
    with pytest.raises(DataAccessError):
        await data.query("users", filters={"nickname": "x"})


async def test_invalid_uuid_string_raises(data):
    with pytest.raises(DataAccessError):
        await data.find_by_id("users", "not-a-uuid")


async def test_transaction_rolls_back_everything_on_error(data, make_user):
    user = await make_user()

    with pytest.raises(RuntimeError):
        async with data.transaction():
            await data.update("users", user["id"], {"first_name": "Changed"})
            await data.insert("users", {
                "email": "inside-tx@univ-club.org", "first_name": "In", "last_name": "Tx",
            })
            raise RuntimeError("abort")

    assert await data.count("users") == 1
    assert (await data.find_by_id("users", user["id"]))["first_name"] == "Amira"


async def test_transaction_commits_on_success(data, test_session_factory):
    async with data.transaction():
        await data.insert("users", {
            "email": "committed@univ-club.org", "first_name": "Com", "last_name": "Mit",
        })

    async with test_session_factory() as other:
        assert await DataAccess(other).count("users", {"email": "committed@univ-club.org"}) == 1
