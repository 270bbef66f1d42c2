"""User Routes — roster CRUD, listing and CSV download over HTTP.

Invariants:
    - Field-rule violations → 400 with every message, no store call
    - Regular users read but never write (403)
    - DELETE needs ?confirm=true
    - Store failures → 502 envelope with the user-facing message
"""

from datetime import date, timedelta

from roster.core.errors import UserStoreError


def _body(**overrides):
    body = {
        "name": "Dana Ruiz",
        "email": "dana@school.edu",
        "phone": "3216549870",
        "enrollNumber": "E300",
        "dateOfAdmission": (date.today() - timedelta(days=1)).isoformat(),
    }
    body.update(overrides)
    return body


async def test_list_requires_login(client):
    assert (await client.get("/api/v1/users")).status_code == 401


async def test_list_with_search_and_sort(user_client):
    res = await user_client.get(
        "/api/v1/users", params={"search": "school", "sort": "name", "direction": "desc"},
    )
    assert res.status_code == 200
    assert [u["id"] for u in res.json()] == ["7", "2"]


async def test_list_sorted_by_id_numerically(user_client):
    res = await user_client.get(
        "/api/v1/users", params={"sort": "id", "direction": "desc"},
    )
    assert [u["id"] for u in res.json()] == ["7", "2", "1"]


async def test_unknown_sort_field_is_400(user_client):
    res = await user_client.get("/api/v1/users", params={"sort": "password"})
    assert res.status_code == 400


async def test_get_user(user_client):
    res = await user_client.get("/api/v1/users/1")
    assert res.status_code == 200
    assert res.json()["name"] == "Ana Li"


async def test_get_unknown_user_is_404(user_client):
    res = await user_client.get("/api/v1/users/404")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_export_returns_csv_attachment(user_client):
    res = await user_client.get("/api/v1/users/export", params={"sort": "name"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    assert 'filename="users.csv"' in res.headers["content-disposition"]
    lines = res.text.split("\n")
    assert lines[0] == "ID,Name,Email,Phone,Enroll Number,Date of Admission"
    assert [line.split(",")[0] for line in lines[1:]] == ["1", "2", "7"]


async def test_admin_creates_user_with_sequence_id(admin_client, user_store):
    res = await admin_client.post("/api/v1/users", json=_body())
    assert res.status_code == 201
    assert res.json()["id"] == "8"
    assert "8" in user_store.users


async def test_create_with_future_date_is_400_without_store_call(admin_client, user_store):
    tomorrow = (date.today() + timedelta(days=1)).isoformat()
    user_store.calls.clear()
    res = await admin_client.post("/api/v1/users", json=_body(dateOfAdmission=tomorrow))
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert details == [{"message": "Date of admission cannot be in the future"}]
    assert user_store.calls == []


async def test_create_invalid_record_lists_all_messages(admin_client):
    res = await admin_client.post("/api/v1/users", json={"name": "A"})
    assert res.status_code == 400
    assert len(res.json()["error"]["details"]) == 5


async def test_regular_user_cannot_create(user_client):
    res = await user_client.post("/api/v1/users", json=_body())
    assert res.status_code == 403
    assert res.json()["error"]["message"] == (
        "You do not have permission to access this feature"
    )


async def test_admin_updates_user(admin_client, user_store):
    res = await admin_client.put("/api/v1/users/2", json=_body(name="Bruno C."))
    assert res.status_code == 200
    assert user_store.users["2"]["name"] == "Bruno C."


async def test_update_accepts_snake_case_fields(admin_client, user_store):
    body = _body()
    body["enroll_number"] = body.pop("enrollNumber")
    res = await admin_client.put("/api/v1/users/1", json=body)
    assert res.status_code == 200
    assert user_store.users["1"]["enrollNumber"] == "E300"


async def test_delete_without_confirmation_keeps_record(admin_client, user_store):
    res = await admin_client.delete("/api/v1/users/2")
    assert res.json() == {"deleted": False}
    assert "2" in user_store.users


async def test_delete_confirmed(admin_client, user_store):
    res = await admin_client.delete("/api/v1/users/2", params={"confirm": "true"})
    assert res.json() == {"deleted": True}
    assert "2" not in user_store.users


async def test_store_failure_is_502(user_client, user_store):
    user_store.fail_with = UserStoreError("Failed to load users", "list", 500)
    res = await user_client.get("/api/v1/users")
    assert res.status_code == 502
    assert res.json()["error"]["message"] == "Failed to load users"


async def test_unknown_sort_field_names_the_parameter(user_client):
    res = await user_client.get("/api/v1/users", params={"sort": "password"})
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in error["details"]] == ["sort"]
