"""Employee Routes (v1): HTTP behavior of single and bulk endpoints.

Invariants:
    - Error bodies are {"error": <message>}; bulk bodies add "failed"
    - Bulk: all ok → 200 {data, failed: []}; mixed → 200; all failed → 400
"""

import logging

import pytest

BASE = "/api/v1/employees"
EMPLOYEES = [
    {"name": "Asaf Granit", "position": "Chef"},
    {"name": "Eyal Shani", "position": "Head Chef"},
    {"name": "Shani Knafo", "position": "Pastry Chef"},
    {"name": "Haim Cohen", "position": "Chef"},
    {"name": "Meir Adoni", "position": "Sous Chef"},
]


# ─── POST /employees ─────────────────────────────────────────────

async def test_create_employee_returns_201(client, store):
    res = await client.post(BASE, json=EMPLOYEES[2])
    assert res.status_code == 201
    body = res.json()
    assert body == {"id": 1, **EMPLOYEES[2]}
    assert store.get(body["id"]).name == EMPLOYEES[2]["name"]


async def test_create_employee_invalid_input_returns_400(client):
    res = await client.post(BASE, json={"name": ""})
    assert res.status_code == 400
    assert res.json() == {"error": '"name" is not allowed to be empty'}


async def test_create_employee_non_string_is_400(client):
    res = await client.post(BASE, json={"name": 12, "position": "Chef"})
    assert res.status_code == 400
    assert res.json()["error"] == "Validation error occurred"
    assert res.json()["details"][0]["field"].startswith("body.name")


async def test_create_duplicate_name_returns_400(client, seeded):
    res = await client.post(BASE, json={"name": seeded[0].name, "position": "Waiter"})
    assert res.status_code == 400
    assert res.json() == {"error": "Duplicate name"}


# ─── GET /employees ──────────────────────────────────────────────

async def test_list_employees(client, seeded):
    res = await client.get(BASE)
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [1, 2, 3]


async def test_list_employees_pagination(client, seeded):
    res = await client.get(BASE, params={"page": 2, "limit": 2})
    assert res.json() == [seeded[2].to_dict()]


async def test_list_employees_past_last_page_is_empty(client, seeded):
    res = await client.get(BASE, params={"page": 9})
    assert res.status_code == 200
    assert res.json() == []


async def test_list_employees_uses_default_limit(client, store):
    for i in range(12):
        store.create(f"Employee {i}", "Chef")
    res = await client.get(BASE)
    assert len(res.json()) == 10


# ─── GET /employees/{id} ─────────────────────────────────────────

async def test_get_employee_by_id(client, seeded):
    res = await client.get(f"{BASE}/{seeded[1].id}")
    assert res.status_code == 200
    assert res.json() == seeded[1].to_dict()


async def test_get_missing_employee_returns_404(client):
    res = await client.get(f"{BASE}/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


# ─── POST /employees/ids ─────────────────────────────────────────

async def test_get_employees_by_ids(client, seeded):
    res = await client.post(f"{BASE}/ids", json={"ids": [1, 2]})
    assert res.status_code == 200
    body = res.json()
    assert body["foundEmployees"] == [seeded[0].to_dict(), seeded[1].to_dict()]
    assert body["notFoundIds"] == []


async def test_get_employees_by_unknown_ids(client):
    res = await client.post(f"{BASE}/ids", json={"ids": [999, 1000]})
    assert res.status_code == 200
    assert res.json() == {"foundEmployees": [], "notFoundIds": [999, 1000]}


@pytest.mark.parametrize("payload", [{"ids": []}, {"ids": ["a"]}, {}])
async def test_get_employees_by_ids_rejects_bad_list(client, payload):
    res = await client.post(f"{BASE}/ids", json=payload)
    assert res.status_code == 400
    assert "ids" in res.json()["error"]


# ─── PUT /employees/{id} ─────────────────────────────────────────

async def test_update_employee(client, store):
    e = store.create("Haim Cohen", "Chef")
    update = {"name": "Haim Cohen", "position": "Executive Chef"}
    res = await client.put(f"{BASE}/{e.id}", json=update)
    assert res.status_code == 200
    assert res.json() == {"id": e.id, **update}
    assert store.get(e.id).position == "Executive Chef"


async def test_update_missing_employee_returns_404(client):
    res = await client.put(f"{BASE}/999", json={"name": "Non Existent", "position": "None"})
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


async def test_update_to_taken_name_returns_400(client, seeded):
    res = await client.put(f"{BASE}/{seeded[1].id}", json={"name": seeded[0].name})
    assert res.status_code == 400
    assert res.json() == {"error": "Duplicate name"}


async def test_update_body_cannot_change_id(client, seeded):
    res = await client.put(f"{BASE}/1", json={"id": 50, "position": "Owner"})
    assert res.json()["id"] == 1


# ─── DELETE /employees/{id} ──────────────────────────────────────

async def test_delete_employee_returns_204(client, store, seeded):
    res = await client.delete(f"{BASE}/{seeded[0].id}")
    assert res.status_code == 204
    assert res.content == b""
    assert not store.has_by_name(seeded[0].name)


async def test_delete_missing_employee_returns_404(client):
    res = await client.delete(f"{BASE}/999")
    assert res.status_code == 404
    assert res.json() == {"error": "Employee not found"}


# ─── POST /employees/bulk ────────────────────────────────────────

async def test_bulk_create_all_succeed(client, store):
    res = await client.post(f"{BASE}/bulk", json=EMPLOYEES[3:5])
    assert res.status_code == 200
    body = res.json()
    assert [e["name"] for e in body["data"]] == [e["name"] for e in EMPLOYEES[3:5]]
    assert body["failed"] == []
    assert all(store.has_by_name(e["name"]) for e in EMPLOYEES[3:5])


async def test_bulk_create_all_invalid_returns_400(client):
    res = await client.post(f"{BASE}/bulk", json=[{"name": ""}])
    assert res.status_code == 400
    body = res.json()
    assert body["error"].startswith("Failed to create employees")
    assert body["failed"] == [{"name": "", "error": '"name" is not allowed to be empty'}]


async def test_bulk_create_mixed(client):
    res = await client.post(f"{BASE}/bulk", json=[EMPLOYEES[0], {"name": ""}])
    assert res.status_code == 200
    body = res.json()
    assert body["data"] == [{"id": 1, **EMPLOYEES[0]}]
    assert body["failed"][0]["name"] == ""


@pytest.mark.parametrize("payload", [[], {"name": "Asaf Granit"}])
async def test_bulk_create_rejects_non_array(client, payload):
    res = await client.post(f"{BASE}/bulk", json=payload)
    assert res.status_code == 400
    assert res.json() == {"error": '"value" must be a non-empty array'}


# ─── PUT /employees/bulk ─────────────────────────────────────────

async def test_bulk_update(client, store, seeded):
    updates = [{"id": seeded[0].id, "name": "Ofer Kfir", "position": "Executive Chef"}]
    res = await client.put(f"{BASE}/bulk", json=updates)
    assert res.status_code == 200
    assert res.json()["data"] == updates
    assert store.get(seeded[0].id).name == "Ofer Kfir"


async def test_bulk_update_all_missing_returns_400(client):
    res = await client.put(
        f"{BASE}/bulk", json=[{"id": 999, "name": "Non Existent", "position": "None"}],
    )
    assert res.status_code == 400
    assert res.json()["failed"] == [{
        "id": 999, "name": "Non Existent", "position": "None",
        "error": "Employee not found",
    }]
    assert res.json()["error"] == "Failed to update employees - Failed IDs: 999"


async def test_bulk_update_mixed(client, seeded):
    res = await client.put(f"{BASE}/bulk", json=[
        {"id": seeded[2].id, "position": "Executive Chef"},
        {"id": 999, "name": "Non Existent", "position": "None"},
    ])
    assert res.status_code == 200
    body = res.json()
    assert body["data"] == [{**seeded[2].to_dict(), "position": "Executive Chef"}]
    assert body["failed"][0]["id"] == 999


# ─── DELETE /employees/bulk ──────────────────────────────────────

async def test_bulk_delete_mixed(client, store, seeded):
    res = await client.request("DELETE", f"{BASE}/bulk", json={"ids": [1, 999]})
    assert res.status_code == 200
    assert res.json() == {
        "data": [1],
        "failed": [{"id": 999, "error": "Employee not found"}],
    }
    assert len(store) == 2


async def test_bulk_delete_all_missing_returns_400(client):
    res = await client.request("DELETE", f"{BASE}/bulk", json={"ids": [999]})
    assert res.status_code == 400
    assert res.json()["failed"] == [{"id": 999, "error": "Employee not found"}]


async def test_bulk_delete_rejects_empty_ids(client):
    res = await client.request("DELETE", f"{BASE}/bulk", json={"ids": []})
    assert res.status_code == 400
    assert res.json() == {"error": '"ids" must be a non-empty array'}


# ─── edge inputs ─────────────────────────────────────────────────

async def test_list_employees_huge_page_is_empty(client, seeded):
    res = await client.get(BASE, params={"page": "10000000000000000000"})
    assert res.status_code == 200
    assert res.json() == []


async def test_list_employees_huge_limit(client, seeded):
    res = await client.get(BASE, params={"limit": "10000000000000000000"})
    assert res.status_code == 200
    assert [e["id"] for e in res.json()] == [1, 2, 3]


async def test_get_employee_logs_retrieval(client, seeded, caplog):
    with caplog.at_level(logging.INFO, logger="employees_api"):
        await client.get(f"{BASE}/{seeded[0].id}")
    assert f"Employee retrieved successfully - ID: {seeded[0].id}" in caplog.messages


async def test_bulk_delete_accepts_integral_float_ids(client, store, seeded):
    res = await client.request("DELETE", f"{BASE}/bulk", json={"ids": [1.0]})
    assert res.status_code == 200
    assert res.json() == {"data": [1], "failed": []}
    assert len(store) == 2
