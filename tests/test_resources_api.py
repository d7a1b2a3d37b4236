"""Tests for the /api/resources endpoints."""

import pytest

BASE = "/api/resources"


def _create(client, **fields):
    response = client.post(BASE, json=fields)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _drop_table(app):
    app.state.db.connection.execute("DROP TABLE resources")


def test_resource_lifecycle(client):
    response = client.post(BASE, json={"name": "Widget"})
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Resource created successfully"
    created = body["data"]
    assert created["status"] == "active"
    assert isinstance(created["id"], int)

    response = client.get(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Resource retrieved successfully", "data": created}

    response = client.put(f"{BASE}/{created['id']}", json={"status": "inactive"})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert response.json()["message"] == "Resource updated successfully"
    assert updated["status"] == "inactive"
    assert updated["name"] == "Widget"

    response = client.delete(f"{BASE}/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Resource deleted successfully"}

    response = client.get(f"{BASE}/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Resource not found"}


def test_create_with_all_fields(client):
    data = _create(client, name="Gadget", description="Shiny", category="tools", status="draft")

    assert data["description"] == "Shiny"
    assert data["category"] == "tools"
    assert data["status"] == "draft"
    assert set(data) == {"id", "name", "description", "category", "status", "created_at", "updated_at"}


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}, {"description": "no name"}])
def test_create_without_name_is_rejected(client, payload):
    response = client.post(BASE, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}
    assert client.get(BASE).json()["count"] == 0


def test_create_without_body_is_rejected(client):
    response = client.post(BASE)

    assert response.status_code == 400
    assert response.json() == {"error": "Name is required"}


def test_create_accepts_urlencoded_body(client):
    response = client.post(BASE, data={"name": "Form Widget", "category": "forms"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Form Widget"
    assert data["category"] == "forms"
    assert data["status"] == "active"


def test_create_accepts_trailing_slash(client):
    response = client.post(f"{BASE}/", json={"name": "Slash"})

    assert response.status_code == 201
    assert client.get(f"{BASE}/").json()["count"] == 1


def test_create_with_malformed_json_is_rejected(client):
    response = client.post(
        BASE,
        content=b'{"name": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_create_with_non_object_json_is_rejected(client):
    response = client.post(BASE, json=["Widget"])

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


def test_create_with_non_string_field_is_rejected(client):
    response = client.post(BASE, json={"name": 123})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert body["details"][0]["loc"] == ["name"]
    assert client.get(BASE).json()["count"] == 0


def test_list_returns_count_and_data(client):
    response = client.get(BASE)
    assert response.status_code == 200
    assert response.json() == {"message": "Resources retrieved successfully", "count": 0, "data": []}

    first = _create(client, name="first")
    second = _create(client, name="second")

    body = client.get(BASE).json()
    assert body["count"] == 2
    assert [r["id"] for r in body["data"]] == [second["id"], first["id"]]


def test_list_filters(client):
    _create(client, name="Red Widget", category="widgets")
    _create(client, name="Blue Widget", category="widgets", status="inactive")
    _create(client, name="Red Gadget", category="gadgets")

    body = client.get(BASE, params={"status": "active"}).json()
    assert body["count"] == 2
    assert all(r["status"] == "active" for r in body["data"])
    created = [r["created_at"] for r in body["data"]]
    assert created == sorted(created, reverse=True)

    body = client.get(BASE, params={"category": "widgets", "name": "Red"}).json()
    assert [r["name"] for r in body["data"]] == ["Red Widget"]

    body = client.get(BASE, params={"name": "red"}).json()
    assert body["count"] == 0

    body = client.get(BASE, params={"category": "", "status": ""}).json()
    assert body["count"] == 3


def test_update_with_empty_body_keeps_fields(client):
    created = _create(client, name="Widget", description="Original")

    response = client.put(f"{BASE}/{created['id']}", json={"name": "", "description": ""})

    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["name"] == "Widget"
    assert updated["description"] == "Original"
    assert updated["created_at"] == created["created_at"]


def test_update_accepts_urlencoded_body(client):
    created = _create(client, name="Widget")

    response = client.put(f"{BASE}/{created['id']}", data={"category": "forms"})

    assert response.status_code == 200
    assert response.json()["data"]["category"] == "forms"


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("GET", {}),
        ("PUT", {"json": {"name": "Nope"}}),
        ("DELETE", {}),
    ],
)
def test_missing_resource_returns_404(client, method, kwargs):
    response = client.request(method, f"{BASE}/9999", **kwargs)

    assert response.status_code == 404
    assert response.json() == {"error": "Resource not found"}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
@pytest.mark.parametrize("bad_id", ["abc", "x12", "-", "%2B", ".5", "99999999999999999999"])
def test_invalid_id_is_rejected_without_store_access(app, client, method, bad_id):
    # With the table gone any store access would fail with a 500.
    _drop_table(app)

    response = client.request(method, f"{BASE}/{bad_id}", json={"name": "x"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid resource ID"}


@pytest.mark.parametrize("suffix", ["abc", ".5", "e3", "%20tail"])
def test_id_uses_leading_integer(client, suffix):
    created = _create(client, name="Widget")
    path = f"{BASE}/{created['id']}{suffix}"

    response = client.get(path)
    assert response.status_code == 200
    assert response.json()["data"] == created

    response = client.put(path, json={"status": "inactive"})
    assert response.status_code == 200
    assert response.json()["data"]["status"] == "inactive"

    response = client.delete(path)
    assert response.status_code == 200
    assert client.get(f"{BASE}/{created['id']}").status_code == 404


def test_id_accepts_leading_whitespace_and_sign(client):
    created = _create(client, name="Widget")

    assert client.get(f"{BASE}/%20{created['id']}").status_code == 200
    assert client.get(f"{BASE}/%2B{created['id']}").json()["data"] == created


def test_invalid_id_is_reported_before_body_errors(app, client):
    _drop_table(app)

    response = client.put(
        f"{BASE}/abc",
        content=b'{"name": ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid resource ID"}


def test_create_without_name_does_not_touch_store(app, client):
    _drop_table(app)

    response = client.post(BASE, json={"description": "no name"})

    assert response.status_code == 400


@pytest.mark.parametrize(
    "method, path, kwargs, error",
    [
        ("POST", BASE, {"json": {"name": "Widget"}}, "Failed to create resource"),
        ("GET", BASE, {}, "Failed to retrieve resources"),
        ("GET", f"{BASE}/1", {}, "Failed to retrieve resource"),
        ("PUT", f"{BASE}/1", {"json": {"name": "Widget"}}, "Failed to update resource"),
        ("DELETE", f"{BASE}/1", {}, "Failed to delete resource"),
    ],
)
def test_store_failure_returns_500_with_details(app, client, method, path, kwargs, error):
    _drop_table(app)

    response = client.request(method, path, **kwargs)

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == error
    assert "no such table" in body["details"]
