from .conftest import client


def test_list_seeded_users(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    users = resp.json()
    assert [u["name"] for u in users] == ["admin", "tech1", "tech2", "analyst1"]
    assert [u["role"] for u in users] == ["Admin", "Technician", "Technician", "Analyst"]


def test_create_get_update_delete_user(client):
    resp = client.post(
        "/api/users",
        json={"name": "tech3", "email": "tech3@example.com", "role": "Technician"},
    )
    assert resp.status_code == 201
    user = resp.json()
    assert resp.headers["location"] == f"/api/users/{user['id']}"

    assert client.get(f"/api/users/{user['id']}").json()["email"] == "tech3@example.com"

    update = {"id": user["id"], "name": "tech3", "email": None, "role": "Analyst"}
    up_resp = client.put(f"/api/users/{user['id']}", json=update)
    assert up_resp.status_code == 204
    fetched = client.get(f"/api/users/{user['id']}").json()
    assert fetched["role"] == "Analyst"
    assert fetched["email"] is None

    assert client.delete(f"/api/users/{user['id']}").status_code == 204
    assert client.get(f"/api/users/{user['id']}").status_code == 404
    assert client.delete(f"/api/users/{user['id']}").status_code == 404


def test_update_requires_matching_ids(client):
    resp = client.put(
        "/api/users/2",
        json={"id": 3, "name": "tech1", "email": "tech1@example.com", "role": "Technician"},
    )
    assert resp.status_code == 400
    assert client.get("/api/users/3").json()["name"] == "tech2"


def test_update_of_vanished_user_is_not_found(client):
    created = client.post("/api/users", json={"name": "temp", "role": "Analyst"}).json()
    assert client.delete(f"/api/users/{created['id']}").status_code == 204
    resp = client.put(
        f"/api/users/{created['id']}",
        json={"id": created["id"], "name": "temp", "role": "Analyst"},
    )
    assert resp.status_code == 404


def test_role_is_a_closed_set(client):
    resp = client.post("/api/users", json={"name": "x", "role": "Janitor"})
    assert resp.status_code == 422


def test_invalid_email_rejected(client):
    resp = client.post("/api/users", json={"name": "x", "email": "not-an-email", "role": "Admin"})
    assert resp.status_code == 422


def test_deleting_referenced_user_is_blocked(client):
    resp = client.delete("/api/users/1")
    assert resp.status_code == 409
    assert resp.json()["detail"] == "User is still referenced by other records"
    assert client.get("/api/users/1").status_code == 200
    assert client.get("/api/workflows/1").json()["created_by"] == 1


def test_deleting_user_referenced_only_by_workflow_is_blocked(client):
    user = client.post("/api/users", json={"name": "planner", "role": "Admin"}).json()
    wf = client.post("/api/workflows", json={"name": "Planner Flow", "created_by": user["id"]}).json()

    resp = client.delete(f"/api/users/{user['id']}")
    assert resp.status_code == 409
    assert resp.json()["detail"] == "User is still referenced by other records"
    assert client.get(f"/api/users/{user['id']}").status_code == 200

    assert client.delete(f"/api/workflows/{wf['id']}").status_code == 204
    assert client.delete(f"/api/users/{user['id']}").status_code == 204
