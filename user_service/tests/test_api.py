import bcrypt

from user_service.app.db import SessionLocal
from user_service.app.models import User

ALICE = {"username": "alice", "password": "secret123", "email": "alice@example.com"}


def create_alice(client):
    return client.post("/users", json=ALICE).json()

def test_create_user(client):
    resp = client.post("/users", json=ALICE)

    assert resp.status_code == 201
    body = resp.json()
    assert body == {"id": body["id"], "username": "alice", "email": "alice@example.com"}
    assert "password" not in resp.text

def test_password_is_stored_hashed(client):
    user_id = create_alice(client)["id"]

    with SessionLocal() as session:
        stored = session.get(User, user_id)
        assert stored.password_hash != ALICE["password"]
        assert bcrypt.checkpw(ALICE["password"].encode(), stored.password_hash.encode())

def test_duplicate_username_and_email_are_allowed(client):
    create_alice(client)

    resp = client.post("/users", json=ALICE)

    assert resp.status_code == 201
    assert len(client.get("/users").json()) == 2

def test_create_user_with_invalid_email(client):
    resp = client.post("/users", json={**ALICE, "email": "not-an-email"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid input data provided"

def test_create_user_with_short_password(client):
    resp = client.post("/users", json={**ALICE, "password": "12345"})

    assert resp.status_code == 400
    assert resp.json()["status"] == 400

def test_create_user_without_body(client):
    resp = client.post("/users")

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid input data provided"

def test_get_user(client):
    created = create_alice(client)

    resp = client.get(f"/users/{created['id']}")

    assert resp.status_code == 200
    assert resp.json() == created

def test_get_missing_user(client):
    resp = client.get("/users/123")

    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found with ID: 123"

def test_list_users(client):
    create_alice(client)
    client.post("/users", json={**ALICE, "username": "bob", "email": "bob@example.com"})

    resp = client.get("/users")

    assert resp.status_code == 200
    assert [u["username"] for u in resp.json()] == ["alice", "bob"]

def test_update_user(client):
    user_id = create_alice(client)["id"]

    resp = client.put(f"/users/{user_id}", json={"username": "alice2", "password": "newsecret", "email": "a2@example.com"})

    assert resp.status_code == 200
    assert resp.json() == {"id": user_id, "username": "alice2", "email": "a2@example.com"}
    with SessionLocal() as session:
        assert bcrypt.checkpw("newsecret".encode(), session.get(User, user_id).password_hash.encode())

def test_update_missing_user(client):
    resp = client.put("/users/123", json=ALICE)

    assert resp.status_code == 404

def test_update_user_with_invalid_body(client):
    user_id = create_alice(client)["id"]

    resp = client.put(f"/users/{user_id}", json={**ALICE, "username": "al"})

    assert resp.status_code == 400
    assert client.get(f"/users/{user_id}").json()["username"] == "alice"

def test_delete_user(client):
    user_id = create_alice(client)["id"]

    resp = client.delete(f"/users/{user_id}")

    assert resp.status_code == 204
    assert client.get(f"/users/{user_id}").status_code == 404

def test_delete_missing_user(client):
    resp = client.delete("/users/123")

    assert resp.status_code == 404
    assert resp.json()["error"] == "User not found with ID: 123"

def test_exists_endpoint(client):
    user_id = create_alice(client)["id"]

    found = client.get(f"/users/{user_id}/exists")
    missing = client.get(f"/users/{user_id + 1}/exists")

    assert found.status_code == 200
    assert found.content == b""
    assert missing.status_code == 404
    assert missing.content == b""

def test_invalid_id_type(client):
    resp = client.get("/users/abc")

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid parameter type"

def test_unknown_route_uses_error_body(client):
    resp = client.get("/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["error"] == "Not Found"
    assert resp.json()["status"] == 404
