"""API endpoint tests."""

from fastapi.testclient import TestClient

from src.api.dependencies import get_account_service
from src.main import app
from src.models.user import User
from src.services.exceptions import InternalError


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client, db):
    """Test user registration stores a normalized user and returns only a token."""
    response = client.post(
        "/auth/register",
        json={"name": "jane doe", "email": "JANE@X.COM", "password": "password123"},
    )
    assert response.status_code == 200
    assert set(response.json()) == {"accessToken"}

    user = db.query(User).one()
    assert user.name == "Jane Doe"
    assert user.email == "jane@x.com"
    assert user.password_hash != "password123"
    assert user.password_hash not in response.text


def test_register_missing_fields(client):
    response = client.post("/auth/register", json={"email": "a@b.com", "password": "password123"})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing fields"}


def test_register_invalid_email(client):
    response = client.post(
        "/auth/register",
        json={"name": "Test User", "email": "not-an-email", "password": "password123"},
    )
    assert response.status_code == 422
    assert response.json() == {"error": "Invalid email format"}


def test_password_with_null_byte_is_rejected(client):
    """Passwords bcrypt cannot hash are a client error on every write path."""
    body = {"name": "Test User", "email": "null@example.com", "password": "abcdefgh\u0000"}

    for response in (client.post("/auth/register", json=body), client.post("/users", json=body)):
        assert response.status_code == 422
        assert response.json() == {"error": "Invalid password format"}

    user_id = client.post(
        "/users", json={**body, "password": "password123"}
    ).json()["id"]
    response = client.put(f"/users/{user_id}", json={"password": "abcdefgh\u0000"})
    assert response.status_code == 422


def test_register_malformed_body(client):
    response = client.post("/auth/register", json={"name": 42, "email": [], "password": {}})
    assert response.status_code == 400


def test_register_duplicate_email(client, registered_user):
    """Test registration with duplicate email fails with a conflict."""
    response = client.post(
        "/auth/register",
        json={"name": "Duplicate", "email": "TEST@example.com", "password": "password123"},
    )
    assert response.status_code == 409
    assert "already registered" in response.json()["error"]


def test_login(client, registered_user):
    """Test user login."""
    response = client.post(
        "/auth/login", json={"email": registered_user["email"], "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "accessToken" in response.json()


def test_login_missing_fields(client):
    response = client.post("/auth/login", json={"email": "test@example.com"})
    assert response.status_code == 400


def test_login_failures_do_not_leak(client, registered_user):
    """Wrong password and unknown email look the same to the caller."""
    wrong_password = client.post(
        "/auth/login", json={"email": registered_user["email"], "password": "wrongpass123"}
    )
    unknown_email = client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": "testpass123"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_get_me(client, registered_user):
    response = client.get(
        "/auth/me", headers={"Authorization": f"Bearer {registered_user['token']}"}
    )
    assert response.status_code == 200
    assert response.json()["email"] == registered_user["email"]


def test_get_me_requires_valid_token(client, registered_user):
    assert client.get("/auth/me").status_code == 401
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_user_crud(client):
    response = client.post(
        "/users", json={"name": "mary ANN", "email": "Mary@Example.com", "password": "password123"}
    )
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Mary Ann"
    assert created["email"] == "mary@example.com"
    assert "createdAt" in created and "updatedAt" in created
    assert not {"password", "passwordHash", "password_hash"} & set(created)
    user_id = created["id"]

    response = client.get(f"/users/{user_id}")
    assert response.status_code == 200
    assert response.json()["email"] == "mary@example.com"

    response = client.get("/users")
    assert response.status_code == 200
    assert [user["id"] for user in response.json()] == [user_id]

    response = client.put(f"/users/{user_id}", json={"name": "mary smith"})
    assert response.status_code == 201
    assert response.json()["name"] == "Mary Smith"

    response = client.delete(f"/users/{user_id}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/users/{user_id}").status_code == 404


def test_update_password_is_hashed(client, db):
    user_id = client.post(
        "/users", json={"name": "Test User", "email": "t@example.com", "password": "password123"}
    ).json()["id"]

    response = client.put(f"/users/{user_id}", json={"password": "newpassword1"})
    assert response.status_code == 201

    stored = db.query(User).filter(User.id == user_id).one()
    assert stored.password_hash != "newpassword1"
    login = client.post("/auth/login", json={"email": "t@example.com", "password": "newpassword1"})
    assert login.status_code == 200


def test_unknown_user_is_not_found(client):
    for response in (
        client.get("/users/missing"),
        client.put("/users/missing", json={"name": "Nobody"}),
        client.delete("/users/missing"),
    ):
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


def test_internal_errors_are_generic(client):
    class BrokenService:
        def list_users(self):
            raise InternalError()

    app.dependency_overrides[get_account_service] = lambda: BrokenService()
    response = client.get("/users")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unexpected_errors_are_generic(client):
    class BrokenService:
        def list_users(self):
            raise RuntimeError("connection string leaked")

    app.dependency_overrides[get_account_service] = lambda: BrokenService()
    with TestClient(app, raise_server_exceptions=False) as raw_client:
        response = raw_client.get("/users")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "leaked" not in response.text
