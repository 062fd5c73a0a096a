"""API endpoint tests for health, authentication and user accounts."""

from taskboard.models.board import BoardMembership


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    data = response.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["name"] == "New User"


def test_register_response_hides_password(client):
    """Test that the password hash is never serialized."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "secret@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    assert "password" not in response.json()["user"]
    assert "password_hash" not in response.json()["user"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email is a conflict."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": auth_headers.email, "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 409
    assert "already registered" in response.json()["detail"]


def test_register_invalid_email(client):
    """Test registration validates the email address."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "not-an-email", "password": "password123"},
    )
    assert response.status_code == 422


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401


def test_login_unknown_user(client):
    """Test login with an unknown email."""
    response = client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "password123"}
    )
    assert response.status_code == 401


def test_login_token_works(client, auth_headers):
    """Test that a token issued by login authenticates requests."""
    response = client.post(
        "/api/v1/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    token = response.json()["access_token"]

    response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == auth_headers.email


def test_unauthorized_access(client):
    """Test that endpoints require authentication."""
    response = client.get("/api/v1/boards")
    assert response.status_code == 401


def test_invalid_token(client):
    """Test that a malformed token is rejected."""
    response = client.get("/api/v1/boards", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_create_user_without_token(client):
    """Test signing up through the users endpoint."""
    response = client.post(
        "/api/v1/users",
        json={"email": "signup@example.com", "password": "password123", "name": "Sign Up"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "signup@example.com"
    assert "access_token" not in data


def test_create_user_duplicate_email(client, auth_headers):
    """Test that the users endpoint reports duplicate emails as conflicts."""
    response = client.post(
        "/api/v1/users",
        json={"email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 409


def test_get_users(client, auth_headers, other_headers):
    """Test listing users."""
    response = client.get("/api/v1/users", headers=auth_headers)
    assert response.status_code == 200
    emails = [user["email"] for user in response.json()]
    assert emails == [auth_headers.email, other_headers.email]


def test_get_user_profile(client, auth_headers):
    """Test the users/me alias."""
    response = client.get("/api/v1/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_get_user_by_id(client, auth_headers, other_headers):
    """Test getting another user by id."""
    response = client.get(f"/api/v1/users/{other_headers.user_id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == other_headers.email


def test_get_missing_user(client, auth_headers):
    """Test getting a user that does not exist."""
    response = client.get("/api/v1/users/999999", headers=auth_headers)
    assert response.status_code == 404


def test_delete_own_account(client, auth_headers):
    """Test that users can delete themselves."""
    response = client.delete(f"/api/v1/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 204

    # The token no longer resolves to a user
    response = client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 401


def test_delete_other_account_forbidden(client, auth_headers, other_headers):
    """Test that users cannot delete other accounts."""
    response = client.delete(f"/api/v1/users/{other_headers.user_id}", headers=auth_headers)
    assert response.status_code == 403


def test_delete_account_with_owned_board(client, auth_headers, board):
    """Test that board owners cannot delete their account."""
    response = client.delete(f"/api/v1/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 400


def test_delete_account_with_deleted_board(client, db, auth_headers, board):
    """Test that a soft-deleted board still keeps its owner membership."""
    client.delete(f"/api/v1/boards/{board['id']}", headers=auth_headers)

    response = client.delete(f"/api/v1/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 400

    memberships = db.query(BoardMembership).filter(BoardMembership.board_id == board["id"]).count()
    assert memberships == 1


def test_delete_member_account(client, db, auth_headers, other_headers, board):
    """Test that invited members can leave by deleting their account."""
    client.post(
        f"/api/v1/boards/{board['id']}/members",
        headers=auth_headers,
        json={"email": other_headers.email, "role": "MEMBER"},
    )

    response = client.delete(f"/api/v1/users/{other_headers.user_id}", headers=other_headers)
    assert response.status_code == 204

    roles = [
        m.role
        for m in db.query(BoardMembership).filter(BoardMembership.board_id == board["id"]).all()
    ]
    assert roles == ["OWNER"]
