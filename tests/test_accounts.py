import pytest


@pytest.mark.parametrize(
    "username,role",
    [
        ("student", "student"),
        ("adminT", "tech_admin"),
        ("adminM", "call_admin"),
        ("adminA", "app_admin"),
        ("adminS", "sys_admin"),
        ("admin", "student_admin"),
    ],
)
def test_login_with_seeded_accounts(client, username, role):
    response = client.post("/login", json={"username": username, "password": "123456"})
    assert response.status_code == 200
    assert response.json() == {"username": username, "role": role}


def test_login_wrong_password(client):
    response = client.post("/login", json={"username": "student", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_unknown_user(client):
    response = client.post("/login", json={"username": "ghost", "password": "123456"})
    assert response.status_code == 401


def test_login_without_body_fields(client):
    response = client.post("/login", json={})
    assert response.status_code == 401


def test_admin_can_add_user(client):
    response = client.post(
        "/users/add",
        json={"adminUsername": "adminS", "username": "carol", "password": "pw", "role": "call_admin"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["username"] == "carol"
    assert body["role"] == "call_admin"
    assert isinstance(body["id"], int)

    login = client.post("/login", json={"username": "carol", "password": "pw"})
    assert login.json() == {"username": "carol", "role": "call_admin"}


def test_student_cannot_add_user(client):
    response = client.post(
        "/users/add",
        json={"adminUsername": "student", "username": "mallory", "password": "pw", "role": "sys_admin"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Access denied. Admin only."}
    assert client.post("/login", json={"username": "mallory", "password": "pw"}).status_code == 401


def test_unknown_requester_cannot_add_user(client):
    response = client.post(
        "/users/add",
        json={"adminUsername": "ghost", "username": "dave", "password": "pw", "role": "student"},
    )
    assert response.status_code == 403


def test_duplicate_user_conflicts(client):
    response = client.post(
        "/users/add",
        json={"adminUsername": "admin", "username": "adminT", "password": "pw", "role": "student"},
    )
    assert response.status_code == 409
    assert "already exists" in response.json()["error"]


def test_unknown_role_rejected(client):
    response = client.post(
        "/users/add",
        json={"adminUsername": "admin", "username": "erin", "password": "pw", "role": "superuser"},
    )
    assert response.status_code == 422
    assert "role" in response.json()["error"]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "portal"}
