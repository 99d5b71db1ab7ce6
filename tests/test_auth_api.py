# /tests/test_auth_api.py


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "Classroom Tracker is running!"


def test_register_returns_public_profile(make_user):
    user = make_user("teacher1", "teacher", name="Ms. Frizzle")
    assert user["username"] == "teacher1"
    assert user["role"] == "teacher"
    assert user["name"] == "Ms. Frizzle"
    assert "password" not in user


def test_register_duplicate_username(client, teacher, password):
    response = client.post(
        "/api/auth/register",
        json={"username": "teacher1", "password": password, "name": "Impostor", "role": "student"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Username already exists"


def test_register_rejects_short_password(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "teacher1", "password": "123", "name": "T", "role": "teacher"},
    )
    assert response.status_code == 400


def test_login_success(client, teacher, password):
    response = client.post("/api/auth/login", json={"username": "teacher1", "password": password, "role": "teacher"})
    assert response.status_code == 200
    assert response.json() == teacher


def test_login_wrong_role_is_unauthorized(client, teacher, password):
    response = client.post("/api/auth/login", json={"username": "teacher1", "password": password, "role": "student"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_wrong_password_is_unauthorized(client, teacher):
    response = client.post("/api/auth/login", json={"username": "teacher1", "password": "wrong-pass", "role": "teacher"})
    assert response.status_code == 401


def test_login_unknown_user_is_unauthorized(client, password):
    response = client.post("/api/auth/login", json={"username": "nobody", "password": password, "role": "teacher"})
    assert response.status_code == 401


def test_login_invalid_role_is_bad_request(client, password):
    response = client.post("/api/auth/login", json={"username": "teacher1", "password": password, "role": "admin"})
    assert response.status_code == 400
