"""Registration, login, logout and the token gate, exercised over HTTP."""
from datetime import timedelta

from performance_api.core.security import create_access_token


def test_register_login_and_list_scenario(client):
    body = {"name": "A", "email": "a@x.com", "password": "p1"}

    first = client.post("/auth/register", json=body)
    assert first.status_code == 201
    assert first.json()["message"] == "User registered successfully"

    second = client.post("/auth/register", json=body)
    assert second.status_code == 400
    assert second.json() == {"error": "Email already registered"}

    login = client.post("/auth/login", json={"email": "a@x.com", "password": "p1"})
    assert login.status_code == 200
    token = login.json()["token"]

    assert client.get("/api/players").status_code == 401

    listed = client.get("/api/players", headers={"Authorization": f"Bearer {token}"})
    assert listed.status_code == 200
    assert listed.json() == []


def test_register_returns_only_public_fields(client):
    response = client.post(
        "/auth/register",
        json={"name": "Coach", "email": "coach@club.com", "password": "secret", "role": "coach"},
    )

    assert response.status_code == 201
    user = response.json()["user"]
    assert set(user) == {"id", "name", "email"}
    assert "secret" not in response.text


def test_register_requires_name_email_and_password(client):
    for body in (
        {"email": "a@x.com", "password": "p1"},
        {"name": "A", "password": "p1"},
        {"name": "A", "email": "a@x.com"},
        {"name": "   ", "email": "a@x.com", "password": "p1"},
    ):
        response = client.post("/auth/register", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Name, email, and password are required"


def test_register_rejects_malformed_email(client):
    response = client.post(
        "/auth/register",
        json={"name": "A", "email": "not-an-email", "password": "p1"},
    )
    assert response.status_code == 400


def test_register_rejects_unknown_role(client):
    response = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "p1", "role": "admin"},
    )
    assert response.status_code == 400


def test_role_defaults_to_player(client):
    client.post("/auth/register", json={"name": "A", "email": "a@x.com", "password": "p1"})

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "p1"})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["role"] == "player"
    assert set(user) == {"id", "name", "email", "role"}


def test_login_failures_are_indistinguishable(client):
    client.post("/auth/register", json={"name": "A", "email": "a@x.com", "password": "p1"})

    wrong_password = client.post("/auth/login", json={"email": "a@x.com", "password": "nope"})
    unknown_email = client.post("/auth/login", json={"email": "b@x.com", "password": "p1"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


def test_login_email_is_case_insensitive(client):
    client.post("/auth/register", json={"name": "A", "email": "A@X.com", "password": "p1"})

    response = client.post("/auth/login", json={"email": "a@x.COM", "password": "p1"})

    assert response.status_code == 200


def test_logout_is_a_stateless_acknowledgement(client):
    response = client.post("/api/logout")

    assert response.status_code == 200
    assert "message" in response.json()


def test_missing_malformed_and_expired_tokens_share_one_401_body(client):
    expired = create_access_token(1, "coach", "c@club.com", expires_delta=timedelta(seconds=-1))

    responses = [
        client.get("/api/players"),
        client.get("/api/players", headers={"Authorization": "Bearer garbage"}),
        client.get("/api/players", headers={"Authorization": f"Bearer {expired}"}),
        client.get("/api/players", headers={"Authorization": "Basic abc"}),
    ]

    assert {r.status_code for r in responses} == {401}
    assert len({r.text for r in responses}) == 1


def test_token_is_accepted_until_it_expires(client):
    fresh = create_access_token(1, "player", "p@club.com", expires_delta=timedelta(minutes=5))

    response = client.get("/api/players", headers={"Authorization": f"Bearer {fresh}"})

    assert response.status_code == 200


def test_password_is_checked_exactly_as_registered(client):
    body = {"name": "A", "email": "a@x.com", "password": " p1 "}
    assert client.post("/auth/register", json=body).status_code == 201

    login = client.post("/auth/login", json={"email": "a@x.com", "password": " p1 "})
    assert login.status_code == 200

    trimmed = client.post("/auth/login", json={"email": "a@x.com", "password": "p1"})
    assert trimmed.status_code == 401


def test_register_rejects_whitespace_only_password(client):
    response = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "   "},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Name, email, and password are required"


def test_register_rejects_password_longer_than_72_bytes(client):
    response = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "x" * 100},
    )

    assert response.status_code == 400
    assert response.json() == {
        "error": "Password is too long",
        "message": "Password must be at most 72 bytes",
    }


def test_register_counts_password_length_in_bytes(client):
    # 36 two-byte characters fit exactly; one more does not.
    fits = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@x.com", "password": "é" * 36},
    )
    assert fits.status_code == 201

    too_long = client.post(
        "/auth/register",
        json={"name": "B", "email": "b@x.com", "password": "é" * 37},
    )
    assert too_long.status_code == 400


def test_register_keeps_name_as_submitted(client):
    response = client.post(
        "/auth/register",
        json={"name": " A ", "email": "a@x.com", "password": "p1"},
    )

    assert response.status_code == 201
    assert response.json()["user"]["name"] == " A "
