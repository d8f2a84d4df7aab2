"""Login route — token issuance for valid credentials only."""

import threading

from app.infrastructure.security import decode_access_token


async def test_login_returns_token_for_valid_credentials(client, root_user):
    res = await client.post(
        "/api/v1/login", json={"username": "root", "password": "sekret"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "root"
    assert body["name"] == "Superuser"
    assert decode_access_token(body["token"]) == root_user.id


async def test_login_with_wrong_password_returns_401(client, root_user):
    res = await client.post(
        "/api/v1/login", json={"username": "root", "password": "wrong"},
    )
    assert res.status_code == 401
    assert "token" not in res.json()


async def test_login_with_unknown_user_returns_401(client):
    res = await client.post(
        "/api/v1/login", json={"username": "nobody", "password": "sekret"},
    )
    assert res.status_code == 401


async def test_login_without_password_returns_400(client):
    res = await client.post("/api/v1/login", json={"username": "root"})
    assert res.status_code == 400


async def test_password_verified_off_event_loop(client, root_user, monkeypatch):
    from app.infrastructure.security import verify_password

    loop_thread = threading.get_ident()
    verifying_threads = []

    def recording_verify(password, password_hash):
        verifying_threads.append(threading.get_ident())
        return verify_password(password, password_hash)

    monkeypatch.setattr("app.api.routes.login.verify_password", recording_verify)
    res = await client.post(
        "/api/v1/login", json={"username": "root", "password": "sekret"},
    )
    assert res.status_code == 200
    assert verifying_threads and verifying_threads[0] != loop_thread
