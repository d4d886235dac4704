import jwt

from conftest import login, register
from eventhub.core.security import create_access_token
from eventhub.models.user import User


def test_register_then_login_sets_cookie(client):
    user = register(client)
    assert user["id"] > 0
    assert user == {"id": user["id"], "name": "Ada", "email": "ada@example.com"}

    r = client.post("/login", json={"email": "ada@example.com", "password": "s3cret"})
    assert r.status_code == 200
    assert r.json() == {"id": user["id"], "email": "ada@example.com", "name": "Ada"}
    assert "token" in r.cookies
    assert "httponly" in r.headers["set-cookie"].lower()


def test_login_wrong_password_is_unauthorized(client):
    register(client)
    r = client.post("/login", json={"email": "ada@example.com", "password": "nope"})
    assert r.status_code == 401
    assert "token" not in r.cookies


def test_login_unknown_email_is_not_found(client):
    register(client)
    r = client.post("/login", json={"email": "bob@example.com", "password": "s3cret"})
    assert r.status_code == 404


def test_login_email_match_is_exact(client):
    register(client)
    r = client.post("/login", json={"email": "ADA@example.com", "password": "s3cret"})
    assert r.status_code == 404


def test_duplicate_registration_is_client_error(client):
    register(client)
    r = client.post("/register", json={"name": "Ada 2", "email": "ada@example.com", "password": "x"})
    assert r.status_code == 422
    assert "error" in r.json()


def test_register_missing_field(client):
    r = client.post("/register", json={"email": "ada@example.com", "password": "x"})
    assert r.status_code == 422


def test_users_list_hides_password(client):
    register(client)
    register(client, email="bob@example.com", name="Bob")
    r = client.get("/users")
    assert r.status_code == 200
    users = r.json()
    assert [u["email"] for u in users] == ["ada@example.com", "bob@example.com"]
    assert all(set(u) == {"id", "name", "email"} for u in users)


def test_profile_without_cookie(client):
    r = client.get("/profile")
    assert r.status_code == 401
    assert r.json()["user"] is None


def test_profile_with_foreign_token(client):
    user = register(client)
    forged = jwt.encode({"id": user["id"], "email": user["email"]}, "some-other-signing-secret-0123456789abc", algorithm="HS256")
    client.cookies.set("token", forged)
    r = client.get("/profile")
    assert r.status_code == 403
    assert r.json() == {"message": "Invalid token", "user": None}


def test_profile_with_garbage_token(client):
    client.cookies.set("token", "not-a-jwt")
    r = client.get("/profile")
    assert r.status_code == 403


def test_profile_rereads_user(client, session_factory):
    user = register(client)
    login(client)
    db = session_factory()
    db.get(User, user["id"]).name = "Ada Lovelace"
    db.commit()
    db.close()

    r = client.get("/profile")
    assert r.status_code == 200
    assert r.json() == {"name": "Ada Lovelace", "email": "ada@example.com", "id": user["id"]}


def test_profile_for_deleted_user(client, session_factory):
    user = register(client)
    client.cookies.set("token", create_access_token(user["id"], user["email"]))
    db = session_factory()
    db.delete(db.get(User, user["id"]))
    db.commit()
    db.close()

    r = client.get("/profile")
    assert r.status_code == 404
    assert r.json()["user"] is None


def test_logout_clears_cookie(client):
    register(client)
    login(client)
    assert client.get("/profile").status_code == 200

    r = client.post("/logout")
    assert r.status_code == 200
    assert client.get("/profile").status_code == 401
