import pytest

from eventhub.api.deps import get_store
from eventhub.core.errors import StoreError
from eventhub.main import app


class BrokenStore:
    """Store double whose every call fails like a dropped connection."""

    def __getattr__(self, name):
        action = name.replace("_", " ")

        def fail(*args, **kwargs):
            raise StoreError(action)

        return fail


@pytest.fixture()
def broken_client(client):
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    return client


@pytest.mark.parametrize("method, path", [
    ("get", "/events"),
    ("get", "/event/1"),
    ("get", "/users"),
    ("get", "/tickets"),
    ("get", "/tickets/user/1"),
    ("delete", "/tickets/1"),
])
def test_store_failure_is_server_error(broken_client, method, path):
    r = getattr(broken_client, method)(path)
    assert r.status_code == 500
    assert set(r.json()) == {"error"}


def test_store_failure_message_is_generic(broken_client):
    r = broken_client.get("/events")
    assert r.json() == {"error": "Error list events"}


def test_login_store_failure(broken_client):
    r = broken_client.post("/login", json={"email": "ada@example.com", "password": "x"})
    assert r.status_code == 500
