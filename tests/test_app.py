from demo_api import create_app
from demo_api.config import TestConfig
from demo_api.store import Store


def test_landing_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Demo API tester" in resp.data
    assert client.get("/index.html").status_code == 200


def test_unknown_api_route_is_json_404(client):
    resp = client.get("/api/nothing/here")
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "route not found"}


def test_wrong_method_is_json_405(client):
    resp = client.patch("/api/users/1", json={})
    assert resp.status_code == 405
    assert resp.get_json()["success"] is False


def test_cors_header_present(client):
    resp = client.get("/api/users", headers={"Origin": "http://example.com"})
    assert resp.headers["Access-Control-Allow-Origin"] in ("*", "http://example.com")


def test_apps_do_not_share_state():
    first = create_app(TestConfig).test_client()
    second = create_app(TestConfig).test_client()
    first.delete("/api/users/1")
    assert second.get("/api/users/1").status_code == 200


def test_unseeded_app_starts_empty():
    class EmptyConfig(TestConfig):
        SEED_DATA = False

    client = create_app(EmptyConfig).test_client()
    assert client.get("/api/users").get_json()["data"] == []


def test_app_uses_given_store():
    store = Store()
    store.add_user("Only", "only@example.com")
    app = create_app(TestConfig, store=store)
    users = app.test_client().get("/api/users").get_json()["data"]
    assert [u["name"] for u in users] == ["Only"]
