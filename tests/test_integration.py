"""
End-to-end tests through the application factory, session middleware
and HTTP routes
"""
import base64
import json

from fastapi.testclient import TestClient

from numbers_api.app.core.config import Settings
from numbers_api.app.core.session import SESSION_ID_KEY, SessionBackend
from numbers_api.app.main import create_app


def test_fresh_session_is_empty(client):
    response = client.get("/api/numbers")

    assert response.status_code == 200
    assert response.json() == {"numbers": [], "count": 0, "sum": 0}


def test_add_once(client):
    response = client.post("/api/numbers/add")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 1
    assert len(data["numbers"]) == 1
    assert data["numbers"][0]["id"] == 1
    assert 1 <= data["numbers"][0]["value"] <= 100
    assert data["sum"] == data["numbers"][0]["value"]


def test_add_three_then_sum(client):
    values = []
    for _ in range(3):
        values.append(client.post("/api/numbers/add").json()["numbers"][-1]["value"])

    response = client.get("/api/numbers/sum")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert [n["value"] for n in data["numbers"]] == values
    assert data["sum"] == sum(values)


def test_add_twice_then_clear(client):
    client.post("/api/numbers/add")
    client.post("/api/numbers/add")

    response = client.post("/api/numbers/clear")

    assert response.status_code == 200
    assert response.json() == {"numbers": [], "count": 0, "sum": 0}
    assert client.get("/api/numbers").json()["count"] == 0


def test_ids_match_append_order(client):
    for _ in range(6):
        client.post("/api/numbers/add")

    data = client.get("/api/numbers").json()

    assert [n["id"] for n in data["numbers"]] == [1, 2, 3, 4, 5, 6]


def test_list_and_sum_agree(client):
    for _ in range(4):
        client.post("/api/numbers/add")

    listed = client.get("/api/numbers").json()
    summed = client.get("/api/numbers/sum").json()

    assert listed["count"] == summed["count"]
    assert listed["sum"] == summed["sum"]


def test_values_stay_in_range(client):
    values = [client.post("/api/numbers/add").json()["numbers"][-1]["value"] for _ in range(30)]

    assert all(1 <= v <= 100 for v in values)
    assert len(set(values)) > 1


def test_post_ignores_body(client):
    response = client.post("/api/numbers/add", json={"value": 5000})
    assert response.status_code == 200
    assert response.json()["numbers"][0]["value"] <= 100


def test_sessions_are_isolated(app):
    first = TestClient(app)
    second = TestClient(app)

    first.post("/api/numbers/add")
    first.post("/api/numbers/add")

    assert first.get("/api/numbers").json()["count"] == 2
    assert second.get("/api/numbers").json()["count"] == 0


def test_session_cookie_is_issued(client, test_settings):
    response = client.post("/api/numbers/add")

    cookie = response.headers.get("set-cookie", "")
    assert test_settings.session_cookie_name in cookie
    assert "httponly" in cookie.lower()
    assert f"Max-Age={test_settings.session_max_age}" in cookie


def test_tampered_cookie_starts_new_session(app, test_settings):
    client = TestClient(app, cookies={test_settings.session_cookie_name: "tampered"})

    assert client.get("/api/numbers").json()["count"] == 0
    assert client.post("/api/numbers/add").json()["count"] == 1


def test_cookie_from_other_secret_is_ignored(test_settings):
    other = TestClient(create_app(Settings(secret_key="other-secret")))
    other.post("/api/numbers/add")
    cookie = other.cookies.get(test_settings.session_cookie_name)

    client = TestClient(
        create_app(test_settings), cookies={test_settings.session_cookie_name: cookie}
    )

    assert client.get("/api/numbers").json()["count"] == 0


def test_configured_range_applies():
    settings = Settings(secret_key="test-secret", random_min=500, random_max=999)
    client = TestClient(create_app(settings))

    values = [client.post("/api/numbers/add").json()["numbers"][-1]["value"] for _ in range(10)]

    assert all(500 <= v <= 999 for v in values)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_docs_hidden_without_debug(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_docs_available_in_debug():
    client = TestClient(create_app(Settings(secret_key="test-secret", debug=True)))

    assert client.get("/docs").status_code == 200
    paths = client.get("/openapi.json").json()["paths"]
    assert set(paths) >= {"/api/numbers", "/api/numbers/add", "/api/numbers/clear", "/api/numbers/sum"}


def test_cors_headers(client):
    response = client.get("/api/numbers", headers={"Origin": "http://example.com"})
    assert response.headers.get("access-control-allow-origin") == "*"


def test_collection_grows_past_cookie_limits(client, test_settings):
    """Hundreds of appends persist while the session cookie stays small"""
    cookie_sizes = set()
    for expected in range(1, 201):
        response = client.post("/api/numbers/add")
        assert response.json()["count"] == expected
        cookie_sizes.add(len(response.headers["set-cookie"]))

    data = client.get("/api/numbers").json()

    assert data["count"] == 200
    assert [n["id"] for n in data["numbers"]] == list(range(1, 201))
    assert data["sum"] == sum(n["value"] for n in data["numbers"])
    assert len(cookie_sizes) == 1
    assert max(cookie_sizes) < 4096


def test_cookie_carries_only_the_session_id(client, test_settings):
    client.post("/api/numbers/add")
    client.post("/api/numbers/add")

    cookie = client.cookies.get(test_settings.session_cookie_name)
    payload = json.loads(base64.b64decode(cookie.split(".")[0]))

    assert set(payload) == {SESSION_ID_KEY}


def test_replayed_cookie_does_not_undo_clear(app, test_settings):
    client = TestClient(app)
    client.post("/api/numbers/add")
    client.post("/api/numbers/add")
    old_cookie = client.cookies.get(test_settings.session_cookie_name)

    client.post("/api/numbers/clear")
    replayed = TestClient(app, cookies={test_settings.session_cookie_name: old_cookie})

    assert replayed.get("/api/numbers").json()["count"] == 0


def test_session_survives_new_client_with_same_cookie(app, test_settings):
    first = TestClient(app)
    first.post("/api/numbers/add")
    cookie = first.cookies.get(test_settings.session_cookie_name)

    second = TestClient(app, cookies={test_settings.session_cookie_name: cookie})

    assert second.get("/api/numbers").json()["count"] == 1


def test_idle_session_loses_numbers(app, test_settings):
    now = [0.0]
    app.state.session_backend = SessionBackend(test_settings.session_max_age, clock=lambda: now[0])
    client = TestClient(app)
    client.post("/api/numbers/add")

    now[0] += test_settings.session_max_age - 1
    assert client.get("/api/numbers").json()["count"] == 1

    now[0] += test_settings.session_max_age + 1
    assert client.get("/api/numbers").json()["count"] == 0
