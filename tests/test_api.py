import pytest
from fastapi.testclient import TestClient

from wayfindar.api.controllers import GENERIC_ERROR
from wayfindar.api.main import create_app
from wayfindar.config import Settings


def make_settings(database_url, tmp_path, **overrides):
    values = dict(
        DATABASE_URL=database_url,
        APP_ENV="dev",
        SESSION_SECRET_KEY="test-secret",
        STATIC_DIR=str(tmp_path / "static"),
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client(database_url, engine, tmp_path):
    app = create_app(make_settings(database_url, tmp_path), engine=engine)
    with TestClient(app) as c:
        yield c


def test_startup_seeds_before_serving(client):
    report = client.app.state.startup_report
    assert report.ok
    assert report.building_count == 4


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_default_route(client):
    bodies = [client.get(path).json() for path in ("/", "/home", "/home/index")]
    assert bodies[0] == bodies[1] == bodies[2]
    assert bodies[0]["buildings"] == 4


def test_unknown_controller_or_action_is_404(client):
    assert client.get("/nope").status_code == 404
    assert client.get("/home/nope").status_code == 404


def test_list_buildings(client):
    r = client.get("/buildings")
    assert r.status_code == 200
    data = r.json()
    assert data["total"] == 4
    assert [b["name"] for b in data["items"]] == [
        "Library", "Main Building", "Main Cafeteria", "Science Center",
    ]
    library = data["items"][0]
    assert library["position"] == {"x": 2.0, "y": 0.0, "z": 1.0}
    assert client.get("/buildings/index").json() == data


def test_building_details(client):
    items = client.get("/buildings").json()["items"]
    science = next(b for b in items if b["name"] == "Science Center")

    r = client.get(f"/buildings/details/{science['id']}")
    assert r.status_code == 200
    assert r.json()["position"] == {"x": -2.0, "y": 0.0, "z": -1.0}
    assert client.get("/buildings/details/9999").status_code == 404


def test_destination_is_kept_in_the_session(client):
    assert client.get("/navigation/current").json()["building"] is None

    library_id = client.get("/buildings").json()["items"][0]["id"]
    r = client.get(f"/navigation/set/{library_id}")
    assert r.status_code == 200
    assert "WayFindAR.Session" in client.cookies

    current = client.get("/navigation/current").json()
    assert current["building"]["name"] == "Library"
    assert current["selected_at"] is not None

    client.get("/navigation/clear")
    assert client.get("/navigation/current").json()["building"] is None


def test_destination_must_exist(client):
    assert client.get("/navigation/set/9999").status_code == 404


def test_server_starts_when_store_is_unreachable(unreachable_url, tmp_path):
    app = create_app(make_settings(unreachable_url, tmp_path))
    with TestClient(app) as c:
        assert not c.app.state.startup_report.ok
        assert c.get("/health").status_code == 200


def test_production_redirects_to_https(database_url, engine, tmp_path):
    app = create_app(make_settings(database_url, tmp_path, APP_ENV="production"), engine=engine)
    with TestClient(app) as c:
        r = c.get("/health", follow_redirects=False)
        assert r.status_code == 307
        assert r.headers["location"].startswith("https://")


def test_production_sets_hsts_and_hides_errors(database_url, engine, tmp_path):
    app = create_app(make_settings(database_url, tmp_path, APP_ENV="production"), engine=engine)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    with TestClient(app, base_url="https://testserver", raise_server_exceptions=False) as c:
        r = c.get("/health")
        assert r.status_code == 200
        assert r.headers["strict-transport-security"].startswith("max-age=")

        r = c.get("/boom")
        assert r.status_code == 500
        body = r.json()
        assert body["error"] == GENERIC_ERROR
        assert body["request_id"]
        assert "secret internals" not in r.text


def test_development_errors_show_details(database_url, engine, tmp_path):
    app = create_app(make_settings(database_url, tmp_path), engine=engine)

    @app.get("/boom")
    def boom():
        raise RuntimeError("visible in dev")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom")
        assert r.status_code == 500
        assert r.json()["detail"] == "visible in dev"


def test_static_files_are_served_when_present(database_url, engine, tmp_path):
    static = tmp_path / "static"
    static.mkdir()
    (static / "site.css").write_text("body {}", encoding="utf-8")
    app = create_app(make_settings(database_url, tmp_path), engine=engine)
    with TestClient(app) as c:
        r = c.get("/static/site.css")
        assert r.status_code == 200
        assert r.text == "body {}"


def test_route_matching_ignores_case(client):
    assert client.get("/Home/Index").json() == client.get("/").json()
    assert client.get("/Buildings").json()["total"] == 4
