from fastapi.testclient import TestClient

from skillmatch.config import settings
from skillmatch.main import app


def _login(client: TestClient, username: str = "admin") -> None:
    response = client.post("/api/auth/login", json={"username": username, "password": "pw"})
    assert response.status_code == 200


def test_health():
    with TestClient(app) as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_dashboard_requires_login():
    with TestClient(app) as client:
        session = client.get("/api/auth/session")
        assert session.status_code == 200
        assert session.json()["user"] is None
        assert session.json()["can_edit"] is False

        assert client.get("/api/employees").status_code == 401
        assert client.get("/api/job-roles").status_code == 401
        assert client.get("/api/matches").status_code == 401
        assert client.post("/api/employees", json={"name": "Taro", "skills": "x"}).status_code == 401


def test_login_roles_and_logout():
    with TestClient(app) as client:
        admin = client.post("/api/auth/login", json={"username": "admin", "password": "anything"})
        assert admin.status_code == 200
        assert admin.json()["user"] == {"username": "admin", "role": "admin"}
        assert admin.json()["can_edit"] is True
        assert admin.json()["greeting"] == "Welcome, admin"

        bob = client.post("/api/auth/login", json={"username": "bob", "password": "x"})
        assert bob.json()["user"]["role"] == "employee"
        assert bob.json()["can_edit"] is False

        logout = client.post("/api/auth/logout")
        assert logout.status_code == 200
        assert logout.json()["user"] is None

        empty = client.post("/api/auth/login", json={"username": "bob", "password": ""})
        assert empty.status_code == 401
        assert client.get("/api/auth/session").json()["user"] is None


def test_register_and_password_reset():
    with TestClient(app) as client:
        mismatch = client.post(
            "/api/auth/register",
            json={"username": "carol", "password": "a", "confirm_password": "b"},
        )
        assert mismatch.status_code == 400
        assert "Passwords do not match" in mismatch.json()["detail"]
        assert client.get("/api/auth/session").json()["user"] is None

        registered = client.post(
            "/api/auth/register",
            json={"username": "carol", "password": "a", "confirm_password": "a"},
        )
        assert registered.status_code == 200
        assert registered.json()["user"] == {"username": "carol", "role": "employee"}

        reset = client.post("/api/auth/password-reset", json={"email": "carol@example.com"})
        assert reset.status_code == 200
        assert "carol@example.com" in reset.json()["message"]

        assert client.post("/api/auth/password-reset", json={"email": ""}).status_code == 400


def test_admin_adds_employee_and_job_role(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)

    with TestClient(app) as client:
        _login(client)

        taro = client.post("/api/employees", json={"name": "Taro", "skills": " x , y "})
        assert taro.status_code == 200
        assert taro.json() == {"id": 1, "name": "Taro", "skills": ["x", "y"]}

        hanako = client.post("/api/employees", json={"name": "Hanako", "skills": "x"})
        assert hanako.json()["id"] == 2

        role = client.post("/api/job-roles", json={"title": "Analyst", "skills": "x, y, z"})
        assert role.status_code == 200
        assert role.json() == {"id": 1, "title": "Analyst", "required_skills": ["x", "y", "z"]}

        blank = client.post("/api/employees", json={"name": "", "skills": "x"})
        assert blank.status_code == 400

        employees = client.get("/api/employees").json()["items"]
        assert [e["name"] for e in employees] == ["Taro", "Hanako"]
        job_roles = client.get("/api/job-roles").json()["items"]
        assert [j["title"] for j in job_roles] == ["Analyst"]


def test_employee_session_cannot_add(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)

    with TestClient(app) as client:
        _login(client, "bob")

        denied = client.post("/api/employees", json={"name": "Taro", "skills": "x"})
        assert denied.status_code == 403
        denied_role = client.post("/api/job-roles", json={"title": "Analyst", "skills": "x"})
        assert denied_role.status_code == 403

        assert client.get("/api/employees").json()["items"] == []
        assert client.get("/api/job-roles").json()["items"] == []


def test_matches_builds_matrix_and_chart(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)
    monkeypatch.setattr(settings, "chart_palette", ["#000001", "#000002"])

    with TestClient(app) as client:
        _login(client)
        client.post("/api/employees", json={"name": "Taro", "skills": "a, b"})
        client.post("/api/employees", json={"name": "Jiro", "skills": "a, a"})
        client.post("/api/job-roles", json={"title": "ABC", "skills": "a, b, c"})
        client.post("/api/job-roles", json={"title": "A", "skills": "a"})

        response = client.get("/api/matches")

    assert response.status_code == 200
    body = response.json()
    assert body["duplicate_policy"] == "occurrences"
    assert body["rows"] == [
        {"name": "Taro", "job_1": 66.67, "job_2": 100.0},
        {"name": "Jiro", "job_1": 66.67, "job_2": 200.0},
    ]
    assert body["series"] == [
        {"job_role_id": 1, "data_key": "job_1", "title": "ABC", "color": "#000001"},
        {"job_role_id": 2, "data_key": "job_2", "title": "A", "color": "#000002"},
    ]
    assert body["matrix"][0]["matches"][0] == {"job_role_id": 1, "title": "ABC", "percent": 66.67}


def test_matches_honours_configured_duplicate_policy(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)
    monkeypatch.setattr(settings, "match_duplicate_policy", "capped")

    with TestClient(app) as client:
        _login(client)
        client.post("/api/employees", json={"name": "Jiro", "skills": "a, a"})
        client.post("/api/job-roles", json={"title": "A", "skills": "a"})

        body = client.get("/api/matches").json()

    assert body["duplicate_policy"] == "capped"
    assert body["rows"] == [{"name": "Jiro", "job_1": 100.0}]


def test_seeded_demo_data_is_visible_after_login():
    with TestClient(app) as client:
        _login(client, "bob")
        body = client.get("/api/matches").json()

    assert len(body["rows"]) == 2
    assert body["rows"][0]["job_1"] == 100.0
    assert body["rows"][1]["job_2"] == 66.67
    assert [s["title"] for s in body["series"]] == ["プロジェクトマネージャー", "データサイエンティスト"]


def test_state_resets_on_restart(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)

    with TestClient(app) as client:
        _login(client)
        client.post("/api/employees", json={"name": "Taro", "skills": "x"})

    with TestClient(app) as client:
        assert client.get("/api/auth/session").json()["user"] is None
        _login(client)
        assert client.get("/api/employees").json()["items"] == []


def test_matches_keep_roles_with_colliding_titles(monkeypatch):
    monkeypatch.setattr(settings, "seed_demo_data", False)

    with TestClient(app) as client:
        _login(client)
        client.post("/api/employees", json={"name": "Taro", "skills": "a"})
        for title, skills in [("Dev", "a"), ("Dev", "b"), ("name", "a")]:
            assert client.post("/api/job-roles", json={"title": title, "skills": skills}).status_code == 200

        body = client.get("/api/matches").json()

    assert body["rows"] == [{"name": "Taro", "job_1": 100.0, "job_2": 0.0, "job_3": 100.0}]
    assert [s["data_key"] for s in body["series"]] == ["job_1", "job_2", "job_3"]
