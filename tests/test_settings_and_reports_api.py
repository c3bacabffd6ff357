"""Settings, reports and health endpoints"""
from datetime import date

from app.utils.datetime_helper import now_local


DEFAULT_SETTINGS = {
    "studyDuration": 7200,
    "breakDuration": 300,
    "playNotification": True,
    "selectedPlaylistId": None,
    "selectedPlaylistName": None,
}


def test_get_default_settings(client):
    response = client.get("/api/settings")

    assert response.status_code == 200
    assert response.json() == DEFAULT_SETTINGS


def test_post_settings_echoes_body(client):
    body = {
        "studyDuration": 5400,
        "breakDuration": 900,
        "playNotification": False,
        "selectedPlaylistId": "playlist1",
        "selectedPlaylistName": "Study Beats",
    }

    response = client.post("/api/settings", json=body)

    assert response.status_code == 200
    assert response.json() == body


def test_post_settings_rejects_unlisted_duration(client):
    response = client.post("/api/settings", json={**DEFAULT_SETTINGS, "studyDuration": 42})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request"}


def test_reports_flow(client):
    assert client.get("/api/reports").json() == {"reports": []}

    start = client.post("/api/reports/sessions", json={"type": "study", "duration": 3600}).json()
    assert start["completed"] is False
    assert start["duration"] == 3600

    done = client.post(
        "/api/reports/sessions",
        json={"type": "study", "duration": 3600, "startedId": start["id"]},
    ).json()
    assert done["completed"] is True
    assert done["startedId"] == start["id"]

    client.post("/api/reports/sessions", json={"type": "break", "duration": 300})

    reports = client.get("/api/reports").json()["reports"]
    today = now_local().date().isoformat()
    assert reports == [{
        "date": today,
        "formattedDate": reports[0]["formattedDate"],
        "totalStudyTime": 3600,
        "totalBreakTime": 0,
        "completedCount": 1,
        "incompleteCount": 1,
    }]

    day = client.get(f"/api/reports/{today}").json()
    assert day["date"] == today
    ids = [s["id"] for s in day["sessions"]]
    assert ids == sorted(ids, reverse=True)
    assert len(ids) == 3


def test_completion_of_unknown_start_is_404(client):
    response = client.post(
        "/api/reports/sessions",
        json={"type": "study", "duration": 60, "startedId": 123},
    )

    assert response.status_code == 404
    assert response.json() == {"message": "Session 123 not found"}


def test_completion_type_must_match_start(client):
    start = client.post("/api/reports/sessions", json={"type": "study", "duration": 60}).json()

    response = client.post(
        "/api/reports/sessions",
        json={"type": "break", "duration": 60, "startedId": start["id"]},
    )

    assert response.status_code == 400


def test_start_can_only_be_completed_once(client):
    start = client.post("/api/reports/sessions", json={"type": "study", "duration": 3600}).json()
    completion = {"type": "study", "duration": 3600, "startedId": start["id"]}

    assert client.post("/api/reports/sessions", json=completion).status_code == 200
    response = client.post("/api/reports/sessions", json=completion)

    assert response.status_code == 409
    assert response.json() == {"message": f"Session {start['id']} is already completed"}
    report = client.get("/api/reports").json()["reports"][0]
    assert report["totalStudyTime"] == 3600
    assert report["completedCount"] == 1
    assert report["incompleteCount"] == 0


def test_day_sessions_bad_date(client):
    response = client.get("/api/reports/yesterday")

    assert response.status_code == 400


def test_day_without_sessions(client):
    response = client.get(f"/api/reports/{date(2020, 1, 1).isoformat()}")

    assert response.json() == {"date": "2020-01-01", "sessions": []}


def test_clear_history(client):
    client.post("/api/reports/sessions", json={"type": "study", "duration": 60})

    response = client.delete("/api/reports")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert client.get("/api/reports").json() == {"reports": []}


def test_health(client):
    response = client.get("/api/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
