from datetime import datetime

import crud
from seed import seed_database


def test_list_projects_empty(client):
    assert client.get("/api/projects").json() == []


def test_create_project_is_listed_first(client, run_in_session):
    run_in_session(seed_database)

    response = client.post("/api/projects", json={"title": "X", "description": "Y", "category": "Z"})
    assert response.status_code == 200
    project_id = response.json()["id"]

    projects = client.get("/api/projects").json()
    assert len(projects) == 4
    assert projects[0]["id"] == project_id
    assert projects[0]["title"] == "X"
    assert projects[0]["description"] == "Y"
    assert projects[0]["category"] == "Z"
    for field in ("image_url", "video_url", "live_url", "repo_url"):
        assert projects[0][field] is None


def test_create_project_with_links(client):
    body = {
        "title": "Site",
        "description": "A site",
        "category": "Web",
        "image_url": "https://example.com/a.png",
        "video_url": "https://example.com/a.mp4",
        "live_url": "https://example.com",
        "repo_url": "https://github.com/example/site",
    }
    client.post("/api/projects", json=body)

    project = client.get("/api/projects").json()[0]
    for field, value in body.items():
        assert project[field] == value


def test_list_projects_newest_first(client):
    for i in range(4):
        client.post("/api/projects", json={"title": f"P{i}", "description": "D", "category": "C"})

    projects = client.get("/api/projects").json()
    assert [project["title"] for project in projects] == ["P3", "P2", "P1", "P0"]
    stamps = [datetime.fromisoformat(project["created_at"]) for project in projects]
    assert stamps == sorted(stamps, reverse=True)


def test_duplicate_titles_allowed(client):
    first = client.post("/api/projects", json={"title": "X", "description": "Y", "category": "Z"}).json()["id"]
    second = client.post("/api/projects", json={"title": "X", "description": "Y", "category": "Z"}).json()["id"]
    assert first != second
    assert len(client.get("/api/projects").json()) == 2


def test_delete_project(client):
    project_id = client.post("/api/projects", json={"title": "X", "description": "Y", "category": "Z"}).json()["id"]

    response = client.delete(f"/api/projects/{project_id}")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/projects").json() == []


def test_delete_missing_project_succeeds(client):
    response = client.delete("/api/projects/9999")
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_create_project_requires_category(client):
    response = client.post("/api/projects", json={"title": "X", "description": "Y"})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Invalid request. Please check your input and try again"
    assert body["detail"][0]["loc"] == ["body", "category"]


def test_projects_stored_with_empty_fields_are_still_served(client, run_in_session):
    run_in_session(crud.create_project, title="X", description="Y", category="")

    response = client.get("/api/projects")
    assert response.status_code == 200
    assert response.json()[0]["category"] == ""
