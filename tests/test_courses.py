def create_manual(client, title, department=None, content="body"):
    data = {"title": title, "content": content}
    if department is not None:
        data["department"] = department
    response = client.post("/courses/manual", data=data)
    assert response.status_code == 200
    return response.json()["id"]


def titles(client, payload):
    response = client.post("/courses", json=payload)
    assert response.status_code == 200
    return sorted(course["title"] for course in response.json())


def test_file_course_requires_file(client):
    response = client.post("/courses/file", data={"title": "Safety", "department": "technicians"})
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}
    assert client.post("/courses", json={"role": "student"}).json() == []


def test_file_course_upload_is_served(client):
    response = client.post(
        "/courses/file",
        data={"title": "Safety", "department": "technicians"},
        files={"file": ("safety.pdf", b"%PDF-1.4 course", "application/pdf")},
    )
    assert response.status_code == 200
    course_id = response.json()["id"]

    course = client.post("/courses", json={"role": "student"}).json()[0]
    assert course["id"] == course_id
    assert course["content"] is None
    assert course["media_url"] is None
    assert course["file_url"].endswith(".pdf")
    assert client.get(course["file_url"]).content == b"%PDF-1.4 course"


def test_manual_course_stores_media_separately(client):
    response = client.post(
        "/courses/manual",
        data={"title": "Phones", "department": "callcenter", "content": "Pick up."},
        files={"file": ("clip.mp4", b"video", "video/mp4")},
    )
    assert response.status_code == 200

    course = client.post("/courses", json={"role": "call_admin"}).json()[0]
    assert course["content"] == "Pick up."
    assert course["file_url"] is None
    assert course["media_url"].endswith(".mp4")


def test_manual_course_without_file(client):
    create_manual(client, "Intro")
    course = client.post("/courses", json={}).json()[0]
    assert course["media_url"] is None
    assert course["department"] is None


def test_role_based_course_visibility(client):
    create_manual(client, "Wiring", "technicians")
    create_manual(client, "Scripts", "callcenter")
    create_manual(client, "Welcome")

    assert titles(client, {"role": "tech_admin"}) == ["Wiring"]
    assert titles(client, {"role": "call_admin"}) == ["Scripts"]
    everything = ["Scripts", "Welcome", "Wiring"]
    assert titles(client, {"role": "student"}) == everything
    assert titles(client, {"role": "sys_admin"}) == everything
    assert titles(client, {"role": "app_admin"}) == everything
    assert titles(client, {"role": "student_admin"}) == everything
    assert titles(client, {}) == everything


def test_new_course_visible_after_cached_listing(client):
    create_manual(client, "Wiring", "technicians")
    assert titles(client, {"role": "tech_admin"}) == ["Wiring"]

    create_manual(client, "Soldering", "technicians")
    assert titles(client, {"role": "tech_admin"}) == ["Soldering", "Wiring"]
