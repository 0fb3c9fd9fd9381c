from datetime import datetime, timedelta

from app.models import UserRole
from tests.conftest import auth_headers, issue_token


def test_root(client):
    assert client.get("/").json()["message"] == "Class Portal API"


def test_requires_token(client):
    assert client.get("/api/units").status_code == 401


def test_rejects_bad_token(client):
    res = client.get("/api/units", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid or expired token"


def test_rejects_token_for_missing_user(client):
    token = issue_token("no-such-user", "ADM9999")
    res = client.get("/api/units", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_rejects_expired_token(client, make_user):
    user = make_user()
    token = issue_token(user.id, user.admission_number, expires_in=timedelta(minutes=-5))
    res = client.get("/api/units", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid or expired token"


def test_list_and_get_units(client, make_user, make_unit):
    user = make_user()
    make_unit("STA101")
    make_unit("MAT201", name="Linear Algebra", category="Mathematics")

    units = client.get("/api/units", headers=auth_headers(user)).json()
    assert [u["unit_code"] for u in units] == ["MAT201", "STA101"]

    unit = client.get("/api/units/MAT201", headers=auth_headers(user)).json()
    assert unit["name"] == "Linear Algebra"
    assert client.get("/api/units/XYZ", headers=auth_headers(user)).status_code == 404


def test_create_unit_teacher_only(client, make_user):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    student = make_user("Student")
    body = {"unit_code": "DSC110", "name": "Data Science I", "category": "Data Science"}

    assert client.post("/api/units", json=body, headers=auth_headers(student)).status_code == 403
    created = client.post("/api/units", json=body, headers=auth_headers(teacher))
    assert created.status_code == 201
    assert created.json()["description"] is None
    assert client.post("/api/units", json=body, headers=auth_headers(teacher)).status_code == 409


def test_dashboard_activities_and_deadlines(client, make_user, make_unit, make_assignment, complete):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    student = make_user("Student")
    make_unit("STA101")
    now = datetime.utcnow()
    past = make_assignment("STA101", teacher, title="Old", created_at=now - timedelta(days=10), deadline=now - timedelta(days=1))
    soon = make_assignment("STA101", teacher, title="Soon", deadline=now + timedelta(days=1))
    make_assignment("STA101", teacher, title="Later", deadline=now + timedelta(days=3))
    complete(past, student, now - timedelta(days=2))
    complete(soon, student, now - timedelta(minutes=5))

    note = client.post(
        "/api/units/STA101/notes",
        json={"title": "Week 1", "description": "x"},
        headers=auth_headers(teacher),
    ).json()
    client.post(f"/api/units/STA101/notes/{note['id']}/view", headers=auth_headers(student))

    activities = client.get("/api/dashboard/activities", headers=auth_headers(student)).json()
    assert [a["type"] for a in activities] == ["note", "assignment", "assignment"]
    assert activities[0]["title"] == "Viewed Note: Week 1"
    assert activities[1]["title"] == "Completed Assignment: Soon"
    assert all(a["unit_code"] == "STA101" for a in activities)

    deadlines = client.get("/api/dashboard/deadlines", headers=auth_headers(student)).json()
    assert [d["title"] for d in deadlines] == ["Soon", "Later"]
    assert [d["completed"] for d in deadlines] == [True, False]


def test_create_unit_rejects_blank_fields(client, make_user):
    teacher = make_user("Teacher", role=UserRole.TEACHER)

    blank = client.post(
        "/api/units",
        json={"unit_code": "   ", "name": "Data Science I", "category": "Data Science"},
        headers=auth_headers(teacher),
    )
    empty = client.post(
        "/api/units",
        json={"unit_code": "DSC110", "name": "", "category": "Data Science"},
        headers=auth_headers(teacher),
    )

    assert blank.status_code == 400
    assert empty.status_code == 422
    assert client.get("/api/units", headers=auth_headers(teacher)).json() == []


def test_create_unit_strips_code(client, make_user):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    res = client.post(
        "/api/units",
        json={"unit_code": " DSC110 ", "name": "Data Science I", "category": "Data Science"},
        headers=auth_headers(teacher),
    )
    assert res.status_code == 201
    assert client.get("/api/units/DSC110", headers=auth_headers(teacher)).status_code == 200
