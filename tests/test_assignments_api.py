from datetime import datetime, timedelta

from app.models import CompletedAssignment, UserRole
from tests.conftest import auth_headers


def _future(hours: int) -> str:
    return (datetime.utcnow() + timedelta(hours=hours)).isoformat()


def test_create_assignment(client, make_user, make_unit):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    make_unit("STA101")

    res = client.post(
        "/api/units/STA101/assignments",
        json={"title": "Sampling", "description": "Chapter 3 exercises", "deadline": _future(48)},
        headers=auth_headers(teacher),
    )

    assert res.status_code == 201
    body = res.json()
    assert body["title"] == "Sampling"
    assert body["unit_code"] == "STA101"
    assert body["uploaded_by"] == "Teacher"
    assert body["completed"] is False
    assert body["file_url"] is None


def test_create_assignment_deadline_too_soon(client, make_user, make_unit):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    make_unit("STA101")

    res = client.post(
        "/api/units/STA101/assignments",
        json={"title": "Rushed", "description": "x", "deadline": _future(2)},
        headers=auth_headers(teacher),
    )

    assert res.status_code == 400
    assert "at least 10 hours" in res.json()["detail"]


def test_create_assignment_unknown_unit(client, make_user):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    res = client.post(
        "/api/units/NOPE/assignments",
        json={"title": "T", "description": "x", "deadline": _future(48)},
        headers=auth_headers(teacher),
    )
    assert res.status_code == 404


def test_complete_assignment_is_idempotent(client, db, make_user, make_unit, make_assignment):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    student = make_user("Student")
    make_unit("STA101")
    assignment = make_assignment("STA101", teacher)
    url = f"/api/units/STA101/assignments/{assignment.id}/complete"

    first = client.post(url, headers=auth_headers(student))
    second = client.post(url, headers=auth_headers(student))

    assert first.status_code == 200
    assert first.json()["already_completed"] is False
    assert second.json()["already_completed"] is True
    assert second.json()["completed_at"] == first.json()["completed_at"]
    assert db.query(CompletedAssignment).filter(CompletedAssignment.user_id == student.id).count() == 1


def test_complete_unknown_assignment(client, make_user, make_unit):
    student = make_user("Student")
    make_unit("STA101")
    res = client.post("/api/units/STA101/assignments/missing/complete", headers=auth_headers(student))
    assert res.status_code == 404


def test_list_assignments_shows_completion_for_caller(client, make_user, make_unit, make_assignment, complete):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    alice = make_user("Alice")
    bob = make_user("Bob")
    make_unit("STA101")
    now = datetime.utcnow()
    late = make_assignment("STA101", teacher, title="Later", deadline=now + timedelta(days=5))
    make_assignment("STA101", teacher, title="Sooner", deadline=now + timedelta(days=1))
    complete(late, alice, now)

    alice_view = client.get("/api/units/STA101/assignments", headers=auth_headers(alice)).json()
    bob_view = client.get("/api/units/STA101/assignments", headers=auth_headers(bob)).json()

    assert [a["title"] for a in alice_view] == ["Sooner", "Later"]
    assert [a["completed"] for a in alice_view] == [False, True]
    assert alice_view[1]["completed_at"] == now.isoformat()
    assert [a["completed"] for a in bob_view] == [False, False]


def test_delete_assignment_only_by_uploader(client, db, make_user, make_unit, make_assignment, complete):
    teacher = make_user("Teacher", role=UserRole.TEACHER)
    student = make_user("Student")
    make_unit("STA101")
    assignment = make_assignment("STA101", teacher)
    complete(assignment, student, datetime.utcnow())
    url = f"/api/units/STA101/assignments/{assignment.id}"

    denied = client.delete(url, headers=auth_headers(student))
    allowed = client.delete(url, headers=auth_headers(teacher))

    assert denied.status_code == 404
    assert allowed.status_code == 200
    assert allowed.json() == {"success": True}
    assert db.query(CompletedAssignment).count() == 0
    assert client.get("/api/units/STA101/rankings", headers=auth_headers(student)).json() == []
