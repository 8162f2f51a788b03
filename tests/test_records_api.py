from models.students import Student as StudentModel


def _student_payload(school_class, **overrides):
    payload = {
        "first_name": "Natasha",
        "last_name": "Mulenga",
        "ecz_number": "ECZ20240001",
        "gender": "Female",
        "class_id": school_class.id,
        "class_name": school_class.name,
        "guardian_name": "Peter Mulenga",
        "guardian_phone": "0966123456",
    }
    payload.update(overrides)
    return payload


# ==========================================================
# 학생
# ==========================================================

def test_create_and_read_student(client, school_class):
    res = client.post("/v1/students/", json=_student_payload(school_class))
    assert res.status_code == 200
    student = res.json()["data"]
    assert student["is_active"] is True

    res = client.get(f"/v1/students/{student['id']}")
    assert res.json()["data"]["ecz_number"] == "ECZ20240001"


def test_duplicate_ecz_number_is_rejected(client, school_class):
    client.post("/v1/students/", json=_student_payload(school_class))
    res = client.post("/v1/students/", json=_student_payload(school_class, first_name="Other"))
    assert res.status_code == 422
    assert "already registered" in res.json()["error"]["message"]


def test_student_validation(client, school_class):
    res = client.post("/v1/students/", json=_student_payload(school_class, guardian_phone="0977"))
    assert res.status_code == 422
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "guardian_phone" in res.json()["error"]["message"]


def test_list_students_paginates_and_hides_inactive(client, make_student):
    make_student("Alice", "Banda")
    make_student("Brian", "Phiri")
    make_student("Chipo", "Zulu", is_active=False)

    res = client.get("/v1/students/", params={"size": 1})
    body = res.json()
    assert [s["last_name"] for s in body["data"]] == ["Banda"]
    assert body["meta"]["total"] == 2
    assert body["meta"]["pages"] == 2
    assert body["meta"]["has_next"] is True


def test_search_students(client, make_student):
    make_student("Alice", "Banda")
    make_student("Brian", "Phiri")
    res = client.get("/v1/students/search", params={"name": "phi"})
    assert [s["first_name"] for s in res.json()["data"]] == ["Brian"]


def test_update_and_deactivate_student(client, db_session, make_student):
    alice = make_student("Alice", "Banda")
    res = client.put(f"/v1/students/{alice.id}", json={"guardian_phone": "0955000111"})
    assert res.json()["data"]["guardian_phone"] == "0955000111"
    assert res.json()["data"]["first_name"] == "Alice"

    client.delete(f"/v1/students/{alice.id}")
    db_session.expire_all()
    assert db_session.get(StudentModel, alice.id).is_active is False


def test_unknown_student(client):
    res = client.get("/v1/students/321")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Student 321 not found"


# ==========================================================
# 학급 / 진급
# ==========================================================

def test_classes_are_ordered_by_grade(client, other_class, school_class):
    names = [c["name"] for c in client.get("/v1/classes/").json()["data"]]
    assert names == ["Grade 10A", "Grade 11A"]


def test_class_students(client, school_class, make_student):
    make_student("Alice", "Banda")
    res = client.get(f"/v1/classes/{school_class.id}/students")
    assert len(res.json()["data"]) == 1


def test_bulk_promotion_moves_active_students(client, db_session, school_class, other_class, make_student):
    alice = make_student("Alice", "Banda")
    make_student("Brian", "Phiri")
    make_student("Chipo", "Zulu", is_active=False)

    res = client.post("/v1/classes/promotion", json={
        "from_class_id": school_class.id, "to_class_id": other_class.id,
    })
    assert res.status_code == 200
    assert res.json()["data"]["count"] == 2
    assert res.json()["message"] == "Successfully promoted 2 students to Grade 11A"

    db_session.expire_all()
    moved = db_session.get(StudentModel, alice.id)
    assert moved.class_id == other_class.id
    assert moved.class_name == "Grade 11A"


def test_promotion_to_same_class_is_rejected(client, school_class):
    res = client.post("/v1/classes/promotion", json={
        "from_class_id": school_class.id, "to_class_id": school_class.id,
    })
    assert res.status_code == 422


def test_promotion_to_unknown_class(client, school_class):
    res = client.post("/v1/classes/promotion", json={"from_class_id": school_class.id, "to_class_id": 77})
    assert res.status_code == 404


# ==========================================================
# 과목
# ==========================================================

def test_subject_crud(client):
    res = client.post("/v1/subjects/", json={"name": "Biology", "code": "BIO", "is_core": False})
    subject_id = res.json()["data"]["id"]
    assert [s["code"] for s in client.get("/v1/subjects/").json()["data"]] == ["BIO"]

    client.delete(f"/v1/subjects/{subject_id}")
    assert client.get("/v1/subjects/").json()["data"] == []


# ==========================================================
# 출결 / 수업 계획
# ==========================================================

def test_attendance_batch_and_daily_summary(client, school_class, make_student):
    students = [make_student("Alice", "Banda"), make_student("Brian", "Phiri"), make_student("Chipo", "Zulu")]
    res = client.post("/v1/attendance/", json={
        "class_id": school_class.id,
        "date": "2024-03-04",
        "marked_by": "teacher-01",
        "records": [
            {"student_id": students[0].id},
            {"student_id": students[1].id, "status": "late"},
            {"student_id": students[2].id, "status": "absent"},
        ],
    })
    assert res.status_code == 200
    assert res.json()["data"]["saved"] == 3

    summary = client.get("/v1/attendance/daily-summary", params={
        "class_id": school_class.id, "date": "2024-03-04",
    }).json()["data"]
    assert (summary["present"], summary["late"], summary["absent"]) == (1, 1, 1)
    assert summary["attendance_rate"] == 66.7


def test_attendance_remark_overwrites(client, school_class, make_student):
    alice = make_student("Alice", "Banda")
    payload = {
        "class_id": school_class.id, "date": "2024-03-04", "marked_by": "teacher-01",
        "records": [{"student_id": alice.id, "status": "absent"}],
    }
    client.post("/v1/attendance/", json=payload)
    payload["records"] = [{"student_id": alice.id, "status": "present"}]
    client.post("/v1/attendance/", json=payload)

    records = client.get("/v1/attendance/", params={"class_id": school_class.id, "date": "2024-03-04"}).json()["data"]
    assert len(records) == 1
    assert records[0]["status"] == "present"
    assert records[0]["student_name"] == "Alice Banda"


def test_attendance_rejects_student_from_other_class(client, school_class, other_class, make_student):
    outsider = make_student("Grace", "Tembo", class_id=other_class.id, class_name=other_class.name)
    res = client.post("/v1/attendance/", json={
        "class_id": school_class.id, "date": "2024-03-04", "marked_by": "teacher-01",
        "records": [{"student_id": outsider.id}],
    })
    assert res.status_code == 422


def test_empty_daily_summary(client, school_class):
    summary = client.get("/v1/attendance/daily-summary", params={
        "class_id": school_class.id, "date": "2024-03-05",
    }).json()["data"]
    assert summary["total"] == 0
    assert summary["attendance_rate"] == 0


def test_lesson_plans_newest_first(client, school_class, subjects):
    base = {
        "objective": "Solve linear equations", "content": "Worked examples",
        "class_id": school_class.id, "subject_id": subjects["maths"].id,
        "teacher_id": "teacher-01", "teacher_name": "Mr. Lungu",
    }
    client.post("/v1/lessons/", json={**base, "title": "Equations I", "date": "2024-02-05"})
    client.post("/v1/lessons/", json={**base, "title": "Equations II", "date": "2024-02-12"})
    client.post("/v1/lessons/", json={**base, "title": "Other teacher", "date": "2024-02-13", "teacher_id": "t-02"})

    titles = [p["title"] for p in client.get("/v1/lessons/", params={"teacher_id": "teacher-01"}).json()["data"]]
    assert titles == ["Equations II", "Equations I"]
