import pytest

from main import app
from models.results import Result as ResultModel
from routers.transcripts import content_disposition, get_pdf_service
from services import grading
from services.pdf_service import PDFService, format_marks, transcript_filename
from services.transcript_service import assemble_transcript, build_class_transcripts, build_transcript
from services.exceptions import NotFoundError


def _add_result(db, student, subject, assessment, marks, term="Term 1", year="2024"):
    evaluation = grading.grade_result_entry(marks, assessment.max_marks)
    record = ResultModel(
        student_id=student.id,
        student_name=student.full_name,
        ecz_number=student.ecz_number,
        class_id=student.class_id,
        subject_id=subject.id,
        subject_name=subject.name,
        assessment_type_id=assessment.id,
        assessment_type_name=assessment.name,
        academic_year=year,
        term=term,
        marks=marks,
        max_marks=assessment.max_marks,
        percentage=evaluation.percentage,
        grade=evaluation.grade,
        comment=evaluation.comment,
        entered_by="teacher-01",
    )
    db.add(record)
    db.commit()
    return record


class FakePDFService(PDFService):
    """HTML 렌더링까지만 실제로 수행 (weasyprint 미사용)"""

    def __init__(self):
        super().__init__()
        self.rendered = []

    def _html_to_pdf(self, html_content: str) -> bytes:
        self.rendered.append(html_content)
        return b"%PDF-1.7 fake"


@pytest.fixture()
def fake_pdf():
    service = FakePDFService()
    app.dependency_overrides[get_pdf_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_pdf_service, None)


# ==========================================================
# 성적표 데이터
# ==========================================================

def test_transcript_weighted_totals(db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["ca"], 28)
    _add_result(db_session, alice, subjects["maths"], assessment_types["mid"], 18)

    transcript = build_transcript(db_session, alice.id, "Term 1", "2024")
    assert [a.code for a in transcript.assessments] == ["CA", "MID", "EOT"]
    maths = transcript.subjects[0]
    assert maths.total_weighted == 46
    assert maths.final_grade == "Fail"
    assert transcript.summary.subjects_passed == 0
    assert transcript.summary.average_points == 9.0
    assert [g.grade for g in transcript.grading_scale][0] == "Distinction"


def test_transcript_only_includes_requested_term(db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 45)
    _add_result(db_session, alice, subjects["english"], assessment_types["exam"], 20, term="Term 2")

    transcript = build_transcript(db_session, alice.id, "Term 1", "2024")
    assert [s.subject for s in transcript.subjects] == ["Mathematics"]


def test_transcript_uses_stored_snapshot(db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    record = _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 40)
    # 저장된 백분율이 계산 결과와 달라도 성적표는 저장된 값을 따름
    record.percentage = 100
    db_session.commit()

    transcript = build_transcript(db_session, alice.id, "Term 1", "2024")
    assert transcript.subjects[0].total_weighted == 50
    assert transcript.subjects[0].passed


def test_transcript_for_missing_student(db_session):
    with pytest.raises(NotFoundError):
        build_transcript(db_session, 12345, "Term 1", "2024")


def test_class_transcripts_skip_students_without_results(db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Zulu")
    make_student("Brian", "Phiri")
    chipo = make_student("Chipo", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 40)
    _add_result(db_session, chipo, subjects["maths"], assessment_types["exam"], 35)

    transcripts = build_class_transcripts(db_session, alice.class_id, "Term 1", "2024")
    assert [t.student.last_name for t in transcripts] == ["Banda", "Zulu"]


def test_assemble_without_database(assessment_types):
    class StudentStub:
        id = 7
        first_name = "Mutale"
        last_name = "Chanda"
        ecz_number = "ECZ77777"
        class_name = "Grade 10A"
        gender = "Male"

    results = [{
        "subject_id": 1, "subject_name": "Science", "assessment_type_id": assessment_types["exam"].id,
        "marks": 50, "max_marks": 50, "percentage": 100,
    }]
    transcript = assemble_transcript(StudentStub(), results, list(assessment_types.values()), "Term 3", "2024")
    assert transcript.student.full_name == "Mutale Chanda"
    assert transcript.subjects[0].total_weighted == 50
    assert transcript.summary.overall_average == 50


# ==========================================================
# API
# ==========================================================

def test_transcript_endpoint(client, db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["ca"], 24)
    _add_result(db_session, alice, subjects["maths"], assessment_types["mid"], 15)
    _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 35)

    res = client.get(f"/v1/transcripts/{alice.id}", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["student"]["ecz_number"] == alice.ecz_number
    # 80*0.3 + 75*0.2 + 70*0.5 = 74
    assert data["subjects"][0]["total_weighted"] == 74
    assert data["subjects"][0]["final_grade"] == "Merit"
    assert data["summary"]["average_points"] == 2.0


def test_transcript_endpoint_requires_term(client, make_student):
    alice = make_student("Alice", "Banda")
    res = client.get(f"/v1/transcripts/{alice.id}", params={"academic_year": "2024"})
    assert res.status_code == 422


def test_transcript_endpoint_unknown_student(client):
    res = client.get("/v1/transcripts/999", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 404


def test_class_transcripts_endpoint(client, db_session, school_class, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["english"], assessment_types["exam"], 45)

    res = client.get(f"/v1/transcripts/class/{school_class.id}", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    assert res.json()["message"] == "1 transcript(s) generated"


def test_student_pdf_download(client, db_session, make_student, subjects, assessment_types, fake_pdf):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 45)

    res = client.get(f"/v1/transcripts/{alice.id}/pdf", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    assert res.headers["content-type"] == "application/pdf"
    assert res.headers["content-disposition"] == (
        "attachment; filename=\"Transcript_Alice_Banda_Term_1_2024.pdf\"; "
        "filename*=UTF-8''Transcript_Alice_Banda_Term_1_2024.pdf"
    )
    assert res.content == b"%PDF-1.7 fake"
    assert "Alice Banda" in fake_pdf.rendered[0]


def test_pdf_download_with_non_ascii_name(client, db_session, make_student, subjects, assessment_types, fake_pdf):
    student = make_student("Chanda", "Mwanza\u0101")
    _add_result(db_session, student, subjects["maths"], assessment_types["exam"], 45)

    res = client.get(f"/v1/transcripts/{student.id}/pdf", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    disposition = res.headers["content-disposition"]
    assert 'filename="Transcript_Chanda_Mwanzaa_Term_1_2024.pdf"' in disposition
    assert "filename*=UTF-8''Transcript_Chanda_Mwanza%C4%81_Term_1_2024.pdf" in disposition


def test_class_pdf_download_with_non_ascii_class_name(
    client, db_session, school_class, make_student, subjects, assessment_types, fake_pdf
):
    school_class.name = "Grade 10 \u00c9lite"
    db_session.commit()
    student = make_student("Alice", "Banda", class_name=school_class.name)
    _add_result(db_session, student, subjects["maths"], assessment_types["exam"], 45)

    res = client.get(f"/v1/transcripts/class/{school_class.id}/pdf", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    assert 'filename="Transcripts_Grade_10_Elite_Term_1_2024.pdf"' in res.headers["content-disposition"]


def test_content_disposition_strips_quotes_from_fallback():
    header = content_disposition('Transcript_O"Brien.pdf')
    assert header.startswith('attachment; filename="Transcript_OBrien.pdf";')
    assert header.endswith("filename*=UTF-8''Transcript_O%22Brien.pdf")


def test_class_pdf_download(client, db_session, school_class, make_student, subjects, assessment_types, fake_pdf):
    alice = make_student("Alice", "Banda")
    brian = make_student("Brian", "Phiri")
    _add_result(db_session, alice, subjects["maths"], assessment_types["exam"], 45)
    _add_result(db_session, brian, subjects["maths"], assessment_types["exam"], 30)

    res = client.get(f"/v1/transcripts/class/{school_class.id}/pdf", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 200
    assert "Transcripts_Grade_10A_Term_1_2024.pdf" in res.headers["content-disposition"]
    html = fake_pdf.rendered[0]
    assert html.count('class="page"') == 2


def test_class_pdf_without_results(client, school_class, fake_pdf):
    res = client.get(f"/v1/transcripts/class/{school_class.id}/pdf", params={"term": "Term 1", "academic_year": "2024"})
    assert res.status_code == 404
    assert fake_pdf.rendered == []


# ==========================================================
# HTML 렌더링
# ==========================================================

def test_rendered_html_contains_scores_and_summary(db_session, make_student, subjects, assessment_types):
    alice = make_student("Alice", "Banda")
    _add_result(db_session, alice, subjects["maths"], assessment_types["ca"], 28)
    _add_result(db_session, alice, subjects["maths"], assessment_types["mid"], 18)
    transcript = build_transcript(db_session, alice.id, "Term 1", "2024")

    html = PDFService().render_transcript_html([transcript])
    assert "ACADEMIC TRANSCRIPT / REPORT CARD" in html
    assert "28/30<br>(93%)" in html
    assert "18/20<br>(90%)" in html
    assert "<td>-</td>" in html
    assert "46%" in html
    assert "Overall Average: 46%" in html
    assert "Subjects Passed: 0/1" in html
    assert "Average Points: 9.0" in html
    assert transcript_filename(transcript) == "Transcript_Alice_Banda_Term_1_2024.pdf"


def test_format_marks():
    assert format_marks(28.0) == "28"
    assert format_marks(27.5) == "27.5"
