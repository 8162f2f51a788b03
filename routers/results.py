import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.results import Result as ResultModel
from models.students import Student as StudentModel
from routers.assessment_types import get_assessment_type_or_404
from routers.classes import get_class_or_404
from routers.subjects import get_subject_or_404
from schemas.results import MarkPreviewRequest, Result, ResultBatchCreate, ResultUpdate
from services import grading
from services.exceptions import InvalidInput, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/results", tags=["results"])


# ==========================================================
# [1단계] 성적 입력 화면
# ==========================================================

# ✅ [PREVIEW] 키 입력마다 백분율/등급/코멘트 미리보기 (저장하지 않음)
@router.post("/preview")
def preview_mark(payload: MarkPreviewRequest):
    evaluation = grading.grade_result_entry(payload.marks, payload.max_marks)
    return {"success": True, "data": evaluation.model_dump()}


# ✅ [BATCH SAVE] 반/과목/평가 유형 단위 일괄 저장
# - 백분율/등급/코멘트는 저장 시점에 계산해 함께 저장 (스냅샷)
# - 같은 학생/과목/평가/학기의 기존 성적이 있으면 새로 만들지 않고 갱신
# - 한 건이라도 잘못되면 아무것도 저장하지 않음
@router.post("/batch")
def save_results(batch: ResultBatchCreate, db: Session = Depends(get_db)):
    get_class_or_404(db, batch.class_id)
    subject = get_subject_or_404(db, batch.subject_id)
    assessment = get_assessment_type_or_404(db, batch.assessment_type_id)

    student_ids = [e.student_id for e in batch.entries]
    if len(set(student_ids)) != len(student_ids):
        raise InvalidInput("Each student may appear only once per batch")

    students = {
        s.id: s
        for s in db.query(StudentModel).filter(StudentModel.id.in_(student_ids)).all()
    }

    prepared = []
    for entry in batch.entries:
        student = students.get(entry.student_id)
        if student is None:
            raise NotFoundError("Student", entry.student_id)
        if student.class_id != batch.class_id:
            raise InvalidInput(f"Student {student.id} is not enrolled in class {batch.class_id}")
        evaluation = grading.grade_result_entry(entry.marks, assessment.max_marks)
        prepared.append((student, entry, evaluation))

    existing = {
        r.student_id: r
        for r in db.query(ResultModel).filter(
            ResultModel.student_id.in_(student_ids),
            ResultModel.subject_id == subject.id,
            ResultModel.assessment_type_id == assessment.id,
            ResultModel.term == batch.term,
            ResultModel.academic_year == batch.academic_year,
        ).all()
    }

    saved = []
    created = 0
    for student, entry, evaluation in prepared:
        record = existing.get(student.id)
        if record is None:
            record = ResultModel(
                student_id=student.id,
                student_name=student.full_name,
                ecz_number=student.ecz_number,
                class_id=batch.class_id,
                subject_id=subject.id,
                subject_name=subject.name,
                assessment_type_id=assessment.id,
                assessment_type_name=assessment.name,
                academic_year=batch.academic_year,
                term=batch.term,
            )
            db.add(record)
            created += 1
        record.marks = entry.marks
        record.max_marks = assessment.max_marks
        record.percentage = evaluation.percentage
        record.grade = evaluation.grade
        record.comment = evaluation.comment
        record.entered_by = batch.entered_by
        saved.append(record)

    db.commit()
    for record in saved:
        db.refresh(record)

    logger.info(
        "Saved %d results (%d new) for class %s, %s, %s (%s %s)",
        len(saved), created, batch.class_id, subject.name, assessment.name, batch.term, batch.academic_year,
    )
    return {
        "success": True,
        "data": [Result.model_validate(r).model_dump() for r in saved],
        "message": f"{len(saved)} results saved ({created} new, {len(saved) - created} updated)"
    }


# ==========================================================
# [2단계] 조회 / 수정
# ==========================================================

# ✅ [READ] 조건별 성적 조회
@router.get("/")
def read_results(
    class_id: int = None,
    subject_id: int = None,
    assessment_type_id: int = None,
    student_id: int = None,
    term: str = None,
    academic_year: str = None,
    db: Session = Depends(get_db),
):
    query = db.query(ResultModel)
    filters = [
        (ResultModel.class_id, class_id),
        (ResultModel.subject_id, subject_id),
        (ResultModel.assessment_type_id, assessment_type_id),
        (ResultModel.student_id, student_id),
        (ResultModel.term, term),
        (ResultModel.academic_year, academic_year),
    ]
    for column, value in filters:
        if value is not None:
            query = query.filter(column == value)

    records = query.order_by(ResultModel.id).all()
    return {
        "success": True,
        "data": [Result.model_validate(r).model_dump() for r in records]
    }


# ✅ [UPDATE] 단건 재채점 (저장된 만점 기준으로 다시 스냅샷)
@router.put("/{result_id}")
def update_result(result_id: int, payload: ResultUpdate, db: Session = Depends(get_db)):
    record = db.query(ResultModel).filter(ResultModel.id == result_id).first()
    if record is None:
        raise NotFoundError("Result", result_id)

    evaluation = grading.grade_result_entry(payload.marks, record.max_marks)
    record.marks = payload.marks
    record.percentage = evaluation.percentage
    record.grade = evaluation.grade
    record.comment = evaluation.comment
    db.commit()
    db.refresh(record)
    return {
        "success": True,
        "data": Result.model_validate(record).model_dump(),
        "message": "Result updated successfully"
    }
