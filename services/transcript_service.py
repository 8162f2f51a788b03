"""
services/transcript_service.py

- 학생의 Result 레코드 + 평가 유형 설정을 읽어 성적표 데이터를 구성
- 계산은 전부 services/grading.py 에 위임 (저장된 percentage 스냅샷 사용)
"""

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from models.assessment_types import AssessmentType as AssessmentTypeModel
from models.results import Result as ResultModel
from models.students import Student as StudentModel
from schemas.transcripts import AssessmentColumn, Transcript, TranscriptStudent
from services import grading
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def _student_results(db: Session, student_id: int, term: str, academic_year: str) -> List[ResultModel]:
    return (
        db.query(ResultModel)
        .filter(
            ResultModel.student_id == student_id,
            ResultModel.term == term,
            ResultModel.academic_year == academic_year,
        )
        .order_by(ResultModel.id)
        .all()
    )


def assemble_transcript(student, results, assessment_types, term: str, academic_year: str) -> Transcript:
    """DB 없이 성적표를 조립 (bulk 생성/테스트 공용)"""
    subjects = grading.aggregate_subjects(results, assessment_types)
    return Transcript(
        student=TranscriptStudent(
            id=student.id,
            full_name=f"{student.first_name} {student.last_name}",
            first_name=student.first_name,
            last_name=student.last_name,
            ecz_number=student.ecz_number,
            class_name=student.class_name,
            gender=student.gender,
        ),
        term=term,
        academic_year=academic_year,
        assessments=[
            AssessmentColumn(id=a.id, code=a.code, name=a.name, weightage=a.weightage)
            for a in grading.active_assessments(assessment_types)
        ],
        subjects=subjects,
        summary=grading.summarize(subjects),
        grading_scale=list(grading.ECZ_GRADES),
        issued_on=date.today().strftime("%d/%m/%Y"),
    )


def build_transcript(db: Session, student_id: int, term: str, academic_year: str) -> Transcript:
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        raise NotFoundError("Student", student_id)

    assessment_types = db.query(AssessmentTypeModel).all()
    results = _student_results(db, student_id, term, academic_year)
    logger.info(
        "Building transcript for student %s (%s %s): %d results",
        student_id, term, academic_year, len(results),
    )
    return assemble_transcript(student, results, assessment_types, term, academic_year)


def build_class_transcripts(db: Session, class_id: int, term: str, academic_year: str) -> List[Transcript]:
    """반 전체 성적표. 해당 학기 성적이 하나도 없는 학생은 건너뜀"""
    students = (
        db.query(StudentModel)
        .filter(StudentModel.class_id == class_id, StudentModel.is_active.is_(True))
        .order_by(StudentModel.last_name, StudentModel.first_name)
        .all()
    )
    assessment_types = db.query(AssessmentTypeModel).all()
    results = (
        db.query(ResultModel)
        .filter(
            ResultModel.class_id == class_id,
            ResultModel.term == term,
            ResultModel.academic_year == academic_year,
        )
        .order_by(ResultModel.id)
        .all()
    )

    transcripts = []
    for student in students:
        student_results = [r for r in results if r.student_id == student.id]
        if not student_results:
            continue
        transcripts.append(assemble_transcript(student, student_results, assessment_types, term, academic_year))
    return transcripts
