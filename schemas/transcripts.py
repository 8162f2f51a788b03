from pydantic import BaseModel
from typing import List, Optional

from schemas.grading import GradeScale, SubjectAggregate, TranscriptSummary


class TranscriptStudent(BaseModel):
    id: int
    full_name: str
    first_name: str
    last_name: str
    ecz_number: str
    class_name: str
    gender: str


# ✅ 성적표 열 정보 (활성 평가 유형, order 오름차순)
class AssessmentColumn(BaseModel):
    id: int
    code: str
    name: str
    weightage: int


class Transcript(BaseModel):
    student: TranscriptStudent
    term: str
    academic_year: str
    assessments: List[AssessmentColumn]
    subjects: List[SubjectAggregate]
    summary: TranscriptSummary
    grading_scale: List[GradeScale]
    issued_on: Optional[str] = None
