from pydantic import BaseModel, Field
from typing import List, Optional

# ✅ 실시간 미리보기 (성적 입력 화면에서 키 입력마다 호출)
class MarkPreviewRequest(BaseModel):
    marks: float
    max_marks: float


# ✅ 한 학생의 점수 한 칸
class MarkEntry(BaseModel):
    student_id: int
    marks: float = Field(..., ge=0)              # 음수 불가


# ✅ 일괄 저장 요청: 반/과목/평가 유형/학기 단위
class ResultBatchCreate(BaseModel):
    class_id: int
    subject_id: int
    assessment_type_id: int
    academic_year: str = Field(..., min_length=4)
    term: str = Field(..., min_length=1)         # 예: "Term 1"
    entered_by: str = Field(..., min_length=1)
    entries: List[MarkEntry] = Field(..., min_length=1)


# ✅ 단건 재채점
class ResultUpdate(BaseModel):
    marks: float = Field(..., ge=0)


# ✅ 출력용
class Result(BaseModel):
    id: int
    student_id: int
    student_name: str
    ecz_number: str
    class_id: int
    subject_id: int
    subject_name: str
    assessment_type_id: int
    assessment_type_name: str
    academic_year: str
    term: str
    marks: float
    max_marks: float
    percentage: int
    grade: str
    comment: str
    entered_by: Optional[str] = None

    class Config:
        from_attributes = True
