"""
schemas/grading.py

- 성적 엔진(services/grading.py)이 주고받는 값 객체
- 모두 계산 결과이며 DB에 저장되지 않음 (Result 레코드의 percentage/grade/comment 스냅샷 제외)
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class GradeScale(BaseModel):
    """ECZ 등급표 한 줄"""
    grade: str
    min_score: int
    max_score: int
    points: int
    comment: str

    model_config = ConfigDict(frozen=True)


class GradeResult(BaseModel):
    grade: str
    comment: str


class MarkEvaluation(BaseModel):
    """성적 입력 화면에서 점수 하나에 대해 보여주는 값"""
    percentage: int
    grade: str
    comment: str


class WeightageCheck(BaseModel):
    """활성 평가 유형 가중치 합계 점검 (저장을 막지 않고 표시만 함)"""
    total: int
    deviation: int
    is_valid: bool
    has_active: bool


class AssessmentScore(BaseModel):
    marks: float
    max_marks: float
    percentage: int


class SubjectAggregate(BaseModel):
    subject_id: int
    subject: str
    assessments: Dict[int, AssessmentScore] = Field(default_factory=dict)
    total_weighted: int = 0
    final_grade: str = ""
    comment: str = ""
    passed: bool = False

    @property
    def percentage(self) -> int:
        # calculate_gpa 입력으로 그대로 넘길 수 있게
        return self.total_weighted


class TranscriptSummary(BaseModel):
    overall_average: int
    subjects_passed: int
    subject_count: int
    average_points: float


