"""
services/grading.py

ECZ(Examinations Council of Zambia) 기준 성적 엔진.

- 점수 → 백분율 → 등급/코멘트 (성적 입력 화면, 저장 시 스냅샷)
- 과목별 평가 유형 가중 합산 → 최종 등급 (성적표)
- 과목 백분율 → 평균 포인트(GPA). 포인트는 낮을수록 우수 (Distinction=1 ... Fail=9)

모든 함수는 부수효과가 없는 순수 함수이며, 인자로 받은 값만 사용합니다.
ORM 객체, pydantic 모델, dict 어느 쪽이든 같은 필드명을 가지면 입력으로 쓸 수 있습니다.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from schemas.grading import (
    AssessmentScore,
    GradeResult,
    GradeScale,
    MarkEvaluation,
    SubjectAggregate,
    TranscriptSummary,
    WeightageCheck,
)
from services.exceptions import InvalidInput

logger = logging.getLogger(__name__)

# ==========================================================
# [등급표] 고정 순서: Distinction → Merit → Credit → Pass → Fail
# - 0~100 구간을 빈틈없이 덮음
# ==========================================================
ECZ_GRADES: Tuple[GradeScale, ...] = (
    GradeScale(grade="Distinction", min_score=80, max_score=100, points=1, comment="Exemplary performance"),
    GradeScale(grade="Merit", min_score=70, max_score=79, points=2, comment="Outstanding work"),
    GradeScale(grade="Credit", min_score=60, max_score=69, points=3, comment="Good achievement"),
    GradeScale(grade="Pass", min_score=50, max_score=59, points=4, comment="Satisfactory progress"),
    GradeScale(grade="Fail", min_score=0, max_score=49, points=9, comment="Needs improvement"),
)

FALLBACK_GRADE = GradeResult(grade="Fail", comment="Needs improvement")
FALLBACK_POINTS = 9
PASS_MARK = 50


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _is_number(value: Any) -> bool:
    # bool, NaN, ±inf 제외
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def round_half_up(value, places: int = 0):
    """
    사사오입 반올림 (파이썬 round()의 은행가 반올림을 쓰지 않음)
    - places=0 이면 int, 그 외에는 float 반환
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if places == 0:
        return int(rounded)
    return float(rounded)


def _match_scale(percentage) -> Optional[GradeScale]:
    for scale in ECZ_GRADES:
        if scale.min_score <= percentage <= scale.max_score:
            return scale
    logger.warning("No ECZ grade range matches percentage %r; falling back to Fail", percentage)
    return None


# ==========================================================
# [1단계] 점수 하나 단위 계산
# ==========================================================

def calculate_percentage(marks, max_marks) -> int:
    """점수를 정수 백분율로 변환. 범위를 벗어난 입력은 InvalidInput."""
    if not _is_number(marks) or not _is_number(max_marks):
        raise InvalidInput(f"marks and max_marks must be finite numbers, got {marks!r} / {max_marks!r}")
    if max_marks <= 0:
        raise InvalidInput(f"max_marks must be positive, got {max_marks}")
    if marks < 0:
        raise InvalidInput(f"marks cannot be negative, got {marks}")
    if marks > max_marks:
        raise InvalidInput(f"marks {marks} exceed max_marks {max_marks}")
    return round_half_up(marks / max_marks * 100)


def calculate_grade(percentage) -> GradeResult:
    scale = _match_scale(percentage)
    if scale is None:
        return FALLBACK_GRADE
    return GradeResult(grade=scale.grade, comment=scale.comment)


def calculate_points(percentage) -> int:
    scale = _match_scale(percentage)
    if scale is None:
        return FALLBACK_POINTS
    return scale.points


def grade_result_entry(marks, max_marks) -> MarkEvaluation:
    """성적 입력/저장 시 사용하는 백분율 → 등급 계산 묶음"""
    percentage = calculate_percentage(marks, max_marks)
    result = calculate_grade(percentage)
    return MarkEvaluation(percentage=percentage, grade=result.grade, comment=result.comment)


def calculate_gpa(subjects: Sequence[Any]) -> float:
    """
    과목별 백분율의 ECZ 포인트 평균 (소수 둘째 자리)
    - 빈 목록이면 0
    - 낮을수록 우수한 '감점' 평균이며 의도된 규칙임
    """
    if not subjects:
        return 0
    total_points = sum(calculate_points(_field(s, "percentage")) for s in subjects)
    return round_half_up(total_points / len(subjects), 2)


# ==========================================================
# [2단계] 평가 유형 설정 점검
# ==========================================================

def active_assessments(assessment_types: Iterable[Any]) -> List[Any]:
    active = [a for a in assessment_types if _field(a, "is_active", True)]
    return sorted(active, key=lambda a: _field(a, "order", 0))


def total_weightage(assessment_types: Iterable[Any]) -> int:
    return sum(_field(a, "weightage", 0) for a in assessment_types if _field(a, "is_active", True))


def check_weightage(assessment_types: Iterable[Any]) -> WeightageCheck:
    assessment_types = list(assessment_types)
    total = total_weightage(assessment_types)
    has_active = any(_field(a, "is_active", True) for a in assessment_types)
    return WeightageCheck(
        total=total,
        deviation=total - 100,
        is_valid=total == 100,
        has_active=has_active,
    )


# ==========================================================
# [3단계] 성적표 집계
# ==========================================================

def aggregate_subjects(results: Iterable[Any], assessment_types: Iterable[Any]) -> List[SubjectAggregate]:
    """
    학생 한 명의 Result 레코드를 과목별로 묶어 가중 합산

    1. subject_id 기준 그룹핑 (처음 등장한 순서 유지)
    2. 활성 평가 유형(order 오름차순)마다 같은 assessment_type_id의 결과를 찾음
    3. total_weighted = round(Σ percentage × weightage / 100)
       - 입력되지 않은 평가 유형은 기여하지 않으며 가중치를 재정규화하지 않음
    4. total_weighted 로 최종 등급/코멘트 조회
    5. total_weighted >= 50 이면 통과

    저장된 percentage를 그대로 사용 (입력 시점 스냅샷).
    """
    rows: Dict[Any, SubjectAggregate] = {}
    for result in results:
        subject_id = _field(result, "subject_id")
        row = rows.get(subject_id)
        if row is None:
            row = SubjectAggregate(subject_id=subject_id, subject=_field(result, "subject_name") or "")
            rows[subject_id] = row
        row.assessments[_field(result, "assessment_type_id")] = AssessmentScore(
            marks=_field(result, "marks"),
            max_marks=_field(result, "max_marks"),
            percentage=_field(result, "percentage"),
        )

    weighted_types = active_assessments(assessment_types)
    for row in rows.values():
        total = 0.0
        weight = 0
        for assessment in weighted_types:
            score = row.assessments.get(_field(assessment, "id"))
            if score is None:
                continue
            total += score.percentage * (_field(assessment, "weightage") / 100)
            weight += _field(assessment, "weightage")

        if weight <= 0:
            # 가중치가 걸린 평가가 하나도 없으면 등급 미부여
            continue

        row.total_weighted = round_half_up(total)
        grade = calculate_grade(row.total_weighted)
        row.final_grade = grade.grade
        row.comment = grade.comment
        row.passed = row.total_weighted >= PASS_MARK

    return list(rows.values())


def summarize(subjects: Sequence[SubjectAggregate]) -> TranscriptSummary:
    """성적표 하단 요약: 전체 평균, 통과 과목 수, 평균 포인트"""
    count = len(subjects)
    overall = round_half_up(sum(s.total_weighted for s in subjects) / count) if count else 0
    return TranscriptSummary(
        overall_average=overall,
        subjects_passed=sum(1 for s in subjects if s.total_weighted >= PASS_MARK),
        subject_count=count,
        average_points=calculate_gpa([{"percentage": s.total_weighted} for s in subjects]),
    )
