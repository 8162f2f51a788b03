"""
services/analytics_service.py

- 과목별 성적 통계 (평균, 통과율, 등급 분포)
- 등급은 Result 레코드에 저장된 스냅샷 값을 그대로 집계
"""

from typing import Any, Dict, Iterable, List

from services.grading import ECZ_GRADES, PASS_MARK, round_half_up


def subject_analytics(results: Iterable[Any], subjects: Iterable[Any]) -> List[Dict[str, Any]]:
    """
    과목마다 평균 점수/통과율/등급별 인원 계산
    - 결과가 없거나 평균이 0인 과목은 제외
    """
    results = list(results)
    analytics = []
    for subject in subjects:
        subject_results = [r for r in results if r.subject_id == subject.id]
        total = len(subject_results)
        if total == 0:
            continue

        average = round_half_up(sum(r.percentage for r in subject_results) / total)
        passed = sum(1 for r in subject_results if r.percentage >= PASS_MARK)
        row = {
            "subject_id": subject.id,
            "subject_name": subject.name,
            "average_score": average,
            "pass_rate": round_half_up(passed / total * 100),
            "result_count": total,
        }
        for scale in ECZ_GRADES:
            row[scale.grade.lower()] = sum(1 for r in subject_results if r.grade == scale.grade)
        if average > 0:
            analytics.append(row)
    return analytics


def grade_distribution(analytics: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    """과목별 통계를 합쳐 전체 등급 분포 계산"""
    analytics = list(analytics)
    return {
        scale.grade: sum(a.get(scale.grade.lower(), 0) for a in analytics)
        for scale in ECZ_GRADES
    }
