from fastapi import APIRouter
from datetime import date

router = APIRouter(prefix="/config", tags=["config"])

# ==========================================================
# [1단계] 현재 학기 계산 함수
# ==========================================================
def get_current_term(today: date = None):
    """
    잠비아 학사 일정 기준 현재 학기
    - 1~4월  → Term 1
    - 5~8월  → Term 2
    - 9~12월 → Term 3
    """
    today = today or date.today()
    if today.month <= 4:
        term = "Term 1"
    elif today.month <= 8:
        term = "Term 2"
    else:
        term = "Term 3"
    return str(today.year), term


# ==========================================================
# [2단계] Config 라우터
# ==========================================================

# ✅ [READ] 현재 학년도/학기 반환
@router.get("/academic")
def get_academic_config():
    academic_year, term = get_current_term()
    return {
        "success": True,
        "data": {
            "academic_year": academic_year,
            "term": term,
            "terms": ["Term 1", "Term 2", "Term 3"],
        },
        "message": f"{term} {academic_year}"
    }
