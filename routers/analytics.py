from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.classes import SchoolClass as ClassModel
from models.fees import FeeLedger as FeeLedgerModel
from models.results import Result as ResultModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from services.analytics_service import grade_distribution, subject_analytics
from services.fee_service import fee_analytics

router = APIRouter(prefix="/analytics", tags=["analytics"])


# ✅ [SUBJECTS] 반/학기 과목별 평균·통과율·등급 분포
@router.get("/subjects")
def get_subject_analytics(class_id: int, term: str, academic_year: str, db: Session = Depends(get_db)):
    results = (
        db.query(ResultModel)
        .filter(
            ResultModel.class_id == class_id,
            ResultModel.term == term,
            ResultModel.academic_year == academic_year,
        )
        .all()
    )
    subjects = db.query(SubjectModel).filter(SubjectModel.is_active.is_(True)).order_by(SubjectModel.name).all()
    analytics = subject_analytics(results, subjects)
    return {
        "success": True,
        "data": {
            "subjects": analytics,
            "grade_distribution": grade_distribution(analytics),
        }
    }


# ✅ [FEES] 수납 통계
@router.get("/fees")
def get_fee_analytics(db: Session = Depends(get_db)):
    return {"success": True, "data": fee_analytics(db.query(FeeLedgerModel).all()).model_dump()}


# ✅ [DASHBOARD] 첫 화면 카드용 요약
@router.get("/dashboard")
def get_dashboard(db: Session = Depends(get_db)):
    return {
        "success": True,
        "data": {
            "students": db.query(StudentModel).filter(StudentModel.is_active.is_(True)).count(),
            "classes": db.query(ClassModel).filter(ClassModel.is_active.is_(True)).count(),
            "results": db.query(ResultModel).count(),
            "fees": fee_analytics(db.query(FeeLedgerModel).all()).model_dump(),
        }
    }
