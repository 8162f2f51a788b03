from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.lessons import LessonPlan as LessonPlanModel
from schemas.lessons import LessonPlan, LessonPlanCreate

router = APIRouter(prefix="/lessons", tags=["lesson plans"])


# ✅ [CREATE] 수업 계획 저장
@router.post("/")
def create_lesson_plan(plan: LessonPlanCreate, db: Session = Depends(get_db)):
    record = LessonPlanModel(**plan.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    return {
        "success": True,
        "data": LessonPlan.model_validate(record).model_dump(),
        "message": "Lesson plan saved"
    }


# ✅ [READ] 교사별 수업 계획 (최신 날짜 먼저)
@router.get("/")
def read_lesson_plans(teacher_id: str, db: Session = Depends(get_db)):
    records = (
        db.query(LessonPlanModel)
        .filter(LessonPlanModel.teacher_id == teacher_id)
        .order_by(LessonPlanModel.date.desc(), LessonPlanModel.id.desc())
        .all()
    )
    return {
        "success": True,
        "data": [LessonPlan.model_validate(r).model_dump() for r in records]
    }
