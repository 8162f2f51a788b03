import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.assessment_types import AssessmentType as AssessmentTypeModel
from schemas.assessment_types import AssessmentType, AssessmentTypeCreate, AssessmentTypeUpdate
from services import grading
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment-types", tags=["assessment types"])


def get_assessment_type_or_404(db: Session, assessment_type_id: int) -> AssessmentTypeModel:
    record = db.query(AssessmentTypeModel).filter(AssessmentTypeModel.id == assessment_type_id).first()
    if record is None:
        raise NotFoundError("Assessment type", assessment_type_id)
    return record


def _weightage(db: Session) -> dict:
    # 합계가 100이 아니어도 저장은 막지 않고 경고만 내려줌
    check = grading.check_weightage(db.query(AssessmentTypeModel).all())
    if check.has_active and not check.is_valid:
        logger.warning("Active assessment weightage totals %s%% (deviation %+d)", check.total, check.deviation)
    return check.model_dump()


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 평가 유형 추가
@router.post("/")
def create_assessment_type(payload: AssessmentTypeCreate, db: Session = Depends(get_db)):
    record = AssessmentTypeModel(**payload.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    return {
        "success": True,
        "data": AssessmentType.model_validate(record).model_dump(),
        "weightage": _weightage(db),
        "message": "Assessment type created successfully"
    }


# ✅ [READ] 전체 평가 유형 (order 오름차순, 비활성 포함)
@router.get("/")
def read_assessment_types(active_only: bool = False, db: Session = Depends(get_db)):
    query = db.query(AssessmentTypeModel)
    if active_only:
        query = query.filter(AssessmentTypeModel.is_active.is_(True))
    records = query.order_by(AssessmentTypeModel.order, AssessmentTypeModel.id).all()
    return {
        "success": True,
        "data": [AssessmentType.model_validate(r).model_dump() for r in records]
    }


# ==========================================================
# [2단계] 정적 라우터
# ==========================================================

# ✅ [CHECK] 활성 평가 유형 가중치 합계 점검
@router.get("/weightage")
def read_weightage(db: Session = Depends(get_db)):
    return {"success": True, "data": _weightage(db)}


# ✅ [READ] ECZ 등급표
@router.get("/grading-scale")
def read_grading_scale():
    return {
        "success": True,
        "data": [scale.model_dump() for scale in grading.ECZ_GRADES]
    }


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [UPDATE] 평가 유형 수정 (보낸 필드만 반영)
@router.put("/{assessment_type_id}")
def update_assessment_type(assessment_type_id: int, updated: AssessmentTypeUpdate, db: Session = Depends(get_db)):
    record = get_assessment_type_or_404(db, assessment_type_id)
    for key, value in updated.model_dump(exclude_unset=True).items():
        setattr(record, key, value)

    db.commit()
    db.refresh(record)
    return {
        "success": True,
        "data": AssessmentType.model_validate(record).model_dump(),
        "weightage": _weightage(db),
        "message": "Assessment type updated successfully"
    }


# ✅ [DELETE] 평가 유형 비활성화 (기존 성적은 그대로 보존)
@router.delete("/{assessment_type_id}")
def delete_assessment_type(assessment_type_id: int, db: Session = Depends(get_db)):
    record = get_assessment_type_or_404(db, assessment_type_id)
    record.is_active = False
    db.commit()
    return {
        "success": True,
        "data": {"assessment_type_id": assessment_type_id},
        "weightage": _weightage(db),
        "message": "Assessment type deactivated"
    }
