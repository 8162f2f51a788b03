import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.classes import SchoolClass as ClassModel
from models.students import Student as StudentModel
from schemas.classes import ClassCreate, PromotionRequest, SchoolClass
from schemas.students import Student
from services.exceptions import InvalidInput, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/classes", tags=["classes"])


def get_class_or_404(db: Session, class_id: int) -> ClassModel:
    school_class = db.query(ClassModel).filter(ClassModel.id == class_id).first()
    if school_class is None:
        raise NotFoundError("Class", class_id)
    return school_class


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학급 추가
# - 예: Grade 10A (2024)
@router.post("/")
def create_class(new_class: ClassCreate, db: Session = Depends(get_db)):
    db_class = ClassModel(**new_class.model_dump(), is_active=True)
    db.add(db_class)
    db.commit()
    db.refresh(db_class)
    return {
        "success": True,
        "data": SchoolClass.model_validate(db_class).model_dump(),
        "message": "Class created successfully"
    }


# ✅ [READ] 활성 학급 조회 (학년 오름차순)
@router.get("/")
def read_classes(db: Session = Depends(get_db)):
    records = (
        db.query(ClassModel)
        .filter(ClassModel.is_active.is_(True))
        .order_by(ClassModel.grade, ClassModel.section)
        .all()
    )
    return {
        "success": True,
        "data": [SchoolClass.model_validate(r).model_dump() for r in records]
    }


# ==========================================================
# [2단계] 정적 라우터
# ==========================================================

# ✅ [PROMOTION] 반 전체 일괄 진급
# - from 반의 재학생을 to 반으로 이동하고 이동 인원을 반환
@router.post("/promotion")
def promote_students(request: PromotionRequest, db: Session = Depends(get_db)):
    if request.from_class_id == request.to_class_id:
        raise InvalidInput("Source and destination classes must differ")

    get_class_or_404(db, request.from_class_id)
    to_class = get_class_or_404(db, request.to_class_id)

    students = (
        db.query(StudentModel)
        .filter(StudentModel.class_id == request.from_class_id, StudentModel.is_active.is_(True))
        .all()
    )
    for student in students:
        student.class_id = to_class.id
        student.class_name = to_class.name
    db.commit()

    logger.info("Promoted %d students from class %s to %s", len(students), request.from_class_id, to_class.id)
    return {
        "success": True,
        "data": {"count": len(students), "to_class_id": to_class.id, "to_class_name": to_class.name},
        "message": f"Successfully promoted {len(students)} students to {to_class.name}"
    }


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 특정 학급 조회
@router.get("/{class_id}")
def read_class(class_id: int, db: Session = Depends(get_db)):
    school_class = get_class_or_404(db, class_id)
    return {"success": True, "data": SchoolClass.model_validate(school_class).model_dump()}


# ✅ [READ] 학급별 학생 목록 조회
@router.get("/{class_id}/students")
def get_class_students(class_id: int, db: Session = Depends(get_db)):
    get_class_or_404(db, class_id)
    students = (
        db.query(StudentModel)
        .filter(StudentModel.class_id == class_id, StudentModel.is_active.is_(True))
        .order_by(StudentModel.last_name, StudentModel.first_name)
        .all()
    )
    return {
        "success": True,
        "data": [Student.model_validate(s).model_dump() for s in students]
    }


# ✅ [UPDATE] 학급 정보 수정
@router.put("/{class_id}")
def update_class(class_id: int, updated: ClassCreate, db: Session = Depends(get_db)):
    school_class = get_class_or_404(db, class_id)
    for key, value in updated.model_dump().items():
        setattr(school_class, key, value)

    db.commit()
    db.refresh(school_class)
    return {
        "success": True,
        "data": SchoolClass.model_validate(school_class).model_dump(),
        "message": "Class updated successfully"
    }


# ✅ [DELETE] 학급 비활성화
@router.delete("/{class_id}")
def delete_class(class_id: int, db: Session = Depends(get_db)):
    school_class = get_class_or_404(db, class_id)
    school_class.is_active = False
    db.commit()
    return {
        "success": True,
        "data": {"class_id": class_id},
        "message": "Class deactivated"
    }
