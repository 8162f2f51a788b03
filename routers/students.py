from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.students import Student as StudentModel
from schemas.common import Pagination, page_meta
from schemas.students import Student, StudentCreate, StudentUpdate
from services.exceptions import InvalidInput, NotFoundError

router = APIRouter(prefix="/students", tags=["students"])


def _get_student(db: Session, student_id: int) -> StudentModel:
    student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
    if student is None:
        raise NotFoundError("Student", student_id)
    return student


# ==========================================================
# [1단계] CRUD 기본 라우터
# ==========================================================

# ✅ [CREATE] 학생 정보 추가
@router.post("/")
def create_student(student: StudentCreate, db: Session = Depends(get_db)):
    exists = db.query(StudentModel).filter(StudentModel.ecz_number == student.ecz_number).first()
    if exists:
        raise InvalidInput(f"ECZ number {student.ecz_number} is already registered")

    db_student = StudentModel(**student.model_dump())
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    return {
        "success": True,
        "data": Student.model_validate(db_student).model_dump(),
        "message": "Student created successfully"
    }


# ✅ [READ] 재학생 목록 조회 (반 필터 + 페이징)
@router.get("/")
def read_students(class_id: int = None, p: Pagination = Depends(), db: Session = Depends(get_db)):
    query = db.query(StudentModel).filter(StudentModel.is_active.is_(True))
    if class_id is not None:
        query = query.filter(StudentModel.class_id == class_id)

    total = query.count()
    records = (
        query.order_by(StudentModel.last_name, StudentModel.first_name)
        .offset(p.offset)
        .limit(p.size)
        .all()
    )
    return {
        "success": True,
        "data": [Student.model_validate(r).model_dump() for r in records],
        "meta": page_meta(total, p, "last_name,first_name").model_dump(),
        "message": "Students loaded"
    }


# ==========================================================
# [2단계] 정적 라우터 (검색)
# ==========================================================

# ✅ [SEARCH] 이름으로 학생 검색
@router.get("/search")
def search_students(name: str, db: Session = Depends(get_db)):
    pattern = f"%{name}%"
    results = (
        db.query(StudentModel)
        .filter(StudentModel.is_active.is_(True))
        .filter(StudentModel.first_name.ilike(pattern) | StudentModel.last_name.ilike(pattern))
        .all()
    )
    return {
        "success": True,
        "data": [Student.model_validate(r).model_dump() for r in results],
        "message": f"{len(results)} student(s) found"
    }


# ==========================================================
# [3단계] 동적 라우터
# ==========================================================

# ✅ [READ] 특정 학생 조회
@router.get("/{student_id}")
def read_student(student_id: int, db: Session = Depends(get_db)):
    student = _get_student(db, student_id)
    return {"success": True, "data": Student.model_validate(student).model_dump()}


# ✅ [UPDATE] 학생 정보 수정 (보낸 필드만 반영)
@router.put("/{student_id}")
def update_student(student_id: int, updated: StudentUpdate, db: Session = Depends(get_db)):
    student = _get_student(db, student_id)
    for key, value in updated.model_dump(exclude_unset=True).items():
        setattr(student, key, value)

    db.commit()
    db.refresh(student)
    return {
        "success": True,
        "data": Student.model_validate(student).model_dump(),
        "message": "Student updated successfully"
    }


# ✅ [DELETE] 학생 비활성화 (성적/수납 기록 보존을 위해 소프트 삭제)
@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    student = _get_student(db, student_id)
    student.is_active = False
    db.commit()
    return {
        "success": True,
        "data": {"student_id": student_id},
        "message": "Student deactivated"
    }
