from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from models.subjects import Subject as SubjectModel
from schemas.subjects import Subject, SubjectCreate
from services.exceptions import NotFoundError

router = APIRouter(prefix="/subjects", tags=["subjects"])


def get_subject_or_404(db: Session, subject_id: int) -> SubjectModel:
    subject = db.query(SubjectModel).filter(SubjectModel.id == subject_id).first()
    if subject is None:
        raise NotFoundError("Subject", subject_id)
    return subject


# ✅ [CREATE] 과목 추가
@router.post("/")
def create_subject(subject: SubjectCreate, db: Session = Depends(get_db)):
    db_subject = SubjectModel(**subject.model_dump(), is_active=True)
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return {
        "success": True,
        "data": Subject.model_validate(db_subject).model_dump(),
        "message": "Subject created successfully"
    }


# ✅ [READ] 활성 과목 조회
@router.get("/")
def read_subjects(db: Session = Depends(get_db)):
    records = db.query(SubjectModel).filter(SubjectModel.is_active.is_(True)).order_by(SubjectModel.name).all()
    return {
        "success": True,
        "data": [Subject.model_validate(r).model_dump() for r in records],
        "message": "Subjects loaded"
    }


# ✅ [READ] 특정 과목 조회
@router.get("/{subject_id}")
def read_subject(subject_id: int, db: Session = Depends(get_db)):
    subject = get_subject_or_404(db, subject_id)
    return {"success": True, "data": Subject.model_validate(subject).model_dump()}


# ✅ [UPDATE] 과목 정보 수정
@router.put("/{subject_id}")
def update_subject(subject_id: int, updated: SubjectCreate, db: Session = Depends(get_db)):
    subject = get_subject_or_404(db, subject_id)
    for key, value in updated.model_dump().items():
        setattr(subject, key, value)

    db.commit()
    db.refresh(subject)
    return {
        "success": True,
        "data": Subject.model_validate(subject).model_dump(),
        "message": "Subject updated successfully"
    }


# ✅ [DELETE] 과목 비활성화
@router.delete("/{subject_id}")
def delete_subject(subject_id: int, db: Session = Depends(get_db)):
    subject = get_subject_or_404(db, subject_id)
    subject.is_active = False
    db.commit()
    return {
        "success": True,
        "data": {"subject_id": subject_id},
        "message": "Subject deactivated"
    }
