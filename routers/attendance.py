from collections import Counter
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.db import get_db
from models.attendance import Attendance as AttendanceModel
from models.students import Student as StudentModel
from routers.classes import get_class_or_404
from schemas.attendance import Attendance, AttendanceBatchCreate
from services.exceptions import InvalidInput
from services.grading import round_half_up

router = APIRouter(prefix="/attendance", tags=["attendance"])


# ==========================================================
# [1단계] 출결 입력
# ==========================================================

# ✅ [BATCH SAVE] 반 단위 출결 저장
# - 같은 날 다시 저장하면 학생별 기존 기록을 덮어씀
@router.post("/")
def save_attendance(batch: AttendanceBatchCreate, db: Session = Depends(get_db)):
    get_class_or_404(db, batch.class_id)
    student_ids = [r.student_id for r in batch.records]
    students = {
        s.id: s
        for s in db.query(StudentModel).filter(
            StudentModel.id.in_(student_ids), StudentModel.class_id == batch.class_id
        ).all()
    }
    unknown = [sid for sid in student_ids if sid not in students]
    if unknown:
        raise InvalidInput(f"Students not in class {batch.class_id}: {unknown}")

    existing = {
        r.student_id: r
        for r in db.query(AttendanceModel).filter(
            AttendanceModel.class_id == batch.class_id, AttendanceModel.date == batch.date
        ).all()
    }

    for mark in batch.records:
        record = existing.get(mark.student_id)
        if record is None:
            record = AttendanceModel(
                student_id=mark.student_id,
                student_name=students[mark.student_id].full_name,
                class_id=batch.class_id,
                date=batch.date,
            )
            db.add(record)
        record.status = mark.status
        record.marked_by = batch.marked_by
    db.commit()

    return {
        "success": True,
        "data": {"class_id": batch.class_id, "date": str(batch.date), "saved": len(batch.records)},
        "message": "Attendance saved successfully"
    }


# ==========================================================
# [2단계] 조회 / 요약
# ==========================================================

# ✅ [READ] 반/날짜별 출결
@router.get("/")
def read_attendance(
    class_id: int,
    date: date = Query(..., description="조회할 날짜 (예: 2024-03-04)"),
    db: Session = Depends(get_db),
):
    records = (
        db.query(AttendanceModel)
        .filter(AttendanceModel.class_id == class_id, AttendanceModel.date == date)
        .order_by(AttendanceModel.student_name)
        .all()
    )
    return {
        "success": True,
        "data": [Attendance.model_validate(r).model_dump() for r in records]
    }


# ✅ [DAILY SUMMARY] 특정 날짜 반 출석 현황
@router.get("/daily-summary")
def get_daily_attendance_summary(
    class_id: int,
    date: date = Query(...),
    db: Session = Depends(get_db),
):
    records = (
        db.query(AttendanceModel)
        .filter(AttendanceModel.class_id == class_id, AttendanceModel.date == date)
        .all()
    )
    total = len(records)
    status_counter = Counter(r.status for r in records)
    present = status_counter.get("present", 0)
    late = status_counter.get("late", 0)

    # 지각도 출석으로 집계
    rate = round_half_up((present + late) / total * 100, 1) if total else 0

    return {
        "success": True,
        "data": {
            "class_id": class_id,
            "date": str(date),
            "total": total,
            "present": present,
            "absent": status_counter.get("absent", 0),
            "late": late,
            "attendance_rate": rate,
        }
    }
