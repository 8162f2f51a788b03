from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import date, datetime

AttendanceStatus = Literal["present", "absent", "late"]


# ✅ 학생 한 명의 출결 표시
class AttendanceMark(BaseModel):
    student_id: int
    status: AttendanceStatus = "present"        # 기본값: 출석


# ✅ 반 단위 일괄 저장
class AttendanceBatchCreate(BaseModel):
    class_id: int
    date: date
    marked_by: str = Field(..., min_length=1)
    records: List[AttendanceMark] = Field(..., min_length=1)


class Attendance(BaseModel):
    id: int
    student_id: int
    student_name: str
    class_id: int
    date: date
    status: AttendanceStatus
    marked_by: str
    marked_at: Optional[datetime] = None

    class Config:
        from_attributes = True
