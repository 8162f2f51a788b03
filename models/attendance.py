from sqlalchemy import Column, Date, DateTime, Integer, String, func
from database.db import Base

class Attendance(Base):
    __tablename__ = "attendance"  # 출결 기록 테이블

    id = Column(Integer, primary_key=True, index=True)         # 출결 고유 ID (Primary Key)
    student_id = Column(Integer, nullable=False, index=True)   # 학생 ID (students 테이블과 연동)
    student_name = Column(String(200), nullable=False)
    class_id = Column(Integer, nullable=False, index=True)
    date = Column(Date, nullable=False)                        # 날짜
    status = Column(String(20), nullable=False)                # 출결 상태 (present / absent / late)
    marked_by = Column(String(100), nullable=False)
    marked_at = Column(DateTime, server_default=func.now())
