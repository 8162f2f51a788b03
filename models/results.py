from sqlalchemy import Column, DateTime, Float, Integer, String, func
from database.db import Base

class Result(Base):
    __tablename__ = "results"  # 평가별 성적 테이블

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, nullable=False, index=True)
    student_name = Column(String(200), nullable=False)         # 조회용 중복 저장
    ecz_number = Column(String(30), nullable=False)
    class_id = Column(Integer, nullable=False, index=True)
    subject_id = Column(Integer, nullable=False, index=True)
    subject_name = Column(String(100), nullable=False)
    assessment_type_id = Column(Integer, nullable=False)
    assessment_type_name = Column(String(100), nullable=False)
    academic_year = Column(String(10), nullable=False)
    term = Column(String(20), nullable=False)                  # "Term 1" / "Term 2" / "Term 3"
    marks = Column(Float, nullable=False)
    max_marks = Column(Float, nullable=False)

    # ✅ 저장 시점에 계산된 값 (스냅샷)
    #    - 읽을 때 재계산하지 않으므로 등급표가 바뀌어도 과거 성적표는 그대로 유지
    percentage = Column(Integer, nullable=False)
    grade = Column(String(20), nullable=False)
    comment = Column(String(100), nullable=False)

    entered_by = Column(String(100))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
