from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from database.db import Base

class AssessmentType(Base):
    __tablename__ = "assessment_types"  # 평가 유형 (관리자 설정)

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)                 # 예: Continuous Assessment, Midterm
    code = Column(String(10), nullable=False)                  # 성적표 열 제목 (예: CA, MID)
    weightage = Column(Integer, nullable=False, default=0)     # 과목 총점 대비 가중치 (0~100)
    max_marks = Column(Integer, nullable=False, default=100)   # 만점
    is_active = Column(Boolean, nullable=False, default=True)
    order = Column(Integer, nullable=False, default=1)         # 표시 순서 (오름차순)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
