from sqlalchemy import Boolean, Column, Integer, String
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블

    id = Column(Integer, primary_key=True, index=True)         # 과목 고유 ID (Primary Key)
    name = Column(String(100), nullable=False)                # 과목 이름 (예: Mathematics)
    code = Column(String(20), nullable=False)                 # 과목 코드 (예: MATH)
    department = Column(String(100))                          # 학과 (선택)
    teacher_id = Column(String(64))                           # 담당 교사 ID
    is_core = Column(Boolean, nullable=False, default=False)  # 필수 과목 여부
    is_active = Column(Boolean, nullable=False, default=True)
