from sqlalchemy import Boolean, Column, Integer, String
from database.db import Base

class SchoolClass(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)      # 학급 고유 ID (PK)
    name = Column(String(50), nullable=False)               # 반 이름 (예: Grade 10A)
    grade = Column(Integer, nullable=False)                 # 학년 (예: 10)
    section = Column(String(10), nullable=False)            # 반 구분 (예: A)
    academic_year = Column(String(10), nullable=False)      # 학년도 (예: 2024)
    teacher_id = Column(String(64))                         # 담임 교사 ID (인증 서비스의 uid)
    is_active = Column(Boolean, nullable=False, default=True)
