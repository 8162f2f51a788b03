from sqlalchemy import Column, Date, DateTime, Integer, String, Text, func
from database.db import Base

class LessonPlan(Base):
    __tablename__ = "lesson_plans"  # 수업 계획

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    objective = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    class_id = Column(Integer, nullable=False)
    subject_id = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    teacher_id = Column(String(64), nullable=False, index=True)
    teacher_name = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
