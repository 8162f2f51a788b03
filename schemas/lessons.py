from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

class LessonPlanCreate(BaseModel):
    title: str = Field(..., min_length=1)        # 수업 제목
    objective: str                               # 학습 목표
    content: str                                 # 수업 내용
    class_id: int
    subject_id: int
    date: date
    teacher_id: str
    teacher_name: str

class LessonPlan(LessonPlanCreate):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
