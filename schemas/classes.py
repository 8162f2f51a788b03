from pydantic import BaseModel, Field
from typing import Optional

# ✅ 생성(Create) 요청용 스키마
# → id는 DB에서 자동 생성되므로 제외
class ClassCreate(BaseModel):
    name: str = Field(..., min_length=2)         # 반 이름 (예: Grade 10A)
    grade: int = Field(..., ge=1)                # 학년
    section: str = Field(..., min_length=1)      # 반 구분
    academic_year: str = Field(..., min_length=4)
    teacher_id: Optional[str] = None             # 담임 교사 ID


# ✅ 응답(Response) / 조회(Read) 용 스키마
class SchoolClass(ClassCreate):
    id: int
    is_active: bool = True

    class Config:
        from_attributes = True


# ✅ 일괄 진급 요청
class PromotionRequest(BaseModel):
    from_class_id: int
    to_class_id: int
