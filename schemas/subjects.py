from pydantic import BaseModel, Field
from typing import Optional

# ✅ 입력용: POST/PUT 요청에서 사용할 스키마
class SubjectCreate(BaseModel):
    name: str = Field(..., min_length=2)         # 과목 이름
    code: str = Field(..., min_length=2)         # 과목 코드
    department: Optional[str] = None
    teacher_id: Optional[str] = None
    is_core: bool = False

# ✅ 출력용
class Subject(SubjectCreate):
    id: int
    is_active: bool = True

    class Config:
        from_attributes = True
