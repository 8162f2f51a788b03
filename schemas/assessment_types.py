from pydantic import BaseModel, Field
from typing import Optional

# ✅ 입력용: 관리자 평가 유형 설정
class AssessmentTypeCreate(BaseModel):
    name: str = Field(..., min_length=2)
    code: str = Field(..., min_length=2, max_length=10)
    weightage: int = Field(..., ge=0, le=100)    # 가중치 (%)
    max_marks: int = Field(..., ge=1)            # 만점
    is_active: bool = True
    order: int = Field(1, ge=1)                  # 표시 순서

class AssessmentTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    code: Optional[str] = Field(None, min_length=2, max_length=10)
    weightage: Optional[int] = Field(None, ge=0, le=100)
    max_marks: Optional[int] = Field(None, ge=1)
    is_active: Optional[bool] = None
    order: Optional[int] = Field(None, ge=1)

# ✅ 출력용
class AssessmentType(AssessmentTypeCreate):
    id: int

    class Config:
        from_attributes = True
