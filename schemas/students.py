from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import date

# ✅ 입력용 (POST/PUT 등)
class StudentCreate(BaseModel):
    first_name: str = Field(..., min_length=2)               # 이름
    last_name: str = Field(..., min_length=2)                # 성
    middle_name: Optional[str] = None
    ecz_number: str = Field(..., min_length=5)               # ECZ 등록 번호
    gender: Literal["Male", "Female"]
    date_of_birth: Optional[date] = None
    class_id: int
    class_name: str = Field(..., min_length=1)
    enrollment_date: date = Field(default_factory=date.today)
    guardian_name: str = Field(..., min_length=2)
    guardian_phone: str = Field(..., min_length=10)          # 10자리 이상
    address: Optional[str] = None
    is_active: bool = True

# ✅ 부분 수정용 (PATCH 성격의 PUT)
class StudentUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=2)
    last_name: Optional[str] = Field(None, min_length=2)
    middle_name: Optional[str] = None
    gender: Optional[Literal["Male", "Female"]] = None
    date_of_birth: Optional[date] = None
    class_id: Optional[int] = None
    class_name: Optional[str] = None
    guardian_name: Optional[str] = Field(None, min_length=2)
    guardian_phone: Optional[str] = Field(None, min_length=10)
    address: Optional[str] = None
    is_active: Optional[bool] = None

# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(StudentCreate):
    id: int

    class Config:
        from_attributes = True  # Pydantic v2 기준
