from pydantic import BaseModel, Field
from typing import Dict, List


# ✅ CSV 학생 일괄 등록 요청
# - csv_text: 업로드된 CSV 원문
# - mapping: {CSV 컬럼명: DB 필드명 | "skip"}
class StudentImportRequest(BaseModel):
    csv_text: str = Field(..., min_length=1)
    mapping: Dict[str, str]
    class_id: int


class StudentImportPreview(BaseModel):
    headers: List[str]
    rows: List[Dict[str, str]]
    missing_fields: List[str]


class StudentImportResult(BaseModel):
    success: int
    failed: int
    errors: List[str] = []
