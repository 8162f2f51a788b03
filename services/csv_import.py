"""
services/csv_import.py

CSV 학생 일괄 등록 파이프라인

1. parse_csv: 헤더 + 행(dict) 추출
2. missing_required_fields: 필수 DB 필드가 모두 매핑되었는지 확인
3. map_rows: 컬럼 매핑 적용, 성별 정규화, 반/입학일 채우기
4. build_students: StudentCreate 로 행별 검증 (실패 행은 사유와 함께 반환)
5. save_students: ECZ 번호 중복을 걸러 등록
"""

import csv
import io
import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.orm import Session

from models.students import Student as StudentModel
from schemas.students import StudentCreate
from services.exceptions import ImportMappingError

logger = logging.getLogger(__name__)

SKIP = "skip"

# ✅ 매핑 가능한 DB 필드 (필수 여부)
DB_FIELDS: Dict[str, bool] = {
    "first_name": True,
    "last_name": True,
    "middle_name": False,
    "ecz_number": True,
    "gender": True,
    "date_of_birth": False,
    "guardian_name": True,
    "guardian_phone": True,
    "address": False,
}
REQUIRED_FIELDS = [field for field, required in DB_FIELDS.items() if required]


def parse_csv(text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff").strip()), skipinitialspace=True)
    headers = [h.strip() for h in (reader.fieldnames or []) if h and h.strip()]
    rows = []
    for raw in reader:
        rows.append({
            (key or "").strip(): (value or "").strip()
            for key, value in raw.items()
            if key is not None
        })
    if not headers or not rows:
        raise ImportMappingError("CSV file appears to be empty or invalid.")
    return headers, rows


def missing_required_fields(mapping: Dict[str, str]) -> List[str]:
    mapped = {field for field in mapping.values() if field and field != SKIP}
    return [field for field in REQUIRED_FIELDS if field not in mapped]


def validate_mapping(headers: List[str], mapping: Dict[str, str]) -> None:
    unknown_columns = [column for column in mapping if column not in headers]
    if unknown_columns:
        raise ImportMappingError(f"Unknown CSV columns in mapping: {', '.join(unknown_columns)}")
    unknown_fields = [f for f in mapping.values() if f and f != SKIP and f not in DB_FIELDS]
    if unknown_fields:
        raise ImportMappingError(f"Unknown target fields: {', '.join(unknown_fields)}")
    missing = missing_required_fields(mapping)
    if missing:
        raise ImportMappingError(f"Missing required mappings: {', '.join(missing)}")


def normalize_gender(value: str) -> str:
    return "Male" if value.strip().lower().startswith("m") else "Female"


def map_rows(
    rows: List[Dict[str, str]],
    mapping: Dict[str, str],
    class_id: int,
    class_name: str,
    enrollment_date: Optional[date] = None,
) -> List[Dict[str, object]]:
    enrollment_date = enrollment_date or date.today()
    mapped_rows = []
    for row in rows:
        student: Dict[str, object] = {
            "class_id": class_id,
            "class_name": class_name,
            "enrollment_date": enrollment_date,
            "is_active": True,
        }
        for column, field in mapping.items():
            if not field or field == SKIP:
                continue
            value = row.get(column, "")
            if field == "gender":
                value = normalize_gender(value)
            if value == "" and not DB_FIELDS[field]:
                # 선택 필드의 빈 칸은 None
                value = None
            student[field] = value
        mapped_rows.append(student)
    return mapped_rows


def build_students(mapped_rows: List[Dict[str, object]]) -> Tuple[List[StudentCreate], List[str]]:
    students, errors = [], []
    for line_no, row in enumerate(mapped_rows, start=2):  # 1행은 헤더
        try:
            students.append(StudentCreate(**row))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first.get("loc", ()))
            errors.append(f"row {line_no}: {field} {first.get('msg')}")
    if errors:
        logger.warning("CSV import: %d of %d rows rejected", len(errors), len(mapped_rows))
    return students, errors


def save_students(db: Session, students: List[StudentCreate], errors: List[str]) -> int:
    """
    검증된 학생을 등록하고 등록 인원을 반환 (커밋은 호출 측 책임)
    - 이미 등록된 ECZ 번호, 파일 안에서 중복된 ECZ 번호는 건너뛰고 errors 에 추가
    """
    ecz_numbers = [s.ecz_number for s in students]
    taken = {
        n for (n,) in db.query(StudentModel.ecz_number).filter(StudentModel.ecz_number.in_(ecz_numbers)).all()
    }

    created = 0
    for student in students:
        if student.ecz_number in taken:
            errors.append(f"ECZ number {student.ecz_number} is already registered")
            continue
        taken.add(student.ecz_number)
        db.add(StudentModel(**student.model_dump()))
        created += 1
    return created
