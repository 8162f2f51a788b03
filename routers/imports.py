import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from config.settings import settings
from database.db import get_db
from routers.classes import get_class_or_404
from schemas.imports import StudentImportPreview, StudentImportRequest, StudentImportResult
from services import csv_import
from services.exceptions import ImportMappingError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/imports", tags=["csv import"])


def _check_size(csv_text: str):
    if len(csv_text.encode("utf-8")) > settings.MAX_UPLOAD_MB * 1024 * 1024:
        raise ImportMappingError(f"CSV file exceeds {settings.MAX_UPLOAD_MB} MB")


# ✅ [PREVIEW] 업로드 → 매핑 → 미리보기 단계
# - 필수 필드 누락은 에러가 아니라 missing_fields 로 알려줌
@router.post("/students/preview")
def preview_student_import(payload: StudentImportRequest, db: Session = Depends(get_db)):
    _check_size(payload.csv_text)
    school_class = get_class_or_404(db, payload.class_id)
    headers, rows = csv_import.parse_csv(payload.csv_text)
    mapped = csv_import.map_rows(rows, payload.mapping, school_class.id, school_class.name)
    preview = StudentImportPreview(
        headers=headers,
        rows=[{k: "" if v is None else str(v) for k, v in row.items()} for row in mapped],
        missing_fields=csv_import.missing_required_fields(payload.mapping),
    )
    return {"success": True, "data": preview.model_dump()}


# ✅ [IMPORT] 학생 일괄 등록
# - 검증 실패 행, 이미 등록된 ECZ 번호는 건너뛰고 failed 로 집계
@router.post("/students")
def import_students(payload: StudentImportRequest, db: Session = Depends(get_db)):
    _check_size(payload.csv_text)
    school_class = get_class_or_404(db, payload.class_id)
    headers, rows = csv_import.parse_csv(payload.csv_text)
    csv_import.validate_mapping(headers, payload.mapping)

    mapped = csv_import.map_rows(rows, payload.mapping, school_class.id, school_class.name)
    students, errors = csv_import.build_students(mapped)

    created = csv_import.save_students(db, students, errors)
    db.commit()

    logger.info("CSV import into class %s: %d created, %d failed", school_class.id, created, len(errors))
    result = StudentImportResult(success=created, failed=len(errors), errors=errors)
    return {
        "success": True,
        "data": result.model_dump(),
        "message": f"Imported {created} students"
    }
