import unicodedata
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response
from sqlalchemy.orm import Session

from database.db import get_db
from routers.classes import get_class_or_404
from services.exceptions import NotFoundError
from services.pdf_service import PDFService, transcript_filename
from services.transcript_service import build_class_transcripts, build_transcript

router = APIRouter(prefix="/transcripts", tags=["transcripts"])

_pdf_service = PDFService()


def get_pdf_service() -> PDFService:
    return _pdf_service


def content_disposition(filename: str) -> str:
    # 헤더는 latin-1 로 인코딩되므로 ASCII 대체 이름 + RFC 5987 filename* 를 함께 보냄
    fallback = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    fallback = fallback.replace('"', "").replace("\\", "") or "transcript.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(filename)},
    )


# ==========================================================
# [1단계] 반 단위 (일괄 생성)
# ==========================================================

# ✅ [READ] 반 전체 성적표 데이터
@router.get("/class/{class_id}")
def read_class_transcripts(
    class_id: int,
    term: str = Query(..., description="예: Term 1"),
    academic_year: str = Query(..., description="예: 2024"),
    db: Session = Depends(get_db),
):
    get_class_or_404(db, class_id)
    transcripts = build_class_transcripts(db, class_id, term, academic_year)
    return {
        "success": True,
        "data": [t.model_dump() for t in transcripts],
        "message": f"{len(transcripts)} transcript(s) generated"
    }


# ✅ [PDF] 반 전체 성적표 (학생마다 한 페이지)
@router.get("/class/{class_id}/pdf")
def download_class_transcripts(
    class_id: int,
    term: str = Query(...),
    academic_year: str = Query(...),
    db: Session = Depends(get_db),
    pdf_service: PDFService = Depends(get_pdf_service),
):
    school_class = get_class_or_404(db, class_id)
    transcripts = build_class_transcripts(db, class_id, term, academic_year)
    if not transcripts:
        raise NotFoundError(f"Results for class {school_class.name} in", f"{term} {academic_year}")

    content = pdf_service.generate_bulk_transcript_pdf(transcripts)
    filename = f"Transcripts_{school_class.name}_{term}_{academic_year}.pdf".replace(" ", "_")
    return _pdf_response(content, filename)


# ==========================================================
# [2단계] 학생 단위
# ==========================================================

# ✅ [READ] 학생 성적표 데이터 (과목별 가중 합산 + 요약)
@router.get("/{student_id}")
def read_transcript(
    student_id: int,
    term: str = Query(...),
    academic_year: str = Query(...),
    db: Session = Depends(get_db),
):
    transcript = build_transcript(db, student_id, term, academic_year)
    return {"success": True, "data": transcript.model_dump()}


# ✅ [PDF] 학생 성적표 다운로드
@router.get("/{student_id}/pdf")
def download_transcript(
    student_id: int,
    term: str = Query(...),
    academic_year: str = Query(...),
    db: Session = Depends(get_db),
    pdf_service: PDFService = Depends(get_pdf_service),
):
    transcript = build_transcript(db, student_id, term, academic_year)
    content = pdf_service.generate_transcript_pdf(transcript)
    return _pdf_response(content, transcript_filename(transcript))
