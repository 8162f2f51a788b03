import logging
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config.settings import settings
from schemas.transcripts import Transcript

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def format_marks(value) -> str:
    # 28.0 → "28", 27.5 → "27.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else f"{value:g}"


class PDFService:
    def __init__(self, template_dir: str = None):
        # 템플릿 환경 설정 (상대 경로는 프로젝트 루트 기준)
        template_dir = Path(template_dir or settings.TEMPLATE_DIR)
        if not template_dir.is_absolute():
            template_dir = PROJECT_ROOT / template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters["marks"] = format_marks

    def _render_template(self, template_name: str, data: Dict[str, Any]) -> str:
        """템플릿을 렌더링하여 HTML 생성"""
        template = self.env.get_template(template_name)
        return template.render(**data)

    def _html_to_pdf(self, html_content: str) -> bytes:
        """HTML을 PDF로 변환"""
        import weasyprint  # 시스템 라이브러리(pango)가 필요하므로 실제 변환 시점에 로드

        return weasyprint.HTML(string=html_content, base_url=str(PROJECT_ROOT)).write_pdf()

    def _school(self) -> Dict[str, str]:
        return {
            "name": settings.SCHOOL_NAME,
            "address": settings.SCHOOL_ADDRESS,
            "contact": settings.SCHOOL_CONTACT,
            "headteacher": settings.HEADTEACHER_NAME,
        }

    def render_transcript_html(self, transcripts: List[Transcript]) -> str:
        """성적표 HTML (여러 명이면 학생마다 페이지 나눔)"""
        return self._render_template(
            "transcript.html",
            {"transcripts": transcripts, "school": self._school()},
        )

    def generate_transcript_pdf(self, transcript: Transcript) -> bytes:
        """학생 1명 성적표 PDF 생성"""
        return self.generate_bulk_transcript_pdf([transcript])

    def generate_bulk_transcript_pdf(self, transcripts: List[Transcript]) -> bytes:
        """반 전체 성적표를 한 PDF로 생성"""
        html = self.render_transcript_html(transcripts)
        pdf = self._html_to_pdf(html)
        logger.info("Rendered %d transcript(s) into %d bytes of PDF", len(transcripts), len(pdf))
        return pdf


def transcript_filename(transcript: Transcript) -> str:
    student = transcript.student
    return f"Transcript_{student.first_name}_{student.last_name}_{transcript.term}_{transcript.academic_year}.pdf".replace(" ", "_")
