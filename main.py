from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

# ✅ 로깅 설정 (LOG_LEVEL은 .env에서)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# 서드파티 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("weasyprint").setLevel(logging.WARNING)
logging.getLogger("fontTools").setLevel(logging.WARNING)

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import (
    analytics, assessment_types, attendance, classes, config, fees,
    imports, lessons, navigation, results, students, subjects, transcripts,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
add_error_handlers(app)

# ✅ /v1 프리픽스 라우터 등록
app.include_router(students.router,         prefix="/v1")
app.include_router(classes.router,          prefix="/v1")
app.include_router(subjects.router,         prefix="/v1")
app.include_router(assessment_types.router, prefix="/v1")
app.include_router(results.router,          prefix="/v1")
app.include_router(transcripts.router,      prefix="/v1")
app.include_router(fees.router,             prefix="/v1")
app.include_router(attendance.router,       prefix="/v1")
app.include_router(lessons.router,          prefix="/v1")
app.include_router(imports.router,          prefix="/v1")
app.include_router(analytics.router,        prefix="/v1")
app.include_router(navigation.router,       prefix="/v1")
app.include_router(config.router,           prefix="/v1")


# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


# ✅ 루트 엔드포인트
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - school administration backend"}
