import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schemas.common import ErrorDetail, ErrorResponse
from services.exceptions import SchoolError

logger = logging.getLogger(__name__)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def add_error_handlers(app: FastAPI):
    # ✅ 서비스 계층 도메인 예외 (InvalidInput, NotFoundError, ImportMappingError ...)
    @app.exception_handler(SchoolError)
    async def school_error_handler(request: Request, exc: SchoolError):
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
        return _error(exc.status_code, exc.code, exc.message)

    # ✅ 요청 바디/쿼리 검증 실패
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(p) for p in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
        return _error(422, "VALIDATION_ERROR", message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, "HTTP_ERROR", str(exc.detail))

    # ✅ 처리되지 않은 예외
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "INTERNAL_ERROR", str(exc))
