"""
services/exceptions.py

- 서비스 계층에서 발생시키는 도메인 예외 모음
- middlewares/error_handler.py 에서 공통 에러 응답(ErrorResponse)으로 변환
"""


class SchoolError(Exception):
    """서비스 계층 예외의 기본 클래스"""

    code = "SCHOOL_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(SchoolError):
    """숫자 인자가 허용 범위를 벗어난 경우 (예: max_marks <= 0, 음수 점수)"""

    code = "INVALID_INPUT"
    status_code = 422


class NoMatchingGradeRange(SchoolError):
    """
    [0, 100] 밖의 백분율.
    - 실제로 raise 하지 않음: 성적 엔진은 Fail / 9점으로 대체하고 경고 로그만 남김
    """

    code = "NO_MATCHING_GRADE_RANGE"
    status_code = 422


class NotFoundError(SchoolError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ImportMappingError(SchoolError):
    """CSV 컬럼 매핑이 불완전하거나 파일을 해석할 수 없는 경우"""

    code = "IMPORT_MAPPING_ERROR"
    status_code = 422
