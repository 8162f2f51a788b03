from typing import Optional, Annotated
from fastapi import Header, HTTPException

from services.navigation import UserRole

RoleHeader = Annotated[Optional[str], Header(alias="X-User-Role")]


def get_current_role(x_user_role: RoleHeader = None) -> UserRole:
    """
    인증 서비스(외부)가 세션 검증 후 넘겨주는 역할 헤더를 UserRole로 변환
    - 헤더 누락 → 401
    - 정의되지 않은 역할 → 403 (기본 역할로 대체하지 않음)
    """
    if not x_user_role:
        raise HTTPException(status_code=401, detail="Missing X-User-Role header")

    try:
        return UserRole(x_user_role.strip().lower())
    except ValueError:
        raise HTTPException(status_code=403, detail=f"Unknown role: {x_user_role}")
