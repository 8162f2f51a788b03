from fastapi import APIRouter, Depends

from dependencies.security import get_current_role
from services.navigation import UserRole, navigation_for

router = APIRouter(prefix="/navigation", tags=["navigation"])


# ✅ [READ] 역할별 사이드바 메뉴
@router.get("/")
def read_navigation(role: UserRole = Depends(get_current_role)):
    return {
        "success": True,
        "data": {
            "role": role.value,
            "items": [{"name": item.name, "href": item.href} for item in navigation_for(role)],
        }
    }
