"""
services/navigation.py

- 역할(UserRole)별 메뉴 필터링
- 역할은 닫힌 집합(enum)이며, 알 수 없는 역할은 기본값으로 대체하지 않고 거부
"""

from enum import Enum
from typing import FrozenSet, List, NamedTuple


class UserRole(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    PARENT = "parent"
    STUDENT = "student"


class NavItem(NamedTuple):
    name: str
    href: str
    roles: FrozenSet[UserRole]


_STAFF = frozenset({UserRole.ADMIN, UserRole.TEACHER})
_ADMIN = frozenset({UserRole.ADMIN})

NAVIGATION: List[NavItem] = [
    NavItem("Dashboard", "/", frozenset({UserRole.ADMIN, UserRole.TEACHER, UserRole.PARENT})),
    NavItem("Students", "/students", _STAFF),
    NavItem("Classes", "/classes", _STAFF),
    NavItem("Attendance", "/attendance", _STAFF),
    NavItem("Lesson Plans", "/lessons", _STAFF),
    NavItem("Results Entry", "/results/entry", _STAFF),
    NavItem("Transcripts", "/results/transcripts", frozenset({UserRole.ADMIN, UserRole.TEACHER, UserRole.PARENT})),
    NavItem("Fee Ledger", "/finance/ledger", frozenset({UserRole.ADMIN, UserRole.PARENT})),
    NavItem("Analytics", "/analytics", _ADMIN),
    NavItem("CSV Import", "/admin/import", _ADMIN),
    NavItem("Bulk Promotion", "/admin/promotion", _ADMIN),
    NavItem("Assessments", "/admin/assessments", _ADMIN),
]


def navigation_for(role: UserRole) -> List[NavItem]:
    # str이 들어와도 enum으로 변환 (알 수 없는 값이면 ValueError)
    role = UserRole(role)
    return [item for item in NAVIGATION if role in item.roles]
