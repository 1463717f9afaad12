"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package. Importing from this package registers every
model with the metadata, which ``create_all`` and relationship resolution need.

Modules:
    user: 사용자 (User accounts)
    permission: 권한, 역할, 매핑 (Permissions, roles, role/user pivots)
    organization: 조직, 단위, 직급, 직위, 소속 (Organizations, units, levels, positions, memberships)
    oauth: OAuth 스코프 및 클라이언트 (OAuth scopes and clients)
    region: 국가, 주, 시, 구, 동 (Countries, provinces, cities, districts, villages)
"""

from platform_seed.models.user import User
from platform_seed.models.permission import Permission, Role, RolePermission, UserRole, UserPermission
from platform_seed.models.organization import (
    Organization,
    OrganizationUnit,
    OrganizationPositionLevel,
    OrganizationPosition,
    OrganizationMembership,
)
from platform_seed.models.oauth import OAuthScope, OAuthClient
from platform_seed.models.region import Country, Province, City, District, Village

__all__ = [
    "User",
    "Permission", "Role", "RolePermission", "UserRole", "UserPermission",
    "Organization", "OrganizationUnit", "OrganizationPositionLevel",
    "OrganizationPosition", "OrganizationMembership",
    "OAuthScope", "OAuthClient",
    "Country", "Province", "City", "District", "Village",
]
