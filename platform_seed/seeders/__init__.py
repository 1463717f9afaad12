"""시더 패키지 — 각 시더 클래스의 중앙 임포트 지점.

Seeder package. Each seeder fills one area of the schema:

    | Seeder                       | Area                                          |
    |------------------------------|-----------------------------------------------|
    | PermissionSeeder             | 시스템 계정, 핵심 권한/역할 (core RBAC)       |
    | SystemUserSeeder             | 서비스/데모/가짜/조직 사용자 (users)          |
    | ChatPermissionSeeder         | 채팅 권한/역할 (chat RBAC)                    |
    | ScopedPermissionSeeder       | 범위 권한, 조직 역할 (scoped RBAC)            |
    | IndustryPermissionSeeder     | 업종별 권한 (industry permissions)            |
    | OrganizationSeeder           | 조직 트리 (organization tree)                 |
    | OrganizationUnitSeeder       | 조직 단위 (units)                             |
    | PositionLevelSeeder          | 직급 (position levels)                        |
    | OrganizationPositionSeeder   | 직위 (positions)                              |
    | OrganizationMembershipSeeder | 소속 (memberships)                            |
    | OrganizationVariantSeeder    | 업종별 샘플 조직/역할 (industry samples)      |
    | OAuthSeeder                  | OAuth 스코프/클라이언트 (OAuth)               |
    | PersonalAccessTokenSeeder    | 개인 액세스 토큰 클라이언트 (PAT clients)     |
    | RegionSeeder                 | 지역 참조 데이터 (geographic CSV import)      |
"""

from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.seeders.chat_permission_seeder import ChatPermissionSeeder
from platform_seed.seeders.industry_permission_seeder import IndustryPermissionSeeder
from platform_seed.seeders.oauth_seeder import OAuthSeeder
from platform_seed.seeders.organization_membership_seeder import OrganizationMembershipSeeder
from platform_seed.seeders.organization_position_seeder import OrganizationPositionSeeder
from platform_seed.seeders.organization_seeder import OrganizationSeeder
from platform_seed.seeders.organization_unit_seeder import OrganizationUnitSeeder
from platform_seed.seeders.organization_variant_seeder import OrganizationVariantSeeder
from platform_seed.seeders.permission_seeder import PermissionSeeder
from platform_seed.seeders.personal_access_token_seeder import PersonalAccessTokenSeeder
from platform_seed.seeders.position_level_seeder import PositionLevelSeeder
from platform_seed.seeders.region_seeder import RegionSeeder
from platform_seed.seeders.scoped_permission_seeder import ScopedPermissionSeeder
from platform_seed.seeders.system_user_seeder import SystemUserSeeder

__all__ = [
    "SeedContext", "Seeder", "SeedResult",
    "PermissionSeeder", "SystemUserSeeder", "ChatPermissionSeeder",
    "ScopedPermissionSeeder", "IndustryPermissionSeeder",
    "OrganizationSeeder", "OrganizationUnitSeeder", "PositionLevelSeeder",
    "OrganizationPositionSeeder", "OrganizationMembershipSeeder", "OrganizationVariantSeeder",
    "OAuthSeeder", "PersonalAccessTokenSeeder", "RegionSeeder",
]
