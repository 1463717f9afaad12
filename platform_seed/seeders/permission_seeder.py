"""핵심 권한 시더 — 시스템 계정, 기본 권한, 전역/팀 역할.

Core permission seeder. Ensures the system account, creates the core
permission catalog and the default roles, and, when team permissions are
enabled, mirrors every role into the DEFAULT organization.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.permissions import AUDIT_LOG_HIERARCHY, AUDIT_LOG_SUMMARY, CORE_PERMISSIONS, CORE_ROLES
from platform_seed.models.organization import Organization
from platform_seed.repositories.organization_repository import organization_repository
from platform_seed.repositories.permission_repository import permission_repository, role_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult

logger = logging.getLogger(__name__)

# 팀 역할을 복제할 기본 조직 코드 — Organization that receives team copies of the core roles
DEFAULT_ORGANIZATION_CODE: str = "DEFAULT"


async def sync_roles(
    db: AsyncSession,
    roles: dict[str, dict],
    result: SeedResult,
    actor_id: UUID | None,
    team_id: UUID | None = None,
) -> None:
    """역할을 찾거나 만들고 권한을 정확히 맞춥니다.

    Find or create each role (globally, or inside ``team_id``) and sync its
    permissions to exactly the listed ones that exist.

    Args:
        roles: 역할 이름 → {"description", "permissions"} (Role name → definition)
        team_id: 팀(조직) ID, None이면 전역 역할 (Team id, None for global roles)
    """
    guard: str = settings.GUARD_NAME
    for role_name, role_data in roles.items():
        role, created = await permission_repository.first_or_create_role(
            db,
            role_name,
            guard,
            team_id=team_id,
            values={
                "description": role_data.get("description"),
                "is_global": team_id is None,
                "created_by": actor_id,
                "updated_by": actor_id,
            },
        )
        result.created["roles"] += int(created)
        result.skipped["roles"] += int(not created)

        permissions = await permission_repository.get_by_names(db, role_data["permissions"], guard)
        await permission_repository.sync_role_permissions(db, role.id, [p.id for p in permissions])
        if team_id is None:
            logger.info("Created role: %s with %d permissions", role_name, len(permissions))
        else:
            logger.info("Created team role: %s for %s org with %d permissions",
                        role_name, DEFAULT_ORGANIZATION_CODE, len(permissions))


class PermissionSeeder(Seeder):
    """핵심 권한 및 역할 시더 (Core permissions and roles)."""

    name = "permissions"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        system_user = await self.ensure_system_user(db, context)

        result.created["permissions"] += await permission_repository.ensure_permissions(
            db, CORE_PERMISSIONS, settings.GUARD_NAME, is_global=True, actor_id=system_user.id,
        )
        result.skipped["permissions"] += len(CORE_PERMISSIONS) - result.created["permissions"]

        await sync_roles(db, CORE_ROLES, result, system_user.id)

        # 팀 모드 — DEFAULT 조직이 있으면 같은 역할을 팀 범위로 복제
        if settings.PERMISSION_TEAMS:
            default_org: Organization | None = await organization_repository.get_by_code(
                db, DEFAULT_ORGANIZATION_CODE
            )
            if default_org is not None:
                await sync_roles(db, CORE_ROLES, result, system_user.id, team_id=default_org.id)

        await self.log_summary(db)
        return result

    async def log_summary(self, db: AsyncSession) -> None:
        """감사 로그 권한 요약을 로그로 출력합니다 (Log the audit log permission summary)."""
        logger.info("=== ACTIVITY LOG PERMISSIONS SUMMARY ===")
        for permission, description in AUDIT_LOG_SUMMARY.items():
            logger.info("- %s: %s", permission, description)

        logger.info("=== ROLES WITH ACTIVITY LOG ACCESS ===")
        for role_name, role_data in CORE_ROLES.items():
            audit_permissions = [p for p in role_data["permissions"] if p.startswith("audit_log:")]
            if audit_permissions:
                logger.info("- %s: %s", role_name, ", ".join(audit_permissions))

        logger.info("=== ROLE HIERARCHY FOR AUDIT LOGS ===")
        for line in AUDIT_LOG_HIERARCHY:
            logger.info("- %s", line)

        total_permissions: int = await permission_repository.count(db)
        total_roles: int = await role_repository.count(db)
        logger.info("Seeding completed: %d permissions, %d roles created/updated.", total_permissions, total_roles)
