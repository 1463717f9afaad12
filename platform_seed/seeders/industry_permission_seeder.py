"""업종별 권한 시더.

Industry permission seeder. Creates the industry permissions and syncs the
permissions of every existing role (global or team) whose name matches an
industry role. Roles that do not exist are not created.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.industry import INDUSTRY_PERMISSIONS, INDUSTRY_ROLE_PERMISSIONS
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult

logger = logging.getLogger(__name__)


class IndustryPermissionSeeder(Seeder):
    """업종별 권한 시더 (Industry-specific permissions)."""

    name = "industry_permissions"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        system_user = await self.ensure_system_user(db, context)

        created: int = await permission_repository.ensure_permissions(
            db, INDUSTRY_PERMISSIONS, settings.GUARD_NAME, actor_id=system_user.id,
        )
        result.created["permissions"] += created
        result.skipped["permissions"] += len(INDUSTRY_PERMISSIONS) - created

        for role_name, permission_names in INDUSTRY_ROLE_PERMISSIONS.items():
            roles = await permission_repository.get_roles_by_name(db, role_name, settings.GUARD_NAME)
            if not roles:
                continue
            permissions = await permission_repository.get_by_names(db, permission_names, settings.GUARD_NAME)
            for role in roles:
                await permission_repository.sync_role_permissions(db, role.id, [p.id for p in permissions])
                result.created["synced_roles"] += 1
            logger.info("Synced %d permissions to %d '%s' role(s)", len(permissions), len(roles), role_name)
        return result
