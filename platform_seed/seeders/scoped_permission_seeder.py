"""범위 권한 시더 — 전역/조직/프로젝트/채팅 범위 권한.

Scoped permission seeder. Global permissions and roles apply system-wide;
organization, project and chat permissions are non-global and are granted
through team roles. The first organizations get their own copies of the
organization role templates and a handful of users assigned to them.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.scoped import (
    CONVERSATION_PERMISSIONS,
    GLOBAL_PERMISSIONS,
    GLOBAL_ROLES,
    ORGANIZATION_PERMISSIONS,
    ORGANIZATION_ROLE_TEMPLATES,
    PROJECT_PERMISSIONS,
)
from platform_seed.models.organization import Organization
from platform_seed.models.permission import ROLE_TYPE_STANDARD, ROLE_TYPE_SYSTEM, Role
from platform_seed.models.user import User
from platform_seed.repositories.organization_repository import organization_repository
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.repositories.user_repository import user_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult

logger = logging.getLogger(__name__)


def role_for_position(index: int) -> str:
    """배정 순서 → 조직 역할 (0 = admin, 1 = manager, 나머지 = member).

    Organization role for the n-th assigned user.
    """
    names: list[str] = list(ORGANIZATION_ROLE_TEMPLATES)
    return names[min(index, len(names) - 1)]


class ScopedPermissionSeeder(Seeder):
    """범위별 권한 및 조직 역할 템플릿 시더 (Scoped permissions and organization roles)."""

    name = "scoped_permissions"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)

        await self._ensure(db, GLOBAL_PERMISSIONS, True, actor_id, result)
        for role_name, permission_names in GLOBAL_ROLES.items():
            await self._ensure_role(db, role_name, permission_names, None, actor_id, result)

        for names in (ORGANIZATION_PERMISSIONS, PROJECT_PERMISSIONS, CONVERSATION_PERMISSIONS):
            await self._ensure(db, names, False, actor_id, result)

        await self._setup_sample_organizations(db, actor_id, result)
        return result

    async def _ensure(
        self, db: AsyncSession, names: list[str], is_global: bool, actor_id: UUID | None, result: SeedResult
    ) -> None:
        created: int = await permission_repository.ensure_permissions(
            db, dict.fromkeys(names), settings.GUARD_NAME, is_global=is_global, actor_id=actor_id,
        )
        result.created["permissions"] += created
        result.skipped["permissions"] += len(names) - created

    async def _ensure_role(
        self,
        db: AsyncSession,
        role_name: str,
        permission_names: list[str],
        team_id: UUID | None,
        actor_id: UUID | None,
        result: SeedResult,
    ) -> Role:
        # 전역 역할은 시스템 유형, 조직 역할은 표준 유형 + 조직 범위
        if team_id is None:
            scope: dict = {"is_global": True, "type": ROLE_TYPE_SYSTEM}
        else:
            scope = {"is_global": False, "type": ROLE_TYPE_STANDARD, "scope_type": "organization", "scope_id": team_id}
        role, created = await permission_repository.first_or_create_role(
            db,
            role_name,
            settings.GUARD_NAME,
            team_id=team_id,
            values={**scope, "created_by": actor_id, "updated_by": actor_id},
        )
        result.created["roles"] += int(created)
        result.skipped["roles"] += int(not created)
        permissions = await permission_repository.get_by_names(db, permission_names, settings.GUARD_NAME)
        result.created["role_permissions"] += await permission_repository.attach_role_permissions(
            db, role.id, [permission.id for permission in permissions]
        )
        return role

    async def _setup_sample_organizations(
        self, db: AsyncSession, actor_id: UUID | None, result: SeedResult
    ) -> None:
        """앞의 조직들에 역할 템플릿을 만들고 사용자를 배정합니다.

        Instantiate the organization role templates for the first
        organizations and assign the first regular users to them: the first
        becomes admin, the second manager, the rest members.
        """
        organizations: list[Organization] = await organization_repository.get_first(
            db, settings.SEED_SCOPED_ORG_LIMIT
        )
        if not organizations:
            logger.warning("No organizations found; skipping organization role templates.")
            return
        users: list[User] = await user_repository.get_regular_users(db, settings.SEED_SCOPED_MEMBER_LIMIT)

        for organization in organizations:
            roles: dict[str, Role] = {}
            for role_name, permission_names in ORGANIZATION_ROLE_TEMPLATES.items():
                roles[role_name] = await self._ensure_role(
                    db, role_name, permission_names, organization.id, actor_id, result
                )
            for index, user in enumerate(users):
                if await permission_repository.assign_role(db, user.id, roles[role_for_position(index)]):
                    result.created["user_roles"] += 1
            logger.info("Set up %d organization roles and %d members for %s",
                        len(roles), len(users), organization.name)
