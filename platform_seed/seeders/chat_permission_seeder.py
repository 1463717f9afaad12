"""채팅 권한 시더 — 채팅 권한, 채팅 역할, 대화방 역할.

Chat permission seeder. Creates the fine-grained ``chat.*`` permissions, the
chat system roles and the per-conversation role definitions. Role
permissions are attached, never detached, so grants added by hand survive
a rerun.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.chat import CHAT_PERMISSIONS, CHAT_ROLES, CONVERSATION_ROLES
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult

logger = logging.getLogger(__name__)


class ChatPermissionSeeder(Seeder):
    """채팅 권한 및 역할 시더 (Chat permissions and roles)."""

    name = "chat_permissions"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)
        logger.info("Creating chat-specific permissions and roles...")

        created: int = await permission_repository.ensure_permissions(
            db, CHAT_PERMISSIONS, settings.GUARD_NAME, actor_id=actor_id,
        )
        result.created["permissions"] += created
        result.skipped["permissions"] += len(CHAT_PERMISSIONS) - created
        logger.info("Created %d chat permissions.", created)

        await self._attach_roles(db, CHAT_ROLES, result, actor_id, "role")
        await self._attach_roles(db, CONVERSATION_ROLES, result, actor_id, "conversation role")

        logger.info("Chat permissions and roles seeding completed!")
        return result

    async def _attach_roles(
        self,
        db: AsyncSession,
        roles: dict[str, dict],
        result: SeedResult,
        actor_id: UUID | None,
        label: str,
    ) -> None:
        for role_name, role_data in roles.items():
            role, created = await permission_repository.first_or_create_role(
                db,
                role_name,
                settings.GUARD_NAME,
                values={
                    "description": role_data["description"],
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            result.created["roles"] += int(created)
            result.skipped["roles"] += int(not created)

            permissions = await permission_repository.get_by_names(db, role_data["permissions"], settings.GUARD_NAME)
            result.created["role_permissions"] += await permission_repository.attach_role_permissions(
                db, role.id, [permission.id for permission in permissions]
            )
            logger.info("Created %s: %s with %d permissions.", label, role_name, len(role_data["permissions"]))
