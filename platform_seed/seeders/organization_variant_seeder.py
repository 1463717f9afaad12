"""업종별 샘플 조직 시더 — 조직, 팀 역할, 샘플 사용자.

Organization variant seeder. Creates one small organization tree per
industry, the industry team roles inside those organizations and a sample
user holding each role. The roles are created empty; the industry
permission seeder runs afterwards and syncs their permissions.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.variants import VARIANT_ORGANIZATIONS, VARIANT_ROLE_ASSIGNMENTS
from platform_seed.models.permission import ROLE_TYPE_STANDARD
from platform_seed.repositories.organization_repository import organization_repository
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.password import hash_password

logger = logging.getLogger(__name__)

_REFERENCE_KEYS: tuple[str, ...] = ("key", "parent")


class OrganizationVariantSeeder(Seeder):
    """업종별 샘플 조직 시더 (Industry sample organizations)."""

    name = "organization_variants"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)

        organization_ids: dict[str, UUID] = {}
        for data in VARIANT_ORGANIZATIONS:
            values = {field: value for field, value in data.items() if field not in _REFERENCE_KEYS}
            parent_key: str | None = data["parent"]
            values["parent_organization_id"] = organization_ids[parent_key] if parent_key else None
            values["created_by"] = actor_id
            values["updated_by"] = actor_id
            code: str = values.pop("organization_code")

            organization, created = await organization_repository.first_or_create(
                db, {"organization_code": code}, values
            )
            await organization_repository.update_path(db, organization)
            organization_ids[data["key"]] = organization.id
            result.created["organizations"] += int(created)
            result.skipped["organizations"] += int(not created)

        shared_hash: str = hash_password(settings.SEED_DEFAULT_PASSWORD)
        for assignment in VARIANT_ROLE_ASSIGNMENTS:
            team_id: UUID = organization_ids[assignment["organization"]]
            role, created = await permission_repository.first_or_create_role(
                db,
                assignment["role"],
                settings.GUARD_NAME,
                team_id=team_id,
                values={
                    "is_global": False,
                    "type": ROLE_TYPE_STANDARD,
                    "scope_type": "organization",
                    "scope_id": team_id,
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            result.created["roles"] += int(created)
            result.skipped["roles"] += int(not created)

            user, user_created = await self.ensure_user(
                db, assignment["email"], assignment["name"], password_hash=shared_hash,
                username=assignment["username"], created_by=actor_id, updated_by=actor_id,
            )
            result.created["users"] += int(user_created)
            if await permission_repository.assign_role(db, user.id, role):
                result.created["user_roles"] += 1

        logger.info("Seeded %d industry organizations with %d team roles",
                    len(VARIANT_ORGANIZATIONS), len(VARIANT_ROLE_ASSIGNMENTS))
        return result
