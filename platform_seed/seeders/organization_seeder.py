"""조직 시더 — 샘플 조직 트리.

Organization seeder. Creates the sample holding company with its
subsidiaries, divisions and branches, parents first, and keeps each
organization's ``level`` and ``path`` in line with its parent.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.organizations import ORGANIZATIONS
from platform_seed.repositories.organization_repository import organization_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult

logger = logging.getLogger(__name__)

# 데이터 항목 중 컬럼이 아닌 키 — Data keys that are not columns
_REFERENCE_KEYS: tuple[str, ...] = ("key", "parent")


class OrganizationSeeder(Seeder):
    """샘플 조직 트리 시더 (Sample organization tree)."""

    name = "organizations"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)

        for data in ORGANIZATIONS:
            values = {field: value for field, value in data.items() if field not in _REFERENCE_KEYS}
            parent_key: str | None = data["parent"]
            values["parent_organization_id"] = context.organization_ids[parent_key] if parent_key else None
            values["created_by"] = actor_id
            values["updated_by"] = actor_id
            code: str = values.pop("organization_code")

            organization, created = await organization_repository.first_or_create(
                db, {"organization_code": code}, values
            )
            await organization_repository.update_path(db, organization)
            context.organization_ids[data["key"]] = organization.id

            if created:
                result.created["organizations"] += 1
                logger.info("Created organization %s (%s) at level %d", organization.name, code, organization.level)
            else:
                result.skipped["organizations"] += 1
        return result
