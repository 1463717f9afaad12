"""직급 시더 (Position level seeder)."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.organizations import POSITION_LEVELS
from platform_seed.repositories.organization_repository import position_level_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult


class PositionLevelSeeder(Seeder):
    name = "position_levels"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)

        for data in POSITION_LEVELS:
            _, created = await position_level_repository.first_or_create(
                db,
                {"code": data["code"]},
                {
                    "name": data["name"],
                    "description": data["description"],
                    "hierarchy_level": data["hierarchy_level"],
                    "is_active": True,
                    "sort_order": data["hierarchy_level"],
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            result.created["position_levels"] += int(created)
            result.skipped["position_levels"] += int(not created)
        return result
