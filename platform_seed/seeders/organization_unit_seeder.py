"""조직 단위 시더 — 이사회, 위원회, 부서, 팀.

Organization unit seeder. Committees hang under the board of commissioners
and the development teams under the engineering division.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.organizations import ORGANIZATION_UNITS
from platform_seed.repositories.organization_repository import unit_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.exceptions import PrerequisiteMissingError


class OrganizationUnitSeeder(Seeder):
    """조직 단위 시더 (Governance and operational units)."""

    name = "organization_units"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)
        organization_ids: dict[str, UUID] = await self.organization_ids(db, context)

        for data in ORGANIZATION_UNITS:
            organization_id: UUID | None = organization_ids.get(data["organization"])
            if organization_id is None:
                raise PrerequisiteMissingError(
                    "Sample organizations not found. Please run the organization seeder first."
                )
            parent_key: str | None = data["parent_unit"]

            unit, created = await unit_repository.first_or_create(
                db,
                {"organization_id": organization_id, "unit_code": data["unit_code"]},
                {
                    "name": data["name"],
                    "unit_type": data["unit_type"],
                    "description": data["description"],
                    "parent_unit_id": context.unit_ids[parent_key] if parent_key else None,
                    "responsibilities": data["responsibilities"],
                    "authorities": data["authorities"],
                    "is_active": True,
                    "sort_order": data["sort_order"],
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            context.unit_ids[data["key"]] = unit.id
            result.created["organization_units"] += int(created)
            result.skipped["organization_units"] += int(not created)
        return result
