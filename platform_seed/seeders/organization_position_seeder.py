"""직위 시더 — 조직 단위별 직위와 급여 범위.

Organization position seeder. Each position belongs to a unit (and through
it to an organization) and references a position level by code.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.organizations import ORGANIZATION_POSITIONS, ORGANIZATION_UNITS
from platform_seed.repositories.organization_repository import position_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.exceptions import PrerequisiteMissingError

# 직위 데이터 중 컬럼이 아닌 키 — Data keys that are not columns
_REFERENCE_KEYS: tuple[str, ...] = ("key", "unit", "level")


class OrganizationPositionSeeder(Seeder):
    """직위 시더 (Positions within organization units)."""

    name = "organization_positions"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)
        level_ids: dict[str, UUID] = await position_repository.get_level_ids(db)
        organization_ids: dict[str, UUID] = await self.organization_ids(db, context)
        unit_ids: dict[str, UUID] = await self.unit_ids(db, context)
        unit_organizations: dict[str, str] = {unit["key"]: unit["organization"] for unit in ORGANIZATION_UNITS}

        for data in ORGANIZATION_POSITIONS:
            if data["level"] not in level_ids:
                raise PrerequisiteMissingError(
                    f"Position level '{data['level']}' not found. Please run the position level seeder first."
                )
            if data["unit"] not in unit_ids:
                raise PrerequisiteMissingError(
                    f"Organization unit '{data['unit']}' not found. Please run the organization unit seeder first."
                )

            values = {field: value for field, value in data.items() if field not in _REFERENCE_KEYS}
            position_code: str = values.pop("position_code")
            organization_id: UUID = organization_ids[unit_organizations[data["unit"]]]
            position, created = await position_repository.first_or_create(
                db,
                {"organization_id": organization_id, "position_code": position_code},
                {
                    **values,
                    "organization_unit_id": unit_ids[data["unit"]],
                    "organization_position_level_id": level_ids[data["level"]],
                    "is_active": True,
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            context.position_ids[data["key"]] = position.id
            result.created["organization_positions"] += int(created)
            result.skipped["organization_positions"] += int(not created)
        return result
