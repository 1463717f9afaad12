"""조직 레포지토리 — 조직 트리, 단위, 직급, 직위, 소속 쿼리.

Organization Repository — organization tree, units, position levels,
positions and memberships.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.models.organization import (
    Organization,
    OrganizationMembership,
    OrganizationPosition,
    OrganizationPositionLevel,
    OrganizationUnit,
)
from platform_seed.repositories.base import BaseRepository


class OrganizationRepository(BaseRepository[Organization]):
    """organizations 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(Organization)

    async def get_by_code(self, db: AsyncSession, organization_code: str) -> Organization | None:
        """조직 코드로 조회 (Look up by organization_code)."""
        return await self.get_one_by(db, organization_code=organization_code)

    async def get_ids_by_codes(self, db: AsyncSession, codes: list[str]) -> dict[str, UUID]:
        """조직 코드 목록 → {code: id} (Map organization codes to ids)."""
        result = await db.execute(
            select(Organization.organization_code, Organization.id)
            .where(Organization.organization_code.in_(codes))
        )
        return {code: org_id for code, org_id in result.all()}

    async def get_first(self, db: AsyncSession, limit: int) -> list[Organization]:
        """생성 순서대로 앞의 limit개 조직 (First organizations in creation order)."""
        result = await db.execute(
            select(Organization).order_by(Organization.created_at, Organization.id).limit(limit)
        )
        return list(result.scalars().all())

    async def update_path(self, db: AsyncSession, organization: Organization) -> None:
        """조직의 level과 path를 상위 조직 기준으로 갱신합니다.

        Recompute ``level`` and ``path`` from the parent: a root gets level 0
        and a path of its own id; a child gets ``parent.level + 1`` and
        ``parent.path + "/" + id``.
        """
        parent: Organization | None = None
        if organization.parent_organization_id is not None:
            parent = await self.get_by_id(db, organization.parent_organization_id)

        if parent is None:
            organization.level = 0
            organization.path = str(organization.id)
        else:
            organization.level = parent.level + 1
            organization.path = f"{parent.path}/{organization.id}"
        await db.flush()


class OrganizationUnitRepository(BaseRepository[OrganizationUnit]):
    """organization_units 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(OrganizationUnit)

    async def get_by_code(self, db: AsyncSession, organization_id: UUID, unit_code: str) -> OrganizationUnit | None:
        return await self.get_one_by(db, organization_id=organization_id, unit_code=unit_code)


class PositionRepository(BaseRepository[OrganizationPosition]):
    """organization_positions / organization_position_levels 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(OrganizationPosition)

    async def get_by_code(self, db: AsyncSession, organization_id: UUID, position_code: str) -> OrganizationPosition | None:
        return await self.get_one_by(db, organization_id=organization_id, position_code=position_code)

    async def get_level_ids(self, db: AsyncSession) -> dict[str, UUID]:
        """직급 코드 → id (Map position level codes to ids)."""
        result = await db.execute(
            select(OrganizationPositionLevel.code, OrganizationPositionLevel.id)
        )
        return {code: level_id for code, level_id in result.all()}


organization_repository: OrganizationRepository = OrganizationRepository()
unit_repository: OrganizationUnitRepository = OrganizationUnitRepository()
position_level_repository: BaseRepository[OrganizationPositionLevel] = BaseRepository(OrganizationPositionLevel)
position_repository: PositionRepository = PositionRepository()
membership_repository: BaseRepository[OrganizationMembership] = BaseRepository(OrganizationMembership)
