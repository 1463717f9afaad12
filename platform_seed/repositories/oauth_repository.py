"""OAuth 레포지토리 — 스코프 및 클라이언트 쿼리.

OAuth Repository — scope and client queries.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.models.oauth import OAuthClient, OAuthScope
from platform_seed.repositories.base import BaseRepository


class OAuthClientRepository(BaseRepository[OAuthClient]):
    """oauth_clients 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(OAuthClient)

    async def get_names_for_organization(self, db: AsyncSession, organization_id: UUID) -> set[str]:
        """조직에 등록된 클라이언트 이름 set (Client names registered to an organization)."""
        result = await db.execute(
            select(OAuthClient.name).where(OAuthClient.organization_id == organization_id)
        )
        return set(result.scalars().all())


scope_repository: BaseRepository[OAuthScope] = BaseRepository(OAuthScope)
client_repository: OAuthClientRepository = OAuthClientRepository()
