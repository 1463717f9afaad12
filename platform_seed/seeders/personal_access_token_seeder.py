"""개인 액세스 토큰 클라이언트 시더.

Personal access token client seeder. Registers the clients used to issue
personal access tokens: no secret, no redirect URIs and the
``personal_access`` grant only.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.oauth import PERSONAL_ACCESS_CLIENTS, PERSONAL_ACCESS_OWNER
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.seeders.oauth_seeder import ClientOwnerMixin

logger = logging.getLogger(__name__)

# 개인 액세스 토큰 클라이언트 공통값 — Fixed fields of every personal access client
PERSONAL_ACCESS_DEFAULTS: dict = {
    "client_type": "personal_access",
    "redirect_uris": [],
    "grant_types": ["personal_access"],
}


class PersonalAccessTokenSeeder(ClientOwnerMixin, Seeder):
    """개인 액세스 토큰 클라이언트 시더 (Personal access token clients)."""

    name = "personal_access_tokens"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        logger.info("Seeding Personal Access Token OAuth clients...")

        user, organization = await self.ensure_owner(db, PERSONAL_ACCESS_OWNER)
        await self.register_clients(
            db, PERSONAL_ACCESS_CLIENTS, user, organization, result,
            defaults=PERSONAL_ACCESS_DEFAULTS,
        )

        for client in PERSONAL_ACCESS_CLIENTS:
            logger.info("- %s (%s): %s", client["name"], client["user_access_scope"], client["description"])
        return result
