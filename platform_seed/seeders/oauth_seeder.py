"""OAuth 시더 — OAuth 2.0 / OIDC 스코프와 샘플 클라이언트.

OAuth seeder. Upserts the scope catalog, makes sure the OAuth
administrator and their organization exist, and registers the sample
clients. Public clients get no secret; confidential clients get a random
32-character secret.

Clients are matched by name within the owning organization, so a rerun
leaves existing registrations (and their secrets) alone.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.oauth import OAUTH_CLIENTS, OAUTH_OWNER, OAUTH_SCOPES
from platform_seed.models.oauth import OAuthClient
from platform_seed.models.organization import Organization
from platform_seed.models.user import User
from platform_seed.repositories.oauth_repository import client_repository, scope_repository
from platform_seed.repositories.organization_repository import organization_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.password import random_string

logger = logging.getLogger(__name__)

# 클라이언트 소유자 유형 — Polymorphic owner type stamped on clients
OWNER_TYPE: str = "user"
# 기밀 클라이언트 시크릿 길이 — Length of generated client secrets
SECRET_LENGTH: int = 32


class ClientOwnerMixin:
    """샘플 클라이언트 소유자(사용자 + 조직) 준비 및 클라이언트 등록.

    Shared by the seeders that register clients for a sample owner.
    """

    async def ensure_owner(self, db: AsyncSession, owner: dict) -> tuple[User, Organization]:
        user_data: dict = owner["user"]
        user, created = await self.ensure_user(
            db, user_data["email"], user_data["name"], password=user_data["password"]
        )
        if created:
            logger.info("Created client owner %s", user.email)

        org_data: dict = owner["organization"]
        organization, _ = await organization_repository.first_or_create(
            db,
            {"organization_code": org_data["organization_code"]},
            {
                "name": org_data["name"],
                "organization_type": org_data["organization_type"],
                "is_active": True,
                "created_by": user.id,
                "updated_by": user.id,
            },
        )
        await organization_repository.update_path(db, organization)
        return user, organization

    async def register_clients(
        self,
        db: AsyncSession,
        clients: list[dict],
        user: User,
        organization: Organization,
        result: SeedResult,
        defaults: dict | None = None,
    ) -> None:
        existing: set[str] = await client_repository.get_names_for_organization(db, organization.id)
        for client_data in clients:
            data: dict = {**(defaults or {}), **client_data}
            if data["name"] in existing:
                result.skipped["oauth_clients"] += 1
                continue

            secret: str | None = None
            if data["client_type"] == "confidential":
                secret = random_string(SECRET_LENGTH)

            client = OAuthClient(
                name=data["name"],
                owner_type=OWNER_TYPE,
                owner_id=user.id,
                secret=secret,
                provider=None,
                redirect_uris=data.get("redirect_uris", []),
                grant_types=data["grant_types"],
                revoked=False,
                organization_id=organization.id,
                allowed_scopes=data["allowed_scopes"],
                client_type=data["client_type"],
                user_access_scope=data["user_access_scope"],
                user_access_rules=data.get("user_access_rules"),
                description=data["description"],
                website=data.get("website"),
                logo_url=None,
            )
            db.add(client)
            await db.flush()
            existing.add(data["name"])
            result.created["oauth_clients"] += 1
            logger.info("Created OAuth client: %s (ID: %s)", client.name, client.id)


class OAuthSeeder(ClientOwnerMixin, Seeder):
    """OAuth 스코프 및 클라이언트 시더 (OAuth scopes and sample clients)."""

    name = "oauth"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        logger.info("Seeding OAuth 2.0/OIDC setup...")

        await self.seed_scopes(db, result)
        user, organization = await self.ensure_owner(db, OAUTH_OWNER)
        await self.register_clients(db, OAUTH_CLIENTS, user, organization, result)

        logger.info("OAuth seeding completed successfully!")
        return result

    async def seed_scopes(self, db: AsyncSession, result: SeedResult) -> None:
        """스코프를 식별자 기준으로 upsert합니다 (Upsert scopes by identifier)."""
        for scope in OAUTH_SCOPES:
            _, created = await scope_repository.update_or_create(
                db,
                {"identifier": scope["identifier"]},
                {
                    "name": scope["name"],
                    "description": scope["description"],
                    "is_default": scope.get("is_default", False),
                },
            )
            result.created["oauth_scopes"] += int(created)
            result.skipped["oauth_scopes"] += int(not created)
        logger.info("OAuth scopes seeded successfully.")
