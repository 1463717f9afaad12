"""조직 소속 시더 — 샘플 사용자와 조직/단위/직위 연결.

Organization membership seeder. Makes sure the named organization users
exist, then links each to an organization and, where given, a unit and a
position. Memberships are unique per (user, organization).
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.data.organizations import ORGANIZATION_MEMBERSHIPS
from platform_seed.data.users import ORGANIZATION_USERS, TEST_USER_EMAIL
from platform_seed.models.user import User
from platform_seed.repositories.organization_repository import membership_repository
from platform_seed.repositories.user_repository import user_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.exceptions import PrerequisiteMissingError

logger = logging.getLogger(__name__)


class OrganizationMembershipSeeder(Seeder):
    """조직 소속 시더 (Sample organization memberships)."""

    name = "organization_memberships"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        actor_id: UUID | None = await self.resolve_actor(db, context)

        for data in ORGANIZATION_USERS:
            _, created = await self.ensure_user(
                db, data["email"], data["name"], username=data["username"],
                created_by=actor_id, updated_by=actor_id,
            )
            result.created["users"] += int(created)

        users: dict[str, User] = await user_repository.get_by_emails(
            db, [membership["user"] for membership in ORGANIZATION_MEMBERSHIPS]
        )
        if TEST_USER_EMAIL not in users:
            raise PrerequisiteMissingError("Test user not found. Please run the user seeder first.")

        organization_ids = await self.organization_ids(db, context)
        unit_ids = await self.unit_ids(db, context)
        position_ids = await self.position_ids(db, context)

        for data in ORGANIZATION_MEMBERSHIPS:
            organization_id: UUID | None = organization_ids.get(data["organization"])
            if organization_id is None:
                raise PrerequisiteMissingError(
                    "Sample organizations not found. Please run the organization seeder first."
                )
            user: User = users[data["user"]]

            _, created = await membership_repository.first_or_create(
                db,
                {"user_id": user.id, "organization_id": organization_id},
                {
                    "organization_unit_id": unit_ids.get(data["unit"]) if data["unit"] else None,
                    "organization_position_id": position_ids.get(data["position"]) if data["position"] else None,
                    "membership_type": data["membership_type"],
                    "start_date": data["start_date"],
                    "end_date": data["end_date"],
                    "status": "active",
                    "additional_roles": data["additional_roles"],
                    "created_by": actor_id,
                    "updated_by": actor_id,
                },
            )
            if created:
                result.created["organization_memberships"] += 1
                logger.info("Added %s to %s as %s", user.email, data["organization"], data["membership_type"])
            else:
                result.skipped["organization_memberships"] += 1
        return result
