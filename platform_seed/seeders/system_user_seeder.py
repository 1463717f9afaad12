"""사용자 시더 — 서비스, 데모, 가짜, 조직 사용자.

User seeder. Creates the service accounts, the demo accounts, batches of
Faker-generated staff, and the named organization users; then backfills
missing usernames and grants the basic chat permissions to every user.

Faker is seeded from ``settings.SEED_FAKER_SEED`` so reruns produce the same
emails and find the users created the first time instead of adding more.
"""

import logging
import re

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.permissions import BASIC_CHAT_PERMISSIONS
from platform_seed.data.users import DEMO_USERS, ORGANIZATION_USERS, SERVICE_USERS
from platform_seed.models.user import User
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.repositories.user_repository import user_repository
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.password import hash_password

logger = logging.getLogger(__name__)

# 사용자명에 허용되지 않는 문자 — Characters stripped from generated usernames
_USERNAME_INVALID = re.compile(r"[^a-z0-9._-]")


def base_username(user: User) -> str:
    """이메일 로컬 파트(없으면 이름)에서 기본 사용자명을 만듭니다.

    Derive a username from the email local part, else the dotted name, else
    ``user<id>``; lowercased and limited to letters, digits, ``.``, ``_`` and ``-``.
    """
    if user.email:
        candidate = user.email.split("@")[0].lower()
    elif user.name:
        candidate = user.name.replace(" ", ".").lower()
    else:
        candidate = f"user{user.id}"
    return _USERNAME_INVALID.sub("", candidate)


class SystemUserSeeder(Seeder):
    """시스템/서비스/데모/조직 사용자 시더 (System, service, demo and organization users)."""

    name = "users"

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        await self.ensure_system_user(db, context)

        # 공용 비밀번호 해시는 한 번만 계산 — bcrypt is slow, hash the shared password once
        shared_hash: str = hash_password(settings.SEED_DEFAULT_PASSWORD)

        for data in SERVICE_USERS:
            _, created = await self.ensure_user(
                db, data["email"], data["name"], password_hash=shared_hash,
                username=data["username"], created_by=context.actor_id, updated_by=context.actor_id,
            )
            self._count(result, created)

        for data in DEMO_USERS:
            user, created = await self.ensure_user(
                db, data["email"], data["name"], password_hash=shared_hash,
                username=data["username"], created_by=context.actor_id, updated_by=context.actor_id,
            )
            context.user_ids[data["key"]] = user.id
            self._count(result, created)

        await self._seed_fake_users(db, context, result, shared_hash)

        # 조직 사용자 — 테스트 사용자가 생성한 것으로 기록 (Audited as created by the test user)
        test_user_id = context.user_ids["test"]
        for data in ORGANIZATION_USERS:
            _, created = await self.ensure_user(
                db, data["email"], data["name"], password_hash=shared_hash,
                username=data["username"], created_by=test_user_id, updated_by=test_user_id,
            )
            self._count(result, created)

        result.created["usernames"] += await self.ensure_usernames(db)
        result.created["user_permissions"] += await self.grant_basic_chat_permissions(db)
        return result

    def _count(self, result: SeedResult, created: bool) -> None:
        if created:
            result.created["users"] += 1
        else:
            result.skipped["users"] += 1

    async def _seed_fake_users(
        self, db: AsyncSession, context: SeedContext, result: SeedResult, shared_hash: str
    ) -> None:
        """설정된 배치 크기만큼 Faker 사용자를 생성합니다 (Faker-generated staff users)."""
        Faker.seed(settings.SEED_FAKER_SEED)
        fake = Faker()
        for batch_size in settings.SEED_FAKE_USER_BATCHES:
            for _ in range(batch_size):
                _, created = await self.ensure_user(
                    db, fake.unique.safe_email(), fake.name(), password_hash=shared_hash,
                    created_by=context.actor_id, updated_by=context.actor_id,
                )
                self._count(result, created)

    async def ensure_usernames(self, db: AsyncSession) -> int:
        """사용자명이 없는 사용자에게 고유한 사용자명을 부여합니다.

        Give every user without a username a unique one. Collisions get a
        ``.1``, ``.2``, ... suffix.

        Returns:
            int: 사용자명이 생성된 사용자 수 (Number of users updated)
        """
        logger.info("Ensuring all users have usernames...")
        users: list[User] = await user_repository.get_without_username(db)
        for user in users:
            base: str = base_username(user)
            username: str = base
            counter: int = 1
            while await user_repository.username_taken(db, username, user.id):
                username = f"{base}.{counter}"
                counter += 1
            user.username = username
            await db.flush()
            logger.info("Generated username '%s' for user: %s (%s)", username, user.name, user.email)
        logger.info("Processed %d users for username generation.", len(users))
        return len(users)

    async def grant_basic_chat_permissions(self, db: AsyncSession) -> int:
        """모든 사용자에게 기본 채팅 권한을 직접 부여합니다.

        Grant the basic chat permissions directly (no team) to every user.

        Returns:
            int: 새로 부여된 건수 (Number of grants added)
        """
        logger.info("Assigning basic chat permissions to all users...")
        users: list[User] = await user_repository.get_all_ordered(db)
        permissions = await permission_repository.get_by_names(db, BASIC_CHAT_PERMISSIONS, settings.GUARD_NAME)
        added: int = await permission_repository.give_user_permissions(
            db, [user.id for user in users], [permission.id for permission in permissions]
        )
        logger.info("Assigned basic chat permissions to %d users.", len(users))
        return added
