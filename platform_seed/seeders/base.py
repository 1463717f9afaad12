"""시더 기본 클래스 및 실행 컨텍스트.

Seeder base class and the shared run context.

- SeedContext: 실행 중 시더 간 공유되는 값 (Values shared between seeders during one run:
  the acting user and the key → id maps of the sample organization structure)
- SeedResult: 시더 한 번 실행 결과 (Per-seeder created/skipped counters)
- Seeder: 모든 시더의 부모 클래스 (Parent class of every seeder)

Usage:
    class ScopeSeeder(Seeder):
        name = "oauth_scopes"

        async def run(self, db, context):
            result = self.new_result()
            ...
            return result
"""

import logging
import secrets
from collections import Counter
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.data.organizations import ORGANIZATION_POSITIONS, ORGANIZATION_UNITS, ORGANIZATIONS
from platform_seed.data.users import SYSTEM_USER
from platform_seed.models.mixins import utcnow
from platform_seed.models.user import User
from platform_seed.repositories.organization_repository import (
    organization_repository,
    position_repository,
    unit_repository,
)
from platform_seed.repositories.user_repository import user_repository
from platform_seed.utils.exceptions import PrerequisiteMissingError
from platform_seed.utils.password import hash_password

logger = logging.getLogger(__name__)


@dataclass
class SeedContext:
    """한 번의 실행 동안 시더들이 공유하는 상태.

    State shared across the seeders of one run. The id maps are filled by the
    seeders that create the rows; a seeder run on its own (``--only``) falls
    back to looking the rows up by code.

    Attributes:
        actor_id: created_by/updated_by에 기록할 사용자 ID (User stamped as author)
        user_ids: 데모 사용자 키 → ID (Demo user key → id, e.g. "test")
        organization_ids: 조직 키 → ID (Organization key → id)
        unit_ids: 조직 단위 키 → ID (Unit key → id)
        position_ids: 직위 키 → ID (Position key → id)
    """

    actor_id: UUID | None = None
    user_ids: dict[str, UUID] = field(default_factory=dict)
    organization_ids: dict[str, UUID] = field(default_factory=dict)
    unit_ids: dict[str, UUID] = field(default_factory=dict)
    position_ids: dict[str, UUID] = field(default_factory=dict)


@dataclass
class SeedResult:
    """시더 실행 결과 — 테이블별 생성/건너뜀 건수.

    Outcome of one seeder: rows created and skipped, keyed by what they are
    (e.g. ``created["permissions"]``). ``error`` holds the message of a
    SeederError that stopped the seeder.
    """

    seeder: str
    created: Counter = field(default_factory=Counter)
    skipped: Counter = field(default_factory=Counter)
    error: str | None = None

    def summary(self) -> str:
        """로그용 한 줄 요약 (One-line summary for logging)."""
        if self.error:
            return f"{self.seeder}: failed ({self.error})"
        created = ", ".join(f"{key}={count}" for key, count in sorted(self.created.items())) or "nothing"
        text = f"{self.seeder}: created {created}"
        skipped_total = sum(self.skipped.values())
        if skipped_total:
            text += f"; skipped {skipped_total} existing"
        return text


class Seeder:
    """시더 부모 클래스.

    Base class for seeders. Subclasses set ``name`` and implement ``run``.
    ``run`` receives an open session and must not commit; the runner owns
    the transaction.
    """

    name: str = ""

    def new_result(self) -> SeedResult:
        return SeedResult(seeder=self.name)

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        raise NotImplementedError

    async def resolve_actor(self, db: AsyncSession, context: SeedContext, required: bool = True) -> UUID | None:
        """created_by에 기록할 행위자 사용자 ID를 결정합니다.

        Resolve the acting user id: the context value, else the system user,
        else the oldest user.

        Raises:
            PrerequisiteMissingError: required=True이고 사용자가 하나도 없을 때
                                      (No users exist and an actor is required)
        """
        if context.actor_id is not None:
            return context.actor_id
        actor: User | None = await user_repository.get_acting_user(db)
        if actor is None:
            if required:
                raise PrerequisiteMissingError("No users found. Please run user seeders first.")
            return None
        context.actor_id = actor.id
        return actor.id

    async def ensure_user(
        self,
        db: AsyncSession,
        email: str,
        name: str,
        password: str | None = None,
        password_hash: str | None = None,
        **values,
    ) -> tuple[User, bool]:
        """이메일 기준으로 사용자를 찾거나 생성합니다 (Find or create a verified user by email).

        ``password_hash`` lets callers hash a shared password once per run.
        """
        existing: User | None = await user_repository.get_by_email(db, email)
        if existing is not None:
            return existing, False
        if password_hash is None:
            password_hash = hash_password(password or settings.SEED_DEFAULT_PASSWORD)
        return await user_repository.first_or_create(
            db,
            {"email": email},
            {"name": name, "password_hash": password_hash, "email_verified_at": utcnow(), **values},
        )

    async def ensure_system_user(self, db: AsyncSession, context: SeedContext) -> User:
        """시스템 계정을 보장하고 행위자로 설정합니다.

        Find or create the system account (random, unusable password) and make
        it the acting user for the rest of the run.
        """
        system_user, created = await self.ensure_user(
            db,
            SYSTEM_USER["email"],
            SYSTEM_USER["name"],
            password=f"system-user-password-{secrets.token_hex(16)}",
            username=SYSTEM_USER["username"],
        )
        if created:
            logger.info("Created system user %s", system_user.email)
        context.actor_id = system_user.id
        return system_user

    async def organization_ids(self, db: AsyncSession, context: SeedContext) -> dict[str, UUID]:
        """샘플 조직 키 → ID (컨텍스트에 없으면 코드로 조회).

        Sample organization key → id, looked up by organization_code when the
        context does not hold them yet.
        """
        if len(context.organization_ids) < len(ORGANIZATIONS):
            code_to_key = {org["organization_code"]: org["key"] for org in ORGANIZATIONS}
            found = await organization_repository.get_ids_by_codes(db, list(code_to_key))
            context.organization_ids.update({code_to_key[code]: org_id for code, org_id in found.items()})
        return context.organization_ids

    async def unit_ids(self, db: AsyncSession, context: SeedContext) -> dict[str, UUID]:
        """샘플 조직 단위 키 → ID (Sample unit key → id, looked up by code when missing)."""
        if len(context.unit_ids) < len(ORGANIZATION_UNITS):
            org_ids = await self.organization_ids(db, context)
            for unit in ORGANIZATION_UNITS:
                org_id = org_ids.get(unit["organization"])
                if unit["key"] in context.unit_ids or org_id is None:
                    continue
                found = await unit_repository.get_by_code(db, org_id, unit["unit_code"])
                if found is not None:
                    context.unit_ids[unit["key"]] = found.id
        return context.unit_ids

    async def position_ids(self, db: AsyncSession, context: SeedContext) -> dict[str, UUID]:
        """샘플 직위 키 → ID (Sample position key → id, looked up by code when missing)."""
        if len(context.position_ids) < len(ORGANIZATION_POSITIONS):
            org_ids = await self.organization_ids(db, context)
            unit_orgs = {unit["key"]: unit["organization"] for unit in ORGANIZATION_UNITS}
            for position in ORGANIZATION_POSITIONS:
                org_id = org_ids.get(unit_orgs[position["unit"]])
                if position["key"] in context.position_ids or org_id is None:
                    continue
                found = await position_repository.get_by_code(db, org_id, position["position_code"])
                if found is not None:
                    context.position_ids[position["key"]] = found.id
        return context.position_ids

