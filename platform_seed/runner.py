"""시더 실행기 — 정해진 순서로 시더를 실행합니다.

Seeder runner. Runs seeders in dependency order, each in its own session
and transaction:

- 성공 시 커밋 (Commit when the seeder returns)
- SeederError 시 롤백 후 다음 시더로 진행 (Roll back, log and continue)
- 그 외 예외는 롤백 후 전파 (Roll back and propagate anything else)

Usage:
    results = await run_seeders(session_factory, default_seeders(), only=["regions"])
"""

import copy
import logging
from collections.abc import Sequence
from dataclasses import fields
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from platform_seed.seeders import (
    ChatPermissionSeeder,
    IndustryPermissionSeeder,
    OAuthSeeder,
    OrganizationMembershipSeeder,
    OrganizationPositionSeeder,
    OrganizationSeeder,
    OrganizationUnitSeeder,
    OrganizationVariantSeeder,
    PermissionSeeder,
    PersonalAccessTokenSeeder,
    PositionLevelSeeder,
    RegionSeeder,
    ScopedPermissionSeeder,
    SeedContext,
    Seeder,
    SeedResult,
    SystemUserSeeder,
)
from platform_seed.utils.exceptions import SeederError, UnknownSeederError

logger = logging.getLogger(__name__)


def default_seeders(csv_dir: Path | None = None) -> list[Seeder]:
    """전체 시더 목록, 실행 순서대로 (Every seeder, in run order).

    권한 → 사용자 → 조직 → OAuth → 지역 순. The industry permission seeder
    follows the organization variants, whose team roles it syncs; the scoped
    permission seeder follows every organization seeder, since it hands role
    templates to existing organizations.
    """
    return [
        PermissionSeeder(),
        SystemUserSeeder(),
        ChatPermissionSeeder(),
        OrganizationSeeder(),
        OrganizationUnitSeeder(),
        PositionLevelSeeder(),
        OrganizationPositionSeeder(),
        OrganizationMembershipSeeder(),
        OrganizationVariantSeeder(),
        IndustryPermissionSeeder(),
        ScopedPermissionSeeder(),
        OAuthSeeder(),
        PersonalAccessTokenSeeder(),
        RegionSeeder(csv_dir=csv_dir),
    ]


def select_seeders(seeders: Sequence[Seeder], only: Sequence[str] | None = None) -> list[Seeder]:
    """이름으로 시더를 고릅니다 (실행 순서는 유지).

    Pick seeders by name, keeping run order.

    Raises:
        UnknownSeederError: 없는 이름이 포함된 경우 (An unknown name was given)
    """
    if not only:
        return list(seeders)
    known: set[str] = {seeder.name for seeder in seeders}
    for name in only:
        if name not in known:
            raise UnknownSeederError(name)
    wanted: set[str] = set(only)
    return [seeder for seeder in seeders if seeder.name in wanted]


def _restore(context: SeedContext, snapshot: SeedContext) -> None:
    for field in fields(context):
        setattr(context, field.name, getattr(snapshot, field.name))


async def run_seeders(
    session_factory: async_sessionmaker[AsyncSession],
    seeders: Sequence[Seeder],
    only: Sequence[str] | None = None,
    context: SeedContext | None = None,
) -> list[SeedResult]:
    """시더를 순서대로 실행하고 결과 목록을 반환합니다.

    Run the selected seeders in order, one transaction each.

    Args:
        session_factory: 세션 팩토리 (Session factory)
        seeders: 실행 후보 시더 (Candidate seeders, in run order)
        only: 실행할 시더 이름, None이면 전체 (Names to run, None for all)
        context: 공유 컨텍스트 (Shared context, a fresh one when omitted)

    Returns:
        list[SeedResult]: 시더별 결과 (One result per executed seeder)
    """
    selected: list[Seeder] = select_seeders(seeders, only)
    context = context or SeedContext()
    results: list[SeedResult] = []

    for seeder in selected:
        logger.info("Running seeder: %s", seeder.name)
        # 실패 시 롤백된 행의 ID가 컨텍스트에 남지 않도록 스냅샷
        snapshot: SeedContext = copy.deepcopy(context)
        async with session_factory() as db:
            try:
                result: SeedResult = await seeder.run(db, context)
                await db.commit()
            except SeederError as exc:
                await db.rollback()
                _restore(context, snapshot)
                logger.error("Seeder %s stopped: %s", seeder.name, exc.detail)
                result = SeedResult(seeder=seeder.name, error=exc.detail)
            except Exception:
                await db.rollback()
                logger.exception("Seeder %s failed", seeder.name)
                raise
        logger.info(result.summary())
        results.append(result)
    return results
