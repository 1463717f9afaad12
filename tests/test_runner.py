"""시더 실행기 및 CLI 테스트.

Runner tests — seeder selection, per-seeder transactions, SeederError
handling with context rollback, a full run of every seeder, and the CLI
argument parsing and exit codes.
"""

from pathlib import Path

import pytest
from sqlalchemy import func, select

from platform_seed import seed as seed_cli
from platform_seed.config import settings
from platform_seed.data.industry import INDUSTRY_ROLE_PERMISSIONS
from platform_seed.data.variants import VARIANT_ROLE_ASSIGNMENTS
from platform_seed.models.organization import Organization
from platform_seed.models.permission import Permission, Role
from platform_seed.models.user import User
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.runner import default_seeders, run_seeders, select_seeders
from platform_seed.seeders import SeedContext, Seeder, SeedResult
from platform_seed.utils.exceptions import SeederError, UnknownSeederError

EXPECTED_ORDER = [
    "permissions",
    "users",
    "chat_permissions",
    "organizations",
    "organization_units",
    "position_levels",
    "organization_positions",
    "organization_memberships",
    "organization_variants",
    "industry_permissions",
    "scoped_permissions",
    "oauth",
    "personal_access_tokens",
    "regions",
]


class FailingSeeder(Seeder):
    """행을 추가하고 컨텍스트를 바꾼 뒤 SeederError를 던지는 시더."""

    name = "failing"

    async def run(self, db, context):
        org = Organization(organization_code="ROLLBACK", name="Rolled back", organization_type="branch")
        db.add(org)
        await db.flush()
        context.organization_ids["rollback"] = org.id
        raise SeederError("Something is missing")


class BrokenSeeder(Seeder):
    """예상치 못한 예외를 던지는 시더."""

    name = "broken"

    async def run(self, db, context):
        raise RuntimeError("boom")


class CountingSeeder(Seeder):
    """사용자를 한 명 만드는 시더."""

    def __init__(self, name: str) -> None:
        self.name = name

    async def run(self, db, context):
        result = self.new_result()
        await self.ensure_user(db, f"{self.name}@example.com", self.name)
        result.created["users"] += 1
        return result


async def _count(session_factory, model) -> int:
    async with session_factory() as db:
        return (await db.execute(select(func.count()).select_from(model))).scalar()


class TestSelectSeeders:
    """시더 선택 테스트."""

    def test_default_order(self):
        """기본 실행 순서."""
        assert [seeder.name for seeder in default_seeders()] == EXPECTED_ORDER

    def test_select_keeps_run_order(self):
        """이름 순서와 무관하게 실행 순서 유지."""
        selected = select_seeders(default_seeders(), ["regions", "permissions"])
        assert [seeder.name for seeder in selected] == ["permissions", "regions"]

    def test_select_all_when_empty(self):
        """only가 없으면 전체."""
        assert len(select_seeders(default_seeders(), None)) == len(EXPECTED_ORDER)

    def test_unknown_name_raises(self):
        """없는 이름은 UnknownSeederError."""
        with pytest.raises(UnknownSeederError) as exc_info:
            select_seeders(default_seeders(), ["permissions", "nope"])
        assert exc_info.value.name == "nope"
        assert exc_info.value.detail == "Unknown seeder: nope"

    def test_csv_dir_passed_to_region_seeder(self, tmp_path):
        """csv_dir가 지역 시더에 전달됨."""
        regions = default_seeders(csv_dir=tmp_path)[-1]
        assert regions.csv_dir == tmp_path


class TestRunSeeders:
    """시더 실행 테스트."""

    async def test_commits_each_seeder(self, session_factory):
        """시더마다 커밋되어 다른 세션에서 보임."""
        results = await run_seeders(session_factory, [CountingSeeder("first"), CountingSeeder("second")])

        assert [result.seeder for result in results] == ["first", "second"]
        assert await _count(session_factory, User) == 2

    async def test_seeder_error_rolls_back_and_continues(self, session_factory):
        """SeederError 시 롤백, 오류 기록 후 다음 시더 실행."""
        results = await run_seeders(
            session_factory, [CountingSeeder("before"), FailingSeeder(), CountingSeeder("after")]
        )

        assert [result.error for result in results] == [None, "Something is missing", None]
        assert results[1].summary() == "failing: failed (Something is missing)"
        assert await _count(session_factory, Organization) == 0
        assert await _count(session_factory, User) == 2

    async def test_seeder_error_restores_context(self, session_factory):
        """실패한 시더가 바꾼 컨텍스트는 복원."""
        context = SeedContext()
        await run_seeders(session_factory, [FailingSeeder()], context=context)
        assert "rollback" not in context.organization_ids

    async def test_unexpected_error_propagates(self, session_factory):
        """그 외 예외는 롤백 후 전파."""
        with pytest.raises(RuntimeError, match="boom"):
            await run_seeders(session_factory, [CountingSeeder("kept"), BrokenSeeder(), CountingSeeder("never")])
        assert await _count(session_factory, User) == 1

    async def test_only_filters_seeders(self, session_factory):
        """only로 지정한 시더만 실행."""
        results = await run_seeders(session_factory, default_seeders(), only=["permissions"])

        assert [result.seeder for result in results] == ["permissions"]
        assert await _count(session_factory, Permission) > 0
        assert await _count(session_factory, User) == 1

    async def test_prerequisite_error_is_reported(self, session_factory):
        """사용자 없이 지역 시더만 실행하면 오류 결과."""
        results = await run_seeders(session_factory, default_seeders(), only=["regions"])
        assert results[0].error == "No users found. Please run user seeders first."

    async def test_full_run(self, session_factory):
        """전체 시더가 오류 없이 실행되고 재실행도 성공."""
        results = await run_seeders(session_factory, default_seeders())

        assert [result.seeder for result in results] == EXPECTED_ORDER
        assert all(result.error is None for result in results)
        users_after_first = await _count(session_factory, User)

        rerun = await run_seeders(session_factory, default_seeders())
        assert all(result.error is None for result in rerun)
        assert await _count(session_factory, User) == users_after_first

    async def test_full_run_syncs_industry_roles(self, session_factory):
        """전체 실행 시 업종별 샘플 역할이 먼저 생성되어 권한이 동기화됨."""
        results = await run_seeders(session_factory, default_seeders())

        industry = next(result for result in results if result.seeder == "industry_permissions")
        assert industry.created["synced_roles"] >= len(VARIANT_ROLE_ASSIGNMENTS)
        async with session_factory() as db:
            dean = (await db.execute(select(Role).where(Role.name == "Dean"))).scalar_one()
            names = await permission_repository.get_role_permission_names(db, dean.id)
        assert names == set(INDUSTRY_ROLE_PERMISSIONS["Dean"])


class TestSeedCli:
    """CLI 테스트."""

    def test_parse_defaults(self):
        """기본 인자."""
        args = seed_cli.parse_args([])
        assert args.database_url == settings.DATABASE_URL
        assert args.only is None
        assert args.csv_dir is None
        assert args.create_tables is False

    def test_parse_options(self):
        """옵션 파싱."""
        args = seed_cli.parse_args([
            "--only", "permissions", "users",
            "--csv-dir", "data/csv",
            "--create-tables",
            "--database-url", "sqlite+aiosqlite:///seed.db",
        ])
        assert args.only == ["permissions", "users"]
        assert args.csv_dir == Path("data/csv")
        assert args.create_tables is True
        assert args.database_url == "sqlite+aiosqlite:///seed.db"

    def test_main_exit_codes(self, tmp_path):
        """성공 0, 시더 실패 1, 알 수 없는 시더 2."""
        database_url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"

        assert seed_cli.main(["--database-url", database_url, "--create-tables", "--only", "permissions"]) == 0
        assert seed_cli.main(["--database-url", database_url, "--only", "nope"]) == 2

        empty_url = f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"
        assert seed_cli.main(["--database-url", empty_url, "--create-tables", "--only", "regions"]) == 1

    def test_result_summary_lists_counts(self):
        """결과 요약에 생성 건수와 건너뜀 건수."""
        result = SeedResult(seeder="oauth")
        result.created["oauth_clients"] = 8
        result.skipped["oauth_scopes"] = 26
        assert result.summary() == "oauth: created oauth_clients=8; skipped 26 existing"
