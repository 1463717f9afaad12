"""조직 시더 테스트.

Organization seeder tests — tree levels and paths, units, position levels,
positions, memberships and the industry sample organizations, including
lookups by code when a seeder runs on its own.
"""

import pytest
from sqlalchemy import func, select

from platform_seed.data.organizations import (
    ORGANIZATION_MEMBERSHIPS,
    ORGANIZATION_POSITIONS,
    ORGANIZATION_UNITS,
    ORGANIZATIONS,
    POSITION_LEVELS,
)
from platform_seed.data.users import TEST_USER_EMAIL
from platform_seed.data.variants import VARIANT_ORGANIZATIONS, VARIANT_ROLE_ASSIGNMENTS
from platform_seed.models.organization import (
    Organization,
    OrganizationMembership,
    OrganizationPosition,
    OrganizationPositionLevel,
    OrganizationUnit,
)
from platform_seed.models.permission import ROLE_TYPE_STANDARD, Role, UserRole
from platform_seed.models.user import User
from platform_seed.seeders import (
    OrganizationMembershipSeeder,
    OrganizationPositionSeeder,
    OrganizationSeeder,
    OrganizationUnitSeeder,
    OrganizationVariantSeeder,
    PositionLevelSeeder,
    SeedContext,
    SystemUserSeeder,
)
from platform_seed.utils.exceptions import PrerequisiteMissingError
from platform_seed.utils.password import verify_password


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar()


async def _org(db, code: str) -> Organization:
    return (await db.execute(select(Organization).where(Organization.organization_code == code))).scalar_one()


async def _seed_structure(db, context) -> None:
    """조직 → 단위 → 직급 → 직위 순서로 시드."""
    await OrganizationSeeder().run(db, context)
    await OrganizationUnitSeeder().run(db, context)
    await PositionLevelSeeder().run(db, context)
    await OrganizationPositionSeeder().run(db, context)


class TestOrganizationSeeder:
    """조직 트리 시드 테스트."""

    async def test_creates_all_organizations(self, db, context, acting_user):
        """모든 샘플 조직 생성."""
        result = await OrganizationSeeder().run(db, context)

        assert result.created["organizations"] == len(ORGANIZATIONS)
        assert await _count(db, Organization) == len(ORGANIZATIONS)
        assert set(context.organization_ids) == {org["key"] for org in ORGANIZATIONS}

    async def test_root_level_and_path(self, db, context, acting_user):
        """루트 조직은 level 0, path = 자신의 id."""
        await OrganizationSeeder().run(db, context)
        root = await _org(db, "HC001")
        assert root.parent_organization_id is None
        assert root.level == 0
        assert root.path == str(root.id)

    async def test_child_level_and_path(self, db, context, acting_user):
        """하위 조직은 상위 level + 1, path = 상위 path/id."""
        await OrganizationSeeder().run(db, context)
        root = await _org(db, "HC001")
        for data in ORGANIZATIONS:
            if data["parent"] is None:
                continue
            organization = await _org(db, data["organization_code"])
            parent = (await db.execute(
                select(Organization).where(Organization.id == organization.parent_organization_id)
            )).scalar_one()
            assert organization.level == parent.level + 1
            assert organization.path == f"{parent.path}/{organization.id}"
            assert organization.path.startswith(str(root.id))

    async def test_columns_and_author(self, db, context, acting_user):
        """컬럼 값과 created_by 기록."""
        await OrganizationSeeder().run(db, context)
        root = await _org(db, "HC001")
        assert root.name == "TechCorp Holdings"
        assert root.organization_type == "holding_company"
        assert root.governance_structure["board_size"] == 7
        assert root.created_by == acting_user.id

    async def test_rerun_is_idempotent(self, db, context, acting_user):
        """재실행 시 중복 없음."""
        await OrganizationSeeder().run(db, context)
        result = await OrganizationSeeder().run(db, SeedContext())

        assert result.created["organizations"] == 0
        assert result.skipped["organizations"] == len(ORGANIZATIONS)
        assert await _count(db, Organization) == len(ORGANIZATIONS)

    async def test_requires_a_user(self, db, context):
        """사용자가 없으면 PrerequisiteMissingError."""
        with pytest.raises(PrerequisiteMissingError):
            await OrganizationSeeder().run(db, context)


class TestOrganizationUnitSeeder:
    """조직 단위 시드 테스트."""

    async def test_creates_units_with_parents(self, db, context, acting_user):
        """단위 생성 및 상위 단위 연결."""
        await OrganizationSeeder().run(db, context)
        result = await OrganizationUnitSeeder().run(db, context)

        assert result.created["organization_units"] == len(ORGANIZATION_UNITS)
        for data in ORGANIZATION_UNITS:
            if data["parent_unit"] is None:
                continue
            unit = (await db.execute(
                select(OrganizationUnit).where(OrganizationUnit.id == context.unit_ids[data["key"]])
            )).scalar_one()
            assert unit.parent_unit_id == context.unit_ids[data["parent_unit"]]

    async def test_looks_up_organizations_by_code(self, db, context, acting_user):
        """컨텍스트가 비어 있으면 조직 코드로 조회."""
        await OrganizationSeeder().run(db, context)
        fresh = SeedContext()
        result = await OrganizationUnitSeeder().run(db, fresh)

        assert result.created["organization_units"] == len(ORGANIZATION_UNITS)
        assert fresh.organization_ids == context.organization_ids

    async def test_missing_organizations(self, db, context, acting_user):
        """조직이 없으면 PrerequisiteMissingError."""
        with pytest.raises(PrerequisiteMissingError, match="organization seeder"):
            await OrganizationUnitSeeder().run(db, context)


class TestPositionSeeders:
    """직급 및 직위 시드 테스트."""

    async def test_position_levels(self, db, context, acting_user):
        """직급 생성, sort_order = hierarchy_level."""
        result = await PositionLevelSeeder().run(db, context)

        assert result.created["position_levels"] == len(POSITION_LEVELS)
        levels = (await db.execute(select(OrganizationPositionLevel))).scalars().all()
        assert all(level.sort_order == level.hierarchy_level for level in levels)

    async def test_positions_reference_unit_and_level(self, db, context, acting_user):
        """직위가 단위, 조직, 직급을 참조."""
        await _seed_structure(db, context)

        assert await _count(db, OrganizationPosition) == len(ORGANIZATION_POSITIONS)
        ceo = (await db.execute(
            select(OrganizationPosition).where(OrganizationPosition.id == context.position_ids["ceo"])
        )).scalar_one()
        unit = (await db.execute(
            select(OrganizationUnit).where(OrganizationUnit.id == ceo.organization_unit_id)
        )).scalar_one()
        assert ceo.organization_id == unit.organization_id
        assert ceo.organization_position_level_id is not None

    async def test_positions_need_levels(self, db, context, acting_user):
        """직급이 없으면 PrerequisiteMissingError."""
        await OrganizationSeeder().run(db, context)
        await OrganizationUnitSeeder().run(db, context)
        with pytest.raises(PrerequisiteMissingError, match="position level"):
            await OrganizationPositionSeeder().run(db, context)

    async def test_rerun_is_idempotent(self, db, context, acting_user):
        """재실행 시 직위 중복 없음."""
        await _seed_structure(db, context)
        result = await OrganizationPositionSeeder().run(db, SeedContext())

        assert result.created["organization_positions"] == 0
        assert await _count(db, OrganizationPosition) == len(ORGANIZATION_POSITIONS)


class TestOrganizationMembershipSeeder:
    """조직 소속 시드 테스트."""

    async def test_creates_memberships(self, db, context):
        """사용자 시드 후 모든 소속 생성."""
        await SystemUserSeeder().run(db, context)
        await _seed_structure(db, context)
        result = await OrganizationMembershipSeeder().run(db, context)

        assert result.created["organization_memberships"] == len(ORGANIZATION_MEMBERSHIPS)
        assert result.created["users"] == 0

    async def test_membership_links(self, db, context):
        """단위, 직위, 기간 연결."""
        await SystemUserSeeder().run(db, context)
        await _seed_structure(db, context)
        await OrganizationMembershipSeeder().run(db, context)

        test_user = (await db.execute(select(User).where(User.email == TEST_USER_EMAIL))).scalar_one()
        membership = (await db.execute(
            select(OrganizationMembership).where(OrganizationMembership.user_id == test_user.id)
        )).scalar_one()
        assert membership.membership_type == "consultant"
        assert membership.organization_unit_id == context.unit_ids["engineering_division"]
        assert membership.organization_position_id is None
        assert membership.end_date is not None

    async def test_runs_alone_with_code_lookup(self, db, context):
        """새 컨텍스트에서도 코드로 조회해 연결."""
        await SystemUserSeeder().run(db, context)
        await _seed_structure(db, context)
        result = await OrganizationMembershipSeeder().run(db, SeedContext())

        assert result.created["organization_memberships"] == len(ORGANIZATION_MEMBERSHIPS)
        john = (await db.execute(select(User).where(User.email == "john.smith@techcorp.com"))).scalar_one()
        membership = (await db.execute(
            select(OrganizationMembership).where(OrganizationMembership.user_id == john.id)
        )).scalar_one()
        assert membership.organization_position_id == context.position_ids["ceo"]

    async def test_rerun_is_idempotent(self, db, context):
        """(사용자, 조직) 단위로 중복 없음."""
        await SystemUserSeeder().run(db, context)
        await _seed_structure(db, context)
        await OrganizationMembershipSeeder().run(db, context)
        result = await OrganizationMembershipSeeder().run(db, context)

        assert result.created["organization_memberships"] == 0
        assert await _count(db, OrganizationMembership) == len(ORGANIZATION_MEMBERSHIPS)

    async def test_requires_test_user(self, db, context, acting_user):
        """테스트 사용자가 없으면 PrerequisiteMissingError."""
        await _seed_structure(db, context)
        with pytest.raises(PrerequisiteMissingError, match="Test user not found"):
            await OrganizationMembershipSeeder().run(db, context)


class TestOrganizationVariantSeeder:
    """업종별 샘플 조직 시드 테스트."""

    async def test_creates_industry_organizations(self, db, context, acting_user):
        """업종별 조직 트리 생성, 하위 조직은 상위 경로를 이어받음."""
        result = await OrganizationVariantSeeder().run(db, context)

        assert result.created["organizations"] == len(VARIANT_ORGANIZATIONS)
        holding = await _org(db, "VFIN001")
        bank = await _org(db, "VFIN002")
        assert holding.level == 0
        assert bank.level == 1
        assert bank.parent_organization_id == holding.id
        assert bank.path == f"{holding.path}/{bank.id}"
        assert bank.created_by == acting_user.id

    async def test_creates_team_roles(self, db, context, acting_user):
        """역할은 해당 조직의 팀 역할, 표준 유형에 조직 범위."""
        await OrganizationVariantSeeder().run(db, context)

        university = await _org(db, "VEDU001")
        roles = (await db.execute(select(Role).where(Role.team_id == university.id))).scalars().all()
        assert {role.name for role in roles} == {"University President", "Dean", "Professor", "Student"}
        for role in roles:
            assert role.is_global is False
            assert role.type == ROLE_TYPE_STANDARD
            assert role.scope_type == "organization"
            assert role.scope_id == university.id

    async def test_assigns_sample_users(self, db, context, acting_user):
        """역할마다 샘플 사용자 한 명, 기본 비밀번호."""
        result = await OrganizationVariantSeeder().run(db, context)

        assert result.created["users"] == len(VARIANT_ROLE_ASSIGNMENTS)
        assert result.created["user_roles"] == len(VARIANT_ROLE_ASSIGNMENTS)
        dean = (await db.execute(select(User).where(User.email == "dr.dean@metrostate.edu"))).scalar_one()
        assert dean.username == "dr.dean"
        assert verify_password("password", dean.password_hash)
        role_name = (await db.execute(
            select(Role.name).join(UserRole, UserRole.role_id == Role.id).where(UserRole.user_id == dean.id)
        )).scalar_one()
        assert role_name == "Dean"

    async def test_rerun_is_idempotent(self, db, context, acting_user):
        """재실행 시 조직/역할/사용자/배정 중복 없음."""
        await OrganizationVariantSeeder().run(db, context)
        result = await OrganizationVariantSeeder().run(db, context)

        assert result.created["organizations"] == 0
        assert result.created["roles"] == 0
        assert result.created["users"] == 0
        assert result.created["user_roles"] == 0
        assert await _count(db, UserRole) == len(VARIANT_ROLE_ASSIGNMENTS)

    async def test_requires_a_user(self, db, context):
        """사용자가 없으면 PrerequisiteMissingError."""
        with pytest.raises(PrerequisiteMissingError):
            await OrganizationVariantSeeder().run(db, context)
