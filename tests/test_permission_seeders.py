"""권한 시더 테스트.

Permission seeder tests — core permissions and roles, team copies for the
DEFAULT organization, chat permissions, industry permissions and the scoped
permission seeder with its organization role templates.
"""

import pytest
from sqlalchemy import func, select

from platform_seed.config import settings
from platform_seed.data.chat import CHAT_PERMISSIONS, CHAT_ROLES, CONVERSATION_ROLES
from platform_seed.data.industry import INDUSTRY_PERMISSIONS, INDUSTRY_ROLE_PERMISSIONS
from platform_seed.data.permissions import CORE_PERMISSIONS, CORE_ROLES
from platform_seed.data.scoped import (
    CONVERSATION_PERMISSIONS,
    GLOBAL_PERMISSIONS,
    GLOBAL_ROLES,
    ORGANIZATION_PERMISSIONS,
    ORGANIZATION_ROLE_TEMPLATES,
    PROJECT_PERMISSIONS,
)
from platform_seed.data.variants import VARIANT_ROLE_ASSIGNMENTS
from platform_seed.models.organization import Organization
from platform_seed.models.permission import ROLE_TYPE_STANDARD, ROLE_TYPE_SYSTEM, Permission, Role, UserRole
from platform_seed.models.user import User
from platform_seed.repositories.permission_repository import permission_repository
from platform_seed.seeders import (
    ChatPermissionSeeder,
    IndustryPermissionSeeder,
    OrganizationVariantSeeder,
    PermissionSeeder,
    ScopedPermissionSeeder,
    SeedContext,
)
from platform_seed.seeders.scoped_permission_seeder import role_for_position
from platform_seed.utils.exceptions import PrerequisiteMissingError
from platform_seed.utils.password import hash_password


async def _count(db, model, *where) -> int:
    result = await db.execute(select(func.count()).select_from(model).where(*where))
    return result.scalar()


async def _global_role(db, name: str) -> Role:
    result = await db.execute(select(Role).where(Role.name == name, Role.team_id.is_(None)))
    return result.scalar_one()


class TestPermissionSeeder:
    """핵심 권한 시더 테스트."""

    async def test_creates_system_user_and_permissions(self, db, context):
        """시스템 계정과 핵심 권한 생성."""
        result = await PermissionSeeder().run(db, context)

        system_user = (await db.execute(select(User).where(User.email == "system@system.local"))).scalar_one()
        assert context.actor_id == system_user.id
        assert system_user.username == "system"
        assert result.created["permissions"] == len(CORE_PERMISSIONS)
        assert await _count(db, Permission) == len(CORE_PERMISSIONS)

    async def test_permissions_stamped_with_system_user(self, db, context):
        """권한의 created_by는 시스템 계정."""
        await PermissionSeeder().run(db, context)
        permission = (await db.execute(select(Permission).limit(1))).scalar_one()
        assert permission.created_by == context.actor_id
        assert permission.guard_name == settings.GUARD_NAME

    async def test_roles_hold_exactly_listed_permissions(self, db, context):
        """역할의 권한이 정의와 정확히 일치."""
        await PermissionSeeder().run(db, context)
        for role_name, role_data in CORE_ROLES.items():
            role = await _global_role(db, role_name)
            names = await permission_repository.get_role_permission_names(db, role.id)
            assert names == set(role_data["permissions"]) & set(CORE_PERMISSIONS)

    async def test_sync_removes_stale_permissions(self, db, context):
        """재실행 시 정의에 없는 권한은 역할에서 제거."""
        await PermissionSeeder().run(db, context)
        role_name = next(iter(CORE_ROLES))
        role = await _global_role(db, role_name)
        extra = Permission(name="legacy:permission", guard_name=settings.GUARD_NAME)
        db.add(extra)
        await db.flush()
        await permission_repository.attach_role_permissions(db, role.id, [extra.id])

        await PermissionSeeder().run(db, SeedContext())
        names = await permission_repository.get_role_permission_names(db, role.id)
        assert "legacy:permission" not in names

    async def test_rerun_is_idempotent(self, db, context):
        """재실행 시 중복 생성 없음."""
        await PermissionSeeder().run(db, context)
        result = await PermissionSeeder().run(db, SeedContext())

        assert result.created["permissions"] == 0
        assert result.created["roles"] == 0
        assert result.skipped["roles"] == len(CORE_ROLES)
        assert await _count(db, Permission) == len(CORE_PERMISSIONS)
        assert await _count(db, Role) == len(CORE_ROLES)
        assert await _count(db, User) == 1

    async def test_team_roles_for_default_organization(self, db, context, default_org):
        """DEFAULT 조직이 있으면 팀 역할도 생성."""
        result = await PermissionSeeder().run(db, context)

        assert result.created["roles"] == 2 * len(CORE_ROLES)
        assert await _count(db, Role, Role.team_id == default_org.id) == len(CORE_ROLES)
        team_role = (await db.execute(
            select(Role).where(Role.team_id == default_org.id).limit(1)
        )).scalar_one()
        assert team_role.is_global is False

    async def test_no_team_roles_when_teams_disabled(self, db, context, default_org, monkeypatch):
        """PERMISSION_TEAMS=False면 팀 역할 없음."""
        monkeypatch.setattr(settings, "PERMISSION_TEAMS", False)
        await PermissionSeeder().run(db, context)
        assert await _count(db, Role, Role.team_id.is_not(None)) == 0

    async def test_no_team_roles_without_default_organization(self, db, context):
        """DEFAULT 조직이 없으면 전역 역할만 생성."""
        await PermissionSeeder().run(db, context)
        assert await _count(db, Role) == len(CORE_ROLES)

    async def test_result_summary(self, db, context):
        """결과 요약 문자열."""
        result = await PermissionSeeder().run(db, context)
        summary = result.summary()
        assert summary.startswith("permissions: created")
        assert f"permissions={len(CORE_PERMISSIONS)}" in summary


class TestChatPermissionSeeder:
    """채팅 권한 시더 테스트."""

    async def test_creates_chat_permissions_and_roles(self, db, context, acting_user):
        """채팅 권한, 채팅 역할, 대화방 역할 생성."""
        result = await ChatPermissionSeeder().run(db, context)

        assert result.created["permissions"] == len(CHAT_PERMISSIONS)
        assert result.created["roles"] == len(CHAT_ROLES) + len(CONVERSATION_ROLES)
        for role_name in CHAT_ROLES:
            role = await _global_role(db, role_name)
            assert role.created_by == acting_user.id

    async def test_attach_keeps_manual_grants(self, db, context, acting_user):
        """재실행 시 수동으로 추가한 권한은 유지."""
        await ChatPermissionSeeder().run(db, context)
        role = await _global_role(db, next(iter(CHAT_ROLES)))
        manual = Permission(name="chat.custom.manual", guard_name=settings.GUARD_NAME)
        db.add(manual)
        await db.flush()
        await permission_repository.attach_role_permissions(db, role.id, [manual.id])

        result = await ChatPermissionSeeder().run(db, context)
        names = await permission_repository.get_role_permission_names(db, role.id)
        assert "chat.custom.manual" in names
        assert result.created["role_permissions"] == 0

    async def test_requires_a_user(self, db, context):
        """사용자가 없으면 PrerequisiteMissingError."""
        with pytest.raises(PrerequisiteMissingError, match="No users found"):
            await ChatPermissionSeeder().run(db, context)


class TestIndustryPermissionSeeder:
    """업종별 권한 시더 테스트."""

    async def test_creates_industry_permissions(self, db, context):
        """업종 권한 생성, 역할은 생성하지 않음."""
        result = await IndustryPermissionSeeder().run(db, context)

        assert result.created["permissions"] == len(INDUSTRY_PERMISSIONS)
        assert await _count(db, Role) == 0
        assert result.created["synced_roles"] == 0

    async def test_syncs_existing_role(self, db, context):
        """이름이 같은 기존 역할의 권한을 동기화."""
        role = Role(name="Banking Manager", guard_name=settings.GUARD_NAME)
        db.add(role)
        await db.flush()

        result = await IndustryPermissionSeeder().run(db, context)

        assert result.created["synced_roles"] == 1
        names = await permission_repository.get_role_permission_names(db, role.id)
        assert names == set(INDUSTRY_ROLE_PERMISSIONS["Banking Manager"]) & set(INDUSTRY_PERMISSIONS)

    async def test_syncs_industry_sample_roles(self, db, context, acting_user):
        """업종별 샘플 조직의 팀 역할 권한을 모두 동기화."""
        await OrganizationVariantSeeder().run(db, context)

        result = await IndustryPermissionSeeder().run(db, context)

        assert result.created["synced_roles"] == len(VARIANT_ROLE_ASSIGNMENTS)
        plant_manager = (await db.execute(select(Role).where(Role.name == "Plant Manager"))).scalar_one()
        names = await permission_repository.get_role_permission_names(db, plant_manager.id)
        assert names == set(INDUSTRY_ROLE_PERMISSIONS["Plant Manager"])


class TestScopedPermissionSeeder:
    """범위 권한 시더 테스트."""

    async def _seed_users(self, db, count: int) -> list[User]:
        password_hash = hash_password("password")
        users = [
            User(name=f"Member {index}", email=f"member{index}@example.com", password_hash=password_hash)
            for index in range(count)
        ]
        for user in users:
            db.add(user)
            await db.flush()
        return users

    async def _seed_organizations(self, db, count: int) -> list[Organization]:
        organizations = [
            Organization(organization_code=f"ORG{index}", name=f"Org {index}", organization_type="subsidiary")
            for index in range(count)
        ]
        for organization in organizations:
            db.add(organization)
            await db.flush()
        return organizations

    async def test_global_and_scoped_permissions(self, db, context, acting_user):
        """전역 권한은 is_global=True, 범위 권한은 False."""
        await ScopedPermissionSeeder().run(db, context)

        assert await _count(db, Permission, Permission.is_global.is_(True)) == len(GLOBAL_PERMISSIONS)
        scoped_total = len(ORGANIZATION_PERMISSIONS) + len(PROJECT_PERMISSIONS) + len(CONVERSATION_PERMISSIONS)
        assert await _count(db, Permission, Permission.is_global.is_(False)) == scoped_total
        for role_name in GLOBAL_ROLES:
            role = await _global_role(db, role_name)
            assert role.is_global is True

    async def test_skips_templates_without_organizations(self, db, context, acting_user):
        """조직이 없으면 팀 역할을 만들지 않음."""
        result = await ScopedPermissionSeeder().run(db, context)
        assert await _count(db, Role, Role.team_id.is_not(None)) == 0
        assert result.created["user_roles"] == 0

    async def test_role_templates_per_organization(self, db, context, acting_user, monkeypatch):
        """앞의 조직마다 역할 템플릿 생성."""
        monkeypatch.setattr(settings, "SEED_SCOPED_ORG_LIMIT", 2)
        organizations = await self._seed_organizations(db, 3)

        await ScopedPermissionSeeder().run(db, context)

        for organization in organizations[:2]:
            assert await _count(db, Role, Role.team_id == organization.id) == len(ORGANIZATION_ROLE_TEMPLATES)
        assert await _count(db, Role, Role.team_id == organizations[2].id) == 0

    async def test_role_types_and_scope(self, db, context, acting_user, monkeypatch):
        """전역 역할은 시스템 유형, 조직 역할은 표준 유형에 조직 범위."""
        monkeypatch.setattr(settings, "SEED_SCOPED_ORG_LIMIT", 1)
        organization = (await self._seed_organizations(db, 1))[0]

        await ScopedPermissionSeeder().run(db, context)

        for role_name in GLOBAL_ROLES:
            role = await _global_role(db, role_name)
            assert role.type == ROLE_TYPE_SYSTEM
            assert role.scope_type is None
            assert role.scope_id is None
        team_roles = (await db.execute(select(Role).where(Role.team_id == organization.id))).scalars().all()
        assert len(team_roles) == len(ORGANIZATION_ROLE_TEMPLATES)
        for role in team_roles:
            assert role.type == ROLE_TYPE_STANDARD
            assert role.scope_type == "organization"
            assert role.scope_id == organization.id

    async def test_assigns_admin_manager_members(self, db, context, acting_user, monkeypatch):
        """첫 사용자 admin, 두 번째 manager, 나머지 member."""
        monkeypatch.setattr(settings, "SEED_SCOPED_ORG_LIMIT", 1)
        monkeypatch.setattr(settings, "SEED_SCOPED_MEMBER_LIMIT", 4)
        organization = (await self._seed_organizations(db, 1))[0]
        await self._seed_users(db, 4)

        result = await ScopedPermissionSeeder().run(db, context)

        assert result.created["user_roles"] == 4
        rows = (await db.execute(
            select(Role.name, func.count(UserRole.id))
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.team_id == organization.id)
            .group_by(Role.name)
        )).all()
        assert dict(rows) == {"organization_admin": 1, "organization_manager": 1, "organization_member": 2}

    async def test_excludes_system_accounts(self, db, context, monkeypatch):
        """@system.local 계정에는 조직 역할을 배정하지 않음."""
        monkeypatch.setattr(settings, "SEED_SCOPED_ORG_LIMIT", 1)
        await PermissionSeeder().run(db, context)
        await self._seed_organizations(db, 1)

        result = await ScopedPermissionSeeder().run(db, context)
        assert result.created["user_roles"] == 0

    async def test_rerun_does_not_duplicate(self, db, context, acting_user, monkeypatch):
        """재실행 시 역할/배정 중복 없음."""
        monkeypatch.setattr(settings, "SEED_SCOPED_ORG_LIMIT", 1)
        await self._seed_organizations(db, 1)
        await ScopedPermissionSeeder().run(db, context)
        roles_before = await _count(db, Role)
        assignments_before = await _count(db, UserRole)

        result = await ScopedPermissionSeeder().run(db, context)

        assert result.created["permissions"] == 0
        assert result.created["user_roles"] == 0
        assert await _count(db, Role) == roles_before
        assert await _count(db, UserRole) == assignments_before

    def test_role_for_position(self):
        """배정 순서별 역할 이름."""
        assert role_for_position(0) == "organization_admin"
        assert role_for_position(1) == "organization_manager"
        assert role_for_position(2) == "organization_member"
        assert role_for_position(10) == "organization_member"
