"""Permission 레포지토리 — 권한, 역할, 매핑 쿼리.

Permission Repository — permissions, roles and their pivots.
Mirrors the usual RBAC operations: create permissions by name, find-or-create
roles (globally or per team), sync or attach role permissions, and grant
permissions or roles to users.
"""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.models.permission import Permission, Role, RolePermission, UserPermission, UserRole
from platform_seed.repositories.base import BaseRepository


class PermissionRepository(BaseRepository[Permission]):
    """permissions / roles / role_permissions / user_* 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(Permission)

    async def ensure_permissions(
        self,
        db: AsyncSession,
        permissions: dict[str, str | None],
        guard_name: str,
        is_global: bool = True,
        actor_id: UUID | None = None,
    ) -> int:
        """이름 → 설명 매핑의 권한을 없으면 생성합니다.

        Create every permission in ``permissions`` (name → description) that
        does not exist yet for ``guard_name``. Existing rows are not modified.

        Returns:
            int: 새로 생성된 권한 수 (Number of permissions created)
        """
        existing: set[str] = set(
            (await db.execute(
                select(Permission.name).where(
                    Permission.guard_name == guard_name,
                    Permission.name.in_(list(permissions)),
                )
            )).scalars().all()
        )

        created: int = 0
        for name, description in permissions.items():
            if name in existing:
                continue
            db.add(Permission(
                name=name,
                guard_name=guard_name,
                description=description,
                is_global=is_global,
                created_by=actor_id,
                updated_by=actor_id,
            ))
            created += 1
        await db.flush()
        return created

    async def get_by_names(self, db: AsyncSession, names: Iterable[str], guard_name: str) -> list[Permission]:
        """이름 목록에 해당하는 권한 (존재하는 것만) (Existing permissions among ``names``)."""
        result = await db.execute(
            select(Permission)
            .where(Permission.guard_name == guard_name, Permission.name.in_(list(names)))
            .order_by(Permission.name)
        )
        return list(result.scalars().all())

    async def first_or_create_role(
        self,
        db: AsyncSession,
        name: str,
        guard_name: str,
        team_id: UUID | None = None,
        values: dict | None = None,
    ) -> tuple[Role, bool]:
        """(name, guard_name, team_id)로 역할을 찾거나 생성합니다.

        Find or create the role identified by name, guard and team.
        A ``None`` team matches only global roles.
        """
        result = await db.execute(
            select(Role)
            .where(
                Role.name == name,
                Role.guard_name == guard_name,
                Role.team_id.is_(None) if team_id is None else Role.team_id == team_id,
            )
            .limit(1)
        )
        role: Role | None = result.scalar_one_or_none()
        if role is not None:
            return role, False

        role = Role(name=name, guard_name=guard_name, team_id=team_id, **(values or {}))
        db.add(role)
        await db.flush()
        return role, True

    async def get_roles_by_name(self, db: AsyncSession, name: str, guard_name: str) -> list[Role]:
        """이름이 같은 모든 역할 (전역 + 팀) (Every role with this name, global or team)."""
        result = await db.execute(
            select(Role).where(Role.name == name, Role.guard_name == guard_name)
        )
        return list(result.scalars().all())

    async def get_role_permission_names(self, db: AsyncSession, role_id: UUID) -> set[str]:
        """역할의 권한 이름 set (Permission names attached to a role)."""
        result = await db.execute(
            select(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .where(RolePermission.role_id == role_id)
        )
        return set(result.scalars().all())

    async def sync_role_permissions(
        self, db: AsyncSession, role_id: UUID, permission_ids: Iterable[UUID]
    ) -> None:
        """역할의 권한을 정확히 permission_ids로 맞춥니다.

        Make the role hold exactly ``permission_ids``: detach the rest, attach the missing.
        """
        wanted: set[UUID] = set(permission_ids)
        current: set[UUID] = set(
            (await db.execute(
                select(RolePermission.permission_id).where(RolePermission.role_id == role_id)
            )).scalars().all()
        )

        stale: set[UUID] = current - wanted
        if stale:
            await db.execute(
                delete(RolePermission).where(
                    RolePermission.role_id == role_id,
                    RolePermission.permission_id.in_(stale),
                )
            )
        for permission_id in wanted - current:
            db.add(RolePermission(role_id=role_id, permission_id=permission_id))
        await db.flush()

    async def attach_role_permissions(
        self, db: AsyncSession, role_id: UUID, permission_ids: Iterable[UUID]
    ) -> int:
        """역할에 권한을 추가합니다 (기존 매핑은 무시).

        Attach permissions to a role, ignoring pairs that already exist.

        Returns:
            int: 새로 추가된 매핑 수 (Number of links added)
        """
        current: set[UUID] = set(
            (await db.execute(
                select(RolePermission.permission_id).where(RolePermission.role_id == role_id)
            )).scalars().all()
        )
        added: int = 0
        for permission_id in set(permission_ids) - current:
            db.add(RolePermission(role_id=role_id, permission_id=permission_id))
            added += 1
        await db.flush()
        return added

    async def give_user_permissions(
        self,
        db: AsyncSession,
        user_ids: Iterable[UUID],
        permission_ids: Iterable[UUID],
        team_id: UUID | None = None,
    ) -> int:
        """사용자들에게 권한을 직접 부여합니다 (이미 있으면 건너뜀).

        Grant permissions directly to users, skipping existing grants.

        Returns:
            int: 새로 부여된 건수 (Number of grants added)
        """
        user_ids = list(user_ids)
        permission_ids = list(permission_ids)
        if not user_ids or not permission_ids:
            return 0

        existing: set[tuple[UUID, UUID]] = {
            (row.user_id, row.permission_id)
            for row in (await db.execute(
                select(UserPermission.user_id, UserPermission.permission_id).where(
                    UserPermission.user_id.in_(user_ids),
                    UserPermission.permission_id.in_(permission_ids),
                )
            )).all()
        }

        added: int = 0
        for user_id in user_ids:
            for permission_id in permission_ids:
                if (user_id, permission_id) in existing:
                    continue
                db.add(UserPermission(user_id=user_id, permission_id=permission_id, team_id=team_id))
                added += 1
        await db.flush()
        return added

    async def assign_role(
        self, db: AsyncSession, user_id: UUID, role: Role
    ) -> bool:
        """사용자에게 역할을 부여합니다 (역할의 team_id를 따름).

        Assign a role to a user within the role's team. Returns False when
        the user already holds it.
        """
        result = await db.execute(
            select(UserRole.id)
            .where(UserRole.user_id == user_id, UserRole.role_id == role.id)
            .limit(1)
        )
        if result.scalar_one_or_none() is not None:
            return False
        db.add(UserRole(user_id=user_id, role_id=role.id, team_id=role.team_id))
        await db.flush()
        return True


permission_repository: PermissionRepository = PermissionRepository()
role_repository: BaseRepository[Role] = BaseRepository(Role)
