"""권한 및 역할 SQLAlchemy ORM 모델 정의.

Permission and role tables for name-based RBAC with optional team (organization) scope.

Tables:
    - permissions: 권한 이름 목록 (Permission names, e.g. "org:read", "chat.messages.send")
    - roles: 역할, team_id가 있으면 조직 범위 (Roles; organization-scoped when team_id is set)
    - role_permissions: 역할-권한 매핑 (role ↔ permission)
    - user_roles: 사용자-역할 매핑 (user ↔ role, optional team scope)
    - user_permissions: 사용자 직접 권한 (Permissions granted directly to users)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from platform_seed.database import Base
from platform_seed.models.mixins import BlameableMixin

# 역할 유형 — Role types (standard organization roles, built-in system roles)
ROLE_TYPE_STANDARD: int = 1
ROLE_TYPE_SYSTEM: int = 2


class Permission(BlameableMixin, Base):
    """권한 모델 — 이름 기반 권한 정의.

    Attributes:
        id: 고유 식별자 UUID
        name: 권한 이름 (e.g. "org:read")
        guard_name: 가드 이름 (e.g. "web")
        description: 설명
        is_global: 조직과 무관한 전역 권한 여부
    """

    __tablename__ = "permissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    guard_name: Mapped[str] = mapped_column(String(50), nullable=False, default="web")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_global: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("name", "guard_name", name="uq_permission_name_guard"),
    )

    role_permissions = relationship("RolePermission", back_populates="permission", cascade="all, delete-orphan")


class Role(BlameableMixin, Base):
    """역할 모델 — 권한 묶음.

    team_id가 NULL이면 전역 역할, 값이 있으면 해당 조직 범위 역할.
    A NULL team_id marks a global role; otherwise the role belongs to that organization.

    Attributes:
        id: 고유 식별자 UUID
        team_id: 조직 FK (nullable)
        name: 역할 이름 (e.g. "super-admin")
        guard_name: 가드 이름
        description: 설명
        is_global: 전역 역할 여부
        type: 역할 유형 (ROLE_TYPE_STANDARD / ROLE_TYPE_SYSTEM)
        scope_type: 범위 종류 (e.g. "organization", nullable)
        scope_id: 범위 대상 ID (nullable)
    """

    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    team_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    guard_name: Mapped[str] = mapped_column(String(50), nullable=False, default="web")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_global: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    type: Mapped[int] = mapped_column(Integer, nullable=False, default=ROLE_TYPE_STANDARD)
    scope_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    scope_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    # NULL team_id는 DB 제약으로 고유성이 보장되지 않으므로 레포지토리에서 확인
    # Uniqueness with NULL team_id is enforced by the repository, not the constraint
    __table_args__ = (
        UniqueConstraint("team_id", "name", "guard_name", name="uq_role_team_name_guard"),
    )

    role_permissions = relationship("RolePermission", back_populates="role", cascade="all, delete-orphan")
    user_roles = relationship("UserRole", back_populates="role", cascade="all, delete-orphan")


class RolePermission(Base):
    """역할-권한 매핑 모델.

    Attributes:
        id: 고유 식별자 UUID
        role_id: 역할 FK
        permission_id: 권한 FK
        created_at: 생성 일시
    """

    __tablename__ = "role_permissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    permission_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("permissions.id", ondelete="CASCADE"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
    )

    role = relationship("Role", back_populates="role_permissions")
    permission = relationship("Permission", back_populates="role_permissions")


class UserRole(Base):
    """사용자-역할 매핑 모델 (조직 범위 역할은 team_id 포함).

    Attributes:
        id: 고유 식별자 UUID
        user_id: 사용자 FK
        role_id: 역할 FK
        team_id: 조직 범위 (nullable)
        created_at: 생성 일시
    """

    __tablename__ = "user_roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id", ondelete="CASCADE"), nullable=False)
    team_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_user_role"),
    )

    user = relationship("User", back_populates="roles")
    role = relationship("Role", back_populates="user_roles")


class UserPermission(Base):
    """사용자 직접 권한 모델.

    Attributes:
        id: 고유 식별자 UUID
        user_id: 사용자 FK
        permission_id: 권한 FK
        team_id: 조직 범위 (nullable)
        created_at: 생성 일시
    """

    __tablename__ = "user_permissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    permission_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("permissions.id", ondelete="CASCADE"), nullable=False)
    team_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "permission_id", name="uq_user_permission"),
    )

    user = relationship("User", back_populates="permissions")
    permission = relationship("Permission")
