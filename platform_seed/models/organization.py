"""조직 구조 관련 SQLAlchemy ORM 모델 정의.

Organization structure SQLAlchemy ORM model definitions.
Organizations form a tree (holding → subsidiary → division/branch) with a
materialized path; units, positions and memberships hang off an organization.

Tables:
    - organizations: 조직 트리 (Organization tree with materialized path)
    - organization_units: 조직 내 부서/위원회 (Departments, boards, committees, teams)
    - organization_position_levels: 직급 레벨 (Position levels, lower hierarchy_level = more senior)
    - organization_positions: 직위 (Positions within a unit)
    - organization_memberships: 사용자 소속 (User membership in an organization)
"""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from platform_seed.database import Base
from platform_seed.models.mixins import BlameableMixin, JSONType

# 조직 유형 — Allowed organization types
ORGANIZATION_TYPES: tuple[str, ...] = (
    "holding_company", "subsidiary", "division", "branch", "department", "unit",
)

# 조직 단위 유형 — Allowed organization unit types
UNIT_TYPES: tuple[str, ...] = (
    "board_of_commissioners", "board_of_directors", "executive_committee",
    "audit_committee", "risk_committee", "nomination_committee",
    "remuneration_committee", "division", "department", "section", "team",
    "branch_office", "representative_office",
)

# 소속 유형 및 상태 — Membership types and statuses
MEMBERSHIP_TYPES: tuple[str, ...] = (
    "employee", "board_member", "consultant", "contractor", "intern", "manager",
)
MEMBERSHIP_STATUSES: tuple[str, ...] = ("active", "inactive", "terminated")


class Organization(BlameableMixin, Base):
    """조직 모델 — 계층형 조직 트리의 노드.

    Organization node in the hierarchy. ``path`` holds the slash-joined ids
    from the root down to this node and ``level`` its depth (root = 0).

    Relationships:
        parent: 상위 조직 (Parent organization)
        children: 하위 조직 목록 (Child organizations)
        units: 조직 단위 목록 (Organization units, cascade delete)
    """

    __tablename__ = "organizations"

    # 조직 고유 식별자 — Organization unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 조직 코드 — Unique business code (e.g. "HC001")
    organization_code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # 조직 유형 — One of ORGANIZATION_TYPES
    organization_type: Mapped[str] = mapped_column(String(50), nullable=False)
    # 상위 조직 FK — Parent organization (NULL for roots)
    parent_organization_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="SET NULL"), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    # 등록/세무 번호 — Registration and tax numbers
    registration_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    tax_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # 지배구조 — Governance structure (board size, committees)
    governance_structure: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    # 자본금 — Authorized and paid-up capital
    authorized_capital: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    paid_capital: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    establishment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    legal_status: Mapped[str | None] = mapped_column(String(255), nullable=True)
    business_activities: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_persons: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    # 트리 깊이 및 경로 — Depth (root = 0) and materialized id path
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    path: Mapped[str | None] = mapped_column(Text, nullable=True)

    # 관계 — Relationships
    parent = relationship("Organization", remote_side=[id], back_populates="children")
    children = relationship("Organization", back_populates="parent")
    units = relationship("OrganizationUnit", back_populates="organization", cascade="all, delete-orphan")


class OrganizationUnit(BlameableMixin, Base):
    """조직 단위 모델 — 이사회, 위원회, 부서, 팀 등.

    Organization unit (board, committee, division, department, team).
    Units nest through ``parent_unit_id`` within the same organization.
    """

    __tablename__ = "organization_units"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    unit_code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 단위 유형 — One of UNIT_TYPES
    unit_type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    parent_unit_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organization_units.id", ondelete="SET NULL"), nullable=True)
    responsibilities: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    authorities: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)

    __table_args__ = (
        UniqueConstraint("organization_id", "unit_code", name="uq_unit_org_code"),
    )

    organization = relationship("Organization", back_populates="units")
    parent_unit = relationship("OrganizationUnit", remote_side=[id])


class OrganizationPositionLevel(BlameableMixin, Base):
    """직급 레벨 모델 — hierarchy_level 값이 작을수록 상위.

    Position level; a smaller hierarchy_level means a more senior level.
    """

    __tablename__ = "organization_position_levels"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    hierarchy_level: Mapped[int] = mapped_column(Integer, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, default=0)


class OrganizationPosition(BlameableMixin, Base):
    """직위 모델 — 조직 단위 내 직위 정의."""

    __tablename__ = "organization_positions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    organization_unit_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organization_units.id", ondelete="CASCADE"), nullable=True)
    position_code: Mapped[str] = mapped_column(String(50), nullable=False)
    organization_position_level_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organization_position_levels.id", ondelete="SET NULL"), nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    job_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    qualifications: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    responsibilities: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    min_salary: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    max_salary: Mapped[Decimal | None] = mapped_column(Numeric(15, 2), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    max_incumbents: Mapped[int] = mapped_column(Integer, default=1)

    __table_args__ = (
        UniqueConstraint("organization_id", "position_code", name="uq_position_org_code"),
    )

    unit = relationship("OrganizationUnit")
    position_level = relationship("OrganizationPositionLevel")


class OrganizationMembership(BlameableMixin, Base):
    """조직 소속 모델 — 사용자와 조직/단위/직위 연결."""

    __tablename__ = "organization_memberships"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    organization_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)
    organization_unit_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organization_units.id", ondelete="SET NULL"), nullable=True)
    organization_position_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organization_positions.id", ondelete="SET NULL"), nullable=True)
    # 소속 유형 — One of MEMBERSHIP_TYPES
    membership_type: Mapped[str] = mapped_column(String(50), nullable=False, default="employee")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # 상태 — One of MEMBERSHIP_STATUSES
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    additional_roles: Mapped[list | None] = mapped_column(JSONType, nullable=True)

    user = relationship("User", back_populates="memberships")
    organization = relationship("Organization")
