"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.

Tables:
    - users: 사용자 계정 (Global user accounts; organization links live in memberships)
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from platform_seed.database import Base
from platform_seed.models.mixins import BlameableMixin


class User(BlameableMixin, Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model for system, service, demo and sample accounts.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 표시 이름 (Display name)
        username: 로그인 ID, 전역 고유 (Login username, globally unique, may be empty until backfilled)
        email: 이메일, 전역 고유 (Email address, globally unique)
        password_hash: bcrypt 해시 (bcrypt password hash)
        email_verified_at: 이메일 인증 일시 (Email verification timestamp)
        is_active: 활성 상태 (Active status flag)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 표시 이름 — Display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 로그인 ID — Username (unique, nullable until generated)
    username: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    # 이메일 — Email address (unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hash, never plain text
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 인증 일시 — Email verification time
    email_verified_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    # 활성 상태 — Whether the account is active
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # 관계 — Relationships
    roles = relationship("UserRole", back_populates="user", cascade="all, delete-orphan")
    permissions = relationship("UserPermission", back_populates="user", cascade="all, delete-orphan")
    memberships = relationship("OrganizationMembership", back_populates="user", cascade="all, delete-orphan")
