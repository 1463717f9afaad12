"""OAuth 스코프 및 클라이언트 SQLAlchemy ORM 모델 정의.

OAuth 2.0 / OpenID Connect scope and client registration tables.

Tables:
    - oauth_scopes: 스코프 목록 (Scope identifiers, OIDC and API scopes)
    - oauth_clients: 등록된 클라이언트 (Registered clients with access policy)
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from platform_seed.database import Base
from platform_seed.models.mixins import JSONType, TimestampMixin

# 클라이언트 유형 — Client confidentiality types
CLIENT_TYPES: tuple[str, ...] = ("confidential", "public", "personal_access")

# 사용자 접근 범위 — Which users may authorize the client
USER_ACCESS_SCOPES: tuple[str, ...] = ("all_users", "organization_members", "custom")


class OAuthScope(TimestampMixin, Base):
    """OAuth 스코프 모델 — identifier로 식별.

    Attributes:
        identifier: 스코프 식별자 (e.g. "openid", "https://api.../auth/chat")
        name: 표시 이름
        description: 설명
        is_default: 기본 부여 여부 (Granted when a client requests no scopes)
    """

    __tablename__ = "oauth_scopes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    identifier: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class OAuthClient(TimestampMixin, Base):
    """OAuth 클라이언트 모델.

    공개(public) 클라이언트와 personal_access 클라이언트는 secret이 없음.
    Public and personal-access clients carry no secret.

    Attributes:
        owner_type / owner_id: 소유자 (Owning entity, normally a user)
        secret: 클라이언트 시크릿 (NULL for public clients)
        redirect_uris / grant_types / allowed_scopes: JSON 문자열 배열
        client_type: CLIENT_TYPES 중 하나
        user_access_scope: USER_ACCESS_SCOPES 중 하나
        user_access_rules: custom 범위의 규칙 (roles, email_domains, ...)
    """

    __tablename__ = "oauth_clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    owner_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    secret: Mapped[str | None] = mapped_column(String(255), nullable=True)
    provider: Mapped[str | None] = mapped_column(String(255), nullable=True)
    redirect_uris: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    grant_types: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    revoked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(String(255), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    organization_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True)
    allowed_scopes: Mapped[list | None] = mapped_column(JSONType, nullable=True)
    client_type: Mapped[str] = mapped_column(String(20), nullable=False, default="confidential")
    user_access_scope: Mapped[str] = mapped_column(String(50), nullable=False, default="all_users")
    user_access_rules: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    last_used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
