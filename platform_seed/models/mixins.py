"""공통 컬럼 믹스인 — 타임스탬프 및 작성자 추적.

Shared column mixins for timestamps and blame (created_by / updated_by) tracking.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

# PostgreSQL에서는 JSONB, 그 외 방언에서는 일반 JSON
# JSONB on PostgreSQL, plain JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """생성/수정 일시 컬럼 (created_at / updated_at, UTC)."""

    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    # 수정 일시 — Last modification timestamp (UTC, auto-updated)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class BlameableMixin(TimestampMixin):
    """작성자/수정자 컬럼 — 시더가 기록하는 행위자 사용자 ID.

    Adds created_by / updated_by. Seeders stamp these with the acting user
    (normally the system user) since there is no request context.
    """

    # 작성자 — User that created the row
    created_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    # 수정자 — User that last updated the row
    updated_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
