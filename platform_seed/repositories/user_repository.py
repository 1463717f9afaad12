"""사용자 레포지토리 — 계정 조회 및 사용자명 쿼리.

User Repository — account lookups and username queries for the seeders.
"""

from uuid import UUID

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.models.user import User
from platform_seed.repositories.base import BaseRepository

# 시스템 계정 이메일 — The system account every seeder acts as
SYSTEM_USER_EMAIL: str = "system@system.local"
# 서비스 계정 도메인 — Domain of the system and service accounts
SYSTEM_DOMAIN: str = "system.local"


class UserRepository(BaseRepository[User]):
    """users 테이블 쿼리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 사용자 조회 (Look up a user by email)."""
        return await self.get_one_by(db, email=email)

    async def get_by_emails(self, db: AsyncSession, emails: list[str]) -> dict[str, User]:
        """이메일 목록 → {email: User} 매핑 (Map the given emails to users)."""
        if not emails:
            return {}
        result = await db.execute(select(User).where(User.email.in_(emails)))
        return {user.email: user for user in result.scalars().all()}

    async def get_acting_user(self, db: AsyncSession) -> User | None:
        """시더가 행위자로 사용할 사용자.

        Return the system account, falling back to the oldest user.
        """
        system_user: User | None = await self.get_by_email(db, SYSTEM_USER_EMAIL)
        if system_user is not None:
            return system_user
        result = await db.execute(select(User).order_by(User.created_at, User.id).limit(1))
        return result.scalar_one_or_none()

    async def get_all_ordered(self, db: AsyncSession, limit: int | None = None) -> list[User]:
        """생성 순서대로 사용자 목록 (Users in creation order, optionally limited)."""
        query: Select = select(User).order_by(User.created_at, User.id)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get_regular_users(self, db: AsyncSession, limit: int) -> list[User]:
        """시스템 계정(@system.local)을 제외한 사용자, 생성 순서대로.

        Users outside the @system.local service domain, in creation order.
        """
        result = await db.execute(
            select(User)
            .where(User.email.not_like(f"%@{SYSTEM_DOMAIN}"))
            .order_by(User.created_at, User.id)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_without_username(self, db: AsyncSession) -> list[User]:
        """사용자명이 비어 있는 사용자 목록 (Users whose username is NULL or empty)."""
        result = await db.execute(
            select(User)
            .where(or_(User.username.is_(None), User.username == ""))
            .order_by(User.created_at, User.id)
        )
        return list(result.scalars().all())

    async def username_taken(self, db: AsyncSession, username: str, exclude_id: UUID) -> bool:
        """다른 사용자가 username을 사용 중인지 확인 (Whether another user holds the username)."""
        result = await db.execute(
            select(User.id)
            .where(User.username == username, User.id != exclude_id)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None


user_repository: UserRepository = UserRepository()
