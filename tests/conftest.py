"""테스트 인프라 — 인메모리 SQLite DB, 세션, 시더 컨텍스트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) engine, session and
seeder context fixtures. Every test gets a fresh schema; bcrypt runs at its
minimum cost and the Faker batches are shrunk to keep the suite fast.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from platform_seed.config import settings
from platform_seed.database import Base, build_session_factory
from platform_seed.models import *  # noqa: F401,F403 — register all models with metadata
from platform_seed.models.organization import Organization
from platform_seed.models.user import User
from platform_seed.seeders.base import SeedContext
from platform_seed.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """bcrypt 비용 최소화 및 가짜 사용자 수 축소."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "SEED_FAKE_USER_BATCHES", [3, 2])
    monkeypatch.setattr(settings, "PERMISSION_TEAMS", True)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 스키마를 생성합니다."""
    # StaticPool: 모든 세션이 같은 인메모리 연결을 공유 (All sessions share one in-memory connection)
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def context() -> SeedContext:
    """빈 시더 컨텍스트."""
    return SeedContext()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def acting_user(db: AsyncSession) -> User:
    """시더가 행위자로 사용할 일반 사용자를 생성합니다."""
    user = User(
        name="Seed Operator",
        email="operator@example.com",
        password_hash=hash_password("operator123!"),
    )
    db.add(user)
    await db.flush()
    return user


@pytest_asyncio.fixture
async def default_org(db: AsyncSession) -> Organization:
    """팀 역할 대상인 DEFAULT 조직을 생성합니다."""
    org = Organization(organization_code="DEFAULT", name="Default Organization", organization_type="holding_company")
    db.add(org)
    await db.flush()
    return org


@pytest.fixture
def write_csv(tmp_path: Path):
    """tmp_path에 CSV 파일을 작성하는 헬퍼 (기본: UTF-8 BOM 포함)."""

    def _write(name: str, lines: list[str], bom: bool = True) -> Path:
        path = tmp_path / name
        content = "\n".join(lines) + "\n"
        path.write_text(("\ufeff" if bom else "") + content, encoding="utf-8")
        return path

    return _write
