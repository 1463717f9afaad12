"""OAuth 시더 테스트.

OAuth seeder tests — scope upserts, client owners, client secrets by client
type, and the personal access token clients.
"""

from sqlalchemy import func, select

from platform_seed.data.oauth import (
    OAUTH_CLIENTS,
    OAUTH_OWNER,
    OAUTH_SCOPES,
    PERSONAL_ACCESS_CLIENTS,
    PERSONAL_ACCESS_OWNER,
)
from platform_seed.models.oauth import OAuthClient, OAuthScope
from platform_seed.models.organization import Organization
from platform_seed.models.user import User
from platform_seed.seeders import OAuthSeeder, PersonalAccessTokenSeeder
from platform_seed.seeders.oauth_seeder import OWNER_TYPE, SECRET_LENGTH
from platform_seed.utils.password import verify_password


async def _clients(db, organization_code: str) -> list[OAuthClient]:
    result = await db.execute(
        select(OAuthClient)
        .join(Organization, Organization.id == OAuthClient.organization_id)
        .where(Organization.organization_code == organization_code)
    )
    return list(result.scalars().all())


class TestOAuthScopes:
    """OAuth 스코프 시드 테스트."""

    async def test_creates_scopes(self, db, context):
        """모든 스코프 생성, 기본 스코프 표시."""
        result = await OAuthSeeder().run(db, context)

        assert result.created["oauth_scopes"] == len(OAUTH_SCOPES)
        defaults = (await db.execute(
            select(OAuthScope.identifier).where(OAuthScope.is_default.is_(True))
        )).scalars().all()
        assert set(defaults) == {"openid", "profile", "email"}

    async def test_updates_existing_scope(self, db, context):
        """기존 스코프는 식별자 기준으로 갱신."""
        db.add(OAuthScope(identifier="openid", name="Old name", description="stale"))
        await db.flush()

        result = await OAuthSeeder().run(db, context)

        scope = (await db.execute(select(OAuthScope).where(OAuthScope.identifier == "openid"))).scalar_one()
        assert scope.name == "OpenID Connect"
        assert scope.is_default is True
        assert result.created["oauth_scopes"] == len(OAUTH_SCOPES) - 1
        assert result.skipped["oauth_scopes"] == 1


class TestOAuthClients:
    """OAuth 클라이언트 시드 테스트."""

    async def test_creates_owner_and_organization(self, db, context):
        """클라이언트 소유자와 조직 생성."""
        await OAuthSeeder().run(db, context)

        owner = (await db.execute(
            select(User).where(User.email == OAUTH_OWNER["user"]["email"])
        )).scalar_one()
        assert verify_password(OAUTH_OWNER["user"]["password"], owner.password_hash)
        organization = (await db.execute(
            select(Organization).where(
                Organization.organization_code == OAUTH_OWNER["organization"]["organization_code"]
            )
        )).scalar_one()
        assert organization.level == 0
        assert organization.created_by == owner.id

    async def test_creates_clients(self, db, context):
        """모든 샘플 클라이언트 생성, 소유자 기록."""
        result = await OAuthSeeder().run(db, context)

        clients = await _clients(db, OAUTH_OWNER["organization"]["organization_code"])
        assert result.created["oauth_clients"] == len(OAUTH_CLIENTS)
        assert {client.name for client in clients} == {data["name"] for data in OAUTH_CLIENTS}
        assert all(client.owner_type == OWNER_TYPE for client in clients)
        assert all(client.revoked is False for client in clients)

    async def test_secret_by_client_type(self, db, context):
        """기밀 클라이언트만 32자 시크릿 보유."""
        await OAuthSeeder().run(db, context)

        for client in await _clients(db, OAUTH_OWNER["organization"]["organization_code"]):
            if client.client_type == "confidential":
                assert client.secret is not None
                assert len(client.secret) == SECRET_LENGTH
            else:
                assert client.secret is None

    async def test_custom_access_rules(self, db, context):
        """custom 범위 클라이언트는 접근 규칙 보유."""
        await OAuthSeeder().run(db, context)

        partner = next(
            client for client in await _clients(db, OAUTH_OWNER["organization"]["organization_code"])
            if client.name == "External Partner Integration"
        )
        assert partner.user_access_rules == {"email_domains": ["partner.example.com", "trusted-partner.org"]}

    async def test_rerun_keeps_existing_clients(self, db, context):
        """재실행 시 기존 클라이언트와 시크릿 유지."""
        await OAuthSeeder().run(db, context)
        code = OAUTH_OWNER["organization"]["organization_code"]
        secrets_before = {client.name: client.secret for client in await _clients(db, code)}

        result = await OAuthSeeder().run(db, context)

        assert result.created["oauth_clients"] == 0
        assert result.skipped["oauth_clients"] == len(OAUTH_CLIENTS)
        assert {client.name: client.secret for client in await _clients(db, code)} == secrets_before


class TestPersonalAccessTokenSeeder:
    """개인 액세스 토큰 클라이언트 시드 테스트."""

    async def test_creates_personal_access_clients(self, db, context):
        """personal_access 유형, 시크릿/리다이렉트 없음."""
        result = await PersonalAccessTokenSeeder().run(db, context)

        clients = await _clients(db, PERSONAL_ACCESS_OWNER["organization"]["organization_code"])
        assert result.created["oauth_clients"] == len(PERSONAL_ACCESS_CLIENTS)
        assert len(clients) == len(PERSONAL_ACCESS_CLIENTS)
        for client in clients:
            assert client.client_type == "personal_access"
            assert client.secret is None
            assert client.redirect_uris == []
            assert client.grant_types == ["personal_access"]

    async def test_separate_owner_from_oauth_clients(self, db, context):
        """OAuth 클라이언트와 별도 소유자/조직."""
        await OAuthSeeder().run(db, context)
        await PersonalAccessTokenSeeder().run(db, context)

        total = (await db.execute(select(func.count()).select_from(OAuthClient))).scalar()
        assert total == len(OAUTH_CLIENTS) + len(PERSONAL_ACCESS_CLIENTS)
        owners = (await db.execute(select(func.count(func.distinct(OAuthClient.owner_id))))).scalar()
        assert owners == 2

    async def test_rerun_is_idempotent(self, db, context):
        """재실행 시 중복 없음."""
        await PersonalAccessTokenSeeder().run(db, context)
        result = await PersonalAccessTokenSeeder().run(db, context)

        assert result.created["oauth_clients"] == 0
        assert result.skipped["oauth_clients"] == len(PERSONAL_ACCESS_CLIENTS)
