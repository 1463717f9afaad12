"""OAuth 2.0 / OIDC 스코프와 샘플 클라이언트 정의.

OAuth scopes and the sample client registrations: interactive and machine
clients owned by the OAuth administrator, plus the personal-access-token
clients owned by the token administrator.
"""

# API 스코프 접두어 — Prefix of Google-style API scopes
API_SCOPE_PREFIX: str = "https://api.yourcompany.com/auth/"


def api_scope(name: str) -> str:
    """API 스코프 식별자 (e.g. "chat.readonly" → full URL identifier)."""
    return f"{API_SCOPE_PREFIX}{name}"


OAUTH_SCOPES: list[dict] = [
    # OpenID Connect 핵심 스코프 — OIDC core scopes (granted by default)
    {"identifier": "openid", "name": "OpenID Connect", "description": "Authenticate using OpenID Connect", "is_default": True},
    {"identifier": "profile", "name": "Profile Information", "description": "Access your basic profile information like name and picture", "is_default": True},
    {"identifier": "email", "name": "Email Address", "description": "Access your email address", "is_default": True},
    # 조직 — Organization
    {"identifier": api_scope("organization.readonly"), "name": "Organization Read Access", "description": "Read access to your organization data"},
    {"identifier": api_scope("organization"), "name": "Organization Management", "description": "Full access to modify organization data"},
    {"identifier": api_scope("organization.members"), "name": "Organization Members", "description": "Access to organization membership information"},
    {"identifier": api_scope("organization.admin"), "name": "Organization Administration", "description": "Administrative access to organization settings and hierarchy"},
    # 사용자 — User
    {"identifier": api_scope("userinfo.profile"), "name": "User Profile Access", "description": "Read user profile and basic information"},
    {"identifier": api_scope("userinfo.email"), "name": "User Email Access", "description": "Access user email information"},
    {"identifier": api_scope("user.modify"), "name": "User Profile Management", "description": "Update user profile and settings"},
    # 채팅 — Chat
    {"identifier": api_scope("chat.readonly"), "name": "Chat Read Access", "description": "Read access to chat conversations and messages"},
    {"identifier": api_scope("chat"), "name": "Chat Management", "description": "Full access to chat functionality including sending messages"},
    {"identifier": api_scope("chat.encryption"), "name": "Chat Encryption Keys", "description": "Access to encrypted chat functionality and key management"},
    # 분석 및 리포트 — Analytics and reporting
    {"identifier": api_scope("analytics.readonly"), "name": "Analytics Read Access", "description": "Access to analytics and reporting data"},
    {"identifier": api_scope("reports"), "name": "Reports Access", "description": "Generate and access business reports"},
    # 연동 — Integrations
    {"identifier": api_scope("webhooks"), "name": "Webhooks Management", "description": "Create and manage webhook subscriptions"},
    {"identifier": api_scope("integrations"), "name": "Third-party Integrations", "description": "Access for third-party system integrations"},
    # 재무 및 보안 — Finance and security
    {"identifier": api_scope("finance.readonly"), "name": "Financial Data Read", "description": "Access to financial and billing information"},
    {"identifier": api_scope("audit.readonly"), "name": "Security Audit Access", "description": "Access to security logs and audit trails"},
    # 파일 — Files
    {"identifier": api_scope("files.readonly"), "name": "File Read Access", "description": "Access to read and download files"},
    {"identifier": api_scope("files"), "name": "File Management", "description": "Upload, modify, and delete files"},
    # 기기 및 보안 — Devices and security
    {"identifier": api_scope("devices"), "name": "Device Management", "description": "Manage user devices and trusted device settings"},
    {"identifier": api_scope("security"), "name": "Security Management", "description": "Access to security settings and multi-factor authentication"},
    # 플랫폼 — Platform
    {"identifier": api_scope("platform.full"), "name": "Full Platform Access", "description": "Complete platform access for trusted applications"},
    {"identifier": api_scope("mobile"), "name": "Mobile Application Access", "description": "Specialized access for mobile applications"},
    # 표준 OAuth — Standard OAuth
    {"identifier": "offline_access", "name": "Offline Access", "description": "Ability to refresh tokens when user is offline"},
]

# 클라이언트 소유 계정 및 조직 — Owners of the sample clients
OAUTH_OWNER: dict = {
    "user": {"email": "oauth-admin@example.com", "name": "OAuth Administrator", "password": "secure-password-123"},
    "organization": {"organization_code": "OAUTH_ORG", "name": "OAuth Organization", "organization_type": "holding_company"},
}

PERSONAL_ACCESS_OWNER: dict = {
    "user": {"email": "token-admin@example.com", "name": "Token Administrator", "password": "secure-token-password"},
    "organization": {"organization_code": "TOKEN_ORG", "name": "Personal Access Token Organization", "organization_type": "holding_company"},
}

OAUTH_CLIENTS: list[dict] = [
    {
        "name": "Main Web Application",
        "client_type": "confidential",
        "user_access_scope": "all_users",
        "description": "Primary web application with full platform access",
        "website": "https://app.yourcompany.com",
        "redirect_uris": [
            "https://app.yourcompany.com/oauth/callback",
            "https://staging.yourcompany.com/oauth/callback",
        ],
        "allowed_scopes": [
            "openid", "profile", "email", "offline_access",
            api_scope("organization.readonly"), api_scope("organization.members"),
            api_scope("userinfo.profile"), api_scope("userinfo.email"),
            api_scope("chat.readonly"), api_scope("chat"),
            api_scope("files.readonly"), api_scope("files"),
            api_scope("devices"),
        ],
        "grant_types": ["authorization_code", "refresh_token"],
    },
    {
        "name": "Mobile Application",
        "client_type": "public",
        "user_access_scope": "all_users",
        "description": "Official mobile application for iOS and Android",
        "redirect_uris": [
            "com.yourcompany.mobile://oauth/callback",
            "https://mobile.yourcompany.com/callback",
        ],
        "allowed_scopes": [
            "openid", "profile", "email", "offline_access",
            api_scope("mobile"), api_scope("organization.readonly"), api_scope("userinfo.profile"),
            api_scope("chat.readonly"), api_scope("chat"), api_scope("chat.encryption"),
            api_scope("files.readonly"), api_scope("devices"), api_scope("security"),
        ],
        "grant_types": ["authorization_code", "refresh_token"],
    },
    {
        "name": "Management Dashboard",
        "client_type": "confidential",
        "user_access_scope": "organization_members",
        "description": "Executive dashboard for organization management",
        "website": "https://dashboard.yourcompany.com",
        "redirect_uris": ["https://dashboard.yourcompany.com/oauth/callback"],
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("organization"), api_scope("organization.admin"), api_scope("organization.members"),
            api_scope("analytics.readonly"), api_scope("reports"),
            api_scope("audit.readonly"), api_scope("finance.readonly"),
        ],
        "grant_types": ["authorization_code", "refresh_token"],
    },
    {
        "name": "Developer Tools",
        "client_type": "confidential",
        "user_access_scope": "custom",
        "user_access_rules": {
            "roles": ["developer", "admin", "super-admin"],
            "email_domains": ["yourcompany.com"],
        },
        "description": "Development tools and API testing for internal team",
        "website": "https://dev-tools.yourcompany.com",
        "redirect_uris": [
            "http://localhost:3000/oauth/callback",
            "http://localhost:8080/oauth/callback",
            "https://dev-tools.yourcompany.com/oauth/callback",
        ],
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("platform.full"), api_scope("webhooks"), api_scope("integrations"),
        ],
        "grant_types": ["authorization_code", "refresh_token", "client_credentials"],
    },
    {
        "name": "External Partner Integration",
        "client_type": "confidential",
        "user_access_scope": "custom",
        "user_access_rules": {"email_domains": ["partner.example.com", "trusted-partner.org"]},
        "description": "Third-party partner integration service",
        "website": "https://partner.example.com",
        "redirect_uris": [
            "https://partner.example.com/oauth/callback",
            "https://integration.partner.example.com/auth/return",
        ],
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("organization.readonly"), api_scope("userinfo.profile"), api_scope("integrations"),
        ],
        "grant_types": ["authorization_code", "client_credentials"],
    },
    {
        # 서버 간 통신 — machine-to-machine, no redirect URIs
        "name": "Analytics Service",
        "client_type": "confidential",
        "user_access_scope": "all_users",
        "description": "Backend analytics and reporting service (machine-to-machine)",
        "redirect_uris": [],
        "allowed_scopes": [
            api_scope("analytics.readonly"), api_scope("reports"), api_scope("organization.readonly"),
        ],
        "grant_types": ["client_credentials"],
    },
    {
        "name": "Support Portal",
        "client_type": "confidential",
        "user_access_scope": "custom",
        "user_access_rules": {
            "organization_roles": ["manager", "admin", "support"],
            "position_levels": ["director", "vice_president", "c_level"],
        },
        "description": "Customer support and helpdesk portal for management team",
        "website": "https://support.yourcompany.com",
        "redirect_uris": ["https://support.yourcompany.com/oauth/callback"],
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("organization.members"), api_scope("userinfo.profile"),
            api_scope("chat.readonly"), api_scope("audit.readonly"),
        ],
        "grant_types": ["authorization_code", "refresh_token"],
    },
    {
        "name": "File Storage Service",
        "client_type": "confidential",
        "user_access_scope": "all_users",
        "description": "Dedicated file storage and management service",
        "website": "https://files.yourcompany.com",
        "redirect_uris": ["https://files.yourcompany.com/oauth/callback"],
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("files"), api_scope("files.readonly"), api_scope("organization.readonly"),
        ],
        "grant_types": ["authorization_code", "refresh_token", "client_credentials"],
    },
]

# 개인 액세스 토큰 클라이언트 — no secret, no redirect URIs
PERSONAL_ACCESS_CLIENTS: list[dict] = [
    {
        "name": "Personal Access Token Client",
        "user_access_scope": "all_users",
        "description": "Default client for generating personal access tokens via api/generate-token",
        "website": "https://app.yourcompany.com",
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("organization.readonly"), api_scope("organization.members"),
            api_scope("userinfo.profile"), api_scope("userinfo.email"),
            api_scope("chat.readonly"), api_scope("chat"), api_scope("chat.encryption"),
            api_scope("files.readonly"), api_scope("files"),
            api_scope("devices"), api_scope("security"),
        ],
    },
    {
        "name": "Chat Application Token Client",
        "user_access_scope": "all_users",
        "description": "Specialized client for chat application personal access tokens",
        "website": "https://chat.yourcompany.com",
        "allowed_scopes": [
            "profile", "email",
            api_scope("chat"), api_scope("chat.readonly"), api_scope("chat.encryption"),
            api_scope("files.readonly"), api_scope("files"), api_scope("userinfo.profile"),
        ],
    },
    {
        "name": "Mobile Application Token Client",
        "user_access_scope": "all_users",
        "description": "Personal access tokens for mobile applications",
        "allowed_scopes": [
            "profile", "email",
            api_scope("mobile"), api_scope("organization.readonly"),
            api_scope("chat.readonly"), api_scope("chat"),
            api_scope("files.readonly"), api_scope("devices"), api_scope("security"),
        ],
    },
    {
        "name": "API Development Token Client",
        "user_access_scope": "custom",
        "user_access_rules": {
            "roles": ["developer", "admin", "super-admin"],
            "email_domains": ["yourcompany.com"],
        },
        "description": "Personal access tokens for API development and testing",
        "website": "https://api.yourcompany.com",
        "allowed_scopes": [
            "openid", "profile", "email",
            api_scope("platform.full"), api_scope("organization"), api_scope("organization.admin"),
            api_scope("analytics.readonly"), api_scope("webhooks"), api_scope("integrations"),
            api_scope("audit.readonly"),
        ],
    },
    {
        "name": "Organization Admin Token Client",
        "user_access_scope": "custom",
        "user_access_rules": {
            "organization_roles": ["admin", "manager"],
            "position_levels": ["director", "vice_president", "c_level"],
        },
        "description": "Personal access tokens for organization administrators",
        "allowed_scopes": [
            "profile", "email",
            api_scope("organization"), api_scope("organization.admin"), api_scope("organization.members"),
            api_scope("userinfo.profile"), api_scope("analytics.readonly"), api_scope("reports"),
            api_scope("audit.readonly"),
        ],
    },
    {
        "name": "Limited Scope Token Client",
        "user_access_scope": "all_users",
        "description": "Personal access tokens with limited scope for basic API access",
        "allowed_scopes": [
            "profile", "email",
            api_scope("userinfo.profile"), api_scope("userinfo.email"), api_scope("organization.readonly"),
        ],
    },
]
