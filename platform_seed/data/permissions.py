"""핵심 권한 카탈로그 및 기본 역할 정의.

Core ``resource:action`` permission catalog and the default global roles.
"""

# 핵심 권한 — Core permissions (name → description)
CORE_PERMISSIONS: dict[str, str] = {
    # 사용자 관리 — User management
    "user:read": "View and list users",
    "user:write": "Create and update users",
    "user:delete": "Delete users",
    "user:impersonate": "Impersonate users for troubleshooting",
    # 조직 관리 — Organization management
    "org:read": "View organization information",
    "org:write": "Create and update organizations",
    "org:delete": "Delete organizations",
    "org:admin": "Full administrative access to organization",
    "org_member:read": "View organization memberships",
    "org_member:write": "Create and update organization memberships",
    "org_member:delete": "Remove organization memberships",
    "org_member:admin": "Full administrative access to organization memberships",
    "org_unit:read": "View organization units",
    "org_unit:write": "Create and update organization units",
    "org_unit:delete": "Delete organization units",
    "org_unit:admin": "Full administrative access to organization units",
    "org_position:read": "View organization positions",
    "org_position:write": "Create and update organization positions",
    "org_position:delete": "Delete organization positions",
    "org_position:admin": "Full administrative access to organization positions",
    # OAuth 클라이언트 및 토큰 — OAuth applications and tokens
    "oauth_app:read": "View OAuth applications",
    "oauth_app:write": "Create and update OAuth applications",
    "oauth_app:delete": "Delete OAuth applications",
    "oauth_app:admin": "Full administrative access to OAuth applications",
    "oauth_token:read": "View OAuth tokens and analytics",
    "oauth_token:write": "Manage OAuth tokens",
    "oauth_token:delete": "Revoke OAuth tokens",
    # 감사 로그 — Audit log
    "audit_log:read": "View audit logs",
    "audit_log:write": "Create audit log entries",
    "audit_log:delete": "Delete audit log entries",
    "audit_log:admin": "Full administrative access to audit logs including export and purge",
    # 역할 및 권한 관리 — Role and permission management
    "role:read": "View roles and their permissions",
    "role:write": "Create and update roles",
    "role:delete": "Delete roles",
    "role:admin": "Full administrative access to roles",
    "permission:read": "View permissions",
    "permission:write": "Create and update permissions",
    "permission:delete": "Delete permissions",
    "permission:admin": "Full administrative access to permissions",
    # 시스템 관리 — System administration
    "admin:org": "Organization administration",
    "admin:enterprise": "Enterprise administration",
    "site_admin": "Site administration access",
    "system:read": "View system settings and logs",
    "system:write": "Modify system settings",
    "system:admin": "Full system administrative access",
    # 프로필 및 보안 — Profile and security
    "profile:read": "View own profile information",
    "profile:write": "Update own profile information",
    "security:read": "View security settings",
    "security:write": "Modify security settings including MFA and sessions",
    "security:admin": "Full administrative access to security features",
    # 지역 데이터 — Geography
    "geo_country:read": "View countries",
    "geo_country:write": "Create and update countries",
    "geo_country:delete": "Delete countries",
    "geo_country:admin": "Full administrative access to countries",
    "geo_province:read": "View provinces",
    "geo_province:write": "Create and update provinces",
    "geo_province:delete": "Delete provinces",
    "geo_province:admin": "Full administrative access to provinces",
    "geo_city:read": "View cities",
    "geo_city:write": "Create and update cities",
    "geo_city:delete": "Delete cities",
    "geo_city:admin": "Full administrative access to cities",
    "geo_district:read": "View districts",
    "geo_district:write": "Create and update districts",
    "geo_district:delete": "Delete districts",
    "geo_district:admin": "Full administrative access to districts",
    "geo_village:read": "View villages",
    "geo_village:write": "Create and update villages",
    "geo_village:delete": "Delete villages",
    "geo_village:admin": "Full administrative access to villages",
    # 채팅 (전역) — Chat, global access
    "chat:read": "View chat conversations and messages",
    "chat:write": "Send messages and participate in chat",
    "chat:files": "Upload and download files in chat",
    "chat:calls": "Participate in audio/video calls",
    "chat:manage": "Manage chat settings and conversations",
    "chat:moderate": "Moderate chat content and users",
    "chat:admin": "Full administrative access to chat system",
}

_GEO_RESOURCES: tuple[str, ...] = (
    "geo_country", "geo_province", "geo_city", "geo_district", "geo_village",
)
_GEO_READ: list[str] = [f"{resource}:read" for resource in _GEO_RESOURCES]
_GEO_ALL: list[str] = [
    f"{resource}:{action}"
    for resource in _GEO_RESOURCES
    for action in ("read", "write", "delete", "admin")
]
_ORG_READ: list[str] = ["org:read", "org_member:read", "org_unit:read", "org_position:read"]
_SELF_SERVICE: list[str] = ["profile:read", "profile:write", "security:read", "security:write"]
_CHAT_PARTICIPANT: list[str] = ["chat:read", "chat:write", "chat:files", "chat:calls"]

# 모든 사용자에게 직접 부여되는 채팅 권한 — Chat permissions granted to every user
BASIC_CHAT_PERMISSIONS: list[str] = list(_CHAT_PARTICIPANT)

# 기본 전역 역할 — Default global roles (name → description, permissions)
CORE_ROLES: dict[str, dict] = {
    "super-admin": {
        "description": "Full system access",
        "permissions": list(CORE_PERMISSIONS),
    },
    "organization-admin": {
        "description": "Organization administrator",
        "permissions": [
            "org:read", "org:write", "org:admin",
            "org_member:read", "org_member:write", "org_member:delete", "org_member:admin",
            "org_unit:read", "org_unit:write", "org_unit:delete", "org_unit:admin",
            "org_position:read", "org_position:write", "org_position:delete", "org_position:admin",
            "oauth_app:read", "oauth_app:write", "oauth_app:delete", "oauth_app:admin",
            "oauth_token:read",
            "audit_log:read", "audit_log:admin",
            "user:read",
            "role:read", "role:write", "role:delete",
            "permission:read",
            *_SELF_SERVICE,
            "admin:org",
            *_GEO_ALL,
            *_CHAT_PARTICIPANT, "chat:manage", "chat:moderate", "chat:admin",
        ],
    },
    "manager": {
        "description": "Department/unit manager",
        "permissions": [
            "org:read",
            "org_member:read", "org_member:write",
            "org_unit:read", "org_unit:write",
            "org_position:read", "org_position:write",
            "user:read",
            "audit_log:read",
            *_SELF_SERVICE,
            *_GEO_READ,
            *_CHAT_PARTICIPANT, "chat:manage",
        ],
    },
    "employee": {
        "description": "Regular employee",
        "permissions": [*_ORG_READ, "user:read", *_SELF_SERVICE, *_GEO_READ, *_CHAT_PARTICIPANT],
    },
    "board-member": {
        "description": "Board member",
        "permissions": [
            *_ORG_READ, "user:read", "oauth_token:read", "audit_log:read",
            *_SELF_SERVICE,
            *_CHAT_PARTICIPANT, "chat:manage",
        ],
    },
    "consultant": {
        "description": "External consultant",
        "permissions": [*_ORG_READ, *_SELF_SERVICE, *_CHAT_PARTICIPANT],
    },
    "auditor": {
        "description": "System auditor with read-only access to activity logs",
        "permissions": [
            *_ORG_READ, "user:read",
            "audit_log:read", "audit_log:admin",
            "oauth_token:read", "system:read",
            *_SELF_SERVICE,
            *_CHAT_PARTICIPANT, "chat:manage",
        ],
    },
    "security-admin": {
        "description": "Security administrator with full access to security features",
        "permissions": [
            *_ORG_READ, "user:read", "user:impersonate",
            "audit_log:read", "audit_log:delete", "audit_log:admin",
            "oauth_token:read", "oauth_token:write", "oauth_token:delete",
            "system:read", "system:admin",
            *_SELF_SERVICE, "security:admin",
            *_CHAT_PARTICIPANT, "chat:manage", "chat:moderate", "chat:admin",
        ],
    },
}

# 감사 로그 권한 요약 — Audit log permission summary printed after seeding
AUDIT_LOG_SUMMARY: dict[str, str] = {
    "audit_log:read": "Can view audit logs (scoped to user permissions)",
    "audit_log:write": "Can create audit log entries",
    "audit_log:delete": "Can delete audit log entries",
    "audit_log:admin": "Full administrative access to audit logs including export and purge",
}

AUDIT_LOG_HIERARCHY: list[str] = [
    "Employees: Basic audit log read access (own activities)",
    "Managers/Board Members: Organization-scoped audit log read access",
    "Organization Admins: Full audit log administration within organization",
    "Auditors: Read-only access to all audit logs with export capabilities",
    "Security Admins: Full audit log administration including deletion and purging",
    "Super Admins: Complete access to all audit log features",
]
