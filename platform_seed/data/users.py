"""기본 사용자 데이터.

System, service, demo and organization users created before the
organization and OAuth seeders run. Passwords for everyone except the
system user come from ``settings.SEED_DEFAULT_PASSWORD``.
"""

SYSTEM_USER: dict = {
    "name": "System User",
    "username": "system",
    "email": "system@system.local",
}

SERVICE_USERS: list[dict] = [
    {"name": "OAuth Service", "username": "oauth", "email": "oauth@system.local"},
    {"name": "Audit Service", "username": "audit", "email": "audit@system.local"},
    {"name": "Backup Service", "username": "backup", "email": "backup@system.local"},
    {"name": "Monitoring Service", "username": "monitor", "email": "monitor@system.local"},
    {"name": "Notification Service", "username": "notifications", "email": "notifications@system.local"},
]

TEST_USER_EMAIL = "test@example.com"

DEMO_USERS: list[dict] = [
    {"key": "test", "name": "Test User", "username": "testuser", "email": TEST_USER_EMAIL},
    {"key": "admin", "name": "Admin User", "username": "admin", "email": "admin@example.com"},
    {"key": "manager", "name": "Manager User", "username": "manager", "email": "manager@example.com"},
    {"key": "regular", "name": "Regular User", "username": "user", "email": "user@example.com"},
]

# 조직 멤버십 대상 사용자 — created_by는 테스트 사용자 (Audited as created by the test user)
ORGANIZATION_USERS: list[dict] = [
    {"name": "John Smith", "username": "john.smith", "email": "john.smith@techcorp.com"},
    {"name": "Jane Doe", "username": "jane.doe", "email": "jane.doe@techcorp.com"},
    {"name": "Mike Johnson", "username": "mike.johnson", "email": "mike.johnson@techcorpsoftware.com"},
    {"name": "Sarah Wilson", "username": "sarah.wilson", "email": "sarah.wilson@techcorpsoftware.com"},
    {"name": "David Brown", "username": "david.brown", "email": "david.brown@techcorpdata.com"},
    {"name": "Emily Davis", "username": "emily.davis", "email": "emily.davis@techcorpdata.com"},
    {"name": "Robert Taylor", "username": "robert.taylor", "email": "robert.taylor@techcorpsoftware.com"},
    {"name": "Lisa Anderson", "username": "lisa.anderson", "email": "lisa.anderson@techcorpsoftware.com"},
    {"name": "Michael Chen", "username": "michael.chen", "email": "michael.chen@techcorpsoftware.com"},
    {"name": "Jennifer Martinez", "username": "jennifer.martinez", "email": "jennifer.martinez@techcorpsoftware.com"},
    {"name": "Alex Thompson", "username": "alex.thompson", "email": "alex.thompson@techcorpsoftware.com"},
    {"name": "Maria Rodriguez", "username": "maria.rodriguez", "email": "maria.rodriguez@techcorpsoftware.com"},
]
