"""범위(전역/조직/프로젝트/채팅) 권한 및 역할 템플릿.

Scoped permission names. Global permissions apply system-wide; organization,
project and chat permissions are granted inside a team (organization) scope.
"""

GLOBAL_PERMISSIONS: list[str] = [
    # 시스템 관리 — System administration
    "manage_system", "view_system_logs", "manage_global_settings",
    # 사용자 관리 — User management
    "create_users", "manage_all_users", "delete_users",
    # 조직 관리 — Organization management
    "create_organizations", "manage_all_organizations", "view_all_organizations",
    # 전역 리포트 — Global reporting
    "view_global_reports", "export_data",
]

GLOBAL_ROLES: dict[str, list[str]] = {
    "super_admin": list(GLOBAL_PERMISSIONS),
    "system_moderator": ["view_system_logs", "view_all_organizations", "view_global_reports"],
}

ORGANIZATION_PERMISSIONS: list[str] = [
    "view_organization", "edit_organization", "manage_organization", "delete_organization",
    "view_organization_members", "invite_members", "remove_members", "manage_member_roles",
    "create_projects", "view_all_projects", "manage_all_projects",
    "create_chats", "manage_all_chats", "moderate_chats",
    "view_organization_reports", "export_organization_data",
]

# 조직마다 생성되는 역할 템플릿 (순서 = 배정 순서)
# Role templates instantiated per organization, in assignment order
ORGANIZATION_ROLE_TEMPLATES: dict[str, list[str]] = {
    "organization_admin": [
        "view_organization", "edit_organization", "manage_organization",
        "view_organization_members", "invite_members", "remove_members", "manage_member_roles",
        "create_projects", "view_all_projects", "manage_all_projects",
        "create_chats", "manage_all_chats", "moderate_chats",
        "view_organization_reports", "export_organization_data",
    ],
    "organization_manager": [
        "view_organization", "edit_organization",
        "view_organization_members", "invite_members",
        "create_projects", "view_all_projects", "manage_all_projects",
        "create_chats", "view_organization_reports",
    ],
    "organization_member": [
        "view_organization", "view_organization_members", "create_projects", "create_chats",
    ],
}

PROJECT_PERMISSIONS: list[str] = [
    "view_project", "edit_project", "manage_project", "delete_project",
    "view_project_members", "add_project_members", "remove_project_members", "manage_project_roles",
    "create_tasks", "edit_tasks", "delete_tasks", "assign_tasks",
    "upload_files", "download_files", "delete_files",
    "view_project_reports", "export_project_data",
]

CONVERSATION_PERMISSIONS: list[str] = [
    "view_conversation", "join_conversation", "leave_conversation",
    "send_message", "edit_own_message", "delete_own_message",
    "moderate_chat", "delete_any_message", "mute_users", "ban_users",
    "manage_chat", "add_participants", "remove_participants", "change_chat_settings", "delete_chat",
    "share_files", "share_media",
]
