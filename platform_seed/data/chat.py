"""채팅 세부 권한 및 채팅/대화방 역할 정의.

Fine-grained ``chat.<area>.<action>`` permissions, the chat system roles and
the per-conversation role templates.
"""

CHAT_PERMISSIONS: dict[str, str] = {
    # 메시지 — Messages
    "chat.messages.send": "Send messages in conversations",
    "chat.messages.edit": "Edit own messages",
    "chat.messages.delete": "Delete own messages",
    "chat.messages.moderate": "Moderate messages (admin)",
    "chat.messages.view_deleted": "View deleted messages",
    # 대화방 — Conversations
    "chat.conversations.create": "Create new conversations",
    "chat.conversations.join": "Join conversations",
    "chat.conversations.leave": "Leave conversations",
    "chat.conversations.invite": "Invite users to conversations",
    "chat.conversations.moderate": "Moderate conversations",
    "chat.conversations.delete": "Delete conversations",
    # 파일 공유 — File sharing
    "chat.files.upload": "Upload files to conversations",
    "chat.files.download": "Download shared files",
    "chat.files.moderate": "Moderate file uploads",
    "chat.files.delete": "Delete uploaded files",
    # 음성/영상 통화 — Calls
    "chat.calls.initiate": "Initiate video/audio calls",
    "chat.calls.join": "Join video/audio calls",
    "chat.calls.record": "Record video/audio calls",
    "chat.calls.moderate": "Moderate calls (end, kick participants)",
    # 암호화 — Encryption
    "chat.encryption.manage": "Manage encryption settings",
    "chat.encryption.view_keys": "View encryption key information",
    "chat.encryption.rotate_keys": "Rotate encryption keys",
    # 투표 — Polls
    "chat.polls.create": "Create polls and surveys",
    "chat.polls.vote": "Vote in polls",
    "chat.polls.moderate": "Moderate polls and surveys",
    "chat.polls.view_results": "View poll results",
    # 백업 — Backup and export
    "chat.backup.create": "Create chat backups",
    "chat.backup.download": "Download chat backups",
    "chat.backup.restore": "Restore from backups",
    # 신고 — Abuse reports
    "chat.reports.create": "Submit abuse reports",
    "chat.reports.review": "Review abuse reports",
    "chat.reports.moderate": "Take action on reports",
    # 제재 및 속도 제한 — Penalties and rate limits
    "chat.penalties.view": "View user penalties",
    "chat.penalties.apply": "Apply penalties to users",
    "chat.penalties.remove": "Remove penalties from users",
    "chat.rate_limits.manage": "Manage rate limit configurations",
    # 분석 및 모니터링 — Analytics and monitoring
    "chat.analytics.view": "View chat analytics",
    "chat.quality.monitor": "Monitor call quality metrics",
    "chat.events.view": "View system events and logs",
    # 기기 — Devices
    "chat.devices.manage": "Manage user devices",
    "chat.devices.revoke": "Revoke device access",
    # 고급 — Advanced
    "chat.admin.all": "Full chat administration access",
    "chat.system.config": "Configure chat system settings",
    "chat.webhooks.manage": "Manage webhook configurations",
}

_CHAT_USER: list[str] = [
    "chat.messages.send", "chat.messages.edit", "chat.messages.delete",
    "chat.conversations.create", "chat.conversations.join",
    "chat.conversations.leave", "chat.conversations.invite",
    "chat.files.upload", "chat.files.download",
    "chat.calls.initiate", "chat.calls.join",
    "chat.polls.create", "chat.polls.vote", "chat.polls.view_results",
    "chat.backup.create", "chat.backup.download",
    "chat.reports.create",
    "chat.devices.manage",
]

CHAT_ROLES: dict[str, dict] = {
    "chat_user": {
        "description": "Standard chat user with basic messaging capabilities",
        "permissions": _CHAT_USER,
    },
    "chat_moderator": {
        "description": "Chat moderator with content moderation capabilities",
        "permissions": [
            *_CHAT_USER,
            "chat.messages.moderate", "chat.messages.view_deleted",
            "chat.conversations.moderate",
            "chat.files.moderate", "chat.files.delete",
            "chat.calls.moderate",
            "chat.polls.moderate",
            "chat.reports.review", "chat.reports.moderate",
            "chat.penalties.view", "chat.penalties.apply",
            "chat.devices.revoke",
        ],
    },
    "chat_admin": {
        "description": "Chat administrator with full system access",
        "permissions": [
            "chat.admin.all", "chat.system.config", "chat.rate_limits.manage",
            "chat.penalties.view", "chat.penalties.apply", "chat.penalties.remove",
            "chat.analytics.view", "chat.quality.monitor", "chat.events.view",
            "chat.encryption.manage", "chat.encryption.view_keys", "chat.encryption.rotate_keys",
            "chat.backup.restore", "chat.webhooks.manage", "chat.calls.record",
        ],
    },
    "chat_guest": {
        "description": "Limited guest user with restricted access",
        "permissions": [
            "chat.messages.send", "chat.conversations.join", "chat.files.download",
            "chat.calls.join", "chat.polls.vote",
        ],
    },
    "chat_bot": {
        "description": "Bot user for automated interactions",
        "permissions": [
            "chat.messages.send", "chat.conversations.join", "chat.files.upload",
            "chat.polls.create", "chat.analytics.view",
        ],
    },
}

# 대화방 단위 역할 — Assigned per conversation by the chat service
CONVERSATION_ROLES: dict[str, dict] = {
    "conversation_owner": {
        "description": "Owner of a specific conversation",
        "permissions": [
            "chat.conversations.moderate", "chat.conversations.delete",
            "chat.messages.moderate", "chat.files.moderate",
            "chat.calls.moderate", "chat.encryption.manage",
        ],
    },
    "conversation_admin": {
        "description": "Administrator of a specific conversation",
        "permissions": [
            "chat.conversations.moderate", "chat.messages.moderate",
            "chat.files.moderate", "chat.calls.moderate",
        ],
    },
    "conversation_member": {
        "description": "Regular member of a conversation",
        "permissions": [
            "chat.messages.send", "chat.messages.edit", "chat.messages.delete",
            "chat.files.upload", "chat.files.download",
            "chat.calls.initiate", "chat.calls.join",
            "chat.polls.create", "chat.polls.vote",
        ],
    },
    "conversation_readonly": {
        "description": "Read-only access to a conversation",
        "permissions": ["chat.files.download", "chat.calls.join", "chat.polls.vote"],
    },
}
