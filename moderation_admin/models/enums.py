from enum import Enum


class UserRole(str, Enum):
    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"


class UserTier(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    VIP = "vip"


class PostStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_REVISION = "needs_revision"


class ReportStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


# Statuses that close a report and stamp resolved_at
TERMINAL_REPORT_STATUSES = frozenset({ReportStatus.RESOLVED, ReportStatus.DISMISSED})
