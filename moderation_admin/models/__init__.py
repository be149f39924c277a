# moderation_admin/models/__init__.py
# Import models in dependency order
from .user import User
from .post import Post, Tag, post_tags
from .report import Report
from .enums import PostStatus, ReportStatus, UserRole, UserTier

__all__ = [
    "User",
    "Post",
    "Tag",
    "post_tags",
    "Report",
    "PostStatus",
    "ReportStatus",
    "UserRole",
    "UserTier",
]
