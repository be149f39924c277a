# moderation_admin/schemas/__init__.py

from .user import User, UserSummary
from .post import Post, PostSummary, PostWithRelations, Tag
from .report import ReportWithRelations
from .admin import (
    PageParams,
    UserListParams,
    PostListParams,
    ReportListParams,
    ReportStatusUpdate,
    PostStatusUpdate,
    UpdateResult,
    PageMeta,
    UserPage,
    PostPage,
    ReportPage,
)

__all__ = [
    "User",
    "UserSummary",
    "Post",
    "PostSummary",
    "PostWithRelations",
    "Tag",
    "ReportWithRelations",
    "PageParams",
    "UserListParams",
    "PostListParams",
    "ReportListParams",
    "ReportStatusUpdate",
    "PostStatusUpdate",
    "UpdateResult",
    "PageMeta",
    "UserPage",
    "PostPage",
    "ReportPage",
]
