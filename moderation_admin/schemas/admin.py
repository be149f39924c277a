# moderation_admin/schemas/admin.py
"""
Admin listing and moderation schemas.

The *ListParams models are the immutable configuration objects handed to the
query builders; the *Page models are the HTTP response envelopes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moderation_admin.config import settings
from moderation_admin.models.enums import PostStatus, ReportStatus, UserRole, UserTier
from .post import PostWithRelations
from .report import ReportWithRelations
from .user import User


# ======================
# LIST PARAMETERS
# ======================

class PageParams(BaseModel):
    """1-indexed page and page size"""
    page: int = Field(1, ge=1, description="Page number (starts at 1)")
    limit: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, description="Rows per page")

    model_config = ConfigDict(frozen=True)


class UserListParams(PageParams):
    search: Optional[str] = Field(None, description="Nickname or email substring")
    role: Optional[UserRole] = None
    tier: Optional[UserTier] = None

    @field_validator("search")
    @classmethod
    def empty_search_is_none(cls, v):
        if v == "":
            return None
        return v


class PostListParams(PageParams):
    pass


class ReportListParams(PageParams):
    status: Optional[ReportStatus] = None


# ======================
# STATUS UPDATES
# ======================

class ReportStatusUpdate(BaseModel):
    status: ReportStatus


class PostStatusUpdate(BaseModel):
    status: PostStatus


class UpdateResult(BaseModel):
    success: bool


# ======================
# PAGED RESPONSES
# ======================

class PageMeta(BaseModel):
    count: int = Field(..., description="Total rows matching the filters")
    page: int
    limit: int
    total_pages: int


class UserPage(PageMeta):
    items: List[User]


class PostPage(PageMeta):
    items: List[PostWithRelations]


class ReportPage(PageMeta):
    items: List[ReportWithRelations]
