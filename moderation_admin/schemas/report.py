# moderation_admin/schemas/report.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from moderation_admin.models.enums import ReportStatus
from .post import PostSummary
from .user import UserSummary


class ReportWithRelations(BaseModel):
    id: str
    post_id: Optional[str] = None
    reporter_user_id: Optional[str] = None
    reason: str
    status: ReportStatus
    resolver_admin_id: Optional[str] = None
    created_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    post: Optional[PostSummary] = Field(None, description="Reported post (id, title) if it still exists")
    reporter: Optional[UserSummary] = Field(None, description="Reporting user (id, nickname) if known")

    model_config = ConfigDict(from_attributes=True)
