# moderation_admin/schemas/post.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from moderation_admin.models.enums import PostStatus
from .user import User


class Tag(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class Post(BaseModel):
    id: str
    user_id: str
    title: str
    content: Optional[str] = None
    status: PostStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostWithRelations(Post):
    """Post with its owning user and tags"""
    owner: User = Field(..., description="Owning user (always resolved)")
    tags: List[Tag] = Field(default_factory=list, description="Associated tags")


class PostSummary(BaseModel):
    """Post projection embedded in report listings"""
    id: str
    title: str

    model_config = ConfigDict(from_attributes=True)
