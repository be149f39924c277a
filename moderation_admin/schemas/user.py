# moderation_admin/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from moderation_admin.models.enums import UserRole, UserTier


class User(BaseModel):
    id: str
    nickname: str
    email: str
    role: UserRole
    tier: UserTier
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Reporter projection embedded in report listings"""
    id: str
    nickname: str

    model_config = ConfigDict(from_attributes=True)
